"""Controllers that move asteroids, bullets and bobbing weapon pickups."""

from __future__ import annotations

import logging
import math
import random
from typing import Any

from . import constants
from .actor import Clock, Controller
from .weapons import WeaponType

_log = logging.getLogger(__name__)


class AsteroidController(Controller):
    """Drifts an asteroid, spins it, and respawns it at the top once it leaves the bottom."""

    def __init__(self, rng: Any = None) -> None:
        super().__init__()
        self._rng = rng if rng is not None else random
        self.angular_velocity = (self._rng.randrange(200) - 100.0) / 20.0

    def update(self, delta_time: float) -> None:
        actor = self.actor
        if actor is None:
            return
        actor.position += actor.velocity
        actor.rotation += self.angular_velocity
        self._wrap_position()

    def _wrap_position(self) -> None:
        actor = self.actor
        if actor.position.y - actor.radius > constants.WINDOW_HEIGHT:
            actor.position.y = -actor.radius
            span = constants.WINDOW_WIDTH - constants.ASTEROID_SPAWN_MARGIN
            actor.position.x = float(self._rng.randrange(span) + constants.ASTEROID_SPAWN_MIN_X)


class BulletController(Controller):
    """Moves a bullet and deactivates it once it is well outside the window."""

    def __init__(self, weapon_type: WeaponType = WeaponType.DEFAULT) -> None:
        super().__init__()
        self.weapon_type = weapon_type

    def update(self, delta_time: float) -> None:
        actor = self.actor
        if actor is None:
            return
        actor.position += actor.velocity
        self._check_bounds()

    def _check_bounds(self) -> None:
        actor = self.actor
        offset = constants.BOUNDARY_OFFSET
        x, y = actor.position.x, actor.position.y
        if (
            x < -offset
            or x > constants.WINDOW_WIDTH + offset
            or y < -offset
            or y > constants.WINDOW_HEIGHT + offset
        ):
            actor.active = False


class WeaponPickupController(Controller):
    """Bobs a pickup up and down and removes it after its lifetime runs out."""

    def __init__(self, bob_clock: Clock | None = None, lifetime_clock: Clock | None = None) -> None:
        super().__init__()
        self.bob_clock = bob_clock if bob_clock is not None else Clock()
        self.lifetime_clock = lifetime_clock if lifetime_clock is not None else Clock()
        self.original_y: float | None = None

    def update(self, delta_time: float) -> None:
        if self.actor is None:
            return
        self._update_bobbing()
        self._check_lifetime()

    def _update_bobbing(self) -> None:
        actor = self.actor
        if self.original_y is None:
            self.original_y = actor.position.y
        offset = math.sin(self.bob_clock.elapsed() * constants.BOB_SPEED) * constants.BOB_AMPLITUDE
        actor.position.y = self.original_y + offset

    def _check_lifetime(self) -> None:
        lifetime = self.lifetime_clock.elapsed()
        if lifetime > constants.MAX_LIFETIME:
            _log.info("Weapon pickup expired after %.1f seconds", lifetime)
            self.actor.active = False