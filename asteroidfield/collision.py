"""Collision checks between bullets, asteroids, the ship and weapon pickups."""

from __future__ import annotations

import logging
import math

from pygame.math import Vector2

from . import constants
from .actor import Actor, Controller, WeaponPickup
from .audio import AudioManager
from .messages import ExplosionData, Message, MessageBus, MessageType
from .weapons import WeaponType, weapon_display_name

_log = logging.getLogger(__name__)


def check_collision(a: Actor, b: Actor) -> bool:
    """Whether two active actors' circles overlap."""
    if not a.active or not b.active:
        return False
    distance = math.hypot(a.position.x - b.position.x, a.position.y - b.position.y)
    return distance < a.radius + b.radius


class CollisionController(Controller):
    """Resolves collisions each frame and announces the results on the bus."""

    def __init__(
        self,
        bus: MessageBus,
        audio=None,
        ship: Actor | None = None,
        bullets: list[Actor] | None = None,
        asteroids: list[Actor] | None = None,
        weapon_pickups: list[WeaponPickup] | None = None,
    ) -> None:
        super().__init__()
        self.bus = bus
        self._audio = audio
        self.ship = ship
        self.bullets = bullets
        self.asteroids = asteroids
        self.weapon_pickups = weapon_pickups

    @property
    def audio(self):
        return self._audio if self._audio is not None else AudioManager.instance()

    def update(self, delta_time: float) -> None:
        self._bullet_asteroid_collisions()
        self._ship_asteroid_collisions()
        self._ship_pickup_collisions()

    def _bullet_asteroid_collisions(self) -> None:
        if self.bullets is None or self.asteroids is None:
            return
        asteroids = list(self.asteroids)
        for bullet in list(self.bullets):
            if bullet is None or not bullet.active:
                continue
            for asteroid in asteroids:
                if asteroid is None or not asteroid.active:
                    continue
                if check_collision(bullet, asteroid):
                    self._destroy(bullet, asteroid)
                    break

    def _destroy(self, bullet: Actor, asteroid: Actor) -> None:
        _log.debug("Bullet-asteroid collision at (%.1f, %.1f)", bullet.position.x, bullet.position.y)
        bullet.active = False
        if bullet.weapon_type is WeaponType.ROCKET_LAUNCHER:
            data = ExplosionData(
                position=Vector2(asteroid.position),
                radius=constants.EXPLOSION_RADIUS,
                weapon_type=WeaponType.ROCKET_LAUNCHER,
            )
            self.bus.publish(Message(MessageType.EXPLOSION_TRIGGERED, self, data))
            self.audio.play_sound(constants.EXPLOSION_SOUND_PATH)
        else:
            self.audio.play_sound(constants.DESTRUCTION_SOUND_PATH)
        asteroid.active = False
        self.bus.publish(Message(MessageType.ASTEROID_DESTROYED, self, constants.ASTEROID_SCORE_POINTS))

    def _ship_asteroid_collisions(self) -> None:
        if self.ship is None or self.asteroids is None:
            return
        for asteroid in list(self.asteroids):
            if not asteroid.active:
                continue
            if check_collision(self.ship, asteroid):
                self.audio.play_sound(constants.DEATH_SOUND_PATH)
                self.audio.stop_music()
                self.bus.publish(Message(MessageType.GAME_OVER, self))
                break

    def _ship_pickup_collisions(self) -> None:
        if self.ship is None or self.weapon_pickups is None:
            return
        for pickup in list(self.weapon_pickups):
            if not pickup.active:
                continue
            if check_collision(self.ship, pickup):
                pickup.active = False
                _log.info("Weapon picked up: %s", weapon_display_name(pickup.weapon_type))
                self.bus.publish(Message(MessageType.WEAPON_PICKED_UP, self, pickup.weapon_type))
                break