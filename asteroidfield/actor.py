"""Actors, their sprites and controllers, and the weapon pickup actor."""

from __future__ import annotations

import math
import os
import time
from abc import ABC, abstractmethod
from typing import Any, Callable

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402
from pygame.math import Vector2  # noqa: E402

from . import constants  # noqa: E402
from .weapons import RarityData, WeaponRarity, WeaponType, rarity_data  # noqa: E402

_WHITE = (255, 255, 255)


class Clock:
    """Measures seconds elapsed since creation or the last restart."""

    def __init__(self, time_source: Callable[[], float] = time.perf_counter) -> None:
        self._time_source = time_source
        self._start = time_source()

    def elapsed(self) -> float:
        return self._time_source() - self._start

    def restart(self) -> float:
        """Reset the clock and return the time elapsed before the reset."""
        now = self._time_source()
        elapsed = now - self._start
        self._start = now
        return elapsed


class Controller(ABC):
    """Behaviour attached to an actor or a scene and updated every frame."""

    def __init__(self) -> None:
        self.actor: Actor | None = None
        self.scene: Any = None

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the controller by one frame."""

    def attach_to_actor(self, actor: Actor | None) -> None:
        self.actor = actor

    def attach_to_scene(self, scene: Any) -> None:
        self.scene = scene


class Sprite:
    """A texture drawn with an origin, scale, tint colour and rotation."""

    def __init__(self, texture: pygame.Surface) -> None:
        self.texture = texture
        self.origin = Vector2(0.0, 0.0)
        self.scale = Vector2(1.0, 1.0)
        self.color: tuple[int, int, int] = _WHITE

    def draw(self, surface: pygame.Surface, position, rotation: float = 0.0) -> pygame.Rect:
        """Draw so that the origin lands on position, rotated clockwise in degrees."""
        image = self.texture
        width, height = image.get_size()
        sx, sy = abs(self.scale.x), abs(self.scale.y)
        size = (max(1, round(width * sx)), max(1, round(height * sy)))
        if size != (width, height):
            image = pygame.transform.scale(image, size)
        if tuple(self.color) != _WHITE:
            image = image.copy()
            image.fill((*self.color, 255), special_flags=pygame.BLEND_RGBA_MULT)

        origin = Vector2(self.origin.x * sx, self.origin.y * sy)
        offset = Vector2(size[0] / 2.0, size[1] / 2.0) - origin
        if rotation:
            image = pygame.transform.rotate(image, -rotation)
        center = Vector2(position) + offset.rotate(rotation)
        rect = image.get_rect(center=(round(center.x), round(center.y)))
        return surface.blit(image, rect)


class Actor:
    """A game object with position, velocity, rotation, radius and controllers."""

    def __init__(self, position=(0.0, 0.0), velocity=(0.0, 0.0), radius: float = 0.0) -> None:
        self.position = Vector2(position)
        self.velocity = Vector2(velocity)
        self.rotation = 0.0
        self.radius = radius
        self.active = True
        self.weapon_type = WeaponType.DEFAULT
        self.controllers: list[Controller] = []
        self.sprite: Sprite | None = None

    def update(self, delta_time: float) -> None:
        for controller in self.controllers:
            controller.update(delta_time)

    def render(self, surface: pygame.Surface) -> None:
        if self.sprite is not None and self.active:
            self.sprite.draw(surface, self.position, self.rotation)

    def add_controller(self, controller: Controller | None) -> None:
        if controller is None:
            return
        self.controllers.append(controller)
        controller.attach_to_actor(self)

    def set_texture(self, texture: pygame.Surface) -> None:
        self.sprite = Sprite(texture)


class WeaponPickup(Actor):
    """A collectible weapon that glows in the colour of its rarity."""

    def __init__(self, weapon_type: WeaponType, clock: Clock | None = None) -> None:
        super().__init__(radius=constants.WEAPON_PICKUP_RADIUS)
        self.weapon_type = weapon_type
        self.rarity_data: RarityData = rarity_data(weapon_type)
        self.glow_clock = clock if clock is not None else Clock()

    @property
    def rarity(self) -> WeaponRarity:
        return self.rarity_data.rarity

    def glow_alpha(self) -> float:
        """Current glow opacity, pulsing between the minimum and maximum alpha."""
        pulse_speed = constants.GLOW_PULSE_SPEED * self.rarity_data.pulse_intensity
        pulse = (math.sin(self.glow_clock.elapsed() * pulse_speed) + 1.0) * 0.5
        return constants.GLOW_MIN_ALPHA + (constants.GLOW_MAX_ALPHA - constants.GLOW_MIN_ALPHA) * pulse

    def render(self, surface: pygame.Surface) -> None:
        alpha = self.glow_alpha()
        self._draw_glow(surface, constants.GLOW_OUTER_RADIUS, alpha * 0.3)
        self._draw_glow(surface, constants.GLOW_INNER_RADIUS, alpha * 0.6)
        super().render(surface)

    def _draw_glow(self, surface: pygame.Surface, radius: float, alpha: float) -> None:
        size = int(math.ceil(radius * 2))
        glow = pygame.Surface((size, size), pygame.SRCALPHA)
        color = (*self.rarity_data.glow_color, int(alpha * 255.0))
        pygame.draw.circle(glow, color, (size / 2.0, size / 2.0), radius)
        surface.blit(glow, (round(self.position.x - radius), round(self.position.y - radius)))