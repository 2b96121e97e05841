"""Rocket explosions: staged visual effect, particles and area damage to asteroids."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

import pygame
from pygame.math import Vector2

from . import constants
from .actor import Actor, Controller
from .messages import Message, MessageBus, MessageType

_log = logging.getLogger(__name__)

_FLASH_DURATION = 0.15
_EXPAND_DURATION = 0.8
_FADE_DURATION = 1.0
_PARTICLE_DRAG = 0.96
_PARTICLE_SHRINK = 0.98
_SHRINK_LIFE_RATIO = 0.3
_RING_THICKNESS = 4


class ExplosionStage(Enum):
    FLASH = auto()
    EXPAND = auto()
    FADE = auto()


@dataclass
class Particle:
    position: Vector2
    velocity: Vector2
    color: pygame.Color
    life: float
    max_life: float
    size: float


@dataclass
class ExplosionEffect:
    position: Vector2
    max_radius: float
    current_radius: float = 0.0
    stage: ExplosionStage = ExplosionStage.FLASH
    stage_timer: float = 0.0
    current_color: pygame.Color = field(default_factory=lambda: pygame.Color(255, 100, 0, 220))
    particles: list[Particle] = field(default_factory=list)
    total_duration: float = constants.EXPLOSION_TOTAL_DURATION
    damage_dealt: bool = False


def _draw_circle(surface: pygame.Surface, color, center: Vector2, radius: float, width: int = 0) -> None:
    """Draw a translucent circle; with a width, an outline just outside the radius."""
    if radius <= 0:
        return
    size = int(math.ceil((radius + width) * 2)) + 2
    layer = pygame.Surface((size, size), pygame.SRCALPHA)
    middle = size / 2.0
    if width:
        pygame.draw.circle(layer, color, (middle, middle), radius + width, width)
    else:
        pygame.draw.circle(layer, color, (middle, middle), radius)
    surface.blit(layer, (round(center.x - middle), round(center.y - middle)))


class ExplosionController(Controller):
    """Runs explosion effects triggered on the bus and destroys asteroids in range."""

    def __init__(
        self,
        bus: MessageBus,
        asteroids: list[Actor] | None = None,
        rng: Any = None,
    ) -> None:
        super().__init__()
        self.bus = bus
        self.asteroids = asteroids
        self._rng = rng if rng is not None else random.Random()
        self.effects: list[ExplosionEffect] = []
        bus.subscribe(MessageType.EXPLOSION_TRIGGERED, self._on_explosion)

    def _on_explosion(self, message: Message) -> None:
        data = message.payload
        self.trigger(data.position, data.radius)

    def trigger(self, position, radius: float) -> ExplosionEffect:
        """Start a new explosion at a position with the given damage radius."""
        center = Vector2(position)
        _log.info("Explosion triggered at (%.2f, %.2f), radius %.2f", center.x, center.y, radius)
        effect = ExplosionEffect(position=center, max_radius=radius)
        effect.particles.extend(self._create_particles(center))
        self.effects.append(effect)
        return effect

    def _create_particles(self, center: Vector2) -> list[Particle]:
        particles = []
        for i in range(constants.EXPLOSION_PARTICLE_COUNT):
            angle = self._rng.uniform(0.0, 2 * constants.PI)
            speed = self._rng.uniform(
                constants.EXPLOSION_PARTICLE_MIN_SPEED, constants.EXPLOSION_PARTICLE_MAX_SPEED
            )
            life = self._rng.uniform(
                constants.EXPLOSION_PARTICLE_MIN_LIFE, constants.EXPLOSION_PARTICLE_MAX_LIFE
            )
            size = self._rng.uniform(
                constants.EXPLOSION_PARTICLE_MIN_SIZE, constants.EXPLOSION_PARTICLE_MAX_SIZE
            )
            color = pygame.Color(max(100, 255 - i * 5), max(50, 150 - i * 3), 0, 255)
            particles.append(
                Particle(
                    position=Vector2(center),
                    velocity=Vector2(math.cos(angle) * speed, math.sin(angle) * speed),
                    color=color,
                    life=life,
                    max_life=life,
                    size=size,
                )
            )
        return particles

    def update(self, delta_time: float) -> None:
        for effect in list(self.effects):
            self._update_stage(effect, delta_time)
            self._update_particles(effect, delta_time)
            if (
                not effect.damage_dealt
                and effect.stage is ExplosionStage.EXPAND
                and effect.stage_timer > constants.EXPLOSION_STAGE_THRESHOLD
            ):
                self._deal_damage(effect)
                effect.damage_dealt = True
            effect.total_duration -= delta_time
        self.effects = [effect for effect in self.effects if effect.total_duration > 0]

    @staticmethod
    def _update_stage(effect: ExplosionEffect, delta_time: float) -> None:
        effect.stage_timer += delta_time
        if effect.stage is ExplosionStage.FLASH:
            if effect.stage_timer > _FLASH_DURATION:
                effect.stage = ExplosionStage.EXPAND
                effect.stage_timer = 0.0
        elif effect.stage is ExplosionStage.EXPAND:
            if effect.stage_timer > _EXPAND_DURATION:
                effect.stage = ExplosionStage.FADE
                effect.stage_timer = 0.0
            effect.current_radius = effect.max_radius * (effect.stage_timer / _EXPAND_DURATION)
            effect.current_color = pygame.Color(255, 100, 0, 180)
        else:
            progress = effect.stage_timer / _FADE_DURATION
            effect.current_color.a = max(0, int(180 * (1.0 - progress)))

    @staticmethod
    def _update_particles(effect: ExplosionEffect, delta_time: float) -> None:
        for particle in effect.particles:
            if particle.life <= 0:
                continue
            particle.position += particle.velocity * delta_time
            particle.life -= delta_time
            ratio = particle.life / particle.max_life
            particle.color.a = int(255 * max(0.0, ratio))
            particle.velocity *= _PARTICLE_DRAG
            if ratio < _SHRINK_LIFE_RATIO:
                particle.size *= _PARTICLE_SHRINK

    def _deal_damage(self, effect: ExplosionEffect) -> None:
        if not self.asteroids:
            return
        _log.debug("Checking %d asteroids for explosion damage", len(self.asteroids))
        destroyed = 0
        for asteroid in list(self.asteroids):
            if asteroid is None or not asteroid.active:
                continue
            distance = asteroid.position.distance_to(effect.position)
            if distance <= effect.max_radius + asteroid.radius:
                _log.debug("Destroying asteroid at distance %.2f", distance)
                asteroid.active = False
                destroyed += 1
                self.bus.publish(
                    Message(MessageType.ASTEROID_DESTROYED, self, constants.ASTEROID_SCORE_POINTS)
                )
        _log.info("Explosion destroyed %d asteroids", destroyed)

    def render(self, surface: pygame.Surface) -> None:
        for effect in self.effects:
            for particle in effect.particles:
                if particle.life > 0:
                    _draw_circle(surface, particle.color, particle.position, particle.size)

            if effect.stage in (ExplosionStage.EXPAND, ExplosionStage.FADE):
                _draw_circle(
                    surface, effect.current_color, effect.position, effect.current_radius, _RING_THICKNESS
                )
                glow = pygame.Color(effect.current_color)
                glow.a = glow.a // 3
                _draw_circle(surface, glow, effect.position, effect.current_radius * 0.7)

            if effect.stage is ExplosionStage.FLASH:
                _draw_circle(surface, (255, 255, 255, 200), effect.position, effect.max_radius * 0.8)