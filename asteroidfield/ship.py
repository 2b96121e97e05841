"""Player ship control: movement, aiming, weapons and firing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

import pygame
from pygame.math import Vector2

from . import constants
from .actor import Clock, Controller
from .messages import BulletData, Message, MessageBus, MessageType
from .weapons import WeaponType, get_weapon_stats

_BOUNDS_MARGIN = 20.0
_BOUNCE_FACTOR = 0.3
_SHOTGUN_RECOIL = 6.0
_ROCKET_RECOIL = 5.0


@dataclass
class InputState:
    """Player input for one frame; aim is the pointer position, if any."""

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    shoot: bool = False
    aim: Vector2 | None = None


def _poll_pygame_input() -> InputState:
    keys = pygame.key.get_pressed()
    aim = Vector2(pygame.mouse.get_pos()) if pygame.display.get_surface() is not None else None
    return InputState(
        left=bool(keys[pygame.K_a] or keys[pygame.K_LEFT]),
        right=bool(keys[pygame.K_d] or keys[pygame.K_RIGHT]),
        up=bool(keys[pygame.K_w] or keys[pygame.K_UP]),
        down=bool(keys[pygame.K_s] or keys[pygame.K_DOWN]),
        shoot=bool(pygame.mouse.get_pressed()[0] or keys[pygame.K_SPACE]),
        aim=aim,
    )


def _aim_angle(origin: Vector2, target: Vector2) -> float:
    dx = target.x - origin.x
    dy = target.y - origin.y
    return math.atan2(dy, dx) * 180.0 / constants.PI + 90.0


class ShipController(Controller):
    """Steers the ship from player input and fires its current weapon."""

    def __init__(
        self,
        bus: MessageBus,
        input_source: Callable[[], InputState] | None = None,
        clock: Clock | None = None,
    ) -> None:
        super().__init__()
        self.bus = bus
        self._input_source = input_source if input_source is not None else _poll_pygame_input
        self.acceleration = constants.SHIP_ACCELERATION
        self.friction = constants.SHIP_FRICTION
        self.max_speed = constants.SHIP_MAX_SPEED
        self.can_shoot = True
        self.shoot_clock = clock if clock is not None else Clock()
        self.current_weapon = WeaponType.DEFAULT
        self.weapon_duration = 0.0
        self.aim: Vector2 | None = None
        bus.subscribe(MessageType.WEAPON_PICKED_UP, lambda message: self.set_weapon(message.payload))

    @property
    def has_special_weapon(self) -> bool:
        return self.current_weapon is not WeaponType.DEFAULT and self.weapon_duration > 0.0

    @property
    def weapon_time_left(self) -> float:
        return self.weapon_duration

    @property
    def weapon_total_time(self) -> float:
        return get_weapon_stats(self.current_weapon).duration

    def update(self, delta_time: float) -> None:
        if self.actor is None:
            return
        state = self._input_source()
        self.aim = state.aim
        self._apply_input(state)
        self._rotate_towards_aim()
        self._move()
        self._constrain_to_bounds()
        self._update_weapon(delta_time)
        self._handle_shooting(state)

    def set_weapon(self, weapon_type: WeaponType) -> None:
        self.current_weapon = weapon_type
        self.weapon_duration = get_weapon_stats(weapon_type).duration

    def fire_weapon(self) -> None:
        """Fire the current weapon towards the aim point if its fire rate allows."""
        actor = self.actor
        if actor is None:
            return
        stats = get_weapon_stats(self.current_weapon)
        if self.shoot_clock.elapsed() < stats.fire_rate:
            return
        self.shoot_clock.restart()
        self.can_shoot = False

        base_angle = _aim_angle(actor.position, self.aim) if self.aim is not None else actor.rotation

        recoil = {WeaponType.SHOTGUN: _SHOTGUN_RECOIL, WeaponType.ROCKET_LAUNCHER: _ROCKET_RECOIL}.get(
            self.current_weapon
        )
        if recoil is not None:
            radians = (base_angle - 90.0 + 180.0) * constants.PI / 180.0
            actor.velocity += Vector2(math.cos(radians), math.sin(radians)) * recoil

        for i in range(stats.bullet_count):
            angle = base_angle
            if stats.bullet_count > 1:
                step = stats.spread / (stats.bullet_count - 1)
                angle += -stats.spread / 2.0 + i * step
            data = BulletData(
                position=Vector2(actor.position),
                angle=angle,
                speed=stats.bullet_speed,
                weapon_type=self.current_weapon,
            )
            self.bus.publish(Message(MessageType.BULLET_FIRED, self, data))

    def _apply_input(self, state: InputState) -> None:
        accel = Vector2(0.0, 0.0)
        if state.left:
            accel.x -= self.acceleration
        if state.right:
            accel.x += self.acceleration
        if state.up:
            accel.y -= self.acceleration
        if state.down:
            accel.y += self.acceleration
        self.actor.velocity += accel

    def _rotate_towards_aim(self) -> None:
        if self.aim is not None:
            self.actor.rotation = _aim_angle(self.actor.position, self.aim)

    def _move(self) -> None:
        actor = self.actor
        actor.velocity *= self.friction
        limit = self.max_speed
        if self.has_special_weapon:
            limit *= get_weapon_stats(self.current_weapon).speed_multiplier
        speed = actor.velocity.length()
        if speed > limit:
            actor.velocity = actor.velocity / speed * limit
        actor.position += actor.velocity

    def _handle_shooting(self, state: InputState) -> None:
        if state.shoot:
            if self.can_shoot:
                self.fire_weapon()
        else:
            self.can_shoot = True

    def _update_weapon(self, delta_time: float) -> None:
        if not self.has_special_weapon:
            return
        self.weapon_duration -= delta_time
        if self.weapon_duration <= 0.0:
            self.current_weapon = WeaponType.DEFAULT
            self.bus.publish(Message(MessageType.WEAPON_EXPIRED, self))

    def _constrain_to_bounds(self) -> None:
        position, velocity = self.actor.position, self.actor.velocity
        if position.x < _BOUNDS_MARGIN:
            position.x = _BOUNDS_MARGIN
            velocity.x = abs(velocity.x) * _BOUNCE_FACTOR
        if position.x > constants.WINDOW_WIDTH - _BOUNDS_MARGIN:
            position.x = constants.WINDOW_WIDTH - _BOUNDS_MARGIN
            velocity.x = -abs(velocity.x) * _BOUNCE_FACTOR
        if position.y < _BOUNDS_MARGIN:
            position.y = _BOUNDS_MARGIN
            velocity.y = abs(velocity.y) * _BOUNCE_FACTOR
        if position.y > constants.WINDOW_HEIGHT - _BOUNDS_MARGIN:
            position.y = constants.WINDOW_HEIGHT - _BOUNDS_MARGIN
            velocity.y = -abs(velocity.y) * _BOUNCE_FACTOR