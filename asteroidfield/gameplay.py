"""The main play screen: ship, asteroids, bullets, weapon pickups and scoring."""

from __future__ import annotations

import logging
import math
import random
from pathlib import Path
from typing import Any, Callable

import pygame
from pygame.math import Vector2

from . import constants
from .actor import Actor, Clock, WeaponPickup
from .audio import AudioController, AudioManager
from .collision import CollisionController
from .explosion import ExplosionController
from .gameover import DEFAULT_FONT_PATH, _render_outlined
from .messages import Message, MessageBus, MessageType
from .motion import AsteroidController, BulletController, WeaponPickupController
from .scene import Scene
from .ship import InputState, ShipController
from .weapons import WeaponType, random_weapon_type, weapon_texture

_log = logging.getLogger(__name__)

DEFAULT_IMAGE_DIR = "assets/images"
BACKGROUND_FILE = "background.png"
ACTOR_TEXTURE_FILES = (
    "ship.png",
    "asteroid.png",
    "bullet.png",
    "rifle.png",
    "shotgun.png",
    "revolver.png",
    "flamethrower.png",
    "rocket_launcher.png",
)

_PLACEHOLDER_SIZE = 32
_PLACEHOLDER_COLOR = (128, 128, 128)
_WHITE = (255, 255, 255)
_YELLOW = (255, 255, 0)
_RED = (255, 0, 0)
_BLACK = (0, 0, 0)
_SCORE_FONT_SIZE = 48
_SCORE_OUTLINE = 3
_SCORE_POSITION = (32, 16)

_BULLET_COLORS = {
    WeaponType.RIFLE: (255, 255, 0),
    WeaponType.REVOLVER: (255, 0, 0),
    WeaponType.SHOTGUN: (0, 255, 0),
    WeaponType.ROCKET_LAUNCHER: (255, 0, 255),
}


def load_texture(path: str | Path) -> pygame.Surface | None:
    """Load an image, or return None when it is missing or unreadable."""
    if not Path(path).is_file():
        return None
    try:
        return pygame.image.load(str(path))
    except pygame.error:
        return None


def _placeholder_texture() -> pygame.Surface:
    surface = pygame.Surface((_PLACEHOLDER_SIZE, _PLACEHOLDER_SIZE), pygame.SRCALPHA)
    half = _PLACEHOLDER_SIZE / 2.0
    pygame.draw.circle(surface, _PLACEHOLDER_COLOR, (half, half), half)
    return surface


def _center_origin(actor: Actor) -> pygame.Surface:
    texture = actor.sprite.texture
    width, height = texture.get_size()
    actor.sprite.origin = Vector2(width / 2.0, height / 2.0)
    return texture


class GameplayScene(Scene):
    """Runs a round of play until the ship is hit, then hands over to the game-over screen."""

    def __init__(
        self,
        core: Any,
        window: Any = None,
        bus: MessageBus | None = None,
        rng: Any = None,
        audio: AudioManager | None = None,
        input_source: Callable[[], InputState] | None = None,
        font_path: str | None = DEFAULT_FONT_PATH,
        image_dir: str | Path = DEFAULT_IMAGE_DIR,
        clock_factory: Callable[[], Clock] = Clock,
    ) -> None:
        super().__init__()
        self.core = core
        self.window = window
        self.bus = bus if bus is not None else MessageBus()
        self.rng = rng if rng is not None else random.Random()
        self._audio = audio
        self._input_source = input_source
        self.font_path = font_path
        self.image_dir = Path(image_dir)
        self._clock_factory = clock_factory

        self.ship: Actor | None = None
        self.bullets: list[Actor] = []
        self.asteroids: list[Actor] = []
        self.weapon_pickups: list[WeaponPickup] = []
        self.textures: dict[str, pygame.Surface] = {}
        self.background: pygame.Surface | None = None
        self.font: pygame.font.Font | None = None
        self.explosion_controller: ExplosionController | None = None

        self.weapon_spawn_clock = clock_factory()
        self.game_timer = clock_factory()
        self.score = 0
        self.game_over = False

    @property
    def audio(self) -> AudioManager:
        return self._audio if self._audio is not None else AudioManager.instance()

    def initialize(self) -> None:
        if self.font_path is not None and not Path(self.font_path).is_file():
            return
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.Font(self.font_path, _SCORE_FONT_SIZE)

        self._load_textures()

        self.game_timer.restart()
        _log.info("Game started, timer running")

        self.ship = self.create_ship()
        self.add_actor(self.ship)
        self._create_initial_asteroids()

        self.add_controller(
            CollisionController(
                self.bus,
                audio=self._audio,
                ship=self.ship,
                bullets=self.bullets,
                asteroids=self.asteroids,
                weapon_pickups=self.weapon_pickups,
            )
        )
        self.explosion_controller = ExplosionController(self.bus, self.asteroids, self.rng)
        self.add_controller(self.explosion_controller)
        self.add_controller(AudioController(constants.SOUNDTRACK_PATH, self._audio))

        self.bus.subscribe(MessageType.BULLET_FIRED, self._on_bullet_fired)
        self.bus.subscribe(MessageType.ASTEROID_DESTROYED, self._on_asteroid_destroyed)
        self.bus.subscribe(MessageType.GAME_OVER, self._on_game_over)

    def _load_textures(self) -> None:
        background = load_texture(self.image_dir / BACKGROUND_FILE)
        self.background = (
            pygame.transform.scale(background, (constants.WINDOW_WIDTH, constants.WINDOW_HEIGHT))
            if background is not None
            else None
        )
        self.textures = {}
        for name in ACTOR_TEXTURE_FILES:
            texture = load_texture(self.image_dir / name)
            self.textures[name] = texture if texture is not None else _placeholder_texture()

    def _texture(self, name: str) -> pygame.Surface:
        if name not in self.textures:
            self.textures[name] = _placeholder_texture()
        return self.textures[name]

    def _on_bullet_fired(self, message: Message) -> None:
        data = message.payload
        radians = (data.angle - constants.BULLET_ANGLE_OFFSET) * constants.DEGREES_TO_RADIANS
        direction = Vector2(math.cos(radians), math.sin(radians))
        bullet = self.create_bullet(data.position, direction, data.angle, data.weapon_type)
        ship_velocity = self.ship.velocity if self.ship is not None else Vector2(0.0, 0.0)
        bullet.velocity = direction * data.speed + ship_velocity * constants.BULLET_VELOCITY_INFLUENCE
        self.audio.play_sound(constants.LASER_SOUND_PATH)
        self.bullets.append(bullet)
        self.add_actor(bullet)

    def _on_asteroid_destroyed(self, message: Message) -> None:
        self.score += message.payload
        self.spawn_new_asteroid()

    def _on_game_over(self, message: Message) -> None:
        if self.game_over:
            return
        self.game_over = True
        survival_time = self.game_timer.elapsed()
        self.core.switch_to_game_over_scene(self.score, survival_time)
        _log.info("Game over: survived %.2f seconds, final score %d", survival_time, self.score)

    def update(self, delta_time: float) -> None:
        if self.game_over:
            return
        super().update(delta_time)

        if self.weapon_spawn_clock.elapsed() > constants.WEAPON_SPAWN_INTERVAL:
            self.spawn_weapon_pickup()
            self.weapon_spawn_clock.restart()

        self.cleanup_inactive_actors()

        while len(self.asteroids) < constants.MIN_ASTEROID_COUNT:
            self.spawn_new_asteroid()

        if self.explosion_controller is not None:
            self.explosion_controller.update(delta_time)

    def render(self, surface: pygame.Surface) -> None:
        if self.background is not None:
            surface.blit(self.background, (0, 0))
        super().render(surface)

        if self.explosion_controller is not None:
            self.explosion_controller.render(surface)

        if self.game_over:
            line = pygame.Rect(
                0,
                int(constants.GAME_OVER_LINE_Y),
                constants.WINDOW_WIDTH,
                int(constants.GAME_OVER_LINE_HEIGHT),
            )
            pygame.draw.rect(surface, _RED, line)

        if self.font is not None:
            label = _render_outlined(self.font, f"Score: {self.score}", _YELLOW, _BLACK, _SCORE_OUTLINE)
            surface.blit(label, _SCORE_POSITION)

    def create_ship(self) -> Actor:
        ship = Actor(
            position=(constants.SHIP_START_X, constants.SHIP_START_Y), radius=constants.SHIP_RADIUS
        )
        ship.set_texture(self._texture("ship.png"))
        _center_origin(ship)
        ship.add_controller(ShipController(self.bus, self._input_source, self._clock_factory()))
        return ship

    def create_asteroid(self) -> Actor:
        rng = self.rng
        radius = constants.MIN_ASTEROID_RADIUS + rng.randrange(constants.ASTEROID_RADIUS_RANGE)
        span = constants.WINDOW_WIDTH - constants.ASTEROID_SPAWN_MARGIN
        x = float(rng.randrange(span) + constants.ASTEROID_SPAWN_MIN_X)
        vx = (rng.randrange(constants.ASTEROID_VELOCITY_RANGE) - 100.0) / constants.ASTEROID_VELOCITY_DIVISOR
        vy = constants.BASE_ASTEROID_SPEED + rng.randrange(constants.ASTEROID_SPEED_RANGE) / (
            constants.ASTEROID_SPEED_DIVISOR
        )
        asteroid = Actor(position=(x, -radius), velocity=(vx, vy), radius=radius)
        asteroid.set_texture(self._texture("asteroid.png"))
        texture = _center_origin(asteroid)
        scale = radius * constants.ASTEROID_SCALE_MULTIPLIER / texture.get_width()
        asteroid.sprite.scale = Vector2(scale, scale)
        asteroid.add_controller(AsteroidController(rng))
        return asteroid

    def create_bullet(
        self, position, direction, angle: float, weapon_type: WeaponType = WeaponType.DEFAULT
    ) -> Actor:
        start = Vector2(position) + Vector2(direction) * constants.BULLET_POSITION_OFFSET
        bullet = Actor(position=start, radius=constants.BULLET_RADIUS)
        bullet.rotation = angle
        bullet.weapon_type = weapon_type
        bullet.set_texture(self._texture("bullet.png"))
        texture = _center_origin(bullet)
        scale = bullet.radius * constants.BULLET_SCALE_MULTIPLIER / texture.get_width()
        if weapon_type is WeaponType.ROCKET_LAUNCHER:
            scale *= 2
        bullet.sprite.scale = Vector2(scale, scale)
        bullet.sprite.color = _BULLET_COLORS.get(weapon_type, _WHITE)
        bullet.add_controller(BulletController(weapon_type))
        return bullet

    def create_weapon_pickup(self) -> WeaponPickup:
        weapon_type = random_weapon_type(self.rng)
        pickup = WeaponPickup(weapon_type, clock=self._clock_factory())
        margin = constants.WEAPON_SPAWN_MARGIN
        x = self.rng.randrange(constants.WINDOW_WIDTH - margin * 2) + margin
        y = (
            self.rng.randrange(constants.WEAPON_SPAWN_HEIGHT_MAX - constants.WEAPON_SPAWN_HEIGHT_MIN)
            + constants.WEAPON_SPAWN_HEIGHT_MIN
        )
        pickup.position = Vector2(float(x), float(y))
        pickup.set_texture(self._texture(weapon_texture(weapon_type)))
        _center_origin(pickup)
        pickup.sprite.scale = Vector2(constants.WEAPON_SCALE, constants.WEAPON_SCALE)
        pickup.add_controller(WeaponPickupController(self._clock_factory(), self._clock_factory()))
        return pickup

    def _create_initial_asteroids(self) -> None:
        for _ in range(constants.INITIAL_ASTEROID_COUNT):
            asteroid = self.create_asteroid()
            asteroid.position.y = float(-self.rng.randrange(constants.MAX_ASTEROID_SPAWN_OFFSET))
            self.asteroids.append(asteroid)
            self.add_actor(asteroid)

    def spawn_new_asteroid(self) -> Actor:
        asteroid = self.create_asteroid()
        self.asteroids.append(asteroid)
        self.add_actor(asteroid)
        return asteroid

    def spawn_weapon_pickup(self) -> WeaponPickup:
        pickup = self.create_weapon_pickup()
        self.weapon_pickups.append(pickup)
        self.add_actor(pickup)
        return pickup

    def cleanup_inactive_actors(self) -> None:
        """Drop inactive actors from the scene and from the bullet, asteroid and pickup lists."""
        super().cleanup_inactive_actors()
        # Lists are trimmed in place because the collision controller shares them.
        self.bullets[:] = [bullet for bullet in self.bullets if bullet.active]
        self.asteroids[:] = [asteroid for asteroid in self.asteroids if asteroid.active]
        self.weapon_pickups[:] = [pickup for pickup in self.weapon_pickups if pickup.active]