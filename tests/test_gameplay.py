import random

import pygame
import pytest
from pygame.math import Vector2

from asteroidfield import constants
from asteroidfield.actor import Clock
from asteroidfield.gameplay import GameplayScene
from asteroidfield.messages import BulletData, Message, MessageType
from asteroidfield.ship import InputState
from asteroidfield.weapons import WeaponType, weapon_texture


class FakeTime:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class FakeAudio:
    def __init__(self):
        self.sounds = []
        self.music = []
        self.stopped = 0

    def play_sound(self, filename):
        self.sounds.append(filename)
        return True

    def play_music(self, filename, loop=True):
        self.music.append((filename, loop))
        return True

    def stop_music(self):
        self.stopped += 1


class FakeCore:
    def __init__(self):
        self.game_overs = []

    def switch_to_game_over_scene(self, score, survival_time):
        self.game_overs.append((score, survival_time))


@pytest.fixture
def env(tmp_path):
    fake_time = FakeTime()
    audio = FakeAudio()
    core = FakeCore()
    scene = GameplayScene(
        core,
        pygame.Surface((constants.WINDOW_WIDTH, constants.WINDOW_HEIGHT)),
        rng=random.Random(1),
        audio=audio,
        input_source=lambda: InputState(),
        font_path=None,
        image_dir=tmp_path,
        clock_factory=lambda: Clock(fake_time),
    )
    scene.initialize()
    return scene, core, audio, fake_time


def test_initialize_places_ship_and_asteroids(env):
    scene, _, audio, _ = env
    assert scene.ship.position == Vector2(constants.SHIP_START_X, constants.SHIP_START_Y)
    assert scene.ship.radius == constants.SHIP_RADIUS
    assert len(scene.asteroids) == constants.INITIAL_ASTEROID_COUNT
    assert len(scene.actors) == constants.INITIAL_ASTEROID_COUNT + 1
    for asteroid in scene.asteroids:
        assert -constants.MAX_ASTEROID_SPAWN_OFFSET < asteroid.position.y <= 0
    assert len(scene.controllers) == 3


def test_audio_controller_starts_soundtrack(env):
    scene, _, audio, _ = env
    scene.update(0.016)
    assert audio.music == [(constants.SOUNDTRACK_PATH, True)]


def test_created_asteroid_ranges(env):
    scene, _, _, _ = env
    for _ in range(50):
        asteroid = scene.create_asteroid()
        assert constants.MIN_ASTEROID_RADIUS <= asteroid.radius
        assert asteroid.radius < constants.MIN_ASTEROID_RADIUS + constants.ASTEROID_RADIUS_RANGE
        assert constants.ASTEROID_SPAWN_MIN_X <= asteroid.position.x
        assert asteroid.position.x < constants.WINDOW_WIDTH - constants.ASTEROID_SPAWN_MARGIN + constants.ASTEROID_SPAWN_MIN_X
        assert asteroid.position.y == -asteroid.radius
        assert -2.0 <= asteroid.velocity.x < 2.0
        assert asteroid.velocity.y >= constants.BASE_ASTEROID_SPEED


def test_create_bullet_offsets_and_colours(env):
    scene, _, _, _ = env
    start = Vector2(100, 200)
    direction = Vector2(0, -1)
    bullet = scene.create_bullet(start, direction, 0.0, WeaponType.RIFLE)
    assert bullet.position == start + direction * constants.BULLET_POSITION_OFFSET
    assert bullet.weapon_type is WeaponType.RIFLE
    assert bullet.radius == constants.BULLET_RADIUS
    assert tuple(bullet.sprite.color) == (255, 255, 0)
    default = scene.create_bullet(start, direction, 0.0)
    assert tuple(default.sprite.color) == (255, 255, 255)
    rocket = scene.create_bullet(start, direction, 0.0, WeaponType.ROCKET_LAUNCHER)
    assert rocket.sprite.scale == default.sprite.scale * 2


def test_bullet_fired_message_spawns_bullet(env):
    scene, _, audio, _ = env
    scene.ship.velocity = Vector2(2, 0)
    data = BulletData(Vector2(100, 200), 90.0, 10.0, WeaponType.RIFLE)
    scene.bus.publish(Message(MessageType.BULLET_FIRED, None, data))
    assert len(scene.bullets) == 1
    bullet = scene.bullets[0]
    assert bullet in scene.actors
    assert bullet.velocity.x == pytest.approx(10.0 + 2 * constants.BULLET_VELOCITY_INFLUENCE, abs=1e-3)
    assert bullet.velocity.y == pytest.approx(0.0, abs=1e-3)
    assert bullet.position.x == pytest.approx(100 + constants.BULLET_POSITION_OFFSET, abs=1e-3)
    assert audio.sounds == [constants.LASER_SOUND_PATH]


def test_asteroid_destroyed_adds_score_and_asteroid(env):
    scene, _, _, _ = env
    before = len(scene.asteroids)
    scene.bus.publish(Message(MessageType.ASTEROID_DESTROYED, None, constants.ASTEROID_SCORE_POINTS))
    assert scene.score == constants.ASTEROID_SCORE_POINTS
    assert len(scene.asteroids) == before + 1


def test_game_over_reported_once_and_freezes(env):
    scene, core, _, fake_time = env
    fake_time.now = 7.5
    scene.bus.publish(Message(MessageType.GAME_OVER))
    scene.bus.publish(Message(MessageType.GAME_OVER))
    assert core.game_overs == [(0, 7.5)]
    assert scene.game_over is True
    positions = [Vector2(a.position) for a in scene.asteroids]
    scene.update(0.016)
    assert [a.position for a in scene.asteroids] == positions


def test_ship_hit_by_asteroid_ends_game(env):
    scene, core, audio, _ = env
    scene.asteroids[0].position = Vector2(scene.ship.position)
    scene.update(0.016)
    assert len(core.game_overs) == 1
    assert constants.DEATH_SOUND_PATH in audio.sounds
    assert audio.stopped == 1


def test_bullet_destroys_asteroid_and_asteroids_refill(env):
    scene, _, audio, _ = env
    target = scene.asteroids[0]
    bullet = scene.create_bullet(Vector2(target.position), Vector2(0, 0), 0.0)
    scene.bullets.append(bullet)
    scene.add_actor(bullet)
    scene.update(0.016)
    assert scene.score == constants.ASTEROID_SCORE_POINTS
    assert target not in scene.asteroids
    assert bullet not in scene.bullets
    assert constants.DESTRUCTION_SOUND_PATH in audio.sounds
    assert len(scene.asteroids) >= constants.MIN_ASTEROID_COUNT


def test_inactive_asteroid_is_replaced(env):
    scene, _, _, _ = env
    gone = scene.asteroids[3]
    gone.active = False
    scene.update(0.016)
    assert gone not in scene.asteroids
    assert gone not in scene.actors
    assert len(scene.asteroids) == constants.MIN_ASTEROID_COUNT


def test_weapon_pickup_spawns_after_interval(env):
    scene, _, _, fake_time = env
    scene.update(0.016)
    assert scene.weapon_pickups == []
    fake_time.now = constants.WEAPON_SPAWN_INTERVAL + 0.5
    scene.update(0.016)
    assert len(scene.weapon_pickups) == 1
    scene.update(0.016)
    assert len(scene.weapon_pickups) == 1
    pickup = scene.weapon_pickups[0]
    assert constants.WEAPON_SPAWN_MARGIN <= pickup.position.x < constants.WINDOW_WIDTH - constants.WEAPON_SPAWN_MARGIN
    assert constants.WEAPON_SPAWN_HEIGHT_MIN <= pickup.position.y < constants.WEAPON_SPAWN_HEIGHT_MAX


def test_weapon_pickup_uses_matching_texture(env):
    scene, _, _, _ = env
    for _ in range(20):
        pickup = scene.create_weapon_pickup()
        assert pickup.sprite.texture is scene.textures[weapon_texture(pickup.weapon_type)]
        assert pickup.sprite.scale == Vector2(constants.WEAPON_SCALE, constants.WEAPON_SCALE)


def test_textures_load_from_image_dir(tmp_path):
    pygame.image.save(pygame.Surface((10, 20)), str(tmp_path / "ship.png"))
    scene = GameplayScene(FakeCore(), audio=FakeAudio(), font_path=None, image_dir=tmp_path,
                          input_source=lambda: InputState())
    scene.initialize()
    assert scene.textures["ship.png"].get_size() == (10, 20)
    assert scene.ship.sprite.origin == Vector2(5, 10)


def test_missing_font_leaves_scene_empty(tmp_path):
    scene = GameplayScene(FakeCore(), audio=FakeAudio(), font_path=str(tmp_path / "missing.ttf"))
    scene.initialize()
    assert scene.ship is None
    assert scene.actors == []


def test_render_draws_ship_and_game_over_line(env):
    scene, _, _, _ = env
    surface = pygame.Surface((constants.WINDOW_WIDTH, constants.WINDOW_HEIGHT))
    scene.render(surface)
    center = scene.textures["ship.png"].get_at((16, 16))
    assert surface.get_at((int(constants.SHIP_START_X), int(constants.SHIP_START_Y))) == center
    scene.bus.publish(Message(MessageType.GAME_OVER))
    scene.render(surface)
    assert tuple(surface.get_at((5, int(constants.GAME_OVER_LINE_Y) + 2)))[:3] == (255, 0, 0)