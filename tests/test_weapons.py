import random

import pytest

from asteroidfield import constants
from asteroidfield.weapons import (
    WeaponRarity,
    WeaponType,
    get_weapon_stats,
    random_weapon_type,
    rarity_data,
    total_weight,
    weapon_display_name,
    weapon_texture,
)


class FixedRng:
    def __init__(self, value):
        self.value = value
        self.bounds = None

    def uniform(self, low, high):
        self.bounds = (low, high)
        return self.value


def test_shotgun_stats_match_source_values():
    stats = get_weapon_stats(WeaponType.SHOTGUN)
    assert stats.bullet_count == 5
    assert stats.spread == pytest.approx(45.0)
    assert stats.duration == pytest.approx(6.0)
    assert stats.speed_multiplier == pytest.approx(0.8)


def test_default_weapon_has_no_duration():
    stats = get_weapon_stats(WeaponType.DEFAULT)
    assert stats.duration == 0.0
    assert stats.fire_rate == pytest.approx(0.2)
    assert stats.bullet_count == 1


def test_every_pickup_weapon_has_positive_duration():
    for weapon_type in WeaponType:
        if weapon_type is WeaponType.DEFAULT:
            continue
        assert get_weapon_stats(weapon_type).duration > 0


def test_total_weight_is_sum_of_spawn_rates():
    assert total_weight() == pytest.approx(100.0)


def test_random_weapon_uses_full_weight_range():
    rng = FixedRng(0.0)
    random_weapon_type(rng)
    assert rng.bounds == (0.0, total_weight())


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, WeaponType.RIFLE),
        (45.0, WeaponType.RIFLE),
        (45.5, WeaponType.REVOLVER),
        (80.0, WeaponType.SHOTGUN),
        (95.0, WeaponType.ROCKET_LAUNCHER),
        (100.0, WeaponType.FLAMETHROWER),
        (150.0, WeaponType.RIFLE),
    ],
)
def test_random_weapon_follows_cumulative_weights(value, expected):
    assert random_weapon_type(FixedRng(value)) is expected


def test_random_weapon_never_returns_default():
    rng = random.Random(1234)
    picks = {random_weapon_type(rng) for _ in range(2000)}
    assert WeaponType.DEFAULT not in picks
    assert WeaponType.RIFLE in picks


def test_weapon_texture_names():
    assert weapon_texture(WeaponType.ROCKET_LAUNCHER) == "rocket_launcher.png"
    assert weapon_texture(WeaponType.RIFLE) == "rifle.png"
    assert weapon_texture(WeaponType.DEFAULT) == "bullet.png"


def test_display_names():
    assert weapon_display_name(WeaponType.ROCKET_LAUNCHER) == "Rocket Launcher"
    assert weapon_display_name(WeaponType.FLAMETHROWER) == "Flamethrower"
    assert weapon_display_name(WeaponType.DEFAULT) == "Unknown"


def test_rarity_data_for_flamethrower():
    data = rarity_data(WeaponType.FLAMETHROWER)
    assert data.rarity is WeaponRarity.LEGENDARY
    assert data.glow_color == (255, 215, 0)
    assert data.spawn_rate == constants.FLAMETHROWER_SPAWN_RATE


def test_rarity_data_default_fallback():
    data = rarity_data(WeaponType.DEFAULT)
    assert data.rarity is WeaponRarity.COMMON
    assert data.spawn_rate == pytest.approx(100.0)


def test_rarer_weapons_pulse_faster():
    order = [
        WeaponType.RIFLE,
        WeaponType.REVOLVER,
        WeaponType.SHOTGUN,
        WeaponType.ROCKET_LAUNCHER,
        WeaponType.FLAMETHROWER,
    ]
    pulses = [rarity_data(t).pulse_intensity for t in order]
    rates = [rarity_data(t).spawn_rate for t in order]
    assert pulses == sorted(pulses)
    assert rates == sorted(rates, reverse=True)