"""Weapon kinds, their stats, rarities and weighted random selection."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, auto

from . import constants


class WeaponType(Enum):
    DEFAULT = auto()
    RIFLE = auto()
    REVOLVER = auto()
    SHOTGUN = auto()
    ROCKET_LAUNCHER = auto()
    FLAMETHROWER = auto()


class WeaponRarity(Enum):
    COMMON = auto()
    UNCOMMON = auto()
    RARE = auto()
    EPIC = auto()
    LEGENDARY = auto()


@dataclass(frozen=True)
class WeaponStats:
    fire_rate: float
    bullet_count: int
    spread: float
    bullet_speed: float
    duration: float
    speed_multiplier: float


@dataclass(frozen=True)
class RarityData:
    rarity: WeaponRarity
    glow_color: tuple[int, int, int]
    pulse_intensity: float
    spawn_rate: float


_STATS = {
    WeaponType.RIFLE: WeaponStats(0.001, 1, 0.0, 12.0, 8.0, 1.0),
    WeaponType.REVOLVER: WeaponStats(1.0, 1, 0.0, 8.0, 10.0, 1.5),
    WeaponType.SHOTGUN: WeaponStats(0.8, 5, 45.0, 10.0, 6.0, 0.8),
    WeaponType.ROCKET_LAUNCHER: WeaponStats(2.0, 1, 0.0, 8.0, 10.0, 0.7),
    WeaponType.FLAMETHROWER: WeaponStats(0.1, 3, 25.0, 6.0, 8.0, 0.9),
    WeaponType.DEFAULT: WeaponStats(0.2, 1, 0.0, 10.0, 0.0, 1.0),
}

_RARITY_TABLE = (
    (WeaponType.RIFLE, constants.RIFLE_SPAWN_RATE),
    (WeaponType.REVOLVER, constants.REVOLVER_SPAWN_RATE),
    (WeaponType.SHOTGUN, constants.SHOTGUN_SPAWN_RATE),
    (WeaponType.ROCKET_LAUNCHER, constants.ROCKET_SPAWN_RATE),
    (WeaponType.FLAMETHROWER, constants.FLAMETHROWER_SPAWN_RATE),
)

_RARITY_DATA = {
    WeaponType.RIFLE: RarityData(WeaponRarity.COMMON, (255, 255, 255), 1.0, constants.RIFLE_SPAWN_RATE),
    WeaponType.REVOLVER: RarityData(WeaponRarity.UNCOMMON, (0, 255, 0), 1.2, constants.REVOLVER_SPAWN_RATE),
    WeaponType.SHOTGUN: RarityData(WeaponRarity.RARE, (0, 0, 255), 1.5, constants.SHOTGUN_SPAWN_RATE),
    WeaponType.ROCKET_LAUNCHER: RarityData(WeaponRarity.EPIC, (255, 165, 0), 1.8, constants.ROCKET_SPAWN_RATE),
    WeaponType.FLAMETHROWER: RarityData(
        WeaponRarity.LEGENDARY, (255, 215, 0), 2.0, constants.FLAMETHROWER_SPAWN_RATE
    ),
}
_DEFAULT_RARITY = RarityData(WeaponRarity.COMMON, (255, 255, 255), 1.0, 100.0)

_TEXTURES = {
    WeaponType.RIFLE: "rifle.png",
    WeaponType.REVOLVER: "revolver.png",
    WeaponType.SHOTGUN: "shotgun.png",
    WeaponType.ROCKET_LAUNCHER: "rocket_launcher.png",
    WeaponType.FLAMETHROWER: "flamethrower.png",
}

_DISPLAY_NAMES = {
    WeaponType.RIFLE: "Rifle",
    WeaponType.SHOTGUN: "Shotgun",
    WeaponType.REVOLVER: "Revolver",
    WeaponType.FLAMETHROWER: "Flamethrower",
    WeaponType.ROCKET_LAUNCHER: "Rocket Launcher",
}


def get_weapon_stats(weapon_type: WeaponType) -> WeaponStats:
    """Firing and movement stats for a weapon type."""
    return _STATS.get(weapon_type, _STATS[WeaponType.DEFAULT])


def total_weight() -> float:
    """Sum of the spawn weights of all pickup weapons."""
    return sum(weight for _, weight in _RARITY_TABLE)


def random_weapon_type(rng: random.Random | None = None) -> WeaponType:
    """Pick a pickup weapon with probability proportional to its spawn weight."""
    source = rng if rng is not None else random
    value = source.uniform(0.0, total_weight())
    cumulative = 0.0
    for weapon_type, weight in _RARITY_TABLE:
        cumulative += weight
        if value <= cumulative:
            return weapon_type
    return WeaponType.RIFLE


def weapon_texture(weapon_type: WeaponType) -> str:
    """File name of the image used for a weapon type."""
    return _TEXTURES.get(weapon_type, "bullet.png")


def rarity_data(weapon_type: WeaponType) -> RarityData:
    """Rarity, glow colour, pulse intensity and spawn rate of a weapon type."""
    return _RARITY_DATA.get(weapon_type, _DEFAULT_RARITY)


def weapon_display_name(weapon_type: WeaponType) -> str:
    """Human-readable name of a weapon type."""
    return _DISPLAY_NAMES.get(weapon_type, "Unknown")