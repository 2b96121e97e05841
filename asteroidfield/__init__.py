"""Arcade asteroid shooter on pygame: scenes, actors, controllers, weapon pickups and explosions."""

__version__ = "1.0.0"