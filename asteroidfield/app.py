"""Command-line entry point that opens the window and shows the title screen."""

from __future__ import annotations

import argparse

from .core import Core
from .menu import MenuScene


def main(argv: list[str] | None = None) -> int:
    """Start the game and return its exit status."""
    parser = argparse.ArgumentParser(
        prog="asteroidfield",
        description="Fly a ship, shoot falling asteroids and collect weapons.",
    )
    parser.parse_args(argv)
    core = Core()
    core.add_scene(MenuScene(core))
    core.run()
    return 0