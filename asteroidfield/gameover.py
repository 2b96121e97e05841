"""Game-over screen showing the final score and time survived."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame

from . import constants
from .scene import Scene

DEFAULT_FONT_PATH = "assets/fonts/jersey.ttf"

_RED = (255, 0, 0)
_YELLOW = (255, 255, 0)
_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)


@dataclass
class Label:
    """A rendered line of text and where it is drawn."""

    text: str
    surface: pygame.Surface
    position: tuple[float, float]


def _render_outlined(font: pygame.font.Font, text: str, fill, outline, thickness: int) -> pygame.Surface:
    body = font.render(text, True, fill)
    if thickness <= 0:
        return body
    edge = font.render(text, True, outline)
    width, height = body.get_size()
    result = pygame.Surface((width + 2 * thickness, height + 2 * thickness), pygame.SRCALPHA)
    for dx in range(-thickness, thickness + 1):
        for dy in range(-thickness, thickness + 1):
            if dx * dx + dy * dy <= thickness * thickness:
                result.blit(edge, (thickness + dx, thickness + dy))
    result.blit(body, (thickness, thickness))
    return result


class GameOverScene(Scene):
    """Shows "GAME OVER", the score, the time played and an optional credits line."""

    def __init__(
        self,
        window: Any,
        score: int,
        survival_time: float,
        font_path: str | None = DEFAULT_FONT_PATH,
        credits: str = "",
    ) -> None:
        super().__init__()
        self.window = window
        self.score = score
        self.survival_time = survival_time
        self.font_path = font_path
        self.credits = credits
        self.labels: dict[str, Label] = {}

    def initialize(self) -> None:
        if self.font_path is not None and not Path(self.font_path).is_file():
            raise FileNotFoundError(f"font not found: {self.font_path}")
        if not pygame.font.get_init():
            pygame.font.init()
        half_height = constants.WINDOW_HEIGHT / 2
        self.labels = {}
        self._add_label("game_over", "GAME OVER", 150, _RED, 6, half_height - 100)
        self._add_label("score", f"Score: {self.score}", 60, _YELLOW, 4, half_height + 100)
        self._add_label(
            "timer", f"Time played: {int(self.survival_time)}s", 40, _WHITE, 4, half_height + 200
        )
        if self.credits:
            self._add_label("credits", self.credits, 32, _WHITE, 2, constants.WINDOW_HEIGHT - 100)

    def _add_label(self, name: str, text: str, size: int, color, thickness: int, y: float) -> None:
        font = pygame.font.Font(self.font_path, size)
        surface = _render_outlined(font, text, color, _BLACK, thickness)
        x = (constants.WINDOW_WIDTH - surface.get_width()) / 2
        self.labels[name] = Label(text, surface, (x, y))

    def update(self, delta_time: float) -> None:
        """The game-over screen is static."""

    def render(self, surface: pygame.Surface) -> None:
        for name in ("score", "timer", "game_over", "credits"):
            label = self.labels.get(name)
            if label is not None:
                surface.blit(label.surface, (round(label.position[0]), round(label.position[1])))