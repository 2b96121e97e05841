"""Title screen that starts a round of play when space is pressed."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pygame

from . import constants
from .gameover import DEFAULT_FONT_PATH, Label, _render_outlined
from .gameplay import DEFAULT_IMAGE_DIR, BACKGROUND_FILE, GameplayScene, load_texture
from .scene import Scene

_YELLOW = (255, 255, 0)
_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)


def _space_pressed() -> bool:
    return bool(pygame.key.get_pressed()[pygame.K_SPACE])


class MenuScene(Scene):
    """Shows the title and starts the game on a fresh press of space."""

    def __init__(
        self,
        core: Any,
        font_path: str | None = DEFAULT_FONT_PATH,
        image_dir: str | Path = DEFAULT_IMAGE_DIR,
        key_source: Callable[[], bool] | None = None,
        scene_factory: Callable[[Any, Any], Scene] | None = None,
    ) -> None:
        super().__init__()
        self.core = core
        self.font_path = font_path
        self.image_dir = Path(image_dir)
        self._key_source = key_source if key_source is not None else _space_pressed
        self._scene_factory = scene_factory if scene_factory is not None else self._new_gameplay
        self.background: pygame.Surface | None = None
        self.labels: dict[str, Label] = {}
        self._was_pressed = False

    def _new_gameplay(self, core: Any, window: Any) -> Scene:
        return GameplayScene(core, window, font_path=self.font_path, image_dir=self.image_dir)

    def initialize(self) -> None:
        if self.font_path is not None and not Path(self.font_path).is_file():
            return
        if not pygame.font.get_init():
            pygame.font.init()
        background = load_texture(self.image_dir / BACKGROUND_FILE)
        self.background = (
            pygame.transform.scale(background, (constants.WINDOW_WIDTH, constants.WINDOW_HEIGHT))
            if background is not None
            else None
        )
        self.labels = {
            "title": self._label("ASTEROIDS", 120, _YELLOW, 3, 300.0),
            "start": self._label("Press SPACE to Start", 48, _WHITE, 2, 600.0),
        }

    def _label(self, text: str, size: int, color, thickness: int, y: float) -> Label:
        font = pygame.font.Font(self.font_path, size)
        surface = _render_outlined(font, text, color, _BLACK, thickness)
        x = constants.WINDOW_WIDTH / 2.0 - surface.get_width() / 2.0
        return Label(text, surface, (x, y))

    def update(self, delta_time: float) -> None:
        super().update(delta_time)
        if self.is_start_pressed(self._key_source()):
            gameplay = self._scene_factory(self.core, self.core.window)
            self.core.add_scene(gameplay)
            self.core.set_active_scene(1)
            self.core.start_game_timer()

    def render(self, surface: pygame.Surface) -> None:
        if self.background is not None:
            surface.blit(self.background, (0, 0))
        for name in ("title", "start"):
            label = self.labels.get(name)
            if label is not None:
                surface.blit(label.surface, (round(label.position[0]), round(label.position[1])))
        super().render(surface)

    def is_start_pressed(self, pressed: bool) -> bool:
        """True only on the frame the start key goes down."""
        if pressed and not self._was_pressed:
            self._was_pressed = True
            return True
        if not pressed:
            self._was_pressed = False
        return False