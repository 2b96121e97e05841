"""The game loop: window, scene switching, frame timing and the game timer."""

from __future__ import annotations

import logging
import time
from typing import Callable

import pygame

from . import constants
from .actor import Clock
from .gameover import DEFAULT_FONT_PATH, GameOverScene
from .scene import Scene

_log = logging.getLogger(__name__)

WINDOW_TITLE = "Asteroids"
FRAME_RATE = 60


class Core:
    """Owns the window and the scenes and drives the active scene each frame."""

    def __init__(
        self,
        window: pygame.Surface | None = None,
        font_path: str | None = DEFAULT_FONT_PATH,
        time_source: Callable[[], float] = time.perf_counter,
        frame_rate: int = FRAME_RATE,
    ) -> None:
        self._owns_display = window is None
        if window is None:
            pygame.init()
            window = pygame.display.set_mode((constants.WINDOW_WIDTH, constants.WINDOW_HEIGHT))
            pygame.display.set_caption(WINDOW_TITLE)
        self.window = window
        self.font_path = font_path
        self.frame_rate = frame_rate
        self.scenes: list[Scene] = []
        self.active_scene: Scene | None = None
        self.delta_time = 0.0
        self.running = True
        self.game_timer = Clock(time_source)
        self.game_started = False

    @property
    def game_time(self) -> float:
        """Seconds since the game timer started, or 0 when it is not running."""
        return self.game_timer.elapsed() if self.game_started else 0.0

    def run(self) -> None:
        """Run frames until the window is closed."""
        frame_clock = pygame.time.Clock()
        while self.running:
            delta_time = frame_clock.tick(self.frame_rate) / 1000.0
            self._handle_events()
            self.step(delta_time)
            if pygame.display.get_surface() is not None:
                pygame.display.flip()
        if self._owns_display:
            pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

    def step(self, delta_time: float) -> None:
        """Update and draw the active scene for one frame."""
        self.delta_time = delta_time
        if self.active_scene is not None:
            self.active_scene.update(delta_time)
        self.window.fill((0, 0, 0))
        if self.active_scene is not None:
            self.active_scene.render(self.window)

    def add_scene(self, scene: Scene) -> None:
        """Register a scene; the first one added becomes active."""
        self.scenes.append(scene)
        scene.window = self.window
        if self.active_scene is None:
            self.active_scene = scene
            scene.initialize()

    def set_active_scene(self, index: int) -> None:
        """Activate and re-initialize a registered scene; unknown indexes are ignored."""
        if 0 <= index < len(self.scenes):
            self.active_scene = self.scenes[index]
            self.active_scene.window = self.window
            self.active_scene.initialize()

    def switch_to_game_over_scene(self, score: int, survival_time: float) -> None:
        scene = GameOverScene(self.window, score, survival_time, font_path=self.font_path)
        self.active_scene = scene
        scene.window = self.window
        scene.initialize()

    def switch_to_menu(self) -> None:
        self.stop_game_timer()
        self.set_active_scene(0)

    def start_game_timer(self) -> None:
        if self.game_started:
            return
        self.game_timer.restart()
        self.game_started = True
        _log.info("Game started, timer at %.1f", self.game_timer.elapsed())

    def stop_game_timer(self) -> None:
        if not self.game_started:
            return
        final_time = self.game_timer.elapsed()
        self.game_started = False
        _log.info("Game over: final time %.1f seconds (%.1f minutes)", final_time, final_time / 60.0)