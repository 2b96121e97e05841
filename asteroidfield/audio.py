"""Background music and sound effects, and a controller that starts the music."""

from __future__ import annotations

from pathlib import Path

import pygame

from . import constants
from .actor import Controller


class AudioManager:
    """Plays one music track and short sound effects; volumes run from 0 to 100."""

    _instance: AudioManager | None = None

    def __init__(self) -> None:
        self.music_volume = constants.DEFAULT_MUSIC_VOLUME
        self.sound_volume = constants.DEFAULT_LASER_VOLUME
        self._sounds: dict[str, pygame.mixer.Sound | None] = {}
        self._music_loaded = False
        self._music_paused = False
        self._music_started = False

    @classmethod
    def instance(cls) -> AudioManager:
        """The shared manager used across the game."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @staticmethod
    def _mixer_ready() -> bool:
        if pygame.mixer.get_init():
            return True
        try:
            pygame.mixer.init()
        except pygame.error:
            return False
        return bool(pygame.mixer.get_init())

    def play_music(self, filename: str, loop: bool = True) -> bool:
        """Start a music track; return whether it could be opened."""
        if not Path(filename).is_file() or not self._mixer_ready():
            return False
        try:
            pygame.mixer.music.load(filename)
        except pygame.error:
            return False
        pygame.mixer.music.set_volume(self.music_volume / 100.0)
        pygame.mixer.music.play(-1 if loop else 0)
        self._music_loaded = True
        self._music_paused = False
        self._music_started = True
        return True

    def stop_music(self) -> None:
        if pygame.mixer.get_init():
            pygame.mixer.music.stop()
        self._music_paused = False
        self._music_started = False

    def pause_music(self) -> None:
        if pygame.mixer.get_init() and self._music_started:
            pygame.mixer.music.pause()
            self._music_paused = True

    def resume_music(self) -> None:
        if not pygame.mixer.get_init() or not self._music_loaded:
            return
        if self._music_paused:
            pygame.mixer.music.unpause()
        else:
            pygame.mixer.music.play()
        self._music_paused = False
        self._music_started = True

    def set_music_volume(self, volume: float) -> None:
        self.music_volume = volume
        if pygame.mixer.get_init():
            pygame.mixer.music.set_volume(volume / 100.0)

    def play_sound(self, filename: str) -> bool:
        """Play a sound effect, loading it once; return whether it played."""
        if filename not in self._sounds:
            self._sounds[filename] = self._load_sound(filename)
        sound = self._sounds[filename]
        if sound is None:
            return False
        sound.set_volume(self.sound_volume / 100.0)
        sound.play()
        return True

    def _load_sound(self, filename: str) -> pygame.mixer.Sound | None:
        if not Path(filename).is_file() or not self._mixer_ready():
            return None
        try:
            return pygame.mixer.Sound(filename)
        except pygame.error:
            return None

    def set_sound_volume(self, volume: float) -> None:
        self.sound_volume = volume

    def is_music_playing(self) -> bool:
        if not self._music_started or self._music_paused or not pygame.mixer.get_init():
            return False
        return bool(pygame.mixer.music.get_busy())


class AudioController(Controller):
    """Starts looping a music track on its first update."""

    def __init__(self, music_filename: str, manager: AudioManager | None = None) -> None:
        super().__init__()
        self.music_filename = music_filename
        self._manager = manager
        self.initialized = False

    def update(self, delta_time: float) -> None:
        if self.initialized or not self.music_filename:
            return
        manager = self._manager if self._manager is not None else AudioManager.instance()
        manager.play_music(self.music_filename, True)
        self.initialized = True