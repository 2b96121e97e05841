"""Base scene holding actors and scene-wide controllers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .actor import Actor, Controller


class Scene(ABC):
    """A screen of the game: updates its controllers and actors and draws the actors."""

    def __init__(self) -> None:
        self.actors: list[Actor] = []
        self.controllers: list[Controller] = []
        self.window: Any = None

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the scene when it becomes active."""

    def update(self, delta_time: float) -> None:
        for controller in self.controllers:
            controller.update(delta_time)
        for actor in list(self.actors):
            if actor is not None and actor.active:
                actor.update(delta_time)

    def render(self, surface) -> None:
        for actor in list(self.actors):
            if actor is not None and actor.active:
                actor.render(surface)

    def cleanup_inactive_actors(self) -> None:
        """Drop actors that are missing or no longer active."""
        self.actors = [actor for actor in self.actors if actor is not None and actor.active]

    def add_actor(self, actor: Actor) -> None:
        self.actors.append(actor)

    def add_controller(self, controller: Controller) -> None:
        self.controllers.append(controller)
        controller.attach_to_scene(self)