"""Message types, payloads and a publish/subscribe bus."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from pygame.math import Vector2

    from .weapons import WeaponType


class MessageType(Enum):
    ASTEROID_DESTROYED = auto()
    BULLET_FIRED = auto()
    SHIP_DESTROYED = auto()
    GAME_OVER = auto()
    SCORE_UPDATE = auto()
    WEAPON_PICKED_UP = auto()
    WEAPON_EXPIRED = auto()
    ROCKET_EXPLOSION = auto()
    EXPLOSION_TRIGGERED = auto()
    PLAY_MUSIC = auto()
    STOP_MUSIC = auto()
    PAUSE_MUSIC = auto()
    RESUME_MUSIC = auto()
    PLAY_SOUND = auto()


@dataclass
class Message:
    """A message sent over the bus; the payload depends on the type."""

    type: MessageType
    sender: Any = None
    payload: Any = None


@dataclass
class BulletData:
    """Payload of a BULLET_FIRED message."""

    position: Vector2
    angle: float
    speed: float
    weapon_type: WeaponType


@dataclass
class ExplosionData:
    """Payload of an EXPLOSION_TRIGGERED message."""

    position: Vector2
    radius: float
    weapon_type: WeaponType


Handler = Callable[[Message], None]


class MessageBus:
    """Delivers each published message to the handlers subscribed to its type."""

    def __init__(self) -> None:
        self._subscribers: defaultdict[MessageType, list[Handler]] = defaultdict(list)

    def publish(self, message: Message) -> None:
        """Call every handler for the message's type, in subscription order."""
        for handler in tuple(self._subscribers.get(message.type, ())):
            handler(message)

    def subscribe(self, message_type: MessageType, handler: Handler) -> None:
        """Register a handler for one message type."""
        self._subscribers[message_type].append(handler)

    def clear(self) -> None:
        """Drop every subscription."""
        self._subscribers.clear()