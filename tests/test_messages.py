import pytest

from asteroidfield.messages import (
    BulletData,
    ExplosionData,
    Message,
    MessageBus,
    MessageType,
)
from asteroidfield.weapons import WeaponType


def test_publish_reaches_subscriber_with_payload():
    bus = MessageBus()
    received = []
    bus.subscribe(MessageType.ASTEROID_DESTROYED, received.append)
    msg = Message(MessageType.ASTEROID_DESTROYED, sender="collider", payload=10)
    bus.publish(msg)
    assert received == [msg]
    assert received[0].payload == 10
    assert received[0].sender == "collider"


def test_handlers_called_in_subscription_order():
    bus = MessageBus()
    calls = []
    bus.subscribe(MessageType.GAME_OVER, lambda m: calls.append("first"))
    bus.subscribe(MessageType.GAME_OVER, lambda m: calls.append("second"))
    bus.publish(Message(MessageType.GAME_OVER))
    assert calls == ["first", "second"]


def test_publish_only_reaches_matching_type():
    bus = MessageBus()
    fired = []
    picked = []
    bus.subscribe(MessageType.BULLET_FIRED, fired.append)
    bus.subscribe(MessageType.WEAPON_PICKED_UP, picked.append)
    bus.publish(Message(MessageType.WEAPON_PICKED_UP, payload=WeaponType.SHOTGUN))
    assert fired == []
    assert [m.payload for m in picked] == [WeaponType.SHOTGUN]


def test_clear_removes_all_handlers():
    bus = MessageBus()
    received = []
    bus.subscribe(MessageType.SCORE_UPDATE, received.append)
    bus.clear()
    bus.publish(Message(MessageType.SCORE_UPDATE, payload=5))
    assert received == []


def test_separate_buses_are_independent():
    first, second = MessageBus(), MessageBus()
    received = []
    first.subscribe(MessageType.GAME_OVER, received.append)
    second.publish(Message(MessageType.GAME_OVER))
    assert received == []


def test_handler_subscribing_during_publish_is_not_called_this_round():
    bus = MessageBus()
    early_received = []
    late_received = []

    def early(message):
        early_received.append(message)
        if len(early_received) == 1:
            bus.subscribe(MessageType.PLAY_SOUND, late_received.append)

    bus.subscribe(MessageType.PLAY_SOUND, early)
    first = Message(MessageType.PLAY_SOUND, payload="one")
    bus.publish(first)
    assert early_received == [first]
    assert late_received == []

    second = Message(MessageType.PLAY_SOUND, payload="two")
    bus.publish(second)
    assert early_received == [first, second]
    assert late_received == [second]
    assert late_received[0].payload == "two"


def test_payload_dataclasses_keep_their_fields():
    bullet = BulletData(position=(1.0, 2.0), angle=90.0, speed=10.0, weapon_type=WeaponType.RIFLE)
    explosion = ExplosionData(position=(3.0, 4.0), radius=400.0, weapon_type=WeaponType.ROCKET_LAUNCHER)
    bus = MessageBus()
    seen = []
    bus.subscribe(MessageType.BULLET_FIRED, lambda m: seen.append(m.payload))
    bus.subscribe(MessageType.EXPLOSION_TRIGGERED, lambda m: seen.append(m.payload))
    bus.publish(Message(MessageType.BULLET_FIRED, payload=bullet))
    bus.publish(Message(MessageType.EXPLOSION_TRIGGERED, payload=explosion))
    assert seen[0].weapon_type is WeaponType.RIFLE
    assert seen[0].angle == pytest.approx(90.0)
    assert seen[1].radius == pytest.approx(400.0)
    assert seen[1].position == (3.0, 4.0)


def test_handler_exception_propagates():
    bus = MessageBus()

    def broken(message):
        raise ValueError("bad payload")

    bus.subscribe(MessageType.STOP_MUSIC, broken)
    with pytest.raises(ValueError):
        bus.publish(Message(MessageType.STOP_MUSIC))