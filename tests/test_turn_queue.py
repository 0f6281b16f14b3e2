import pytest

from turnkeeper.models import NO_ONE, QueuePositionError
from turnkeeper.registry import SpeakerRegistry
from turnkeeper.turn_queue import TurnQueue


def _setup():
    registry = SpeakerRegistry()
    queue = TurnQueue()
    alice = registry.add_speaker("Alice", "A")
    bob = registry.add_speaker("Bob", "B")
    return registry, queue, alice, bob


def test_current_and_next_follow_enqueue_order():
    registry, queue, alice, bob = _setup()
    registry.speaker_wants_to_speak(alice.id, queue)
    registry.speaker_wants_to_speak(bob.id, queue)
    assert queue.current_speaker(registry) == alice
    assert queue.next_speaker(registry) == bob


def test_empty_queue_returns_sentinel():
    registry, queue, alice, _bob = _setup()
    assert queue.current_speaker(registry) is NO_ONE
    assert queue.next_speaker(registry) is NO_ONE
    registry.speaker_wants_to_speak(alice.id, queue)
    assert queue.next_speaker(registry) is NO_ONE
    assert NO_ONE.category == ""


def test_speaker_spoke_on_empty_queue_is_noop():
    queue = TurnQueue()
    for _ in range(3):
        queue.speaker_spoke()
    assert len(queue) == 0


def test_speaker_spoke_pops_front():
    registry, queue, alice, bob = _setup()
    registry.speaker_wants_to_speak(alice.id, queue)
    registry.speaker_wants_to_speak(bob.id, queue)
    queue.speaker_spoke()
    assert queue.current_speaker(registry) == bob


def test_remove_is_by_position_not_value():
    registry, queue, alice, bob = _setup()
    for speaker in (alice, bob, alice):
        registry.speaker_wants_to_speak(speaker.id, queue)
    removed = queue.remove(2)
    assert removed == alice.id
    assert queue.speaker_ids == [alice.id, bob.id]


def test_remove_out_of_range():
    queue = TurnQueue([1])
    with pytest.raises(QueuePositionError):
        queue.remove(1)
    with pytest.raises(IndexError):
        queue.remove(-1)


def test_validate_drops_stale_ids():
    registry, _queue, alice, bob = _setup()
    queue = TurnQueue([alice.id, 99, bob.id, 99])
    assert queue.validate(registry) == 2
    assert queue.speaker_ids == [alice.id, bob.id]
