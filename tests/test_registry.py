import pytest

from turnkeeper.models import SpeakerNotFound
from turnkeeper.registry import SpeakerRegistry
from turnkeeper.turn_queue import TurnQueue


def test_add_speaker_assigns_fresh_ids():
    registry = SpeakerRegistry()
    alice = registry.add_speaker("Alice", "A")
    bob = registry.add_speaker("Alice", "A")
    assert alice.id != bob.id
    assert len(registry) == 2


def test_get_speaker_unknown_id_is_recoverable():
    registry = SpeakerRegistry()
    with pytest.raises(SpeakerNotFound):
        registry.get_speaker(3)
    assert registry.find_speaker(3) is None


def test_delete_speaker_purges_every_queue_entry():
    registry = SpeakerRegistry()
    queue = TurnQueue()
    alice = registry.add_speaker("Alice", "A")
    bob = registry.add_speaker("Bob", "B")
    carol = registry.add_speaker("Carol", "C")
    for speaker in (alice, bob, carol, alice, bob):
        registry.speaker_wants_to_speak(speaker.id, queue)

    registry.delete_speaker(alice.id, queue)

    assert queue.speaker_ids == [bob.id, carol.id, bob.id]
    assert queue.current_speaker(registry) == bob
    assert queue.next_speaker(registry) == carol


def test_deleted_ids_are_not_reused():
    registry = SpeakerRegistry()
    queue = TurnQueue()
    alice = registry.add_speaker("Alice", "A")
    bob = registry.add_speaker("Bob", "B")
    registry.speaker_wants_to_speak(bob.id, queue)
    registry.delete_speaker(alice.id, queue)
    dave = registry.add_speaker("Dave", "D")
    assert dave.id not in (alice.id, bob.id)
    assert queue.current_speaker(registry) == bob


def test_speaker_wants_to_speak_rejects_unknown_id():
    registry = SpeakerRegistry()
    queue = TurnQueue()
    with pytest.raises(SpeakerNotFound):
        registry.speaker_wants_to_speak(0, queue)
    assert len(queue) == 0


def test_delete_unknown_speaker_leaves_queue_alone():
    registry = SpeakerRegistry()
    queue = TurnQueue()
    alice = registry.add_speaker("Alice", "A")
    registry.speaker_wants_to_speak(alice.id, queue)
    with pytest.raises(SpeakerNotFound):
        registry.delete_speaker(alice.id + 1, queue)
    assert queue.speaker_ids == [alice.id]
