"""Data models for Turnkeeper."""

from __future__ import annotations

from dataclasses import dataclass


class TurnkeeperError(Exception):
    """Base class for recoverable session errors."""


class SpeakerNotFound(TurnkeeperError, LookupError):
    def __init__(self, speaker_id: int) -> None:
        super().__init__(f"No such speaker: {speaker_id}")
        self.speaker_id = speaker_id


class QueuePositionError(TurnkeeperError, IndexError):
    def __init__(self, position: int, size: int) -> None:
        super().__init__(f"Queue position {position} out of range (size {size})")
        self.position = position


class SpeechNotFound(TurnkeeperError, IndexError):
    def __init__(self, position: int, size: int) -> None:
        super().__init__(f"Speech {position} out of range (size {size})")
        self.position = position


@dataclass(frozen=True)
class Speaker:
    id: int
    name: str
    category: str = ""


# Returned when nobody is at the requested place in the queue.
NO_ONE = Speaker(id=-1, name="No one", category="")


@dataclass(frozen=True)
class Speech:
    duration: float
    category: str = ""


@dataclass
class CategoryTotal:
    category: str
    count: int
    total_seconds: float
