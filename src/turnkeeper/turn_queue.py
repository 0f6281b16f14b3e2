"""FIFO of speakers waiting for the floor."""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, Iterator, List, Optional, TYPE_CHECKING

from .models import NO_ONE, QueuePositionError, Speaker

if TYPE_CHECKING:
    from .registry import SpeakerRegistry

logger = logging.getLogger("turnkeeper")


class TurnQueue:
    def __init__(self, speaker_ids: Optional[Iterable[int]] = None) -> None:
        self._ids: deque[int] = deque(speaker_ids or [])

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._ids))

    @property
    def speaker_ids(self) -> List[int]:
        return list(self._ids)

    def enqueue(self, speaker_id: int) -> None:
        self._ids.append(speaker_id)

    def remove(self, position: int) -> int:
        """Drop the entry at ``position``, even when the speaker is queued twice."""
        if position < 0 or position >= len(self._ids):
            raise QueuePositionError(position, len(self._ids))
        speaker_id = self._ids[position]
        del self._ids[position]
        return speaker_id

    def purge(self, speaker_id: int) -> int:
        before = len(self._ids)
        self._ids = deque(i for i in self._ids if i != speaker_id)
        return before - len(self._ids)

    def validate(self, registry: "SpeakerRegistry") -> int:
        before = len(self._ids)
        self._ids = deque(i for i in self._ids if registry.find_speaker(i) is not None)
        dropped = before - len(self._ids)
        if dropped:
            logger.warning("Dropped %s stale queue entries", dropped)
        return dropped

    def _speaker_at(self, position: int, registry: "SpeakerRegistry") -> Speaker:
        if position >= len(self._ids):
            return NO_ONE
        return registry.find_speaker(self._ids[position]) or NO_ONE

    def current_speaker(self, registry: "SpeakerRegistry") -> Speaker:
        return self._speaker_at(0, registry)

    def next_speaker(self, registry: "SpeakerRegistry") -> Speaker:
        return self._speaker_at(1, registry)

    def speaker_spoke(self) -> None:
        if self._ids:
            self._ids.popleft()
