"""Known participants."""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, TYPE_CHECKING

from .models import Speaker, SpeakerNotFound

if TYPE_CHECKING:
    from .turn_queue import TurnQueue

logger = logging.getLogger("turnkeeper")


class SpeakerRegistry:
    """Speakers in display order, addressed by generated id.

    Ids are never reused, so deleting a speaker cannot make a queued entry
    point at somebody else.
    """

    def __init__(self, speakers: Optional[List[Speaker]] = None, next_id: int = 0) -> None:
        self._speakers: List[Speaker] = list(speakers or [])
        highest = max((s.id for s in self._speakers), default=-1)
        self.next_id = max(next_id, highest + 1)

    def __len__(self) -> int:
        return len(self._speakers)

    def __iter__(self) -> Iterator[Speaker]:
        return iter(list(self._speakers))

    def __contains__(self, speaker_id) -> bool:
        return self.find_speaker(speaker_id) is not None

    @property
    def speakers(self) -> List[Speaker]:
        return list(self._speakers)

    def add_speaker(self, name: str, category: str) -> Speaker:
        speaker = Speaker(id=self.next_id, name=name, category=category)
        self.next_id += 1
        self._speakers.append(speaker)
        logger.debug("Speaker added: %s (%s) id=%s", name, category, speaker.id)
        return speaker

    def find_speaker(self, speaker_id: int) -> Optional[Speaker]:
        for speaker in self._speakers:
            if speaker.id == speaker_id:
                return speaker
        return None

    def get_speaker(self, speaker_id: int) -> Speaker:
        speaker = self.find_speaker(speaker_id)
        if speaker is None:
            raise SpeakerNotFound(speaker_id)
        return speaker

    def delete_speaker(self, speaker_id: int, queue: "TurnQueue") -> Speaker:
        speaker = self.get_speaker(speaker_id)
        self._speakers.remove(speaker)
        purged = queue.purge(speaker_id)
        logger.debug(
            "Speaker deleted: %s id=%s (%s queue entries removed)",
            speaker.name,
            speaker_id,
            purged,
        )
        return speaker

    def speaker_wants_to_speak(self, speaker_id: int, queue: "TurnQueue") -> None:
        self.get_speaker(speaker_id)
        queue.enqueue(speaker_id)
