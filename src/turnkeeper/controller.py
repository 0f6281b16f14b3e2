"""Session object and the operations the window drives."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .models import CategoryTotal, Speaker, Speech
from .registry import SpeakerRegistry
from .renderer import join_categories, split_categories
from .speech_log import SpeechLog
from .storage import export_text_async
from .timer import Timer
from .turn_queue import TurnQueue

logger = logging.getLogger("turnkeeper")


@dataclass
class Session:
    timer: Timer = field(default_factory=Timer)
    registry: SpeakerRegistry = field(default_factory=SpeakerRegistry)
    queue: TurnQueue = field(default_factory=TurnQueue)
    speeches: SpeechLog = field(default_factory=SpeechLog)
    categories: List[str] = field(default_factory=list)
    new_speaker_name: str = ""
    new_speaker_category: str = ""


class SessionController:
    """Mutates a ``Session`` on behalf of the presentation layer.

    Every method runs synchronously on the caller's thread. The only work
    handed off elsewhere is the file write in ``export_to_file``.
    """

    def __init__(self, session: Optional[Session] = None, min_speech_seconds: float = 1.0) -> None:
        if min_speech_seconds <= 0:
            raise ValueError("min_speech_seconds must be positive")
        self.session = session if session is not None else Session()
        self.min_speech_seconds = min_speech_seconds

    # Timer

    def start_or_stop(self) -> None:
        self.session.timer.start_or_stop()
        logger.debug(
            "Timer %s at %.3fs",
            "started" if self.session.timer.is_running else "stopped",
            self.session.timer.elapsed(),
        )

    def stop_timer(self) -> None:
        self.session.timer.stop()

    def elapsed(self) -> float:
        return self.session.timer.elapsed()

    @property
    def is_running(self) -> bool:
        return self.session.timer.is_running

    def can_commit(self) -> bool:
        return self.session.timer.elapsed() >= self.min_speech_seconds

    def commit_speech(self) -> Optional[Speech]:
        """Log the timed speech for whoever holds the floor and move on.

        Returns ``None`` without touching anything when too little time has
        been counted.
        """
        session = self.session
        if not self.can_commit():
            logger.debug("Commit ignored: %.3fs elapsed", session.timer.elapsed())
            return None
        session.timer.stop()
        speaker = session.queue.current_speaker(session.registry)
        speech = session.speeches.record(session.timer.elapsed(), speaker.category)
        session.queue.speaker_spoke()
        session.timer.reset()
        logger.info("Turn finished: %s", speaker.name)
        return speech

    # Speakers and queue

    def add_speaker(self, name: Optional[str] = None, category: Optional[str] = None) -> Speaker:
        session = self.session
        if name is None:
            name = session.new_speaker_name
        if category is None:
            category = session.new_speaker_category
        return session.registry.add_speaker(name, category)

    def set_new_speaker(self, name: Optional[str] = None, category: Optional[str] = None) -> None:
        if name is not None:
            self.session.new_speaker_name = name
        if category is not None:
            self.session.new_speaker_category = category

    def delete_speaker(self, speaker_id: int) -> Speaker:
        return self.session.registry.delete_speaker(speaker_id, self.session.queue)

    def speaker_wants_to_speak(self, speaker_id: int) -> None:
        self.session.registry.speaker_wants_to_speak(speaker_id, self.session.queue)

    def remove_from_queue(self, position: int) -> int:
        return self.session.queue.remove(position)

    def speakers(self) -> List[Speaker]:
        return self.session.registry.speakers

    def queued_speakers(self) -> List[Speaker]:
        registry = self.session.registry
        return [registry.get_speaker(i) for i in self.session.queue]

    def current_speaker(self) -> Speaker:
        return self.session.queue.current_speaker(self.session.registry)

    def next_speaker(self) -> Speaker:
        return self.session.queue.next_speaker(self.session.registry)

    # Speeches

    def speeches(self) -> List[Speech]:
        return self.session.speeches.speeches

    def remove_speech(self, position: int) -> Speech:
        return self.session.speeches.remove(position)

    def reassign_speech_category(self, position: int, category: str) -> Speech:
        return self.session.speeches.reassign_category(position, category)

    def total_for(self, category: str) -> float:
        return self.session.speeches.total_for(category)

    def count_for(self, category: str) -> int:
        return self.session.speeches.count_for(category)

    # Categories

    def categories_text(self) -> str:
        return join_categories(self.session.categories)

    def set_categories_text(self, text: str) -> None:
        self.session.categories = split_categories(text)

    def category_choices(self) -> List[str]:
        seen: List[str] = []
        for category in self.session.categories:
            if category and category not in seen:
                seen.append(category)
        return seen

    def category_totals(self) -> List[CategoryTotal]:
        return self.session.speeches.totals(self.category_choices())

    # Session-wide actions

    def clear_all(self, confirm: Callable[[], bool]) -> bool:
        if not confirm():
            return False
        self.session.timer.reset()
        self.session.speeches.clear()
        logger.info("Timer and speeches cleared")
        return True

    def export_text(self) -> str:
        return self.session.speeches.export_as_text()

    def export_to_file(self, path: str) -> threading.Thread:
        return export_text_async(path, self.export_text())
