"""Session persistence."""

from __future__ import annotations

import json
import logging
import os
from typing import Callable, List

from .controller import Session
from .models import Speaker, Speech
from .registry import SpeakerRegistry
from .speech_log import SpeechLog
from .timer import Timer
from .turn_queue import TurnQueue

logger = logging.getLogger("turnkeeper")

SCHEMA_VERSION = 1


def session_to_dict(session: Session) -> dict:
    return {
        "version": SCHEMA_VERSION,
        "timer": {
            "running": session.timer.is_running,
            "accumulated": session.timer.elapsed(),
        },
        "speakers": [
            {"id": s.id, "name": s.name, "category": s.category}
            for s in session.registry
        ],
        "next_speaker_id": session.registry.next_id,
        "queue": session.queue.speaker_ids,
        "speeches": [
            {"duration": s.duration, "category": s.category}
            for s in session.speeches
        ],
        "categories": list(session.categories),
        "new_speaker_name": session.new_speaker_name,
        "new_speaker_category": session.new_speaker_category,
    }


def _load_speakers(items: List[dict]) -> List[Speaker]:
    # Missing or repeated ids get the first id nobody else claims, so every
    # speaker stays addressable.
    claimed = {int(item["id"]) for item in items if "id" in item}
    assigned: set = set()
    speakers: List[Speaker] = []
    for position, item in enumerate(items):
        speaker_id = int(item["id"]) if "id" in item else position
        if speaker_id in assigned or ("id" not in item and speaker_id in claimed):
            speaker_id = 0
            while speaker_id in claimed or speaker_id in assigned:
                speaker_id += 1
        assigned.add(speaker_id)
        speakers.append(
            Speaker(
                id=speaker_id,
                name=str(item.get("name", "")),
                category=str(item.get("category", "")),
            )
        )
    return speakers


def session_from_dict(data: dict, clock: Callable[[], float] | None = None) -> Session:
    timer_data = data.get("timer") or {}
    timer_kwargs = {}
    if clock is not None:
        timer_kwargs["clock"] = clock
    timer = Timer(
        accumulated=float(timer_data.get("accumulated", 0.0)),
        running=bool(timer_data.get("running", False)),
        **timer_kwargs,
    )
    speakers = _load_speakers(data.get("speakers", []))
    registry = SpeakerRegistry(speakers, next_id=int(data.get("next_speaker_id", 0)))
    queue = TurnQueue(int(i) for i in data.get("queue", []))
    queue.validate(registry)
    speeches = SpeechLog(
        Speech(
            duration=float(item.get("duration", 0.0)),
            category=str(item.get("category", "")),
        )
        for item in data.get("speeches", [])
    )
    return Session(
        timer=timer,
        registry=registry,
        queue=queue,
        speeches=speeches,
        categories=[str(c) for c in data.get("categories", [])],
        new_speaker_name=str(data.get("new_speaker_name", "")),
        new_speaker_category=str(data.get("new_speaker_category", "")),
    )


def save_session(path: str, session: Session) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(session_to_dict(session), handle, indent=2)


def load_session(path: str, clock: Callable[[], float] | None = None) -> Session:
    """Load a saved session, or a fresh one when the file is missing or unreadable."""
    if not os.path.exists(path):
        return Session()
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = json.load(handle)
        if not isinstance(data, dict):
            raise ValueError("session file does not hold an object")
        return session_from_dict(data, clock=clock)
    except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
        logger.warning("Session load failed (%s), starting empty: %s", path, exc)
        return Session()
