"""Completed speeches and per-category aggregation."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Iterator, List, Optional

from .models import CategoryTotal, Speech, SpeechNotFound
from .renderer import render_speeches_text

logger = logging.getLogger("turnkeeper")

# Durations are kept at the precision the export writes.
DURATION_DECIMALS = 3


def _normalized(speech: Speech) -> Speech:
    return replace(speech, duration=round(float(speech.duration), DURATION_DECIMALS))


class SpeechLog:
    def __init__(self, speeches: Optional[Iterable[Speech]] = None) -> None:
        self._speeches: List[Speech] = [_normalized(s) for s in speeches or []]

    def __len__(self) -> int:
        return len(self._speeches)

    def __iter__(self) -> Iterator[Speech]:
        return iter(list(self._speeches))

    def __getitem__(self, position: int) -> Speech:
        self._check(position)
        return self._speeches[position]

    @property
    def speeches(self) -> List[Speech]:
        return list(self._speeches)

    def _check(self, position: int) -> None:
        if position < 0 or position >= len(self._speeches):
            raise SpeechNotFound(position, len(self._speeches))

    def record(self, duration: float, category: str) -> Speech:
        speech = _normalized(Speech(duration=duration, category=category))
        self._speeches.append(speech)
        logger.info("Speech recorded: %.3fs (%s)", speech.duration, category)
        return speech

    def remove(self, position: int) -> Speech:
        self._check(position)
        return self._speeches.pop(position)

    def reassign_category(self, position: int, category: str) -> Speech:
        self._check(position)
        speech = replace(self._speeches[position], category=category)
        self._speeches[position] = speech
        return speech

    def clear(self) -> None:
        self._speeches.clear()

    def total_for(self, category: str) -> float:
        return sum(s.duration for s in self._speeches if s.category == category)

    def count_for(self, category: str) -> int:
        return sum(1 for s in self._speeches if s.category == category)

    def totals(self, categories: Iterable[str]) -> List[CategoryTotal]:
        return [
            CategoryTotal(
                category=category,
                count=self.count_for(category),
                total_seconds=self.total_for(category),
            )
            for category in categories
        ]

    def export_as_text(self) -> str:
        return render_speeches_text(self._speeches)
