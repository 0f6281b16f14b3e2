"""Text rendering for durations, categories and speech exports."""

from __future__ import annotations

import csv
import io
from typing import Iterable, List, Optional

from .models import CategoryTotal, Speaker, Speech


def _clean_text(value: str) -> str:
    return " ".join(value.split())


def format_clock(seconds: float) -> str:
    total = int(max(0.0, seconds))
    hours, rest = divmod(total, 3600)
    mins, secs = divmod(rest, 60)
    if hours:
        return f"{hours}:{mins:02d}:{secs:02d}"
    return f"{mins:02d}:{secs:02d}"


def format_hms(seconds: float) -> str:
    total = int(max(0.0, seconds))
    hours, rest = divmod(total, 3600)
    mins, secs = divmod(rest, 60)
    return f"{hours}h{mins:02d}m{secs:02d}s"


def split_categories(text: str) -> List[str]:
    # Blank lines are kept so the edit box survives a round trip.
    return text.split("\n")


def join_categories(categories: Iterable[str]) -> str:
    return "\n".join(categories)


def render_speeches_text(speeches: Iterable[Speech]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    for speech in speeches:
        writer.writerow([f"{speech.duration:.3f}", speech.category])
    return buffer.getvalue()


def parse_speeches_text(text: str) -> List[Speech]:
    speeches: List[Speech] = []
    for row in csv.reader(io.StringIO(text)):
        if not row:
            continue
        try:
            duration = float(row[0])
        except ValueError as exc:
            raise ValueError(f"Invalid duration in export line: {row!r}") from exc
        category = row[1] if len(row) > 1 else ""
        speeches.append(Speech(duration=duration, category=category))
    return speeches


def render_total_line(total: CategoryTotal) -> str:
    label = total.category or "(uncategorized)"
    return f"{total.count} speeches - {label}: {format_hms(total.total_seconds)}"


def render_session_summary(
    elapsed_seconds: float,
    running: bool,
    current: Speaker,
    upcoming: Speaker,
    queued: List[Speaker],
    speakers: List[Speaker],
    speeches: List[Speech],
    totals: List[CategoryTotal],
    title: Optional[str] = None,
) -> str:
    lines: List[str] = []
    if title:
        lines.append(f"# {_clean_text(title)}")
        lines.append("")
    state = "running" if running else "stopped"
    lines.append(f"- Timer: {format_clock(elapsed_seconds)} ({state})")
    lines.append(f"- Current speaker: {_clean_text(current.name)}")
    lines.append(f"- Next speaker: {_clean_text(upcoming.name)}")
    lines.append("")
    lines.append("## Queue")
    lines.append("")
    for index, speaker in enumerate(queued, start=1):
        lines.append(f"{index}. {_clean_text(speaker.name)}")
    lines.append("")
    lines.append("## Speakers")
    lines.append("")
    for speaker in speakers:
        category = f" [{_clean_text(speaker.category)}]" if speaker.category else ""
        lines.append(f"- {_clean_text(speaker.name)}{category}")
    lines.append("")
    lines.append(f"## Speeches ({len(speeches)})")
    lines.append("")
    for speech in speeches:
        lines.append(f"- {format_clock(speech.duration)} {_clean_text(speech.category)}".rstrip())
    lines.append("")
    if totals:
        lines.append("## Time per category")
        lines.append("")
        for total in totals:
            lines.append(f"- {render_total_line(total)}")
        lines.append("")
    return "\n".join(lines)
