"""Storage, naming and export utilities."""

from __future__ import annotations

import logging
import os
import threading
from datetime import datetime

logger = logging.getLogger("turnkeeper")


def timestamp_slug(dt: datetime | None = None) -> str:
    now = dt or datetime.now()
    return now.strftime("%Y-%m-%d")


def build_export_basename(title: str, dt: datetime | None = None) -> str:
    slug = title.strip().replace(" ", "-") if title else "Speeches"
    return f"{timestamp_slug(dt)}--{slug}"


def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def ensure_structure(base_dir: str) -> dict:
    root = base_dir or os.getcwd()
    paths = {
        "root": root,
        "sessions": os.path.join(root, "Sessions"),
        "exports": os.path.join(root, "Exports"),
        "logs": os.path.join(root, "Logs"),
    }
    for path in paths.values():
        ensure_dir(path)
    return paths


def write_text(path: str, text: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        ensure_dir(parent)
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def export_text_async(path: str, text: str) -> threading.Thread:
    """Write ``text`` to ``path`` on a daemon thread.

    Nothing is reported back to the caller; a failed write is only logged.
    """

    def _worker() -> None:
        try:
            write_text(path, text)
        except OSError as exc:
            logger.warning("Export to %s failed: %s", path, exc)
            return
        logger.info("Exported speeches: %s", path)

    thread = threading.Thread(target=_worker, daemon=True)
    thread.start()
    return thread
