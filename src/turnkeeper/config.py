"""Configuration handling."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List
import yaml


@dataclass
class DisplayConfig:
    refresh_ms: int = 100
    font_size: int = 24


@dataclass
class SessionConfig:
    state_file: str = "turnkeeper_state.json"
    min_speech_seconds: float = 1.0
    default_categories: List[str] = field(default_factory=list)


@dataclass
class Config:
    base_dir: str = ""
    debug_logging: bool = False
    display: DisplayConfig = field(default_factory=DisplayConfig)
    session: SessionConfig = field(default_factory=SessionConfig)


def load_config(path: str) -> Config:
    with open(path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}

    display = DisplayConfig(**data.get("display", {}))
    session = SessionConfig(**data.get("session", {}))
    if session.min_speech_seconds <= 0:
        raise ValueError("session.min_speech_seconds must be positive")

    return Config(
        base_dir=data.get("base_dir", ""),
        debug_logging=bool(data.get("debug_logging", False)),
        display=display,
        session=session,
    )


def save_config(path: str, config: Config) -> None:
    data = {
        "base_dir": config.base_dir,
        "debug_logging": config.debug_logging,
        "display": {
            "refresh_ms": config.display.refresh_ms,
            "font_size": config.display.font_size,
        },
        "session": {
            "state_file": config.session.state_file,
            "min_speech_seconds": config.session.min_speech_seconds,
            "default_categories": list(config.session.default_categories),
        },
    }
    with open(path, "w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False)
