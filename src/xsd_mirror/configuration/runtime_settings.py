"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_TIMEOUT_SECONDS = 30
DEFAULT_USER_AGENT = "xsd-mirror"


@dataclass(frozen=True)
class FetchSettings:
    """Transport settings applied when downloading schema documents."""

    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    user_agent: str = DEFAULT_USER_AGENT
    verify_tls: bool = True


@dataclass(frozen=True)
class MirrorSettings:
    """Top-level configuration aggregate."""

    path: Path | None = None
    fetch: FetchSettings = field(default_factory=FetchSettings)
