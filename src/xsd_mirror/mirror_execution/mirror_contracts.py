"""Mirror run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class MirrorRequest:
    """Input contract for mirroring one set of root schemas."""

    destination: str
    urls: tuple[str, ...]
    config_path: str | None = None


@dataclass(frozen=True)
class MirrorOutcome:
    """Output contract for one completed mirror run."""

    destination: Path
    written_paths: tuple[Path, ...]
    root_names: tuple[str, ...] = ()

    @property
    def schema_count(self) -> int:
        return len(self.written_paths)
