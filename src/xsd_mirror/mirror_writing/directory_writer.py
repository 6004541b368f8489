"""Filesystem writer for mirrored schema documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class MirrorWriter(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for the write collaborator used by the emitter."""

    def __call__(self, name: str, content: bytes) -> None: ...


class DirectoryMirrorWriter:  # pylint: disable=too-few-public-methods
    """Writes each mirrored document into one destination directory."""

    def __init__(self, destination: Path | str) -> None:
        self._destination = Path(destination)
        self.written_paths: list[Path] = []

    def __call__(self, name: str, content: bytes) -> None:
        self._destination.mkdir(parents=True, exist_ok=True)
        target = self._destination / name
        logger.info("Writing %s", target.resolve())
        target.write_bytes(content)
        self.written_paths.append(target)
