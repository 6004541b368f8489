"""Deterministic local filename allocation for mirrored schemas."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import PurePosixPath
from urllib.parse import urlsplit

from xsd_mirror.schema_references.url_resolution import NETWORK_SCHEMES

FALLBACK_NAME = "schema.xsd"


def allocate_local_name(url: str, assigned_names: Mapping[str, str]) -> str:
    """Return a filename for `url` that no other URL owns in `assigned_names`.

    The shortest candidate is the last path segment. Each collision with a
    different URL retries with one more ancestor directory prefixed, path
    separators flattened to `_`. Network URLs finally fall back to the host
    prefixed name. When every candidate is taken a numeric suffix is added.
    A URL that already owns a name gets that same name back.
    """
    for name, owner in assigned_names.items():
        if owner == url:
            return name

    first_candidate = None
    for candidate in _candidate_names(url):
        if not candidate:
            continue
        if first_candidate is None:
            first_candidate = candidate
        if assigned_names.get(candidate, url) == url:
            return candidate

    return _suffixed_name(first_candidate or FALLBACK_NAME, url, assigned_names)


def _candidate_names(url: str) -> Iterator[str]:
    parts = urlsplit(url)
    segments = parts.path.split("/")
    while segments and not segments[0]:
        segments.pop(0)

    for depth in range(1, len(segments) + 1):
        yield _flatten("/".join(segments[-depth:]))

    if parts.scheme.lower() in NETWORK_SCHEMES and parts.netloc:
        yield _flatten("/".join([parts.netloc, *segments]))


def _flatten(relative_path: str) -> str:
    return relative_path.replace("/", "_").replace("\\", "_")


def _suffixed_name(base: str, url: str, assigned_names: Mapping[str, str]) -> str:
    suffix = PurePosixPath(base).suffix
    stem = base[: -len(suffix)] if suffix else base
    counter = 2
    while True:
        candidate = f"{stem}-{counter}{suffix}"
        if assigned_names.get(candidate, url) == url:
            return candidate
        counter += 1
