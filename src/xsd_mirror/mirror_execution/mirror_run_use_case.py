"""Mirror run use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from xsd_mirror.configuration import (
    ConfigurationError,
    FetchSettings,
    MirrorSettings,
    load_configuration,
)
from xsd_mirror.mirror_writing import DirectoryMirrorWriter, emit_schema_graph
from xsd_mirror.schema_fetching import UnreachableSchemaError, UrlSchemaFetcher
from xsd_mirror.schema_graph import SchemaGraph, build_schema_graph
from xsd_mirror.schema_references import MalformedReferenceError, UnparsableSchemaError

from .mirror_contracts import MirrorOutcome, MirrorRequest

logger = logging.getLogger(__name__)

FetcherFactory = Callable[[FetchSettings], UrlSchemaFetcher]

_RESOLUTION_ERRORS = (MalformedReferenceError, UnparsableSchemaError, UnreachableSchemaError)


class MirrorRunError(Exception):
    """Raised when a mirror run cannot be completed."""


def execute_schema_mirror_run(
    request: MirrorRequest,
    *,
    fetcher_factory: FetcherFactory | None = None,
) -> MirrorOutcome:
    """Fetch the whole schema graph, then write the rewritten mirror."""
    resolved_fetcher_factory = fetcher_factory or UrlSchemaFetcher
    if not request.urls:
        raise MirrorRunError("At least one schema URL is required.")

    settings = _load_settings(request.config_path)
    destination = Path(request.destination).resolve()
    graph = _build_graph(request.urls, settings, resolved_fetcher_factory)

    writer = DirectoryMirrorWriter(destination)
    try:
        emit_schema_graph(graph, writer)
    except OSError as exc:
        raise MirrorRunError(_describe(exc)) from exc

    logger.info("Mirrored %d schema(s) into %s", len(writer.written_paths), destination)
    return MirrorOutcome(
        destination=destination,
        written_paths=tuple(writer.written_paths),
        root_names=tuple(node.local_name for node in graph.roots),
    )


def _load_settings(config_path: str | None) -> MirrorSettings:
    try:
        return load_configuration(config_path)
    except (ConfigurationError, OSError) as exc:
        raise MirrorRunError(_describe(exc)) from exc


def _build_graph(
    urls: tuple[str, ...], settings: MirrorSettings, fetcher_factory: FetcherFactory
) -> SchemaGraph:
    try:
        with fetcher_factory(settings.fetch) as fetcher:
            return build_schema_graph(urls, fetcher)
    except _RESOLUTION_ERRORS as exc:
        raise MirrorRunError(_describe(exc)) from exc


def _describe(exc: Exception) -> str:
    return f"{type(exc).__name__}: {exc}"
