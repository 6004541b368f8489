"""Recursive construction of the schema graph."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from xsd_mirror.schema_fetching.schema_sources import SchemaFetcher
from xsd_mirror.schema_references import (
    UnparsableSchemaError,
    extract_reference_mentions,
    resolve_schema_location,
    validate_root_url,
)

from .graph_models import SchemaGraph, SchemaNode
from .local_naming import allocate_local_name

logger = logging.getLogger(__name__)


def build_schema_graph(
    root_urls: Sequence[str],
    fetcher: SchemaFetcher,
) -> SchemaGraph:
    """Fetch every root schema and, depth first, every schema it references.

    Each canonical URL is fetched at most once. Any resolution, fetch or
    parse failure propagates and leaves the build incomplete.
    """
    schema_graph = SchemaGraph()
    for root_url in root_urls:
        url = validate_root_url(root_url)
        node = schema_graph.get(url) or _create_node(url, schema_graph)
        schema_graph.mark_root(node)
        if not node.is_populated:
            _descend_from(node, schema_graph, fetcher)
    return schema_graph


def _create_node(url: str, graph: SchemaGraph) -> SchemaNode:
    node = SchemaNode(source_url=url, local_name=allocate_local_name(url, graph.assigned_names))
    graph.add(node)
    logger.debug("Registered %s as %s", url, node.local_name)
    return node


def _descend_from(root: SchemaNode, graph: SchemaGraph, fetcher: SchemaFetcher) -> None:
    # explicit stack, same pre-order as recursive descent
    pending = [root]
    while pending:
        node = pending.pop()
        if node.is_populated:
            continue
        created = _populate_node(node, graph, fetcher)
        pending.extend(reversed(created))


def _populate_node(
    node: SchemaNode, graph: SchemaGraph, fetcher: SchemaFetcher
) -> list[SchemaNode]:
    logger.info("Fetching %s", node.source_url)
    node.raw_content = _decode_payload(fetcher.fetch(node.source_url), node.source_url)

    created: list[SchemaNode] = []
    for mention in extract_reference_mentions(node.raw_content, source_url=node.source_url):
        target_url = resolve_schema_location(mention.literal, node.source_url)
        target = graph.get(target_url)
        if target is None:
            target = _create_node(target_url, graph)
            created.append(target)
        else:
            logger.debug("%s %s already known as %s", mention.element, target_url, target.local_name)
        node.link(mention.literal, target)
    return created


def _decode_payload(payload: bytes, url: str) -> str:
    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise UnparsableSchemaError(f"{url} is not valid UTF-8: {exc}", url=url) from exc
