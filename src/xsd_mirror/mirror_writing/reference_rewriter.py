"""Rewriting of schema references to local filenames and emission of the mirror."""

from __future__ import annotations

import logging
import re
from xml.sax.saxutils import escape, unescape

from xsd_mirror.schema_graph.graph_models import SchemaGraph, SchemaNode

from .directory_writer import MirrorWriter

logger = logging.getLogger(__name__)

SCHEMA_LOCATION_PATTERN = re.compile(r"\bschemaLocation(\s*=\s*)([\"'])(.*?)\2", re.DOTALL)

_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}
_UNESCAPE_ENTITIES = {"&quot;": '"', "&apos;": "'"}


def rewrite_references(node: SchemaNode) -> str:
    """Return the node content with network references pointing at local names.

    Every `schemaLocation` attribute value of the raw text is visited once and
    looked up among the node references, so a replacement never feeds into
    another. Everything outside the rewritten values is preserved byte for
    byte. References to `file` URLs keep their original literal.
    """
    if node.raw_content is None:
        raise ValueError(f"Schema {node.source_url} was never fetched.")

    matched: set[str] = set()

    def _replace(match: re.Match[str]) -> str:
        separator, quote, raw_value = match.groups()
        literal = unescape(raw_value, _UNESCAPE_ENTITIES)
        target = node.references.get(literal)
        if target is None:
            return match.group(0)
        matched.add(literal)
        if not target.is_network:
            return match.group(0)
        local_name = escape(target.local_name, {quote: _QUOTE_ENTITIES[quote]})
        return f"schemaLocation{separator}{quote}{local_name}{quote}"

    content = SCHEMA_LOCATION_PATTERN.sub(_replace, node.raw_content)

    for literal, target in node.references.items():
        if target.is_network and literal not in matched:
            logger.debug(
                "schemaLocation %r not found in %s text, left unchanged", literal, node.source_url
            )
    return content


def emit_schema_graph(graph: SchemaGraph, write_file: MirrorWriter) -> int:
    """Write every node of a completed graph through `write_file`.

    Returns the number of documents written.
    """
    written = 0
    for node in graph:
        write_file(node.local_name, rewrite_references(node).encode("utf-8"))
        written += 1
    return written
