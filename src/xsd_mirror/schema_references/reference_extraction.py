"""Extraction of `include`/`import` references from schema documents."""

from __future__ import annotations

import logging

from lxml import etree

from .reference_models import REFERENCE_ELEMENTS, ReferenceMention

logger = logging.getLogger(__name__)

SCHEMA_ROOT_ELEMENT = "schema"
SCHEMA_LOCATION_ATTRIBUTE = "schemaLocation"


class UnparsableSchemaError(Exception):
    """Raised when fetched content is not a well-formed schema document."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


def extract_reference_mentions(
    content: str, *, source_url: str | None = None
) -> tuple[ReferenceMention, ...]:
    """Return the `include`/`import` mentions of a schema in document order."""
    root = _parse_schema_root(content, source_url)
    label = source_url or "<schema>"

    mentions: list[ReferenceMention] = []
    for child in root.iterchildren(etree.Element):
        element = etree.QName(child).localname
        if element not in REFERENCE_ELEMENTS:
            continue
        literal = child.get(SCHEMA_LOCATION_ATTRIBUTE)
        if literal is None:
            logger.warning("%s defines one %s but no schemaLocation", label, element)
            continue
        mentions.append(ReferenceMention(literal=literal, element=element))
    return tuple(mentions)


def _parse_schema_root(content: str, source_url: str | None) -> etree._Element:
    label = source_url or "<schema>"
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(content.encode("utf-8"), parser=parser)
    except etree.XMLSyntaxError as exc:
        raise UnparsableSchemaError(f"Invalid XML in {label}: {exc}", url=source_url) from exc

    if etree.QName(root).localname != SCHEMA_ROOT_ELEMENT:
        raise UnparsableSchemaError(
            f"{label} has root element {etree.QName(root).localname!r}, expected 'schema'",
            url=source_url,
        )
    return root
