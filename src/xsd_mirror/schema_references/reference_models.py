"""Schema reference entities."""

from __future__ import annotations

from dataclasses import dataclass

INCLUDE_ELEMENT = "include"
IMPORT_ELEMENT = "import"
REFERENCE_ELEMENTS = (INCLUDE_ELEMENT, IMPORT_ELEMENT)


@dataclass(frozen=True)
class ReferenceMention:
    """One `include`/`import` declaration found in a schema document.

    `literal` is the `schemaLocation` value exactly as written; rewriting
    operates on this text, so it is never normalized.
    """

    literal: str
    element: str
