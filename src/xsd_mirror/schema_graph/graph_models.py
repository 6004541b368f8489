"""Schema graph entities."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from xsd_mirror.schema_references.url_resolution import is_network_url


@dataclass(eq=False)
class SchemaNode:
    """One schema document of the mirror, identified by its canonical URL."""

    source_url: str
    local_name: str
    raw_content: str | None = None
    references: dict[str, SchemaNode] = field(default_factory=dict, repr=False)

    @property
    def is_network(self) -> bool:
        return is_network_url(self.source_url)

    @property
    def is_populated(self) -> bool:
        return self.raw_content is not None

    def link(self, literal: str, target: SchemaNode) -> None:
        """Record that `literal` (as written in this document) points at `target`."""
        self.references.setdefault(literal, target)


class SchemaGraph:
    """Owner of every `SchemaNode` created during one run, keyed by canonical URL."""

    def __init__(self) -> None:
        self._nodes: dict[str, SchemaNode] = {}
        self._assigned_names: dict[str, str] = {}
        self._root_urls: list[str] = []

    def __contains__(self, url: object) -> bool:
        return url in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[SchemaNode]:
        return iter(tuple(self._nodes.values()))

    def get(self, url: str) -> SchemaNode | None:
        return self._nodes.get(url)

    def add(self, node: SchemaNode) -> None:
        if node.source_url in self._nodes:
            raise ValueError(f"Schema already registered: {node.source_url}")
        owner = self._assigned_names.get(node.local_name)
        if owner is not None:
            raise ValueError(f"Local name {node.local_name!r} already assigned to {owner}")
        self._nodes[node.source_url] = node
        self._assigned_names[node.local_name] = node.source_url

    def mark_root(self, node: SchemaNode) -> None:
        if node.source_url not in self._root_urls:
            self._root_urls.append(node.source_url)

    @property
    def roots(self) -> tuple[SchemaNode, ...]:
        return tuple(self._nodes[url] for url in self._root_urls)

    @property
    def assigned_names(self) -> Mapping[str, str]:
        """Read-only view of local name -> owning URL."""
        return MappingProxyType(self._assigned_names)
