"""Schema graph builder tests."""

from __future__ import annotations

from collections.abc import Mapping

import pytest
from xsd_mirror.schema_fetching.schema_sources import UnreachableSchemaError
from xsd_mirror.schema_graph.graph_builder import build_schema_graph
from xsd_mirror.schema_references import MalformedReferenceError, UnparsableSchemaError


class _FakeFetcher:  # pylint: disable=too-few-public-methods
    def __init__(self, documents: Mapping[str, str | bytes]) -> None:
        self._documents = documents
        self.calls: list[str] = []

    def fetch(self, url: str) -> bytes:
        self.calls.append(url)
        if url not in self._documents:
            raise UnreachableSchemaError(f"Failed to fetch {url}: 404", url=url)
        document = self._documents[url]
        return document.encode("utf-8") if isinstance(document, str) else document


def _schema(*locations: str) -> str:
    imports = "".join(
        f'  <xsd:import namespace="urn:{index}" schemaLocation="{location}"/>\n'
        for index, location in enumerate(locations)
    )
    return (
        '<xsd:schema xmlns:xsd="http://www.w3.org/2001/XMLSchema">\n'
        f"{imports}"
        '  <xsd:element name="e" type="xsd:string"/>\n'
        "</xsd:schema>\n"
    )


def test_self_including_schema_builds_single_node() -> None:
    fetcher = _FakeFetcher({"http://x/a.xsd": _schema("a.xsd")})

    graph = build_schema_graph(["http://x/a.xsd"], fetcher)

    node = graph.get("http://x/a.xsd")
    assert len(graph) == 1
    assert "http://x/a.xsd" in graph
    assert fetcher.calls == ["http://x/a.xsd"]
    assert node is not None
    assert node.references["a.xsd"] is node


def test_mutually_including_schemas_terminate() -> None:
    fetcher = _FakeFetcher(
        {
            "http://x/a.xsd": _schema("b.xsd"),
            "http://x/b.xsd": _schema("http://x/a.xsd"),
        }
    )

    graph = build_schema_graph(["http://x/a.xsd"], fetcher)

    first = graph.get("http://x/a.xsd")
    second = graph.get("http://x/b.xsd")
    assert fetcher.calls == ["http://x/a.xsd", "http://x/b.xsd"]
    assert first.references["b.xsd"] is second
    assert second.references["http://x/a.xsd"] is first


def test_diamond_reference_shares_one_node_and_one_fetch() -> None:
    fetcher = _FakeFetcher(
        {
            "http://x/p.xsd": _schema("q.xsd", "common/r.xsd"),
            "http://x/q.xsd": _schema("http://x/common/r.xsd"),
            "http://x/common/r.xsd": _schema(),
        }
    )

    graph = build_schema_graph(["http://x/p.xsd"], fetcher)

    p_node = graph.get("http://x/p.xsd")
    q_node = graph.get("http://x/q.xsd")
    assert p_node.references["common/r.xsd"] is q_node.references["http://x/common/r.xsd"]
    assert fetcher.calls.count("http://x/common/r.xsd") == 1
    assert len(graph) == 3


def test_roots_sharing_a_dependency_fetch_it_once() -> None:
    fetcher = _FakeFetcher(
        {
            "http://x/p.xsd": _schema("r.xsd"),
            "http://x/q.xsd": _schema("./r.xsd"),
            "http://x/r.xsd": _schema(),
        }
    )

    graph = build_schema_graph(["http://x/p.xsd", "http://x/q.xsd", "http://x/p.xsd"], fetcher)

    assert sorted(fetcher.calls) == ["http://x/p.xsd", "http://x/q.xsd", "http://x/r.xsd"]
    assert [node.source_url for node in graph.roots] == ["http://x/p.xsd", "http://x/q.xsd"]
    p_references = graph.get("http://x/p.xsd").references
    q_references = graph.get("http://x/q.xsd").references
    assert p_references["r.xsd"] is q_references["./r.xsd"]


def test_traversal_is_depth_first_in_document_order() -> None:
    fetcher = _FakeFetcher(
        {
            "http://x/root.xsd": _schema("a.xsd", "b.xsd"),
            "http://x/a.xsd": _schema("deep/c.xsd"),
            "http://x/deep/c.xsd": _schema(),
            "http://x/b.xsd": _schema(),
        }
    )

    build_schema_graph(["http://x/root.xsd"], fetcher)

    assert fetcher.calls == [
        "http://x/root.xsd",
        "http://x/a.xsd",
        "http://x/deep/c.xsd",
        "http://x/b.xsd",
    ]


def test_sibling_schemas_with_same_filename_get_distinct_names() -> None:
    fetcher = _FakeFetcher(
        {
            "http://x/root.xsd": _schema("a/types.xsd", "b/types.xsd"),
            "http://x/a/types.xsd": _schema("../b/types.xsd"),
            "http://x/b/types.xsd": _schema(),
        }
    )

    graph = build_schema_graph(["http://x/root.xsd"], fetcher)

    names = [node.local_name for node in graph]
    assert len(names) == len(set(names)) == 3
    assert graph.get("http://x/a/types.xsd").local_name == "types.xsd"
    assert graph.get("http://x/b/types.xsd").local_name == "b_types.xsd"


def test_distinct_literals_for_same_target_are_kept() -> None:
    fetcher = _FakeFetcher(
        {
            "http://x/a/root.xsd": _schema("../common/c.xsd", "http://x/common/c.xsd"),
            "http://x/common/c.xsd": _schema(),
        }
    )

    graph = build_schema_graph(["http://x/a/root.xsd"], fetcher)

    references = graph.get("http://x/a/root.xsd").references
    assert list(references) == ["../common/c.xsd", "http://x/common/c.xsd"]
    assert references["../common/c.xsd"] is references["http://x/common/c.xsd"]
    assert fetcher.calls.count("http://x/common/c.xsd") == 1


def test_unreachable_reference_aborts_the_build() -> None:
    fetcher = _FakeFetcher({"http://x/root.xsd": _schema("missing.xsd", "never.xsd")})

    with pytest.raises(UnreachableSchemaError) as excinfo:
        build_schema_graph(["http://x/root.xsd"], fetcher)

    assert excinfo.value.url == "http://x/missing.xsd"
    assert "http://x/never.xsd" not in fetcher.calls


def test_non_utf8_content_is_unparsable() -> None:
    fetcher = _FakeFetcher({"http://x/root.xsd": b"<schema>\xff</schema>"})

    with pytest.raises(UnparsableSchemaError, match="not valid UTF-8"):
        build_schema_graph(["http://x/root.xsd"], fetcher)


def test_malformed_reference_aborts_the_build() -> None:
    fetcher = _FakeFetcher({"http://x/root.xsd": _schema("ftp://x/other.xsd")})

    with pytest.raises(MalformedReferenceError):
        build_schema_graph(["http://x/root.xsd"], fetcher)


def test_deep_include_chain_does_not_exhaust_the_stack() -> None:
    depth = 3000
    documents = {f"http://x/s{index}.xsd": _schema(f"s{index + 1}.xsd") for index in range(depth)}
    documents[f"http://x/s{depth}.xsd"] = _schema()
    fetcher = _FakeFetcher(documents)

    graph = build_schema_graph(["http://x/s0.xsd"], fetcher)

    assert len(graph) == depth + 1
    assert fetcher.calls[:3] == ["http://x/s0.xsd", "http://x/s1.xsd", "http://x/s2.xsd"]
    assert fetcher.calls[-1] == f"http://x/s{depth}.xsd"
