"""Schema graph exports."""

from .graph_builder import build_schema_graph
from .graph_models import SchemaGraph, SchemaNode
from .local_naming import allocate_local_name

__all__ = [
    "SchemaGraph",
    "SchemaNode",
    "allocate_local_name",
    "build_schema_graph",
]
