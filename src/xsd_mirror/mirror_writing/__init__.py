"""Mirror writing exports."""

from .directory_writer import DirectoryMirrorWriter, MirrorWriter
from .reference_rewriter import emit_schema_graph, rewrite_references

__all__ = [
    "DirectoryMirrorWriter",
    "MirrorWriter",
    "emit_schema_graph",
    "rewrite_references",
]
