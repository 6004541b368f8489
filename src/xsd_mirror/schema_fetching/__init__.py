"""Schema fetching exports."""

from .schema_sources import SchemaFetcher, UnreachableSchemaError, UrlSchemaFetcher

__all__ = [
    "SchemaFetcher",
    "UnreachableSchemaError",
    "UrlSchemaFetcher",
]
