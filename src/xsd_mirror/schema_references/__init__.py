"""Schema reference exports."""

from .reference_extraction import UnparsableSchemaError, extract_reference_mentions
from .reference_models import ReferenceMention
from .url_resolution import (
    MalformedReferenceError,
    is_network_url,
    resolve_schema_location,
    validate_root_url,
)

__all__ = [
    "MalformedReferenceError",
    "ReferenceMention",
    "UnparsableSchemaError",
    "extract_reference_mentions",
    "is_network_url",
    "resolve_schema_location",
    "validate_root_url",
]
