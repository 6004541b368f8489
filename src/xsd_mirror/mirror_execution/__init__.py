"""Mirror run exports."""

from .mirror_contracts import MirrorOutcome, MirrorRequest
from .mirror_run_use_case import MirrorRunError, execute_schema_mirror_run

__all__ = [
    "MirrorRequest",
    "MirrorOutcome",
    "MirrorRunError",
    "execute_schema_mirror_run",
]
