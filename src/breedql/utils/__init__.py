"""Shared helpers for breedql."""

from breedql.utils.encoding import encode_cursor, from_global_id, to_global_id
from breedql.utils.keys import canonical_key

__all__ = [
    "canonical_key",
    "encode_cursor",
    "from_global_id",
    "to_global_id",
]
