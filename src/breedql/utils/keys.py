"""Cache key identity utilities."""

from collections.abc import Hashable, Mapping, Set
from dataclasses import fields, is_dataclass
from typing import Any

from cachetools.keys import hashkey  # type: ignore[import-untyped]


def canonical_key(key: Any) -> Hashable:
    """Derive a hashable identity for a cache key.

    Scalars are their own identity. Structured keys (mappings and
    dataclass instances) are keyed by their fields sorted by name, so two
    keys with equal field values share an identity whatever order the
    fields were given in. Field names keep their type: ``{1: "a"}`` and
    ``{"1": "a"}`` are different keys. Mappings, dataclasses, sequences and
    sets are tagged with their kind, so an empty mapping never matches an
    empty list.

    Args:
        key: The lookup key.

    Returns:
        A hashable value; equal for identity-equal keys.

    Example:
        >>> canonical_key({"name": "husky", "limit": 10}) == canonical_key(
        ...     {"limit": 10, "name": "husky"}
        ... )
        True
    """
    if isinstance(key, Mapping):
        return _structured("mapping", key)
    if is_dataclass(key) and not isinstance(key, type):
        values = {f.name: getattr(key, f.name) for f in fields(key)}
        return _structured(("dataclass", type(key).__qualname__), values)
    if isinstance(key, (list, tuple)):
        return hashkey("sequence", *(canonical_key(item) for item in key))
    if isinstance(key, Set):
        return hashkey("set", frozenset(canonical_key(item) for item in key))
    return key


def _structured(kind: Hashable, values: Mapping[Any, Any]) -> Hashable:
    pairs = sorted(
        ((name, canonical_key(value)) for name, value in values.items()),
        key=_field_order,
    )
    return hashkey(kind, *pairs)


def _field_order(pair: tuple[Any, Any]) -> tuple[str, str]:
    # Names of mixed types don't compare; order by type, then repr.
    name = pair[0]
    return type(name).__qualname__, repr(name)
