"""Favorite store implementations."""

from breedql.infrastructure.stores.memory import InMemoryFavoriteStore

__all__ = [
    "InMemoryFavoriteStore",
]
