"""Infrastructure layer implementations for breedql."""

from breedql.infrastructure.http import DogApiClient
from breedql.infrastructure.stores import InMemoryFavoriteStore

__all__ = [
    "DogApiClient",
    "InMemoryFavoriteStore",
]
