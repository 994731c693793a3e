"""Core interfaces (Protocol classes) for breedql."""

from breedql.core.interfaces.dog_api import IDogApi
from breedql.core.interfaces.favorite_store import IFavoriteStore

__all__ = [
    "IDogApi",
    "IFavoriteStore",
]
