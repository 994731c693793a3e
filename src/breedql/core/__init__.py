"""Core domain layer for breedql."""

from breedql.core.entities import (
    Breed,
    Connection,
    Edge,
    Image,
    PageInfo,
    PaginationArgs,
    Viewer,
)
from breedql.core.interfaces import IDogApi, IFavoriteStore
from breedql.core.services import BatchCache, BreedLoader, paginate

__all__ = [
    # Entities
    "Breed",
    "Connection",
    "Edge",
    "Image",
    "PageInfo",
    "PaginationArgs",
    "Viewer",
    # Interfaces
    "IDogApi",
    "IFavoriteStore",
    # Services
    "BatchCache",
    "BreedLoader",
    "paginate",
]
