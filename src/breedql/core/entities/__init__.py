"""Domain entities for breedql."""

from breedql.core.entities.breed import Breed, Image, Viewer
from breedql.core.entities.connection import (
    Connection,
    Edge,
    PageInfo,
    PaginationArgs,
)

__all__ = [
    "Breed",
    "Image",
    "Viewer",
    "Connection",
    "Edge",
    "PageInfo",
    "PaginationArgs",
]
