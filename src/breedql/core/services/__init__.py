"""Domain services for breedql."""

from breedql.core.services.batch_cache import BatchCache
from breedql.core.services.breed_loader import (
    FAVORITE_BREEDS,
    FLUFFY_BREEDS,
    BreedLoader,
)
from breedql.core.services.pagination import (
    apply_cursors_to_edges,
    edges_to_return,
    paginate,
    validate_pagination_arguments,
)

__all__ = [
    "BatchCache",
    "BreedLoader",
    "FAVORITE_BREEDS",
    "FLUFFY_BREEDS",
    # Pagination
    "apply_cursors_to_edges",
    "edges_to_return",
    "paginate",
    "validate_pagination_arguments",
]
