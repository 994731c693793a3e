"""breedql - GraphQL API over the dog breed API.

Demonstrates keeping API-shape translation (schema and resolvers) apart
from data access (loaders and the request wrapper), with Relay cursor
pagination and request-scoped, batched loaders.

Serving the API:
    from breedql.adapters.ariadne import create_app
    from breedql.config import Settings

    app = create_app(Settings(dog_api_url="https://dog.ceo/api"))

    # or: python -m breedql

Using the building blocks directly:
    from breedql import BatchCache, Edge, PaginationArgs, paginate

    async def fetch_users(ids: list[str]) -> list[dict | None]:
        return await db.get_users(ids)

    users = BatchCache(fetch_users)   # one per request
    user = await users.load("1")      # fetched once, then memoized

    edges = [Edge(cursor=c, node=n) for c, n in rows]
    page = paginate(edges, PaginationArgs(first=10, after=cursor))
"""

from breedql.config import Settings
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
from breedql.core.services import (
    BatchCache,
    BreedLoader,
    apply_cursors_to_edges,
    edges_to_return,
    paginate,
    validate_pagination_arguments,
)
from breedql.exceptions import (
    BreedNotFound,
    BreedQLError,
    FetchFailure,
    InvalidArgument,
)
from breedql.infrastructure import DogApiClient, InMemoryFavoriteStore
from breedql.utils import canonical_key

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Configuration
    "Settings",
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
    # Pagination
    "apply_cursors_to_edges",
    "edges_to_return",
    "paginate",
    "validate_pagination_arguments",
    # Batch cache
    "BatchCache",
    "canonical_key",
    # Loaders
    "BreedLoader",
    # Errors
    "BreedQLError",
    "BreedNotFound",
    "FetchFailure",
    "InvalidArgument",
    # Infrastructure implementations
    "DogApiClient",
    "InMemoryFavoriteStore",
]
