"""Request context construction.

Every request gets its own logger, request wrapper and loaders, so loader
caches never leak between requests or viewers. Only the HTTP connection
pool and the favorite store are shared, and both are passed in.

Resolvers reach the loaders through the GraphQL context:

    breed = await info.context.loaders.breeds.load("husky")

Nothing here is specific to GraphQL: a REST layer could build the same
context and call the same loaders.
"""

import logging
import uuid
from dataclasses import dataclass

import httpx

from breedql.core.entities.breed import Viewer
from breedql.core.interfaces.dog_api import IDogApi
from breedql.core.interfaces.favorite_store import IFavoriteStore
from breedql.core.services.breed_loader import BreedLoader
from breedql.infrastructure.http.dog_api import DEFAULT_BASE_URL, DogApiClient
from breedql.log import request_logger


@dataclass
class Loaders:
    """Container for all request-scoped loaders."""

    breeds: BreedLoader


@dataclass
class RequestContext:
    """Everything a resolver may use while handling one request."""

    viewer: Viewer
    request_id: str
    logger: logging.LoggerAdapter  # type: ignore[type-arg]
    request: IDogApi
    loaders: Loaders


def create_loaders(api: IDogApi, favorites: IFavoriteStore) -> Loaders:
    """Factory for request-scoped loaders.

    Args:
        api: Fetcher for raw breed data.
        favorites: The shared favorite store.

    Returns:
        Loaders with fresh, empty caches.
    """
    return Loaders(breeds=BreedLoader(api, favorites))


def build_context(
    *,
    http_client: httpx.AsyncClient | None = None,
    favorites: IFavoriteStore,
    viewer: Viewer | None = None,
    request_id: str | None = None,
    dog_api_url: str = DEFAULT_BASE_URL,
    api: IDogApi | None = None,
) -> RequestContext:
    """Build the context for one request.

    Args:
        http_client: The shared HTTP client. Required unless ``api`` is given.
        favorites: The shared favorite store.
        viewer: Who the request runs for. Anonymous if None.
        request_id: Id to tag log lines with. Generated if None.
        dog_api_url: Root URL of the dog API.
        api: Use this fetcher instead of a DogApiClient.

    Returns:
        A new RequestContext.
    """
    request_id = request_id or uuid.uuid4().hex
    logger = request_logger(request_id)
    if api is not None:
        request = api
    elif http_client is not None:
        request = DogApiClient(http_client, base_url=dog_api_url, log=logger)
    else:
        raise ValueError("build_context needs an http_client or an api")

    return RequestContext(
        viewer=viewer or Viewer(),
        request_id=request_id,
        logger=logger,
        request=request,
        loaders=create_loaders(request, favorites),
    )
