"""Direct invocation handler.

Runs a GraphQL operation from a plain event dict, for function-as-a-service
platforms invoked directly rather than through an HTTP gateway:

    {
        "query": "query GetBreeds { breeds { edges { node { id } } } }",
        "variables": {},
        "operationName": "GetBreeds",
        "context": {"viewer": {"id": "42"}, "requestId": "abc"}
    }
"""

import asyncio
from collections.abc import Callable
from typing import Any

import httpx
from ariadne import graphql

from breedql.adapters.ariadne.errors import format_error
from breedql.adapters.ariadne.schema import schema
from breedql.config import Settings
from breedql.context import build_context
from breedql.core.entities.breed import Viewer
from breedql.core.interfaces.dog_api import IDogApi
from breedql.core.interfaces.favorite_store import IFavoriteStore
from breedql.infrastructure.stores.memory import InMemoryFavoriteStore
from breedql.log import configure_logging


async def handle_invocation(
    event: dict[str, Any],
    *,
    favorites: IFavoriteStore,
    http_client: httpx.AsyncClient | None = None,
    api: IDogApi | None = None,
    settings: Settings | None = None,
) -> dict[str, Any]:
    """Execute the GraphQL operation described by ``event``.

    Args:
        event: Dict with ``query`` and optional ``variables``,
            ``operationName`` and ``context``.
        favorites: The favorite store.
        http_client: HTTP client for the dog API.
        api: Fetcher to use instead of the HTTP client.
        settings: Settings to use. Defaults apply if None.

    Returns:
        The GraphQL result, with ``data`` and possibly ``errors``.
    """
    settings = settings or Settings()
    event_context = event.get("context") or {}
    viewer = event_context.get("viewer") or {}

    context = build_context(
        http_client=http_client,
        api=api,
        favorites=favorites,
        viewer=Viewer(id=viewer.get("id")),
        request_id=event_context.get("requestId"),
        dog_api_url=settings.dog_api_url,
    )
    data = {
        "query": event.get("query"),
        "variables": event.get("variables"),
        "operationName": event.get("operationName"),
    }

    _success, result = await graphql(
        schema,
        data,
        context_value=context,
        error_formatter=format_error,
        debug=settings.debug,
    )
    return result


def make_handler(
    favorites: IFavoriteStore | None = None,
    settings: Settings | None = None,
) -> Callable[[dict[str, Any], Any], dict[str, Any]]:
    """Create a synchronous ``handler(event, context)`` entry point.

    The favorite store lives as long as the returned handler, i.e. as long
    as the warm function instance.
    """
    settings = settings or Settings.from_env()
    if favorites is None:
        favorites = InMemoryFavoriteStore()
    configure_logging(settings.log_level)

    async def run(event: dict[str, Any]) -> dict[str, Any]:
        async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
            return await handle_invocation(
                event, favorites=favorites, http_client=client, settings=settings
            )

    def handler(event: dict[str, Any], invocation_context: Any = None) -> dict[str, Any]:
        return asyncio.run(run(event))

    return handler
