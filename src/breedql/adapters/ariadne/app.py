"""ASGI application serving the breedql GraphQL API."""

import logging
from contextlib import asynccontextmanager
from typing import Any

import httpx
from ariadne.asgi import GraphQL
from fastapi import FastAPI, Request

from breedql.adapters.ariadne.errors import format_error
from breedql.adapters.ariadne.schema import schema
from breedql.config import Settings
from breedql.context import RequestContext, build_context
from breedql.core.entities.breed import Viewer
from breedql.core.interfaces.favorite_store import IFavoriteStore
from breedql.infrastructure.stores.memory import InMemoryFavoriteStore
from breedql.log import configure_logging

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
VIEWER_ID_HEADER = "X-Viewer-ID"


def create_app(
    settings: Settings | None = None,
    *,
    favorites: IFavoriteStore | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> FastAPI:
    """Create the ASGI app with GraphQL mounted at ``/graphql``.

    Args:
        settings: Settings to use. Read from the environment if None.
        favorites: Favorite store shared by all requests. In-memory if None.
        http_client: HTTP client shared by all requests. When None, one is
            created and closed with the app.

    Returns:
        The FastAPI application.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    if favorites is None:
        favorites = InMemoryFavoriteStore()
    owns_client = http_client is None
    client = http_client or httpx.AsyncClient(timeout=settings.request_timeout)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Serving breedql against %s", settings.dog_api_url)
        yield
        if owns_client:
            await client.aclose()

    def get_context_value(request: Request, data: Any = None) -> RequestContext:
        viewer_id = request.headers.get(VIEWER_ID_HEADER)
        return build_context(
            http_client=client,
            favorites=favorites,
            viewer=Viewer(id=viewer_id),
            request_id=request.headers.get(REQUEST_ID_HEADER),
            dog_api_url=settings.dog_api_url,
        )

    app = FastAPI(
        title="breedql",
        description="GraphQL API over the dog breed API",
        lifespan=lifespan,
    )

    graphql_app = GraphQL(
        schema,
        context_value=get_context_value,
        error_formatter=format_error,
        debug=settings.debug,
    )
    app.mount("/graphql", graphql_app)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    return app


def main() -> None:
    """Serve the app with uvicorn."""
    import uvicorn

    settings = Settings.from_env()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
