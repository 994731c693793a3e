"""Tests for request context construction."""

import httpx
import pytest

from breedql import BreedLoader, DogApiClient, Viewer
from breedql.context import build_context, create_loaders


class TestBuildContext:
    """Tests for build_context."""

    def test_uses_given_api(self, fake_api, favorites) -> None:
        """Test building a context over an injected API."""
        context = build_context(favorites=favorites, api=fake_api)

        assert context.request is fake_api
        assert isinstance(context.loaders.breeds, BreedLoader)

    def test_defaults(self, fake_api, favorites) -> None:
        """Test the default viewer and generated request id."""
        context = build_context(favorites=favorites, api=fake_api)

        assert context.viewer == Viewer()
        assert len(context.request_id) == 32

    def test_request_id_and_viewer(self, fake_api, favorites) -> None:
        """Test passing an explicit request id and viewer."""
        context = build_context(
            favorites=favorites,
            api=fake_api,
            viewer=Viewer(id="7"),
            request_id="req-1",
        )

        assert context.viewer.id == "7"
        assert context.request_id == "req-1"
        assert context.logger.extra == {"request_id": "req-1"}

    @pytest.mark.asyncio
    async def test_builds_dog_api_client(self, favorites) -> None:
        """Test that an HTTP client is wrapped in a DogApiClient."""
        async with httpx.AsyncClient() as http:
            context = build_context(http_client=http, favorites=favorites)

        assert isinstance(context.request, DogApiClient)

    def test_needs_http_client_or_api(self, favorites) -> None:
        """Test that a context needs an HTTP client or an API."""
        with pytest.raises(ValueError):
            build_context(favorites=favorites)

    @pytest.mark.asyncio
    async def test_each_context_gets_fresh_loaders(self, fake_api, favorites) -> None:
        """Test that loaders are not shared between requests."""
        first = build_context(favorites=favorites, api=fake_api)
        second = build_context(favorites=favorites, api=fake_api)

        await first.loaders.breeds.load("husky")
        await second.loaders.breeds.load("husky")

        assert first.loaders.breeds is not second.loaders.breeds
        assert fake_api.image_calls == ["husky", "husky"]


class TestCreateLoaders:
    """Tests for create_loaders."""

    def test_create_loaders(self, fake_api, favorites) -> None:
        """Test creating the loader set directly."""
        loaders = create_loaders(fake_api, favorites)

        assert isinstance(loaders.breeds, BreedLoader)
