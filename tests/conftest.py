"""Pytest configuration for breedql tests."""

import asyncio

import pytest

from breedql.infrastructure.stores.memory import InMemoryFavoriteStore

HUSKY_PHOTOS = [f"https://images.dog.ceo/breeds/husky/n{i}.jpg" for i in range(1, 6)]
POODLE_PHOTOS = [f"https://images.dog.ceo/breeds/poodle/n{i}.jpg" for i in range(1, 4)]
PUG_PHOTOS = ["https://images.dog.ceo/breeds/pug/n1.jpg"]


class FakeDogApi:
    """In-memory stand-in for the dog API that records every call."""

    def __init__(
        self,
        images: dict[str, list[str]] | None = None,
        failing: set[str] | None = None,
        delays: dict[str, float] | None = None,
    ) -> None:
        self.images = (
            images
            if images is not None
            else {
                "husky": HUSKY_PHOTOS,
                "poodle": POODLE_PHOTOS,
                "pug": PUG_PHOTOS,
                "malamute": [],
            }
        )
        self.failing = failing or set()
        self.delays = delays or {}
        self.list_calls = 0
        self.image_calls: list[str] = []

    async def list_breeds(self) -> list[str]:
        self.list_calls += 1
        return list(self.images)

    async def breed_images(self, breed_name: str) -> list[str] | None:
        self.image_calls.append(breed_name)
        if breed_name in self.delays:
            await asyncio.sleep(self.delays[breed_name])
        if breed_name in self.failing:
            raise ConnectionError(f"upstream down for {breed_name}")
        return self.images.get(breed_name)


@pytest.fixture
def fake_api() -> FakeDogApi:
    """Create a fake dog API."""
    return FakeDogApi()


@pytest.fixture
def favorites() -> InMemoryFavoriteStore:
    """Create an empty favorite store."""
    return InMemoryFavoriteStore()


@pytest.fixture
def make_api() -> type[FakeDogApi]:
    """Give tests access to FakeDogApi for custom setups."""
    return FakeDogApi
