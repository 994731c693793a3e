"""Breed loader - request-scoped access to breed data."""

import asyncio
from typing import Any

from breedql.core.entities.breed import Breed, Image
from breedql.core.interfaces.dog_api import IDogApi
from breedql.core.interfaces.favorite_store import IFavoriteStore
from breedql.core.services.batch_cache import BatchCache
from breedql.exceptions import BreedNotFound

FLUFFY_BREEDS = frozenset(
    ["husky", "malamute", "mastiff", "sheepdog", "poodle", "shiba", "samoyed"]
)

FAVORITE_BREEDS = frozenset(
    ["cotondetulear", "dalmation", "malamute", "pointer", "wolfhound"]
)

_ALL_BREEDS = "breeds/list"


class BreedLoader:
    """Business logic for breeds, scoped to a single request.

    Every upstream call goes through a BatchCache, so a request fetches the
    breed list at most once and each breed's images at most once, however
    many fields ask for them. Favorites are read from the injected store
    when entities are built, never cached.
    """

    def __init__(self, api: IDogApi, favorites: IFavoriteStore) -> None:
        """Initialize the loader.

        Args:
            api: Fetcher for raw breed data.
            favorites: Store holding the viewer-chosen favorites.
        """
        self._api = api
        self._favorites = favorites

        self._catalog: BatchCache[str, list[str]] = BatchCache(self._fetch_catalog)
        self._images: BatchCache[str, list[str] | None] = BatchCache(
            self._fetch_images
        )
        self._photos: BatchCache[dict[str, Any], list[Image] | None] = BatchCache(
            self._fetch_photos
        )

    async def list_breeds(
        self,
        fluffy: bool | None = None,
        favorite: bool | None = None,
    ) -> list[Breed]:
        """List all breeds, optionally filtered.

        Args:
            fluffy: Keep only breeds with this fluffy flag.
            favorite: Keep only breeds with this favorite flag.

        Returns:
            The matching breeds, in data source order.
        """
        names = await self._catalog.load(_ALL_BREEDS)
        stored = await self._favorites.members()
        breeds = [_to_model(name, stored) for name in names]

        if fluffy is not None:
            breeds = [breed for breed in breeds if breed.fluffy == fluffy]
        if favorite is not None:
            breeds = [breed for breed in breeds if breed.favorite == favorite]

        return breeds

    async def load(self, breed_name: str) -> Breed | None:
        """Load a breed by name.

        Returns:
            The breed, or None if the dog API doesn't know it.
        """
        images = await self._images.load(breed_name)
        if images is None:
            return None

        return _to_model(breed_name, await self._favorites.members())

    async def load_many(self, breed_names: list[str]) -> list[Breed | None]:
        """Load several breeds by name, in order."""
        return list(await asyncio.gather(*(self.load(name) for name in breed_names)))

    async def load_photos(
        self,
        breed_name: str,
        limit: int | None = None,
    ) -> list[Image] | None:
        """Load the photos of a breed.

        Args:
            breed_name: The breed.
            limit: Return at most this many photos. None returns all.

        Returns:
            The photos, or None if the dog API doesn't know the breed.
        """
        return await self._photos.load({"breed_name": breed_name, "limit": limit})

    async def make_favorite(self, breed_name: str) -> str:
        """Mark a breed as favorite.

        Returns:
            The breed name.

        Raises:
            BreedNotFound: If the dog API doesn't know the breed.
        """
        images = await self._images.load(breed_name)
        if images is None:
            raise BreedNotFound(breed_name)

        await self._favorites.set(breed_name, True)
        return breed_name

    async def _fetch_catalog(self, keys: list[str]) -> list[list[str]]:
        names = await self._api.list_breeds()
        return [names for _ in keys]

    async def _fetch_images(
        self, breed_names: list[str]
    ) -> list[list[str] | None | BaseException]:
        # The dog API has no bulk endpoint; fetch each breed concurrently.
        return list(
            await asyncio.gather(
                *(self._api.breed_images(name) for name in breed_names),
                return_exceptions=True,
            )
        )

    async def _fetch_photos(
        self, keys: list[dict[str, Any]]
    ) -> list[list[Image] | None | BaseException]:
        # One failed breed must not fail the other keys of the batch.
        all_images = await asyncio.gather(
            *(self._images.load(key["breed_name"]) for key in keys),
            return_exceptions=True,
        )

        photos: list[list[Image] | None | BaseException] = []
        for key, urls in zip(keys, all_images):
            if isinstance(urls, BaseException):
                photos.append(urls)
                continue
            if urls is None:
                photos.append(None)
                continue
            breed_name = key["breed_name"]
            photos.append(
                [
                    Image(url=url, title=f"Photo of {breed_name}")
                    for url in urls[: key["limit"]]
                ]
            )
        return photos


def _to_model(breed_name: str, stored_favorites: frozenset[str]) -> Breed:
    return Breed(
        id=breed_name,
        name=breed_name,
        fluffy=breed_name in FLUFFY_BREEDS,
        favorite=breed_name in FAVORITE_BREEDS or breed_name in stored_favorites,
    )
