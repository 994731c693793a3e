"""Tests for BreedLoader."""

import asyncio

import pytest

from breedql import Breed, BreedLoader, BreedNotFound, FetchFailure, Image
from breedql.core.services.breed_loader import FAVORITE_BREEDS, FLUFFY_BREEDS


class TestBreedLoaderListBreeds:
    """Tests for BreedLoader.list_breeds."""

    @pytest.mark.asyncio
    async def test_lists_all_breeds_in_order(self, fake_api, favorites) -> None:
        """Test that breeds come back in data source order."""
        loader = BreedLoader(fake_api, favorites)

        breeds = await loader.list_breeds()

        assert [breed.name for breed in breeds] == [
            "husky",
            "poodle",
            "pug",
            "malamute",
        ]

    @pytest.mark.asyncio
    async def test_builds_breed_models(self, fake_api, favorites) -> None:
        """Test the fluffy and favorite flags of listed breeds."""
        loader = BreedLoader(fake_api, favorites)

        breeds = {breed.name: breed for breed in await loader.list_breeds()}

        assert breeds["husky"] == Breed(
            id="husky", name="husky", fluffy=True, favorite=False
        )
        assert breeds["pug"].fluffy is False
        assert breeds["malamute"].favorite is True

    @pytest.mark.asyncio
    async def test_fluffy_filter(self, fake_api, favorites) -> None:
        """Test filtering by the fluffy flag."""
        loader = BreedLoader(fake_api, favorites)

        fluffy = await loader.list_breeds(fluffy=True)
        not_fluffy = await loader.list_breeds(fluffy=False)

        assert [breed.name for breed in fluffy] == ["husky", "poodle", "malamute"]
        assert [breed.name for breed in not_fluffy] == ["pug"]

    @pytest.mark.asyncio
    async def test_favorite_filter(self, fake_api, favorites) -> None:
        """Test filtering by built-in and stored favorites."""
        await favorites.set("pug")
        loader = BreedLoader(fake_api, favorites)

        breeds = await loader.list_breeds(favorite=True)

        assert [breed.name for breed in breeds] == ["pug", "malamute"]

    @pytest.mark.asyncio
    async def test_both_filters_apply(self, fake_api, favorites) -> None:
        """Test that fluffy and favorite filters combine."""
        await favorites.set("pug")
        loader = BreedLoader(fake_api, favorites)

        breeds = await loader.list_breeds(fluffy=True, favorite=True)

        assert [breed.name for breed in breeds] == ["malamute"]

    @pytest.mark.asyncio
    async def test_catalog_fetched_once_per_loader(self, fake_api, favorites) -> None:
        """Test that the breed list is fetched once per loader."""
        loader = BreedLoader(fake_api, favorites)

        await asyncio.gather(
            loader.list_breeds(), loader.list_breeds(fluffy=True)
        )
        await loader.list_breeds(favorite=False)

        assert fake_api.list_calls == 1

    @pytest.mark.asyncio
    async def test_new_loader_fetches_again(self, fake_api, favorites) -> None:
        """Test that caches don't outlive a loader."""
        await BreedLoader(fake_api, favorites).list_breeds()
        await BreedLoader(fake_api, favorites).list_breeds()

        assert fake_api.list_calls == 2


class TestBreedLoaderLoad:
    """Tests for BreedLoader.load and load_many."""

    @pytest.mark.asyncio
    async def test_load_known_breed(self, fake_api, favorites) -> None:
        """Test loading a known breed."""
        loader = BreedLoader(fake_api, favorites)

        breed = await loader.load("poodle")

        assert breed == Breed(id="poodle", name="poodle", fluffy=True, favorite=False)

    @pytest.mark.asyncio
    async def test_load_unknown_breed(self, fake_api, favorites) -> None:
        """Test that an unknown breed loads as None."""
        loader = BreedLoader(fake_api, favorites)

        assert await loader.load("unicorn") is None

    @pytest.mark.asyncio
    async def test_breed_without_photos_still_exists(
        self, fake_api, favorites
    ) -> None:
        """Test that an empty image list still means the breed exists."""
        loader = BreedLoader(fake_api, favorites)

        assert await loader.load("malamute") is not None

    @pytest.mark.asyncio
    async def test_load_many_preserves_order(self, make_api, favorites) -> None:
        """Test that load_many follows name order."""
        api = make_api(delays={"husky": 0.03, "poodle": 0.01})
        loader = BreedLoader(api, favorites)

        breeds = await loader.load_many(["husky", "unicorn", "poodle", "pug"])

        assert [breed.name if breed else None for breed in breeds] == [
            "husky",
            None,
            "poodle",
            "pug",
        ]

    @pytest.mark.asyncio
    async def test_repeated_loads_hit_upstream_once(
        self, fake_api, favorites
    ) -> None:
        """Test that a breed's images are fetched once."""
        loader = BreedLoader(fake_api, favorites)

        await asyncio.gather(loader.load("husky"), loader.load("husky"))
        await loader.load_many(["husky", "husky"])

        assert fake_api.image_calls == ["husky"]

    @pytest.mark.asyncio
    async def test_upstream_failure_surfaces_as_fetch_failure(
        self, make_api, favorites
    ) -> None:
        """Test that upstream errors become cached FetchFailures."""
        api = make_api(failing={"husky"})
        loader = BreedLoader(api, favorites)

        with pytest.raises(FetchFailure) as exc_info:
            await loader.load("husky")
        with pytest.raises(FetchFailure):
            await loader.load("husky")

        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert api.image_calls == ["husky"]

    @pytest.mark.asyncio
    async def test_favorite_reflects_store_changes(self, fake_api, favorites) -> None:
        """Test that the favorite flag is read from the store each time."""
        loader = BreedLoader(fake_api, favorites)

        assert (await loader.load("pug")).favorite is False
        await favorites.set("pug")
        assert (await loader.load("pug")).favorite is True


class TestBreedLoaderPhotos:
    """Tests for BreedLoader.load_photos."""

    @pytest.mark.asyncio
    async def test_all_photos(self, fake_api, favorites) -> None:
        """Test loading every photo of a breed."""
        loader = BreedLoader(fake_api, favorites)

        photos = await loader.load_photos("husky")

        assert [photo.url for photo in photos] == fake_api.images["husky"]
        assert photos[0] == Image(
            url=fake_api.images["husky"][0], title="Photo of husky"
        )

    @pytest.mark.asyncio
    async def test_limit(self, fake_api, favorites) -> None:
        """Test limiting the number of photos."""
        loader = BreedLoader(fake_api, favorites)

        photos = await loader.load_photos("husky", limit=2)

        assert [photo.url for photo in photos] == fake_api.images["husky"][:2]

    @pytest.mark.asyncio
    async def test_unknown_breed(self, fake_api, favorites) -> None:
        """Test that an unknown breed has no photos."""
        loader = BreedLoader(fake_api, favorites)

        assert await loader.load_photos("unicorn") is None

    @pytest.mark.asyncio
    async def test_different_limits_share_one_upstream_call(
        self, fake_api, favorites
    ) -> None:
        """Test that all photo limits share one images fetch."""
        loader = BreedLoader(fake_api, favorites)

        await asyncio.gather(
            loader.load_photos("husky", limit=1),
            loader.load_photos("husky", limit=3),
            loader.load("husky"),
        )

        assert fake_api.image_calls == ["husky"]

    @pytest.mark.asyncio
    async def test_one_failing_breed_does_not_fail_others(
        self, make_api, favorites
    ) -> None:
        """Test that failures stay with their breed."""
        api = make_api(failing={"pug"})
        loader = BreedLoader(api, favorites)

        husky, pug = await asyncio.gather(
            loader.load_photos("husky"),
            loader.load_photos("pug"),
            return_exceptions=True,
        )

        assert len(husky) == 5
        assert isinstance(pug, FetchFailure)


class TestBreedLoaderMakeFavorite:
    """Tests for BreedLoader.make_favorite."""

    @pytest.mark.asyncio
    async def test_stores_favorite(self, fake_api, favorites) -> None:
        """Test marking a known breed as favorite."""
        loader = BreedLoader(fake_api, favorites)

        assert await loader.make_favorite("pug") == "pug"
        assert await favorites.get("pug") is True
        assert (await loader.load("pug")).favorite is True

    @pytest.mark.asyncio
    async def test_unknown_breed_raises(self, fake_api, favorites) -> None:
        """Test that favoriting an unknown breed raises."""
        loader = BreedLoader(fake_api, favorites)

        with pytest.raises(BreedNotFound) as exc_info:
            await loader.make_favorite("unicorn")

        assert exc_info.value.breed_name == "unicorn"
        assert len(favorites) == 0


class TestBreedRules:
    """Tests for the fixed breed sets."""

    def test_fluffy_breeds(self) -> None:
        """Test membership of the fluffy breeds."""
        assert "husky" in FLUFFY_BREEDS
        assert "pug" not in FLUFFY_BREEDS

    def test_favorite_breeds(self) -> None:
        """Test the built-in favorites."""
        assert FAVORITE_BREEDS == {
            "cotondetulear",
            "dalmation",
            "malamute",
            "pointer",
            "wolfhound",
        }
