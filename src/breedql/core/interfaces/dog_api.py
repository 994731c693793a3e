"""Dog API fetcher interface."""

from typing import Protocol


class IDogApi(Protocol):
    """Contract for fetching raw breed data.

    Implementations perform the network I/O; the loaders only map the
    raw values into domain entities.
    """

    async def list_breeds(self) -> list[str]:
        """Fetch the names of all known breeds.

        Returns:
            Breed names in the order the data source lists them.
        """
        ...

    async def breed_images(self, breed_name: str) -> list[str] | None:
        """Fetch the image URLs of a breed.

        Args:
            breed_name: The breed to look up.

        Returns:
            The image URLs, or None if the breed doesn't exist.
        """
        ...
