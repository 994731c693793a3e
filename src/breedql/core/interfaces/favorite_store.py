"""Favorite store interface."""

from typing import Protocol


class IFavoriteStore(Protocol):
    """Contract for storing which breeds viewers marked as favorite.

    The store outlives requests. Methods are async so that durable
    implementations can sit behind the same interface.
    """

    async def get(self, breed_name: str) -> bool:
        """Check whether a breed is stored as favorite.

        Args:
            breed_name: The breed to check.

        Returns:
            True if the breed is a favorite, False otherwise.
        """
        ...

    async def set(self, breed_name: str, favorite: bool = True) -> None:
        """Mark or unmark a breed as favorite.

        Args:
            breed_name: The breed to update.
            favorite: The new favorite flag.
        """
        ...

    async def members(self) -> frozenset[str]:
        """Return the names of all stored favorites."""
        ...
