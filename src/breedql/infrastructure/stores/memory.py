"""In-memory favorite store implementation."""


class InMemoryFavoriteStore:
    """Favorite store backed by a process-local set.

    Suitable for single-process deployments and tests. Favorites are lost
    when the process exits.
    """

    def __init__(self, initial: list[str] | None = None) -> None:
        """Initialize the store.

        Args:
            initial: Breed names to start out as favorites.
        """
        self._favorites: set[str] = set(initial or [])

    async def get(self, breed_name: str) -> bool:
        """Check whether a breed is stored as favorite.

        Args:
            breed_name: The breed to check.

        Returns:
            True if the breed is a favorite, False otherwise.
        """
        return breed_name in self._favorites

    async def set(self, breed_name: str, favorite: bool = True) -> None:
        """Mark or unmark a breed as favorite.

        Args:
            breed_name: The breed to update.
            favorite: The new favorite flag.
        """
        if favorite:
            self._favorites.add(breed_name)
        else:
            self._favorites.discard(breed_name)

    async def members(self) -> frozenset[str]:
        """Return the names of all stored favorites."""
        return frozenset(self._favorites)

    async def clear(self) -> None:
        """Forget all favorites."""
        self._favorites.clear()

    def __len__(self) -> int:
        """Return the number of stored favorites."""
        return len(self._favorites)
