"""Exceptions raised by breedql."""

from typing import Any


class BreedQLError(Exception):
    """Base class for all breedql errors."""

    pass


class InvalidArgument(BreedQLError, ValueError):
    """Raised for malformed arguments.

    Covers pagination arguments (``first`` and ``last`` together, or either
    negative) and empty or undecodable global ids.
    """

    pass


class FetchFailure(BreedQLError):
    """Raised when the fetch behind a batch cache key fails.

    The original exception is chained as ``__cause__``. The failure is
    cached for the key, so every caller awaiting it sees the same error.
    """

    def __init__(self, key: Any, message: str | None = None) -> None:
        self.key = key
        super().__init__(message or f"Failed to fetch {key!r}")


class BreedNotFound(BreedQLError):
    """Raised when a mutation targets a breed the dog API doesn't know."""

    code = "ERR_BREED_NOT_FOUND"
    friendly_message = (
        "I couldn't find that breed. Please check your ID and try again"
    )

    def __init__(self, breed_name: str) -> None:
        self.breed_name = breed_name
        super().__init__("Breed not found")
