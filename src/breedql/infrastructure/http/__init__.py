"""HTTP clients for upstream data sources."""

from breedql.infrastructure.http.dog_api import DEFAULT_BASE_URL, DogApiClient

__all__ = [
    "DEFAULT_BASE_URL",
    "DogApiClient",
]
