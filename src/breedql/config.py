"""Application settings."""

import os
from dataclasses import dataclass

from breedql.infrastructure.http.dog_api import DEFAULT_BASE_URL


@dataclass
class Settings:
    """breedql settings.

    Defaults suit local development against the public dog API. Use
    ``Settings.from_env()`` to read overrides from ``BREEDQL_*``
    environment variables.
    """

    dog_api_url: str = DEFAULT_BASE_URL
    log_level: str = "INFO"
    request_timeout: float | None = None  # Seconds per upstream call
    debug: bool = False

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    def __post_init__(self) -> None:
        """Normalize values and set the default timeout."""
        if self.request_timeout is None:
            self.request_timeout = 10.0
        self.dog_api_url = self.dog_api_url.rstrip("/")
        self.log_level = self.log_level.upper()

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``BREEDQL_*`` environment variables."""
        timeout = os.getenv("BREEDQL_REQUEST_TIMEOUT")
        return cls(
            dog_api_url=os.getenv("BREEDQL_DOG_API_URL", DEFAULT_BASE_URL),
            log_level=os.getenv("BREEDQL_LOG_LEVEL", "INFO"),
            request_timeout=float(timeout) if timeout else None,
            debug=os.getenv("BREEDQL_DEBUG", "false").lower() == "true",
            host=os.getenv("BREEDQL_HOST", "127.0.0.1"),
            port=int(os.getenv("BREEDQL_PORT", "8000")),
        )
