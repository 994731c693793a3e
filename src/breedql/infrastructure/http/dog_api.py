"""Dog API client over httpx."""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://dog.ceo/api"


class DogApiClient:
    """Thin request wrapper around the dog.ceo REST API.

    Logs every call with its status and URL. The underlying
    ``httpx.AsyncClient`` is shared across requests for connection pooling;
    this wrapper is cheap and is built per request so it can log with the
    request's logger.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str = DEFAULT_BASE_URL,
        log: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            client: The shared HTTP client.
            base_url: Root URL of the dog API, without trailing slash.
            log: Logger to report calls to. Defaults to the module logger.
        """
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._log = log or logger

    async def get(self, path: str) -> Any:
        """GET a path of the API and decode its JSON body.

        A 404 body is returned as-is: the dog API answers unknown breeds
        with ``{"status": "error", ...}`` and a 404.

        Args:
            path: Path below the base URL, starting with ``/``.

        Returns:
            The decoded JSON body.

        Raises:
            httpx.HTTPError: On transport errors and non-404 error statuses.
            ValueError: If the body is not JSON.
        """
        url = f"{self._base_url}{path}"

        try:
            response = await self._client.get(url)
            if response.status_code != httpx.codes.NOT_FOUND:
                response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as e:
            self._log.error(
                "Dog API request failed status=%s url=%s error=%s",
                e.response.status_code,
                url,
                e,
            )
            raise
        except (httpx.HTTPError, ValueError) as e:
            self._log.error(
                "Dog API request failed status=%s url=%s error=%s", None, url, e
            )
            raise

        self._log.info("Dog API request status=%s url=%s", response.status_code, url)
        return body

    async def list_breeds(self) -> list[str]:
        """Fetch the names of all breeds.

        Returns:
            Breed names in API order.
        """
        body = await self.get("/breeds/list")
        return list(body.get("message") or [])

    async def breed_images(self, breed_name: str) -> list[str] | None:
        """Fetch the image URLs of a breed.

        Args:
            breed_name: The breed to look up.

        Returns:
            The image URLs, or None if the API doesn't report success.
        """
        body = await self.get(f"/breed/{breed_name}/images")
        if not isinstance(body, dict) or body.get("status") != "success":
            return None
        return list(body.get("message") or [])
