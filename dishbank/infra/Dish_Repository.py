"""Remote dish repository: the spreadsheet-backed web app that stores the dish bank."""
import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from dishbank.errors import DishSourceError

logger = logging.getLogger(__name__)


class DishRepository:
    def __init__(self, api_url: str, timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_url = api_url
        self.timeout = timeout
        # Injected by tests (httpx.MockTransport); None means the real network
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        # Apps Script web apps answer GET and POST with a redirect to the content host
        return httpx.AsyncClient(
            transport=self._transport,
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=True,
        )

    async def fetch_dishes(self) -> List[Any]:
        """GET the raw dish records. One attempt, no retry.

        Raises DishSourceError on a malformed URL, transport failure, a non-2xx
        status, or a body that is not a JSON array.
        """
        try:
            async with self._client() as client:
                response = await client.get(self.api_url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise DishSourceError(f"Dish API answered {e.response.status_code}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise DishSourceError(f"Dish API unreachable: {e}") from e

        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DishSourceError(f"Dish API returned invalid JSON: {e}") from e
        if not isinstance(data, list):
            raise DishSourceError(f"Dish API returned {type(data).__name__}, expected a list")
        return data

    async def save_dish(self, dish: Dict[str, Any]) -> str:
        """POST a new dish as JSON and return the raw response text.

        The response is logged but not interpreted; only transport failures
        raise DishSourceError.
        """
        try:
            async with self._client() as client:
                response = await client.post(self.api_url, json=dish)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise DishSourceError(f"Could not save dish: {e}") from e
        text = response.text
        logger.info("API response: %s", text)
        return text


__all__ = ['DishRepository']
