"""
Endpoint Directory

Discovers the relay servers currently accepting chats and picks one at
random, spreading clients across the horizontally scaled relays.

Architecture:
    - Reads the server list from the fixed status resource
    - Supports dependency injection for the HTTP client (for testability
      and connection sharing with chat sessions)
    - Async/await pattern for non-blocking I/O operations
"""

import logging
import random
from typing import List, Optional

import httpx

from .config import ClientSettings
from .errors import (
    DirectoryEmptyError,
    DirectoryMalformedResponseError,
    DirectoryNetworkError,
)
from .schemas import StatusResponse

logger = logging.getLogger(__name__)


class EndpointDirectory:
    """
    Directory of relay endpoints.

    Attributes:
        settings: Connection settings, including the status URL
        rng: Random source used to pick an endpoint
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the directory.

        Args:
            settings: Connection settings (defaults to ClientSettings())
            http_client: Optional shared HTTP client. When omitted the
                         directory creates its own and closes it in aclose().
            rng: Optional random source for pick_random()
        """
        self.settings = settings or ClientSettings()
        self.rng = rng or random.Random()
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=self.settings.timeout
        )

    async def list_endpoints(self) -> List[str]:
        """
        Fetch the names of the available relay servers.

        Returns:
            Relay names in the order the status resource lists them

        Raises:
            DirectoryNetworkError: If the status resource cannot be reached
            DirectoryMalformedResponseError: If the body is not a JSON object
                with a ``servers`` array of strings
        """
        url = self.settings.status_url
        logger.debug(f"Fetching relay list from {url}")

        try:
            response = await self._http.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch relay list: {e}")
            raise DirectoryNetworkError(
                f"Could not reach status resource {url}: {e}"
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            raise DirectoryMalformedResponseError(
                f"Status response is not valid JSON: {e}"
            ) from e

        status = StatusResponse.from_dict(data)
        logger.debug(f"Status lists {len(status.servers)} relays")
        return status.servers

    async def pick_random(self) -> str:
        """
        Pick one relay uniformly at random.

        Returns:
            Name of the chosen relay

        Raises:
            DirectoryEmptyError: If no relays are listed
            DirectoryNetworkError: Propagated from list_endpoints()
            DirectoryMalformedResponseError: Propagated from list_endpoints()
        """
        servers = await self.list_endpoints()
        if not servers:
            raise DirectoryEmptyError("Status resource lists no relays")

        endpoint = self.rng.choice(servers)
        logger.info(f"Selected relay: {endpoint}")
        return endpoint

    async def aclose(self) -> None:
        """Close the HTTP client if the directory created it."""
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "EndpointDirectory":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
