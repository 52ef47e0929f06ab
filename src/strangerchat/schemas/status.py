"""
Status Schema Definitions

The status resource lists the relay servers currently accepting chats.
"""

from dataclasses import dataclass
from typing import Any, List

from ..errors import DirectoryMalformedResponseError
from .base import BaseResponse


@dataclass
class StatusResponse(BaseResponse):
    """
    Response from the status resource.

    Attributes:
        servers: Relay names, in the order the service listed them
    """

    servers: List[str]

    @classmethod
    def _from_data(cls, data: Any) -> "StatusResponse":
        """Create from the parsed status body."""
        if not isinstance(data, dict):
            raise DirectoryMalformedResponseError(
                "Status response is not a JSON object"
            )

        servers = data.get("servers")
        if not isinstance(servers, list):
            raise DirectoryMalformedResponseError(
                "Status response has no servers array"
            )
        if not all(isinstance(name, str) for name in servers):
            raise DirectoryMalformedResponseError(
                "Status response lists a non-string server"
            )

        return cls(servers=list(servers))
