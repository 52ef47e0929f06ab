"""
Chat Schema Definitions

This module defines the requests a chat session sends to its relay and
the start response that opens a chat.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

from ..errors import NoClientIdError, SessionMalformedResponseError
from .base import BaseRequest, BaseResponse


def serialize_interests(interests: Sequence[str]) -> str:
    """
    Encode interests for the ``topics`` query parameter.

    The relay expects a bracketed, comma-joined list of quoted strings:
    ``[]`` for no interests, ``["a","b"]`` for two.
    """
    return json.dumps(list(interests), separators=(",", ":"))


def interests_tuple(interests: Sequence[str]) -> Tuple[str, ...]:
    """Normalize interests to an immutable tuple of strings."""
    return tuple(str(topic) for topic in interests)


@dataclass
class StartChatRequest(BaseRequest):
    """
    Request to start a new chat on a relay.

    Unlike the other requests, start parameters travel in the query string.

    Attributes:
        randid: Random nonce identifying this client attempt
        interests: Topics to match strangers on
        lang: Language code
        caps: Advertised client capabilities
    """

    randid: str
    interests: Sequence[str] = ()
    lang: str = "en"
    caps: str = "recaptcha2,t"

    @property
    def path(self) -> str:
        return "start"

    def to_params(self) -> Dict[str, str]:
        """Build the query parameters for the start request."""
        return {
            "caps": self.caps,
            "firstevents": "1",
            "spid": "",
            "randid": self.randid,
            "lang": self.lang,
            "topics": serialize_interests(self.interests),
        }


@dataclass
class ClientRequest(BaseRequest):
    """
    Request bound to an open chat.

    Attributes:
        client_id: Identifier assigned by the relay when the chat opened
    """

    client_id: str

    def to_form(self) -> Dict[str, str]:
        return {"id": self.client_id}


@dataclass
class EventsRequest(ClientRequest):
    """Request for events that arrived since the last poll."""

    @property
    def path(self) -> str:
        return "events"


@dataclass
class SendMessageRequest(ClientRequest):
    """
    Request to send a message to the stranger.

    Attributes:
        message: The message content
    """

    message: str = ""

    @property
    def path(self) -> str:
        return "send"

    def to_form(self) -> Dict[str, str]:
        form = super().to_form()
        form["msg"] = self.message
        return form


@dataclass
class TypingRequest(ClientRequest):
    """Tell the stranger we started typing."""

    @property
    def path(self) -> str:
        return "typing"


@dataclass
class StoppedTypingRequest(ClientRequest):
    """Tell the stranger we stopped typing."""

    @property
    def path(self) -> str:
        return "stoppedtyping"


@dataclass
class DisconnectRequest(ClientRequest):
    """Leave the chat."""

    @property
    def path(self) -> str:
        return "disconnect"


@dataclass
class StartChatResponse(BaseResponse):
    """
    Response to a start request.

    Attributes:
        client_id: Identifier for all later requests in this chat
        raw_events: Undecoded first events; a missing or non-array
                    ``events`` field yields an empty list
    """

    client_id: str
    raw_events: List[Any] = field(default_factory=list)

    @classmethod
    def _from_data(cls, data: Any) -> "StartChatResponse":
        """Create from the parsed start response body."""
        if not isinstance(data, dict):
            raise SessionMalformedResponseError(
                f"Expected a JSON object from start, got {type(data).__name__}"
            )

        client_id = data.get("clientID")
        if not isinstance(client_id, str):
            raise NoClientIdError("Start response has no client id")

        raw_events = data.get("events")
        if not isinstance(raw_events, list):
            raw_events = []

        return cls(client_id=client_id, raw_events=raw_events)
