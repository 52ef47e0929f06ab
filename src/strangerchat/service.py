"""
Chat Session Service

This module provides the ChatSession class that owns one chat against one
relay: opening it, polling for events, and posting outbound actions
(messages, typing state, disconnect).

Architecture:
    - Uses HTTPS request/response polling against the relay
    - Supports dependency injection for the HTTP client (for testability
      and connection sharing)
    - Async/await pattern for non-blocking I/O operations
    - Immutable SessionInfo core, so outbound actions can run from another
      task while the poll loop is active

Outbound actions are best-effort: the relay never acknowledges them, so a
failed send is logged and never raised.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Tuple

import httpx

from .config import ClientSettings
from .decoder import decode_events
from .errors import (
    SessionMalformedResponseError,
    SessionNetworkError,
    SessionStateError,
)
from .identifier import IdentifierGenerator
from .schemas import (
    ClientRequest,
    DisconnectRequest,
    EventBatch,
    EventsRequest,
    SendMessageRequest,
    StartChatRequest,
    StartChatResponse,
    StoppedTypingRequest,
    TypingRequest,
    contains_disconnect,
    interests_tuple,
)

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Lifecycle state of a chat session."""

    UNOPENED = "unopened"
    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True)
class SessionInfo:
    """
    Immutable identity of an open chat.

    Attributes:
        client_id: Identifier assigned by the relay at open time
        endpoint: Name of the relay the chat lives on
        interests: Topics the chat was opened with
    """

    client_id: str
    endpoint: str
    interests: Tuple[str, ...]


class ChatSession:
    """
    A single chat on one relay.

    Polling is strictly sequential: open() and poll() share a lock so at
    most one of them is in flight. Outbound actions do not take the lock.

    Attributes:
        settings: Connection settings
        state: Current lifecycle state
        info: Immutable session identity (None until opened)
    """

    def __init__(
        self,
        endpoint: str,
        interests: Optional[Sequence[str]] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        settings: Optional[ClientSettings] = None,
        id_generator: Optional[IdentifierGenerator] = None,
    ):
        """
        Initialize the session.

        Args:
            endpoint: Relay name, as returned by EndpointDirectory
            interests: Topics to match strangers on
            http_client: Optional shared HTTP client. When omitted the
                         session creates its own and closes it in aclose().
            settings: Connection settings (defaults to ClientSettings())
            id_generator: Optional nonce generator (for testing)
        """
        self.settings = settings or ClientSettings()
        self._endpoint = endpoint
        self._interests = interests_tuple(interests or ())
        self._id_generator = id_generator or IdentifierGenerator()
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=self.settings.timeout
        )
        self._fetch_lock = asyncio.Lock()
        self._initial_events: EventBatch = []
        self.info: Optional[SessionInfo] = None
        self.state = SessionState.UNOPENED

        logger.info(f"ChatSession initialized for relay: {endpoint}")

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def interests(self) -> Tuple[str, ...]:
        return self._interests

    @property
    def client_id(self) -> Optional[str]:
        """Relay-assigned client id, or None before open()."""
        return self.info.client_id if self.info else None

    @property
    def initial_events(self) -> EventBatch:
        """Copy of the batch returned by open()."""
        return list(self._initial_events)

    @property
    def is_open(self) -> bool:
        return self.state is SessionState.OPEN

    def set_interests(self, interests: Sequence[str]) -> None:
        """
        Replace the interests used when the chat is opened.

        Raises:
            SessionStateError: If the session was already opened
        """
        if self.state is not SessionState.UNOPENED:
            raise SessionStateError("Interests are fixed once a chat is open")
        self._interests = interests_tuple(interests)

    async def _post(self, path: str, **kwargs: Any) -> httpx.Response:
        """POST to the relay, mapping any HTTP failure to SessionNetworkError."""
        url = self.settings.relay_url(self._endpoint, path)
        try:
            response = await self._http.post(url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Request to {url} failed: {e}")
            raise SessionNetworkError(f"Request to {url} failed: {e}") from e
        return response

    def _mark_closed_on_disconnect(self, batch: EventBatch) -> None:
        if contains_disconnect(batch):
            logger.info("Stranger disconnected")
            self.state = SessionState.CLOSED

    async def open(self) -> Tuple[str, EventBatch]:
        """
        Start a chat on the relay.

        Returns:
            Tuple of the relay-assigned client id and the first event batch

        Raises:
            SessionStateError: If this session was already opened
            SessionNetworkError: On transport failure, timeout, or error status
            SessionMalformedResponseError: If the body is not a JSON object
            NoClientIdError: If the response carries no client id
        """
        async with self._fetch_lock:
            if self.state is not SessionState.UNOPENED:
                raise SessionStateError(
                    "Session already opened; create a new ChatSession"
                )

            request = StartChatRequest(
                randid=self._id_generator.generate(),
                interests=self._interests,
                lang=self.settings.lang,
                caps=self.settings.caps,
            )
            logger.info(
                f"Starting chat on {self._endpoint} "
                f"with interests {list(self._interests)}"
            )
            response = await self._post(request.path, params=request.to_params())

            try:
                data = response.json()
            except ValueError as e:
                raise SessionMalformedResponseError(
                    f"Start response is not valid JSON: {e}"
                ) from e

            start = StartChatResponse.from_dict(data)
            events = decode_events(start.raw_events)

            self.info = SessionInfo(
                client_id=start.client_id,
                endpoint=self._endpoint,
                interests=self._interests,
            )
            self._initial_events = events
            self.state = SessionState.OPEN
            logger.info(f"Chat opened with client id {start.client_id}")

            self._mark_closed_on_disconnect(events)
            return start.client_id, list(events)

    async def poll(self) -> EventBatch:
        """
        Fetch the events that arrived since the last poll.

        Returns:
            Decoded event batch; empty when the relay has nothing new

        Raises:
            SessionStateError: If the session is not open
            SessionNetworkError: On transport failure, timeout, or error status
            SessionMalformedResponseError: If the body is not valid JSON
        """
        async with self._fetch_lock:
            if self.state is not SessionState.OPEN:
                raise SessionStateError(
                    f"Cannot poll a session that is {self.state.value}"
                )

            request = EventsRequest(self.info.client_id)
            response = await self._post(request.path, data=request.to_form())

            # An idle relay may answer with an empty body
            if not response.content.strip():
                return []

            try:
                data = response.json()
            except ValueError as e:
                raise SessionMalformedResponseError(
                    f"Events response is not valid JSON: {e}"
                ) from e

            events = decode_events(data)
            logger.debug(f"Polled {len(events)} events")
            self._mark_closed_on_disconnect(events)
            return events

    async def _post_best_effort(self, request: ClientRequest) -> None:
        """
        Post an outbound action, logging failures instead of raising.

        The relay sends no acknowledgement for these actions, so there is
        nothing for the caller to act on when one fails.
        """
        url = self.settings.relay_url(self._endpoint, request.path)
        try:
            response = await self._http.post(url, data=request.to_form())
            response.raise_for_status()
        except (httpx.HTTPError, UnicodeEncodeError) as e:
            logger.warning(f"Best-effort {request.path} request failed: {e}")

    def _require_info(self, action: str) -> SessionInfo:
        if self.info is None:
            raise SessionStateError(f"Cannot {action} before the chat is open")
        return self.info

    async def send_message(self, text: str) -> None:
        """
        Send a message to the stranger.

        This is a fire-and-forget operation; failures are only logged.

        Args:
            text: The message content

        Raises:
            SessionStateError: If the chat was never opened
        """
        info = self._require_info("send a message")
        logger.debug(f"Sending message on {info.client_id}")
        await self._post_best_effort(SendMessageRequest(info.client_id, text))

    async def start_typing(self) -> None:
        """Tell the stranger we are typing. Fire-and-forget."""
        info = self._require_info("signal typing")
        await self._post_best_effort(TypingRequest(info.client_id))

    async def stop_typing(self) -> None:
        """Tell the stranger we stopped typing. Fire-and-forget."""
        info = self._require_info("signal typing")
        await self._post_best_effort(StoppedTypingRequest(info.client_id))

    async def disconnect(self) -> None:
        """
        Leave the chat.

        The session is closed locally even if the relay cannot be reached,
        so no further polls are issued.
        """
        info = self._require_info("disconnect")
        self.state = SessionState.CLOSED
        await self._post_best_effort(DisconnectRequest(info.client_id))
        logger.info(f"Disconnected chat {info.client_id}")

    async def aclose(self) -> None:
        """Close the HTTP client if the session created it."""
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "ChatSession":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
