"""
Event Stream

Presents a chat session as an async iterator of event batches.

The first batch is the one returned when the chat opened; every later
batch costs exactly one poll, made when the consumer asks for it. The
stream ends for good after delivering the batch in which the stranger
disconnected, or once the session has been closed locally.

Usage:
    session, stream = await start_chat(["music"])
    async for batch in stream:
        for event in batch:
            ...
"""

import logging
from typing import Optional, Sequence, Tuple

import httpx

from .config import ClientSettings
from .directory import EndpointDirectory
from .errors import DirectoryError, NoUsableSessionError, SessionError
from .schemas import EventBatch, contains_disconnect
from .service import ChatSession

logger = logging.getLogger(__name__)


class EventStream:
    """
    Single-pass, non-restartable stream of event batches.

    A failed poll is raised from the ``__anext__`` call that made it and
    the stream is exhausted afterward. There are no retries.

    Attributes:
        session: The chat session being polled
    """

    def __init__(self, session: ChatSession, initial_events: EventBatch):
        """
        Initialize the stream.

        Args:
            session: An opened chat session
            initial_events: The batch returned by session.open()
        """
        self.session = session
        self._pending_initial: Optional[EventBatch] = list(initial_events)
        self._exhausted = False

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __aiter__(self) -> "EventStream":
        return self

    async def __anext__(self) -> EventBatch:
        if self._exhausted:
            raise StopAsyncIteration

        if self._pending_initial is not None:
            batch = self._pending_initial
            self._pending_initial = None
        elif not self.session.is_open:
            logger.debug("Session closed, ending event stream")
            self._exhausted = True
            raise StopAsyncIteration
        else:
            try:
                batch = await self.session.poll()
            except SessionError:
                self._exhausted = True
                raise

        if contains_disconnect(batch):
            self._exhausted = True
        return batch

    async def aclose(self) -> None:
        """Stop the stream and disconnect the session if it is still open."""
        self._exhausted = True
        self._pending_initial = None
        if self.session.is_open:
            await self.session.disconnect()


async def open_stream(session: ChatSession) -> EventStream:
    """
    Open ``session`` and wrap it in an EventStream.

    Raises:
        SessionError: Propagated from session.open()
    """
    _, initial_events = await session.open()
    return EventStream(session, initial_events)


async def start_chat(
    interests: Optional[Sequence[str]] = None,
    settings: Optional[ClientSettings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
    directory: Optional[EndpointDirectory] = None,
) -> Tuple[ChatSession, EventStream]:
    """
    Pick a relay, open a chat on it, and return the session and its stream.

    Args:
        interests: Topics to match strangers on
        settings: Connection settings (defaults to ClientSettings.from_env())
        http_client: Optional HTTP client shared by the directory and session
        directory: Optional endpoint directory (for testing)

    Returns:
        Tuple of the open session and its event stream

    Raises:
        NoUsableSessionError: If no relay could be picked or the chat could
            not be opened. The underlying error is chained as __cause__.
    """
    settings = settings or ClientSettings.from_env()
    owns_directory = directory is None
    directory = directory or EndpointDirectory(settings, http_client)

    try:
        endpoint = await directory.pick_random()
    except DirectoryError as e:
        logger.error(f"No usable relay: {e}")
        raise NoUsableSessionError(f"No usable endpoint available: {e}") from e
    finally:
        if owns_directory:
            await directory.aclose()

    session = ChatSession(endpoint, interests, http_client, settings)
    try:
        stream = await open_stream(session)
    except SessionError as e:
        logger.error(f"Could not open chat on {endpoint}: {e}")
        await session.aclose()
        raise NoUsableSessionError(f"No usable session available: {e}") from e

    return session, stream
