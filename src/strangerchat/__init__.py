"""
strangerchat

Client library for anonymous, server-polled text chat relays. It picks a
relay, opens a chat, and exposes the chat's events as an async stream of
typed batches while outbound actions go through the same session.

Schemas are organized in the `schemas` subpackage:
    - events: typed chat events
    - chat: relay requests and the start response
    - status: the relay list from the status resource
"""

from .config import ClientSettings
from .decoder import decode_event, decode_events
from .directory import EndpointDirectory
from .errors import (
    ChatClientError,
    DirectoryError,
    DirectoryNetworkError,
    DirectoryMalformedResponseError,
    DirectoryEmptyError,
    SessionError,
    SessionNetworkError,
    SessionMalformedResponseError,
    NoClientIdError,
    SessionStateError,
    NoUsableSessionError,
)
from .identifier import IdentifierGenerator, generate_random_id
from .service import ChatSession, SessionInfo, SessionState
from .stream import EventStream, open_stream, start_chat
from .schemas import (
    ChatEvent,
    Message,
    CommonLikes,
    Connected,
    Waiting,
    Typing,
    StoppedTyping,
    StrangerDisconnected,
    ErrorEvent,
    EventBatch,
    serialize_interests,
)

__all__ = [
    # Service classes
    "ClientSettings",
    "EndpointDirectory",
    "ChatSession",
    "SessionInfo",
    "SessionState",
    "EventStream",
    "open_stream",
    "start_chat",
    "IdentifierGenerator",
    "generate_random_id",
    "decode_event",
    "decode_events",
    "serialize_interests",
    # Errors
    "ChatClientError",
    "DirectoryError",
    "DirectoryNetworkError",
    "DirectoryMalformedResponseError",
    "DirectoryEmptyError",
    "SessionError",
    "SessionNetworkError",
    "SessionMalformedResponseError",
    "NoClientIdError",
    "SessionStateError",
    "NoUsableSessionError",
    # Events
    "ChatEvent",
    "Message",
    "CommonLikes",
    "Connected",
    "Waiting",
    "Typing",
    "StoppedTyping",
    "StrangerDisconnected",
    "ErrorEvent",
    "EventBatch",
]
