"""
Schemas Package

This package contains the relay wire schemas: request and response
dataclasses for the status resource and chat endpoints, and the typed
chat events.

The package provides base classes (BaseRequest, BaseResponse) that share
the encoding and decoding code between schemas.
"""

from .base import BaseRequest, BaseResponse
from .events import (
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
    contains_disconnect,
)
from .chat import (
    serialize_interests,
    interests_tuple,
    StartChatRequest,
    StartChatResponse,
    ClientRequest,
    EventsRequest,
    SendMessageRequest,
    TypingRequest,
    StoppedTypingRequest,
    DisconnectRequest,
)
from .status import StatusResponse

__all__ = [
    # Base classes
    "BaseRequest",
    "BaseResponse",
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
    "contains_disconnect",
    # Chat schemas
    "serialize_interests",
    "interests_tuple",
    "StartChatRequest",
    "StartChatResponse",
    "ClientRequest",
    "EventsRequest",
    "SendMessageRequest",
    "TypingRequest",
    "StoppedTypingRequest",
    "DisconnectRequest",
    # Status schemas
    "StatusResponse",
]
