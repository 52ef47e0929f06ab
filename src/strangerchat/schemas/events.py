"""
Chat Event Definitions

Typed chat events delivered by the relay. The set of variants is closed:
every event the client understands is one of the classes below, and
anything else on the wire is dropped during decoding.
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class ChatEvent:
    """Base class for chat events."""


@dataclass(frozen=True)
class Message(ChatEvent):
    """
    A message from the stranger.

    Attributes:
        text: Message content
    """

    text: str


@dataclass(frozen=True)
class CommonLikes(ChatEvent):
    """
    Interests shared with the stranger.

    Attributes:
        topics: Shared interest topics, in the order the relay sent them
    """

    topics: Tuple[str, ...]


@dataclass(frozen=True)
class Connected(ChatEvent):
    """Matched with a stranger."""


@dataclass(frozen=True)
class Waiting(ChatEvent):
    """Waiting for a stranger to match with."""


@dataclass(frozen=True)
class Typing(ChatEvent):
    """The stranger started typing."""


@dataclass(frozen=True)
class StoppedTyping(ChatEvent):
    """The stranger stopped typing."""


@dataclass(frozen=True)
class StrangerDisconnected(ChatEvent):
    """The stranger left. No more events follow for this chat."""


@dataclass(frozen=True)
class ErrorEvent(ChatEvent):
    """
    An error reported by the relay.

    Attributes:
        text: Error description from the relay
    """

    text: str


# A batch of events from one open or poll call, in relay order
EventBatch = List[ChatEvent]


def contains_disconnect(batch: EventBatch) -> bool:
    """Return True if the batch reports that the stranger disconnected."""
    return any(isinstance(event, StrangerDisconnected) for event in batch)
