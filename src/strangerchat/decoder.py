"""
Event Decoder

Turns the relay's wire events into typed ChatEvent objects.

On the wire every event is a small JSON array whose first element is a tag
and whose remaining elements are the payload, for example
``["gotMessage", "hi"]`` or ``["commonLikes", ["music", "games"]]``.

Unknown tags and malformed entries are dropped one by one, so a single bad
entry never costs the caller the rest of its batch.
"""

import logging
from typing import Any, List, Optional

from .schemas.events import (
    ChatEvent,
    CommonLikes,
    Connected,
    ErrorEvent,
    EventBatch,
    Message,
    StoppedTyping,
    StrangerDisconnected,
    Typing,
    Waiting,
)

logger = logging.getLogger(__name__)


def _text_payload(raw: List[Any]) -> Optional[str]:
    """Return the string payload of ``raw``, or None if it has none."""
    if len(raw) < 2 or not isinstance(raw[1], str):
        return None
    return raw[1]


def _topics_payload(raw: List[Any]) -> Optional[List[str]]:
    """Return the list-of-strings payload of ``raw``, or None if malformed."""
    if len(raw) < 2 or not isinstance(raw[1], list):
        return None
    if not all(isinstance(topic, str) for topic in raw[1]):
        return None
    return raw[1]


def decode_event(raw: Any) -> Optional[ChatEvent]:
    """
    Decode a single wire event.

    Args:
        raw: One wire entry, expected to be a list starting with a tag

    Returns:
        The decoded event, or None if the tag is unknown or the entry
        is malformed.
    """
    if not isinstance(raw, list) or not raw or not isinstance(raw[0], str):
        logger.debug(f"Dropping malformed event entry: {raw!r}")
        return None

    tag = raw[0]

    if tag == "gotMessage":
        text = _text_payload(raw)
        if text is None:
            logger.debug(f"Dropping gotMessage without text: {raw!r}")
            return None
        return Message(text)
    elif tag == "connected":
        return Connected()
    elif tag == "commonLikes":
        topics = _topics_payload(raw)
        if topics is None:
            logger.debug(f"Dropping commonLikes without topics: {raw!r}")
            return None
        return CommonLikes(tuple(topics))
    elif tag == "waiting":
        return Waiting()
    elif tag == "typing":
        return Typing()
    elif tag == "stoppedTyping":
        return StoppedTyping()
    elif tag == "strangerDisconnected":
        return StrangerDisconnected()
    elif tag == "error":
        text = _text_payload(raw)
        if text is None:
            logger.debug(f"Dropping error event without text: {raw!r}")
            return None
        return ErrorEvent(text)
    else:
        logger.debug(f"Ignoring unknown event tag: {tag}")
        return None


def decode_events(raw_events: Any) -> EventBatch:
    """
    Decode a batch of wire events, keeping the relay's order.

    Args:
        raw_events: Parsed JSON array of wire events. Any other value is
                    treated as an empty batch.

    Returns:
        List of decoded events. Entries that could not be decoded are
        left out; the list never contains None.
    """
    if not isinstance(raw_events, list):
        return []

    events: EventBatch = []
    for raw in raw_events:
        event = decode_event(raw)
        if event is not None:
            events.append(event)
    return events
