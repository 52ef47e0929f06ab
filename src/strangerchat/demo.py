#!/usr/bin/env python3
"""
Demo Script for the Chat Client

Connects to a random relay, prints the stranger's events, and optionally
greets the stranger once matched. It can be run standalone to try the
library against the live service.

Usage:
    python -m strangerchat.demo
    python -m strangerchat.demo --interest music --greeting "hi!"
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .errors import NoUsableSessionError, SessionError
from .schemas import (
    ChatEvent,
    CommonLikes,
    Connected,
    ErrorEvent,
    Message,
    StrangerDisconnected,
    Typing,
    Waiting,
)
from .stream import start_chat

logger = logging.getLogger(__name__)


def describe_event(event: ChatEvent) -> Optional[str]:
    """Return a console line for ``event``, or None if it is not shown."""
    if isinstance(event, Message):
        return f"Stranger: {event.text}"
    elif isinstance(event, Connected):
        return "You have matched with someone."
    elif isinstance(event, Waiting):
        return "Waiting for a stranger to match with..."
    elif isinstance(event, Typing):
        return "Stranger is typing..."
    elif isinstance(event, CommonLikes):
        return f"You both like: {', '.join(event.topics)}"
    elif isinstance(event, StrangerDisconnected):
        return "The stranger has disconnected."
    elif isinstance(event, ErrorEvent):
        return f"Relay error: {event.text}"
    return None


async def run_demo(interests: List[str], greeting: Optional[str]) -> int:
    """Run one chat until the stranger leaves. Returns an exit code."""
    try:
        session, stream = await start_chat(interests)
    except NoUsableSessionError as e:
        print(f"Error: {e}")
        return 1

    print(f"Connected to relay {session.endpoint} as {session.client_id}")

    try:
        async for batch in stream:
            for event in batch:
                line = describe_event(event)
                if line:
                    print(line)
                if isinstance(event, Connected) and greeting:
                    print(f"You: {greeting}")
                    await session.send_message(greeting)
    except SessionError as e:
        print(f"Error: connection to the relay was lost: {e}")
        return 1
    finally:
        await stream.aclose()
        await session.aclose()

    return 0


def main():
    """Main entry point for the demo."""
    parser = argparse.ArgumentParser(description="Chat with a stranger")
    parser.add_argument(
        "--interest",
        action="append",
        default=[],
        help="Topic to match on (repeatable)",
    )
    parser.add_argument(
        "--greeting", help="Message to send once matched with a stranger"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        sys.exit(asyncio.run(run_demo(args.interest, args.greeting)))
    except KeyboardInterrupt:
        print("\nExiting...")
        sys.exit(0)


if __name__ == "__main__":
    main()
