"""
Error Types

This module defines the exception taxonomy for the chat client. Directory
failures and session failures are kept apart so callers can tell "no relay
available" from "the relay misbehaved".

Network errors also derive from ConnectionError and malformed-response
errors from ValueError, so code written against the standard exceptions
keeps working.
"""


class ChatClientError(Exception):
    """Base class for all chat client errors."""


class DirectoryError(ChatClientError):
    """Base class for endpoint directory failures."""


class DirectoryNetworkError(DirectoryError, ConnectionError):
    """The status resource could not be reached."""


class DirectoryMalformedResponseError(DirectoryError, ValueError):
    """The status resource did not return a list of server names."""


class DirectoryEmptyError(DirectoryError):
    """The status resource returned no servers."""


class SessionError(ChatClientError):
    """Base class for chat session failures."""


class SessionNetworkError(SessionError, ConnectionError):
    """A request to the relay failed, timed out, or returned an error status."""


class SessionMalformedResponseError(SessionError, ValueError):
    """The relay returned a body that could not be parsed."""


class NoClientIdError(SessionError):
    """The start response carried no client identifier."""


class SessionStateError(SessionError, RuntimeError):
    """An operation was attempted in the wrong session state."""


class NoUsableSessionError(ChatClientError):
    """No endpoint or session could be obtained for a new chat."""
