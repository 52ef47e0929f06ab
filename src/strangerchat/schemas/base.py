"""
Base Schema Classes

This module provides base classes for relay request and response schemas
with common encoding and decoding methods to avoid code duplication.

Relay requests are form-encoded POSTs rather than JSON documents, so a
request knows its path and its form fields. Responses are JSON.
"""

from typing import Any, Dict, Type, TypeVar

T = TypeVar("T", bound="BaseResponse")


class BaseRequest:
    """
    Base class for request schemas.

    Provides the relay path and the form body for a request.
    """

    def to_form(self) -> Dict[str, str]:
        """
        Build the form body for the request.

        Returns:
            Dictionary of form fields. Requests without a body return an
            empty dictionary.
        """
        return {}

    @property
    def path(self) -> str:
        """
        Relay path the request is posted to.

        Should be overridden by subclasses to provide the specific path.
        """
        raise NotImplementedError("Subclasses must define path")


class BaseResponse:
    """
    Base class for response schemas.

    Provides common deserialization methods for creating response objects
    from parsed JSON.
    """

    @classmethod
    def from_dict(cls: Type[T], data: Any) -> T:
        """
        Create instance from parsed JSON.

        Args:
            data: Parsed JSON value of the response body. Relay bodies are
                  not wrapped in a "data" envelope, so it is passed through
                  unchanged.

        Returns:
            Instance of the response class.
        """
        return cls._from_data(data)

    @classmethod
    def _from_data(cls: Type[T], data: Any) -> T:
        """
        Create instance from the parsed response body.

        Must be overridden by subclasses: relay bodies are not always JSON
        objects, so each response validates its own shape.
        """
        raise NotImplementedError("Subclasses must define _from_data")
