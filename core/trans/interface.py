"""This module defines the transport protocol used by the translate client and the exception taxonomy.

Every error raised by the library derives from TranslateExceptionError. The three call-time errors are
kept distinct so callers can tell a rejected input, an unreachable service and an unexpected answer apart.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol

__all__: list[str] = [
    "ContractRule",
    "LanguageTableError",
    "MalformedResponseError",
    "TranslateExceptionError",
    "Transport",
    "TransportError",
    "ValidationError",
]


class ContractRule(Enum):
    """Input rules enforced before a request is sent."""

    SINGLE_WORD_ONLY = "single_word_only"
    TARGET_LANGUAGE_REQUIRED = "target_language_required"


class TranslateExceptionError(Exception):
    """An error occurred during the translation process."""


class ValidationError(TranslateExceptionError):
    """The input violates the rules of the requested intent.

    Raised before any network activity.

    Attributes:
        rule (ContractRule): The violated rule.
        text (str): The offending input text.
    """

    def __init__(self, msg: str, *, rule: ContractRule, text: str) -> None:
        super().__init__(msg)
        self.rule: ContractRule = rule
        self.text: str = text


class TransportError(TranslateExceptionError):
    """The HTTP request failed (connection failure, timeout or non-success status).

    Attributes:
        status (int | None): HTTP status code when the server answered, otherwise None.
    """

    def __init__(self, msg: str, *, status: int | None = None) -> None:
        super().__init__(msg)
        self.status: int | None = status


class MalformedResponseError(TranslateExceptionError):
    """The response lacks data required by the requested intent.

    The endpoint is undocumented; a throttled request may still be answered with 200 OK
    and a body of a different shape.
    """


class LanguageTableError(TranslateExceptionError):
    """The language table file is missing or contains invalid rows."""


class Transport(Protocol):
    """HTTP GET collaborator used by TranslateClient.

    ``handlers.async_comm.AsyncHttp`` is the default implementation.
    Implementations raise ``handlers.async_comm.AsyncCommError`` (or a subclass) on failure.
    """

    async def get(self, *, url: str, total_timeout: float = 10.0, proxies: dict[str, str] | None = None) -> Any:
        """Fetch ``url`` and return the decoded body.

        Args:
            url (str): Fully assembled request URL.
            total_timeout (float): Total timeout for the request in seconds.
            proxies (dict[str, str] | None): Optional proxies keyed by scheme.

        Returns:
            Any: The decoded body; a JSON document for ``application/json`` responses.
        """
        ...

    async def close(self) -> None:
        """Release the underlying connection resources."""
        ...
