"""Asynchronous HTTP transport used to reach the translation endpoint.

The `AsyncHttp` class performs GET requests over a lazily created aiohttp session and decodes the body
through handlers registered per content type. Failures are reported as `AsyncCommError` subclasses so
the caller can tell connection problems from bodies it cannot decode.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Final, Literal, Self

import aiohttp
from aiohttp.client import ClientSession

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from aiohttp.client import ClientResponse


__all__: list[str] = [
    "AsyncCommContentError",
    "AsyncCommDecodeError",
    "AsyncCommError",
    "AsyncCommInvalidContentTypeError",
    "AsyncCommTimeoutError",
    "AsyncHttp",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

HTTPMethod = Literal["GET"]

CONNECT_TIMEOUT: Final[float] = 1.0

DEFAULT_HEADERS: Final[dict[str, str]] = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
    ),
    "Accept": "application/json, text/javascript, */*;q=0.1",
}


def _decode_text(raw: bytes) -> str:
    return raw.decode("utf-8")


def _decode_json(raw: bytes) -> Any:
    return json.loads(raw.decode("utf-8"))


class AsyncHttp:
    """Asynchronous HTTP client performing GET requests and decoding their bodies.

    The aiohttp session is created on first use, so an instance may be constructed outside a running
    event loop. Default content handlers:
        - "application/json", "text/javascript": parsed as UTF-8 JSON.
        - "text/plain", "text/html": decoded to a UTF-8 string.

    Args:
        headers (dict[str, str] | None): Headers sent with every request. Defaults to a browser-like set.
    """

    def __init__(self, *, headers: dict[str, str] | None = None) -> None:
        logger.debug("%s initializing", self.__class__.__name__)
        self.__session: ClientSession | None = None
        self.headers: dict[str, str] = dict(DEFAULT_HEADERS if headers is None else headers)
        self.content_handlers: dict[str, Callable[[bytes], Any]] = {}

        self.add_handler("application/json", _decode_json)
        self.add_handler("text/javascript", _decode_json)
        self.add_handler("text/plain", _decode_text)
        self.add_handler("text/html", _decode_text)

    async def __aenter__(self) -> Self:
        logger.debug("%s entering context", self.__class__.__name__)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        logger.debug("%s exiting context", self.__class__.__name__)
        await self.close()

    @property
    def session(self) -> ClientSession:
        """Return the current aiohttp session, creating a new one if none is open."""
        if self.__session is None or self.__session.closed:
            self.__session = ClientSession(headers=self.headers)
            logger.debug("%s session initialized", self.__class__.__name__)
        return self.__session

    @property
    def is_open(self) -> bool:
        return self.__session is not None and not self.__session.closed

    async def close(self) -> None:
        """Close the aiohttp session if it is open."""
        if self.__session is not None and not self.__session.closed:
            await self.__session.close()
            logger.debug("%s session closed", self.__class__.__name__)
        self.__session = None

    async def get(self, *, url: str, total_timeout: float = 10.0, proxies: dict[str, str] | None = None) -> Any:
        """Perform an asynchronous HTTP GET request.

        Args:
            url (str): The URL to send the GET request to.
            total_timeout (float): Total timeout for the request in seconds. 0 or less disables it.
            proxies (dict[str, str] | None): Optional proxies keyed by scheme ("https" preferred).

        Returns:
            Any: The decoded body, None for an empty body.

        Raises:
            AsyncCommTimeoutError: If the server does not answer in time.
            AsyncCommError: On connection failures and non-success statuses.
            AsyncCommContentError: If the body cannot be decoded.
        """
        return await self._request("GET", url=url, total_timeout=total_timeout, proxies=proxies)

    async def decode_response(self, resp: ClientResponse) -> Any:
        """Decode a response body with the handler registered for its Content-Type.

        Raises:
            AsyncCommInvalidContentTypeError: If no handler is registered for the content type.
            AsyncCommDecodeError: If the handler fails to decode the body.
        """
        content_type: str = resp.headers.get("Content-Type", "").split(";")[0].strip().lower()
        logger.debug("'Content-Type': '%s'", content_type)

        raw: bytes = await resp.read()
        if not raw:
            logger.debug("Received empty response")
            return None

        handler: Callable[[bytes], Any] | None = self.content_handlers.get(content_type)
        if handler is None:
            msg: str = f"Unknown Content-Type '{content_type}'"
            raise AsyncCommInvalidContentTypeError(msg)

        try:
            return handler(raw)
        except ValueError as err:
            # UnicodeDecodeError and JSONDecodeError are both ValueError
            msg = f"Failed to decode '{content_type}' body: {err}"
            raise AsyncCommDecodeError(msg) from err

    def add_handler(self, content_type: str, handler: Callable[[bytes], Any]) -> None:
        """Register (or replace) the decoder of a content type.

        Args:
            content_type (str): Media type without parameters, e.g. "application/json".
            handler (Callable[[bytes], Any]): Function turning the raw body into the decoded value.
        """
        content_type = content_type.lower()
        if content_type in self.content_handlers:
            logger.warning("Handler for content type '%s' already exists, replacing it", content_type)
        self.content_handlers[content_type] = handler

    @staticmethod
    def _build_timeout(total_timeout: float) -> aiohttp.ClientTimeout:
        if total_timeout <= 0:
            return aiohttp.ClientTimeout(total=None)
        if total_timeout < CONNECT_TIMEOUT:
            # a connect timeout longer than the total timeout would never apply
            return aiohttp.ClientTimeout(total=total_timeout)
        return aiohttp.ClientTimeout(connect=CONNECT_TIMEOUT, total=total_timeout)

    async def _request(
        self,
        method: HTTPMethod,
        *,
        url: str,
        total_timeout: float,
        proxies: dict[str, str] | None = None,
    ) -> Any:
        logger.debug("[%s] url=%s timeout=%s", method, url, total_timeout)
        proxies = proxies if isinstance(proxies, dict) else {}
        proxy: str | None = proxies.get("https") or proxies.get("http") or None

        try:
            async with self.session.request(
                method=method,
                url=url,
                timeout=self._build_timeout(total_timeout),
                proxy=proxy,
            ) as resp:
                resp.raise_for_status()
                return await self.decode_response(resp)

        except TimeoutError as err:
            logger.debug(err)
            msg = "Timeout due to a lack of response from the server."
            raise AsyncCommTimeoutError(msg) from err
        except ConnectionResetError as err:
            logger.debug(err)
            msg = "The connection to the server has been disconnected."
            raise AsyncCommError(msg) from err
        except aiohttp.ClientResponseError as err:
            logger.debug(err)
            msg = "Error response from the server."
            raise AsyncCommError(msg, status=err.status) from err
        except aiohttp.ClientError as err:
            logger.debug(err)
            msg = "The server cannot be reached."
            raise AsyncCommError(msg) from err


class AsyncCommError(Exception):
    """Base class for asynchronous communication errors.

    Attributes:
        msg (str): Error message, including the HTTP status when there is one.
        status (int | None): HTTP status of the failed response, None if no response was received.
    """

    def __init__(self, msg: str | BaseException, *, status: int | None = None) -> None:
        self.msg: str = str(msg)
        self.status: int | None = status
        if status is not None:
            self.msg = f"{self.msg}: status='{status}'"
        super().__init__(self.msg)


class AsyncCommTimeoutError(AsyncCommError):
    """The request did not complete within the configured timeout."""


class AsyncCommContentError(AsyncCommError):
    """The server answered, but the body could not be turned into a value."""


class AsyncCommInvalidContentTypeError(AsyncCommContentError):
    """No handler is registered for the content type of the response."""


class AsyncCommDecodeError(AsyncCommContentError):
    """The registered handler failed to decode the response body."""
