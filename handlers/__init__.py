"""Network communication helpers for gtx-translate.

This package provides the aiohttp based HTTP transport used to reach the translation endpoint.
"""

from handlers.async_comm import (
    AsyncCommContentError,
    AsyncCommDecodeError,
    AsyncCommError,
    AsyncCommInvalidContentTypeError,
    AsyncCommTimeoutError,
    AsyncHttp,
)

__all__: list[str] = [
    "AsyncCommContentError",
    "AsyncCommDecodeError",
    "AsyncCommError",
    "AsyncCommInvalidContentTypeError",
    "AsyncCommTimeoutError",
    "AsyncHttp",
]
