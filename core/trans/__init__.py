"""Request/response mapping for the public Google translation endpoint.

This package validates per-intent input, resolves language names to codes, builds the request URL
and maps the JSON answer onto typed results. `TranslateClient` ties these steps together.
"""

from core.trans.client import TranslateClient
from core.trans.contract import INTENT_RULES, IntentContract
from core.trans.interface import (
    ContractRule,
    LanguageTableError,
    MalformedResponseError,
    TranslateExceptionError,
    Transport,
    TransportError,
    ValidationError,
)
from core.trans.registry import LanguageRegistry
from core.trans.request_builder import RequestBuilder
from core.trans.response_mapper import ResponseMapper

__all__: list[str] = [
    "INTENT_RULES",
    "ContractRule",
    "IntentContract",
    "LanguageRegistry",
    "LanguageTableError",
    "MalformedResponseError",
    "RequestBuilder",
    "ResponseMapper",
    "TranslateClient",
    "TranslateExceptionError",
    "Transport",
    "TransportError",
    "ValidationError",
]
