"""Models describing a translation request.

Defines the closed set of query intents, the per-intent request rules and the query/request
value objects passed between the contract, the request builder and the client.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

__all__: list[str] = ["AUTO_LANGUAGE", "BuiltRequest", "Intent", "IntentRule", "TranslationQuery"]

AUTO_LANGUAGE: str = "auto"


class Intent(Enum):
    """Category of information requested from the endpoint in a single call."""

    TRANSLATION = "translation"
    ALTERNATIVE = "alternative"
    DETECTED_LANGUAGE = "detected_language"
    DETECTED_LANGUAGE_AS_WORD = "detected_language_as_word"
    DICTIONARY = "dictionary"
    DEFINITION = "definition"
    SYNONYM = "synonym"
    EXAMPLE = "example"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class IntentRule:
    """Request rules attached to an intent.

    Attributes:
        requires_target_language (bool): The call fails without a target language.
        single_word_only (bool): The input text must be a single word.
        query_parameter_code (str | None): Extra ``dt`` value sent upstream. None for detection intents.
    """

    requires_target_language: bool
    single_word_only: bool
    query_parameter_code: str | None


@dataclass(frozen=True)
class TranslationQuery:
    """Input of a single call.

    Attributes:
        text (str): Text (or word) to query.
        source_language (str): Language name, code, or "auto".
        target_language (str): Language name or code. Empty when not given.
        intent (Intent): Requested category of information.
    """

    text: str
    source_language: str = AUTO_LANGUAGE
    target_language: str = ""
    intent: Intent = Intent.TRANSLATION


class BuiltRequest(NamedTuple):
    """Outbound request assembled from a TranslationQuery."""

    source_code: str
    target_code: str
    encoded_text: str
    url: str
