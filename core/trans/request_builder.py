"""Assembles the ``translate_a/single`` request URL for a query."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final
from urllib.parse import quote

from core.trans.contract import INTENT_RULES
from models.config_models import DEFAULT_HOST
from models.translation_models import BuiltRequest, Intent
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Mapping

    from core.trans.registry import LanguageRegistry
    from models.translation_models import IntentRule, TranslationQuery

__all__: list[str] = ["DEFAULT_TARGET_LANGUAGE", "RequestBuilder"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

ENDPOINT_PATH: Final[str] = "/translate_a/single"
# client=gtx selects the keyless web client, dj=1 makes the endpoint answer with a JSON object
FIXED_PARAMETERS: Final[str] = "client=gtx&dj=1"
# sentences are part of every response, so dt=t is always requested
TRANSLATION_DATA_TYPE: Final[str] = "t"
DEFAULT_TARGET_LANGUAGE: Final[str] = "en"


class RequestBuilder:
    """Builds the outbound request from a TranslationQuery.

    Args:
        registry (LanguageRegistry): Resolves language names to codes.
        host (str): Host serving the endpoint.
        rules (Mapping[Intent, IntentRule]): Per-intent rules providing the ``dt`` code.
    """

    def __init__(
        self,
        registry: LanguageRegistry,
        *,
        host: str = DEFAULT_HOST,
        rules: Mapping[Intent, IntentRule] = INTENT_RULES,
    ) -> None:
        self.registry: LanguageRegistry = registry
        self.host: str = host.strip().removeprefix("https://").removeprefix("http://").rstrip("/")
        self._rules: Mapping[Intent, IntentRule] = rules

    @property
    def endpoint(self) -> str:
        return f"https://{self.host}{ENDPOINT_PATH}"

    def build(self, query: TranslationQuery) -> BuiltRequest:
        """Resolve the languages, escape the text and assemble the URL.

        The text is lower-cased for the example intent; the endpoint does not find examples for
        mixed-case words reliably. A missing target language falls back to English so the endpoint
        always receives a ``tl`` value.

        Args:
            query (TranslationQuery): Validated query.

        Returns:
            BuiltRequest: Resolved codes, escaped text and full URL.
        """
        source_code: str = self.registry.resolve(query.source_language)
        target_code: str = self.registry.resolve(query.target_language or DEFAULT_TARGET_LANGUAGE)
        encoded_text: str = self.encode_text(query.text, query.intent)

        parameters: list[str] = [
            FIXED_PARAMETERS,
            f"sl={quote(source_code, safe='')}",
            f"tl={quote(target_code, safe='')}",
            f"dt={TRANSLATION_DATA_TYPE}",
            f"q={encoded_text}",
        ]
        intent_code: str | None = self._rules[query.intent].query_parameter_code
        if intent_code is not None and intent_code != TRANSLATION_DATA_TYPE:
            parameters.append(f"dt={intent_code}")

        url: str = f"{self.endpoint}?{'&'.join(parameters)}"
        logger.debug("'intent': '%s', 'url': '%s'", query.intent, url)
        return BuiltRequest(source_code=source_code, target_code=target_code, encoded_text=encoded_text, url=url)

    @staticmethod
    def encode_text(text: str, intent: Intent) -> str:
        """Percent-encode ``text`` for the ``q`` parameter, escaping every reserved character."""
        if intent is Intent.EXAMPLE:
            text = text.lower()
        return quote(text, safe="")
