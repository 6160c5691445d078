"""Per-intent request rules and input validation.

``INTENT_RULES`` declares, for every intent, whether a target language is required, whether only a
single word is accepted and which ``dt`` parameter is sent upstream.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from core.trans.interface import ContractRule, ValidationError
from models.translation_models import Intent, IntentRule
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Mapping
    from re import Pattern

__all__: list[str] = ["INTENT_RULES", "IntentContract"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

WHITESPACE_PATTERN: Final[Pattern[str]] = re.compile(r"\s")

INTENT_RULES: Final[Mapping[Intent, IntentRule]] = MappingProxyType(
    {
        Intent.TRANSLATION: IntentRule(requires_target_language=True, single_word_only=False, query_parameter_code="t"),
        Intent.ALTERNATIVE: IntentRule(
            requires_target_language=True, single_word_only=False, query_parameter_code="at"
        ),
        Intent.DETECTED_LANGUAGE: IntentRule(
            requires_target_language=False, single_word_only=False, query_parameter_code=None
        ),
        Intent.DETECTED_LANGUAGE_AS_WORD: IntentRule(
            requires_target_language=False, single_word_only=False, query_parameter_code=None
        ),
        Intent.DICTIONARY: IntentRule(requires_target_language=True, single_word_only=False, query_parameter_code="bd"),
        Intent.DEFINITION: IntentRule(requires_target_language=False, single_word_only=True, query_parameter_code="md"),
        Intent.SYNONYM: IntentRule(requires_target_language=False, single_word_only=True, query_parameter_code="ss"),
        Intent.EXAMPLE: IntentRule(requires_target_language=True, single_word_only=True, query_parameter_code="ex"),
    }
)


class IntentContract:
    """Validates caller input against the rules of the requested intent."""

    def __init__(self, rules: Mapping[Intent, IntentRule] = INTENT_RULES) -> None:
        missing: set[Intent] = set(Intent) - set(rules)
        if missing:
            msg: str = f"No request rule defined for intents: {sorted(str(i) for i in missing)}"
            raise ValueError(msg)
        self._rules: Mapping[Intent, IntentRule] = rules

    def rule_for(self, intent: Intent) -> IntentRule:
        return self._rules[intent]

    def validate(self, intent: Intent, text: str, target_language: str | None) -> None:
        """Check the input before anything is sent.

        Args:
            intent (Intent): Requested intent.
            text (str): Input text.
            target_language (str | None): Target language name or code, None or empty when not given.

        Raises:
            ValidationError: If a single-word intent receives several words, or a target language is
                required but missing.
        """
        rule: IntentRule = self.rule_for(intent)

        if rule.single_word_only and WHITESPACE_PATTERN.search(text.strip()):
            logger.debug("'%s' rejected: '%s' is not a single word", intent, text)
            msg: str = f"'{intent}' accepts a single word only, got '{text}'"
            raise ValidationError(msg, rule=ContractRule.SINGLE_WORD_ONLY, text=text)

        if rule.requires_target_language and not target_language:
            logger.debug("'%s' rejected: no target language", intent)
            msg = f"'{intent}' requires a target language"
            raise ValidationError(msg, rule=ContractRule.TARGET_LANGUAGE_REQUIRED, text=text)
