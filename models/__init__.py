"""Data models for gtx-translate.

This package contains dataclass definitions for configuration, language table entries,
translation queries, raw response sections and the per-intent results.
"""

from __future__ import annotations

from models.config_models import Config
from models.language_models import LanguageEntry
from models.result_models import (
    AlternativeGroup,
    AlternativeResult,
    DefinitionGroup,
    DefinitionResult,
    DetectedLanguageAsWordResult,
    DetectedLanguageResult,
    DictionaryEntry,
    DictionaryResult,
    DictionaryWordClass,
    ExampleResult,
    IntentResult,
    SynonymGroup,
    SynonymResult,
    SynonymSet,
    TranslationResult,
)
from models.translation_models import AUTO_LANGUAGE, BuiltRequest, Intent, IntentRule, TranslationQuery

__all__: list[str] = [
    "AUTO_LANGUAGE",
    "AlternativeGroup",
    "AlternativeResult",
    "BuiltRequest",
    "Config",
    "DefinitionGroup",
    "DefinitionResult",
    "DetectedLanguageAsWordResult",
    "DetectedLanguageResult",
    "DictionaryEntry",
    "DictionaryResult",
    "DictionaryWordClass",
    "ExampleResult",
    "Intent",
    "IntentResult",
    "IntentRule",
    "LanguageEntry",
    "SynonymGroup",
    "SynonymResult",
    "SynonymSet",
    "TranslationQuery",
    "TranslationResult",
]
