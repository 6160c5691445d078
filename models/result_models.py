"""Caller-facing result models, one per query intent.

The endpoint returns intrinsically different data per intent, so the results share no base shape.
Each model carries the intent it answers in the class variable ``INTENT`` and serialises to
camelCase JSON through dataclasses_json.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from dataclasses_json import DataClassJsonMixin, LetterCase, dataclass_json

from models.translation_models import Intent

__all__: list[str] = [
    "AlternativeGroup",
    "AlternativeResult",
    "DefinitionGroup",
    "DefinitionResult",
    "DetectedLanguageAsWordResult",
    "DetectedLanguageResult",
    "DictionaryEntry",
    "DictionaryResult",
    "DictionaryWordClass",
    "ExampleResult",
    "IntentResult",
    "SynonymGroup",
    "SynonymResult",
    "SynonymSet",
    "TranslationResult",
]


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class TranslationResult(DataClassJsonMixin):
    """Plain translation.

    Attributes:
        source_language (str): Source language code detected by the endpoint.
        translation (str): Concatenated translation fragments.
    """

    INTENT: ClassVar[Intent] = Intent.TRANSLATION

    source_language: str
    translation: str

    def __str__(self) -> str:
        return self.translation


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class AlternativeGroup(DataClassJsonMixin):
    """Alternative translations offered for one line of the input."""

    source_line: str
    alternatives: list[str] = field(default_factory=list)


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class AlternativeResult(DataClassJsonMixin):
    INTENT: ClassVar[Intent] = Intent.ALTERNATIVE

    alternatives: list[AlternativeGroup] = field(default_factory=list)


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class DetectedLanguageResult(DataClassJsonMixin):
    INTENT: ClassVar[Intent] = Intent.DETECTED_LANGUAGE

    language: str

    def __str__(self) -> str:
        return self.language


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class DetectedLanguageAsWordResult(DataClassJsonMixin):
    """Detected source language as a human-readable name.

    Attributes:
        language (str | None): Language name, None when the detected code is not in the language table.
    """

    INTENT: ClassVar[Intent] = Intent.DETECTED_LANGUAGE_AS_WORD

    language: str | None

    def __str__(self) -> str:
        return self.language or ""


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class DictionaryEntry(DataClassJsonMixin):
    """A translated word with the words that translate back to the query.

    Attributes:
        word (str): Translated word.
        reverse_translations (list[str]): Source-language words that translate to ``word``.
        score (float | None): Relevance score reported by the endpoint.
    """

    word: str
    reverse_translations: list[str] = field(default_factory=list)
    score: float | None = None


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class DictionaryWordClass(DataClassJsonMixin):
    word_class: str
    terms: list[str] = field(default_factory=list)
    entries: list[DictionaryEntry] = field(default_factory=list)


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class DictionaryResult(DataClassJsonMixin):
    INTENT: ClassVar[Intent] = Intent.DICTIONARY

    entries: list[DictionaryWordClass] = field(default_factory=list)


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class DefinitionGroup(DataClassJsonMixin):
    word_class: str
    glossary: list[str] = field(default_factory=list)


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class DefinitionResult(DataClassJsonMixin):
    INTENT: ClassVar[Intent] = Intent.DEFINITION

    definitions: list[DefinitionGroup] = field(default_factory=list)


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class SynonymGroup(DataClassJsonMixin):
    """Synonyms sharing one usage register.

    Attributes:
        register (str | None): Usage-register label such as "informal". None when unlabelled.
        synonyms (list[str]): Synonyms in endpoint order.
    """

    register: str | None = None
    synonyms: list[str] = field(default_factory=list)


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class SynonymSet(DataClassJsonMixin):
    word_class: str
    groups: list[SynonymGroup] = field(default_factory=list)


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class SynonymResult(DataClassJsonMixin):
    INTENT: ClassVar[Intent] = Intent.SYNONYM

    translation: str
    synonyms: list[SynonymSet] = field(default_factory=list)


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class ExampleResult(DataClassJsonMixin):
    """Usage examples of a word.

    Attributes:
        translation (str): Translation of the queried word.
        examples (list[str]): Example sentences. The endpoint marks the queried word with ``<b>`` tags.
    """

    INTENT: ClassVar[Intent] = Intent.EXAMPLE

    translation: str
    examples: list[str] = field(default_factory=list)


type IntentResult = (
    TranslationResult
    | AlternativeResult
    | DetectedLanguageResult
    | DetectedLanguageAsWordResult
    | DictionaryResult
    | DefinitionResult
    | SynonymResult
    | ExampleResult
)
