"""Maps a decoded ``translate_a/single`` response onto the result model of an intent.

The response is a JSON object whose sections come and go with the requested ``dt`` parameters.
Each intent has its own decoder that names the sections it needs; a missing or mis-shaped
section raises MalformedResponseError instead of surfacing as an arbitrary exception.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, TypeVar, assert_never

from core.trans.interface import MalformedResponseError
from models.payload_models import (
    AlternativeTranslationPayload,
    DefinitionPayload,
    DictionaryPayload,
    ExampleBucketPayload,
    SentencePayload,
    SynsetPayload,
)
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
    SynonymGroup,
    SynonymResult,
    SynonymSet,
    TranslationResult,
)
from models.translation_models import Intent
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from dataclasses_json import DataClassJsonMixin

    from core.trans.registry import LanguageRegistry
    from models.result_models import IntentResult

__all__: list[str] = ["ResponseMapper"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

T = TypeVar("T", bound="DataClassJsonMixin")

# errors raised by dataclasses_json when a section element is not shaped like the model
_DECODE_ERRORS: Final[tuple[type[Exception], ...]] = (AttributeError, KeyError, TypeError, ValueError)


class ResponseMapper:
    """Turns a raw response payload into the result of the requested intent.

    Args:
        registry (LanguageRegistry): Used to name the detected source language.
    """

    def __init__(self, registry: LanguageRegistry) -> None:
        self.registry: LanguageRegistry = registry

    def map(self, intent: Intent, payload: Any) -> IntentResult:
        """Decode ``payload`` for ``intent``.

        Args:
            intent (Intent): Intent the request was built for.
            payload (Any): Decoded JSON body of the response.

        Returns:
            IntentResult: The result model of ``intent``.

        Raises:
            MalformedResponseError: If the payload lacks a section the intent needs.
        """
        if not isinstance(payload, dict):
            msg: str = f"Expected a JSON object, got '{type(payload).__name__}'"
            raise MalformedResponseError(msg)

        logger.debug("'intent': '%s', 'sections': '%s'", intent, sorted(payload))
        match intent:
            case Intent.TRANSLATION:
                return self._translation(payload)
            case Intent.ALTERNATIVE:
                return self._alternative(payload)
            case Intent.DETECTED_LANGUAGE:
                return DetectedLanguageResult(language=self._source_language(payload))
            case Intent.DETECTED_LANGUAGE_AS_WORD:
                return DetectedLanguageAsWordResult(language=self.registry.name_for(self._source_language(payload)))
            case Intent.DICTIONARY:
                return self._dictionary(payload)
            case Intent.DEFINITION:
                return self._definition(payload)
            case Intent.SYNONYM:
                return self._synonym(payload)
            case Intent.EXAMPLE:
                return self._example(payload)
            case _:
                assert_never(intent)

    def _translation(self, payload: dict[str, Any]) -> TranslationResult:
        return TranslationResult(
            source_language=self._source_language(payload),
            translation=self._translated_text(payload),
        )

    def _alternative(self, payload: dict[str, Any]) -> AlternativeResult:
        entries: list[AlternativeTranslationPayload] = self._decode_list(
            payload, "alternative_translations", AlternativeTranslationPayload
        )

        # only the first entry of a source line counts, later entries for the same line are ignored
        groups: dict[str, AlternativeGroup] = {}
        for entry in entries:
            if not entry.alternative:
                continue
            source_line: str = entry.src_phrase or ""
            if source_line in groups:
                logger.debug("Ignoring repeated alternatives for '%s'", source_line)
                continue
            groups[source_line] = AlternativeGroup(
                source_line=source_line,
                alternatives=[word.word_postproc for word in entry.alternative if word.word_postproc is not None],
            )
        return AlternativeResult(alternatives=list(groups.values()))

    def _dictionary(self, payload: dict[str, Any]) -> DictionaryResult:
        word_classes: list[DictionaryPayload] = self._decode_list(payload, "dict", DictionaryPayload)
        return DictionaryResult(
            entries=[
                DictionaryWordClass(
                    word_class=word_class.pos or "",
                    terms=list(word_class.terms or []),
                    entries=[
                        DictionaryEntry(
                            word=entry.word or "",
                            reverse_translations=list(entry.reverse_translation or []),
                            score=entry.score,
                        )
                        for entry in word_class.entry or []
                    ],
                )
                for word_class in word_classes
            ]
        )

    def _definition(self, payload: dict[str, Any]) -> DefinitionResult:
        groups: list[DefinitionPayload] = self._decode_list(payload, "definitions", DefinitionPayload)
        return DefinitionResult(
            definitions=[
                DefinitionGroup(
                    word_class=group.pos or "",
                    glossary=[entry.gloss for entry in group.entry or [] if entry.gloss is not None],
                )
                for group in groups
            ]
        )

    def _synonym(self, payload: dict[str, Any]) -> SynonymResult:
        synsets: list[SynsetPayload] = self._decode_list(payload, "synsets", SynsetPayload)
        return SynonymResult(
            translation=self._translated_text(payload),
            synonyms=[
                SynonymSet(
                    word_class=synset.pos or "",
                    groups=[
                        SynonymGroup(
                            register=(
                                entry.label_info.register[0]
                                if entry.label_info is not None and entry.label_info.register
                                else None
                            ),
                            synonyms=list(entry.synonym or []),
                        )
                        for entry in synset.entry or []
                    ],
                )
                for synset in synsets
            ],
        )

    def _example(self, payload: dict[str, Any]) -> ExampleResult:
        section: Any = self._section(payload, "examples")
        # a bare {"example": [...]} object is a single bucket
        buckets: list[Any] = [section] if isinstance(section, dict) else section
        if not isinstance(buckets, list) or not buckets:
            msg: str = "'examples' holds no example bucket"
            raise MalformedResponseError(msg)

        bucket: ExampleBucketPayload = self._decode(buckets[0], "examples", ExampleBucketPayload)
        return ExampleResult(
            translation=self._translated_text(payload),
            examples=[example.text for example in bucket.example or [] if example.text is not None],
        )

    def _source_language(self, payload: dict[str, Any]) -> str:
        source: Any = self._section(payload, "src")
        if not isinstance(source, str):
            msg: str = f"'src' must be a string, got '{type(source).__name__}'"
            raise MalformedResponseError(msg)
        return source

    def _translated_text(self, payload: dict[str, Any]) -> str:
        """Concatenate the translation fragments in order, without adding separators."""
        sentences: list[SentencePayload] = self._decode_list(payload, "sentences", SentencePayload)
        return "".join(sentence.trans for sentence in sentences if sentence.trans is not None)

    @staticmethod
    def _section(payload: dict[str, Any], key: str) -> Any:
        value: Any = payload.get(key)
        if value is None:
            msg: str = f"'{key}' is missing from the response"
            raise MalformedResponseError(msg)
        return value

    def _decode_list(self, payload: dict[str, Any], key: str, model: type[T]) -> list[T]:
        section: Any = self._section(payload, key)
        if not isinstance(section, list):
            msg: str = f"'{key}' must be a list, got '{type(section).__name__}'"
            raise MalformedResponseError(msg)
        return [self._decode(item, key, model) for item in section]

    @staticmethod
    def _decode(item: Any, key: str, model: type[T]) -> T:
        if not isinstance(item, dict):
            msg: str = f"'{key}' contains a non-object element"
            raise MalformedResponseError(msg)
        try:
            return model.from_dict(item, infer_missing=True)
        except _DECODE_ERRORS as err:
            msg = f"'{key}' element cannot be decoded: {err}"
            raise MalformedResponseError(msg) from err
