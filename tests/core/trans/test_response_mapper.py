"""Unit tests for mapping endpoint payloads onto intent results."""

from __future__ import annotations

from typing import Any

import pytest

from core.trans.interface import MalformedResponseError
from core.trans.registry import LanguageRegistry
from core.trans.response_mapper import ResponseMapper
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
    SynonymGroup,
    SynonymResult,
    SynonymSet,
    TranslationResult,
)
from models.translation_models import Intent


@pytest.fixture
def mapper() -> ResponseMapper:
    return ResponseMapper(
        LanguageRegistry([LanguageEntry(name="English", code="en"), LanguageEntry(name="Spanish", code="es")])
    )


def _sentences(*fragments: str) -> list[dict[str, Any]]:
    return [{"trans": fragment, "orig": fragment, "backend": 10} for fragment in fragments]


def test_translation_concatenates_fragments(mapper: ResponseMapper) -> None:
    payload: dict[str, Any] = {"src": "en", "sentences": [{"trans": "Hola "}, {"trans": "mundo"}]}

    result = mapper.map(Intent.TRANSLATION, payload)

    assert result == TranslationResult(source_language="en", translation="Hola mundo")


def test_translation_ignores_transliteration_rows(mapper: ResponseMapper) -> None:
    payload: dict[str, Any] = {
        "src": "en",
        "sentences": [*_sentences("こんにちは。", "元気？"), {"translit": "Kon'nichiwa. Genki?"}],
        "confidence": 1.0,
    }

    result = mapper.map(Intent.TRANSLATION, payload)

    assert isinstance(result, TranslationResult)
    assert result.translation == "こんにちは。元気？"


def test_translation_preserves_fragment_whitespace(mapper: ResponseMapper) -> None:
    payload: dict[str, Any] = {"src": "en", "sentences": _sentences("Line one.\n", "Line two. ", "End")}

    result = mapper.map(Intent.TRANSLATION, payload)

    assert isinstance(result, TranslationResult)
    assert result.translation == "Line one.\nLine two. End"


def test_detected_language(mapper: ResponseMapper) -> None:
    result = mapper.map(Intent.DETECTED_LANGUAGE, {"src": "es", "sentences": _sentences("Hello")})

    assert result == DetectedLanguageResult(language="es")


def test_detected_language_as_word(mapper: ResponseMapper) -> None:
    result = mapper.map(Intent.DETECTED_LANGUAGE_AS_WORD, {"src": "es", "sentences": _sentences("Hello")})

    assert result == DetectedLanguageAsWordResult(language="Spanish")


def test_detected_language_as_word_unknown_code(mapper: ResponseMapper) -> None:
    result = mapper.map(Intent.DETECTED_LANGUAGE_AS_WORD, {"src": "xx", "sentences": []})

    assert result == DetectedLanguageAsWordResult(language=None)
    assert str(result) == ""


def test_alternative_groups_by_source_line(mapper: ResponseMapper) -> None:
    payload: dict[str, Any] = {
        "src": "en",
        "sentences": _sentences("Hola\n", "Mundo"),
        "alternative_translations": [
            {
                "src_phrase": "Hello",
                "alternative": [
                    {"word_postproc": "Hola", "score": 1000, "has_preceding_space": True},
                    {"word_postproc": "Bueno", "score": 0, "has_preceding_space": True},
                ],
                "srcunicodeoffsets": [{"begin": 0, "end": 5}],
                "raw_src_segment": "Hello",
                "start_pos": 0,
                "end_pos": 0,
            },
            {"src_phrase": "\n", "alternative": [], "raw_src_segment": "\n"},
            {"src_phrase": "World", "alternative": [{"word_postproc": "Mundo"}]},
        ],
    }

    result = mapper.map(Intent.ALTERNATIVE, payload)

    assert result == AlternativeResult(
        alternatives=[
            AlternativeGroup(source_line="Hello", alternatives=["Hola", "Bueno"]),
            AlternativeGroup(source_line="World", alternatives=["Mundo"]),
        ]
    )


def test_alternative_keeps_first_group_of_repeated_line(mapper: ResponseMapper) -> None:
    payload: dict[str, Any] = {
        "src": "en",
        "alternative_translations": [
            {"src_phrase": "Hello", "alternative": [{"word_postproc": "Hola"}, {"word_postproc": "Buenas"}]},
            {"src_phrase": "Hello", "alternative": [{"word_postproc": "Saludos"}]},
        ],
    }

    result = mapper.map(Intent.ALTERNATIVE, payload)

    assert isinstance(result, AlternativeResult)
    assert result.alternatives == [AlternativeGroup(source_line="Hello", alternatives=["Hola", "Buenas"])]


def test_alternative_skips_empty_group_before_grouping(mapper: ResponseMapper) -> None:
    payload: dict[str, Any] = {
        "alternative_translations": [
            {"src_phrase": "Hello"},
            {"src_phrase": "Hello", "alternative": [{"word_postproc": "Hola"}]},
        ],
    }

    result = mapper.map(Intent.ALTERNATIVE, payload)

    assert isinstance(result, AlternativeResult)
    assert result.alternatives == [AlternativeGroup(source_line="Hello", alternatives=["Hola"])]


def test_dictionary(mapper: ResponseMapper) -> None:
    payload: dict[str, Any] = {
        "src": "en",
        "sentences": _sentences("banco"),
        "dict": [
            {
                "pos": "noun",
                "terms": ["banco", "orilla"],
                "entry": [
                    {"word": "banco", "reverse_translation": ["bank", "bench"], "score": 0.53},
                    {"word": "orilla", "reverse_translation": ["shore", "bank"], "score": 0.01},
                ],
                "base_form": "bank",
                "pos_enum": 1,
            },
            {
                "pos": "verb",
                "terms": ["depositar"],
                "entry": [{"word": "depositar", "reverse_translation": ["deposit", "bank"]}],
                "base_form": "bank",
                "pos_enum": 2,
            },
        ],
    }

    result = mapper.map(Intent.DICTIONARY, payload)

    assert result == DictionaryResult(
        entries=[
            DictionaryWordClass(
                word_class="noun",
                terms=["banco", "orilla"],
                entries=[
                    DictionaryEntry(word="banco", reverse_translations=["bank", "bench"], score=0.53),
                    DictionaryEntry(word="orilla", reverse_translations=["shore", "bank"], score=0.01),
                ],
            ),
            DictionaryWordClass(
                word_class="verb",
                terms=["depositar"],
                entries=[DictionaryEntry(word="depositar", reverse_translations=["deposit", "bank"], score=None)],
            ),
        ]
    )


def test_dictionary_missing_section_raises(mapper: ResponseMapper) -> None:
    with pytest.raises(MalformedResponseError, match="'dict'"):
        mapper.map(Intent.DICTIONARY, {"src": "en", "sentences": _sentences("banco")})


def test_definition(mapper: ResponseMapper) -> None:
    payload: dict[str, Any] = {
        "src": "en",
        "sentences": _sentences("bank"),
        "definitions": [
            {
                "pos": "noun",
                "entry": [
                    {"gloss": "the land alongside a river.", "definition_id": "m_en_gbus0062300.006"},
                    {"gloss": "a financial establishment.", "example": "I paid the cheque into the bank"},
                ],
                "base_form": "bank",
            },
            {"pos": "verb", "entry": [{"gloss": "heap (a substance) into a mass."}]},
        ],
    }

    result = mapper.map(Intent.DEFINITION, payload)

    assert result == DefinitionResult(
        definitions=[
            DefinitionGroup(
                word_class="noun",
                glossary=["the land alongside a river.", "a financial establishment."],
            ),
            DefinitionGroup(word_class="verb", glossary=["heap (a substance) into a mass."]),
        ]
    )


def test_synonym(mapper: ResponseMapper) -> None:
    payload: dict[str, Any] = {
        "src": "en",
        "sentences": _sentences("feliz"),
        "synsets": [
            {
                "pos": "adjective",
                "entry": [
                    {"synonym": ["cheerful", "merry", "joyful"], "definition_id": "m_en_gbus0454500.006"},
                    {
                        "synonym": ["chirpy", "chipper"],
                        "definition_id": "m_en_gbus0454500.006",
                        "label_info": {"register": ["informal"]},
                    },
                ],
                "base_form": "happy",
            }
        ],
    }

    result = mapper.map(Intent.SYNONYM, payload)

    assert result == SynonymResult(
        translation="feliz",
        synonyms=[
            SynonymSet(
                word_class="adjective",
                groups=[
                    SynonymGroup(register=None, synonyms=["cheerful", "merry", "joyful"]),
                    SynonymGroup(register="informal", synonyms=["chirpy", "chipper"]),
                ],
            )
        ],
    )


def test_example_uses_first_bucket_only(mapper: ResponseMapper) -> None:
    payload: dict[str, Any] = {
        "src": "en",
        "sentences": _sentences("Hola"),
        "examples": [
            {"example": [{"text": "<b>hello</b> there", "source_type": 3}, {"text": "she said <b>hello</b>"}]},
            {"example": [{"text": "ignored"}]},
        ],
    }

    result = mapper.map(Intent.EXAMPLE, payload)

    assert result == ExampleResult(translation="Hola", examples=["<b>hello</b> there", "she said <b>hello</b>"])


def test_example_accepts_single_bucket_object(mapper: ResponseMapper) -> None:
    payload: dict[str, Any] = {
        "src": "en",
        "sentences": _sentences("Hola"),
        "examples": {"example": [{"text": "<b>Hello</b>, is anyone there?"}]},
    }

    result = mapper.map(Intent.EXAMPLE, payload)

    assert isinstance(result, ExampleResult)
    assert result.examples == ["<b>Hello</b>, is anyone there?"]


def test_example_output_case_is_unchanged(mapper: ResponseMapper) -> None:
    payload: dict[str, Any] = {
        "src": "en",
        "sentences": _sentences("Hola"),
        "examples": [{"example": [{"text": "Hello"}]}],
    }

    result = mapper.map(Intent.EXAMPLE, payload)

    assert isinstance(result, ExampleResult)
    assert result.translation == "Hola"
    assert result.examples == ["Hello"]


@pytest.mark.parametrize(
    ("intent", "payload"),
    [
        (Intent.TRANSLATION, {"sentences": []}),
        (Intent.TRANSLATION, {"src": "en"}),
        (Intent.TRANSLATION, {"src": "en", "sentences": "Hola"}),
        (Intent.TRANSLATION, {"src": "en", "sentences": ["Hola"]}),
        (Intent.DETECTED_LANGUAGE, {"sentences": []}),
        (Intent.DETECTED_LANGUAGE, {"src": 1}),
        (Intent.ALTERNATIVE, {"src": "en"}),
        (Intent.DEFINITION, {"src": "en", "sentences": []}),
        (Intent.DEFINITION, {"definitions": {"pos": "noun"}}),
        (Intent.SYNONYM, {"src": "en", "sentences": []}),
        (Intent.SYNONYM, {"synsets": []}),
        (Intent.EXAMPLE, {"src": "en", "sentences": []}),
        (Intent.EXAMPLE, {"sentences": [], "examples": []}),
        (Intent.EXAMPLE, {"sentences": [], "examples": "hello"}),
    ],
)
def test_missing_or_misshaped_sections_raise(mapper: ResponseMapper, intent: Intent, payload: dict[str, Any]) -> None:
    with pytest.raises(MalformedResponseError):
        mapper.map(intent, payload)


@pytest.mark.parametrize("payload", [None, "<html>Too many requests</html>", [["Hola", "Hello"]], 42])
def test_non_object_payload_raises(mapper: ResponseMapper, payload: Any) -> None:
    with pytest.raises(MalformedResponseError):
        mapper.map(Intent.TRANSLATION, payload)


def test_nested_element_of_wrong_shape_raises(mapper: ResponseMapper) -> None:
    payload: dict[str, Any] = {"dict": [{"pos": "noun", "entry": ["banco"]}]}

    with pytest.raises(MalformedResponseError):
        mapper.map(Intent.DICTIONARY, payload)


@pytest.mark.parametrize("intent", list(Intent))
def test_every_intent_is_mapped(mapper: ResponseMapper, intent: Intent) -> None:
    payload: dict[str, Any] = {
        "src": "en",
        "sentences": _sentences("Hola"),
        "alternative_translations": [],
        "dict": [],
        "definitions": [],
        "synsets": [],
        "examples": [{"example": []}],
    }

    result = mapper.map(intent, payload)

    assert type(result).INTENT is intent


@pytest.mark.parametrize(
    ("intent", "payload"),
    [
        (Intent.TRANSLATION, {"src": "en", "sentences": [{"trans": 5}]}),
        (Intent.TRANSLATION, {"src": "en", "sentences": [{"trans": ["a"]}]}),
        (Intent.ALTERNATIVE, {"alternative_translations": [{"alternative": [{"word_postproc": 3}]}]}),
        (Intent.ALTERNATIVE, {"alternative_translations": [{"src_phrase": 1, "alternative": [{}]}]}),
        (Intent.DICTIONARY, {"dict": [{"pos": "noun", "terms": "abc"}]}),
        (Intent.DICTIONARY, {"dict": [{"pos": 7, "terms": ["banco"]}]}),
        (Intent.DICTIONARY, {"dict": [{"pos": "noun", "entry": [{"word": "b", "reverse_translation": "bank"}]}]}),
        (Intent.DICTIONARY, {"dict": [{"pos": "noun", "entry": [{"word": 1, "reverse_translation": ["bank"]}]}]}),
        (Intent.DEFINITION, {"definitions": [{"pos": "noun", "entry": [{"gloss": 5}]}]}),
        (
            Intent.SYNONYM,
            {
                "sentences": [],
                "synsets": [
                    {"pos": "adjective", "entry": [{"synonym": ["fast"], "label_info": {"register": "informal"}}]}
                ],
            },
        ),
        (Intent.SYNONYM, {"sentences": [], "synsets": [{"pos": "adjective", "entry": [{"synonym": "fast"}]}]}),
        (Intent.SYNONYM, {"sentences": [], "synsets": [{"pos": "adjective", "entry": [{"synonym": ["fast", 2]}]}]}),
        (Intent.EXAMPLE, {"sentences": [], "examples": [{"example": [{"text": 1}]}]}),
    ],
)
def test_mistyped_leaf_values_raise(mapper: ResponseMapper, intent: Intent, payload: dict[str, Any]) -> None:
    with pytest.raises(MalformedResponseError):
        mapper.map(intent, payload)
