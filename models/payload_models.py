"""Decoders for the sections of the ``translate_a/single`` JSON response.

The response is requested with ``dj=1`` so the endpoint answers with a JSON object whose keys are
already snake_case. Which sections are present depends on the ``dt`` parameters of the request.
Every model is decoded with ``from_dict(..., infer_missing=True)``; optional keys the endpoint
leaves out come back as None.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from dataclasses_json import DataClassJsonMixin, config, dataclass_json

__all__: list[str] = [
    "AlternativeTranslationPayload",
    "AlternativeWordPayload",
    "DefinitionEntryPayload",
    "DefinitionPayload",
    "DictionaryEntryPayload",
    "DictionaryPayload",
    "ExampleBucketPayload",
    "ExamplePayload",
    "LabelInfoPayload",
    "SentencePayload",
    "SynsetEntryPayload",
    "SynsetPayload",
]


def _text(value: Any) -> str:
    if not isinstance(value, str):
        msg: str = f"expected a string, got '{type(value).__name__}'"
        raise TypeError(msg)
    return value


def _text_list(value: Any) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        msg: str = f"expected a list of strings, got {value!r}"
        raise TypeError(msg)
    return value


# leaves copied into the results must already have the declared type
def _text_field() -> Any:
    return field(default=None, metadata=config(decoder=_text))


def _text_list_field() -> Any:
    return field(default=None, metadata=config(decoder=_text_list))


@dataclass_json
@dataclass
class SentencePayload(DataClassJsonMixin):
    """One element of ``sentences``.

    Translation fragments carry ``trans``/``orig``. The trailing transliteration element carries
    only ``translit``/``src_translit``.
    """

    trans: str | None = _text_field()
    orig: str | None = None
    translit: str | None = None
    src_translit: str | None = None


@dataclass_json
@dataclass
class AlternativeWordPayload(DataClassJsonMixin):
    word_postproc: str | None = _text_field()
    score: int | None = None
    has_preceding_space: bool | None = None
    attach_to_next_token: bool | None = None


@dataclass_json
@dataclass
class AlternativeTranslationPayload(DataClassJsonMixin):
    """One element of ``alternative_translations``.

    Attributes:
        src_phrase (str | None): Input line the alternatives were produced for.
        alternative (list[AlternativeWordPayload] | None): Candidate translations, best first.
        raw_src_segment (str | None): Raw input segment, including surrounding whitespace.
    """

    src_phrase: str | None = _text_field()
    alternative: list[AlternativeWordPayload] | None = None
    raw_src_segment: str | None = None
    start_pos: int | None = None
    end_pos: int | None = None


@dataclass_json
@dataclass
class DictionaryEntryPayload(DataClassJsonMixin):
    word: str | None = _text_field()
    reverse_translation: list[str] | None = _text_list_field()
    score: float | None = None


@dataclass_json
@dataclass
class DictionaryPayload(DataClassJsonMixin):
    """One element of ``dict``: the translations of the query for a single part of speech."""

    pos: str | None = _text_field()
    terms: list[str] | None = _text_list_field()
    entry: list[DictionaryEntryPayload] | None = None
    base_form: str | None = None
    pos_enum: int | None = None


@dataclass_json
@dataclass
class DefinitionEntryPayload(DataClassJsonMixin):
    gloss: str | None = _text_field()
    definition_id: str | None = None
    example: str | None = None


@dataclass_json
@dataclass
class DefinitionPayload(DataClassJsonMixin):
    pos: str | None = _text_field()
    entry: list[DefinitionEntryPayload] | None = None
    base_form: str | None = None


@dataclass_json
@dataclass
class LabelInfoPayload(DataClassJsonMixin):
    register: list[str] | None = _text_list_field()
    subject: list[str] | None = None


@dataclass_json
@dataclass
class SynsetEntryPayload(DataClassJsonMixin):
    synonym: list[str] | None = _text_list_field()
    definition_id: str | None = None
    label_info: LabelInfoPayload | None = None


@dataclass_json
@dataclass
class SynsetPayload(DataClassJsonMixin):
    pos: str | None = _text_field()
    entry: list[SynsetEntryPayload] | None = None
    base_form: str | None = None


@dataclass_json
@dataclass
class ExamplePayload(DataClassJsonMixin):
    text: str | None = _text_field()
    source_type: int | None = None
    definition_id: str | None = None


@dataclass_json
@dataclass
class ExampleBucketPayload(DataClassJsonMixin):
    example: list[ExamplePayload] | None = None
