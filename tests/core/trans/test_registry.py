"""Unit tests for the language registry."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from core.trans.interface import LanguageTableError
from core.trans.registry import LanguageRegistry
from models.language_models import LanguageEntry

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def registry() -> LanguageRegistry:
    return LanguageRegistry(
        [
            LanguageEntry(name="English", code="en"),
            LanguageEntry(name="Spanish", code="es"),
            LanguageEntry(name="Chinese Simplified", code="zh-CN"),
        ]
    )


def test_resolve_name_returns_code(registry: LanguageRegistry) -> None:
    assert registry.resolve("Spanish") == "es"
    assert registry.resolve("Chinese Simplified") == "zh-CN"


def test_resolve_known_code_is_unchanged(registry: LanguageRegistry) -> None:
    assert registry.resolve("en") == "en"


def test_resolve_passes_unknown_input_through(registry: LanguageRegistry) -> None:
    assert registry.resolve("auto") == "auto"
    assert registry.resolve("xx") == "xx"
    assert registry.resolve("Klingon") == "Klingon"


def test_resolve_is_case_sensitive(registry: LanguageRegistry) -> None:
    assert registry.resolve("spanish") == "spanish"
    assert registry.resolve("EN") == "EN"


@pytest.mark.parametrize("value", ["English", "en", "Spanish", "es", "auto", "xx"])
def test_resolve_is_idempotent(registry: LanguageRegistry, value: str) -> None:
    once: str = registry.resolve(value)

    assert registry.resolve(once) == once


def test_name_for_reverse_lookup(registry: LanguageRegistry) -> None:
    assert registry.name_for("es") == "Spanish"
    assert registry.name_for("xx") is None
    assert registry.name_for("Spanish") is None


def test_container_protocol(registry: LanguageRegistry) -> None:
    assert len(registry) == 3
    assert "English" in registry
    assert "es" in registry
    assert "auto" not in registry
    assert [entry.code for entry in registry] == ["en", "es", "zh-CN"]
    assert registry.codes == frozenset({"en", "es", "zh-CN"})
    assert registry.names == frozenset({"English", "Spanish", "Chinese Simplified"})


def test_registry_rejects_new_attributes(registry: LanguageRegistry) -> None:
    with pytest.raises(AttributeError):
        registry.extra = "value"  # type: ignore[attr-defined]


def test_registry_tables_are_read_only(registry: LanguageRegistry) -> None:
    with pytest.raises(TypeError):
        registry._by_name["German"] = "de"  # type: ignore[index]


def test_duplicate_code_raises() -> None:
    with pytest.raises(LanguageTableError):
        LanguageRegistry([LanguageEntry(name="Norwegian", code="no"), LanguageEntry(name="Bokmal", code="no")])


def test_duplicate_name_raises() -> None:
    with pytest.raises(LanguageTableError):
        LanguageRegistry([LanguageEntry(name="Hebrew", code="iw"), LanguageEntry(name="Hebrew", code="he")])


def test_from_file_loads_rows(tmp_path: Path) -> None:
    path: Path = tmp_path / "languages.json"
    path.write_text(json.dumps([{"name": "German", "code": "de"}]), encoding="utf-8")

    registry: LanguageRegistry = LanguageRegistry.from_file(path)

    assert registry.resolve("German") == "de"
    assert registry.entries == (LanguageEntry(name="German", code="de"),)


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        json.dumps({"name": "German", "code": "de"}),
        json.dumps(["German"]),
        json.dumps([{"name": "German"}]),
        json.dumps([{"name": "", "code": "de"}]),
    ],
)
def test_from_file_rejects_invalid_tables(tmp_path: Path, content: str) -> None:
    path: Path = tmp_path / "languages.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(LanguageTableError):
        LanguageRegistry.from_file(path)


def test_from_file_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(LanguageTableError):
        LanguageRegistry.from_file(tmp_path / "missing.json")


def test_default_registry_is_cached_and_bundled() -> None:
    first: LanguageRegistry = LanguageRegistry.default()
    second: LanguageRegistry = LanguageRegistry.default()

    assert first is second
    assert first.resolve("English") == "en"
    assert first.resolve("Spanish") == "es"
    assert first.name_for("ja") == "Japanese"
    assert len(first) > 100
