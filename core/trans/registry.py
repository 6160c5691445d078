"""Language name/code table used to resolve caller input into endpoint codes.

The table is loaded once from a JSON file and never changes afterwards. ``LanguageRegistry.default()``
returns the registry built from the file bundled with the package.
"""

from __future__ import annotations

import json
from functools import cache
from json import JSONDecodeError
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final

from core.trans.interface import LanguageTableError
from models.language_models import LanguageEntry
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterable, Iterator, Mapping

__all__: list[str] = ["BUNDLED_LANGUAGE_FILE", "LanguageRegistry"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

BUNDLED_LANGUAGE_FILE: Final[Path] = Path(__file__).with_name("languages.json")


class LanguageRegistry:
    """Immutable bidirectional lookup between language names and codes.

    Lookups are case-sensitive exact matches.

    Args:
        entries (Iterable[LanguageEntry]): Table rows. Names and codes must each be unique.

    Raises:
        LanguageTableError: If a name or a code appears more than once.
    """

    __slots__ = ("_by_code", "_by_name", "_entries")

    def __init__(self, entries: Iterable[LanguageEntry]) -> None:
        by_name: dict[str, str] = {}
        by_code: dict[str, str] = {}
        for entry in entries:
            if entry.name in by_name:
                msg: str = f"Duplicate language name in table: '{entry.name}'"
                raise LanguageTableError(msg)
            if entry.code in by_code:
                msg = f"Duplicate language code in table: '{entry.code}'"
                raise LanguageTableError(msg)
            by_name[entry.name] = entry.code
            by_code[entry.code] = entry.name

        self._by_name: Mapping[str, str] = MappingProxyType(by_name)
        self._by_code: Mapping[str, str] = MappingProxyType(by_code)
        self._entries: tuple[LanguageEntry, ...] = tuple(
            LanguageEntry(name=name, code=code) for name, code in by_name.items()
        )

    @classmethod
    def from_file(cls, path: str | Path) -> LanguageRegistry:
        """Build a registry from a JSON array of ``{"name": ..., "code": ...}`` objects.

        Raises:
            LanguageTableError: If the file cannot be read or a row is invalid.
        """
        path = Path(path)
        try:
            rows: Any = json.loads(path.read_text(encoding="utf-8"))
        except OSError as err:
            msg: str = f"Language table '{path}' cannot be read"
            raise LanguageTableError(msg) from err
        except JSONDecodeError as err:
            msg = f"Language table '{path}' is not valid JSON"
            raise LanguageTableError(msg) from err

        if not isinstance(rows, list):
            msg = f"Language table '{path}' must be a JSON array"
            raise LanguageTableError(msg)

        registry = cls(cls._parse_row(row, index) for index, row in enumerate(rows))
        logger.debug("Loaded %d languages from '%s'", len(registry), path)
        return registry

    @staticmethod
    def _parse_row(row: Any, index: int) -> LanguageEntry:
        if not isinstance(row, dict):
            msg: str = f"Language table row {index} is not an object"
            raise LanguageTableError(msg)
        name: Any = row.get("name")
        code: Any = row.get("code")
        if not isinstance(name, str) or not name or not isinstance(code, str) or not code:
            msg = f"Language table row {index} needs a non-empty 'name' and 'code'"
            raise LanguageTableError(msg)
        return LanguageEntry(name=name, code=code)

    @staticmethod
    @cache
    def default() -> LanguageRegistry:
        """Registry of the bundled language table, loaded on first use."""
        return LanguageRegistry.from_file(BUNDLED_LANGUAGE_FILE)

    def resolve(self, name_or_code: str) -> str:
        """Resolve a language name or code to the code sent upstream.

        A known name returns its code. Anything else, including known codes, unknown codes and
        the "auto" sentinel, is returned unchanged; the endpoint rejects invalid codes itself.
        """
        return self._by_name.get(name_or_code, name_or_code)

    def name_for(self, code: str) -> str | None:
        """Return the human-readable name of ``code``, or None if the code is not in the table."""
        return self._by_code.get(code)

    @property
    def entries(self) -> tuple[LanguageEntry, ...]:
        return self._entries

    @property
    def codes(self) -> frozenset[str]:
        return frozenset(self._by_code)

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._by_name)

    def __contains__(self, name_or_code: object) -> bool:
        return name_or_code in self._by_name or name_or_code in self._by_code

    def __iter__(self) -> Iterator[LanguageEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LanguageRegistry(languages={len(self._entries)})"
