"""Language table entry model."""

from __future__ import annotations

from dataclasses import dataclass

from dataclasses_json import DataClassJsonMixin, dataclass_json

__all__: list[str] = ["LanguageEntry"]


@dataclass_json
@dataclass(frozen=True)
class LanguageEntry(DataClassJsonMixin):
    """One row of the bundled language table.

    Attributes:
        name (str): Human-readable language name, e.g. "English".
        code (str): Code understood by the translation endpoint, e.g. "en".
    """

    name: str
    code: str

    def __str__(self) -> str:
        return f"{self.name} ({self.code})"
