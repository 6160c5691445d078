"""Configuration data models for the gtx-translate command-line front end.

Each dataclass maps to one section of the INI file; attribute names are the keys of that section.
The default values double as the configuration used when no file is given.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__: list[str] = ["Config", "General", "Translation"]

DEFAULT_HOST: str = "translate.googleapis.com"


@dataclass
class General:
    DEBUG: bool = False
    LOG_FILE: str = ""
    SCRIPT_NAME: str = ""


@dataclass
class Translation:
    """Endpoint settings.

    Attributes:
        HOST (str): Host serving ``/translate_a/single``.
        TIMEOUT (float): Total timeout of one request in seconds.
        PROXY (str): Proxy URL used for both http and https. Empty for a direct connection.
        SOURCE_LANGUAGE (str): Default source language name or code.
        TARGET_LANGUAGE (str): Default target language name or code.
    """

    HOST: str = DEFAULT_HOST
    TIMEOUT: float = 10.0
    PROXY: str = ""
    SOURCE_LANGUAGE: str = "auto"
    TARGET_LANGUAGE: str = "en"


@dataclass
class Config:
    GENERAL: General = field(default_factory=General)
    TRANSLATION: Translation = field(default_factory=Translation)
