"""Configuration file loader and validator.

Handles reading, formatting, and validating settings from the INI configuration file of the
command-line front end. Raises exceptions for any issues encountered during loading.
"""

from __future__ import annotations

import ast
import configparser
from configparser import ConfigParser
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final
from urllib.parse import urlsplit

from models.config_models import Config
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable
    from dataclasses import Field as DataclassField
else:
    from dataclasses import Field as DataclassField

__all__: list[str] = [
    "Config",
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigLoader",
    "ConfigLoaderError",
    "ConfigTypeError",
    "ConfigValueError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

ALLOWED_PROXY_SCHEMES: Final[tuple[str, ...]] = ("http", "https")

# command-line argument name -> (section, key)
ARGUMENT_OVERRIDES: Final[dict[str, tuple[str, str]]] = {
    "host": ("TRANSLATION", "HOST"),
    "timeout": ("TRANSLATION", "TIMEOUT"),
    "proxy": ("TRANSLATION", "PROXY"),
    "source": ("TRANSLATION", "SOURCE_LANGUAGE"),
    "target": ("TRANSLATION", "TARGET_LANGUAGE"),
    "log_file": ("GENERAL", "LOG_FILE"),
}


class ConfigLoaderError(Exception):
    """An error occurred while processing the configuration file."""


class ConfigFileNotFoundError(ConfigLoaderError):
    """The specified configuration file does not exist."""


class ConfigFormatError(ConfigLoaderError):
    """The configuration file is not formatted correctly."""


class ConfigValueError(ConfigFormatError):
    """The configuration file contains an invalid value."""


class ConfigTypeError(ConfigFormatError):
    """The configuration file contains an invalid type."""


class ConfigLoader:
    """Handles loading and validation of configuration settings.

    Without a file name the defaults of `Config` are used. Command-line values given as keyword
    arguments override the file.

    Args:
        config_filename (str | None): INI file name to load. None to use the defaults only.
        script_name (str): Executing script name, used in error messaging.
        **args: Overrides; ``debug`` plus the keys of ``ARGUMENT_OVERRIDES``. None values are ignored.

    Raises:
        ConfigFileNotFoundError: If the configuration file does not exist.
        ConfigFormatError: If the file cannot be parsed or contains invalid values/types.
    """

    def __init__(
        self,
        *,
        config_filename: str | None,
        script_name: str,
        **args: Any,
    ) -> None:
        self.config = Config()
        self.config.GENERAL.SCRIPT_NAME = script_name

        if config_filename is not None:
            self._load_file(config_filename, script_name)

        for arg_name, (section_name, key_name) in ARGUMENT_OVERRIDES.items():
            if args.get(arg_name) is not None:
                setattr(getattr(self.config, section_name), key_name, args[arg_name])
        if args.get("debug", False):
            self.config.GENERAL.DEBUG = True
        self._validate_settings()

    def _load_file(self, config_filename: str, script_name: str) -> None:
        msg: str
        if not Path(config_filename).exists():
            msg = (
                f"Configuration file '{config_filename}' not found. "
                f"Please create '{config_filename}' or run '{script_name}' without '--config'."
            )
            raise ConfigFileNotFoundError(msg)

        parser: ConfigParser = ConfigParser()
        try:
            parser.read(config_filename, encoding="utf-8")
        except configparser.Error as err:
            msg = f"Failed to parse configuration file '{config_filename}': {err}"
            raise ConfigFormatError(msg) from None

        self._convert_settings(parser)
        logger.debug("Configuration loaded from '%s'", config_filename)

    def _convert_settings(self, parser: ConfigParser) -> None:
        """Copy every known section/key of the parser onto the Config object.

        Raises:
            ConfigFormatError: If a value cannot be parsed or coerced to the expected type.
        """
        formatter = _ConfigFormatter(self.config, parser)
        for section in fields(self.config):
            if not parser.has_section(section.name):
                logger.debug("Skipping undefined section: '%s'", section.name)
                continue
            self._convert_section_field(parser, formatter, section)

    def _convert_section_field(
        self, parser: ConfigParser, formatter: _ConfigFormatter, section: DataclassField[Any]
    ) -> None:
        for key in fields(getattr(self.config, section.name)):
            if not parser.has_option(section.name, key.name):
                logger.debug("Skipping undefined setting: '%s.%s'", section.name, key.name)
                continue

            formatted_value = formatter.apply_format(section, key)
            setattr(getattr(self.config, section.name), key.name, formatted_value)

    def _validate_settings(self) -> None:
        """Validate the endpoint settings.

        Raises:
            ConfigFormatError: If validation fails for any setting.
        """
        self._validate_string("TRANSLATION", "HOST", allow_empty=False)
        self._validate_string("TRANSLATION", "SOURCE_LANGUAGE", allow_empty=False)
        self._validate_string("TRANSLATION", "TARGET_LANGUAGE", allow_empty=True)
        self._validate_string("GENERAL", "LOG_FILE", allow_empty=True)

        timeout: Any = self.config.TRANSLATION.TIMEOUT
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
            msg: str = f"Unsupported type used for 'TRANSLATION.TIMEOUT': {type(timeout)}"
            raise ConfigTypeError(msg)
        if timeout <= 0:
            msg = f"'TRANSLATION.TIMEOUT' must be greater than 0: {timeout}"
            raise ConfigValueError(msg)
        self.config.TRANSLATION.TIMEOUT = float(timeout)

        self._validate_string("TRANSLATION", "PROXY", allow_empty=True)
        proxy: str = self.config.TRANSLATION.PROXY.strip()
        if proxy and urlsplit(proxy).scheme not in ALLOWED_PROXY_SCHEMES:
            msg = f"Unsupported proxy scheme used for 'TRANSLATION.PROXY': {proxy}"
            raise ConfigValueError(msg)

    def _validate_string(self, section_name: str, key_name: str, *, allow_empty: bool) -> None:
        value: Any = getattr(getattr(self.config, section_name), key_name)
        field_name: str = f"{section_name}.{key_name}"

        if not isinstance(value, str):
            msg: str = f"Unsupported type used for '{field_name}': {type(value)}"
            raise ConfigTypeError(msg)
        if not allow_empty and not value.strip():
            msg = f"'{field_name}' must not be empty"
            raise ConfigValueError(msg)


class _ConfigFormatter:
    """Turns the raw INI strings of one file into values of the matching Config field types.

    DEBUG-style flags accept every spelling ``ConfigParser.getboolean`` knows; numbers may be quoted.
    Any other setting is a Python literal, so strings are written quoted in the INI file.
    """

    def __init__(self, config: Config, parser: ConfigParser) -> None:
        self.config: Config = config
        self.parser: ConfigParser = parser
        self._coercers: dict[type, Callable[[str, str], bool | float]] = {
            bool: self.to_bool,
            float: self.to_float,
        }

    def apply_format(self, section: DataclassField[Any], key: DataclassField[Any]) -> Any:
        """Return the INI value of ``section.key`` coerced to the type of the current setting.

        Raises:
            ConfigValueError: If the value does not fit the expected type.
            ConfigTypeError: If the value has a type the coercion cannot handle.
            ConfigFormatError: If a literal is not valid Python syntax.
        """
        current: Any = getattr(getattr(self.config, section.name), key.name)
        coercer: Callable[[str, str], bool | float] | None = self._coercers.get(type(current))
        if coercer is None:
            return self.to_literal(section.name, key.name)

        try:
            return coercer(section.name, key.name)
        except ValueError as err:
            msg = f"Invalid value for {section.name}.{key.name}: {err}"
            raise ConfigValueError(msg) from err
        except TypeError as err:
            msg = f"Invalid value for {section.name}.{key.name}: {err}"
            raise ConfigTypeError(msg) from err

    def to_bool(self, section_name: str, key_name: str) -> bool:
        return self.parser.getboolean(section_name, key_name)

    def to_float(self, section_name: str, key_name: str) -> float:
        return float(self.parser.get(section_name, key_name).strip().strip("'\""))

    def to_literal(self, section_name: str, key_name: str) -> Any:
        raw: str = self.parser.get(section_name, key_name)
        try:
            return ast.literal_eval(raw)
        except ValueError as err:
            msg = f"Invalid literal for {section_name}.{key_name}: {raw}"
            raise ConfigValueError(msg) from err
        except SyntaxError as err:
            msg = f"Invalid literal for {section_name}.{key_name}: {raw}"
            raise ConfigFormatError(msg) from err
