"""Command-line front end for gtx-translate.

Queries the public translation endpoint once and prints the result of the requested intent as JSON.
Settings are read from an optional INI file; command-line options override it.

Example:
    gtx-translate "Hello world" -t Spanish
    gtx-translate bank -s en -t de -i dictionary
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Final, NoReturn

from config.loader import ConfigLoader, ConfigLoaderError
from core.trans.client import TranslateClient
from core.trans.interface import MalformedResponseError, TransportError, ValidationError
from core.version import VERSION
from models.translation_models import Intent
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Sequence

    from models.config_models import Config
    from models.result_models import IntentResult

__all__: list[str] = ["main", "parse_arguments", "run"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

EXIT_OK: Final[int] = 0
EXIT_CONFIG_ERROR: Final[int] = 1
EXIT_USAGE_ERROR: Final[int] = 2
EXIT_TRANSPORT_ERROR: Final[int] = 3
EXIT_MALFORMED_RESPONSE: Final[int] = 4


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        print(f"\n{message}\n", file=sys.stderr)
        self.print_help(sys.stderr)
        raise SystemExit(EXIT_USAGE_ERROR)


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = _ArgumentParser(
        prog="gtx-translate",
        description="Query the public Google translation endpoint",
        epilog='Example: gtx-translate "Hello world" -t Spanish',
    )
    parser.add_argument("text", nargs="?", default=None, help="Text (or single word) to query")
    parser.add_argument("-s", "--source", dest="source", metavar="LANG", help="Source language name or code")
    parser.add_argument("-t", "--target", dest="target", metavar="LANG", help="Target language name or code")
    parser.add_argument(
        "-i",
        "--intent",
        dest="intent",
        choices=[intent.value for intent in Intent],
        default=Intent.TRANSLATION.value,
        help="Requested category of information (default: %(default)s)",
    )
    parser.add_argument("-c", "--config", dest="config", metavar="FILE", help="INI configuration file")
    parser.add_argument("--host", dest="host", help="Host serving the endpoint")
    parser.add_argument("--timeout", dest="timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--proxy", dest="proxy", help="Proxy URL")
    parser.add_argument("--log-file", dest="log_file", metavar="FILE", help="Write debug logs to FILE")
    parser.add_argument("--list-languages", action="store_true", help="Print the language table and exit")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> Config:
    """Load the configuration file (if any) and apply command-line overrides.

    Raises:
        ConfigLoaderError: If the configuration file cannot be loaded.
    """
    script_name: str = Path(sys.argv[0]).stem
    overrides: dict[str, object] = {
        key: value for key, value in vars(args).items() if key not in ("config", "text", "intent", "list_languages")
    }
    return ConfigLoader(config_filename=args.config, script_name=script_name, **overrides).config


def configure_logging(config: Config) -> None:
    log_file: str = config.GENERAL.LOG_FILE.strip()
    logger_utils = LoggerUtils(str(Path(log_file).expanduser().resolve()) if log_file else "")
    logger_utils.set_level("DEBUG" if config.GENERAL.DEBUG else "INFO")


def render(result: IntentResult) -> str:
    return json.dumps(result.to_dict(encode_json=True), ensure_ascii=False, indent=2)


async def run(args: argparse.Namespace, config: Config) -> int:
    """Execute one query (or list the languages) and print the outcome.

    Returns:
        int: Process exit code.
    """
    async with TranslateClient.from_config(config) as client:
        if args.list_languages:
            for entry in client.supported_languages():
                print(f"{entry.code}\t{entry.name}")
            return EXIT_OK

        if args.text is None:
            print("\nError: no text given.", file=sys.stderr)
            return EXIT_USAGE_ERROR

        try:
            result: IntentResult = await client.translate(
                args.text,
                source_language=config.TRANSLATION.SOURCE_LANGUAGE,
                target_language=config.TRANSLATION.TARGET_LANGUAGE,
                intent=Intent(args.intent),
            )
        except ValidationError as err:
            print(f"\nError: {err}", file=sys.stderr)
            return EXIT_USAGE_ERROR
        except TransportError as err:
            print(f"\nError: {err}", file=sys.stderr)
            return EXIT_TRANSPORT_ERROR
        except MalformedResponseError as err:
            print(f"\nError: unexpected response from the endpoint: {err}", file=sys.stderr)
            return EXIT_MALFORMED_RESPONSE

    print(render(result))
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the ``gtx-translate`` command."""
    args: argparse.Namespace = parse_arguments(argv)
    try:
        config: Config = load_config(args)
    except ConfigLoaderError as err:
        print("\nError: Failed to load configuration file.", file=sys.stderr)
        print(f"Details: {err}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_logging(config)
    logger.debug("Configuration: %s", config)
    return asyncio.run(run(args, config))


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.", file=sys.stderr)
        sys.exit(130)
