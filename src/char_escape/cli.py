import argparse
import logging
import sys
from pathlib import Path
from typing import Final
from typing import Optional

from pydantic import ValidationError

from char_escape.config import Config
from char_escape.definition import load_escaper_definition
from char_escape.errors import InvalidCharacterError
from char_escape.errors import MissingEscapeCharRuleError
from char_escape.errors import UnescapeError
from char_escape.escaper import Escaper
from char_escape.presets import STRING_LITERAL_ESCAPER

logger: Final = logging.getLogger(__name__)

EXIT_SUCCESS: Final = 0
EXIT_FAILURE: Final = 1
EXIT_INVALID_DEFINITION: Final = 2


def _load_escaper(definition_file: Optional[Path]) -> Escaper:
    if definition_file is None:
        return STRING_LITERAL_ESCAPER
    logger.info(f"Loading escaper definition from {definition_file}.")
    return load_escaper_definition(definition_file).to_escaper()


def _read_input(text: Optional[str]) -> str:
    return sys.stdin.read() if text is None else text


def _write_output(result: str, text: Optional[str]) -> None:
    # Input from stdin is transformed verbatim, an argument gets a trailing newline.
    sys.stdout.write(result if text is None else f"{result}\n")


def escape_action(escaper: Escaper, text: Optional[str]) -> int:
    _write_output(escaper.escape(_read_input(text)), text)
    return EXIT_SUCCESS


def unescape_action(escaper: Escaper, text: Optional[str]) -> int:
    try:
        result: Final = escaper.unescape(_read_input(text))
    except UnescapeError as e:
        logger.error(f"Unable to unescape input: {e}")
        return EXIT_FAILURE
    _write_output(result, text)
    return EXIT_SUCCESS


def check_action(escaper: Escaper, text: Optional[str]) -> int:
    is_escaped: Final = escaper.is_escaped(_read_input(text))
    print("escaped" if is_escaped else "not escaped")
    return EXIT_SUCCESS if is_escaped else EXIT_FAILURE


def _create_parser() -> argparse.ArgumentParser:
    parser: Final = argparse.ArgumentParser(
        prog="char-escape",
        description="Escape and unescape text according to a table of escape rules.",
    )
    parser.add_argument(
        "--definition",
        type=Path,
        default=None,
        help="JSON file describing the escaper (defaults to string literal escaping)",
    )
    subparsers: Final = parser.add_subparsers(required=True)

    for name, action, help_text in (
        ("escape", escape_action, "escape the input"),
        ("unescape", unescape_action, "unescape the input"),
        ("check", check_action, "check whether the input is escaped"),
    ):
        subparser = subparsers.add_parser(name, help=help_text)
        subparser.set_defaults(action=action)
        subparser.add_argument("text", nargs="?", default=None, help="text to process (defaults to stdin)")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    config: Final = Config()
    logging.basicConfig(level=config.log_level)

    args: Final = _create_parser().parse_args(argv)
    definition_file: Final = args.definition if args.definition is not None else config.definition_file

    try:
        escaper: Final = _load_escaper(definition_file)
    except (OSError, ValidationError, MissingEscapeCharRuleError, InvalidCharacterError) as e:
        logger.error(f"Invalid escaper definition '{definition_file}': {e}")
        return EXIT_INVALID_DEFINITION

    return args.action(escaper, args.text)


if __name__ == "__main__":
    sys.exit(main())
