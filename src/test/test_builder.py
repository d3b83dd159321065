import logging
from typing import Final

import pytest

from char_escape.builder import escaper
from char_escape.escaper import Escaper
from char_escape.presets import STRING_LITERAL_ESCAPER
from char_escape.presets import WHITESPACE_ESCAPER
from char_escape.rule import Rule


def test_escaper_adds_rule_for_escape_character() -> None:
    built: Final = escaper({"\n": "n", "\r": "r", "\t": "t"})
    spelled_out: Final = Escaper(
        "\\",
        [
            Rule(unescaped="\n", escaped="n"),
            Rule(unescaped="\r", escaped="r"),
            Rule(unescaped="\t", escaped="t"),
            Rule(unescaped="\\", escaped="\\"),
        ],
    )
    assert built == spelled_out


def test_escaper_with_custom_escape_character() -> None:
    built: Final = escaper([Rule("\n", "n"), ("\t", "t")], escape_char="#")
    assert built == Escaper("#", [Rule("\n", "n"), Rule("\t", "t"), Rule("#", "#")])
    assert built.escape("#\n") == "###n"


def test_mappings_and_rules_are_equivalent() -> None:
    assert escaper({"\n": "n", "\r": "r"}) == escaper([Rule("\n", "n"), Rule("\r", "r")])
    assert escaper({"\n": "n", "\r": "r"}) == escaper([("\n", "n"), ("\r", "r")], escape_char="\\")


def test_explicit_rule_for_escape_character_is_kept(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="char_escape.escaper"):
        built = escaper({"\\": "b", "\n": "n"})

    assert built.rules == (Rule("\\", "b"), Rule("\n", "n"))
    assert built.escape("\\\n") == r"\b\n"
    assert not caplog.records


def test_string_literal_escaper() -> None:
    assert STRING_LITERAL_ESCAPER.escape_char == "\\"
    assert STRING_LITERAL_ESCAPER.escape("\n\r\t\\'\"") == r"\n\r\t\\\'\""
    assert STRING_LITERAL_ESCAPER.unescape(r"\n\r\t\\\'\"") == "\n\r\t\\'\""


def test_whitespace_escaper() -> None:
    unescaped: Final = "line1\nline2\n\nline3 with whitespace"
    escaped: Final = r"line1\nline2\n\nline3\wwith\wwhitespace"

    assert WHITESPACE_ESCAPER.escape(unescaped) == escaped
    assert WHITESPACE_ESCAPER.unescape(escaped) == unescaped
    assert WHITESPACE_ESCAPER.escape("C:\\") == r"C:\\"
