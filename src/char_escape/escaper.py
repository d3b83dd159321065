import logging
from collections import Counter
from collections.abc import Iterable
from typing import Final
from typing import Self
from typing import final
from typing_extensions import override

from char_escape.errors import IncompleteEscapeSequenceError
from char_escape.errors import InvalidCharacterError
from char_escape.errors import InvalidEscapeSequenceError
from char_escape.errors import MissingEscapeCharRuleError
from char_escape.rule import Rule

logger: Final = logging.getLogger(__name__)


def _is_single_character(value: object) -> bool:
    return isinstance(value, str) and len(value) == 1


def _first_occurrences(pairs: Iterable[tuple[str, str]]) -> dict[str, str]:
    # Later duplicates must not overwrite earlier ones (first match wins).
    lookup: Final[dict[str, str]] = {}
    for key, value in pairs:
        lookup.setdefault(key, value)
    return lookup


def _duplicates(chars: Iterable[str]) -> list[str]:
    return [char for char, count in Counter(chars).items() if count > 1]


def _validate(escape_char: str, rules: tuple[Rule, ...]) -> None:
    if not _is_single_character(escape_char):
        raise InvalidCharacterError(escape_char)
    for rule in rules:
        for char in rule:
            if not _is_single_character(char):
                raise InvalidCharacterError(char)
    if not any(rule.unescaped == escape_char for rule in rules):
        raise MissingEscapeCharRuleError()

    # Ambiguous tables are accepted, lookups use the first rule in table order.
    ambiguous_unescaped: Final = _duplicates(rule.unescaped for rule in rules)
    if ambiguous_unescaped:
        logger.warning(f"Multiple rules escape the characters {ambiguous_unescaped}, the first rule wins.")
    ambiguous_escaped: Final = _duplicates(rule.escaped for rule in rules)
    if ambiguous_escaped:
        logger.warning(f"Multiple rules unescape the characters {ambiguous_escaped}, the first rule wins.")


@final
class Escaper:
    """Escapes and unescapes strings according to a table of `Rule`s.

    Every character with a rule is replaced by the escape character followed by the
    rule's `escaped` character. The rules have to contain a rule for the escape character
    itself, otherwise escape characters in the input cannot be told apart from escape
    sequences. If several rules share a character, the first one in table order is used.
    """

    def __init__(self, escape_char: str, rules: Iterable[Rule], *, validate: bool = True) -> None:
        rule_table: Final = tuple(Rule(*rule) for rule in rules)
        if validate:
            _validate(escape_char, rule_table)
        self._escape_char: Final = escape_char
        self._rules: Final = rule_table
        self._escaped_by_unescaped: Final = _first_occurrences((rule.unescaped, rule.escaped) for rule in rule_table)
        self._unescaped_by_escaped: Final = _first_occurrences((rule.escaped, rule.unescaped) for rule in rule_table)
        logger.debug(f"Created escaper with escape character {escape_char!r} and {len(rule_table)} rule(s).")

    @classmethod
    def new_unchecked(cls, escape_char: str, rules: Iterable[Rule]) -> Self:
        """Create an `Escaper` without validating `escape_char` and `rules`.

        If the rules don't contain a rule for escaping the escape character, `escape()`
        and `unescape()` will behave incorrectly.
        """
        return cls(escape_char, rules, validate=False)

    @property
    def escape_char(self) -> str:
        return self._escape_char

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def escape(self, text: str) -> str:
        """Return `text` with every character that has a rule replaced by its escape sequence."""
        parts: Final[list[str]] = []
        for char in text:
            escaped = self._escaped_by_unescaped.get(char)
            if escaped is None:
                parts.append(char)
            else:
                parts.append(self._escape_char)
                parts.append(escaped)
        return "".join(parts)

    def unescape(self, text: str) -> str:
        """Revert what `escape()` does.

        Raises `InvalidEscapeSequenceError` on the first escape sequence without a rule
        and `IncompleteEscapeSequenceError` if `text` ends with the escape character.
        """
        parts: Final[list[str]] = []
        previous_was_escape_char = False
        for char in text:
            if previous_was_escape_char:
                unescaped = self._unescaped_by_escaped.get(char)
                if unescaped is None:
                    raise InvalidEscapeSequenceError(self._escape_char + char)
                parts.append(unescaped)
                previous_was_escape_char = False
            elif char == self._escape_char:
                previous_was_escape_char = True
            else:
                parts.append(char)

        if previous_was_escape_char:
            raise IncompleteEscapeSequenceError()
        return "".join(parts)

    def is_escaped(self, text: str) -> bool:
        """Check whether `text` could have been produced by `escape()`.

        That is the case if it contains only valid escape sequences, no character that
        needs to be escaped and doesn't end with the escape character. If this returns
        `True`, `unescape()` won't raise.
        """
        previous_was_escape_char = False
        for char in text:
            if previous_was_escape_char:
                if char not in self._unescaped_by_escaped:
                    return False
                previous_was_escape_char = False
            elif char == self._escape_char:
                previous_was_escape_char = True
            elif char in self._escaped_by_unescaped:
                return False
        return not previous_was_escape_char

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Escaper):
            return NotImplemented
        return self._escape_char == other._escape_char and self._rules == other._rules

    @override
    def __hash__(self) -> int:
        return hash((self._escape_char, self._rules))

    @override
    def __repr__(self) -> str:
        return f"Escaper(escape_char={self._escape_char!r}, rules={list(self._rules)!r})"
