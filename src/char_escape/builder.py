from collections.abc import Iterable
from collections.abc import Mapping
from typing import Final

from char_escape.escaper import Escaper
from char_escape.rule import Rule

DEFAULT_ESCAPE_CHAR: Final = "\\"


def escaper(
    rules: Mapping[str, str] | Iterable[Rule | tuple[str, str]],
    *,
    escape_char: str = DEFAULT_ESCAPE_CHAR,
) -> Escaper:
    """The quick and easy way to create an `Escaper`.

    `rules` is either a mapping from unescaped to escaped characters or an iterable of
    `Rule`s. Unless `rules` already define how to escape the escape character, a rule
    escaping it as itself is appended (a backslash becomes two backslashes by default).
    """
    pairs: Final = rules.items() if isinstance(rules, Mapping) else rules
    rule_table: Final = [Rule(*pair) for pair in pairs]
    if not any(rule.unescaped == escape_char for rule in rule_table):
        rule_table.append(Rule(unescaped=escape_char, escaped=escape_char))
    return Escaper(escape_char, rule_table)
