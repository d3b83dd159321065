"""Describe escapers as data, e.g. to load them from JSON files."""

from pathlib import Path
from typing import Annotated
from typing import Final
from typing import Self
from typing import final

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from char_escape.builder import DEFAULT_ESCAPE_CHAR
from char_escape.builder import escaper
from char_escape.errors import MissingEscapeCharRuleError
from char_escape.escaper import Escaper
from char_escape.rule import Rule

Character = Annotated[str, Field(min_length=1, max_length=1)]


@final
class RuleModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    unescaped: Character
    escaped: Character


@final
class EscaperDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    escape_char: Character = DEFAULT_ESCAPE_CHAR
    rules: list[RuleModel]
    # Append a rule escaping the escape character as itself (unless one is defined).
    implicit_escape_char_rule: bool = False

    def to_escaper(self) -> Escaper:
        rules: Final = [Rule(unescaped=rule.unescaped, escaped=rule.escaped) for rule in self.rules]
        if self.implicit_escape_char_rule:
            return escaper(rules, escape_char=self.escape_char)
        return Escaper(self.escape_char, rules)

    @classmethod
    def from_escaper(cls, escaper_: Escaper) -> Self:
        """Describe `escaper_` as data.

        Raises `MissingEscapeCharRuleError` for escapers created by `Escaper.new_unchecked()`
        without a rule for the escape character, since `to_escaper()` couldn't recreate them.
        """
        if not any(rule.unescaped == escaper_.escape_char for rule in escaper_.rules):
            raise MissingEscapeCharRuleError()
        return cls(
            escape_char=escaper_.escape_char,
            rules=[RuleModel(unescaped=rule.unescaped, escaped=rule.escaped) for rule in escaper_.rules],
        )


def load_escaper_definition(path: Path) -> EscaperDefinition:
    # Bytes are validated as UTF-8 by pydantic, so encoding errors become a `ValidationError`.
    contents: Final = path.read_bytes()
    return EscaperDefinition.model_validate_json(contents)
