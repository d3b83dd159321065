from char_escape.builder import escaper
from char_escape.errors import IncompleteEscapeSequenceError
from char_escape.errors import InvalidCharacterError
from char_escape.errors import InvalidEscapeSequenceError
from char_escape.errors import MissingEscapeCharRuleError
from char_escape.errors import UnescapeError
from char_escape.escaper import Escaper
from char_escape.rule import Rule

__all__ = [
    "Escaper",
    "IncompleteEscapeSequenceError",
    "InvalidCharacterError",
    "InvalidEscapeSequenceError",
    "MissingEscapeCharRuleError",
    "Rule",
    "UnescapeError",
    "escaper",
]
