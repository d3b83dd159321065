from typing import Final
from typing import final
from typing_extensions import override


@final
class MissingEscapeCharRuleError(ValueError):
    def __init__(self) -> None:
        super().__init__("no escape sequence defined for the escape character")

    @override
    def __eq__(self, other: object) -> bool:
        return isinstance(other, MissingEscapeCharRuleError)

    @override
    def __hash__(self) -> int:
        return hash(MissingEscapeCharRuleError)


@final
class InvalidCharacterError(ValueError):
    def __init__(self, value: object) -> None:
        super().__init__(f"expected a single character, got {value!r}")
        self.value: Final = value

    @override
    def __eq__(self, other: object) -> bool:
        return isinstance(other, InvalidCharacterError) and other.value == self.value

    @override
    def __hash__(self) -> int:
        # `value` isn't necessarily hashable.
        return hash(InvalidCharacterError)


class UnescapeError(ValueError):
    """Base class of the errors raised while unescaping a string."""


@final
class InvalidEscapeSequenceError(UnescapeError):
    def __init__(self, sequence: str) -> None:
        super().__init__(f"invalid escape sequence: {sequence}")
        self.sequence: Final = sequence

    @override
    def __eq__(self, other: object) -> bool:
        return isinstance(other, InvalidEscapeSequenceError) and other.sequence == self.sequence

    @override
    def __hash__(self) -> int:
        return hash((InvalidEscapeSequenceError, self.sequence))


@final
class IncompleteEscapeSequenceError(UnescapeError):
    """The string ended with a lone escape character."""

    def __init__(self) -> None:
        super().__init__("incomplete escape sequence")

    @override
    def __eq__(self, other: object) -> bool:
        return isinstance(other, IncompleteEscapeSequenceError)

    @override
    def __hash__(self) -> int:
        return hash(IncompleteEscapeSequenceError)
