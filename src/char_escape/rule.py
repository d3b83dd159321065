from typing import NamedTuple
from typing import final


@final
class Rule(NamedTuple):
    """Escaping `unescaped` yields `escaped` (after the escape character), unescaping does the reverse."""

    unescaped: str
    escaped: str
