"""Ready-made escapers for common use cases."""

from typing import Final

from char_escape.builder import escaper
from char_escape.escaper import Escaper

STRING_LITERAL_ESCAPER: Final[Escaper] = escaper(
    {
        "\n": "n",
        "\r": "r",
        "\t": "t",
        "\\": "\\",
        "'": "'",
        '"': '"',
    }
)

WHITESPACE_ESCAPER: Final[Escaper] = escaper(
    {
        "\n": "n",
        " ": "w",
    }
)
