"""
Directive token and matching models

Defines the token extracted from directive and boundary lines, the
reserved directive names, and the name-comparison modes.
"""

from enum import Enum
from dataclasses import dataclass


# Reserved directive names (without the delimiter)
WHOLE_FILE_NAME: str = "@CONTENT"
PREAMBLE_NAME: str = "@HEADER"


class MatchMode(str, Enum):
    """
    How a requested section name is compared with a boundary name

    STRICT is plain equality. LEGACY compares only the first
    min(len(requested), len(candidate)) characters, so "intro" also
    selects "introduction" and "in" selects "intro".
    """
    STRICT = "strict"
    LEGACY = "legacy"


@dataclass(frozen=True)
class DirectiveToken:
    """
    Token read from a directive line or a section-boundary line

    Attributes:
        delimiter: The delimiter character that introduced the token
        name: Identifier following the delimiter (may be empty)

    Example:
        For template line "  #intro\\n":
        DirectiveToken(delimiter="#", name="intro")
    """
    delimiter: str
    name: str

    @property
    def text(self) -> str:
        """Delimiter-prefixed token as written, e.g. '#intro'"""
        return f"{self.delimiter}{self.name}"

    def __str__(self) -> str:
        return self.text
