"""Module for query token types."""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar


class Token:
    """Base class for all token types.

    Every token renders to a diagnostic string of the form
    ``(<category>, <payload-or-symbol>)``. Structural tokens carry no payload
    and render their operator symbol instead.
    """

    category: ClassVar[str]
    symbol: ClassVar[str] = ""

    @property
    def text(self) -> str:
        """The payload or symbol shown when rendering the token."""
        return self.symbol

    def render(self) -> str:
        """Return the diagnostic representation of the token."""
        return f"({self.category}, {self.text})"

    def __str__(self) -> str:
        """Return the display form used in log and error messages."""
        return f"Token: {self.render()}"


@dataclass(slots=True, frozen=True)
class Gt(Token):
    """Token representing greater than (>) character."""

    category = "GT"
    symbol = ">"


@dataclass(slots=True, frozen=True)
class Lt(Token):
    """Token representing less than (<) character."""

    category = "LT"
    symbol = "<"


@dataclass(slots=True, frozen=True)
class GtEq(Token):
    """Token representing greater than or equal to (>=) characters."""

    category = "GTE"
    symbol = ">="


@dataclass(slots=True, frozen=True)
class LtEq(Token):
    """Token representing less than or equal to (<=) characters."""

    category = "LTE"
    symbol = "<="


@dataclass(slots=True, frozen=True)
class Eq(Token):
    """Token representing equal to (=) character."""

    category = "EQ"
    symbol = "="


@dataclass(slots=True, frozen=True)
class NotEq(Token):
    """Token representing not equal to (!= or ^=) characters."""

    category = "NE"
    symbol = "!="


@dataclass(slots=True, frozen=True)
class Like(Token):
    """Token representing the pattern match (~ or ^) character."""

    category = "LIKE"
    symbol = "~"


@dataclass(slots=True, frozen=True)
class NotLike(Token):
    """Token representing the negated pattern match (!~ or ^^) characters."""

    category = "NLIKE"
    symbol = "!~"


@dataclass(slots=True, frozen=True)
class And(Token):
    """Token representing the logical AND keyword."""

    category = "AND"
    symbol = "AND"


@dataclass(slots=True, frozen=True)
class Or(Token):
    """Token representing the logical OR keyword."""

    category = "OR"
    symbol = "OR"


@dataclass(slots=True, frozen=True)
class LParen(Token):
    """Token representing a left parenthesis."""

    category = "LP"
    symbol = "'('"


@dataclass(slots=True, frozen=True)
class RParen(Token):
    """Token representing a right parenthesis."""

    category = "RP"
    symbol = "')'"


@dataclass(slots=True, frozen=True)
class End(Token):
    """Token representing the end of input."""

    category = "EOF"
    symbol = "EOF"


@dataclass(slots=True, frozen=True)
class Str(Token):
    """Token representing a free-text string literal."""

    value: str

    category = "String"

    @property
    def text(self) -> str:
        """The literal text, verbatim."""
        return self.value


@dataclass(slots=True, frozen=True)
class Float(Token):
    """Token representing a numeric literal."""

    value: float

    category = "Float"

    @property
    def text(self) -> str:
        """The number, without a fractional part when it is integral."""
        if self.value.is_integer():
            if self.value == 0 and math.copysign(1.0, self.value) < 0:
                return "-0"
            return str(int(self.value))
        return repr(self.value)


@dataclass(slots=True, frozen=True)
class Date(Token):
    """Token representing a date-time literal.

    The value is always timezone aware; literals are parsed to the minute.
    """

    value: datetime

    category = "Date"

    @property
    def text(self) -> str:
        """The timestamp in ISO format with a space separator."""
        return str(self.value)


@dataclass(slots=True, frozen=True)
class Unexpected(Token):
    """Token representing unrecognized input, for the parser to reject."""

    value: str

    category = "Unexpected"

    @property
    def text(self) -> str:
        """The offending character or text."""
        return self.value


STRUCTURAL_TOKENS: tuple[type[Token], ...] = (
    Gt,
    Lt,
    GtEq,
    LtEq,
    Eq,
    NotEq,
    Like,
    NotLike,
    And,
    Or,
    LParen,
    RParen,
    End,
)
"""Token classes that carry no payload."""

LITERAL_TOKENS: tuple[type[Token], ...] = (Str, Float, Date, Unexpected)
"""Token classes that carry a payload."""
