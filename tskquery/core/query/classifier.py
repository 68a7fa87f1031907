"""Module for classifying lexemes into query tokens.

Both classifiers are pure functions. ``classify_char`` handles standalone
structural characters, ``classify`` handles every other lexeme. Neither ever
raises: input that fits no category becomes an ``Unexpected`` token (for
characters) or a ``Str`` token (for lexemes).
"""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo

from tskquery.core.query import tokens

CHARS: dict[str, tokens.Token] = {
    "(": tokens.LParen(),
    ")": tokens.RParen(),
    ">": tokens.Gt(),
    "<": tokens.Lt(),
    "=": tokens.Eq(),
    "^": tokens.Like(),
    "~": tokens.Like(),
}

STRUCTURAL_CHARS = frozenset(CHARS)
"""Characters recognized by ``classify_char``."""

LEXEMES: dict[str, tokens.Token] = {
    ">=": tokens.GtEq(),
    "<=": tokens.LtEq(),
    "^=": tokens.NotEq(),
    "!=": tokens.NotEq(),
    "^^": tokens.NotLike(),
    "!~": tokens.NotLike(),
    "": tokens.End(),
    "EOF": tokens.End(),
    "AND": tokens.And(),
    "and": tokens.And(),
    "OR": tokens.Or(),
    "or": tokens.Or(),
}

NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


@dataclass(slots=True, frozen=True)
class DateFormat:
    """An accepted date-time literal format.

    Attributes:
        name (str): Human readable description of the format.
        pattern (re.Pattern): Exact shape the whole lexeme must have. It
            captures the timestamp as ``stamp`` and, for 12-hour formats,
            the marker as ``meridiem``.
        directive (str): ``strptime`` directive applied to ``stamp``.
    """

    name: str
    pattern: re.Pattern[str]
    directive: str

    def parse(self, text: str, tz: tzinfo | None = None) -> datetime | None:
        """Parse the text in this format.

        Args:
            text (str): The complete lexeme.
            tz (tzinfo | None): Zone to attach. Defaults to the local zone.

        Returns:
            datetime | None: The aware timestamp, or None if the text does
            not fully match this format or names an invalid calendar date.
        """
        match = self.pattern.fullmatch(text)
        if match is None:
            return None
        try:
            naive = datetime.strptime(match["stamp"], self.directive)
        except ValueError:
            return None

        # %I without %p reads 12 as midnight, so shifting pm by 12 hours
        # yields noon for 12:xx pm and 13-23 for the others.
        meridiem = match.groupdict().get("meridiem")
        if meridiem is not None and meridiem.lower() == "pm":
            naive += timedelta(hours=12)

        try:
            return localize(naive, tz)
        except (OverflowError, OSError, ValueError):  # outside years 1-9999 or time_t
            return None


_STAMP = r"(?P<stamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2})"

DATE_FORMATS: tuple[DateFormat, ...] = (
    DateFormat(
        "12-hour clock, lowercase am/pm",
        re.compile(_STAMP + r" (?P<meridiem>am|pm)", re.ASCII),
        "%Y-%m-%d %I:%M",
    ),
    DateFormat(
        "12-hour clock, uppercase AM/PM",
        re.compile(_STAMP + r" (?P<meridiem>AM|PM)", re.ASCII),
        "%Y-%m-%d %I:%M",
    ),
    DateFormat(
        "24-hour clock",
        re.compile(_STAMP, re.ASCII),
        "%Y-%m-%d %H:%M",
    ),
)
"""Accepted date-time formats, in the order they are tried."""


def localize(naive: datetime, tz: tzinfo | None = None) -> datetime:
    """Attach a time zone to a naive timestamp.

    Without an explicit zone the process's local zone is used, with the
    offset in effect at that instant.
    """
    if tz is None:
        return naive.astimezone()
    return naive.replace(tzinfo=tz)


def parse_number(text: str) -> float | None:
    """Parse the whole text as a decimal number, or return None."""
    if NUMBER.fullmatch(text) is None:
        return None
    return float(text)


def parse_date(text: str, tz: tzinfo | None = None) -> datetime | None:
    """Parse the whole text with the first matching date format, or return None."""
    for fmt in DATE_FORMATS:
        if (value := fmt.parse(text, tz)) is not None:
            return value
    return None


def classify_char(char: str) -> tokens.Token:
    """Classify a single structural character.

    Args:
        char (str): A single character delimited by the scanner.

    Returns:
        Token: The structural token, or ``Unexpected`` carrying the character.
    """
    return CHARS.get(char) or tokens.Unexpected(char)


def classify(lexeme: str, tz: tzinfo | None = None) -> tokens.Token:
    """Classify a multi-character lexeme.

    The checks run in a fixed order and the first success wins: numeric
    literal, then each date format, then the operator and keyword table.
    Anything else is a string literal carrying the lexeme verbatim.

    Args:
        lexeme (str): The lexeme delimited by the scanner.
        tz (tzinfo | None): Zone for date literals. Defaults to the local zone.

    Returns:
        Token: The classified token.
    """
    if (number := parse_number(lexeme)) is not None:
        return tokens.Float(number)

    if (date := parse_date(lexeme, tz)) is not None:
        return tokens.Date(date)

    if (token := LEXEMES.get(lexeme)) is not None:
        return token

    return tokens.Str(lexeme)
