"""Module for tokenizing user queries."""

from collections.abc import Iterable, Iterator
from datetime import tzinfo

from tskquery.core.logging import logger
from tskquery.core.query import tokens
from tskquery.core.query.classifier import (
    LEXEMES,
    STRUCTURAL_CHARS,
    classify,
    classify_char,
)
from tskquery.exceptions import QuerySyntaxError

OPERATOR_CHARS = STRUCTURAL_CHARS | {"!"}
QUOTE = '"'


class QueryLexer:
    """Class to split a query into lexemes and classify them into tokens."""

    def __init__(self, query: str, tz: tzinfo | None = None):
        """Initialize with the query string and the zone for date literals."""
        self.text = query
        self.tz = tz
        self.position = 0
        self.read_position = 0
        self.read_char()

    def read_char(self) -> None:
        """Read the next character and advance the position."""
        if self.read_position >= len(self.text):
            self.chr = ""
        else:
            self.chr = self.text[self.read_position]

        self.position = self.read_position
        self.read_position += 1

    def peek(self) -> str:
        """Peek at the next character without advancing the position."""
        return (
            self.text[self.read_position] if self.read_position < len(self.text) else ""
        )

    def skip_whitespace(self) -> None:
        """Advance past any whitespace."""
        while self.chr and self.chr.isspace():
            self.read_char()

    def read_word(self) -> str:
        """Read a word until whitespace, an operator or a quote is encountered."""
        start_position = self.position
        while (
            (nxt := self.peek())
            and not nxt.isspace()
            and nxt not in OPERATOR_CHARS
            and nxt != QUOTE
        ):
            self.read_char()
        return self.text[start_position : self.read_position]

    def read_quoted(self) -> str | None:
        """Read a quoted region and return its inner text.

        Returns None when the closing quote is missing, after consuming the
        rest of the input.
        """
        start_position = self.read_position
        end_position = self.text.find(QUOTE, start_position)
        if end_position == -1:
            while self.peek():
                self.read_char()
            return None
        while self.read_position <= end_position:
            self.read_char()
        return self.text[start_position:end_position]

    def __iter__(self) -> Iterator[tokens.Token]:
        """Yield every token up to the end of input, then a single End.

        An End classified from an ``EOF`` lexeme mid-query does not stop
        iteration.
        """
        while True:
            self.skip_whitespace()
            if self.chr == "":
                break
            yield self.next_token()
        yield self.next_token()

    def next_token(self) -> tokens.Token:
        """Return the next token from the input."""
        self.skip_whitespace()
        start_position = self.position

        tok: tokens.Token
        match self.chr:
            case "":
                tok = tokens.End()
            case '"':
                inner = self.read_quoted()
                if inner is None:
                    tok = tokens.Unexpected(self.text[start_position:])
                elif inner == "":
                    tok = tokens.Str("")
                else:
                    tok = classify(inner, self.tz)
            case c if c in OPERATOR_CHARS:
                if len(pair := c + self.peek()) == 2 and pair in LEXEMES:
                    self.read_char()
                    tok = LEXEMES[pair]
                else:
                    tok = classify_char(c)
            case _:
                tok = classify(self.read_word(), self.tz)

        if isinstance(tok, tokens.Unexpected):
            logger.debug(
                "Unexpected input %r at position %d in query %r.",
                tok.value,
                start_position,
                self.text,
            )

        self.read_char()
        return tok


def tokenize(query: str, tz: tzinfo | None = None) -> list[tokens.Token]:
    """Tokenize a complete query, including the trailing End token."""
    return list(QueryLexer(query, tz))


def tokens_from_lexemes(
    lexemes: Iterable[str], tz: tzinfo | None = None
) -> list[tokens.Token]:
    """Classify an already delimited sequence of lexemes.

    One-character lexemes that are structural characters go through the
    single-character classifier, everything else through the lexeme
    classifier. No End token is appended.
    """
    return [
        classify_char(lexeme)
        if len(lexeme) == 1 and lexeme in STRUCTURAL_CHARS
        else classify(lexeme, tz)
        for lexeme in lexemes
    ]


def ensure_expected(query: str, stream: Iterable[tokens.Token]) -> list[tokens.Token]:
    """Return the tokens, raising if any of them is unexpected.

    Raises:
        QuerySyntaxError: If the stream contains an ``Unexpected`` token.
    """
    result = list(stream)
    for token in result:
        if isinstance(token, tokens.Unexpected):
            raise QuerySyntaxError(query, f"unexpected token {token.render()}")
    return result
