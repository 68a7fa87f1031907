"""Output model for displaying query tokens."""

from pydantic import BaseModel, Field

from tskquery.core.query.tokens import LITERAL_TOKENS, Token


class TokenRow(BaseModel):
    """A single token of a tokenized query, flattened for display.

    Attributes:
        index (int): Position of the token in the stream.
        category (str): Category name, e.g. ``GT`` or ``String``.
        value (str | None): Payload of literal tokens. None for structural tokens.
        rendered (str): Diagnostic rendering of the token.
    """

    index: int = Field(json_schema_extra={"order": 1, "justify": "right"})
    category: str = Field(json_schema_extra={"order": 2, "style": "bold"})
    value: str | None = Field(default=None, json_schema_extra={"order": 3})
    rendered: str = Field(json_schema_extra={"order": 4, "style": "dim"})

    @classmethod
    def from_token(cls, index: int, token: Token) -> "TokenRow":
        """Build a row from a token and its position in the stream."""
        return cls(
            index=index,
            category=token.category,
            value=token.text if isinstance(token, LITERAL_TOKENS) else None,
            rendered=token.render(),
        )
