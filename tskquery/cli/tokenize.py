"""CLI command for inspecting the token stream of a query."""

from datetime import tzinfo

import click

from tskquery.cli.utils import flags, output, overrides
from tskquery.cli.utils.output import OutputFormat
from tskquery.core.logging import logger
from tskquery.core.query.tokenizer import ensure_expected, tokenize
from tskquery.models.token import TokenRow


@overrides.command("tokenize")
@click.argument("query", metavar="<query>")
@flags.timezone()
@flags.output_format()
@click.option(
    "--strict",
    is_flag=True,
    help="Fail if the query contains unexpected input.",
)
def tokenize_command(
    query: str, tz: tzinfo | None, fmt: OutputFormat, strict: bool
) -> None:
    """Show the tokens of a query.

    Date literals contain spaces and must be quoted inside the query,
    e.g. due < "2018-07-04 12:00 PM".

    Required Args:

    \b
    * query (str): The query to tokenize. Example: 'priority = high'.
    """  # noqa: D301
    stream = tokenize(query, tz)
    logger.debug("Tokenized %r into %d tokens.", query, len(stream))

    if strict:
        ensure_expected(query, stream)

    rows = [TokenRow.from_token(i, token) for i, token in enumerate(stream)]
    output.display_list(TokenRow, rows, fmt)
