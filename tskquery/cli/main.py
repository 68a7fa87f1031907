"""Main CLI entry point for tskquery."""

import sys

import click

from tskquery.cli.app import AppState
from tskquery.cli.tokenize import tokenize_command
from tskquery.cli.utils import flags, output
from tskquery.cli.utils.overrides import group


@group()
@flags.common_options
@flags.debug()
@flags.no_color()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Inspect how task queries are tokenized."""
    state = ctx.ensure_object(AppState)

    output.initialize_app_state(state)


cli.add_command(tokenize_command)

if __name__ == "__main__":
    sys.exit(cli())
