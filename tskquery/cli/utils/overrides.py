"""Overrides for common click decorators."""

from collections.abc import Callable
from typing import Any, TypeVar

import click

from tskquery.cli.utils import output
from tskquery.exceptions import TskQueryError

_AnyCallable = Callable[..., Any]
FC = TypeVar("FC", bound="_AnyCallable | click.Command")


def group(*args, **kwargs) -> Callable[[_AnyCallable], click.Group]:
    """Create a Click command group with common settings."""
    _set_common_options(kwargs)
    kwargs.setdefault("subcommand_metavar", "<command>")
    return click.group(*args, **kwargs)


def _set_common_options(kwargs):
    kwargs.setdefault("context_settings", {})
    kwargs["context_settings"].setdefault("help_option_names", ["-h", "--help"])
    kwargs.setdefault("options_metavar", "[options]")


class TskQueryCommand(click.Command):
    """Custom Click Command that reports tskquery errors and exits with status 1."""

    def invoke(self, ctx):
        """Invoke the command with error handling."""
        try:
            return super().invoke(ctx)
        except TskQueryError as e:
            output.handle_error(e)
            ctx.exit(1)


def command(*args, **kwargs) -> Callable[[_AnyCallable], TskQueryCommand]:
    """Create a Click command with common settings."""
    _set_common_options(kwargs)

    return click.command(*args, **kwargs, cls=TskQueryCommand)
