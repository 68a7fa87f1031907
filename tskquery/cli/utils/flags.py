"""Common flags for CLI commands."""

import functools
import zoneinfo
from collections.abc import Callable
from typing import Any, TypeVar

import click
import click.shell_completion

from tskquery.cli.app import AppState
from tskquery.cli.utils.output import OutputFormat

_AnyCallable = Callable[..., Any]
FC = TypeVar("FC", bound="_AnyCallable | click.Command")


class ZoneType(click.ParamType):
    """Custom Click parameter type for IANA time zone names."""

    name = "zone"

    def convert(self, value, param, ctx):
        """Convert a zone name into a ZoneInfo instance."""
        if isinstance(value, zoneinfo.ZoneInfo):
            return value
        try:
            return zoneinfo.ZoneInfo(value)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError):
            self.fail(f"{value!r} is not a known time zone.", param, ctx)

    def shell_complete(
        self, ctx: click.Context, param: click.Parameter, incomplete: str
    ):
        """Provide shell completion for zone names."""
        return [
            click.shell_completion.CompletionItem(key)
            for key in sorted(zoneinfo.available_timezones())
            if key.startswith(incomplete)
        ]


def _callback(ctx: click.Context, param: click.Parameter, value: Any) -> Any:
    """Callback to handle common flag."""
    if not ctx.resilient_parsing:
        state = ctx.ensure_object(AppState)
        if param.name == "debug" and value:
            state.debug = value
        elif param.name == "no_color" and value:
            state.no_color = value
    return value


def debug() -> Callable[[FC], FC]:
    """Common debug/verbose option for CLI commands."""
    return click.option(
        "--debug",
        "--verbose",
        "-d",
        is_flag=True,
        help="Enable verbose logging.",
        expose_value=False,
        callback=_callback,
        envvar=("TSKQUERY_DEBUG", "DEBUG"),
    )


def no_color() -> Callable[[FC], FC]:
    """Common no-color option for CLI commands."""
    return click.option(
        "--no-color",
        is_flag=True,
        help="Disable colored output.",
        expose_value=False,
        callback=_callback,
        envvar=("TSKQUERY_NO_COLOR", "NO_COLOR"),
    )


def timezone() -> Callable[[FC], FC]:
    """Time zone option used to interpret date literals."""
    return click.option(
        "--tz",
        type=ZoneType(),
        default=None,
        metavar="<zone>",
        help="Time zone for date literals, e.g. 'Asia/Kolkata'. "
        "Defaults to the local time zone.",
        envvar="TSKQUERY_TZ",
    )


def output_format() -> Callable[[FC], FC]:
    """Output format option for commands that display rows."""
    return click.option(
        "--format",
        "-f",
        "fmt",
        type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
        default=OutputFormat.TABLE.value,
        show_default=True,
        callback=lambda ctx, param, value: OutputFormat(value.lower()),
        help="Output format.",
    )


def common_options(f: Callable[..., Any]) -> Callable[..., Any]:
    """Apply common options to a Click command."""
    options = [
        click.version_option(None, "--version", "-v", prog_name="tskquery"),
    ]
    return functools.reduce(lambda x, opt: opt(x), options, f)
