"""Utility functions for CLI output."""

import csv
from collections.abc import Sequence
from enum import StrEnum, auto
from io import StringIO
from typing import TypeVar

import click
from pydantic import BaseModel, RootModel
from pydantic.fields import FieldInfo
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from tskquery.cli.app import AppState
from tskquery.cli.utils import logging
from tskquery.core.logging import logger
from tskquery.exceptions import TskQueryError

_console = Console()  # Global console instance for utility functions
_error_console = Console(stderr=True)  # Console for error messages


class OutputFormat(StrEnum):
    """Enumeration of supported output formats."""

    TABLE = auto()
    CSV = auto()
    JSON = auto()


def _ordered_fields(schema: dict[str, FieldInfo]) -> list[str]:
    """Return field names sorted by their ``order`` schema extra."""
    return sorted(
        schema.keys(),
        key=lambda x: (schema[x].json_schema_extra or {}).get("order", 0),  # type: ignore
    )


def _convert_models_to_rich_table(
    items: Sequence[BaseModel], schema: dict[str, FieldInfo]
) -> Table:
    """Convert a list of Pydantic models to a Rich Table for pretty printing."""
    table = Table(header_style="dim", box=box.SIMPLE)
    ordered_fields = _ordered_fields(schema)
    for field_name in ordered_fields:
        field_info = schema[field_name]
        extras: dict = field_info.json_schema_extra or {}  # type: ignore
        table.add_column(
            field_info.title or field_name.capitalize(),
            justify=extras.get("justify", "left"),
            style=extras.get("style") if isinstance(extras.get("style"), str) else None,
        )

    for item in items:
        row = []
        for field_name in ordered_fields:
            value = getattr(item, field_name)
            row.append("" if value is None else str(value))
        table.add_row(*row)

    return table


def display_error(
    message: str, tag: str = "Error:", console: Console | None = None
) -> None:
    """Display an error message to the error console."""
    (console or _error_console).print(
        Text.assemble((tag, "bold red"), " ", message), soft_wrap=True
    )


T = TypeVar("T", bound=BaseModel)


def display_list(cls: type[T], items: Sequence[T], fmt: OutputFormat) -> None:
    """Display a list of items to the console in the specified format.

    Args:
        cls: The class type of the models in the list.
        items (Sequence): The list of items to display.
        fmt (OutputFormat): The desired output format (TABLE, CSV, JSON).
    """
    root_model = RootModel[list[cls]](list(items))  # type: ignore[valid-type]
    if fmt == OutputFormat.JSON:
        click.echo(root_model.model_dump_json(indent=4))
    elif fmt == OutputFormat.CSV:
        f = StringIO()
        writer = csv.DictWriter(f, fieldnames=_ordered_fields(cls.model_fields))
        writer.writeheader()
        writer.writerows(root_model.model_dump())
        click.echo(f.getvalue(), nl=False)
    else:
        _console.print(
            _convert_models_to_rich_table(items, cls.model_fields), soft_wrap=True
        )


def initialize_app_state(state: AppState) -> None:
    """Initialize the application state for CLI operations.

    This function applies color settings and initializes logging.

    Args:
        state (AppState): The application state object to initialize.
    """
    if state.no_color:
        _console.no_color = True
        _error_console.no_color = True

    logging.setup(state.debug, _error_console)  # Initialize logging with debug flag


def handle_error(error: TskQueryError) -> None:
    """Handle and display errors in the CLI.

    Args:
        error (TskQueryError): The error to handle.
    """
    logger.info(
        "An error of type %s occurred: %s",
        type(error).__name__,
        error.message,
        exc_info=True,
    )
    display_error(error.message)
