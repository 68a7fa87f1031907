"""Set up logging for the tskquery CLI."""

import os
from logging import DEBUG, INFO, WARNING, Filter, Formatter, Handler
from logging.handlers import RotatingFileHandler
from pathlib import Path

import platformdirs
from rich.console import Console
from rich.logging import RichHandler

from tskquery.core import logging

FORMAT = "%(asctime)s :: %(name)-12s :: %(levelname)-8s :: %(message)s"
LOG_DIR_ENVVAR = "TSKQUERY_LOG_DIR"


class TracebackInfoFilter(Filter):
    """Filter to control traceback information in logs."""

    def filter(self, record):
        """Filter out exception info from log records."""
        record._exc_info_hidden, record.exc_info = record.exc_info, None
        record.exc_text = None
        return True


def get_log_path() -> Path:
    """Get the log file path.

    The directory comes from ``TSKQUERY_LOG_DIR`` when set, otherwise from
    the platform's user log directory.
    """
    if log_dir := os.environ.get(LOG_DIR_ENVVAR):
        directory = Path(log_dir)
        directory.mkdir(parents=True, exist_ok=True)
    else:
        directory = platformdirs.user_log_path("tskquery", ensure_exists=True)
    return (directory / "tskquery.log").resolve()


def _file_handler(log_path: Path, debug: bool) -> Handler:
    handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    handler.setFormatter(Formatter(fmt=FORMAT))
    handler.setLevel(DEBUG if debug else INFO)
    return handler


def _console_handler(console: Console, debug: bool) -> Handler:
    handler = RichHandler(
        level=INFO if debug else WARNING,
        console=console,
        show_path=False,
        log_time_format="[%Y-%m-%d %H:%M:%S]",
        show_time=debug,
        rich_tracebacks=True,
    )
    if not debug:
        handler.addFilter(TracebackInfoFilter())
    return handler


def setup(debug: bool, console: Console) -> None:
    """Set up logging configuration for CLI.

    Args:
        debug (bool): Lower both handler thresholds and show tracebacks.
        console (Console): Rich console the console handler writes to.
    """
    log_path = get_log_path()
    logging.setup(_file_handler(log_path, debug), _console_handler(console, debug))

    if debug:
        logging.logger.info("Logging to file: %s", log_path.as_posix())
