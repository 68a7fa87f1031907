"""Logging setup for tskquery.

Library modules log through ``logger`` and never configure handlers; only
entry points such as the CLI call ``setup``.
"""

import logging

logger = logging.getLogger("tskquery")


def setup(*handlers: logging.Handler) -> None:
    """Attach handlers to the package logger, replacing any installed earlier."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG)
    for handler in handlers:
        logger.addHandler(handler)
    logger.debug("Logging initialized with handlers: %s.", handlers)
