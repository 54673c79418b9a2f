"""Logging setup for Tutum SDK.

The SDK logs under the ``tutum`` logger hierarchy (``tutum.http`` for
requests and retries). Nothing is printed unless the application configures
logging, or debug output is switched on with TUTUM_DEBUG / ``--debug``.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "tutum"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Attach a rich stderr handler to the ``tutum`` logger.

    Args:
        debug: Log every request at DEBUG level instead of warnings only.

    Returns:
        The configured ``tutum`` logger.
    """
    from rich.console import Console
    from rich.logging import RichHandler

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger
