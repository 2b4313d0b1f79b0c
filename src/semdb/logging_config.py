"""
Logging for semdb.

Library modules log through :func:`get_logger` and never install handlers.
The CLI calls :func:`setup_logging` once with the configured verbosity. It
attaches handlers to the ``semdb`` logger only and leaves the root logger
alone; calling it again replaces the handlers it installed.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "semdb"

# completion truncation and root mismatches are warnings, so "normal" shows them
LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Send semdb log records to stderr through rich.

    Args:
        verbosity: One of ``quiet``, ``normal`` or ``verbose``
            (``IndexConfig.verbosity``). ``verbose`` also logs every
            database load and save.
        log_file: Optional file path to append plain-text records to

    Returns:
        The ``semdb`` logger
    """
    try:
        level = LEVELS[verbosity]
    except KeyError:
        raise ValueError(f"unknown verbosity: {verbosity!r}") from None

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    verbose = level == logging.DEBUG
    console_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        # entity names such as "[T]" must not be read as rich markup
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        logger.addHandler(file_handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the ``semdb`` namespace, e.g. ``get_logger(__name__)``."""
    if name is None or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
