"""Logging for compdocs.

The parsing, analysis and generation stages only emit DEBUG records (skipped
interface blocks, component counts, the rule that matched a name). They are
hidden unless the CLI runs with `-v`, which lowers the level from WARNING.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "compdocs"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return `compdocs.<name>`, e.g. `get_logger("parsing.matcher")`."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route compdocs records to stderr and, with `log_file`, to a UTF-8 file.

    The level is WARNING by default so pipeline DEBUG output stays quiet.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when the CLI is invoked multiple times.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter("[compdocs] %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
