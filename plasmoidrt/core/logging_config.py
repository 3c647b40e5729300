"""
Logging configuration for plasmoidrt.

The library is meant to run inside a host ray tracer, so configuration is
confined to the ``plasmoidrt`` logger hierarchy: the root logger and the
host's handlers are never touched. Without a call to :func:`setup_logging`
records propagate to whatever the host has configured.
"""

import logging
import sys
from typing import Optional, TextIO, Union

PACKAGE_LOGGER = "plasmoidrt"
DEFAULT_FORMAT = "[%(asctime)s] %(name)s - %(levelname)s - %(message)s"

# Marks the handler installed by setup_logging so a second call replaces it
_HANDLER_ATTR = "_plasmoidrt_handler"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level}")
    return resolved


def setup_logging(
    level: Union[str, int] = "INFO",
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Send plasmoidrt log records to a stream.

    Repeated calls replace the handler installed by the previous call
    instead of stacking a new one.

    Parameters
    ----------
    level : str or int
        Logging level name ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
        or numeric level
    format_string : str, optional
        Custom format string. If None, uses :data:`DEFAULT_FORMAT`.
    stream : file-like object, optional
        Stream to write logs to. If None, uses sys.stderr.

    Returns
    -------
    logging.Logger
        The configured package logger

    Raises
    ------
    ValueError
        If ``level`` is not a known level name
    """
    numeric_level = _resolve_level(level)
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            package_logger.removeHandler(handler)
            handler.close()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        logging.Formatter(format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    )
    setattr(handler, _HANDLER_ATTR, True)

    package_logger.addHandler(handler)
    package_logger.setLevel(numeric_level)
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Logger inside the plasmoidrt hierarchy.

    ``name`` may be relative to the package ('radiation.transfer') or a full
    module path such as ``__name__``; both give the same logger.
    """
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
