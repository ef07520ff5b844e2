"""Logging configuration for skiptools.

Library modules obtain their loggers through get_logger() and never touch
handlers themselves. The CLI calls setup_logging() once per invocation to
attach a stderr handler with a level derived from its flags.
"""

import logging
import os
import sys

PACKAGE_LOGGER_NAME = "skiptools"

# Environment variable overriding the level chosen by setup_logging
LOG_LEVEL_ENV_VAR = "SKIPTOOLS_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger namespaced under the skiptools package logger.
    """
    return logging.getLogger(name)


def _resolve_level(verbose: bool, quiet: bool) -> int:
    """Pick the log level from CLI flags, letting the environment override."""
    env_level = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if env_level:
        level = logging.getLevelName(env_level)
        if isinstance(level, int):
            return level

    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the skiptools package logger.

    Safe to call repeatedly: previously installed stream handlers are
    replaced rather than stacked.

    Args:
        verbose: Log at DEBUG level.
        quiet: Only log warnings and errors. Ignored when verbose is set.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(_resolve_level(verbose, quiet))

    for handler in list(package_logger.handlers):
        if isinstance(handler, logging.StreamHandler):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
