import enum
import logging
import os
import sys
from typing import Optional, TextIO


PLAIN_FORMAT = '%(message)s'
DETAILED_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class Verbosity(enum.Enum):
    """How much the probe reports while it runs."""

    QUIET = logging.ERROR
    NORMAL = logging.INFO
    VERBOSE = logging.DEBUG

    @classmethod
    def from_flags(cls, quiet: bool = False, verbose: bool = False) -> 'Verbosity':
        """
        Build the verbosity from CLI flags. Quiet wins over verbose.

        Args:
            quiet: Only log errors
            verbose: Log every chunk

        Returns:
            Verbosity value
        """
        if quiet:
            return cls.QUIET
        if verbose:
            return cls.VERBOSE
        return cls.NORMAL

    @classmethod
    def from_env(cls) -> 'Verbosity':
        """Map the LOG_LEVEL environment variable onto a verbosity."""
        level = getattr(logging, os.getenv('LOG_LEVEL', 'INFO').upper(), logging.INFO)
        if level <= logging.DEBUG:
            return cls.VERBOSE
        if level >= logging.ERROR:
            return cls.QUIET
        return cls.NORMAL


def setup_logging(
    component_name: str,
    verbosity: Optional[Verbosity] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Set up logging configuration for a component.

    Args:
        component_name: Name of the component logger (e.g., 'fillcheck')
        verbosity: Explicit verbosity. Defaults to the LOG_LEVEL env var
        stream: Output stream for the handler. Defaults to stdout

    Returns:
        Configured logger instance
    """
    if verbosity is None:
        verbosity = Verbosity.from_env()

    level = verbosity.value

    logger = logging.getLogger(component_name)
    logger.setLevel(level)

    if verbosity is Verbosity.VERBOSE:
        formatter = logging.Formatter(DETAILED_FORMAT, datefmt=DATE_FORMAT)
    else:
        formatter = logging.Formatter(PLAIN_FORMAT)

    if logger.handlers:
        for handler in logger.handlers:
            if isinstance(handler, logging.StreamHandler):
                handler.setStream(stream or sys.stdout)
            handler.setLevel(level)
            handler.setFormatter(formatter)
        return logger

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.propagate = False

    return logger
