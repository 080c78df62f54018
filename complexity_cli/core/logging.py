"""
Logging for Complexity CLI.

Console output goes through rich on stderr so it never mixes with JSON on
stdout. Records carry the analysis fields (language, source, complexity)
that are active when they are emitted; the optional log file prefixes them.
"""

import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Dict, Optional

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)

LOGGER_NAME = "complexity_cli"

FILE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

CONTEXT_FIELDS = ("language", "source", "complexity")


class AnalysisContextFilter(logging.Filter):
    """Stamps the active analysis fields onto every record."""

    def __init__(self):
        super().__init__()
        self.fields: Dict[str, str] = {}

    def filter(self, record):
        for name in CONTEXT_FIELDS:
            setattr(record, name, self.fields.get(name))
        return True


class AnalysisLogFormatter(logging.Formatter):
    """File formatter: ``[language=python, source=a.py] <message>``."""

    def format(self, record):
        message = super().format(record)
        prefix = ", ".join(
            f"{name}={getattr(record, name)}"
            for name in CONTEXT_FIELDS
            if getattr(record, name, None)
        )
        return f"[{prefix}] {message}" if prefix else message


_context_filter = AnalysisContextFilter()


def _console_level(debug: bool, verbose: bool) -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def configure_logging(
    debug: bool = False, verbose: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    (Re)build the package logger's handlers.

    Every call replaces the previous handlers, so a later command in the same
    process gets its own verbosity and log file.

    Args:
        debug: Show debug records on the console, with source paths
        verbose: Show info records on the console
        log_file: Also write every record, debug included, to this file

    Returns:
        The configured logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    if _context_filter not in logger.filters:
        logger.addFilter(_context_filter)

    console_handler = RichHandler(
        console=console,
        show_time=False,
        show_path=debug,
        rich_tracebacks=True,
        markup=False,
    )
    console_handler.setLevel(_console_level(debug, verbose))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(AnalysisLogFormatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def _logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        logger = configure_logging()
    return logger


@contextmanager
def analysis_context(**fields):
    """
    Attach analysis fields to records logged inside the block.

    Example:
        with analysis_context(language="python", source="solution.py"):
            log_info("Classifying")
    """
    previous = dict(_context_filter.fields)
    _context_filter.fields.update(
        (name, value) for name, value in fields.items() if value is not None
    )
    try:
        yield
    finally:
        _context_filter.fields = previous


def _log(level: int, message: str, **fields):
    with analysis_context(**fields):
        _logger().log(level, message)


def log_debug(message: str, **fields):
    _log(logging.DEBUG, message, **fields)


def log_info(message: str, **fields):
    _log(logging.INFO, message, **fields)


def log_warning(message: str, **fields):
    _log(logging.WARNING, message, **fields)


def log_file_operation(operation: str, path: str, **fields):
    _log(logging.DEBUG, f"File {operation}: {path}", **fields)


def timed_command(name: str):
    """
    Log how long a command handler took, or how it failed.

    The handler's first argument is expected to be the resolved options; its
    language becomes part of the logging context.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            language = getattr(args[0], "language", None) if args else None
            with analysis_context(language=language):
                started = time.perf_counter()
                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    elapsed = time.perf_counter() - started
                    _logger().error(f"{name} failed after {elapsed:.3f}s: {e}")
                    raise
                elapsed = time.perf_counter() - started
                _logger().debug(f"{name} finished in {elapsed:.3f}s")
                return result

        return wrapper

    return decorator
