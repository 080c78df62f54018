import sys
from pathlib import Path
from typing import Optional

from complexity_cli.core.constants import ESTIMATED_BYTES_PER_OUTPUT_CHAR
from complexity_cli.core.exceptions import SourceReadError, ValidationError

# Path value meaning "read from standard input"
STDIN_PATH = "-"


def read_source(path: str) -> str:
    """
    Read source text from a file, or from stdin when path is "-".
    Args:
        path: File path or "-"
    Returns:
        Source text (may be empty)
    Raises:
        SourceReadError: If the file cannot be read or decoded
    """
    if path == STDIN_PATH:
        return sys.stdin.read()

    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise SourceReadError(f"Source file not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"Could not read source file {path}: {e}") from e


def estimate_memory(output: Optional[str]) -> int:
    """Rough memory estimate in bytes for a run that reported none."""
    if not output:
        return 0
    return len(output) * ESTIMATED_BYTES_PER_OUTPUT_CHAR


def validate_non_negative(name: str, value: Optional[float]) -> Optional[float]:
    """Reject negative execution metrics; None passes through."""
    if value is not None and value < 0:
        raise ValidationError(f"{name} must not be negative, got {value}")
    return value
