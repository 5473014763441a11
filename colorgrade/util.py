"""
Pure utility functions with no side effects.
Helper functions for number formatting, file access and progress output.
"""

import math
from decimal import Decimal
from pathlib import Path


def format_number(value: float | int) -> str:
    """
    Format a number the way ffmpeg filter arguments expect it.

    Integral values lose their fractional part (1.0 -> "1"), everything else
    uses the shortest round-trip decimal form without exponent notation.

    Args:
        value: Number to format

    Returns:
        Formatted number
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return repr(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def build_suffixed_path(filepath: str | Path, suffix: str) -> Path:
    """
    Build a sibling path with a suffix appended to the stem.

    Example: /media/clip.mp4 with suffix "_graded" -> /media/clip_graded.mp4

    Args:
        filepath: Original file path
        suffix: Text appended to the stem

    Returns:
        Path next to the original file
    """
    path = Path(filepath)
    return path.with_name(f"{path.stem}{suffix}{path.suffix}")


def validate_file_exists(filepath: Path | str) -> None:
    """
    Validate that a file exists.

    Args:
        filepath: Path to validate

    Raises:
        FileNotFoundError: If file does not exist
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    if not path.is_file():
        raise ValueError(f"Path is not a file: {path}")


def read_text_file(filepath: Path | str, description: str = "input file") -> str:
    """
    Read a UTF-8 text file without translating line endings.

    Args:
        filepath: Path to read
        description: Human readable role of the file, used in error messages

    Returns:
        File content

    Raises:
        FileNotFoundError: If file does not exist
        RuntimeError: If the file cannot be read
    """
    validate_file_exists(filepath)
    path = Path(filepath)
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise RuntimeError(f"Could not read {description}: {path}\n{e}") from e


def write_text_file(filepath: Path | str, content: str) -> Path:
    """
    Write a UTF-8 text file without translating line endings.

    Args:
        filepath: Destination path
        content: Text to write

    Returns:
        Path to the written file

    Raises:
        RuntimeError: If the file cannot be written
    """
    path = Path(filepath)
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise RuntimeError(f"Could not write output file: {path}\n{e}") from e
    return path


def print_progress(message: str, prefix: str = "=>") -> None:
    """
    Print a progress message to terminal.

    Args:
        message: Message to print
        prefix: Prefix for the message
    """
    print(f"{prefix} {message}")
