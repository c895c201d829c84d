"""
Input utilities for turning user text into gauge values.
Handles single text fields and plain-text value files (one value per line).
"""

from __future__ import annotations

import math
from pathlib import Path


def parse_input(text: str) -> float | None:
    """Parse user text into a finite number, or None if it is not one."""
    # Reject padding and digit separators, which float() would otherwise accept.
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        value: float = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def validate_input(text: str) -> bool:
    """Return True iff text is a real number >= 0."""
    value: float | None = parse_input(text)
    return value is not None and value >= 0


def load_input_values(path: Path) -> list[float]:
    """Read one value per line from a text file.

    Blank lines and ``#`` comments are skipped. Any other line must pass
    validate_input.
    """
    values: list[float] = []
    for line_no, line in enumerate(path.read_text(encoding="utf-8").splitlines(), 1):
        text: str = line.split("#", 1)[0].strip()
        if not text:
            continue

        # Enforce the same rule the interactive field uses.
        value: float | None = parse_input(text)
        if value is None or value < 0:
            raise ValueError(f"Invalid value {text!r} in {path} at line {line_no}")
        values.append(value)

    return values
