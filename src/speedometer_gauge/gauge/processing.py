"""
Gauge processing utilities
i.e. the math to convert a raw value into dial progress and a needle angle.
"""

from typing import Sequence

import numpy as np

from speedometer_gauge.gauge.config import (
    DEFAULT_END_ANGLE_DEG,
    DEFAULT_SCALE_MARKS,
    DEFAULT_START_ANGLE_DEG,
)


def calculate_progress(
    value: float,
    max_value: float,
    scale_marks: Sequence[float] = DEFAULT_SCALE_MARKS,
) -> float:
    """Return normalized [0, 1] progress of value along the piecewise scale.

    Every pair of neighbouring marks gets the same share of progress no matter
    how wide it is numerically. Values that land in no segment (negative, NaN,
    or past the last mark) report full scale.
    """
    capped: float = min(value, max_value)  # Values above max are capped, not extrapolated.
    segment_count: int = len(scale_marks) - 1
    for i in range(segment_count):
        lo: float = scale_marks[i]
        hi: float = scale_marks[i + 1]
        if lo <= capped <= hi:
            segment_fraction: float = (capped - lo) / (hi - lo)
            current_progress: float = i / segment_count
            next_progress: float = (i + 1) / segment_count
            # Written as a lerp so the top of the last segment lands exactly on 1.0.
            return current_progress + segment_fraction * (
                next_progress - current_progress
            )
    return 1.0


def calculate_needle_angle(
    progress: float,
    start_angle_deg: float = DEFAULT_START_ANGLE_DEG,
    end_angle_deg: float = DEFAULT_END_ANGLE_DEG,
) -> float:
    """Return the needle angle in degrees for an already clamped progress."""
    return start_angle_deg + (end_angle_deg - start_angle_deg) * progress


def calculate_progress_array(
    values: Sequence[float] | np.ndarray,
    max_value: float,
    scale_marks: Sequence[float] = DEFAULT_SCALE_MARKS,
) -> np.ndarray:
    """Vectorized calculate_progress for batch callers."""
    marks: np.ndarray = np.asarray(scale_marks, dtype=np.float64)
    capped: np.ndarray = np.minimum(np.asarray(values, dtype=np.float64), max_value)
    # Each mark sits at an evenly spaced progress checkpoint.
    checkpoints: np.ndarray = np.arange(marks.size, dtype=np.float64) / (marks.size - 1)
    progress: np.ndarray = np.interp(capped, marks, checkpoints)
    # np.interp clamps outside the marks; keep the full-scale fallback instead.
    bracketed: np.ndarray = (capped >= marks[0]) & (capped <= marks[-1])
    return np.where(bracketed, progress, 1.0)


def calculate_needle_angle_array(
    progress: Sequence[float] | np.ndarray,
    start_angle_deg: float = DEFAULT_START_ANGLE_DEG,
    end_angle_deg: float = DEFAULT_END_ANGLE_DEG,
) -> np.ndarray:
    """Vectorized calculate_needle_angle."""
    fractions: np.ndarray = np.asarray(progress, dtype=np.float64)
    return start_angle_deg + (end_angle_deg - start_angle_deg) * fractions
