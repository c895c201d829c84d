"""Unit tests for gauge processing helpers."""

from __future__ import annotations

import math

import numpy as np
import pytest

from speedometer_gauge.gauge import (
    calculate_needle_angle,
    calculate_needle_angle_array,
    calculate_progress,
    calculate_progress_array,
)


def test_calculate_progress_endpoints() -> None:
    """Zero sits at the start of the scale and max_value at the end."""
    assert calculate_progress(0.0, 100000.0) == 0.0
    assert calculate_progress(100000.0, 100000.0) == 1.0


def test_calculate_progress_caps_values_above_max() -> None:
    """Values above max_value are capped, not extrapolated."""
    assert calculate_progress(150000.0, 100000.0) == 1.0


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1000.0, 1.0 / 6.0),  # Every mark lands on an even checkpoint.
        (10000.0, 0.5),
        (2500.0, 1.0 / 6.0 + 0.375 / 6.0),  # 1500 of the 4000-wide segment.
        (7500.0, 2.5 / 6.0),  # Midway through 5000..10000.
        (50000.0, 5.0 / 6.0),
    ],
)
def test_calculate_progress_interpolates_within_segments(
    value: float, expected: float
) -> None:
    """Each segment carries an equal share of progress regardless of width."""
    assert calculate_progress(value, 100000.0) == pytest.approx(expected)


def test_calculate_progress_is_monotonic_over_range() -> None:
    """Progress never decreases as the value increases across [0, max]."""
    # Sweep densely so every segment and boundary is visited.
    values: np.ndarray = np.linspace(0.0, 100000.0, 2001)
    progress: np.ndarray = np.array(
        [calculate_progress(float(v), 100000.0) for v in values]
    )
    assert np.all(np.diff(progress) >= 0.0)
    assert np.all((progress >= 0.0) & (progress <= 1.0))


@pytest.mark.parametrize("value", [-5.0, -0.001, math.nan])
def test_calculate_progress_unbracketed_values_fall_back_to_full_scale(
    value: float,
) -> None:
    """Values that match no segment report full-scale progress."""
    assert calculate_progress(value, 100000.0) == 1.0


def test_calculate_progress_marks_short_of_max_fall_back_to_full_scale() -> None:
    """A value past the last mark but below max_value also reports 1.0."""
    marks: tuple[float, ...] = (0.0, 1000.0, 5000.0)
    assert calculate_progress(7000.0, 100000.0, marks) == 1.0
    # Inside the marks the custom scale still interpolates.
    assert calculate_progress(3000.0, 100000.0, marks) == pytest.approx(0.75)


def test_calculate_progress_with_smaller_max_caps_at_that_mark() -> None:
    """Capping happens at max_value, which may sit mid-scale."""
    # 50000 is capped to 10000, the top of the third segment.
    assert calculate_progress(50000.0, 10000.0) == pytest.approx(0.5)


def test_calculate_needle_angle_cardinal_points() -> None:
    """Needle sweeps from -135 to +135 degrees by default."""
    assert calculate_needle_angle(0.0) == -135.0
    assert calculate_needle_angle(1.0) == 135.0
    assert calculate_needle_angle(0.5) == 0.0


def test_calculate_needle_angle_custom_sweep() -> None:
    """Custom sweeps stay affine in progress."""
    assert calculate_needle_angle(0.25, -90.0, 90.0) == pytest.approx(-45.0)
    # No re-clamping: out-of-range progress passes straight through.
    assert calculate_needle_angle(1.5, -90.0, 90.0) == pytest.approx(180.0)


def test_calculate_progress_array_matches_scalar() -> None:
    """The vectorized path agrees with the scalar path, fallbacks included."""
    values: np.ndarray = np.concatenate(
        [
            np.linspace(-10.0, 200000.0, 501),
            np.array([0.0, 1000.0, 5000.0, 100000.0, math.nan]),
        ]
    )
    vectorized: np.ndarray = calculate_progress_array(values, 100000.0)
    scalar: list[float] = [calculate_progress(float(v), 100000.0) for v in values]
    assert vectorized.tolist() == pytest.approx(scalar)


def test_calculate_needle_angle_array_matches_scalar() -> None:
    """Vectorized angles match the scalar affine map."""
    progress: list[float] = [0.0, 0.25, 0.5, 1.0]
    angles: np.ndarray = calculate_needle_angle_array(progress)
    assert angles.tolist() == pytest.approx([-135.0, -67.5, 0.0, 135.0])
