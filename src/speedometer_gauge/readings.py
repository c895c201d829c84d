"""
Batch mapping and coverage summaries for lists of gauge values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from speedometer_gauge.gauge.config import DEFAULT_CONFIG, GaugeConfig
from speedometer_gauge.gauge.formatting import format_value
from speedometer_gauge.gauge.processing import (
    calculate_needle_angle_array,
    calculate_progress_array,
)
from speedometer_gauge.speedometer import MappedValue


def build_mapped_values(
    values: Sequence[float],
    config: GaugeConfig = DEFAULT_CONFIG,
) -> list[MappedValue]:
    """Map every value onto the gauge in one vectorized pass."""
    progress: np.ndarray = calculate_progress_array(
        values, config.max_value, config.scale_marks
    )
    angles: np.ndarray = calculate_needle_angle_array(
        progress, config.start_angle_deg, config.end_angle_deg
    )
    mapped: list[MappedValue] = []
    for value, fraction, angle in zip(values, progress, angles):
        mapped.append(
            MappedValue(
                raw_value=value,
                display_text=format_value(value),
                progress=float(fraction),
                needle_angle=float(angle),
            )
        )
    return mapped


@dataclass(frozen=True)
class ReadingSummary:
    """Summary stats for how a batch of values sits on the gauge.

    ``in_range`` counts values that land inside a scale segment at or below
    max_value. ``over_range`` counts values above max_value. ``out_of_scale``
    counts the rest (negative, NaN, or past the last mark), which read as full
    scale on the dial.
    """

    total_values: int
    in_range: int
    over_range: int
    out_of_scale: int
    min_progress: float
    max_progress: float


def summarize_readings(
    values: Sequence[float],
    config: GaugeConfig = DEFAULT_CONFIG,
) -> ReadingSummary:
    """Count values by where they land and report the progress range covered."""
    raw: np.ndarray = np.asarray(values, dtype=np.float64)

    # Guard against empty input to avoid errors on min/max.
    if raw.size == 0:
        return ReadingSummary(
            total_values=0,
            in_range=0,
            over_range=0,
            out_of_scale=0,
            min_progress=0.0,
            max_progress=0.0,
        )

    top: float = min(config.max_value, config.scale_marks[-1])
    in_range: int = int(
        np.count_nonzero((raw >= config.scale_marks[0]) & (raw <= top))
    )
    over_range: int = int(np.count_nonzero(raw > config.max_value))
    progress: np.ndarray = calculate_progress_array(
        raw, config.max_value, config.scale_marks
    )
    return ReadingSummary(
        total_values=int(raw.size),
        in_range=in_range,
        over_range=over_range,
        out_of_scale=int(raw.size) - in_range - over_range,
        min_progress=float(np.min(progress)),
        max_progress=float(np.max(progress)),
    )
