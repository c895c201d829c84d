"""
Speedometer value mapping: the entry points the presentation layer calls.
Composes progress, needle angle and display text into one immutable value.
"""

from __future__ import annotations

from dataclasses import dataclass

from speedometer_gauge.gauge.config import DEFAULT_CONFIG, GaugeConfig
from speedometer_gauge.gauge.formatting import format_value
from speedometer_gauge.gauge.processing import (
    calculate_needle_angle,
    calculate_progress,
)
from speedometer_gauge.inputs import validate_input

__all__ = [
    "MappedValue",
    "build_mapped_value",
    "get_scale_marks",
    "validate_input",
]


@dataclass(frozen=True)  # frozen = true means a mapped value is never mutated
class MappedValue:
    """One raw value together with everything needed to draw it."""

    raw_value: float
    display_text: str
    progress: float
    needle_angle: float


def build_mapped_value(
    raw_value: float,
    max_value: float | None = None,
    *,
    config: GaugeConfig = DEFAULT_CONFIG,
) -> MappedValue:
    """Map a raw value onto the gauge.

    ``max_value`` overrides ``config.max_value`` when given. Any real number is
    accepted; inputs should be checked with validate_input first.
    """
    top: float = config.max_value if max_value is None else max_value
    progress: float = calculate_progress(raw_value, top, config.scale_marks)
    return MappedValue(
        raw_value=raw_value,
        display_text=format_value(raw_value),
        progress=progress,
        needle_angle=calculate_needle_angle(
            progress, config.start_angle_deg, config.end_angle_deg
        ),
    )


def get_scale_marks(config: GaugeConfig = DEFAULT_CONFIG) -> tuple[float, ...]:
    """Return the configured scale marks in ascending order."""
    return config.scale_marks
