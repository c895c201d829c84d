"""Dial tick labels: text and placement angle for each scale mark."""

from dataclasses import dataclass

from speedometer_gauge.gauge.config import DEFAULT_CONFIG, GaugeConfig
from speedometer_gauge.gauge.formatting import format_scale_label


@dataclass(frozen=True)
class ScaleLabel:
    """Tick label for one scale mark."""

    value: float
    text: str
    angle_deg: float


def build_scale_labels(config: GaugeConfig = DEFAULT_CONFIG) -> list[ScaleLabel]:
    """Place one label per mark, evenly spaced across the needle sweep.

    Marks carry equal progress weight, so label i sits where the needle points
    at progress i/(N-1).
    """
    marks: tuple[float, ...] = config.scale_marks
    step_deg: float = config.sweep_deg / (len(marks) - 1)
    return [
        ScaleLabel(
            value=mark,
            text=format_scale_label(mark),
            angle_deg=config.start_angle_deg + i * step_deg,
        )
        for i, mark in enumerate(marks)
    ]
