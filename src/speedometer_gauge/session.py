"""Per-screen gauge state: the text field, the shown value and the error line."""

from __future__ import annotations

import logging

from speedometer_gauge.gauge.config import DEFAULT_CONFIG, GaugeConfig
from speedometer_gauge.inputs import validate_input
from speedometer_gauge.speedometer import (
    MappedValue,
    build_mapped_value,
    get_scale_marks,
)

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE: str = "Please enter a valid positive number"


class SpeedometerSession:
    """Holds what one gauge screen shows and applies text submissions to it.

    The mapping itself stays stateless; this object only remembers the last
    mapped value, the pending input text and the current error message.
    """

    def __init__(self, config: GaugeConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.scale_marks: tuple[float, ...] = get_scale_marks(config)
        self.current: MappedValue = build_mapped_value(0.0, config=config)
        self.input_text: str = ""
        self.error_message: str | None = None

    def submit(self) -> bool:
        """Apply input_text. Returns True if the shown value changed."""
        if not self.input_text:
            return False
        if not validate_input(self.input_text):
            # Keep the text so the user can correct it.
            self.error_message = INVALID_INPUT_MESSAGE
            logger.debug("Rejected gauge input %r", self.input_text)
            return False
        self.update_from_value(float(self.input_text))
        self.input_text = ""
        self.clear_error()
        return True

    def update_from_value(self, value: float) -> MappedValue:
        """Map value onto the gauge and show it."""
        self.current = build_mapped_value(value, config=self.config)
        logger.debug(
            "Gauge %s -> %s (progress=%.4f, angle=%.2f)",
            self.config.gauge_id,
            self.current.display_text,
            self.current.progress,
            self.current.needle_angle,
        )
        return self.current

    def clear_error(self) -> None:
        """Drop the current error message."""
        self.error_message = None
