"""Gauge configuration, processing and formatting public API."""

# Re-export the stable interfaces so imports stay clean.

from .config import (  # Re-export configuration from the config module.
    CONFIG_TOML_PATH,
    DEFAULT_CONFIG,  # Share the stock 0-100k speedometer config.
    GaugeConfig,  # Share the gauge config dataclass at package level.
    load_gauge_configs,  # Share the TOML loader at package level.
)
from .formatting import (  # Re-export display helpers.
    format_scale_label,  # Compact dial tick label.
    format_value,  # Center readout text.
)
from .processing import (  # Re-export gauge math from processing module.
    calculate_needle_angle,  # Progress to degrees.
    calculate_needle_angle_array,
    calculate_progress,  # Raw value to piecewise progress.
    calculate_progress_array,
)

__all__ = [  # Define the public symbols for this package.
    "CONFIG_TOML_PATH",  # Default TOML path for gauge configs.
    "DEFAULT_CONFIG",
    "GaugeConfig",  # Dataclass describing a gauge.
    "calculate_needle_angle",
    "calculate_needle_angle_array",
    "calculate_progress",
    "calculate_progress_array",
    "format_scale_label",
    "format_value",
    "load_gauge_configs",  # Function to read configs from TOML.
]
