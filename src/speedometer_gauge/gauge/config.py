"""
Gauge configuration: value range, angular sweep and scale marks,
plus loading per-gauge configs from the packaged TOML file.
"""

from dataclasses import dataclass, field, fields
import logging
import math
from pathlib import Path  # used to locate the packaged TOML file
import tomllib  # used for the gauge config file

logger = logging.getLogger(__name__)

CONFIG_TOML_PATH: Path = (  # Default location for gauge configuration.
    Path(__file__).resolve().parent / "gauge_config.toml"
)  # Keep this near the package for portability.

DEFAULT_MAX_VALUE: float = 100000.0
DEFAULT_START_ANGLE_DEG: float = -135.0
DEFAULT_END_ANGLE_DEG: float = 135.0
DEFAULT_SCALE_MARKS: tuple[float, ...] = (
    0.0,
    1000.0,
    5000.0,
    10000.0,
    25000.0,
    50000.0,
    100000.0,
)


@dataclass(frozen=True)
class GaugeConfig:
    """Per-gauge configuration: the top of the scale, the needle sweep and the
    checkpoint marks that split the dial into equal-weight segments."""

    gauge_id: str = "default"  # Identify which gauge this config applies to.
    max_value: float = DEFAULT_MAX_VALUE  # Values above this are capped.
    start_angle_deg: float = DEFAULT_START_ANGLE_DEG  # Needle angle at progress 0.
    end_angle_deg: float = DEFAULT_END_ANGLE_DEG  # Needle angle at progress 1.
    scale_marks: tuple[float, ...] = field(default=DEFAULT_SCALE_MARKS)

    def __post_init__(self) -> None:
        # Accept lists from TOML or callers but store an immutable tuple.
        object.__setattr__(
            self, "scale_marks", tuple(float(m) for m in self.scale_marks)
        )
        if len(self.scale_marks) < 2:
            raise ValueError("scale_marks must contain at least two marks.")
        # NaN fails every comparison below, so reject non-finite values first.
        if not all(math.isfinite(m) for m in self.scale_marks):
            raise ValueError("scale_marks must be finite.")
        for lo, hi in zip(self.scale_marks, self.scale_marks[1:]):
            if hi <= lo:
                raise ValueError("scale_marks must be strictly ascending.")
        if not (math.isfinite(self.max_value) and self.max_value > 0):
            raise ValueError("max_value must be finite and > 0.")
        if not (
            math.isfinite(self.start_angle_deg) and math.isfinite(self.end_angle_deg)
        ):
            raise ValueError("start_angle_deg and end_angle_deg must be finite.")

    @property
    def sweep_deg(self) -> float:
        """Total needle sweep in degrees."""
        return self.end_angle_deg - self.start_angle_deg


DEFAULT_CONFIG: GaugeConfig = GaugeConfig()

_CONFIG_KEYS: frozenset[str] = frozenset(
    f.name for f in fields(GaugeConfig) if f.name != "gauge_id"
)


def load_gauge_configs(path: Path = CONFIG_TOML_PATH) -> dict[str, GaugeConfig]:
    """Load per-gauge configs from a TOML file, one table per gauge."""
    raw: dict[str, object] = tomllib.loads(  # Parse TOML text.
        path.read_text(encoding="utf-8")
    )
    configs: dict[str, GaugeConfig] = {}
    for gauge_id, section in raw.items():
        if not isinstance(section, dict):
            raise ValueError(
                f"Expected a [{gauge_id}] table in {path}, got a bare value."
            )
        unknown: set[str] = set(section) - _CONFIG_KEYS
        if unknown:
            raise ValueError(
                f"Unknown keys for gauge '{gauge_id}' in {path}: {sorted(unknown)}"
            )
        # Missing keys fall back to the dataclass defaults.
        configs[gauge_id] = GaugeConfig(gauge_id=gauge_id, **section)  # type: ignore[arg-type]
    logger.debug("Loaded %d gauge config(s) from %s", len(configs), path)
    return configs
