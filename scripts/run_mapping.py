"""Map one or more values onto a gauge and print or save the results."""

from __future__ import annotations

import argparse
from dataclasses import asdict
import json
from pathlib import Path
import sys
from typing import Any

# Add `src` to sys.path so this script works even before `poetry install`.
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
SRC_DIR: Path = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from speedometer_gauge.gauge import CONFIG_TOML_PATH, load_gauge_configs
from speedometer_gauge.inputs import load_input_values, validate_input
from speedometer_gauge.readings import build_mapped_values, summarize_readings
from speedometer_gauge.scale import build_scale_labels


def parse_args() -> argparse.Namespace:
    """Parse CLI arguments for one mapping run."""
    parser = argparse.ArgumentParser(description="Map raw values onto a gauge dial.")
    parser.add_argument("values", nargs="*", type=str, help="Raw values to map.")
    parser.add_argument(
        "--input-file",
        type=Path,
        default=None,
        help="Text file with one value per line ('#' starts a comment).",
    )
    parser.add_argument("--config", type=Path, default=CONFIG_TOML_PATH)
    parser.add_argument("--gauge-id", type=str, default="default")
    parser.add_argument(
        "--labels",
        action="store_true",
        help="Also print the dial tick labels and their angles.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Optional JSON file for the mapped values and summary.",
    )
    return parser.parse_args()


def main() -> int:
    """Validate inputs, map them, then report."""
    args = parse_args()

    try:
        configs = load_gauge_configs(args.config)
    except (OSError, ValueError) as exc:  # TOMLDecodeError is a ValueError.
        print(f"Cannot load gauge config {args.config}: {exc}", file=sys.stderr)
        return 2
    if args.gauge_id not in configs:
        print(f"Gauge '{args.gauge_id}' not found in {args.config}", file=sys.stderr)
        return 2
    config = configs[args.gauge_id]

    # Reject the whole run on the first bad value, like the input field does.
    values: list[float] = []
    for text in args.values:
        if not validate_input(text):
            print(f"Invalid value {text!r}: expected a number >= 0", file=sys.stderr)
            return 2
        values.append(float(text))
    if args.input_file is not None:
        try:
            values.extend(load_input_values(args.input_file))
        except ValueError as exc:
            print(str(exc), file=sys.stderr)
            return 2

    mapped = build_mapped_values(values, config)
    summary = summarize_readings(values, config)

    for item in mapped:
        print(
            f"{item.raw_value:>12g}  {item.display_text:>8}  "
            f"progress={item.progress:.4f}  angle={item.needle_angle:+.2f}"
        )
    if args.labels:
        for label in build_scale_labels(config):
            print(f"label {label.text:>6} at {label.angle_deg:+.1f} deg")
    print(f"Summary: {summary}")

    if args.output is not None:
        payload: dict[str, Any] = {
            "config": asdict(config),
            "values": [asdict(item) for item in mapped],
            "summary": asdict(summary),
        }
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"Results saved: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
