"""Text formatting for the center readout and the dial tick labels."""

SCALE_LABEL_CEILING: float = 100000.0  # Fixed, independent of the gauge max_value.
SCALE_LABEL_CEILING_TEXT: str = "100k+"


def format_value(value: float) -> str:
    """Format the center readout, e.g. 500 -> "500", 5000 -> "5.0k".

    Thousands always show one decimal and are never capped (150000 -> "150.0k").
    """
    if value >= 1000:
        return f"{value / 1000:.1f}k"
    return f"{value:.0f}"


def format_scale_label(value: float) -> str:
    """Format a compact tick label, e.g. 5000 -> "5k", 100000 -> "100k+"."""
    if value >= SCALE_LABEL_CEILING:
        return SCALE_LABEL_CEILING_TEXT
    if value >= 1000:
        return f"{int(value / 1000)}k"  # Truncate, no decimal.
    return f"{int(value)}"
