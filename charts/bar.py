"""Bar chart geometry for sector percentages."""

import math

from charts.scales import BandScale
from charts.theme import THEME

GRID_LINES = (0.25, 0.5, 0.75, 1)
HORIZONTAL_BAR_HEIGHT = 30
HORIZONTAL_ROW_HEIGHT = 40
BAR_MARGIN = 5


def scale_max(values: list[float], max_value: float | None = None) -> float:
    """Explicit max, else the largest value plus headroom."""
    if max_value:
        return max_value
    finite = [v for v in values if not math.isnan(v)]
    if not finite:
        return 0.0
    return max(finite) * THEME["bar"]["headroom"]


def size_pct(value: float, maximum: float) -> float:
    """Bar length as a percentage of the axis; never negative."""
    if maximum <= 0 or math.isnan(value):
        return 0.0
    return max(0.0, value / maximum * 100)


def bar_geometry(
    data: list[dict],
    width: float = 600,
    height: float = 300,
    orientation: str = "vertical",
    max_value: float | None = None,
    value_suffix: str | None = None,
) -> dict:
    """Bars for ``{label, value, color?, description?}`` records.

    Each bar gets its length as a percentage of the axis plus pixel
    coordinates inside a ``width`` x ``height`` box (bars grow up from the
    bottom when vertical, right from the left edge when horizontal).
    """
    if orientation not in ("vertical", "horizontal"):
        raise ValueError(f"Unknown orientation: {orientation!r}")
    if value_suffix is None:
        value_suffix = THEME["bar"]["value_suffix"]

    horizontal = orientation == "horizontal"
    if horizontal:
        height = len(data) * HORIZONTAL_ROW_HEIGHT + 20

    maximum = scale_max([d["value"] for d in data], max_value)
    labels = [d["label"] for d in data]
    axis_length = width if horizontal else height
    bands = BandScale(range(len(data)), (0, height if horizontal else width))

    bars = []
    for i, item in enumerate(data):
        pct = size_pct(item["value"], maximum)
        length = axis_length * pct / 100
        start = bands.position(i)
        if horizontal:
            thickness = HORIZONTAL_BAR_HEIGHT
            offset = start + (bands.step - thickness) / 2
            rect = {"x": 0.0, "y": offset, "width": length, "height": thickness}
        else:
            thickness = max(0.0, bands.step - 2 * BAR_MARGIN)
            rect = {"x": start + BAR_MARGIN, "y": height - length, "width": thickness, "height": length}
        bars.append({
            "index": i,
            "label": item["label"],
            "value": item["value"],
            "value_text": f"{item['value']}{value_suffix}",
            "size_pct": pct,
            "color": item.get("color") or THEME["default_color"],
            "description": item.get("description"),
            **rect,
        })

    return {
        "orientation": orientation,
        "width": width,
        "height": height,
        "max_value": maximum,
        "labels": labels,
        "bars": bars,
        # Grid lines only make sense behind vertical bars
        "grid_lines": [] if horizontal else [height - height * g for g in GRID_LINES],
    }
