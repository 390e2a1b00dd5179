"""Heatmap geometry: band-scaled cells colored across the observed value range."""

import math

from charts.scales import BandScale, ColorScale, LinearScale
from charts.theme import THEME

MARGIN = {"top": 50, "right": 50, "bottom": 70, "left": 70}
BAND_PADDING = 0.1
LEGEND_WIDTH = 120
LEGEND_HEIGHT = 12


def value_extent(values: list[float]) -> tuple[float, float]:
    finite = [v for v in values if not math.isnan(v)]
    if not finite:
        return (math.nan, math.nan)
    return (min(finite), max(finite))


def text_color(value: float, extent: tuple[float, float]) -> str:
    """Light text on the darker upper half of the range, dark text otherwise."""
    lo, hi = extent
    if value > (hi - lo) / 2 + lo:
        return THEME["heatmap"]["light_text"]
    return THEME["heatmap"]["dark_text"]


def heatmap_geometry(
    data: list[dict],
    width: float = 600,
    height: float = 500,
    color_scheme: list[str] | None = None,
) -> dict:
    """Cells for ``{x, y, value, tooltip?}`` records.

    Rows and columns follow first-seen order of the y and x categories.
    Cell coordinates are relative to the inner plot area, whose origin is
    ``(margin.left, margin.top)``.
    """
    colors = color_scheme or THEME["heatmap"]["color_scheme"]
    inner_width = max(0.0, width - MARGIN["left"] - MARGIN["right"])
    inner_height = max(0.0, height - MARGIN["top"] - MARGIN["bottom"])

    x_scale = BandScale([d["x"] for d in data], (0, inner_width), BAND_PADDING)
    y_scale = BandScale([d["y"] for d in data], (0, inner_height), BAND_PADDING)
    extent = value_extent([d["value"] for d in data])
    color_scale = ColorScale(extent, colors)

    cells = []
    for d in data:
        x = x_scale(d["x"])
        y = y_scale(d["y"])
        cells.append({
            "x_label": d["x"],
            "y_label": d["y"],
            "value": d["value"],
            "x": x,
            "y": y,
            "width": x_scale.bandwidth,
            "height": y_scale.bandwidth,
            "fill": color_scale(d["value"]),
            "text": f"{d['value']}%",
            "text_color": text_color(d["value"], extent),
            "text_position": (x + x_scale.bandwidth / 2, y + y_scale.bandwidth / 2),
            "tooltip": d.get("tooltip"),
        })

    legend_scale = LinearScale(extent, (0, LEGEND_WIDTH))
    legend_ticks = [] if math.isnan(extent[0]) else legend_scale.ticks(5)

    return {
        "width": width,
        "height": height,
        "margin": dict(MARGIN),
        "inner_width": inner_width,
        "inner_height": inner_height,
        "x_categories": list(x_scale.domain),
        "y_categories": list(y_scale.domain),
        "x_ticks": [(c, x_scale.center(c)) for c in x_scale.domain],
        "y_ticks": [(c, y_scale.center(c)) for c in y_scale.domain],
        "extent": extent,
        "cells": cells,
        "legend": {
            "x": width - MARGIN["right"] - LEGEND_WIDTH,
            "y": 20,
            "width": LEGEND_WIDTH,
            "height": LEGEND_HEIGHT,
            "colors": list(colors),
            "ticks": [(t, legend_scale(t), f"{t:g}%") for t in legend_ticks],
            "title": "Automation Risk (%)",
        },
    }
