"""Gauge geometry for a single impact percentage.

The gauge is a circular stroke: ``stroke-dasharray`` is the full
circumference and ``stroke-dashoffset`` hides the unfilled share, with the
circle rotated -90 degrees so 0% starts at the top and fills clockwise.
The semicircle SVG arc paths are kept for renderers that draw a path
instead of a dashed circle.
"""

import math

from analyzer.risk import risk_color, risk_label


def circumference(radius: float) -> float:
    return 2 * math.pi * radius


def dash_offset(percentage: float, radius: float = 80) -> float:
    """Length of the unfilled part of the stroke; full circumference at 0%."""
    c = circumference(radius)
    return c * (1 - percentage / 100)


def arc_path(percentage: float, size: float = 220, radius: float = 80) -> str:
    """SVG path sweeping clockwise from the top; 100% covers a half circle."""
    cx = cy = size / 2
    start_angle = -math.pi / 2
    end_angle = start_angle + (percentage / 100) * math.pi
    x2 = cx + radius * math.cos(end_angle)
    y2 = cy + radius * math.sin(end_angle)
    large_arc = 1 if percentage > 50 else 0
    return f"M {cx:g} {cy - radius:g} A {radius:g} {radius:g} 0 {large_arc} 1 {x2:g} {y2:g}"


def format_percentage(percentage: float) -> str:
    if isinstance(percentage, float) and percentage.is_integer():
        percentage = int(percentage)
    return f"{percentage}%"


def gauge_geometry(
    percentage: float,
    size: float = 220,
    radius: float = 80,
    stroke_width: float = 30,
    color: str | None = None,
) -> dict:
    """Everything needed to draw the gauge for one percentage.

    Args:
        percentage: Impact score 0-100. NaN propagates into the offsets.
        size: Square canvas size in pixels.
        radius: Stroke radius.
        stroke_width: Stroke thickness.
        color: Fixed fill color; defaults to the risk tier color.
    """
    c = circumference(radius)
    center = size / 2
    return {
        "size": size,
        "center": (center, center),
        "radius": radius,
        "stroke_width": stroke_width,
        "circumference": c,
        "dash_array": c,
        "dash_offset": dash_offset(percentage, radius),
        "rotation": -90,
        "color": color or risk_color(percentage),
        "background_color": "#e9ecef",
        "label": risk_label(percentage),
        "text": format_percentage(percentage),
        "text_position": (center, center + 15),
        "label_position": (center, center + 45),
        "arc_path": arc_path(percentage, size, radius),
        "background_path": arc_path(100, size, radius),
    }
