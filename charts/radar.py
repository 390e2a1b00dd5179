"""Radar (spider) chart geometry.

Axis ``i`` of ``n`` sits at angle ``2*pi/n * i``; positions subtract
``pi/2`` so axis 0 points straight up. Coordinates are relative to the
chart center.
"""

import math

from charts.scales import LinearScale
from charts.theme import THEME

WIDTH = 500
HEIGHT = 500
MARGIN = {"top": 50, "right": 80, "bottom": 50, "left": 80}
GRID_LEVELS = (0.2, 0.4, 0.6, 0.8, 1)
LABEL_OFFSET = 20


def plot_radius(width: float = WIDTH, height: float = HEIGHT) -> float:
    inner_width = width - MARGIN["left"] - MARGIN["right"]
    inner_height = height - MARGIN["top"] - MARGIN["bottom"]
    return min(inner_width, inner_height) / 2


def axis_angle(index: int, axis_count: int) -> float:
    return 2 * math.pi / axis_count * index


def polar_point(radius: float, angle: float) -> tuple[float, float]:
    """Screen position for a radius along an axis angle (0 = up, clockwise)."""
    return (radius * math.cos(angle - math.pi / 2), radius * math.sin(angle - math.pi / 2))


def _closed_path(points: list[tuple[float, float]]) -> str:
    if not points:
        return ""
    head, *rest = points
    parts = [f"M{head[0]:g},{head[1]:g}"]
    parts.extend(f"L{x:g},{y:g}" for x, y in rest)
    return "".join(parts) + "Z"


def radar_geometry(
    rows: list[dict],
    keys: list[str],
    index_by: str,
    max_value: float = 100,
    colors: list[str] | None = None,
    width: float = WIDTH,
    height: float = HEIGHT,
) -> dict:
    """Axes, grid rings and one closed polygon per series key.

    Args:
        rows: One dict per axis, e.g. ``{"skill": "Empathy", "Human Skills": 90}``.
        keys: Series names, each a column in the rows.
        index_by: Column holding the axis label.
        max_value: Value mapped to the outer ring.
        colors: Series colors, cycled.
    """
    colors = colors or THEME["radar"]["colors"]
    radius = plot_radius(width, height)
    r_scale = LinearScale((0, max_value), (0, radius))

    labels = [row[index_by] for row in rows]
    n = len(labels)

    axes = []
    for i, label in enumerate(labels):
        angle = axis_angle(i, n)
        axes.append({
            "label": label,
            "angle": angle,
            "end": polar_point(radius, angle),
            "label_position": polar_point(radius + LABEL_OFFSET, angle),
        })

    grid = [
        {
            "level": level,
            "radius": radius * level,
            "label": str(math.floor(max_value * level + 0.5)),
            "label_position": (0.0, -radius * level),
        }
        for level in GRID_LEVELS
    ]

    series = []
    for k, key in enumerate(keys):
        color = colors[k % len(colors)]
        points = []
        for i, row in enumerate(rows):
            value = row.get(key)
            if value is None or math.isnan(value):
                value = 0
            r = r_scale(value)
            x, y = polar_point(r, axes[i]["angle"])
            points.append({"axis": labels[i], "value": value, "radius": r, "x": x, "y": y})
        series.append({
            "key": key,
            "color": color,
            "points": points,
            "path": _closed_path([(p["x"], p["y"]) for p in points]),
        })

    return {
        "width": width,
        "height": height,
        "center": (width / 2, height / 2),
        "radius": radius,
        "axes": axes,
        "grid": grid,
        "series": series,
        "legend": [{"key": s["key"], "color": s["color"], "y": i * 25} for i, s in enumerate(series)],
    }


def radar_rows_from_skills(categories: list[dict], index_by: str = "skill") -> list[dict]:
    """Pivot skill categories into radar rows: one per skill name, a column per category."""
    rows: dict[str, dict] = {}
    for category in categories:
        for skill in category["skills"]:
            row = rows.setdefault(skill["name"], {index_by: skill["name"]})
            row[category["category"]] = skill["value"]
    return list(rows.values())
