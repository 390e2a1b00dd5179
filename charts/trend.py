"""Trend line geometry: one smoothed line per category over years."""

import math

from charts.scales import LinearScale
from charts.theme import THEME

_EPSILON = 1e-12


def margins(show_legend: bool = True) -> dict:
    return {"top": 40, "right": 120 if show_legend else 40, "bottom": 60, "left": 70}


def _fmt(v: float) -> str:
    return f"{v:g}"


def catmull_rom_path(points: list[tuple[float, float]], alpha: float = 0.5) -> str:
    """SVG path through the points as a Catmull-Rom spline (centripetal for alpha=0.5).

    Emits ``M`` for the first point and one cubic ``C`` segment per
    following point; two points produce a straight ``L`` segment.
    """
    if not points:
        return ""
    if len(points) == 1:
        x, y = points[0]
        return f"M{_fmt(x)},{_fmt(y)}"
    if len(points) == 2:
        (x0, y0), (x1, y1) = points
        return f"M{_fmt(x0)},{_fmt(y0)}L{_fmt(x1)},{_fmt(y1)}"

    def lengths(p, q):
        d2 = (q[0] - p[0]) ** 2 + (q[1] - p[1]) ** 2
        l_2a = d2 ** alpha
        return math.sqrt(l_2a), l_2a

    # Duplicate the end points so every segment has a neighbour on both sides
    padded = [points[0]] + list(points) + [points[-1]]
    parts = [f"M{_fmt(points[0][0])},{_fmt(points[0][1])}"]

    for i in range(1, len(padded) - 2):
        p0, p1, p2, p3 = padded[i - 1], padded[i], padded[i + 1], padded[i + 2]
        l01_a, l01_2a = lengths(p0, p1)
        l12_a, l12_2a = lengths(p1, p2)
        l23_a, l23_2a = lengths(p2, p3)

        c1x, c1y = p1
        if l01_a > _EPSILON:
            a = 2 * l01_2a + 3 * l01_a * l12_a + l12_2a
            n = 3 * l01_a * (l01_a + l12_a)
            c1x = (p1[0] * a - p0[0] * l12_2a + p2[0] * l01_2a) / n
            c1y = (p1[1] * a - p0[1] * l12_2a + p2[1] * l01_2a) / n

        c2x, c2y = p2
        if l23_a > _EPSILON:
            b = 2 * l23_2a + 3 * l23_a * l12_a + l12_2a
            m = 3 * l23_a * (l23_a + l12_a)
            c2x = (p2[0] * b + p1[0] * l23_2a - p3[0] * l12_2a) / m
            c2y = (p2[1] * b + p1[1] * l23_2a - p3[1] * l12_2a) / m

        parts.append(
            f"C{_fmt(c1x)},{_fmt(c1y)},{_fmt(c2x)},{_fmt(c2y)},{_fmt(p2[0])},{_fmt(p2[1])}"
        )
    return "".join(parts)


def trend_geometry(
    data: list[dict],
    width: float = 700,
    height: float = 400,
    show_legend: bool = True,
    colors: dict | None = None,
) -> dict:
    """Lines, points and labels for ``{year, value, label, category}`` records."""
    colors = colors if colors is not None else THEME["trend"]["colors"]
    fallback = THEME["trend"]["fallback_color"]
    margin = margins(show_legend)
    inner_width = max(0.0, width - margin["left"] - margin["right"])
    inner_height = max(0.0, height - margin["top"] - margin["bottom"])

    if not data:
        return {"width": width, "height": height, "margin": margin, "series": [],
                "x_ticks": [], "y_ticks": [], "grid_lines": [], "legend": []}

    years = [d["year"] for d in data]
    x_scale = LinearScale((min(years), max(years)), (0, inner_width)).nice()
    y_scale = LinearScale((0, max(d["value"] for d in data)), (inner_height, 0)).nice()

    grouped: dict[str, list] = {}
    for d in data:
        grouped.setdefault(d["category"], []).append(d)

    series = []
    for category, points in grouped.items():
        points = sorted(points, key=lambda p: p["year"])
        color = colors.get(category, fallback)
        coords = [(x_scale(p["year"]), y_scale(p["value"])) for p in points]
        series.append({
            "category": category,
            "color": color,
            "path": catmull_rom_path(coords),
            "points": [
                {
                    "year": p["year"],
                    "value": p["value"],
                    "label": p["label"],
                    "x": x,
                    "y": y,
                    "text": f"{p['value']}%",
                    "text_position": (x, y - 15),
                }
                for p, (x, y) in zip(points, coords)
            ],
        })

    y_ticks = y_scale.ticks(5)
    return {
        "width": width,
        "height": height,
        "margin": margin,
        "inner_width": inner_width,
        "inner_height": inner_height,
        "x_domain": x_scale.domain,
        "y_domain": y_scale.domain,
        "x_ticks": [(t, x_scale(t), f"{t:g}") for t in x_scale.ticks(5)],
        "y_ticks": [(t, y_scale(t), f"{t:g}%") for t in y_ticks],
        "grid_lines": [y_scale(t) for t in y_ticks],
        "series": series,
        "legend": [
            {
                "category": s["category"],
                "color": s["color"],
                "x": width - margin["right"] + 30,
                "y": margin["top"] + i * 30,
            }
            for i, s in enumerate(series)
        ] if show_legend else [],
    }
