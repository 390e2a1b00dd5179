"""Bubble chart geometry: circle packing with area proportional to value.

Circles are placed greedily, largest first. Each new circle goes to the spot
closest to the origin where it touches two already placed circles without
overlapping any. The packed cluster is then scaled and centered to fit the
chart box. Padding is added to every radius while packing and removed
afterwards, so neighbours keep a gap.
"""

import math
from itertools import combinations

from charts.scales import OrdinalScale, darken
from charts.theme import THEME

LEGEND_COLUMN_WIDTH = 120
LEGEND_ROW_HEIGHT = 30
LEGEND_EXTRA_HEIGHT = 60
VALUE_TEXT_MIN_RADIUS = 30

_EPSILON = 1e-9


def _overlaps(x: float, y: float, r: float, placed: list[tuple[float, float, float]]) -> bool:
    for px, py, pr in placed:
        gap = math.hypot(x - px, y - py) - (r + pr)
        if gap < -_EPSILON * max(1.0, r + pr):
            return True
    return False


def _tangent_positions(a, b, r: float) -> list[tuple[float, float]]:
    """Centers of a circle of radius r touching circles a and b from outside."""
    ax, ay, ar = a
    bx, by, br = b
    da = ar + r
    db = br + r
    dx = bx - ax
    dy = by - ay
    d = math.hypot(dx, dy)
    if d == 0 or d > da + db or d < abs(da - db):
        return []
    x = (da * da - db * db + d * d) / (2 * d)
    h = math.sqrt(max(0.0, da * da - x * x))
    ux, uy = dx / d, dy / d
    mx, my = ax + ux * x, ay + uy * x
    return [(mx - uy * h, my + ux * h), (mx + uy * h, my - ux * h)]


def _outside_position(r: float, placed) -> tuple[float, float]:
    """A free spot just beyond the outermost circle, along its direction."""
    cx, cy, cr = max(placed, key=lambda c: math.hypot(c[0], c[1]) + c[2])
    reach = math.hypot(cx, cy) + cr
    norm = math.hypot(cx, cy)
    ux, uy = (cx / norm, cy / norm) if norm else (1.0, 0.0)
    return (ux * (reach + r), uy * (reach + r))


def pack_siblings(radii: list[float]) -> list[tuple[float, float]]:
    """Place circles with the given radii without overlap, around the origin.

    Returns centers in input order.
    """
    order = sorted(range(len(radii)), key=lambda i: -radii[i])
    placed: list[tuple[float, float, float]] = []
    centers: dict[int, tuple[float, float]] = {}

    for i in order:
        r = radii[i]
        if not placed:
            pos = (0.0, 0.0)
        elif len(placed) == 1:
            px, py, pr = placed[0]
            pos = (px + pr + r, py)
        else:
            best = None
            best_dist = math.inf
            for a, b in combinations(placed, 2):
                for x, y in _tangent_positions(a, b, r):
                    dist = math.hypot(x, y)
                    if dist < best_dist and not _overlaps(x, y, r, placed):
                        best, best_dist = (x, y), dist
            pos = best if best is not None else _outside_position(r, placed)
        placed.append((pos[0], pos[1], r))
        centers[i] = pos

    return [centers[i] for i in range(len(radii))]


def enclose(circles: list[tuple[float, float, float]]) -> tuple[float, float, float]:
    """An enclosing circle centered on the cluster's bounding box."""
    if not circles:
        return (0.0, 0.0, 0.0)
    x0 = min(x - r for x, _, r in circles)
    x1 = max(x + r for x, _, r in circles)
    y0 = min(y - r for _, y, r in circles)
    y1 = max(y + r for _, y, r in circles)
    cx, cy = (x0 + x1) / 2, (y0 + y1) / 2
    radius = max(math.hypot(x - cx, y - cy) + r for x, y, r in circles)
    return (cx, cy, radius)


def _pack_with_padding(radii: list[float], pad: float):
    padded = [r + pad for r in radii]
    centers = pack_siblings(padded)
    cx, cy, e = enclose([(x, y, r) for (x, y), r in zip(centers, padded)])
    return centers, (cx, cy, e + pad)


def pack_layout(values: list[float], width: float, height: float, padding: float = 2) -> list[dict]:
    """Circle positions and radii for values, fitted inside width x height.

    Radius is proportional to sqrt(value), so area is proportional to value.
    Values that are not positive numbers get radius 0 at the box center.
    """
    size = min(width, height)
    usable = [i for i, v in enumerate(values) if isinstance(v, (int, float)) and v > 0]
    layout = [{"x": width / 2, "y": height / 2, "r": 0.0} for _ in values]
    if not usable or size <= 0:
        return layout

    radii = [math.sqrt(values[i]) for i in usable]

    # First pass without padding sizes the cluster so padding can be
    # expressed in packing units, as the final pixel scale is not known yet.
    _, (_, _, root_r) = _pack_with_padding(radii, 0.0)
    pad = padding * root_r / size if padding else 0.0
    centers, (cx, cy, root_r) = _pack_with_padding(radii, pad)

    k = size / (2 * root_r)
    for i, (x, y), r in zip(usable, centers, radii):
        layout[i] = {
            "x": width / 2 + (x - cx) * k,
            "y": height / 2 + (y - cy) * k,
            "r": r * k,
        }
    return layout


def bubble_geometry(
    data: list[dict],
    width: float = 600,
    height: float = 500,
    padding: float | None = None,
) -> dict:
    """Bubbles for ``{id, value, label, category, color?, description?}`` records."""
    if padding is None:
        padding = THEME["bubble"]["padding"]

    categories = list(dict.fromkeys(d["category"] for d in data))
    color_scale = OrdinalScale(categories, THEME["bubble"]["palette"])
    layout = pack_layout([d["value"] for d in data], width, height, padding)

    bubbles = []
    for d, node in zip(data, layout):
        r = node["r"]
        fill = d.get("color") or color_scale(d["category"])
        show_value = r > VALUE_TEXT_MIN_RADIUS
        bubbles.append({
            "id": d.get("id"),
            "label": d["label"],
            "category": d["category"],
            "value": d["value"],
            "description": d.get("description"),
            "x": node["x"],
            "y": node["y"],
            "r": r,
            "fill": fill,
            "stroke": darken(fill, 0.3),
            "label_font_size": min(r / 2.5, 14),
            "value_font_size": min(r / 3.5, 12),
            "value_text": f"{d['value']}%" if show_value else "",
            "value_offset": r / 4 if show_value else 0.0,
        })

    items_per_row = max(1, math.floor(width / LEGEND_COLUMN_WIDTH))
    legend = [
        {
            "category": c,
            "color": color_scale(c),
            "x": 20 + (i % items_per_row) * LEGEND_COLUMN_WIDTH,
            "y": height + 20 + (i // items_per_row) * LEGEND_ROW_HEIGHT,
        }
        for i, c in enumerate(categories)
    ]

    return {
        "width": width,
        "height": height,
        "canvas_height": height + LEGEND_EXTRA_HEIGHT,
        "bubbles": bubbles,
        "legend": legend,
        "items_per_row": items_per_row,
    }
