"""Pull-based geometry for the presentation layer.

Renderers call :func:`compute_geometry` whenever data or the container width
changes; nothing here subscribes to events or keeps state between calls.
"""

from charts.bar import bar_geometry
from charts.bubble import bubble_geometry
from charts.gauge import gauge_geometry
from charts.heatmap import heatmap_geometry
from charts.isotype import isotype_geometry
from charts.radar import HEIGHT as RADAR_HEIGHT, WIDTH as RADAR_WIDTH, radar_geometry
from charts.timeline import timeline_geometry
from charts.trend import trend_geometry

# Nominal (width, height) per chart kind before fitting to the container
DEFAULT_SIZES = {
    "bar": (600, 300),
    "bubble": (600, 500),
    "heatmap": (600, 500),
    "trend": (700, 400),
    "radar": (RADAR_WIDTH, RADAR_HEIGHT),
    "gauge": (220, 220),
}

CHART_KINDS = ("bar", "bubble", "gauge", "heatmap", "isotype", "radar", "timeline", "trend")


def responsive_size(kind: str, container_width: float, width: float | None = None,
                    height: float | None = None) -> tuple[float, float]:
    """Fit a chart's nominal size to the container width.

    Bubble charts take the container width and cap height at 80% of it;
    heatmaps and trend charts keep their aspect ratio; bars take the width
    and keep their height. Radar and gauge charts are fixed-size.
    """
    default_w, default_h = DEFAULT_SIZES.get(kind, (container_width, 0))
    width = width or default_w
    height = height or default_h

    if kind == "bubble":
        return container_width, min(height, container_width * 0.8)
    if kind in ("heatmap", "trend"):
        return container_width, height * (container_width / width)
    if kind == "bar":
        return container_width, height
    return width, height


def compute_geometry(kind: str, data, container_width: float, width: float | None = None,
                     height: float | None = None, **options):
    """Geometry for one chart at the current container width.

    ``data`` is the record list for list-based charts, the percentage for
    gauge and isotype charts, and the radar rows for radar charts (pass
    ``keys`` and ``index_by`` as options).

    Raises:
        ValueError: For an unknown chart kind.
    """
    if kind not in CHART_KINDS:
        raise ValueError(f"Unknown chart kind: {kind!r}")

    w, h = responsive_size(kind, container_width, width, height)

    if kind == "bar":
        return bar_geometry(data, width=w, height=h, **options)
    if kind == "bubble":
        return bubble_geometry(data, width=w, height=h, **options)
    if kind == "heatmap":
        return heatmap_geometry(data, width=w, height=h, **options)
    if kind == "trend":
        return trend_geometry(data, width=w, height=h, **options)
    if kind == "radar":
        return radar_geometry(data, width=w, height=h, **options)
    if kind == "gauge":
        return gauge_geometry(data, size=w, **options)
    if kind == "isotype":
        return isotype_geometry(data, **options)
    return timeline_geometry(data)
