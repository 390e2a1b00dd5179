"""Plotly figures drawn from chart geometry.

Each builder takes the dict returned by the matching ``charts`` engine and
places its shapes in pixel space, so the figure looks the same wherever it is
rendered (streamlit page or static report).
"""

import plotly.graph_objects as go

from charts.scales import interpolate_color

_LEGEND_STEPS = 12


def _pixel_layout(
    fig: go.Figure,
    width: float,
    height: float,
    title: str | None = None,
    origin: tuple[float, float] = (0, 0),
) -> go.Figure:
    """Axes in SVG pixel coordinates: y grows downwards.

    ``origin`` is the canvas position of the geometry's (0, 0), e.g. the
    top-left of a margin-inset plot area or the center of a radar.
    """
    ox, oy = origin
    fig.update_xaxes(range=[-ox, width - ox], visible=False)
    fig.update_yaxes(range=[height - oy, -oy], visible=False, scaleanchor="x")
    fig.update_layout(
        title=title,
        width=width,
        height=height,
        margin=dict(l=0, r=0, t=40 if title else 0, b=0),
        plot_bgcolor="white",
        showlegend=False,
    )
    return fig


def bar_figure(geometry: dict, title: str | None = None) -> go.Figure:
    bars = geometry["bars"]
    horizontal = geometry["orientation"] == "horizontal"
    labels = [b["label"] for b in bars]
    values = [b["value"] for b in bars]

    fig = go.Figure(go.Bar(
        x=values if horizontal else labels,
        y=labels if horizontal else values,
        orientation="h" if horizontal else "v",
        marker_color=[b["color"] for b in bars],
        text=[b["value_text"] for b in bars],
        textposition="outside",
        hovertext=[b["description"] or b["label"] for b in bars],
    ))
    value_axis = dict(range=[0, geometry["max_value"]], showgrid=not horizontal)
    if horizontal:
        fig.update_layout(xaxis=value_axis, yaxis=dict(autorange="reversed"))
    else:
        fig.update_layout(yaxis=value_axis)
    fig.update_layout(title=title, height=geometry["height"], plot_bgcolor="white")
    return fig


def bubble_figure(geometry: dict, title: str | None = None) -> go.Figure:
    fig = go.Figure()
    for b in geometry["bubbles"]:
        if b["r"] <= 0:
            continue
        fig.add_shape(
            type="circle",
            x0=b["x"] - b["r"], x1=b["x"] + b["r"],
            y0=b["y"] - b["r"], y1=b["y"] + b["r"],
            fillcolor=b["fill"],
            line=dict(color=b["stroke"], width=1),
            opacity=0.85,
        )

    visible = [b for b in geometry["bubbles"] if b["r"] > 0]
    fig.add_trace(go.Scatter(
        x=[b["x"] for b in visible],
        y=[b["y"] for b in visible],
        mode="text",
        text=[f"{b['label']}<br>{b['value_text']}" if b["value_text"] else b["label"] for b in visible],
        textfont=dict(color="white", size=[max(b["label_font_size"], 6) for b in visible]),
        hovertext=[b["description"] or b["label"] for b in visible],
        hoverinfo="text",
    ))

    for item in geometry["legend"]:
        fig.add_shape(type="circle", x0=item["x"], x1=item["x"] + 12,
                      y0=item["y"], y1=item["y"] + 12, fillcolor=item["color"], line_width=0)
        fig.add_annotation(x=item["x"] + 18, y=item["y"] + 6, text=item["category"],
                           showarrow=False, xanchor="left", font=dict(size=11))

    return _pixel_layout(fig, geometry["width"], geometry["canvas_height"], title)


def heatmap_figure(geometry: dict, title: str | None = None) -> go.Figure:
    margin = geometry["margin"]
    fig = go.Figure()
    for cell in geometry["cells"]:
        fig.add_shape(
            type="rect",
            x0=cell["x"], x1=cell["x"] + cell["width"],
            y0=cell["y"], y1=cell["y"] + cell["height"],
            fillcolor=cell["fill"] or "rgba(0,0,0,0)",
            line_width=0,
        )

    cells = geometry["cells"]
    fig.add_trace(go.Scatter(
        x=[c["text_position"][0] for c in cells],
        y=[c["text_position"][1] for c in cells],
        mode="text",
        text=[c["text"] for c in cells],
        textfont=dict(color=[c["text_color"] for c in cells], size=12),
        hovertext=[c["tooltip"] or c["text"] for c in cells],
        hoverinfo="text",
    ))

    for label, x in geometry["x_ticks"]:
        fig.add_annotation(x=x, y=geometry["inner_height"] + 10, text=label,
                           showarrow=False, yanchor="top", font=dict(size=12))
    for label, y in geometry["y_ticks"]:
        fig.add_annotation(x=-10, y=y, text=label, showarrow=False, xanchor="right", font=dict(size=12))

    # Legend box position is in canvas pixels; shift it into the plot frame
    legend = geometry["legend"]
    lx = legend["x"] - margin["left"]
    ly = legend["y"] - margin["top"]
    low, high = legend["colors"][0], legend["colors"][-1]
    steps = _LEGEND_STEPS
    for i in range(steps):
        fig.add_shape(
            type="rect",
            x0=lx + legend["width"] * i / steps, x1=lx + legend["width"] * (i + 1) / steps,
            y0=ly, y1=ly + legend["height"],
            fillcolor=interpolate_color(low, high, i / (steps - 1)),
            line_width=0,
        )
    for _, x, text in legend["ticks"]:
        fig.add_annotation(x=lx + x, y=ly + legend["height"] + 2, text=text,
                           showarrow=False, yanchor="top", font=dict(size=10))
    fig.add_annotation(x=lx, y=ly - 4, text=legend["title"], showarrow=False,
                       xanchor="left", yanchor="bottom", font=dict(size=11))

    return _pixel_layout(fig, geometry["width"], geometry["height"], title,
                         origin=(margin["left"], margin["top"]))


def radar_figure(geometry: dict, title: str | None = None) -> go.Figure:
    """Radar polygons drawn around the chart center from the computed x/y points."""
    fig = go.Figure()
    for ring in geometry["grid"]:
        r = ring["radius"]
        fig.add_shape(type="circle", x0=-r, x1=r, y0=-r, y1=r,
                      line=dict(color="#e5e7eb", width=1), layer="below")
        fig.add_annotation(x=ring["label_position"][0], y=ring["label_position"][1], text=ring["label"],
                           showarrow=False, font=dict(size=10, color="#6b7280"))
    for axis in geometry["axes"]:
        fig.add_shape(type="line", x0=0, y0=0, x1=axis["end"][0], y1=axis["end"][1],
                      line=dict(color="#d1d5db", width=1), layer="below")
        fig.add_annotation(x=axis["label_position"][0], y=axis["label_position"][1], text=axis["label"],
                           showarrow=False, font=dict(size=11))

    for s in geometry["series"]:
        fig.add_shape(type="path", path=s["path"], fillcolor=s["color"], opacity=0.35,
                      line=dict(color=s["color"], width=2))
        fig.add_trace(go.Scatter(
            x=[p["x"] for p in s["points"]],
            y=[p["y"] for p in s["points"]],
            name=s["key"],
            mode="markers",
            marker=dict(color=s["color"], size=6),
            hovertext=[f"{p['axis']}: {p['value']:g}" for p in s["points"]],
            hoverinfo="text",
        ))

    cx, cy = geometry["center"]
    _pixel_layout(fig, geometry["width"], geometry["height"], title, origin=(cx, cy))
    fig.update_layout(showlegend=bool(geometry["series"]))
    return fig


def trend_figure(geometry: dict, title: str | None = None) -> go.Figure:
    """Trend lines from the smoothed SVG paths, with point labels and a legend."""
    margin = geometry["margin"]
    fig = go.Figure()
    inner_width = geometry.get("inner_width", 0)
    inner_height = geometry.get("inner_height", 0)

    for y in geometry["grid_lines"]:
        fig.add_shape(type="line", x0=0, x1=inner_width, y0=y, y1=y,
                      line=dict(color="#e5e7eb", width=1), layer="below")
    for _, y, label in geometry["y_ticks"]:
        fig.add_annotation(x=-10, y=y, text=label, showarrow=False, xanchor="right", font=dict(size=11))
    for _, x, label in geometry["x_ticks"]:
        fig.add_annotation(x=x, y=inner_height + 10, text=label, showarrow=False,
                           yanchor="top", font=dict(size=11))

    for s in geometry["series"]:
        fig.add_shape(type="path", path=s["path"], line=dict(color=s["color"], width=3))
        fig.add_trace(go.Scatter(
            x=[p["x"] for p in s["points"]],
            y=[p["y"] for p in s["points"]],
            name=s["category"],
            mode="markers",
            marker=dict(color=s["color"], size=8),
            hovertext=[p["label"] for p in s["points"]],
            hoverinfo="text",
        ))
        for p in s["points"]:
            fig.add_annotation(x=p["text_position"][0], y=p["text_position"][1], text=p["text"],
                               showarrow=False, font=dict(size=11, color=s["color"]))

    for item in geometry["legend"]:
        x = item["x"] - margin["left"]
        y = item["y"] - margin["top"]
        fig.add_shape(type="line", x0=x, x1=x + 20, y0=y, y1=y, line=dict(color=item["color"], width=3))
        fig.add_annotation(x=x + 25, y=y, text=item["category"], showarrow=False,
                           xanchor="left", font=dict(size=11))

    return _pixel_layout(fig, geometry["width"], geometry["height"], title,
                         origin=(margin["left"], margin["top"]))


def gauge_figure(geometry: dict, title: str | None = None) -> go.Figure:
    share = geometry["circumference"] - geometry["dash_offset"]
    half_stroke = geometry["stroke_width"] / 2
    fig = go.Figure(go.Pie(
        values=[share, geometry["dash_offset"]],
        hole=(geometry["radius"] - half_stroke) / (geometry["radius"] + half_stroke),
        marker_colors=[geometry["color"], geometry["background_color"]],
        sort=False,
        direction="clockwise",
        rotation=0,
        textinfo="none",
        hoverinfo="skip",
    ))
    fig.add_annotation(text=f"<b>{geometry['text']}</b>", x=0.5, y=0.55, showarrow=False, font=dict(size=28))
    fig.add_annotation(text=geometry["label"], x=0.5, y=0.38, showarrow=False, font=dict(size=12))
    fig.update_layout(
        title=title,
        width=geometry["size"],
        height=geometry["size"],
        margin=dict(l=0, r=0, t=40 if title else 0, b=0),
        showlegend=False,
    )
    return fig


def isotype_figure(geometry: dict, title: str | None = None) -> go.Figure:
    cells = geometry["cells"]
    fig = go.Figure(go.Scatter(
        x=[c["column"] for c in cells],
        y=[c["row"] for c in cells],
        mode="text",
        text=[geometry["icon"]] * len(cells),
        textfont=dict(size=20, color=[f"rgba(0,0,0,{c['opacity']})" for c in cells]),
        hoverinfo="skip",
    ))
    fig.update_xaxes(visible=False, range=[-0.5, geometry["columns"] - 0.5])
    fig.update_yaxes(visible=False, range=[geometry["rows"] - 0.5, -0.5])
    fig.update_layout(
        title=title or f"{geometry['active']} of {geometry['total']}",
        height=60 + geometry["rows"] * 32,
        plot_bgcolor="white",
        showlegend=False,
    )
    return fig


def timeline_figure(events: list[dict], title: str | None = None) -> go.Figure:
    fig = go.Figure(go.Scatter(
        x=[0] * len(events),
        y=list(range(len(events))),
        mode="markers+text",
        marker=dict(size=18, color=[e["marker_color"] for e in events]),
        text=[e["icon"] or "" for e in events],
        hoverinfo="skip",
    ))
    for e in events:
        left = e["side"] == "left"
        fig.add_annotation(
            x=-0.1 if left else 0.1,
            y=e["index"],
            xanchor="right" if left else "left",
            text=f"<b>{e['year']}</b> {e['title']}<br><span style='font-size:11px'>{e['description']}</span>",
            showarrow=False,
            align="right" if left else "left",
        )
    fig.update_xaxes(visible=False, range=[-1, 1])
    fig.update_yaxes(visible=False, autorange="reversed")
    fig.update_layout(
        title=title,
        height=120 + len(events) * 90,
        plot_bgcolor="white",
        showlegend=False,
    )
    return fig


FIGURE_BUILDERS = {
    "bar": bar_figure,
    "bubble": bubble_figure,
    "gauge": gauge_figure,
    "heatmap": heatmap_figure,
    "isotype": isotype_figure,
    "radar": radar_figure,
    "timeline": timeline_figure,
    "trend": trend_figure,
}


def build_figure(kind: str, geometry, title: str | None = None) -> go.Figure:
    """Figure for any chart kind accepted by ``charts.layout.compute_geometry``."""
    try:
        builder = FIGURE_BUILDERS[kind]
    except KeyError:
        raise ValueError(f"Unknown chart kind: {kind!r}") from None
    return builder(geometry, title)
