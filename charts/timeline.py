"""Timeline layout: events alternate sides down a center line."""

from charts.theme import THEME


def timeline_geometry(events: list[dict]) -> list[dict]:
    """Side and marker color per event, in input order."""
    return [
        {
            "index": i,
            "year": event["year"],
            "title": event["title"],
            "description": event["description"],
            "icon": event.get("icon"),
            "side": "left" if i % 2 == 0 else "right",
            "marker_color": event.get("iconColor") or THEME["default_color"],
        }
        for i, event in enumerate(events)
    ]
