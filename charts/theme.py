"""Chart colors and defaults, loaded from config/charts.yaml."""

import logging

from config_loader import load_config

log = logging.getLogger(__name__)

DEFAULT_THEME = {
    "default_color": "#9b87f5",
    "bar": {"headroom": 1.1, "value_suffix": "%"},
    "bubble": {
        "padding": 2,
        "palette": ["#9381FF", "#0EA5E9", "#F87171", "#10B981", "#FB923C", "#6366F1", "#EC4899"],
    },
    "heatmap": {
        "color_scheme": ["#f7fbff", "#9381FF"],
        "light_text": "#fff",
        "dark_text": "#333",
    },
    "radar": {"colors": ["#9381FF", "#10B981"]},
    "trend": {
        "fallback_color": "#9381FF",
        "colors": {
            "Jobs Lost": "#F87171",
            "Jobs Created": "#10B981",
            "Workers Needing Reskilling": "#9381FF",
        },
    },
}


def _merge(defaults: dict, overrides: dict) -> dict:
    merged = dict(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(defaults.get(key), dict):
            merged[key] = _merge(defaults[key], value)
        else:
            merged[key] = value
    return merged


def load_theme() -> dict:
    """Chart theme from config/charts.yaml layered over DEFAULT_THEME."""
    data = load_config("charts", top_level_key="charts", default={})
    if not isinstance(data, dict):
        log.warning("charts.yaml is not a mapping, using default theme")
        return DEFAULT_THEME
    return _merge(DEFAULT_THEME, data)


THEME = load_theme()
