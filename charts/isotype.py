"""Isotype (pictogram) grid: a share of icons highlighted for a percentage."""

import math


def active_count(percentage: float, rows: int = 5, columns: int = 10) -> int:
    """Icons to highlight, rounding halves up."""
    total = rows * columns
    if math.isnan(percentage):
        return 0
    return max(0, min(total, math.floor(total * (percentage / 100) + 0.5)))


def isotype_geometry(percentage: float, rows: int = 5, columns: int = 10, icon: str = "👤") -> dict:
    """Grid cells in row-major order; the first ``active`` cells are highlighted."""
    active = active_count(percentage, rows, columns)
    cells = [
        {
            "index": i,
            "row": i // columns,
            "column": i % columns,
            "active": i < active,
            "opacity": 1.0 if i < active else 0.2,
        }
        for i in range(rows * columns)
    ]
    return {
        "rows": rows,
        "columns": columns,
        "icon": icon,
        "total": rows * columns,
        "active": active,
        "cells": cells,
    }
