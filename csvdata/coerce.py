"""Permissive numeric coercion for CSV cells.

The CSV files are hand-maintained, so numbers are read the forgiving way:
the longest numeric prefix wins and anything else becomes NaN instead of
raising. ``"85.5"`` reads as 85 for integer fields, ``"12abc"`` as 12.
"""

import math
import re

NAN = float("nan")

_RE_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_RE_FLOAT_PREFIX = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def parse_int(text) -> int | float:
    """Truncating base-10 parse. Returns NaN when no digits lead the text."""
    if text is None:
        return NAN
    m = _RE_INT_PREFIX.match(str(text))
    if not m:
        return NAN
    return int(m.group(1))


def parse_float(text) -> float:
    """Decimal-prefix parse. Returns NaN when no number leads the text."""
    if text is None:
        return NAN
    m = _RE_FLOAT_PREFIX.match(str(text))
    if not m:
        return NAN
    token = m.group(1)
    if token.lstrip("+-") == "Infinity":
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def is_invalid_number(value) -> bool:
    """True for NaN (the coercion failure sentinel) and non-numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return True
    return isinstance(value, float) and math.isnan(value)


def split_list(text: str, separator: str) -> list[str]:
    """Split on a literal separator, trimming pieces and dropping empty ones.

    Unlike a plain ``str.split``, blank pieces never reach the records:
    ``"a||b|"`` gives ``["a", "b"]``, not ``["a", "", "b", ""]``.
    """
    if not text:
        return []
    return [part.strip() for part in text.split(separator) if part.strip()]
