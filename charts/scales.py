"""Scales mapping data values onto pixel ranges and colors.

Tick and nice() steps follow the usual 1/2/5 x 10^k progression, so axes
land on round numbers: a [0, 87] domain nices to [0, 90] for 10 ticks and
to [0, 100] for 5.
"""

import math

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def _tick_params(start: float, stop: float, count: float) -> tuple[int, int, float]:
    step = (stop - start) / max(0, count)
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1

    if power < 0:
        inc = 10 ** -power / factor
        i1 = _round_half_up(start * inc)
        i2 = _round_half_up(stop * inc)
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        inc = -inc
    else:
        inc = 10 ** power * factor
        i1 = _round_half_up(start / inc)
        i2 = _round_half_up(stop / inc)
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1

    if i2 < i1 and 0.5 <= count < 2:
        return _tick_params(start, stop, count * 2)
    return i1, i2, inc


def tick_increment(start: float, stop: float, count: int) -> float:
    """Tick step for [start, stop]; negative values mean "divide by -step"."""
    return _tick_params(start, stop, count)[2]


def ticks(start: float, stop: float, count: int = 10) -> list[float]:
    """Round tick values covering [start, stop]."""
    if not count > 0:
        return []
    if start == stop:
        return [start]
    reverse = stop < start
    if reverse:
        start, stop = stop, start
    i1, i2, inc = _tick_params(start, stop, count)
    if not i2 >= i1:
        return []
    n = i2 - i1 + 1
    if inc < 0:
        values = [(i1 + i) / -inc for i in range(n)]
    else:
        values = [(i1 + i) * inc for i in range(n)]
    return values[::-1] if reverse else values


class LinearScale:
    """Continuous domain -> continuous range mapping."""

    def __init__(self, domain=(0.0, 1.0), range=(0.0, 1.0), clamp: bool = False):
        self.domain = (float(domain[0]), float(domain[1]))
        self.range = (float(range[0]), float(range[1]))
        self.clamp = clamp

    def _normalize(self, value: float) -> float:
        d0, d1 = self.domain
        span = d1 - d0
        if span == 0 or math.isnan(span):
            return math.nan if math.isnan(span) else 0.5
        t = (value - d0) / span
        if self.clamp and not math.isnan(t):
            t = min(1.0, max(0.0, t))
        return t

    def __call__(self, value: float) -> float:
        r0, r1 = self.range
        return r0 + self._normalize(value) * (r1 - r0)

    def invert(self, pixel: float) -> float:
        r0, r1 = self.range
        d0, d1 = self.domain
        if r1 == r0:
            return (d0 + d1) / 2
        return d0 + (pixel - r0) / (r1 - r0) * (d1 - d0)

    def nice(self, count: int = 10) -> "LinearScale":
        """Extend the domain outward to round tick boundaries. Returns self."""
        d0, d1 = self.domain
        reverse = d1 < d0
        start, stop = (d1, d0) if reverse else (d0, d1)
        if start == stop or math.isnan(start) or math.isnan(stop):
            return self

        prestep = None
        for _ in range(10):
            step = tick_increment(start, stop, count)
            if step == prestep:
                break
            if step > 0:
                start = math.floor(start / step) * step
                stop = math.ceil(stop / step) * step
            elif step < 0:
                start = math.ceil(start * step) / step
                stop = math.floor(stop * step) / step
            else:
                break
            prestep = step

        self.domain = (stop, start) if reverse else (start, stop)
        return self

    def ticks(self, count: int = 10) -> list[float]:
        return ticks(self.domain[0], self.domain[1], count)


class BandScale:
    """Categories -> evenly spaced bands with fractional inner padding.

    Each category gets ``step = span / count`` pixels starting at
    ``index * step``; the band itself is ``step * (1 - padding)`` wide.
    """

    def __init__(self, domain, range=(0.0, 1.0), padding: float = 0.0):
        self.domain = list(dict.fromkeys(domain))
        self.range = (float(range[0]), float(range[1]))
        self.padding = padding

    @property
    def step(self) -> float:
        if not self.domain:
            return 0.0
        return (self.range[1] - self.range[0]) / len(self.domain)

    @property
    def bandwidth(self) -> float:
        return self.step * (1 - self.padding)

    def index(self, value) -> int:
        return self.domain.index(value)

    def position(self, index: int) -> float:
        return self.range[0] + index * self.step

    def __call__(self, value) -> float | None:
        """Band start for a category, or None for unknown categories."""
        if value not in self.domain:
            return None
        return self.position(self.domain.index(value))

    def center(self, value) -> float | None:
        start = self(value)
        return None if start is None else start + self.bandwidth / 2


class OrdinalScale:
    """Categories -> cycling range values; unseen categories are appended."""

    def __init__(self, domain=(), range=()):
        self.domain = list(dict.fromkeys(domain))
        self.range = list(range)

    def __call__(self, value):
        if value not in self.domain:
            self.domain.append(value)
        if not self.range:
            return None
        return self.range[self.domain.index(value) % len(self.range)]


# ── Colors ─────────────────────────────────────────────────────────────────────

def parse_hex(color: str) -> tuple[int, int, int]:
    """Parse ``#rgb`` or ``#rrggbb`` into an RGB tuple."""
    value = color.lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        raise ValueError(f"Not a hex color: {color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def to_hex(rgb) -> str:
    return "#" + "".join(f"{max(0, min(255, _round_half_up(c))):02x}" for c in rgb)


def interpolate_color(start: str, end: str, t: float) -> str:
    """Linear RGB interpolation between two hex colors, t in [0, 1]."""
    a = parse_hex(start)
    b = parse_hex(end)
    return to_hex(a[i] + (b[i] - a[i]) * t for i in range(3))


def darken(color: str, k: float = 1.0) -> str:
    """Darken a hex color by 0.7^k per channel."""
    factor = 0.7 ** k
    return to_hex(c * factor for c in parse_hex(color))


class ColorScale:
    """Numeric domain -> color, interpolated between two colors and clamped."""

    def __init__(self, domain, colors):
        self.domain = (float(domain[0]), float(domain[1]))
        self.colors = (colors[0], colors[1])
        self._t = LinearScale(self.domain, (0.0, 1.0), clamp=True)

    def __call__(self, value: float) -> str | None:
        t = self._t(value)
        if math.isnan(t):
            return None
        return interpolate_color(self.colors[0], self.colors[1], t)
