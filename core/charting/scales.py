"""Scales mapping data values to screen coordinates and colors.

The tick and nice algorithms follow the usual 1/2/5 x 10^k progression so axes
land on round numbers.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Hashable, Iterable, Sequence
from datetime import date, datetime, timedelta
from typing import Final

import matplotlib.dates as mdates

from . import palettes

_E10: Final[float] = math.sqrt(50)
_E5: Final[float] = math.sqrt(10)
_E2: Final[float] = math.sqrt(2)


def extent(values: Iterable[float]) -> tuple[float, float]:
    """Return `(min, max)` of `values`.

    Raises:
        ValueError: When `values` is empty.
    """

    items = list(values)
    if not items:
        raise ValueError("extent() of an empty sequence")
    return min(items), max(items)


def tick_increment(start: float, stop: float, count: int) -> float:
    """Return the tick increment for a domain (negative means 1/step)."""

    step = (stop - start) / max(0, count)
    if step <= 0 or not math.isfinite(step):
        return 0.0
    power = math.floor(math.log10(step))
    error = step / (10**power)
    factor = 10 if error >= _E10 else 5 if error >= _E5 else 2 if error >= _E2 else 1
    if power >= 0:
        return factor * 10**power
    return -(10 ** (-power)) / factor


def tick_step(start: float, stop: float, count: int) -> float:
    """Return the absolute tick step for a domain."""

    step0 = abs(stop - start) / max(0, count) if count > 0 else 0.0
    if step0 <= 0:
        return 0.0
    step1 = 10 ** math.floor(math.log10(step0))
    error = step0 / step1
    if error >= _E10:
        step1 *= 10
    elif error >= _E5:
        step1 *= 5
    elif error >= _E2:
        step1 *= 2
    return step1 if stop >= start else -step1


def ticks(start: float, stop: float, count: int = 10) -> list[float]:
    """Return round tick values covering `[start, stop]`."""

    if count <= 0:
        return []
    if start == stop:
        return [start]
    reverse = stop < start
    if reverse:
        start, stop = stop, start
    inc = tick_increment(start, stop, count)
    if inc == 0 or not math.isfinite(inc):
        return []
    values: list[float]
    if inc > 0:
        r0, r1 = math.ceil(start / inc), math.floor(stop / inc)
        values = [(r0 + i) * inc for i in range(max(0, r1 - r0 + 1))]
    else:
        inv = -inc
        r0, r1 = math.ceil(start * inv), math.floor(stop * inv)
        values = [(r0 + i) / inv for i in range(max(0, r1 - r0 + 1))]
    return values[::-1] if reverse else values


def nice_domain(start: float, stop: float, count: int = 10) -> tuple[float, float]:
    """Extend `[start, stop]` outward to round values."""

    reverse = stop < start
    if reverse:
        start, stop = stop, start
    prestep: float | None = None
    for _ in range(10):
        step = tick_increment(start, stop, count)
        if step == prestep or step == 0:
            break
        if step > 0:
            start = math.floor(start / step) * step
            stop = math.ceil(stop / step) * step
        else:
            start = math.ceil(start * step) / step
            stop = math.floor(stop * step) / step
        prestep = step
    return (stop, start) if reverse else (start, stop)


def tick_format(start: float, stop: float, count: int = 10) -> Callable[[float], str]:
    """Return a formatter with enough decimals for the tick step."""

    step = abs(tick_step(start, stop, count))
    precision = max(0, -math.floor(math.log10(step))) if step > 0 else 0
    return lambda value: f"{value:,.{precision}f}"


class LinearScale:
    """Continuous linear mapping from a domain to a range.

    Args:
        domain: Input interval.
        range_: Output interval.
        clamp: Clamp outputs to the range.
    """

    def __init__(
        self,
        domain: Sequence[float] = (0.0, 1.0),
        range_: Sequence[float] = (0.0, 1.0),
        *,
        clamp: bool = False,
    ) -> None:
        self.domain: tuple[float, float] = (float(domain[0]), float(domain[-1]))
        self.range: tuple[float, float] = (float(range_[0]), float(range_[-1]))
        self.clamp = clamp

    def _forward(self, value: float) -> float:
        return value

    def _backward(self, value: float) -> float:
        return value

    def __call__(self, value: float) -> float:
        d0, d1 = self._forward(self.domain[0]), self._forward(self.domain[1])
        r0, r1 = self.range
        if d1 == d0:
            return (r0 + r1) / 2
        t = (self._forward(value) - d0) / (d1 - d0)
        if self.clamp:
            t = min(1.0, max(0.0, t))
        return r0 + t * (r1 - r0)

    def invert(self, value: float) -> float:
        """Map a range value back into the domain."""

        d0, d1 = self._forward(self.domain[0]), self._forward(self.domain[1])
        r0, r1 = self.range
        if r1 == r0:
            return self._backward((d0 + d1) / 2)
        t = (value - r0) / (r1 - r0)
        if self.clamp:
            t = min(1.0, max(0.0, t))
        return self._backward(d0 + t * (d1 - d0))

    def nice(self, count: int = 10) -> "LinearScale":
        """Extend the domain to round values (in place) and return self."""

        self.domain = nice_domain(self.domain[0], self.domain[1], count)
        return self

    def ticks(self, count: int = 10) -> list[float]:
        """Return round tick values inside the domain."""

        return ticks(self.domain[0], self.domain[1], count)

    def tick_format(self, count: int = 10) -> Callable[[float], str]:
        """Return a formatter matched to `ticks(count)`."""

        return tick_format(self.domain[0], self.domain[1], count)


class SqrtScale(LinearScale):
    """Square-root scale (used for area-true circle radii)."""

    def _forward(self, value: float) -> float:
        return math.copysign(math.sqrt(abs(value)), value)

    def _backward(self, value: float) -> float:
        return math.copysign(value * value, value)


class BandScale:
    """Ordinal scale mapping discrete keys to evenly spaced bands.

    Args:
        domain: Ordered keys.
        range_: Output interval.
        padding_inner: Fraction of the step left empty between bands.
        padding_outer: Fraction of the step left empty at both ends.
        align: Distribution of the outer padding (0.5 = centered).
    """

    def __init__(
        self,
        domain: Sequence[Hashable],
        range_: Sequence[float] = (0.0, 1.0),
        *,
        padding_inner: float = 0.0,
        padding_outer: float = 0.0,
        align: float = 0.5,
    ) -> None:
        self.domain: tuple[Hashable, ...] = tuple(dict.fromkeys(domain))
        self.range: tuple[float, float] = (float(range_[0]), float(range_[-1]))
        self.padding_inner = padding_inner
        self.padding_outer = padding_outer
        self.align = align
        self._index = {key: i for i, key in enumerate(self.domain)}

    @classmethod
    def with_padding(cls, domain: Sequence[Hashable], range_: Sequence[float], padding: float) -> "BandScale":
        """Create a band scale using the same inner and outer padding."""

        return cls(domain, range_, padding_inner=padding, padding_outer=padding)

    def _layout(self) -> tuple[float, float]:
        n = len(self.domain)
        r0, r1 = self.range
        reverse = r1 < r0
        start, stop = (r1, r0) if reverse else (r0, r1)
        step = (stop - start) / max(1.0, n - self.padding_inner + self.padding_outer * 2)
        start += (stop - start - step * (n - self.padding_inner)) * self.align
        return start, step

    @property
    def step(self) -> float:
        """Distance between the starts of adjacent bands."""

        return self._layout()[1]

    @property
    def bandwidth(self) -> float:
        """Width of each band."""

        return self._layout()[1] * (1 - self.padding_inner)

    def __call__(self, key: Hashable) -> float:
        if key not in self._index:
            raise KeyError(f"{key!r} is not in the band domain")
        start, step = self._layout()
        index = self._index[key]
        if self.range[1] < self.range[0]:
            index = len(self.domain) - 1 - index
        return start + step * index

    def center(self, key: Hashable) -> float:
        """Return the middle of the band for `key`."""

        return self(key) + self.bandwidth / 2


class PointScale(BandScale):
    """Band scale with zero-width bands (points)."""

    def __init__(self, domain: Sequence[Hashable], range_: Sequence[float] = (0.0, 1.0), *, padding: float = 0.0):
        super().__init__(domain, range_, padding_inner=1.0, padding_outer=padding)

    def _layout(self) -> tuple[float, float]:
        n = len(self.domain)
        r0, r1 = self.range
        reverse = r1 < r0
        start, stop = (r1, r0) if reverse else (r0, r1)
        step = (stop - start) / max(1.0, n - 1 + self.padding_outer * 2)
        start += (stop - start - step * (n - 1)) * self.align
        return start, step

    @property
    def bandwidth(self) -> float:
        return 0.0


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    return datetime(value.year, value.month, value.day)


def _month_label(num: float, pos: int | None = None) -> str:
    value = mdates.num2date(num)
    return value.strftime("%Y") if value.month == 1 else value.strftime("%B")


class TimeScale:
    """Linear scale over dates/datetimes.

    Ticks and labels come from matplotlib's date locators and formatters.

    Args:
        domain: `(start, end)` dates.
        range_: Output interval.
    """

    def __init__(self, domain: Sequence[date | datetime], range_: Sequence[float] = (0.0, 1.0)) -> None:
        self.domain = (_as_datetime(domain[0]), _as_datetime(domain[-1]))
        self.range: tuple[float, float] = (float(range_[0]), float(range_[-1]))

    def _seconds(self, value: date | datetime) -> float:
        return (_as_datetime(value) - self.domain[0]).total_seconds()

    def __call__(self, value: date | datetime) -> float:
        span = (self.domain[1] - self.domain[0]).total_seconds()
        r0, r1 = self.range
        if span == 0:
            return (r0 + r1) / 2
        return r0 + self._seconds(value) / span * (r1 - r0)

    def invert(self, value: float) -> datetime:
        """Map a range value back to a datetime."""

        r0, r1 = self.range
        span = (self.domain[1] - self.domain[0]).total_seconds()
        t = 0.0 if r1 == r0 else (value - r0) / (r1 - r0)
        return self.domain[0] + timedelta(seconds=t * span)

    def _locator(self, count: int) -> mdates.AutoDateLocator:
        start, stop = sorted(self.domain)
        locator = mdates.AutoDateLocator(minticks=3, maxticks=max(3, count))
        locator.create_dummy_axis()
        locator.axis.set_view_interval(mdates.date2num(start), mdates.date2num(stop))
        return locator

    def ticks(self, count: int = 10) -> list[datetime]:
        """Return calendar-aligned ticks inside the domain."""

        start, stop = sorted(self.domain)
        if start == stop:
            return [start]
        values = (mdates.num2date(num).replace(tzinfo=None) for num in self._locator(count)())
        return [value for value in values if start <= value <= stop]

    def tick_format(self, count: int = 10) -> Callable[[datetime], str]:
        """Return a label formatter suited to the tick interval."""

        locator = self._locator(count)
        if self.domain[0] != self.domain[1]:
            locator()  # picks the tick frequency the formatter keys on
        formatter = mdates.AutoDateFormatter(locator)
        formatter.scaled = {
            1 / 24: "%H:%M",
            1.0: "%b %d",
            7.0: "%b %d",
            30.0: _month_label,
            365.0: "%Y",
        }
        return lambda value: formatter(mdates.date2num(_as_datetime(value)))


class OrdinalScale:
    """Map keys to a cycling list of outputs, assigning in first-seen order."""

    def __init__(self, range_: Sequence[str], domain: Iterable[Hashable] = ()) -> None:
        self.range = tuple(range_)
        self._index: dict[Hashable, int] = {}
        for key in domain:
            self(key)

    @property
    def domain(self) -> tuple[Hashable, ...]:
        """Keys seen so far, in assignment order."""

        return tuple(self._index)

    def __call__(self, key: Hashable) -> str:
        if key not in self._index:
            self._index[key] = len(self._index)
        return self.range[self._index[key] % len(self.range)]


class SequentialScale:
    """Map a numeric domain onto a sequential color ramp.

    Args:
        ramp: Ramp name from `palettes.SEQUENTIAL_RAMPS`.
        domain: `(low, high)` values mapped to the ramp ends.
    """

    def __init__(self, ramp: str, domain: Sequence[float] = (0.0, 1.0)) -> None:
        self.ramp = ramp
        self.domain: tuple[float, float] = (float(domain[0]), float(domain[-1]))
        self._interpolate = palettes.interpolator(ramp)

    def __call__(self, value: float) -> str:
        d0, d1 = self.domain
        t = 0.5 if d1 == d0 else (value - d0) / (d1 - d0)
        return self._interpolate(t)
