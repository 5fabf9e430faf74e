"""Measurement: an immutable, non-negative elapsed span with nanosecond precision."""

import datetime
import numbers
from dataclasses import dataclass

import numpy as np

from .errors import Overflow, Underflow
from .formatting import NS_PER_SEC, NS_PER_US, format_compact, format_compound

# Fixed-length timedelta64 units and their size in nanoseconds. Sub-nanosecond
# units are stored as negative divisors. Years and months have no fixed length.
_NS_PER_TIMEDELTA64_UNIT = {
    "W": 7 * 86_400 * NS_PER_SEC,
    "D": 86_400 * NS_PER_SEC,
    "h": 3_600 * NS_PER_SEC,
    "m": 60 * NS_PER_SEC,
    "s": NS_PER_SEC,
    "ms": 1_000_000,
    "us": 1_000,
    "ns": 1,
    "ps": -1_000,
    "fs": -1_000_000,
    "as": -1_000_000_000,
}

_INT64_MAX = int(np.iinfo(np.int64).max)


@dataclass(frozen=True, order=True)
class Measurement:
    """Elapsed wall-clock time of one timed region.

    Equality, hashing and ordering compare ``elapsed_ns`` only, so two
    Measurements of the same length are equal however they were produced.
    Arithmetic always returns a new Measurement.

    Attributes:
        elapsed_ns: Elapsed time in integral nanoseconds, never negative.
    """

    elapsed_ns: int = 0

    def __post_init__(self):
        value = self.elapsed_ns
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise TypeError(
                f"elapsed_ns must be an integer, got {type(value).__name__}"
            )
        if value < 0:
            raise ValueError(f"Elapsed time cannot be negative: {value}ns")
        # numpy integers are stored as plain ints
        object.__setattr__(self, "elapsed_ns", int(value))

    @classmethod
    def zero(cls) -> "Measurement":
        return cls(0)

    @classmethod
    def from_instants(cls, start_ns: int, end_ns: int) -> "Measurement":
        """Build from two readings of the same monotonic clock."""
        if end_ns < start_ns:
            raise ValueError(
                f"Clock readings out of order: start={start_ns}, end={end_ns}"
            )
        return cls(end_ns - start_ns)

    @classmethod
    def from_duration(cls, duration) -> "Measurement":
        """Wrap a pre-computed duration.

        Args:
            duration: ``datetime.timedelta``, ``numpy.timedelta64`` with a
                fixed-length unit, or an integer count of nanoseconds.

        Returns:
            Measurement with the same elapsed value. Sub-nanosecond
            timedelta64 precision is truncated.
        """
        if isinstance(duration, datetime.timedelta):
            micros = (duration.days * 86_400 + duration.seconds) * 1_000_000
            return cls((micros + duration.microseconds) * NS_PER_US)
        if isinstance(duration, np.timedelta64):
            return cls(_timedelta64_to_ns(duration))
        if isinstance(duration, numbers.Integral) and not isinstance(duration, bool):
            return cls(duration)
        raise TypeError(f"Unsupported duration type: {type(duration).__name__}")

    @property
    def elapsed(self) -> np.timedelta64:
        """Elapsed span as a nanosecond ``numpy.timedelta64``.

        Raises Overflow beyond the int64 nanosecond range (~292 years).
        """
        return self.to_timedelta64()

    def seconds_nanos(self) -> tuple[int, int]:
        """Split into whole seconds and the leftover nanoseconds."""
        return divmod(self.elapsed_ns, NS_PER_SEC)

    def total_seconds(self) -> float:
        return self.elapsed_ns / NS_PER_SEC

    def to_timedelta(self) -> datetime.timedelta:
        """Convert to ``datetime.timedelta``, dropping sub-microsecond digits."""
        try:
            return datetime.timedelta(microseconds=self.elapsed_ns // NS_PER_US)
        except OverflowError as e:
            raise Overflow(f"{self.elapsed_ns}ns does not fit a timedelta") from e

    def to_timedelta64(self) -> np.timedelta64:
        if self.elapsed_ns > _INT64_MAX:
            raise Overflow(f"{self.elapsed_ns}ns does not fit a timedelta64[ns]")
        return np.timedelta64(self.elapsed_ns, "ns")

    def __add__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        return Measurement(self.elapsed_ns + other.elapsed_ns)

    def __radd__(self, other):
        # Lets the builtin sum() start from its default integer 0.
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other):
        if not isinstance(other, Measurement):
            return NotImplemented
        if other.elapsed_ns > self.elapsed_ns:
            raise Underflow(
                f"Cannot subtract {other.elapsed_ns}ns from {self.elapsed_ns}ns"
            )
        return Measurement(self.elapsed_ns - other.elapsed_ns)

    def checked_sub(self, other: "Measurement") -> "Measurement | None":
        """Like ``self - other`` but returns None instead of raising Underflow."""
        if not isinstance(other, Measurement):
            raise TypeError(
                f"Cannot subtract {type(other).__name__} from Measurement"
            )
        if other.elapsed_ns > self.elapsed_ns:
            return None
        return Measurement(self.elapsed_ns - other.elapsed_ns)

    def format(self, ascii: bool = False) -> str:
        """Compact single-unit rendering, e.g. "12.345ms"."""
        return format_compact(self.elapsed_ns, ascii=ascii)

    def humanize(self, ascii: bool = False) -> str:
        """Two-chunk rendering, e.g. "3 ms 3 µs" or "3 h 3 m"."""
        return format_compound(self.elapsed_ns, ascii=ascii)

    def __format__(self, spec: str) -> str:
        # Leading style letters: "a" ASCII, "c" compound. The rest is a
        # standard string spec applied to the rendering, e.g. "a>12".
        style = ""
        while spec and spec[0] in "ac" and spec[0] not in style:
            style += spec[0]
            spec = spec[1:]
        if "c" in style:
            text = self.humanize(ascii="a" in style)
        else:
            text = self.format(ascii="a" in style)
        return format(text, spec)

    def __str__(self) -> str:
        return self.format()


def _timedelta64_to_ns(duration: np.timedelta64) -> int:
    if np.isnat(duration):
        raise ValueError("Cannot build a Measurement from NaT")
    unit, multiplier = np.datetime_data(duration.dtype)
    if unit not in _NS_PER_TIMEDELTA64_UNIT:
        raise TypeError(f"timedelta64 unit {unit!r} has no fixed length in nanoseconds")
    count = int(duration.astype(np.int64)) * multiplier
    scale = _NS_PER_TIMEDELTA64_UNIT[unit]
    if scale < 0:
        return count // -scale
    return count * scale
