"""Unit-scaled text renderings of nanosecond counts.

All digits are produced with integer arithmetic so output is deterministic,
locale-independent and never rounded up into the next unit.
"""

NS_PER_US = 1_000
NS_PER_MS = 1_000_000
NS_PER_SEC = 1_000_000_000
NS_PER_MIN = 60 * NS_PER_SEC
NS_PER_HOUR = 60 * NS_PER_MIN

MICRO = "µs"
MICRO_ASCII = "us"


def format_compact(nanos: int, ascii: bool = False) -> str:
    """Render in the coarsest unit that keeps the magnitude human-scale.

    Breakpoints (the breakpoint value itself moves to the next unit):
        < 1_000 ns          -> "999ns"
        < 1_000_000 ns      -> "1.000µs" .. "999.999µs"
        < 1_000_000_000 ns  -> "1.000ms" .. "999.999ms"
        otherwise           -> "1.000s", unbounded

    Fractions always carry 3 digits and are truncated, not rounded.

    Args:
        nanos: Non-negative nanosecond count.
        ascii: Use "us" instead of "µs".

    Returns:
        Formatted string without separators.
    """
    if nanos < 0:
        raise ValueError(f"Cannot format a negative duration: {nanos}ns")
    if nanos < NS_PER_US:
        return f"{nanos}ns"
    if nanos < NS_PER_MS:
        whole, frac = divmod(nanos, NS_PER_US)
        return f"{whole}.{frac:03d}{MICRO_ASCII if ascii else MICRO}"
    if nanos < NS_PER_SEC:
        whole, rest = divmod(nanos, NS_PER_MS)
        return f"{whole}.{rest // NS_PER_US:03d}ms"
    whole, rest = divmod(nanos, NS_PER_SEC)
    return f"{whole}.{rest // NS_PER_MS:03d}s"


# (upper bound, major unit size, major suffix, minor unit size, minor suffix)
_COMPOUND_UNITS = [
    (NS_PER_MS, NS_PER_US, "µs", 1, "ns"),
    (NS_PER_SEC, NS_PER_MS, "ms", NS_PER_US, "µs"),
    (NS_PER_MIN, NS_PER_SEC, "s", NS_PER_MS, "ms"),
    (NS_PER_HOUR, NS_PER_MIN, "m", NS_PER_SEC, "s"),
    (None, NS_PER_HOUR, "h", NS_PER_MIN, "m"),
]


def format_compound(nanos: int, ascii: bool = False) -> str:
    """Render as one or two whole-number chunks, e.g. "3 ms 3 µs" or "3 h 3 m".

    The minor chunk is omitted when it is zero ("10 s"). Anything below the
    minor unit is dropped.
    """
    if nanos < 0:
        raise ValueError(f"Cannot format a negative duration: {nanos}ns")
    if nanos < NS_PER_US:
        return f"{nanos} ns"

    for upper, major, major_suffix, minor, minor_suffix in _COMPOUND_UNITS:
        if upper is None or nanos < upper:
            break
    major_count, rest = divmod(nanos, major)
    minor_count = rest // minor
    if ascii:
        major_suffix = major_suffix.replace(MICRO, MICRO_ASCII)
        minor_suffix = minor_suffix.replace(MICRO, MICRO_ASCII)
    if minor_count > 0:
        return f"{major_count} {major_suffix} {minor_count} {minor_suffix}"
    return f"{major_count} {major_suffix}"
