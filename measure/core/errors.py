"""Error kinds raised by Measurement arithmetic, conversion and decoding."""


class MeasureError(Exception):
    """Base class for all measure errors."""


class Underflow(MeasureError, ArithmeticError):
    """Subtracting a Measurement from a smaller one.

    A negative elapsed time has no meaning, so the result is never clamped.
    """


class Overflow(MeasureError, OverflowError):
    """A Measurement does not fit the target duration representation."""


class DecodeError(MeasureError, ValueError):
    """Malformed or out-of-range input at the serialization boundary."""
