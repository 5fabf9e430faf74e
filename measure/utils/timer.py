"""Timing harness: bracket a computation with two monotonic clock reads."""

import functools
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, TypeVar

from ..core.measurement import Measurement

T = TypeVar("T")

logger = logging.getLogger(__name__)

# Authoritative time base: monotonic, process-wide, unaffected by wall-clock changes
now_ns = time.perf_counter_ns


def measure(computation: Callable[[], T]) -> tuple[T, Measurement]:
    """Run ``computation`` once and time it.

    Usage:
        rows, m = measure(lambda: load_rows(path))
        print(f"loading took {m}")

    Args:
        computation: Zero-argument callable. Its return value may be anything,
            including None.

    Returns:
        (result, measurement) where result is whatever ``computation`` returned.

    Any exception raised by ``computation`` propagates unchanged and no
    Measurement is produced.
    """
    start = now_ns()
    result = computation()
    end = now_ns()
    return result, Measurement.from_instants(start, end)


@dataclass
class TimingResult:
    """Holds the Measurement of a ``timer()`` block once it completes."""

    measurement: Measurement | None = None

    @property
    def elapsed(self) -> Measurement:
        if self.measurement is None:
            raise RuntimeError("Timed block has not completed")
        return self.measurement


@contextmanager
def timer() -> Iterator[TimingResult]:
    """Context manager form of ``measure``.

    Usage:
        with timer() as t:
            do_something()
        print(f"Took {t.elapsed}")

    If the block raises, the exception propagates and ``t.measurement``
    stays None.
    """
    result = TimingResult()
    start = now_ns()
    yield result
    result.measurement = Measurement.from_instants(start, now_ns())


def timed(
    func: Callable | None = None,
    *,
    log: logging.Logger | None = None,
    level: int = logging.DEBUG,
):
    """Decorator that times every call of ``func`` and logs the result.

    Usable bare (``@timed``) or with options (``@timed(level=logging.INFO)``).
    The decorated function returns only its own result.
    """

    def decorator(fn):
        target = log or logger

        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            result, measurement = measure(lambda: fn(*args, **kwargs))
            target.log(level, "%s took %s", fn.__qualname__, measurement)
            return result

        return wrapper

    if func is not None:
        return decorator(func)
    return decorator
