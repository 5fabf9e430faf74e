"""Sample statistics over Measurements: summary and throughput."""

from dataclasses import dataclass

import numpy as np

from ..core.errors import Overflow
from ..core.formatting import NS_PER_SEC
from ..core.measurement import Measurement


@dataclass(frozen=True)
class SampleSummary:
    """Statistics of a sample of Measurements.

    ``mean``, ``median`` and ``std`` are rounded to the nearest nanosecond.
    ``std`` is the population standard deviation.
    """

    count: int
    total: Measurement
    min: Measurement
    max: Measurement
    mean: Measurement
    median: Measurement
    std: Measurement


def summarize(measurements: list[Measurement]) -> SampleSummary:
    """Compute summary statistics for a non-empty sample.

    Args:
        measurements: Measurements from repeated runs of the same work.

    Returns:
        SampleSummary for the sample.

    Raises:
        Overflow: a Measurement exceeds the int64 nanosecond range (~292 years).
    """
    if not measurements:
        raise ValueError("Cannot summarize an empty sample")

    try:
        elapsed = np.array([m.elapsed_ns for m in measurements], dtype=np.int64)
    except OverflowError as e:
        raise Overflow("Sample exceeds the int64 nanosecond range") from e

    def _rounded(value) -> Measurement:
        return Measurement(int(np.rint(value)))

    return SampleSummary(
        count=len(measurements),
        total=sum(measurements, Measurement.zero()),
        min=Measurement(int(elapsed.min())),
        max=Measurement(int(elapsed.max())),
        mean=_rounded(np.mean(elapsed)),
        median=_rounded(np.median(elapsed)),
        std=_rounded(np.std(elapsed)),
    )


def throughput(n_items: int, measurement: Measurement) -> float:
    """Compute items processed per second.

    Args:
        n_items: Number of items processed.
        measurement: Wall-clock time it took.

    Returns:
        Items per second, or inf for a zero-length Measurement.
    """
    if measurement.elapsed_ns <= 0:
        return float("inf")
    return n_items * NS_PER_SEC / measurement.elapsed_ns
