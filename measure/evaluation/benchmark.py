"""Repeated-run benchmarks built on the timing harness."""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from tqdm import tqdm

from ..core.measurement import Measurement
from ..utils.timer import measure
from .metrics import SampleSummary, summarize

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Result from a single benchmark run."""

    name: str
    measurements: list[Measurement] = field(default_factory=list)
    summary: SampleSummary | None = None
    result: Any = None


def run_benchmark(
    name: str,
    computation: Callable[[], Any],
    repeats: int = 10,
    warmup: int = 1,
    progress: bool = False,
) -> BenchmarkResult:
    """Time ``computation`` several times.

    Args:
        name: Label for the workload.
        computation: Zero-argument callable to time.
        repeats: Number of timed runs.
        warmup: Number of untimed runs before timing starts.
        progress: Show a tqdm progress bar over the timed runs.

    Returns:
        BenchmarkResult with one Measurement per timed run, their summary,
        and the value returned by the last run.
    """
    if repeats < 1:
        raise ValueError(f"repeats must be at least 1, got {repeats}")
    if warmup < 0:
        raise ValueError(f"warmup cannot be negative, got {warmup}")

    for _ in range(warmup):
        computation()

    bench = BenchmarkResult(name=name)
    for _ in tqdm(range(repeats), desc=name, disable=not progress):
        bench.result, m = measure(computation)
        bench.measurements.append(m)
    bench.summary = summarize(bench.measurements)
    logger.debug("%s: %d runs, median %s", name, repeats, bench.summary.median)
    return bench


def run_benchmark_sweep(
    workloads: dict[str, Callable[[], Any]],
    repeats: int = 10,
    warmup: int = 1,
    progress: bool = False,
) -> list[BenchmarkResult]:
    """Benchmark every named workload; a failing workload is reported and skipped.

    Args:
        workloads: Mapping from name to zero-argument callable.
        repeats: Timed runs per workload.
        warmup: Untimed runs per workload.
        progress: Show a progress bar over workloads.

    Returns:
        List of BenchmarkResults for the workloads that completed.
    """
    results = []
    for name, computation in tqdm(workloads.items(), desc="Sweep", disable=not progress):
        try:
            r = run_benchmark(name, computation, repeats=repeats, warmup=warmup)
            results.append(r)
            s = r.summary
            print(f"  {name}: median={s.median}, min={s.min}, max={s.max}, "
                  f"std={s.std}")
        except Exception as e:
            print(f"  {name}: FAILED - {e}")
    return results
