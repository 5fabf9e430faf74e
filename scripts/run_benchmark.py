#!/usr/bin/env python
"""Time a set of small reference workloads and report their Measurements."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import argparse
import json
import logging
import time

import numpy as np

from measure.evaluation.benchmark import run_benchmark_sweep
from measure.evaluation.metrics import throughput
from measure.evaluation.plotting import plot_distributions, plot_summary
from measure.serialization.codec import encode
from measure.utils.logging import setup_console_logger


def build_workloads(size: int) -> dict:
    """Workloads spanning several orders of magnitude."""
    rng = np.random.default_rng(42)
    values = rng.standard_normal(size)
    matrix = rng.standard_normal((256, 256))
    return {
        "noop": lambda: None,
        "sum-range": lambda: sum(range(size)),
        "sort-list": lambda: sorted(values.tolist()),
        "numpy-sort": lambda: np.sort(values),
        "matmul-256": lambda: matrix @ matrix,
        "sleep-5ms": lambda: time.sleep(0.005),
    }


def main():
    parser = argparse.ArgumentParser(description="Run timing benchmarks")
    parser.add_argument("--repeats", type=int, default=20, help="Timed runs per workload")
    parser.add_argument("--warmup", type=int, default=2, help="Untimed runs per workload")
    parser.add_argument("--size", type=int, default=100_000, help="Input size for list workloads")
    parser.add_argument("--output-dir", type=str, default="results", help="Output directory")
    parser.add_argument("--ascii", action="store_true", help="Print 'us' instead of 'µs'")
    parser.add_argument("--no-plots", action="store_true", help="Skip plot generation")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    setup_console_logger(logging.DEBUG if args.verbose else logging.WARNING)

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    print(f"\nRunning benchmarks (repeats={args.repeats}, warmup={args.warmup})...")
    results = run_benchmark_sweep(
        build_workloads(args.size),
        repeats=args.repeats,
        warmup=args.warmup,
        progress=True,
    )

    # Save results
    results_data = []
    for r in results:
        s = r.summary
        results_data.append({
            "name": r.name,
            "measurements_ns": [encode(m) for m in r.measurements],
            "total_ns": encode(s.total),
            "min_ns": encode(s.min),
            "max_ns": encode(s.max),
            "mean_ns": encode(s.mean),
            "median_ns": encode(s.median),
            "std_ns": encode(s.std),
        })

    json_path = output_dir / "timing_results.json"
    with open(json_path, "w") as f:
        json.dump(results_data, f, indent=2)
    print(f"\nResults saved to {json_path}")

    if not args.no_plots and results:
        print("\nGenerating plots...")
        plot_distributions(
            results,
            save_path=output_dir / "timing_distribution.png",
            title=f"Elapsed time over {args.repeats} runs",
        )
        plot_summary(
            results,
            save_path=output_dir / "timing_summary.png",
        )

    # Summary
    fmt = "a" if args.ascii else ""
    print(f"\n{'='*70}")
    print(f"Summary (repeats={args.repeats}, size={args.size})")
    print(f"{'='*70}")
    print(f"{'Workload':<14} {'Median':>12} {'Min':>12} {'Max':>12} {'Runs/s':>14}")
    print(f"{'-'*14} {'-'*12} {'-'*12} {'-'*12} {'-'*14}")
    for r in results:
        s = r.summary
        runs_per_sec = throughput(s.count, s.total)
        print(f"{r.name:<14} {s.median:{fmt}>12} {s.min:{fmt}>12} "
              f"{s.max:{fmt}>12} {runs_per_sec:>14.1f}")


if __name__ == "__main__":
    main()
