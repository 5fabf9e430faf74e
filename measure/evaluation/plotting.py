"""Plotting utilities for benchmark visualization."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from ..core.formatting import NS_PER_US
from .benchmark import BenchmarkResult


def setup_style():
    """Set up consistent plot style."""
    sns.set_theme(style="whitegrid", font_scale=1.1)
    plt.rcParams["figure.figsize"] = (10, 6)
    plt.rcParams["figure.dpi"] = 100


def _finish(fig, save_path: Path | str | None):
    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, bbox_inches="tight")
        print(f"Saved: {save_path}")
    else:
        plt.show()
    plt.close(fig)


def plot_distributions(
    results: list[BenchmarkResult],
    save_path: Path | str | None = None,
    title: str | None = None,
):
    """Box plot of per-run elapsed times for each workload.

    Args:
        results: List of benchmark results.
        save_path: Path to save figure. If None, shows interactively.
        title: Plot title.
    """
    setup_style()
    fig, ax = plt.subplots()

    names = [r.name for r in results]
    samples_us = [
        np.array([m.elapsed_ns for m in r.measurements], dtype=np.float64) / NS_PER_US
        for r in results
    ]
    sns.boxplot(data=samples_us, ax=ax, color="steelblue")
    ax.set_xticks(range(len(names)))
    ax.set_xticklabels(names, rotation=30, ha="right")
    ax.set_yscale("log")
    ax.set_ylabel("Elapsed (µs, log scale)")
    ax.set_title(title or "Elapsed Time Distribution")

    _finish(fig, save_path)


def plot_summary(
    results: list[BenchmarkResult],
    save_path: Path | str | None = None,
    title: str | None = None,
):
    """Bar chart of median elapsed time with min/max whiskers.

    Args:
        results: List of benchmark results.
        save_path: Path to save figure.
        title: Plot title.
    """
    setup_style()
    fig, ax = plt.subplots()

    names = [r.name for r in results]
    medians = np.array([r.summary.median.elapsed_ns for r in results]) / NS_PER_US
    lows = np.array([r.summary.min.elapsed_ns for r in results]) / NS_PER_US
    highs = np.array([r.summary.max.elapsed_ns for r in results]) / NS_PER_US

    bars = ax.bar(names, medians, color="steelblue")
    ax.errorbar(names, medians, yerr=[medians - lows, highs - medians],
                fmt="none", ecolor="black", capsize=5)
    ax.set_yscale("log")
    ax.set_ylabel("Median elapsed (µs, log scale)")
    ax.set_title(title or "Median Elapsed Time")

    for bar, r in zip(bars, results):
        ax.text(bar.get_x() + bar.get_width() / 2, bar.get_height(),
                str(r.summary.median), ha="center", va="bottom", fontsize=9)

    plt.xticks(rotation=30, ha="right")
    _finish(fig, save_path)
