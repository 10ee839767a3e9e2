"""Reduction benchmark helpers for vectorlab."""

from vectorlab.benchmarks.reduction_bench import (
    compute_throughput_meps,
    run_reduction_benchmark,
    save_reduction_benchmark,
    summarize_timings_ms,
)

__all__ = [
    "compute_throughput_meps",
    "summarize_timings_ms",
    "run_reduction_benchmark",
    "save_reduction_benchmark",
]
