"""Parallel reduction kernel for vectorlab."""

from vectorlab.reduction.kernel import ReductionReport, parallel_sum, run_reduction
from vectorlab.reduction.partition import Chunk, partition, validate_worker_count

__all__ = [
    "Chunk",
    "partition",
    "validate_worker_count",
    "ReductionReport",
    "run_reduction",
    "parallel_sum",
]
