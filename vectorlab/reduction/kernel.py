"""Parallel sum of a NumericBuffer over a fixed number of worker threads.

Each call partitions the buffer into contiguous chunks, starts one thread per
chunk, and lets every thread add its local sum to a shared accumulator under
a lock. The caller blocks until every thread has been joined.
"""

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List

import numpy as np

from vectorlab.buffer import NumericBuffer
from vectorlab.reduction.partition import Chunk, partition, validate_worker_count
from vectorlab.utils.errors import UninitializedBufferError

LOGGER = logging.getLogger(__name__)


@dataclass
class ReductionReport:
    """Outcome of one instrumented parallel reduction."""

    total: float
    workers: int
    length: int
    chunks: List[Chunk] = field(default_factory=list)
    partial_sums: List[float] = field(default_factory=list)
    elapsed_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "total": self.total,
            "workers": self.workers,
            "length": self.length,
            "elapsed_ms": self.elapsed_ms,
            "chunks": [
                {
                    "index": c.index,
                    "start": c.start,
                    "end": c.end,
                    "size": c.size,
                    "partial_sum": s,
                }
                for c, s in zip(self.chunks, self.partial_sums)
            ],
        }


class _Accumulator:
    """Shared running total; the lock guards only the update."""

    def __init__(self, slots: int):
        self._lock = threading.Lock()
        self.total = 0.0
        self.partial_sums = [0.0] * slots

    def add(self, slot: int, value: float) -> None:
        with self._lock:
            self.total += value
            self.partial_sums[slot] = value


def run_reduction(buffer: NumericBuffer, workers: int) -> ReductionReport:
    """Sum ``buffer`` with ``workers`` threads and report per-chunk detail.

    Args:
        buffer: Initialized buffer to reduce
        workers: Number of worker threads (>= 1); may exceed the buffer
            length, in which case the surplus workers own empty chunks

    Returns:
        ReductionReport with the total, chunk layout and partial sums

    Raises:
        InvalidWorkerCountError: If workers < 1
        UninitializedBufferError: If the buffer was never filled
    """
    workers = validate_worker_count(workers)
    if not buffer.initialized:
        raise UninitializedBufferError("Vector is not initialized")

    data = buffer.readonly_view()
    chunks = partition(len(data), workers)
    accumulator = _Accumulator(len(chunks))
    errors: List[BaseException] = []

    def worker(chunk: Chunk) -> None:
        try:
            local_sum = float(np.sum(data[chunk.start : chunk.end]))
            accumulator.add(chunk.index, local_sum)
        except Exception as e:  # re-raised in the caller after join
            errors.append(e)

    LOGGER.debug("Reducing %d values with %d workers", len(data), workers)
    start_time = time.perf_counter()

    threads: List[threading.Thread] = []
    try:
        for chunk in chunks:
            thread = threading.Thread(target=worker, args=(chunk,), name=f"vectorlab-sum-{chunk.index}")
            thread.start()
            threads.append(thread)
    finally:
        for thread in threads:
            thread.join()

    elapsed_ms = (time.perf_counter() - start_time) * 1000
    if errors:
        raise errors[0]

    LOGGER.debug("Parallel sum %.17g in %.3f ms", accumulator.total, elapsed_ms)
    return ReductionReport(
        total=accumulator.total,
        workers=workers,
        length=len(data),
        chunks=chunks,
        partial_sums=accumulator.partial_sums,
        elapsed_ms=elapsed_ms,
    )


def parallel_sum(buffer: NumericBuffer, workers: int) -> float:
    """Return the sum of ``buffer`` computed by ``workers`` threads."""
    return run_reduction(buffer, workers).total
