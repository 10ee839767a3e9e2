"""Contiguous chunk partitioning for the reduction kernel."""

from dataclasses import dataclass

from vectorlab.utils.errors import InvalidArgumentError, InvalidWorkerCountError


@dataclass(frozen=True)
class Chunk:
    """Half-open index range [start, end) owned by one worker."""

    index: int
    start: int
    end: int

    @property
    def size(self) -> int:
        return self.end - self.start


def validate_worker_count(workers) -> int:
    """Return ``workers`` as an int, rejecting anything below one."""
    if isinstance(workers, bool) or not isinstance(workers, int):
        raise InvalidWorkerCountError(f"worker count must be an integer, got {type(workers).__name__}")
    if workers < 1:
        raise InvalidWorkerCountError(f"worker count must be >= 1, got {workers}")
    return workers


def partition(n: int, workers: int) -> list[Chunk]:
    """Split ``n`` elements into ``workers`` contiguous chunks.

    Each chunk gets ``n // workers`` elements and the first ``n % workers``
    chunks get one extra. When ``workers > n`` the trailing chunks are empty.

    Args:
        n: Number of elements (>= 0)
        workers: Number of chunks (>= 1)

    Returns:
        Chunks in index order covering [0, n) exactly once

    Raises:
        InvalidWorkerCountError: If workers < 1
    """
    workers = validate_worker_count(workers)
    if n < 0:
        raise InvalidArgumentError(f"n must be >= 0, got {n}")

    chunk_size, remainder = divmod(n, workers)
    chunks = []
    start = 0
    for i in range(workers):
        end = start + chunk_size + (1 if i < remainder else 0)
        chunks.append(Chunk(index=i, start=start, end=end))
        start = end
    return chunks
