"""vectorlab - Fixed-size numeric vectors with a threaded parallel sum.

The package centres on ``NumericBuffer``, an owned float64 vector with
statistics and text import/export, and ``parallel_sum``, which splits the
buffer into contiguous chunks and sums them on one thread per chunk.
"""

__version__ = "0.1.0"
__description__ = "Fixed-size numeric vectors with a threaded parallel sum"

from vectorlab.buffer import NumericBuffer
from vectorlab.config import RunConfig, build_buffer, load_run_config
from vectorlab.reduction import Chunk, ReductionReport, parallel_sum, partition, run_reduction
from vectorlab.utils.errors import (
    BufferFormatError,
    ConfigError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidWorkerCountError,
    SizeMismatchError,
    UninitializedBufferError,
    VectorLabError,
)
from vectorlab.validators import CorrectnessReport, CorrectnessValidator

__all__ = [
    "NumericBuffer",
    "Chunk",
    "partition",
    "parallel_sum",
    "run_reduction",
    "ReductionReport",
    "RunConfig",
    "build_buffer",
    "load_run_config",
    "CorrectnessValidator",
    "CorrectnessReport",
    "VectorLabError",
    "UninitializedBufferError",
    "InvalidArgumentError",
    "InvalidWorkerCountError",
    "IndexOutOfRangeError",
    "SizeMismatchError",
    "BufferFormatError",
    "ConfigError",
]
