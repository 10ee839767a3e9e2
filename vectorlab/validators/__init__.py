"""Correctness validation for the parallel reduction kernel."""

from vectorlab.validators.correctness_validator import (
    CorrectnessReport,
    CorrectnessValidator,
    WorkerComparison,
)

__all__ = [
    "CorrectnessValidator",
    "CorrectnessReport",
    "WorkerComparison",
]
