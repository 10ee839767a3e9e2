"""Correctness validator for the parallel reduction kernel.

Compares the parallel sum for one or more worker counts against the
sequential sum of the same buffer. Floating-point addition is not
associative, so results are compared within a relative tolerance scaled by
the buffer's Manhattan norm, which bounds the reassociation error.
"""

import math
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from vectorlab.buffer import NumericBuffer
from vectorlab.reduction import run_reduction
from vectorlab.utils.config_io import write_json_report
from vectorlab.utils.errors import InvalidArgumentError


@dataclass
class WorkerComparison:
    """Comparison result for a single worker count."""

    workers: int
    sequential_sum: float
    parallel_sum: float
    delta: float
    relative_error: float
    passed: bool
    elapsed_ms: float


@dataclass
class CorrectnessReport:
    """Report of correctness validation for one buffer."""

    length: int
    tolerance: float
    num_compared: int = 0
    num_passed: int = 0
    num_failed: int = 0
    comparisons: List[WorkerComparison] = field(default_factory=list)
    overall_passed: bool = False
    summary: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary for JSON serialization."""
        return {
            "length": self.length,
            "tolerance": self.tolerance,
            "num_compared": self.num_compared,
            "num_passed": self.num_passed,
            "num_failed": self.num_failed,
            "overall_passed": self.overall_passed,
            "summary": self.summary,
            "comparisons": [asdict(c) for c in self.comparisons],
        }


class CorrectnessValidator:
    """Validates parallel sums against the sequential sum."""

    def __init__(self, tolerance: float = 1e-9):
        """Initialize validator with tolerance.

        Args:
            tolerance: Relative tolerance (e.g., 1e-9)
        """
        if not (tolerance > 0 and math.isfinite(tolerance)):
            raise InvalidArgumentError(f"tolerance must be a positive finite number, got {tolerance}")
        self.tolerance = tolerance

    def compare_sums(self, expected: float, observed: float, scale: float) -> tuple[float, float, bool]:
        """Return ``(delta, relative_error, passed)`` for one pair of sums.

        Args:
            expected: Sequential sum
            observed: Parallel sum
            scale: Magnitude the error is measured against (sum of |x|)
        """
        delta = abs(expected - observed)
        scale = max(abs(expected), abs(scale))
        relative_error = delta / scale if scale > 0 else 0.0
        return delta, relative_error, delta <= self.tolerance * scale

    def validate(self, buffer: NumericBuffer, worker_counts: Iterable[int]) -> CorrectnessReport:
        """Run the parallel sum for each worker count and compare.

        Args:
            buffer: Initialized buffer
            worker_counts: Worker counts to check

        Returns:
            CorrectnessReport with one comparison per worker count

        Raises:
            UninitializedBufferError: If the buffer was never filled
            InvalidWorkerCountError: If any worker count is < 1
            ValueError: If no worker counts are given
        """
        worker_counts = list(worker_counts)
        if not worker_counts:
            raise ValueError("No worker counts to validate")

        expected = buffer.sum()
        scale = buffer.manhattan_norm()
        report = CorrectnessReport(length=len(buffer), tolerance=self.tolerance)

        for workers in worker_counts:
            result = run_reduction(buffer, workers)
            delta, relative_error, passed = self.compare_sums(expected, result.total, scale)
            report.comparisons.append(
                WorkerComparison(
                    workers=workers,
                    sequential_sum=expected,
                    parallel_sum=result.total,
                    delta=delta,
                    relative_error=relative_error,
                    passed=passed,
                    elapsed_ms=result.elapsed_ms,
                )
            )
            if passed:
                report.num_passed += 1
            else:
                report.num_failed += 1

        report.num_compared = len(report.comparisons)
        report.overall_passed = report.num_failed == 0

        if report.overall_passed:
            report.summary = (
                f"PASSED: all {report.num_compared} worker counts matched the sequential sum "
                f"within {self.tolerance:.1e} relative tolerance"
            )
        else:
            report.summary = (
                f"FAILED: {report.num_failed}/{report.num_compared} worker counts exceeded "
                f"{self.tolerance:.1e} relative tolerance. {report.num_passed} passed."
            )
        return report

    def print_report(self, report: CorrectnessReport, verbose: bool = False) -> None:
        """Print human-readable validation report.

        Args:
            report: CorrectnessReport to print
            verbose: If True, print every comparison; otherwise only failures
        """
        print("\n" + "=" * 80)
        print("PARALLEL SUM CORRECTNESS REPORT")
        print("=" * 80)
        print(f"Buffer length:      {report.length}")
        print(f"Tolerance:          {report.tolerance:.1e}")
        print(f"Worker counts:      {report.num_compared}")
        print(f"  Passed:           {report.num_passed}")
        print(f"  Failed:           {report.num_failed}")

        print("\n" + "-" * 80)
        print(f"RESULT: {report.summary}")
        print("-" * 80)

        if verbose or report.num_failed > 0:
            print(f"\n{'Workers':>7} {'Sequential':>22} {'Parallel':>22} {'Rel err':>10} {'Status':>7}")
            print("-" * 80)
            for cmp in report.comparisons:
                if verbose or not cmp.passed:
                    status = "PASS" if cmp.passed else "FAIL"
                    print(
                        f"{cmp.workers:7d} {cmp.sequential_sum:22.12f} {cmp.parallel_sum:22.12f} "
                        f"{cmp.relative_error:10.2e} {status:>7}"
                    )

        print("=" * 80 + "\n")

    def save_report(self, report: CorrectnessReport, output_path: str) -> None:
        """Save validation report to JSON file."""
        write_json_report(output_path, report.to_dict())

    def validate_file(
        self, vector_path: str, worker_counts: Iterable[int], output_path: Optional[str] = None
    ) -> CorrectnessReport:
        """Validate the parallel sum of a text vector file.

        Raises:
            FileNotFoundError: If the vector file doesn't exist
            BufferFormatError: If the file is malformed
        """
        buffer = NumericBuffer.from_text(vector_path)
        report = self.validate(buffer, worker_counts)
        if output_path:
            self.save_report(report, output_path)
        return report
