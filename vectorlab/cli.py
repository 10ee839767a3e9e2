"""Command-line interface for vectorlab.

Provides subcommands for:
- run: Build a buffer, print min/max and its parallel sum
- validate: Check parallel sums against the sequential sum
- bench: Time the parallel sum across worker counts
- export: Write a generated buffer to a text vector file
- stats: Print statistics of a text vector file
"""

import argparse
import dataclasses
import json
import logging
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

from vectorlab.benchmarks import run_reduction_benchmark, save_reduction_benchmark
from vectorlab.buffer import NumericBuffer
from vectorlab.config import RunConfig, build_buffer, load_run_config
from vectorlab.reduction import run_reduction
from vectorlab.utils.config_io import write_json_report
from vectorlab.utils.errors import VectorLabError
from vectorlab.validators import CorrectnessValidator

try:
    VECTORLAB_CLI_VERSION = package_version("vectorlab")
except PackageNotFoundError:
    VECTORLAB_CLI_VERSION = "0.1.0"

LOGGER = logging.getLogger(__name__)

# CLI flag -> RunConfig field
_OVERRIDES = {
    "length": "length",
    "fill": "fill",
    "value": "value",
    "low": "low",
    "high": "high",
    "seed": "seed",
    "tolerance": "tolerance",
    "iterations": "iterations",
}


def _add_buffer_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the options that describe how to build the input buffer."""
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML or JSON run configuration; flags below override it",
    )
    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="Read the buffer from a text vector file instead of generating it",
    )
    parser.add_argument("--length", type=int, default=None, help="Number of elements (default: 1000000)")
    parser.add_argument(
        "--fill",
        choices=["random", "constant"],
        default=None,
        help="Fill mode for a generated buffer (default: random)",
    )
    parser.add_argument("--value", type=float, default=None, help="Constant fill value (default: 1.0)")
    parser.add_argument("--low", type=float, default=None, help="Random fill lower bound (default: -10.0)")
    parser.add_argument("--high", type=float, default=None, help="Random fill upper bound (default: 10.0)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility (default: 42)")
    parser.add_argument("--verbose", action="store_true", help="Print detailed output")


def resolve_config(args) -> RunConfig:
    """Merge the optional config file with command-line overrides."""
    config = load_run_config(args.config) if getattr(args, "config", None) else RunConfig()
    overrides = {
        field: getattr(args, flag)
        for flag, field in _OVERRIDES.items()
        if getattr(args, flag, None) is not None
    }
    workers = getattr(args, "workers", None)
    if isinstance(workers, int):
        overrides["workers"] = workers
    config = dataclasses.replace(config, **overrides)
    config.validate()
    LOGGER.debug("Resolved run config: %s", config)
    return config


def load_buffer(args, config: RunConfig) -> NumericBuffer:
    """Build the input buffer from --input or from the run configuration."""
    if getattr(args, "input", None):
        return NumericBuffer.from_text(args.input)
    return build_buffer(config)


def _worker_counts(args, config: RunConfig) -> list[int]:
    if args.workers:
        return list(args.workers)
    return sorted({1, config.workers})


def _fail(message: str, code: int = 2) -> None:
    print(f"[ERROR] {message}", file=sys.stderr)
    sys.exit(code)


def setup_run_parser(subparsers):
    """Setup 'vectorlab run' subcommand."""
    parser = subparsers.add_parser(
        "run",
        help="Compute the parallel sum of a buffer",
        description="Build a buffer, print its min and max, and sum it in parallel",
    )
    _add_buffer_arguments(parser)
    parser.add_argument("--workers", type=int, default=None, help="Number of worker threads (default: 4)")
    parser.add_argument("--output", type=str, default=None, help="Output path for the reduction report JSON")
    parser.set_defaults(func=cmd_run)


def setup_validate_parser(subparsers):
    """Setup 'vectorlab validate' subcommand."""
    parser = subparsers.add_parser(
        "validate",
        help="Validate parallel sums against the sequential sum",
        description="Compare the parallel sum for each worker count with the sequential sum",
    )
    _add_buffer_arguments(parser)
    parser.add_argument(
        "--workers",
        type=int,
        nargs="+",
        default=None,
        help="Worker counts to validate (default: 1 and the configured count)",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=None,
        help="Relative tolerance (default: 1e-9)",
    )
    parser.add_argument("--output", type=str, help="Output path for validation report JSON")
    parser.set_defaults(func=cmd_validate)


def setup_bench_parser(subparsers):
    """Setup 'vectorlab bench' subcommand."""
    parser = subparsers.add_parser(
        "bench",
        help="Benchmark the parallel sum across worker counts",
        description="Time the parallel sum against the sequential sum",
    )
    _add_buffer_arguments(parser)
    parser.add_argument(
        "--workers",
        type=int,
        nargs="+",
        default=None,
        help="Worker counts to benchmark (default: 1 and the configured count)",
    )
    parser.add_argument("--iterations", type=int, default=None, help="Timed iterations per worker count (default: 10)")
    parser.add_argument("--output", type=str, default=None, help="Output path for benchmark JSON")
    parser.set_defaults(func=cmd_bench)


def setup_export_parser(subparsers):
    """Setup 'vectorlab export' subcommand."""
    parser = subparsers.add_parser(
        "export",
        help="Write a generated buffer to a text vector file",
    )
    _add_buffer_arguments(parser)
    parser.add_argument("--output", type=str, required=True, help="Destination text vector file")
    parser.set_defaults(func=cmd_export)


def setup_stats_parser(subparsers):
    """Setup 'vectorlab stats' subcommand."""
    parser = subparsers.add_parser(
        "stats",
        help="Print statistics of a text vector file",
    )
    parser.add_argument("--input", type=str, required=True, help="Text vector file")
    parser.add_argument("--json", action="store_true", help="Print statistics as JSON")
    parser.add_argument("--verbose", action="store_true", help="Print detailed output")
    parser.set_defaults(func=cmd_stats)


def cmd_run(args):
    """Execute 'vectorlab run' command."""
    try:
        config = resolve_config(args)
        buffer = load_buffer(args, config)
        if args.verbose:
            print("Running vectorlab with config:")
            print(f"  Length: {len(buffer)}")
            print(f"  Workers: {config.workers}")
            print(f"  Source: {args.input or config.fill}")
        report = run_reduction(buffer, config.workers)
    except (VectorLabError, OSError, ValueError) as e:
        _fail(str(e))

    print(f"Min: {buffer.min()}")
    print(f"Max: {buffer.max()}")
    print(f"Parallel Sum: {report.total}")

    if args.output:
        payload = report.to_dict()
        payload["min"] = buffer.min()
        payload["max"] = buffer.max()
        write_json_report(args.output, payload)
        print(f"Report saved to: {args.output}")


def cmd_validate(args):
    """Execute 'vectorlab validate' command."""
    try:
        config = resolve_config(args)
        buffer = load_buffer(args, config)
        validator = CorrectnessValidator(tolerance=config.tolerance)
        report = validator.validate(buffer, _worker_counts(args, config))
    except (VectorLabError, OSError, ValueError) as e:
        _fail(str(e))

    validator.print_report(report, verbose=args.verbose)
    if args.output:
        validator.save_report(report, args.output)
        print(f"Report saved to: {args.output}")

    sys.exit(0 if report.overall_passed else 1)


def cmd_bench(args):
    """Execute 'vectorlab bench' command."""
    try:
        config = resolve_config(args)
        buffer = load_buffer(args, config)
        result = run_reduction_benchmark(
            workers=_worker_counts(args, config),
            iterations=config.iterations,
            buffer=buffer,
        )
    except (VectorLabError, OSError, ValueError) as e:
        _fail(str(e))

    if args.output:
        save_reduction_benchmark(result, args.output)
        print(f"[OK] Reduction benchmark written to: {args.output}")
    else:
        print(json.dumps(result, indent=2))

    for row in result["results"]:
        print(
            f"[OK] workers={row['workers']}: mean={row['mean_ms']:.3f} ms, "
            f"p99={row['p99_ms']:.3f} ms, speedup={row['speedup_vs_sequential']:.2f}x"
        )


def cmd_export(args):
    """Execute 'vectorlab export' command."""
    try:
        config = resolve_config(args)
        buffer = load_buffer(args, config)
        buffer.export_text(args.output)
    except (VectorLabError, OSError, ValueError) as e:
        _fail(str(e))
    print(f"[OK] {len(buffer)} values written to: {args.output}")


def cmd_stats(args):
    """Execute 'vectorlab stats' command."""
    try:
        buffer = NumericBuffer.from_text(args.input)
    except (VectorLabError, OSError) as e:
        _fail(str(e))

    summary = buffer.summary()
    if args.json:
        print(json.dumps(summary, indent=2))
        return
    for key, value in summary.items():
        print(f"{key:>15}: {value}")


def setup_main_parser() -> argparse.ArgumentParser:
    """Setup main argument parser with all subcommands.

    Returns:
        Configured ArgumentParser for vectorlab CLI
    """
    parser = argparse.ArgumentParser(
        prog="vectorlab",
        description="vectorlab - Fixed-size vectors with a threaded parallel sum",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Sum one million random values with 4 threads
  vectorlab run --length 1000000 --workers 4 --seed 42

  # Validate several worker counts against the sequential sum
  vectorlab validate --length 100000 --workers 1 2 3 4 8 --tolerance 1e-9

  # Benchmark worker counts
  vectorlab bench --length 1000000 --workers 1 2 4 8 --iterations 20

  # Export a buffer and inspect it
  vectorlab export --length 10 --output vec.txt
  vectorlab stats --input vec.txt
        """,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"vectorlab {VECTORLAB_CLI_VERSION}",
        help="Show CLI version and exit",
    )

    subparsers = parser.add_subparsers(dest="command", help="Subcommand to execute")

    setup_run_parser(subparsers)
    setup_validate_parser(subparsers)
    setup_bench_parser(subparsers)
    setup_export_parser(subparsers)
    setup_stats_parser(subparsers)

    return parser


def main():
    """Main entry point for vectorlab CLI."""
    parser = setup_main_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    args.func(args)


if __name__ == "__main__":
    main()
