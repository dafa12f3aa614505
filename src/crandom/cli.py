#!/usr/bin/env python3
"""crandom command line - draw samples and histograms from the terminal."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from crandom.config import ConfigManager
from crandom.distributions import DISTRIBUTIONS, draw_many, get_distribution
from crandom.errors import CRandomError
from crandom.histogram import sample_histogram
from crandom.sources import SourceFactory, UniformSource, source_from_config
from crandom.utils import sample_moments

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, log_file: str | None = None) -> None:
    """Configure logging.

    Logs go to stderr so that samples printed on stdout stay clean.

    Args:
        verbose: Enable debug logging
        log_file: Optional file to log to
    """
    level = logging.DEBUG if verbose else logging.INFO
    format_str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=handlers,
        force=True,
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    listing = ", ".join(
        f"{name}({', '.join(spec.param_names)})" for name, spec in DISTRIBUTIONS.items()
    )
    parser = argparse.ArgumentParser(
        prog="crandom",
        description="Draw random variates from a seeded uniform source",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
DISTRIBUTIONS:
  {listing}

EXAMPLES:
  crandom sample normal 0 1 -n 5 --seed 42
  crandom sample equilikely 1 6 -n 1000 --summary
  crandom histogram --draws 1000000
        """,
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        default=None,
        help="Path to config file (default: bundled default_config.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose/debug logging",
    )
    parser.add_argument(
        "-l", "--log-file",
        type=str,
        default=None,
        help="Log to file in addition to stderr",
    )

    source_opts = argparse.ArgumentParser(add_help=False)
    source_opts.add_argument(
        "--engine",
        choices=SourceFactory.SUPPORTED_ENGINES,
        default=None,
        help="Uniform engine (overrides config)",
    )
    seeding = source_opts.add_mutually_exclusive_group()
    seeding.add_argument(
        "--seed",
        type=int,
        default=None,
        help="32-bit integer seed (overrides config)",
    )
    seeding.add_argument(
        "--seed-array",
        type=int,
        nargs="+",
        default=None,
        metavar="KEY",
        help="Array of integer seed keys (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    sample = subparsers.add_parser(
        "sample",
        parents=[source_opts],
        help="Print samples of a distribution, one per line",
    )
    sample.add_argument("distribution", help="Distribution name")
    sample.add_argument("params", nargs="*", help="Distribution parameters")
    sample.add_argument(
        "-n", "--count",
        type=int,
        default=1,
        help="Number of samples (default: 1)",
    )
    sample.add_argument(
        "--summary",
        action="store_true",
        help="Log empirical mean/variance next to the theoretical values",
    )

    histogram = subparsers.add_parser(
        "histogram",
        parents=[source_opts],
        help="Print a density histogram of a distribution",
    )
    histogram.add_argument("distribution", nargs="?", default=None, help="Distribution name (config default: normal)")
    histogram.add_argument("params", nargs="*", help="Distribution parameters")
    histogram.add_argument("--lower", type=float, default=None, help="Lower bound")
    histogram.add_argument("--upper", type=float, default=None, help="Upper bound")
    histogram.add_argument("--bins", type=int, default=None, help="Number of bins")
    histogram.add_argument("--draws", type=int, default=None, help="Number of samples")

    return parser.parse_args(argv)


def build_source(args: argparse.Namespace, config: ConfigManager) -> UniformSource:
    """Create the uniform source from config, with command line overrides."""
    if args.engine is None and args.seed is None and args.seed_array is None:
        return source_from_config(config)

    section = config.source
    seed = section.get("seed")
    seed_array = section.get("seed_array")
    if args.seed is not None:
        seed, seed_array = args.seed, None
    elif args.seed_array is not None:
        seed, seed_array = None, args.seed_array

    return SourceFactory.create(
        args.engine or section.get("engine", SourceFactory.DEFAULT_ENGINE),
        seed=seed,
        seed_array=seed_array,
        buffer_size=section.get("buffer_size", 1024),
    )


def run_sample(args: argparse.Namespace, config: ConfigManager) -> int:
    """Print ``args.count`` samples of the requested distribution."""
    if args.count <= 0:
        raise ValueError(f"--count must be positive, got {args.count}")

    spec = get_distribution(args.distribution)

    with build_source(args, config) as source:
        samples = draw_many(source, spec.name, args.count, *args.params)

    for value in samples:
        print(value)

    if args.summary:
        params = spec.convert(*args.params)
        moments = sample_moments(samples)
        logger.info("%s%s over %d samples", spec.name, tuple(params), moments.count)
        logger.info("  mean:     %.6f (theory %.6f)", moments.mean, spec.mean(*params))
        logger.info("  variance: %.6f (theory %.6f)", moments.variance, spec.variance(*params))
        logger.info("  range:    [%s, %s]", moments.minimum, moments.maximum)

    return 0


def run_histogram(args: argparse.Namespace, config: ConfigManager) -> int:
    """Print density rows of a histogram of the requested distribution."""
    section = config.histogram
    name = args.distribution or section.get("distribution", "normal")
    if args.params:
        params = args.params
    elif args.distribution is None:
        params = section.get("params", [])
    else:
        params = []

    with build_source(args, config) as source:
        histogram = sample_histogram(
            source,
            name,
            params,
            draws=args.draws if args.draws is not None else section["draws"],
            lower=args.lower if args.lower is not None else section["lower"],
            upper=args.upper if args.upper is not None else section["upper"],
            bins=args.bins if args.bins is not None else section["bins"],
        )

    for row in histogram.format_rows():
        print(row)

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point.

    Returns:
        Exit code
    """
    args = parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        config = ConfigManager(args.config)
        config.apply_contracts()

        if args.command == "sample":
            return run_sample(args, config)
        return run_histogram(args, config)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 0

    except FileNotFoundError as e:
        logger.error("File not found: %s", e)
        return 1

    except (CRandomError, ValueError) as e:
        logger.error("Error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
