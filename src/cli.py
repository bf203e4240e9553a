# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Provides command-line interface to run the pipeline.
#
# COMMANDS:
# ---------
# 1. Run with settings from .env / environment:
#    python -m src.cli run
#
# 2. Override any setting for one run:
#    python -m src.cli run --input sales.csv --output sample.csv \
#        --sample-size 500 --bins 5 --seed 7
#
# 3. Show the effective configuration:
#    python -m src.cli config
#
# EXIT CODES:
# -----------
#   0 on success, 1 on any PipelineError (message on stderr).
#
# ==============================================

import argparse
import sys
from dataclasses import asdict, replace
from typing import List, Optional

from src.config import get_config, AppConfig
from src.exceptions import PipelineError
from src.pipeline import RealEstatePipeline


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m src.cli",
        description="Sample real-estate sales and summarize them by assessed-value bin."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Run the sampling and binning pipeline")
    run_parser.add_argument("--input", dest="input_path", help="Input CSV path")
    run_parser.add_argument("--output", dest="output_path", help="Output CSV path")
    run_parser.add_argument("--sample-size", type=int, help="Number of records to sample")
    run_parser.add_argument("--bins", dest="number_of_bins", type=int, help="Number of value bins")
    run_parser.add_argument("--seed", dest="random_seed", type=int, help="Random seed for sampling")

    subparsers.add_parser("config", help="Print the effective configuration")
    return parser


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Return a copy of config with every option given on the command line applied."""
    paths = config.paths
    if args.input_path is not None:
        paths = replace(paths, input_path=args.input_path)
    if args.output_path is not None:
        paths = replace(paths, output_path=args.output_path)

    sampling = config.sampling
    if args.sample_size is not None:
        sampling = replace(sampling, sample_size=args.sample_size)
    if args.random_seed is not None:
        sampling = replace(sampling, random_seed=args.random_seed)

    binning = config.binning
    if args.number_of_bins is not None:
        binning = replace(binning, number_of_bins=args.number_of_bins)

    return AppConfig(paths=paths, sampling=sampling, binning=binning)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = get_config()

        if args.command == "config":
            for section, values in asdict(config).items():
                print(f"{section}:")
                for key, value in values.items():
                    print(f"   → {key}: {value}")
            return 0

        result = RealEstatePipeline(apply_overrides(config, args)).run()
    except PipelineError as e:
        print(f"✗ {e.message}", file=sys.stderr)
        return 1

    print("\n📊 Summary:")
    print(f"   → Records read: {result['records_read']}")
    print(f"   → Records sampled: {result['records_sampled']}")
    print(f"   → Bins: {len(result['bins'])}")
    print(f"   → Time elapsed: {result['elapsed_seconds']}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
