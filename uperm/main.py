"""Command line demonstration of counting, enumeration and execution.

Usage::

    python -m uperm.main --config config.yaml
    python -m uperm.main --n 4 --all-levels --csv results/perms.csv --plot
"""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import replace
from typing import List, Optional, Sequence

from uperm.config import DemoConfig, apply_overrides, load_config
from uperm.counting import level_counts, num_unique_permutations
from uperm.enumeration import enumerate_unique_permutations
from uperm.execution import execute_all_permutations
from uperm.models import IndexPermutationList
from uperm.operations import format_permutation_list
from uperm.visualization import plot_level_counts, write_permutations_csv

logger = logging.getLogger("uperm.cli")


def format_level_counts(n: int) -> List[str]:
    """Return one ``"N unique L<k> <count>"`` line per level."""
    return [f"N unique L{s.level} {s.count}" for s in level_counts(n)]


def run_level(
    n: int,
    level: int,
    values: Sequence,
) -> tuple[list[IndexPermutationList], list]:
    """Enumerate every sequence of one level and execute it on ``values``."""
    sequences = enumerate_unique_permutations(n, level)
    results = execute_all_permutations(sequences, values)
    logger.info("Level %d: %d unique permutations", level, len(sequences))
    return sequences, results


def run_demo(config: DemoConfig) -> dict[int, tuple[list[IndexPermutationList], list]]:
    """Print the per-level counts and every permutation of the selected level(s).

    Returns:
        ``{level: (sequences, results)}`` for each executed level.
    """
    values = config.collection()
    for line in format_level_counts(config.n):
        print(line)
    print()
    print(f"Original values: {values}")

    levels = [config.level] if config.level is not None else list(range(config.n))
    executed: dict[int, tuple[list[IndexPermutationList], list]] = {}
    for level in levels:
        if num_unique_permutations(config.n, level) == 0:
            logger.warning("Level %d exceeds n-1=%d, nothing to enumerate", level, config.n - 1)
        sequences, results = run_level(config.n, level, values)
        print(f"Permutations at level {level} : {len(sequences)}")
        for sequence, result in zip(sequences, results):
            print(f"{format_permutation_list(sequence)} = {result}")
        executed[level] = (sequences, results)

    if config.csv_path:
        all_sequences = [s for seqs, _ in executed.values() for s in seqs]
        all_results = [r for _, res in executed.values() for r in res]
        write_permutations_csv(config.csv_path, all_sequences, all_results)
        logger.info("Saved %d rows to %s", len(all_sequences), config.csv_path)

    if config.plot:
        out_path = plot_level_counts(
            config.n, os.path.join(config.charts_dir, f"level_counts_n{config.n}.png")
        )
        logger.info("Saved level count chart to %s", out_path)

    return executed


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Unique transposition sequence demo")
    parser.add_argument("--config", help="Path to a YAML/JSON config file")
    parser.add_argument("--n", type=int, help="Number of elements")
    parser.add_argument("--level", type=int, help="Number of swaps per sequence")
    parser.add_argument(
        "--all-levels", action="store_true", help="Enumerate every level 0..n-1"
    )
    parser.add_argument("--csv", dest="csv_path", help="Write executed sequences to CSV")
    parser.add_argument(
        "--plot", action="store_true", default=None, help="Save a per-level count chart"
    )
    parser.add_argument("--charts-dir", help="Directory for charts")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    config = load_config(args.config) if args.config else DemoConfig()
    config = apply_overrides(
        config,
        n=args.n,
        level=args.level,
        csv_path=args.csv_path,
        plot=args.plot,
        charts_dir=args.charts_dir,
        log_level=args.log_level,
    )
    if args.all_levels:
        config = replace(config, level=None)

    logging.basicConfig(
        level=getattr(logging, str(config.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Running demo n=%d level=%s", config.n, config.level)
    run_demo(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
