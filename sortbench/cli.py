"""Command line entry point that runs every benchmark and writes CSV files."""

from __future__ import annotations

import argparse
import csv
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from sortbench.generator import ArrayGenerator
from sortbench.tester import DEFAULT_THRESHOLDS, SortTester

__all__ = ["save_to_csv", "save_threshold_to_csv", "main"]


def save_to_csv(filename: str | Path, data: Mapping[int, int]) -> None:
    """Write ``size,time`` rows to ``filename``."""
    with open(filename, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(["size", "time"])
        writer.writerows(data.items())


def save_threshold_to_csv(
    filename: str | Path, data: Iterable[tuple[int, int, int]]
) -> None:
    """Write ``threshold,size,time`` rows to ``filename``."""
    with open(filename, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(["threshold", "size", "time"])
        writer.writerows(data)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortbench",
        description="Time merge sort against merge sort with insertion sort for short runs.",
    )
    parser.add_argument("-o", "--output-dir", type=Path, default=Path("."))
    parser.add_argument("--sizes", type=int, nargs="+", help="sizes for the plain runs")
    parser.add_argument(
        "--long-sizes", type=int, nargs="+", help="sizes for the threshold runs"
    )
    parser.add_argument("--repeats", type=int, default=10)
    parser.add_argument(
        "--thresholds", type=int, nargs="+", default=list(DEFAULT_THRESHOLDS)
    )
    parser.add_argument("--seed", type=int, default=None)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run all benchmarks and store the results as CSV files."""
    args = _parser().parse_args(argv)
    out_dir: Path = args.output_dir
    out_dir.mkdir(parents=True, exist_ok=True)

    tester = SortTester(
        generator=ArrayGenerator(args.seed),
        sizes=args.sizes,
        long_sizes=args.long_sizes,
        repeats=args.repeats,
        thresholds=args.thresholds,
    )

    merge_random = tester.standard_merge_random()
    merge_reversed = tester.standard_merge_reversed()
    merge_almost = tester.standard_merge_almost_sorted()
    save_to_csv(out_dir / "merge_random.csv", merge_random)
    save_to_csv(out_dir / "merge_reversed.csv", merge_reversed)
    save_to_csv(out_dir / "merge_almost_sorted.csv", merge_almost)

    hybrid_random = tester.insert_merge_random()
    hybrid_reversed = tester.insert_merge_reversed()
    hybrid_almost = tester.insert_merge_almost_sorted()
    save_to_csv(out_dir / "mergeinsert_random.csv", hybrid_random)
    save_to_csv(out_dir / "mergeinsert_reversed.csv", hybrid_reversed)
    save_to_csv(out_dir / "mergeinsert_almost_sorted.csv", hybrid_almost)

    tester.logging = 0
    threshold_random = tester.threshold_random()
    threshold_reversed = tester.threshold_reversed()
    threshold_almost = tester.threshold_almost_sorted()
    save_threshold_to_csv(out_dir / "threshold_random.csv", threshold_random)
    save_threshold_to_csv(out_dir / "threshold_reversed.csv", threshold_reversed)
    save_threshold_to_csv(out_dir / "threshold_almost_sorted.csv", threshold_almost)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())