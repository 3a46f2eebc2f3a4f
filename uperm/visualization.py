"""Reporting helpers: per-level count chart and CSV export of executed sequences."""

import csv
import os
from pathlib import Path
from typing import Iterable, List, Sequence

import matplotlib

matplotlib.use("Agg")  # Must be set before importing pyplot
import matplotlib.pyplot as plt  # noqa: E402

from uperm.counting import level_counts  # noqa: E402
from uperm.models import IndexPermutationList  # noqa: E402
from uperm.operations import format_permutation_list  # noqa: E402


def _ensure_dir(path: str):
    if path:
        os.makedirs(path, exist_ok=True)


def next_unique_path(path: str | Path) -> str:
    """If the file exists, append _1, _2 ... until a free name is found."""
    p = Path(path)
    if not p.exists():
        return str(p)
    stem = p.stem
    suffix = p.suffix
    parent = p.parent
    counter = 1
    while True:
        candidate = parent / f"{stem}_{counter}{suffix}"
        if not candidate.exists():
            return str(candidate)
        counter += 1


def plot_level_counts(n: int, save_path: str) -> str:
    """Save a bar chart with the number of unique permutations per level.

    Existing files are never overwritten; the returned path is the one
    actually written.
    """
    summaries = level_counts(n)
    levels = [s.level for s in summaries]
    counts = [s.count for s in summaries]

    fig, ax = plt.subplots(figsize=(max(6, 0.6 * len(levels) + 4), 5), constrained_layout=True)
    bars = ax.bar(levels, counts, color="#00BFFF", edgecolor="black", linewidth=0.6)
    for bar, count in zip(bars, counts):
        ax.annotate(
            str(count),
            (bar.get_x() + bar.get_width() / 2, bar.get_height()),
            ha="center",
            va="bottom",
            fontsize=9,
        )
    ax.set_xlabel("Level (number of swaps)", fontsize=12)
    ax.set_ylabel("Unique permutations", fontsize=12)
    ax.set_title(f"Unique permutations of N = {n} (total {sum(counts)})", fontsize=14)
    ax.set_xticks(levels)
    ax.grid(True, alpha=0.25, axis="y", linestyle="--", linewidth=0.7)

    _ensure_dir(os.path.dirname(save_path))
    filepath = next_unique_path(save_path)
    fig.savefig(filepath, dpi=150)
    plt.close(fig)
    return filepath


def write_permutations_csv(
    path: str,
    sequences: Sequence[IndexPermutationList],
    results: Iterable[Sequence],
) -> List[list]:
    """Write one row per executed sequence: index, level, sequence, result.

    Returns the written rows (without the header).
    """
    rows: List[list] = []
    for idx, (sequence, result) in enumerate(zip(sequences, results)):
        rows.append(
            [idx, len(sequence), format_permutation_list(sequence), " ".join(map(str, result))]
        )
    _ensure_dir(os.path.dirname(path))
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["index", "level", "sequence", "result"])
        writer.writerows(rows)
    return rows
