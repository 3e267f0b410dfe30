#!/usr/bin/env python3
"""
Analyze Rail Ink boards.
Usage: python analyze.py <directory_of_board_json_files>
"""

import sys
from collections import defaultdict
from pathlib import Path

import numpy as np

from ink.core import log
from ink.core.network_score import CATEGORIES, to_network_score
from ink.core.score import get_score
from ink.formats.board_data import BoardData


def percentile_stats(values):
    """Return min/25th/50th/75th/max statistics."""
    if not values:
        raise ValueError("values cannot be empty in percentile_stats call")
    arr = np.array(values)
    return {
        "min": float(np.min(arr)),
        "25th": float(np.percentile(arr, 25)),
        "50th": float(np.percentile(arr, 50)),
        "75th": float(np.percentile(arr, 75)),
        "max": float(np.max(arr)),
        "mean": float(np.mean(arr)),
        "count": len(values),
    }


def collect_scores(directory):
    """
    Score every board JSON file in a directory.

    Returns:
        Tuple of (per-category point lists, totals, exit group sizes, lake sizes)
    """
    dir_path = Path(directory)
    json_files = sorted(dir_path.glob("*.json"))

    if not json_files:
        print(f"No JSON files found in {directory}")
        sys.exit(1)

    print(f"Found {len(json_files)} board files\n")

    by_category = defaultdict(list)
    totals = []
    exit_groups = []
    lake_sizes = []

    for filepath in json_files:
        board = BoardData()
        try:
            board.load(str(filepath))
            cells = board.to_cells()
        except (ValueError, IndexError) as e:
            print(f"Skipping {filepath.name}: {e}")
            continue

        score = get_score(cells)
        network = to_network_score(score)

        for _, name in CATEGORIES:
            by_category[name].append(network.category_points(name))
        totals.append(network.total())
        exit_groups.extend(score.exits)
        lake_sizes.extend(score.lakes)

    return by_category, totals, exit_groups, lake_sizes


def print_stats(title, values, fmt=".1f"):
    if not values:
        print(f"\n{title}: no data")
        return
    stats = percentile_stats(values)
    print(f"\n{title} (n={stats['count']}):")
    print(f"  Min:  {stats['min']:.0f}")
    print(f"  25th: {stats['25th']:{fmt}}")
    print(f"  50th: {stats['50th']:{fmt}}")
    print(f"  75th: {stats['75th']:{fmt}}")
    print(f"  Max:  {stats['max']:.0f}")
    print(f"  Mean: {stats['mean']:{fmt}}")


def analyze_boards(directory):
    """Print score statistics for all boards in the given directory."""
    by_category, totals, exit_groups, lake_sizes = collect_scores(directory)

    if not totals:
        print("No boards could be scored")
        sys.exit(1)

    print("=" * 60)
    print("TOTAL SCORE")
    print("=" * 60)
    print_stats("Total", totals)

    print("\n" + "=" * 60)
    print("POINTS BY CATEGORY")
    print("=" * 60)
    for label, name in CATEGORIES:
        print_stats(label, by_category[name])

    print("\n" + "=" * 60)
    print("NETWORK SHAPES")
    print("=" * 60)
    print_stats("Exit group size", exit_groups)
    print_stats("Lake size", lake_sizes)

    # Which category moves the total most
    if len(totals) > 1:
        print("\nCorrelation with total:")
        total_arr = np.array(totals, dtype=float)
        for label, name in CATEGORIES:
            arr = np.array(by_category[name], dtype=float)
            if np.std(arr) == 0 or np.std(total_arr) == 0:
                print(f"  {label}: n/a (constant)")
                continue
            corr = np.corrcoef(arr, total_arr)[0, 1]
            print(f"  {label}: {corr:+.2f}")


def main():
    if len(sys.argv) < 2:
        print("Usage: python analyze.py <directory_of_board_json_files>")
        sys.exit(1)

    log.configure()
    analyze_boards(sys.argv[1])


if __name__ == "__main__":
    main()
