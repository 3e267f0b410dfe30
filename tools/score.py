#!/usr/bin/env python3
"""
Rail Ink - Board Scorer

Scores board JSON files and prints the per-category breakdown.

With several boards, also prints a side-by-side comparison table ranked
by total, the way finished multiplayer games are compared.
"""

import argparse
import sys
from pathlib import Path

from ink.core import log
from ink.core.network_score import format_comparison, to_network_score
from ink.core.score import Score, get_score, map_exits, sum_lakes, total
from ink.formats import compact_json as json
from ink.formats.board_data import BoardData
from ink.rendering.pil_renderer import (
    SIGNAL_CATEGORIES,
    render_board_to_image,
    signal_cells,
)


def format_breakdown(score: Score) -> str:
    """Human-readable score breakdown."""
    exit_points = map_exits(score)
    lines = [
        f"  Exits:     {sum(exit_points):4d}  groups {score.exits or '-'}",
        f"  Road:      {len(score.road):4d}",
        f"  Rail:      {len(score.rail):4d}",
        f"  Center:    {score.center:4d}",
        f"  Deadends:  {-len(score.deadends):4d}",
        f"  Lakes:     {sum_lakes(score):4d}  sizes {score.lakes or '-'}",
        f"  Forest:    {len(score.forests):4d}",
        f"  Total:     {total(score):4d}",
    ]
    return "\n".join(lines)


def result_key(name: str, path: str, taken) -> str:
    """Column name for a board, falling back to its path when the name is taken."""
    if name not in taken:
        return name
    key = f"{name} ({path})"
    n = 2
    while key in taken:
        key = f"{name} ({path}) #{n}"
        n += 1
    return key


def main():
    parser = argparse.ArgumentParser(
        description="Score Rail Ink boards",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Score a board:
    python tools/score.py boards/sample.json

  Print the network (count-only) score as JSON:
    python tools/score.py boards/sample.json --json

  Render the board with the longest road highlighted:
    python tools/score.py boards/sample.json --render sample.png --signal road

  Compare several boards:
    python tools/score.py boards/*.json
        """,
    )
    parser.add_argument("boards", nargs="+", help="Board JSON file(s)")
    parser.add_argument(
        "--json", action="store_true", help="Print network scores as JSON"
    )
    parser.add_argument("--render", help="Output PNG file (single board only)")
    parser.add_argument(
        "--signal",
        choices=SIGNAL_CATEGORIES,
        help="Highlight the cells behind a category (requires --render)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Print debug log events"
    )
    args = parser.parse_args()

    if args.signal and not args.render:
        parser.error("--signal requires --render")

    log.configure(verbose=args.verbose)

    if args.render and len(args.boards) > 1:
        print("Error: --render takes a single board")
        sys.exit(1)

    results = {}
    for path in args.boards:
        board = BoardData()
        try:
            board.load(path)
            cells = board.to_cells()
        except (OSError, ValueError, IndexError) as e:
            print(f"Error: {path}: {e}")
            sys.exit(1)

        score = get_score(cells)
        name = result_key(board.name or Path(path).stem, path, results)
        results[name] = to_network_score(score)

        if not args.json:
            print(f"{name}:")
            print(format_breakdown(score))

        if args.render:
            signal = signal_cells(score, args.signal) if args.signal else None
            img = render_board_to_image(cells, signal=signal)
            img.save(args.render)
            if not args.json:
                print(f"Saved: {args.render} ({img.width}x{img.height})")

    if args.json:
        print(json.dumps({name: s.to_dict() for name, s in results.items()}))
    elif len(results) > 1:
        print()
        print(format_comparison(results))


if __name__ == "__main__":
    main()
