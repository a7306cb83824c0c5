"""CLI entrypoint: load puzzle(s), run the backtracker, and report results."""

import argparse
import csv
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from tqdm import tqdm

from solver import solve_puzzle
from src.tents.loader import load_puzzles
from src.tents.parser import MalformedSpec, parse_puzzle
from src.utils.trace import Tracer

PUZZLE_SUFFIXES = [".txt", ".tents", ".json", ".jsonl", ".parquet"]


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Solve Tents-and-Trees puzzles by backtracking")
    parser.add_argument("input", type=Path, help="Puzzle file, dataset file, or directory of puzzles")
    parser.add_argument(
        "--debug",
        action="store_true",
        default=os.environ.get("TENTS_DEBUG", "0").strip() == "1",
        help="Print every configuration the backtracker examines (or set TENTS_DEBUG=1).",
    )
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write results CSV")
    parser.add_argument("--trace", type=Path, default=None, help="Optional path to write a search trace CSV")
    return parser.parse_args(argv)


def collect_puzzles(input_path: Path) -> List[Dict[str, Any]]:
    if input_path.is_file():
        return load_puzzles(str(input_path))
    if input_path.is_dir():
        puzzles = []
        for file_path in sorted(input_path.iterdir()):
            if file_path.suffix in PUZZLE_SUFFIXES:
                puzzles.extend(load_puzzles(str(file_path)))
        return puzzles
    raise ValueError(f"Input path {input_path} is neither file nor directory")


def solve_one(puzzle: Dict[str, Any], debug: bool, tracer: Optional[Tracer], verbose: bool) -> Dict[str, Any]:
    puzzle_id = puzzle.get("id", "unknown")
    try:
        initial = parse_puzzle(puzzle.get("puzzle", ""))
    except MalformedSpec as e:
        print(f"ERROR: Failed to parse puzzle {puzzle_id}: {e}")
        return {
            "id": puzzle_id,
            "status": "malformed",
            "num_configs": -1,
            "elapsed_seconds": 0.0,
            "solution": "",
        }

    if verbose:
        print(f"Initial config:\n{initial}")

    report = solve_puzzle(initial, debug=debug, tracer=tracer)

    if verbose:
        print(f"Elapsed time: {report.elapsed_seconds} seconds.")
        print(f"Number of configs generated: {report.num_configs}")
        if report.solution is not None:
            print(f"Solution:\n{report.solution}")
        else:
            print("No solution!")

    return {
        "id": puzzle_id,
        "status": "solved" if report.result.found else "no_solution",
        "num_configs": report.num_configs,
        "elapsed_seconds": report.elapsed_seconds,
        "solution": report.solution.render() if report.solution is not None else "",
    }


def write_results_csv(results, output_path: Path):
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["id", "status", "num_configs", "elapsed_seconds", "solution"])

        for r in results:
            writer.writerow([
                r["id"],
                r["status"],
                r["num_configs"],
                f"{r['elapsed_seconds']:.6f}",
                r["solution"],
            ])


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    puzzles = collect_puzzles(args.input)
    results = []
    tracer = None

    single = len(puzzles) == 1
    iterator = puzzles if single else tqdm(puzzles, desc="Solving", unit="puzzle")

    for puzzle in iterator:
        # Only the last puzzle's trace is kept.
        if args.trace:
            tracer = Tracer(enabled=True, echo=args.debug)
        result = solve_one(puzzle, args.debug, tracer, verbose=single)
        if not single:
            tqdm.write(f"{result['id']}: {result['status']} ({result['num_configs']} configs)")
        results.append(result)

    if tracer is not None:
        tracer.to_csv(args.trace, include_large_states=True)

    if args.output:
        write_results_csv(results, args.output)

    return results


if __name__ == "__main__":
    main()
