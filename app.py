import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional, TextIO

from constants import BOARD_SIZE, GENERATION_LIMIT, RESULTS_PATH, ROUND_COUNT
from evolution import ConfigurationError, Evolution
import view


class RoundResult:
    def __init__(self, evolution: Evolution, duration: float) -> None:
        self.evolution = evolution
        self.duration = duration

    @property
    def solved(self) -> bool:
        return self.evolution.solved()


def run_round(
    board_size: int,
    generation_limit: int,
    seed: Optional[int] = None,
    verbose: bool = False,
) -> RoundResult:
    evolution = Evolution(board_size, generation_limit, seed=seed)
    start = time.perf_counter()
    evolution.resolve(verbose=verbose)
    duration = time.perf_counter() - start
    return RoundResult(evolution, duration)


def _open_output(path: Path) -> Optional[TextIO]:
    try:
        return path.open("a", encoding="utf-8")
    except OSError:
        print("[warn] Error attempting to open output file...")
        return None


def run_rounds(
    board_size: int,
    rounds: int,
    generation_limit: int,
    output_path: Optional[Path],
    seed: Optional[int] = None,
    verbose: bool = False,
) -> List[RoundResult]:
    """Resolve `rounds` independent evolutions, printing and appending one line each."""
    output = _open_output(output_path) if output_path is not None else None
    results: List[RoundResult] = []
    try:
        for i in range(rounds):
            res = run_round(
                board_size,
                generation_limit,
                seed=None if seed is None else seed + i,
                verbose=verbose,
            )
            results.append(res)
            print(view.format_round(res.duration, res.evolution))
            if output is not None:
                output.write(view.format_evolution(res.evolution) + "\n")
        if output is not None:
            output.write("\n")
    finally:
        if output is not None:
            output.close()
    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="N-Queens solved by a genetic algorithm")
    parser.add_argument("--board-size", type=int, default=BOARD_SIZE)
    parser.add_argument("--rounds", type=int, default=ROUND_COUNT, help="Independent runs to resolve")
    parser.add_argument("--output", type=Path, default=RESULTS_PATH, help="File the results are appended to")
    parser.add_argument("--generations", type=int, default=GENERATION_LIMIT, help="Generation limit per run")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the first run (run i uses seed + i)")
    parser.add_argument("--plot", action="store_true", help="Plot the board and history of the last run")
    parser.add_argument("--verbose", action="store_true", help="Print per-generation progress")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    start = time.perf_counter()
    try:
        results = run_rounds(
            args.board_size,
            args.rounds,
            args.generations,
            args.output,
            seed=args.seed,
            verbose=args.verbose,
        )
    except ConfigurationError as e:
        print(f"[error] {e}")
        return 2
    duration = time.perf_counter() - start

    solved = sum(1 for res in results if res.solved)
    print(f"Solved {solved}/{len(results)} rounds in {duration:.3f}s")

    if args.plot and results:
        last = results[-1].evolution
        view.print_matplotlib(last.solution())
        view.print_heuristic_tables(last.history)
    return 0


if __name__ == "__main__":
    sys.exit(main())
