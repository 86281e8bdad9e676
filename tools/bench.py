#!/usr/bin/env python3
"""
Benchmark: measure how fast the codec parses `position` commands.

`position` is by far the most frequent and most expensive command a GUI
sends: it arrives before every search and repeats the whole game so far.
Run before and after a change to the grammar or the parsers to see its
effect on throughput.

Usage: python3 tools/bench.py [iterations]
"""
import logging
import sys
import time

from uci_protocol import Depth, Nodes, Nps, Time, build_info, parse_line

_log = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 2_000

# 10 standard positions spanning opening, middlegame, and endgame.
# These are fixed forever — same positions used for every version comparison.
POSITIONS = [
    ("Start",        "startpos"),
    ("After 1.e4",   "startpos moves e2e4"),
    ("Sicilian",     "startpos moves e2e4 c7c5"),
    ("Italian",      "startpos moves e2e4 e7e5 g1f3 b8c6 f1c4"),
    ("London",       "startpos moves d2d4 d7d5 g1f3 g8f6 c1f4"),
    ("Mid-open",     "fen r1bqkb1r/pppp1ppp/2n2n2/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R w KQkq - 4 4"),
    ("Complex mid",  "fen r2q1rk1/ppp2ppp/2np1n2/2b1p1B1/2B1P1b1/2NP1N2/PPP2PPP/R2Q1RK1 w - - 0 8"),
    ("Queen ending", "fen 6k1/ppp2ppp/8/3p4/3P4/8/PPP2PPP/6K1 w - - 0 1"),
    ("Rook ending",  "fen 8/5pk1/6p1/7p/7P/6P1/5PK1/8 w - - 0 1"),
    ("Pawn race",    "fen 8/1p4k1/p7/P1K5/8/8/8/8 w - - 0 1"),
]


def run_position(label: str, pos_spec: str, iterations: int = DEFAULT_ITERATIONS) -> dict:
    """Parse one position command repeatedly and return throughput metrics.

    The line is parsed through the same dispatcher a driver loop uses, so
    tokenizing, classification and grammar checks are all included. The
    measured numbers are then rendered as an `info` line, exercising the
    builder side as well.

    Args:
        label: Human-readable position name for display.
        pos_spec: UCI position string (e.g. "startpos" or "fen <FEN>").
        iterations: How many times to parse the command.

    Returns:
        Dict with keys: label, fen, moves, iterations, time_ms, per_second, info.
    """
    if iterations < 1:
        raise ValueError(f"iterations must be positive, got {iterations}")
    line = f"position {pos_spec}"

    start = time.perf_counter()
    for _ in range(iterations):
        parsed = parse_line(line)
    elapsed = time.perf_counter() - start

    time_ms = int(elapsed * 1000)
    per_second = int(iterations / elapsed) if elapsed > 0 else 0
    info = build_info([Depth(plies=1), Nodes(count=iterations), Nps(value=per_second), Time(ms=time_ms)])
    _log.debug("bench %s: %s", label, info)

    return {
        "label": label,
        "fen": parsed.payload.fen,
        "moves": len(parsed.payload.moves),
        "iterations": iterations,
        "time_ms": time_ms,
        "per_second": per_second,
        "info": info,
    }


def main() -> None:
    """Run all benchmark positions and print a summary table."""
    logging.basicConfig(level=logging.INFO)
    iterations = int(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_ITERATIONS

    print(f"UCI codec benchmark — {sys.executable}")
    print(f"Iterations per position: {iterations:,}")
    print()
    print(f"{'Position':<14} {'Moves':>5} {'Time(ms)':>9} {'Parses/s':>10}")
    print("-" * 41)

    results = []
    for label, pos in POSITIONS:
        r = run_position(label, pos, iterations)
        results.append(r)
        print(f"{r['label']:<14} {r['moves']:>5} {r['time_ms']:>9,} {r['per_second']:>10,}")

    avg_rate = sum(r["per_second"] for r in results) // len(results)
    print("-" * 41)
    print(f"{'AVERAGE':<14} {'':>5} {'':>9} {avg_rate:>10,}")


if __name__ == "__main__":
    main()
