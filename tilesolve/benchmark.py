"""Benchmark harness timing the solver on random solvable boards."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass

from .partition import solve_board, verify_partition
from .pieces import MAX_RANK, MIN_RANK, WILDCARD, Color, Piece, Ranked

logger = logging.getLogger(__name__)

__all__ = ["BenchmarkConfig", "BenchmarkReport", "random_board", "run_benchmark"]


@dataclass(frozen=True, slots=True)
class BenchmarkConfig:
    """Configuration values for a benchmark run."""

    rounds: int = 10
    groups: int = 4
    max_wildcards: int = 2
    seed: int = 123


@dataclass(frozen=True, slots=True)
class BenchmarkReport:
    """Aggregate timings collected across a benchmark."""

    rounds: int
    solved: int
    total_seconds: float
    max_seconds: float

    @property
    def mean_seconds(self) -> float:
        if self.rounds == 0:
            return 0.0
        return self.total_seconds / self.rounds


def _random_group(rng: random.Random) -> list[Piece]:
    if rng.random() < 0.5:
        rank = rng.randint(MIN_RANK, MAX_RANK)
        colors = rng.sample(Color.ordered(), rng.choice((3, 4)))
        return [Ranked(rank, color) for color in colors]
    length = rng.randint(3, 5)
    start = rng.randint(MIN_RANK, MAX_RANK - length + 1)
    color = rng.choice(Color.ordered())
    return [Ranked(rank, color) for rank in range(start, start + length)]


def random_board(rng: random.Random, groups: int, max_wildcards: int = 2) -> list[Piece]:
    """Return a shuffled board known to split into ``groups`` melds."""

    melds = [_random_group(rng) for _ in range(groups)]
    wildcards = min(max_wildcards, groups)
    for meld in rng.sample(melds, wildcards):
        # Replacing one piece of a meld with a wildcard keeps it a meld.
        meld[rng.randrange(len(meld))] = WILDCARD

    board = [piece for meld in melds for piece in meld]
    rng.shuffle(board)
    return board


def run_benchmark(config: BenchmarkConfig) -> BenchmarkReport:
    """Solve ``config.rounds`` random boards and report the timings."""

    if config.rounds <= 0:
        raise ValueError("rounds must be positive")
    if config.groups <= 0:
        raise ValueError("groups must be positive")

    rng = random.Random(config.seed)
    solved = 0
    total = 0.0
    slowest = 0.0

    for round_number in range(config.rounds):
        board = random_board(rng, config.groups, config.max_wildcards)
        started = time.perf_counter()
        result = solve_board(board)
        elapsed = time.perf_counter() - started

        if result is None:
            logger.warning("round %d: no partition found for %d pieces", round_number, len(board))
        elif not verify_partition(board, result):
            raise RuntimeError(f"round {round_number}: solver returned an invalid partition")
        else:
            solved += 1
        total += elapsed
        slowest = max(slowest, elapsed)
        logger.debug("round %d: %d pieces in %.4fs", round_number, len(board), elapsed)

    return BenchmarkReport(rounds=config.rounds, solved=solved, total_seconds=total, max_seconds=slowest)
