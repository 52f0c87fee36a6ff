"""Solver - main interface for the exhaustive 24 search.

Coordinates:
1. Operand orderings (24 permutations)
2. Operator triples (64 combinations)
3. Shape evaluation (5 parenthesizations)
4. Canonical deduplication

Usage:
    solver = Solver()
    result = solver.solve((3, 3, 8, 8))
    for i, solution in enumerate(result.solutions, 1):
        print(f"{i}. {solution}")
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Sequence
import logging
import os
import time

from twentyfour.expression.builder import Candidate, find_candidates
from twentyfour.expression.types import EPSILON, TARGET
from twentyfour.search.generators import (
    generate_operator_combinations,
    generate_permutations,
)
from twentyfour.search.registry import (
    DeduplicationRegistry,
    Solution,
    SolutionCollector,
)

logger = logging.getLogger(__name__)

# One shard per permutation, so more than 24 workers never helps
N_WORKERS = min(os.cpu_count() or 4, 24)

N_OPERANDS = 4


@dataclass
class SolverConfig:
    """Configuration for the search.

    Attributes:
        target: Value every solution must reach
        tolerance: Absolute tolerance when comparing against the target
        n_workers: Threads used to evaluate permutations (1 = sequential)
    """

    target: float = TARGET
    tolerance: float = EPSILON
    n_workers: int = 1

    def __post_init__(self) -> None:
        if self.n_workers < 1:
            raise ValueError(f"n_workers must be >= 1, got {self.n_workers}")
        if self.tolerance <= 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")


@dataclass
class SolveResult:
    """Result of one search.

    Attributes:
        numbers: Operands as supplied, in input order
        solutions: Distinct solutions in discovery order
        n_candidates: Trees that reached the target, duplicates included
        elapsed_ms: Wall time of the search
    """

    numbers: tuple[float, ...]
    solutions: list[Solution] = field(default_factory=list)
    n_candidates: int = 0
    elapsed_ms: float = 0.0

    @property
    def solved(self) -> bool:
        return bool(self.solutions)

    @property
    def count(self) -> int:
        return len(self.solutions)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "numbers": [int(n) for n in self.numbers],
            "count": self.count,
            "solutions": [
                {"index": i, **s.to_dict()}
                for i, s in enumerate(self.solutions, 1)
            ],
        }


class Solver:
    """Exhaustive search for every distinct way to reach the target.

    Expects exactly four operands that are already validated (integral,
    1-9); see ``twentyfour.parsing`` for the input layer.
    """

    def __init__(self, config: SolverConfig | None = None):
        self.config = config or SolverConfig()
        self._operator_combinations = generate_operator_combinations()

    def solve(self, numbers: Sequence[float]) -> SolveResult:
        """Find all distinct solutions for four operands.

        Args:
            numbers: Exactly four operands

        Returns:
            SolveResult with solutions in (permutation, operators, shape) order
        """
        operands = tuple(float(n) for n in numbers)
        if len(operands) != N_OPERANDS:
            raise ValueError(f"Expected {N_OPERANDS} numbers, got {len(operands)}")

        start = time.perf_counter()
        logger.debug(f"Searching for {self.config.target:g} with {operands}")

        collector = SolutionCollector(DeduplicationRegistry())
        n_candidates = 0
        for shard in self._evaluate_shards(generate_permutations(operands)):
            for candidate in shard:
                n_candidates += 1
                collector.offer(candidate)

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"Found {len(collector)} unique solution(s) for {operands} "
            f"({n_candidates} candidates, {elapsed_ms:.1f} ms)"
        )

        return SolveResult(
            numbers=operands,
            solutions=collector.solutions,
            n_candidates=n_candidates,
            elapsed_ms=elapsed_ms,
        )

    def _evaluate_shards(
        self,
        orderings: list[tuple[float, ...]],
    ) -> list[list[Candidate]]:
        """Evaluate each permutation, keeping shards in permutation order."""
        if self.config.n_workers == 1:
            return [self._evaluate_permutation(p) for p in orderings]

        n_workers = min(self.config.n_workers, len(orderings))
        logger.debug(f"Evaluating {len(orderings)} permutations on {n_workers} threads")
        with ThreadPoolExecutor(max_workers=n_workers) as executor:
            # map() yields results in submission order
            return list(executor.map(self._evaluate_permutation, orderings))

    def _evaluate_permutation(self, operands: tuple[float, ...]) -> list[Candidate]:
        """Collect target-reaching candidates for one ordering."""
        candidates: list[Candidate] = []
        for operators in self._operator_combinations:
            candidates.extend(
                find_candidates(
                    operands,
                    operators,
                    target=self.config.target,
                    tolerance=self.config.tolerance,
                )
            )
        return candidates


def solve(numbers: Sequence[float], config: SolverConfig | None = None) -> list[Solution]:
    """Convenience function returning only the solution list."""
    return Solver(config).solve(numbers).solutions
