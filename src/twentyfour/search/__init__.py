"""Exhaustive search over orderings, operators and shapes.

The search enumerates 24 permutations x 64 operator triples x 5 shapes and
reports one representative per canonical equivalence class.
"""

from twentyfour.search.generators import (
    generate_operator_combinations,
    generate_permutations,
)
from twentyfour.search.registry import (
    DeduplicationRegistry,
    Solution,
    SolutionCollector,
)
from twentyfour.search.solver import SolveResult, Solver, SolverConfig, solve

__all__ = [
    "generate_operator_combinations",
    "generate_permutations",
    "DeduplicationRegistry",
    "Solution",
    "SolutionCollector",
    "SolveResult",
    "Solver",
    "SolverConfig",
    "solve",
]
