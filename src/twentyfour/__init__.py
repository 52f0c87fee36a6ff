"""
twentyfour: Exhaustive solver for the 24 game.

Finds every distinct way to combine four digits with + - * / and
parentheses into 24, reporting each equivalence class once:
- Commutative and associative rearrangements of + and * collapse together
- Multiplying or dividing by 1 is transparent
"""

__version__ = "0.1.0"

from twentyfour.parsing import Hand, InputError, parse_input
from twentyfour.search.registry import Solution
from twentyfour.search.solver import SolveResult, Solver, SolverConfig, solve

__all__ = [
    "__version__",
    "Hand",
    "InputError",
    "parse_input",
    "Solution",
    "SolveResult",
    "Solver",
    "SolverConfig",
    "solve",
]
