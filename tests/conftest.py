"""
Pytest fixtures for twentyfour tests.
"""

import pytest

from twentyfour.expression.nodes import LeafNode, OperatorNode
from twentyfour.expression.types import Operator


@pytest.fixture
def solver():
    """Get a sequential solver with default settings."""
    from twentyfour.search.solver import Solver

    return Solver()


@pytest.fixture
def threaded_solver():
    """Get a solver that shards permutations across threads."""
    from twentyfour.search.solver import Solver, SolverConfig

    return Solver(SolverConfig(n_workers=4))


@pytest.fixture
def make_tree():
    """Build a tree from nested tuples like (8, "/", (3, "-", 2))."""

    def build(expr):
        if isinstance(expr, tuple):
            left, symbol, right = expr
            node = OperatorNode.combine(Operator.from_symbol(symbol), build(left), build(right))
            assert node is not None, f"undefined expression: {expr}"
            return node
        return LeafNode(operand=float(expr))

    return build
