"""Expression tree representation for four-operand arithmetic."""

from twentyfour.expression.types import (
    EPSILON,
    OPERATORS,
    TARGET,
    Operator,
    Shape,
)
from twentyfour.expression.nodes import (
    Node,
    LeafNode,
    OperatorNode,
)
from twentyfour.expression.builder import Candidate, build_shape, find_candidates
from twentyfour.expression.canonical import canonical_key

__all__ = [
    "EPSILON",
    "OPERATORS",
    "TARGET",
    "Operator",
    "Shape",
    "Node",
    "LeafNode",
    "OperatorNode",
    "Candidate",
    "build_shape",
    "find_candidates",
    "canonical_key",
]
