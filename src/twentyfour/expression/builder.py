"""Build and evaluate the five expression shapes for one operand ordering.

For operands (a, b, c, d) and operators (op1, op2, op3) each shape is
evaluated bottom-up. A shape whose evaluation hits a near-zero divisor is
skipped without affecting the others.
"""

from __future__ import annotations

from dataclasses import dataclass

from twentyfour.expression.nodes import LeafNode, Node, OperatorNode
from twentyfour.expression.types import (
    EPSILON,
    TARGET,
    Operator,
    Shape,
    is_target,
)


@dataclass(frozen=True)
class Candidate:
    """An expression tree that reached the target.

    Attributes:
        shape: Parenthesization shape the tree was built from
        root: Root node of the evaluated tree
        operands: Operand ordering used to build the tree
        operators: Operator triple used to build the tree
    """

    shape: Shape
    root: Node
    operands: tuple[float, float, float, float]
    operators: tuple[Operator, Operator, Operator]

    @property
    def value(self) -> float:
        return self.root.value

    @property
    def formula(self) -> str:
        """Human-readable formula in this candidate's own shape."""
        return self.shape.render(self.operands, self.operators)


def build_shape(
    shape: Shape,
    operands: tuple[float, float, float, float],
    operators: tuple[Operator, Operator, Operator],
) -> Node | None:
    """Build and evaluate one shape.

    Returns:
        The root node, or None if any step divides by a near-zero value
    """
    a, b, c, d = (LeafNode(operand=v) for v in operands)
    op1, op2, op3 = operators
    combine = OperatorNode.combine

    if shape is Shape.LEFT_CHAIN:
        # ((a op1 b) op2 c) op3 d
        inner = combine(op1, a, b)
        middle = combine(op2, inner, c) if inner is not None else None
        return combine(op3, middle, d) if middle is not None else None

    if shape is Shape.LEFT_INNER:
        # (a op1 (b op2 c)) op3 d
        inner = combine(op2, b, c)
        middle = combine(op1, a, inner) if inner is not None else None
        return combine(op3, middle, d) if middle is not None else None

    if shape is Shape.RIGHT_INNER:
        # a op1 ((b op2 c) op3 d)
        inner = combine(op2, b, c)
        middle = combine(op3, inner, d) if inner is not None else None
        return combine(op1, a, middle) if middle is not None else None

    if shape is Shape.RIGHT_CHAIN:
        # a op1 (b op2 (c op3 d))
        inner = combine(op3, c, d)
        middle = combine(op2, b, inner) if inner is not None else None
        return combine(op1, a, middle) if middle is not None else None

    # (a op1 b) op2 (c op3 d)
    left = combine(op1, a, b)
    right = combine(op3, c, d)
    if left is None or right is None:
        return None
    return combine(op2, left, right)


def find_candidates(
    operands: tuple[float, float, float, float],
    operators: tuple[Operator, Operator, Operator],
    target: float = TARGET,
    tolerance: float = EPSILON,
) -> list[Candidate]:
    """Evaluate all five shapes and keep those that reach the target.

    Shapes are tried in their fixed order 1-5, so at most five candidates
    are returned, in that order.
    """
    candidates = []
    for shape in Shape:
        root = build_shape(shape, operands, operators)
        if root is not None and is_target(root.value, target, tolerance):
            candidates.append(
                Candidate(shape=shape, root=root, operands=operands, operators=operators)
            )
    return candidates
