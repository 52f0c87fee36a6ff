"""Expression tree nodes for arithmetic expressions.

Implements immutable binary tree nodes:
- LeafNode: An operand value (e.g., 8)
- OperatorNode: A binary operator applied to two children (e.g., 8 / 3)

Trees are built bottom-up and never mutated after construction.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from twentyfour.expression.types import Operator


@dataclass(frozen=True)
class Node(ABC):
    """Abstract base class for expression tree nodes."""

    @property
    @abstractmethod
    def value(self) -> float:
        """Get the numeric value of this subtree."""
        pass


@dataclass(frozen=True)
class LeafNode(Node):
    """Leaf node holding one operand."""

    operand: float = 0.0

    @property
    def value(self) -> float:
        return self.operand


@dataclass(frozen=True)
class OperatorNode(Node):
    """Internal node applying an operator to two children.

    The memoized result is computed once by ``combine``; constructing the
    node directly requires passing a result consistent with the children.
    """

    operator: Operator = Operator.ADD
    left: Node | None = None
    right: Node | None = None
    result: float = 0.0

    def __post_init__(self) -> None:
        if self.left is None or self.right is None:
            raise ValueError("Operator node requires two children")

    @classmethod
    def combine(cls, operator: Operator, left: Node, right: Node) -> "OperatorNode | None":
        """Build a node from two evaluated children.

        Returns:
            The new node, or None if the operation is undefined
        """
        result = operator.apply(left.value, right.value)
        if result is None:
            return None
        return cls(operator=operator, left=left, right=right, result=result)

    @property
    def value(self) -> float:
        return self.result
