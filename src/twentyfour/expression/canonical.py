"""Canonical keys for deduplicating equivalent expression trees.

Two trees get the same key when they differ only by:
- Commutativity and associativity of + and * (chains are flattened and sorted)
- Multiplying by 1, or dividing by 1

The equivalence is intentionally partial: subtraction and division keep their
operand order and break flattening, so a - b + c and a + c - b stay distinct.
"""

from twentyfour.expression.nodes import Node, OperatorNode
from twentyfour.expression.types import Operator

IDENTITY_KEY = "1"


def format_key_number(value: float) -> str:
    """Render a value as a stable, round-trip safe key fragment.

    Integral values drop the fractional part, so 4.0 from 8 / 2 and the
    operand 4 render identically.
    """
    value = float(value)
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def collect_operands(node: Node, operator: Operator, keys: list[str]) -> None:
    """Flatten a chain of the same operator into a list of operand keys."""
    if isinstance(node, OperatorNode) and node.operator is operator:
        collect_operands(node.left, operator, keys)
        collect_operands(node.right, operator, keys)
    else:
        keys.append(canonical_key(node))


def canonical_key(node: Node) -> str:
    """Compute the canonical key of a tree."""
    if not isinstance(node, OperatorNode):
        return format_key_number(node.value)

    left_key = canonical_key(node.left)
    right_key = canonical_key(node.right)
    op = node.operator

    # Identity: x * 1, 1 * x, x / 1
    if op is Operator.MULTIPLY:
        if left_key == IDENTITY_KEY:
            return right_key
        if right_key == IDENTITY_KEY:
            return left_key
    if op is Operator.DIVIDE and right_key == IDENTITY_KEY:
        return left_key

    if op.is_commutative:
        keys: list[str] = []
        collect_operands(node, op, keys)
        keys.sort()
        return "(" + op.symbol.join(keys) + ")"

    return f"({left_key}{op.symbol}{right_key})"
