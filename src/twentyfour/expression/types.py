"""Operator and shape definitions for four-operand expressions.

Every expression in the search combines four operands with three binary
operators in one of five parenthesization shapes.
"""

from enum import Enum


# Target value every solution must reach
TARGET: float = 24.0

# Absolute tolerance for target matching and for near-zero divisors
EPSILON: float = 1e-9


class Operator(Enum):
    """Binary arithmetic operators."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def symbol(self) -> str:
        """Get the textual symbol of this operator."""
        return self.value

    @property
    def is_commutative(self) -> bool:
        """Check if operand order and grouping can be ignored."""
        return self in (Operator.ADD, Operator.MULTIPLY)

    def apply(self, left: float, right: float) -> float | None:
        """Apply the operator to two values.

        Returns:
            The result, or None when the operation is undefined
            (division by a value within EPSILON of zero).
        """
        if self is Operator.ADD:
            return left + right
        if self is Operator.SUBTRACT:
            return left - right
        if self is Operator.MULTIPLY:
            return left * right
        if abs(right) < EPSILON:
            return None
        return left / right

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operator":
        """Look up an operator by its symbol."""
        for op in cls:
            if op.value == symbol:
                return op
        raise ValueError(f"Unknown operator: {symbol}")


# Fixed enumeration order used by the search
OPERATORS: tuple[Operator, ...] = (
    Operator.ADD,
    Operator.SUBTRACT,
    Operator.MULTIPLY,
    Operator.DIVIDE,
)


class Shape(Enum):
    """The five parenthesization shapes for a, b, c, d with op1, op2, op3."""

    LEFT_CHAIN = 1      # ((a op1 b) op2 c) op3 d
    LEFT_INNER = 2      # (a op1 (b op2 c)) op3 d
    RIGHT_INNER = 3     # a op1 ((b op2 c) op3 d)
    RIGHT_CHAIN = 4     # a op1 (b op2 (c op3 d))
    BALANCED = 5        # (a op1 b) op2 (c op3 d)

    @property
    def template(self) -> str:
        """Format template taking a, op1, b, op2, c, op3, d in order."""
        return SHAPE_TEMPLATES[self]

    def render(
        self,
        operands: tuple[float, float, float, float],
        operators: tuple[Operator, Operator, Operator],
    ) -> str:
        """Render operands and operators with this shape's parentheses."""
        a, b, c, d = (format_operand(v) for v in operands)
        op1, op2, op3 = (op.symbol for op in operators)
        return self.template.format(a, op1, b, op2, c, op3, d)


SHAPE_TEMPLATES: dict[Shape, str] = {
    Shape.LEFT_CHAIN: "(({} {} {}) {} {}) {} {}",
    Shape.LEFT_INNER: "({} {} ({} {} {})) {} {}",
    Shape.RIGHT_INNER: "{} {} (({} {} {}) {} {})",
    Shape.RIGHT_CHAIN: "{} {} ({} {} ({} {} {}))",
    Shape.BALANCED: "({} {} {}) {} ({} {} {})",
}


def format_operand(value: float) -> str:
    """Render a value for display, without a fractional part."""
    return f"{value:.0f}"


def is_target(value: float, target: float = TARGET, tolerance: float = EPSILON) -> bool:
    """Check if value is within tolerance of the target."""
    return abs(value - target) < tolerance
