"""Enumeration of operand orderings and operator triples."""

from itertools import permutations, product

from twentyfour.expression.types import OPERATORS, Operator


def generate_permutations(
    numbers: tuple[float, ...] | list[float],
) -> list[tuple[float, ...]]:
    """Generate every positional ordering of the operands.

    Repeated values produce repeated orderings; duplicates are removed later
    by canonical keys, not here. For four operands this yields 24 orderings,
    each input position taking the lead in input order.
    """
    return list(permutations(tuple(numbers)))


def generate_operator_combinations() -> list[tuple[Operator, Operator, Operator]]:
    """Generate all 64 operator triples, repetition allowed.

    Order is stable: the first operator varies slowest, following + - * /.
    """
    return list(product(OPERATORS, repeat=3))
