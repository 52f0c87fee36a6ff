"""Text rendering of search results."""

from twentyfour.expression.types import format_operand
from twentyfour.search.registry import Solution

SEPARATOR = "=" * 31
NO_SOLUTIONS = "No solutions found for these numbers."

RULES = [
    "Rules:",
    "- Enter 4 numbers (digits 1-9)",
    "- Format: 1 2 3 4 or 1,2,3,4 or 1234",
    "- The program will find all unique ways to make 24.",
    "- Supports: +, -, *, /",
]


def format_banner() -> str:
    """Welcome text shown at the start of an interactive session."""
    return "\n".join(["WELCOME TO THE 24 GAME SOLVER", SEPARATOR, *RULES, SEPARATOR])


def format_search_header(numbers) -> str:
    return "Searching for solutions with: " + ", ".join(format_operand(n) for n in numbers)


def format_report(solutions: list[Solution]) -> str:
    """Format solutions as a numbered list.

    An empty list is a normal outcome and renders as a single message.
    """
    if not solutions:
        return NO_SOLUTIONS

    lines = [f"Found {len(solutions)} unique solution(s):", ""]
    for i, solution in enumerate(solutions, 1):
        lines.append(f"{i}. {solution}")
    return "\n".join(lines)
