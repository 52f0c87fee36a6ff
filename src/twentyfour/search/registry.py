"""Deduplication registry and solution collection.

One registry and one collector are created per search call and discarded
when it returns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import threading

from twentyfour.expression.builder import Candidate
from twentyfour.expression.canonical import canonical_key
from twentyfour.expression.types import format_operand


@dataclass(frozen=True)
class Solution:
    """An accepted solution.

    Attributes:
        formula: Formula text with the original operand order and shape
        value: Evaluated value (within tolerance of the target)
        key: Canonical key of the underlying tree
    """

    formula: str
    value: float
    key: str = field(default="", compare=False, repr=False)

    def __str__(self) -> str:
        return f"{self.formula} = {format_operand(self.value)}"

    def to_dict(self) -> dict[str, str | float]:
        """Convert to a JSON-serializable dictionary."""
        return {"formula": self.formula, "value": self.value}


class DeduplicationRegistry:
    """Set of canonical keys seen during one search."""

    def __init__(self) -> None:
        self._seen: set[str] = set()
        self._lock = threading.Lock()

    def test_and_set(self, key: str) -> bool:
        """Mark a key as seen.

        Returns:
            True if the key was already present, False if it was just added
        """
        with self._lock:
            if key in self._seen:
                return True
            self._seen.add(key)
            return False

    def __len__(self) -> int:
        return len(self._seen)


class SolutionCollector:
    """Ordered list of solutions admitted through a registry."""

    def __init__(self, registry: DeduplicationRegistry | None = None) -> None:
        self.registry = registry or DeduplicationRegistry()
        self.solutions: list[Solution] = []
        self.n_duplicates = 0

    def offer(self, candidate: Candidate) -> Solution | None:
        """Admit a candidate if its equivalence class is new.

        Returns:
            The appended Solution, or None if it was a duplicate
        """
        key = canonical_key(candidate.root)
        if self.registry.test_and_set(key):
            self.n_duplicates += 1
            return None

        solution = Solution(formula=candidate.formula, value=candidate.value, key=key)
        self.solutions.append(solution)
        return solution

    def __len__(self) -> int:
        return len(self.solutions)
