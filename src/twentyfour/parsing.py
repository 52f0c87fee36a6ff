"""
Input parsing and validation.

Accepts four digits in any of these forms:
- "1 2 3 4" (whitespace separated)
- "1,2,3,4" (comma separated)
- "1234"    (compact, four digits)

Every number must be an integer from 1 to 9. The solver assumes this has
been checked here.
"""

import math

from pydantic import BaseModel, Field, ValidationError, field_validator

MIN_DIGIT = 1
MAX_DIGIT = 9
N_NUMBERS = 4

QUIT_COMMAND = "quit"


class InputError(ValueError):
    """Raised when user input cannot be turned into a hand of four digits."""


def check_digit(value: float) -> float:
    """Validate a single operand against the 1-9 integral rule."""
    if value < MIN_DIGIT or value > MAX_DIGIT or value != math.floor(value):
        raise InputError(f"numbers must be digits 1-9, found: {value:g}")
    return value


class Hand(BaseModel):
    """Four validated operands in input order."""

    numbers: tuple[float, float, float, float] = Field(
        ..., description="Four digits 1-9 in the order entered"
    )

    @field_validator("numbers")
    @classmethod
    def digits_in_range(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        """Every number must be an integer from 1 to 9."""
        for n in v:
            check_digit(n)
        return v

    def __str__(self) -> str:
        return ", ".join(f"{n:.0f}" for n in self.numbers)

    @classmethod
    def from_numbers(cls, numbers) -> "Hand":
        """Build a hand, converting validation failures to InputError."""
        numbers = list(numbers)
        if len(numbers) != N_NUMBERS:
            raise InputError(f"you must enter exactly {N_NUMBERS} numbers")
        try:
            return cls(numbers=tuple(numbers))
        except ValidationError as e:
            errors = e.errors()
            # Surface the first message without pydantic's prefix
            message = errors[0]["msg"] if errors else str(e)
            raise InputError(message.removeprefix("Value error, ")) from e


def split_input(text: str) -> list[str]:
    """Split raw text into number tokens."""
    text = text.strip()
    if "," in text:
        return text.split(",")
    if " " in text:
        return text.split()
    if len(text) == N_NUMBERS:
        if not all("0" <= ch <= "9" for ch in text):
            raise InputError("input must be numeric if no spaces/commas are used")
        return list(text)
    return text.split()


def parse_input(text: str) -> Hand:
    """Parse raw user text into a validated hand.

    Raises:
        InputError: If the text is not exactly four digits 1-9
    """
    parts = split_input(text)
    if len(parts) != N_NUMBERS:
        raise InputError(f"you must enter exactly {N_NUMBERS} numbers")

    numbers = []
    for part in parts:
        part = part.strip()
        try:
            num = float(part)
        except ValueError:
            raise InputError(f"'{part}' is not a valid number") from None
        if math.isnan(num):
            raise InputError(f"'{part}' is not a valid number")
        numbers.append(check_digit(num))

    return Hand.from_numbers(numbers)


def is_quit_command(text: str) -> bool:
    """Check if the text asks to end an interactive session."""
    return text.strip().lower() == QUIT_COMMAND
