"""Tests for input parsing and report formatting."""

import pytest

from twentyfour.parsing import Hand, InputError, is_quit_command, parse_input
from twentyfour.report import (
    NO_SOLUTIONS,
    format_banner,
    format_report,
    format_search_header,
)
from twentyfour.search.registry import Solution


class TestParseInput:
    """Test accepted input formats."""

    @pytest.mark.parametrize(
        "text",
        ["1 2 3 4", "1,2,3,4", "1234", "  1, 2 ,3,4  ", "1   2\t3 4", "1.0 2 3 4"],
    )
    def test_accepted_formats(self, text):
        hand = parse_input(text)
        assert hand.numbers == (1.0, 2.0, 3.0, 4.0)

    def test_order_preserved(self):
        assert parse_input("8 3 8 3").numbers == (8.0, 3.0, 8.0, 3.0)

    def test_str(self):
        assert str(parse_input("3388")) == "3, 3, 8, 8"


class TestParseErrors:
    """Test rejected input and error messages."""

    @pytest.mark.parametrize("text", ["", "1 2 3", "1,2,3,4,5", "12345", "123"])
    def test_wrong_count(self, text):
        with pytest.raises(InputError, match="exactly 4 numbers"):
            parse_input(text)

    def test_compact_must_be_digits(self):
        with pytest.raises(InputError, match="must be numeric"):
            parse_input("12a4")

    def test_not_a_number(self):
        with pytest.raises(InputError, match="'x' is not a valid number"):
            parse_input("1 2 3 x")

    def test_nan_is_not_a_number(self):
        with pytest.raises(InputError, match="not a valid number"):
            parse_input("1 2 3 nan")

    @pytest.mark.parametrize(
        "text, found",
        [("1 2 3 10", "10"), ("0 1 2 3", "0"), ("1 2 3 2.5", "2.5"), ("-1 2 3 4", "-1")],
    )
    def test_out_of_range(self, text, found):
        with pytest.raises(InputError, match=f"digits 1-9, found: {found}"):
            parse_input(text)

    def test_input_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_input("nope")


class TestHand:
    """Test the validated hand model."""

    def test_from_numbers(self):
        assert Hand.from_numbers([3, 3, 8, 8]).numbers == (3.0, 3.0, 8.0, 8.0)

    def test_from_numbers_out_of_range(self):
        with pytest.raises(InputError, match="digits 1-9, found: 10"):
            Hand.from_numbers([1, 2, 3, 10])

    def test_from_numbers_wrong_count(self):
        with pytest.raises(InputError, match="exactly 4 numbers"):
            Hand.from_numbers([1, 2, 3])


class TestQuitCommand:
    @pytest.mark.parametrize("text", ["quit", "QUIT", "  Quit  "])
    def test_quit(self, text):
        assert is_quit_command(text)

    @pytest.mark.parametrize("text", ["", "q", "exit", "quit now"])
    def test_not_quit(self, text):
        assert not is_quit_command(text)


class TestReport:
    """Test text rendering."""

    def test_no_solutions(self):
        assert format_report([]) == NO_SOLUTIONS

    def test_numbered_solutions(self):
        solutions = [
            Solution(formula="(1 + 3) * (2 + 4)", value=24.0),
            Solution(formula="8 / (3 - (8 / 3))", value=23.999999999999986),
        ]
        lines = format_report(solutions).splitlines()

        assert lines[0] == "Found 2 unique solution(s):"
        assert lines[1] == ""
        assert lines[2] == "1. (1 + 3) * (2 + 4) = 24"
        assert lines[3] == "2. 8 / (3 - (8 / 3)) = 24"

    def test_search_header(self):
        assert format_search_header((3.0, 3.0, 8.0, 8.0)) == "Searching for solutions with: 3, 3, 8, 8"

    def test_banner(self):
        banner = format_banner()
        assert banner.startswith("WELCOME TO THE 24 GAME SOLVER")
        assert "1 2 3 4 or 1,2,3,4 or 1234" in banner
