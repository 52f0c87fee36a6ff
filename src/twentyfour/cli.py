"""
Command-line interface for twentyfour.

Provides commands for:
- Solving a single hand of four digits
- Running an interactive solving session
- Showing installation info
"""

import json
import logging
import sys
from pathlib import Path

import click

from twentyfour import __version__

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("twentyfour")


def _build_solver(workers: int):
    from twentyfour.search.solver import N_WORKERS, Solver, SolverConfig

    # 0 means one thread per core
    n_workers = workers or N_WORKERS
    return Solver(SolverConfig(n_workers=n_workers))


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def main(verbose: bool) -> None:
    """twentyfour - find every distinct way to make 24."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@main.command()
@click.argument("numbers", nargs=-1, required=True)
@click.option(
    "--workers",
    "-w",
    default=1,
    type=click.IntRange(min=0),
    help="Threads for the search (0 = one per core)",
)
@click.option("--output", "-o", default=None, help="Output file for results (JSON)")
def solve(numbers: tuple[str, ...], workers: int, output: str) -> None:
    """Solve one hand, e.g. `solve 3 3 8 8` or `solve 3388`."""
    from twentyfour.parsing import InputError, parse_input
    from twentyfour.report import SEPARATOR, format_report, format_search_header

    try:
        hand = parse_input(" ".join(numbers))
    except InputError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    solver = _build_solver(workers)
    result = solver.solve(hand.numbers)

    click.echo(format_search_header(hand.numbers))
    click.echo(SEPARATOR)
    click.echo(format_report(result.solutions))

    # Save if output specified
    if output:
        output_path = Path(output)
        output_path.write_text(json.dumps(result.to_dict(), indent=2))
        click.echo(f"\nResults saved to {output}")


@main.command()
@click.option(
    "--workers",
    "-w",
    default=1,
    type=click.IntRange(min=0),
    help="Threads for the search (0 = one per core)",
)
def play(workers: int) -> None:
    """Interactive session: enter hands until 'quit'."""
    from twentyfour.parsing import InputError, is_quit_command, parse_input
    from twentyfour.report import (
        SEPARATOR,
        format_banner,
        format_report,
        format_search_header,
    )

    solver = _build_solver(workers)
    click.echo(format_banner())

    while True:
        try:
            text = click.prompt(
                "\nEnter 4 numbers (or 'quit' to exit)",
                default="",
                show_default=False,
            )
        except click.Abort:
            # End of input
            click.echo("")
            break

        if is_quit_command(text):
            click.echo("Thank you for playing!")
            break

        try:
            hand = parse_input(text)
        except InputError as e:
            click.echo(f"Error: {e}")
            continue

        click.echo(f"\n{format_search_header(hand.numbers)}")
        click.echo(SEPARATOR)
        result = solver.solve(hand.numbers)
        click.echo(format_report(result.solutions))
        click.echo(f"\n{SEPARATOR}")


@main.command()
def info() -> None:
    """Show twentyfour installation info."""
    from importlib.metadata import PackageNotFoundError, version

    from twentyfour.expression.types import EPSILON, TARGET

    click.echo(f"twentyfour v{__version__}\n")
    click.echo(f"Target: {TARGET:g}  Tolerance: {EPSILON:g}")
    click.echo("\nDependencies:")

    for package in ("click", "pydantic", "fastapi"):
        try:
            click.echo(f"  {package}: {version(package)}")
        except PackageNotFoundError:
            click.echo(f"  {package}: not installed")


if __name__ == "__main__":
    main()
