"""
Command Line Interface for dominance-fields.
"""

from typing import List, Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..core.errors import FieldError
from ..data.attribute import EvaluationAttribute
from ..data.parser import EvaluationParser
from ..fields.element_list import ElementList
from ..fields.enums import MissingValueType, PreferenceType, ValueKind
from ..logging_config import configure_logging

app = typer.Typer(help="dominance-fields - compare evaluations under dominance")
console = Console()


@app.callback()
def setup(
    log_level: Optional[str] = typer.Option(None, help="Log level (default from settings)"),
    log_format: Optional[str] = typer.Option(None, help="console or json"),
):
    """Configure logging before running a command."""
    configure_logging(level=log_level, fmt=log_format)


def _split_labels(labels: Optional[str]) -> Optional[List[str]]:
    if labels is None:
        return None
    return [label.strip() for label in labels.split(",")]


@app.command()
def compare(
    left: str = typer.Argument(..., help="Left evaluation literal"),
    right: str = typer.Argument(..., help="Right evaluation literal"),
    kind: ValueKind = typer.Option(..., help="Value kind of both evaluations"),
    preference: PreferenceType = typer.Option(..., help="Preference type of the attribute"),
    missing: MissingValueType = typer.Option(
        MissingValueType.MV2, help="Missing value treatment"
    ),
    labels: Optional[str] = typer.Option(
        None, help="Comma-separated labels of an enumeration attribute"
    ),
    pair: bool = typer.Option(False, help="Evaluations are (first,second) pairs"),
):
    """Parse two evaluations and show how they compare."""
    try:
        element_list = None
        if labels is not None:
            element_list = ElementList(elements=_split_labels(labels))
        attribute = EvaluationAttribute(
            name="cli",
            value_kind=kind,
            preference_type=preference,
            missing_value_type=missing,
            element_list=element_list,
            composite=pair,
        )
        parser = EvaluationParser()
        left_field = parser.parse_evaluation(left, attribute)
        right_field = parser.parse_evaluation(right, attribute)
    except FieldError as e:
        console.print(f"❌ {e.code}: {e.message}")
        raise typer.Exit(code=1)

    table = Table(
        title=f"{left_field} vs {right_field}", show_header=True, header_style="bold magenta"
    )
    table.add_column("Relation", style="cyan")
    table.add_column("Result", style="green")
    table.add_row("at least as good as", left_field.is_at_least_as_good_as(right_field).value)
    table.add_row("at most as good as", left_field.is_at_most_as_good_as(right_field).value)
    table.add_row("equal to", left_field.is_equal_to(right_field).value)
    table.add_row("different than", left_field.is_different_than(right_field).value)
    table.add_row("strict comparison", left_field.compare(right_field).value)
    console.print(table)


@app.command()
def catalog(
    labels: List[str] = typer.Argument(..., help="Labels in domain order"),
    algorithm: str = typer.Option("sha256", help="hashlib algorithm for the digest"),
):
    """Build an element list and show its digest."""
    try:
        element_list = ElementList(elements=labels, algorithm=algorithm)
    except FieldError as e:
        console.print(f"❌ {e.code}: {e.message}")
        raise typer.Exit(code=1)

    console.print(element_list.serialize())
    console.print(f"{element_list.algorithm}: {element_list.digest.hex()}")


@app.command()
def version():
    """Show version information."""
    from .. import __version__

    rprint(Panel.fit(f"dominance-fields v{__version__}", style="bold green"))


def main():
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
