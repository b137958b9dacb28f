"""Table command implementation."""

from pathlib import Path

import typer

from doubles.classification import describe_all
from doubles.display import print_error, print_reference_table, print_success
from doubles.markdown import render_comparison_table, render_reference


def table_command(markdown: bool = False, output: Path | None = None) -> None:
    """Print the comparison table or write the reference document.

    Args:
        markdown: Print the table as Markdown instead of a Rich table
        output: Write the full Markdown reference document to this path
    """
    if output is not None:
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(render_reference(), encoding="utf-8")
        except OSError as e:
            print_error(f"Failed to write {output}: {e}")
            raise SystemExit(1) from None
        print_success(f"Wrote reference to {output}")
        return

    if markdown:
        typer.echo(render_comparison_table())
    else:
        print_reference_table(describe_all())
