"""Rich display utilities for the doubles CLI."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from doubles.core.schemas import Category, CategoryDescription, Classification

console = Console()

CATEGORY_COLORS = {
    Category.DUMMY: "white",
    Category.STUB: "cyan",
    Category.FAKE: "green",
    Category.SPY: "yellow",
    Category.MOCK: "magenta",
    Category.UNCLASSIFIED: "dim",
}


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]✓[/] {message}")


def print_error(message: str) -> None:
    """Print an error message. The message is not parsed as markup."""
    console.print(f"[bold red]✗[/] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[bold blue]ℹ[/] {message}")


def _bullets(items: list[str], color: str) -> str:
    return "\n".join(f"  [{color}]•[/] {item}" for item in items)


def print_classification(result: Classification) -> None:
    """Print the category a profile resolved to."""
    color = CATEGORY_COLORS[result.category]
    body = f"[bold {color}]{result.category.label}[/]\n\n{result.reason}"
    if result.is_ambiguous:
        roles = ", ".join(c.label for c in result.secondary_roles)
        body += f"\n\n[dim]Also behaves like:[/] {roles}"

    console.print()
    console.print(
        Panel(
            body,
            title="[bold]Test double[/]",
            border_style=color,
        )
    )


def print_trace(result: Classification) -> None:
    """Print each decision rule and whether it held."""
    table = Table(title="Decision order")
    table.add_column("#", justify="right")
    table.add_column("Trait", style="cyan")
    table.add_column("Category")
    table.add_column("Holds")

    for i, check in enumerate(result.checks, 1):
        if check.decisive:
            holds = "[bold green]yes ←[/]"
        elif check.held:
            holds = "[yellow]yes[/]"
        else:
            holds = "[dim]no[/]"
        table.add_row(str(i), check.trait, check.category.label, holds)

    console.print(table)


def print_description(entry: CategoryDescription) -> None:
    """Print a reference table entry."""
    color = CATEGORY_COLORS[entry.category]
    lines = [
        f"[bold]Purpose:[/] {entry.purpose}",
        "",
        "[bold]Advantages:[/]",
        _bullets(entry.advantages, "green"),
        "",
        "[bold]Disadvantages:[/]",
        _bullets(entry.disadvantages, "red"),
    ]
    if entry.example:
        lines.extend(["", f"[dim]Example:[/] {entry.example}"])

    console.print(
        Panel(
            "\n".join(lines),
            title=f"[bold {color}]{entry.category.label}[/]",
            border_style=color,
        )
    )


def print_reference_table(entries: list[CategoryDescription]) -> None:
    """Print the comparison table of all categories."""
    table = Table(title="Test Doubles", show_lines=True)
    table.add_column("Type", style="bold")
    table.add_column("Purpose")
    table.add_column("Advantages")
    table.add_column("Disadvantages")

    for entry in entries:
        color = CATEGORY_COLORS[entry.category]
        table.add_row(
            f"[{color}]{entry.category.label}[/]",
            entry.purpose,
            "\n".join(f"• {a}" for a in entry.advantages),
            "\n".join(f"• {d}" for d in entry.disadvantages),
        )

    console.print(table)
