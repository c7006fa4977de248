"""CLI UI components (Rich).

Keeps tables, panels and headings out of the command functions so `run`,
`list` and `doctor` render examples the same way.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.principles import Principle
from core.services.examples import Example


def print_banner(console: Console) -> None:
    """Print the welcome banner (skipped with `--quiet-banner`)."""

    title = Text("SOLID Playground", style="bold cyan")
    subtitle = Text("Problem • Solution • One principle at a time", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_principle_panel(principle: Principle) -> Panel:
    title = Text(f"{principle.label()} ({principle.name})", style="bold yellow")
    return Panel(Text(principle.statement()), title=title, border_style="yellow")


def print_example_heading(console: Console, example: Example) -> None:
    console.print(f"===== {example.title} =====", style="bold", markup=False)


def print_section_title(console: Console, section: str) -> None:
    style = "red" if section == "problem" else "green"
    console.print(f"// {section.capitalize()}", style=style, markup=False)


def build_examples_table(examples: Iterable[Example]) -> Table:
    table = Table(title="Registered examples")
    table.add_column("Principle", style="cyan", no_wrap=True)
    table.add_column("Slug", style="bright_green", no_wrap=True)
    table.add_column("Title", style="white")
    for example in examples:
        table.add_row(example.principle.name, example.slug, example.title)
    return table
