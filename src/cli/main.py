"""Typer application.

Commands only parse options and render; selecting and running examples is
delegated to `core.services.playground`.
"""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.json_exporter import export_report_json
from adapters.report_exporter import export_report_html
from adapters.sinks import ConsoleSink
from cli import doctor
from cli.ui_components import (
    build_examples_table,
    build_principle_panel,
    print_banner,
    print_example_heading,
    print_section_title,
)
from core.config import AppSettings
from core.domain.principles import Principle
from core.errors import PlaygroundError
from core.logging_setup import configure_logging
from core.services.playground import PlaygroundHooks, list_examples, run_playground, select_examples

app = typer.Typer(
    no_args_is_help=True,
    help="Problem/solution examples of the five SOLID principles.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Override SOLID_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    overrides = {"log_level": log_level} if log_level else {}
    try:
        settings = AppSettings(**overrides)
    except ValidationError as exc:
        raise typer.BadParameter(
            f"unsupported log level: {log_level}", param_hint="--log-level"
        ) from exc
    configure_logging(settings.log_level)


@app.command(name="list")
def list_command(
    principles: list[Principle] | None = typer.Argument(
        None,
        case_sensitive=False,
        help="Only list examples of these principles.",
    ),
) -> None:
    """List the registered examples."""

    _console.print(build_examples_table(list_examples(principles)))


@app.command()
def principles() -> None:
    """Show the statement of every principle."""

    for principle in Principle.ordered():
        _console.print(build_principle_panel(principle))


@app.command(name="run")
def run_command(
    principles: list[Principle] | None = typer.Argument(
        None,
        case_sensitive=False,
        help="Principles to run (default: all).",
    ),
    example: str | None = typer.Option(
        None,
        "--example",
        "-e",
        help="Run a single example by slug (see `list`).",
    ),
    problem: bool | None = typer.Option(
        None,
        "--problem/--no-problem",
        help="Show the violating implementation first (default: SOLID_SHOW_PROBLEMS).",
    ),
    seed: int | None = typer.Option(
        None,
        "--seed",
        help="Seed the random source so loyalty coin flips are reproducible.",
    ),
    export_json: Path | None = typer.Option(
        None,
        "--export-json",
        help="Write the transcripts to this JSON file (relative paths go under SOLID_REPORTS_DIR).",
    ),
    export_html: Path | None = typer.Option(
        None,
        "--export-html",
        help="Write the transcripts to this HTML file (relative paths go under SOLID_REPORTS_DIR).",
    ),
    quiet_banner: bool = typer.Option(False, "--quiet-banner", help="Do not print the banner."),
) -> None:
    """Run examples: the problem first, then the solution."""

    overrides: dict[str, object] = {}
    if seed is not None:
        overrides["seed"] = seed
    settings = AppSettings(**overrides)

    try:
        selected = select_examples(principles, example)
    except PlaygroundError as exc:
        raise typer.BadParameter(str(exc), param_hint="--example") from exc

    if not quiet_banner:
        print_banner(_console)

    hooks = PlaygroundHooks(
        principle_start=lambda p: _console.print(build_principle_panel(p)),
        example_start=lambda e: print_example_heading(_console, e),
        section_start=lambda _e, section: print_section_title(_console, section),
    )
    report = run_playground(
        selected,
        sink=ConsoleSink(_console),
        settings=settings,
        include_problem=problem,
        hooks=hooks,
    )

    if export_json:
        path = export_report_json(
            report=report, output_path=settings.resolve_report_path(export_json)
        )
        _console.print(f"[green]JSON saved to:[/green] {path}")
    if export_html:
        path = export_report_html(
            report=report, output_path=settings.resolve_report_path(export_html)
        )
        _console.print(f"[green]HTML saved to:[/green] {path}")


def run() -> None:
    app()
