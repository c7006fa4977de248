"""Doctor commands for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from adapters.sinks import RecordingSink
from core.config import AppSettings, get_user_env_file
from core.services.playground import list_examples, run_example

app = typer.Typer(
    invoke_without_command=True,
    help="Environment diagnostics and configuration checks.",
)

_console = Console()


def _smoke_check(settings: AppSettings) -> list[tuple[str, bool, str]]:
    """Run every example into a recorder and report how each one went."""

    rng = settings.build_random()
    results: list[tuple[str, bool, str]] = []
    for example in list_examples():
        try:
            transcript = run_example(
                example,
                sink=RecordingSink(),
                settings=settings,
                rng=rng,
                include_problem=True,
            )
        except Exception as exc:
            results.append((example.slug, False, f"{type(exc).__name__}: {exc}"))
            continue
        lines = len(transcript.problem) + len(transcript.solution)
        results.append((example.slug, True, f"{lines} line(s)"))
    return results


@app.command()
def run() -> None:
    """Smoke-run every registered example and show the outcome."""

    settings = AppSettings()

    table = Table(title="SOLID Playground Doctor")
    table.add_column("Example", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    failures = 0
    for slug, ok, detail in _smoke_check(settings):
        failures += 0 if ok else 1
        table.add_row(slug, "OK" if ok else "FAIL", detail)

    _console.print(table)

    if failures:
        _console.print(f"\n[red]{failures} example(s) failed.[/red]")
        raise typer.Exit(code=1)


@app.command()
def config() -> None:
    """Show the effective configuration and where it is read from."""

    settings = AppSettings()

    table = Table(title="Effective configuration")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")
    for name, value in settings.model_dump().items():
        table.add_row(f"SOLID_{name.upper()}", "unset" if value is None else str(value))

    _console.print(table)
    _console.print(f"[dim]User config file:[/dim] {get_user_env_file()}")


@app.callback()
def doctor(ctx: typer.Context) -> None:
    """Without a subcommand: show the configuration, then smoke-run every example."""

    if ctx.invoked_subcommand is None:
        config()
        run()
