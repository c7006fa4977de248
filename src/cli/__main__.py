"""Executable entry point for `python -m cli` (run from `src/`)."""

from __future__ import annotations

from cli.main import run

if __name__ == "__main__":  # pragma: no cover - CLI entry
    run()
