"""Destinos de salida.

- `ConsoleSink`: destino por defecto (consola Rich).
- `RecordingSink`: guarda las líneas en memoria para transcripciones,
  exportaciones y tests.
"""

from __future__ import annotations

from rich.console import Console

from core.interfaces.output import OutputSink


class ConsoleSink(OutputSink):
    """Prints each line on a rich `Console`."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def emit(self, message: str) -> None:
        # Example output contains brackets (lists), which rich would read as markup.
        self._console.print(message, markup=False)


class RecordingSink(OutputSink):
    """Collects emitted lines, optionally forwarding them to another sink."""

    def __init__(self, forward_to: OutputSink | None = None) -> None:
        self._forward_to = forward_to
        self.lines: list[str] = []

    def emit(self, message: str) -> None:
        self.lines.append(message)
        if self._forward_to is not None:
            self._forward_to.emit(message)

    def drain(self) -> list[str]:
        """Return the recorded lines and start a fresh recording."""

        lines, self.lines = self.lines, []
        return lines
