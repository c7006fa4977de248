"""Botones (ejemplo Interface Segregation)."""

from __future__ import annotations

from adapters.sinks import ConsoleSink
from core.interfaces.gestures import DoubleTapProtocol, LongPressProtocol, TapProtocol
from core.interfaces.output import OutputSink


class SuperButton(TapProtocol, DoubleTapProtocol, LongPressProtocol):
    def __init__(self, sink: OutputSink | None = None) -> None:
        self._sink = sink or ConsoleSink()

    def did_tap(self) -> None:
        self._sink.emit("Tap")

    def did_double_tap(self) -> None:
        self._sink.emit("Double Tap")

    def did_long_press(self) -> None:
        self._sink.emit("Long Press")


class PoorButton(TapProtocol):
    """Supports a single tap and nothing else."""

    def __init__(self, sink: OutputSink | None = None) -> None:
        self._sink = sink or ConsoleSink()

    def did_tap(self) -> None:
        self._sink.emit("Tap")
