"""Contratos de gestos (ejemplo Interface Segregation)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TapProtocol(Protocol):
    def did_tap(self) -> None:
        ...


@runtime_checkable
class DoubleTapProtocol(Protocol):
    def did_double_tap(self) -> None:
        ...


@runtime_checkable
class LongPressProtocol(Protocol):
    def did_long_press(self) -> None:
        ...
