"""Contrato de figuras.

Compartido por la calculadora de áreas (Open-Closed) y el ejemplo de
polígonos (Liskov): rectángulo, cuadrado y círculo son hermanos detrás de
`Shape`, no subclases entre sí.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Shape(Protocol):
    def area(self) -> float:
        """Surface of the shape."""

        ...
