"""Figuras concretas.

Cada figura implementa `Shape` por separado. `Square` no hereda de
`Rectangle`: sobrescribir los setters del rectángulo para igualar lados es lo
que rompe la sustitución.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from core.interfaces.shapes import Shape


@dataclass(frozen=True)
class Rectangle(Shape):
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class Square(Shape):
    side: float

    def area(self) -> float:
        return self.side**2


@dataclass(frozen=True)
class Circle(Shape):
    radius: float

    def area(self) -> float:
        return math.pi * self.radius * self.radius
