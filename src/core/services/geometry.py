"""Area calculation over any `Shape`.

Adding a shape never touches this module: the calculator only asks the
shape for its area.
"""

from __future__ import annotations

from core.interfaces.output import OutputSink
from core.interfaces.shapes import Shape


class AreaCalculator:
    def __init__(self, sink: OutputSink) -> None:
        self._sink = sink

    def area(self, shape: Shape) -> float:
        return shape.area()

    def print_area(self, shape: Shape) -> float:
        value = self.area(shape)
        self._sink.emit(str(value))
        return value
