"""Liskov Substitution violations.

`LegacyProductUtils` has to ask each product what it is before using it, and
`LegacySquare` changes the meaning of `LegacyRectangle`'s setters.
"""

from __future__ import annotations

from core.domain.models import ProductCategory
from core.interfaces.output import OutputSink


class LegacyProduct:
    category = ProductCategory.STANDARD

    def __init__(self) -> None:
        self.discount = 20.0

    def get_discount(self) -> float:
        return self.discount


class LegacyInHouseProduct(LegacyProduct):
    category = ProductCategory.IN_HOUSE

    def apply_extra_discount(self) -> None:
        self.discount = self.discount * 1.5


class LegacyProductUtils:
    def __init__(self, products: list[LegacyProduct], sink: OutputSink) -> None:
        self._products = products
        self._sink = sink

    def print_discounts(self) -> list[float]:
        discounts: list[float] = []
        for product in self._products:
            if product.category is ProductCategory.IN_HOUSE:
                product.apply_extra_discount()
            discounts.append(product.get_discount())
            self._sink.emit(str(discounts[-1]))
        return discounts


class LegacyRectangle:
    def __init__(self) -> None:
        self._width = 0.0
        self.length = 0.0

    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        self._width = value

    @property
    def area(self) -> float:
        return self.width * self.length


class LegacySquare(LegacyRectangle):
    @LegacyRectangle.width.setter
    def width(self, value: float) -> None:
        self._width = value
        self.length = value


class LegacyPolygonAreaCalculator:
    """Assumes rectangle semantics; a square silently breaks the result."""

    def __init__(self, sink: OutputSink) -> None:
        self._sink = sink

    def print_area(self, rectangle: LegacyRectangle) -> float:
        rectangle.length = 5
        rectangle.width = 2
        area = float(rectangle.area)
        self._sink.emit(str(area))
        return area
