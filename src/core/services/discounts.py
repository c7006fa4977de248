"""Product discount listing (Liskov Substitution example)."""

from __future__ import annotations

from typing import Iterable

from adapters.products import Product
from core.interfaces.output import OutputSink


class ProductUtils:
    """Reports the discount of every product without asking what it is."""

    def __init__(self, products: Iterable[Product], sink: OutputSink) -> None:
        self._products = list(products)
        self._sink = sink

    def print_discounts(self) -> list[float]:
        discounts: list[float] = []
        for product in self._products:
            discount = product.get_discount()
            self._sink.emit(str(discount))
            discounts.append(discount)
        return discounts
