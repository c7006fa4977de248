"""Productos con descuento (ejemplo Liskov Substitution).

"Tell, don't ask": el producto de la casa aplica su descuento extra dentro de
`get_discount`; quien lo usa nunca pregunta qué tipo de producto tiene.
"""

from __future__ import annotations

DEFAULT_DISCOUNT = 20.0
IN_HOUSE_MULTIPLIER = 1.5


class Product:
    def __init__(self, discount: float = DEFAULT_DISCOUNT) -> None:
        self._discount = discount

    def get_discount(self) -> float:
        return self._discount


class InHouseProduct(Product):
    def __init__(
        self,
        discount: float = DEFAULT_DISCOUNT,
        multiplier: float = IN_HOUSE_MULTIPLIER,
    ) -> None:
        super().__init__(discount)
        self._multiplier = multiplier

    def get_discount(self) -> float:
        # Derived on every call; repeated calls never compound the extra discount.
        return self._discount * self._multiplier
