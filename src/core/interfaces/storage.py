"""Contratos de persistencia de los ejemplos de Dependency Inversion."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Storage(Protocol):
    """Anything able to save "something"; the handler does not care where."""

    def save(self) -> None:
        ...


@runtime_checkable
class ProductRepository(Protocol):
    """Read side of a product store."""

    def get_all_product_names(self) -> list[str]:
        ...
