"""High level modules of the Dependency Inversion examples.

Both depend on abstractions (`Storage`, `ProductRepository`) received at
construction time; neither imports a concrete storage.
"""

from __future__ import annotations

from typing import Protocol

from core.interfaces.output import OutputSink
from core.interfaces.storage import ProductRepository, Storage


class Handler:
    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    def handle(self) -> None:
        self._storage.save()


class ProductCatalog:
    def __init__(self, product_repository: ProductRepository, sink: OutputSink) -> None:
        self._product_repository = product_repository
        self._sink = sink

    def list_all_products(self) -> list[str]:
        names = self._product_repository.get_all_product_names()
        self._sink.emit(str(names))
        return names


class RepositoryFactory(Protocol):
    def create(self) -> ProductRepository:
        ...


class EcommerceMainApplication:
    """Wires the catalog to whatever repository the factory provides."""

    def __init__(self, factory: RepositoryFactory, sink: OutputSink) -> None:
        self._factory = factory
        self._sink = sink

    def start(self) -> list[str]:
        catalog = ProductCatalog(product_repository=self._factory.create(), sink=self._sink)
        return catalog.list_all_products()
