"""Adaptadores de almacenamiento y repositorio de productos (Dependency Inversion).

Son los detalles de bajo nivel: dependen de `Storage` y `ProductRepository`.
Handlers y catálogos nunca los importan.
"""

from __future__ import annotations

from adapters.sinks import ConsoleSink
from core.interfaces.output import OutputSink
from core.interfaces.storage import ProductRepository, Storage


class FileSystemManager(Storage):
    def __init__(self, sink: OutputSink | None = None) -> None:
        self._sink = sink or ConsoleSink()

    def save(self) -> None:
        self._sink.emit("Save something using File System")


class DatabaseManager(Storage):
    def __init__(self, sink: OutputSink | None = None) -> None:
        self._sink = sink or ConsoleSink()

    def save(self) -> None:
        self._sink.emit("Save something using database")


class SQLProductRepository(ProductRepository):
    """Product names backed by "SQL" (a fixed list in this playground)."""

    _products = ("TV", "Oven")

    def get_all_product_names(self) -> list[str]:
        return list(self._products)


class ProductFactory:
    """Composition root for product repositories.

    The only place that knows which concrete repository the application uses.
    """

    def create(self) -> ProductRepository:
        return SQLProductRepository()
