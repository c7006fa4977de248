"""Dependency Inversion violations.

The high level modules build their low level collaborators themselves, so
switching storage means editing the handler.
"""

from __future__ import annotations

from adapters.storage import FileSystemManager, SQLProductRepository
from core.interfaces.output import OutputSink


class LegacyProductCatalog:
    def __init__(self, sink: OutputSink) -> None:
        self._sink = sink

    def list_all_products(self) -> list[str]:
        repository = SQLProductRepository()
        names = repository.get_all_product_names()
        self._sink.emit(str(names))
        return names


class LegacyStorageHandler:
    def __init__(self, sink: OutputSink) -> None:
        self._file_manager = FileSystemManager(sink)

    def handle(self) -> None:
        self._file_manager.save()
