from __future__ import annotations

from adapters.sinks import RecordingSink
from adapters.storage import DatabaseManager, FileSystemManager, ProductFactory, SQLProductRepository
from core.interfaces.storage import ProductRepository, Storage
from core.legacy.dip import LegacyProductCatalog, LegacyStorageHandler
from core.services.storage_handler import EcommerceMainApplication, Handler, ProductCatalog


class InMemoryStorage:
    def __init__(self) -> None:
        self.saved = 0

    def save(self) -> None:
        self.saved += 1


class StubRepository:
    def get_all_product_names(self) -> list[str]:
        return ["Kettle"]


class StubFactory:
    def create(self) -> ProductRepository:
        return StubRepository()


def test_handler_uses_injected_storage(sink: RecordingSink) -> None:
    Handler(FileSystemManager(sink)).handle()
    Handler(DatabaseManager(sink)).handle()

    assert sink.lines == [
        "Save something using File System",
        "Save something using database",
    ]


def test_handler_accepts_any_storage() -> None:
    storage = InMemoryStorage()
    Handler(storage).handle()

    assert isinstance(storage, Storage)
    assert storage.saved == 1


def test_factory_provides_sql_repository() -> None:
    repository = ProductFactory().create()

    assert isinstance(repository, SQLProductRepository)
    assert repository.get_all_product_names() == ["TV", "Oven"]


def test_catalog_lists_from_injected_repository(sink: RecordingSink) -> None:
    names = ProductCatalog(StubRepository(), sink).list_all_products()

    assert names == ["Kettle"]
    assert sink.lines == ["['Kettle']"]


def test_application_wires_factory_product(sink: RecordingSink) -> None:
    assert EcommerceMainApplication(ProductFactory(), sink).start() == ["TV", "Oven"]
    assert EcommerceMainApplication(StubFactory(), sink).start() == ["Kettle"]
    assert sink.lines == ["['TV', 'Oven']", "['Kettle']"]


def test_legacy_modules_produce_same_output(sink: RecordingSink) -> None:
    LegacyProductCatalog(sink).list_all_products()
    LegacyStorageHandler(sink).handle()

    assert sink.lines == ["['TV', 'Oven']", "Save something using File System"]
