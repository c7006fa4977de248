"""Dependency Inversion examples: ecommerce catalog and storage handler."""

from __future__ import annotations

from adapters.storage import DatabaseManager, FileSystemManager, ProductFactory
from core.domain.principles import Principle
from core.legacy.dip import LegacyProductCatalog, LegacyStorageHandler
from core.services.examples.base import Example, ExampleContext
from core.services.storage_handler import EcommerceMainApplication, Handler


def ecommerce_problem(ctx: ExampleContext) -> None:
    LegacyProductCatalog(ctx.sink).list_all_products()


def ecommerce_solution(ctx: ExampleContext) -> None:
    EcommerceMainApplication(ProductFactory(), ctx.sink).start()


def storage_problem(ctx: ExampleContext) -> None:
    LegacyStorageHandler(ctx.sink).handle()


def storage_solution(ctx: ExampleContext) -> None:
    for storage in (FileSystemManager(ctx.sink), DatabaseManager(ctx.sink)):
        Handler(storage).handle()


EXAMPLES = (
    Example(
        principle=Principle.DIP,
        slug="ecommerce",
        title="Ecommerce Application Example",
        problem=ecommerce_problem,
        solution=ecommerce_solution,
    ),
    Example(
        principle=Principle.DIP,
        slug="storage",
        title="Storage Example",
        problem=storage_problem,
        solution=storage_solution,
    ),
)
