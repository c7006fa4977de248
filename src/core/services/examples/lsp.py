"""Liskov Substitution examples: product discount and polygon."""

from __future__ import annotations

from adapters.products import InHouseProduct, Product
from adapters.shapes import Rectangle, Square
from core.domain.principles import Principle
from core.legacy.lsp import (
    LegacyInHouseProduct,
    LegacyPolygonAreaCalculator,
    LegacyProduct,
    LegacyProductUtils,
    LegacyRectangle,
    LegacySquare,
)
from core.services.discounts import ProductUtils
from core.services.examples.base import Example, ExampleContext
from core.services.geometry import AreaCalculator


def product_discount_problem(ctx: ExampleContext) -> None:
    LegacyProductUtils([LegacyProduct(), LegacyInHouseProduct()], ctx.sink).print_discounts()


def product_discount_solution(ctx: ExampleContext) -> None:
    products = [
        Product(),
        InHouseProduct(multiplier=ctx.settings.in_house_discount_multiplier),
    ]
    ProductUtils(products, ctx.sink).print_discounts()


def polygon_problem(ctx: ExampleContext) -> None:
    calculator = LegacyPolygonAreaCalculator(ctx.sink)
    calculator.print_area(LegacyRectangle())
    calculator.print_area(LegacySquare())


def polygon_solution(ctx: ExampleContext) -> None:
    calculator = AreaCalculator(ctx.sink)
    calculator.print_area(Rectangle(width=2.0, height=5.0))
    calculator.print_area(Square(side=2.0))


EXAMPLES = (
    Example(
        principle=Principle.LSP,
        slug="product-discount",
        title="Product Discount Example",
        problem=product_discount_problem,
        solution=product_discount_solution,
    ),
    Example(
        principle=Principle.LSP,
        slug="polygon",
        title="Polygon Example",
        problem=polygon_problem,
        solution=polygon_solution,
    ),
)
