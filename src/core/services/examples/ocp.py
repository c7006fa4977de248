"""Open-Closed examples: insurance premium discount and area calculator."""

from __future__ import annotations

from adapters.customers import (
    HealthInsuranceCustomerProfile,
    LifeInsuranceCustomerProfile,
    VehicleInsuranceCustomerProfile,
)
from adapters.shapes import Circle, Rectangle
from core.domain.principles import Principle
from core.legacy.ocp import (
    LegacyAreaCalculator,
    LegacyCircle,
    LegacyHealthInsuranceCustomerProfile,
    LegacyInsurancePremiumDiscountCalculator,
    LegacyRectangle,
    LegacyVehicleInsuranceCustomerProfile,
)
from core.services.examples.base import Example, ExampleContext
from core.services.geometry import AreaCalculator
from core.services.insurance import InsurancePremiumDiscountCalculator


def insurance_problem(ctx: ExampleContext) -> None:
    calculator = LegacyInsurancePremiumDiscountCalculator()
    health = LegacyHealthInsuranceCustomerProfile(ctx.rng)
    vehicle = LegacyVehicleInsuranceCustomerProfile(ctx.rng)
    ctx.sink.emit(str(calculator.calculate_premium_discount_percent(health)))
    ctx.sink.emit(str(calculator.calculate_vehicle_premium_discount_percent(vehicle)))


def insurance_solution(ctx: ExampleContext) -> None:
    calculator = InsurancePremiumDiscountCalculator(ctx.settings.loyalty_discount_percent)
    profiles = (
        HealthInsuranceCustomerProfile(ctx.rng),
        VehicleInsuranceCustomerProfile(ctx.rng),
        LifeInsuranceCustomerProfile(ctx.rng),
    )
    for profile in profiles:
        ctx.sink.emit(str(calculator.calculate_premium_discount_percent(profile)))


def area_problem(ctx: ExampleContext) -> None:
    calculator = LegacyAreaCalculator()
    ctx.sink.emit(str(calculator.area(LegacyRectangle(width=10.0, height=10.0))))
    ctx.sink.emit(str(calculator.area(LegacyCircle(radius=10.0))))


def area_solution(ctx: ExampleContext) -> None:
    calculator = AreaCalculator(ctx.sink)
    calculator.print_area(Rectangle(width=10.0, height=10.0))
    calculator.print_area(Circle(radius=10.0))


EXAMPLES = (
    Example(
        principle=Principle.OCP,
        slug="insurance-discount",
        title="Insurance Premium Discount calculator Example",
        problem=insurance_problem,
        solution=insurance_solution,
    ),
    Example(
        principle=Principle.OCP,
        slug="area-calculator",
        title="Area calculator Example",
        problem=area_problem,
        solution=area_solution,
    ),
)
