from __future__ import annotations

import math
import random

import pytest

from adapters.customers import (
    HealthInsuranceCustomerProfile,
    LifeInsuranceCustomerProfile,
    VehicleInsuranceCustomerProfile,
)
from adapters.shapes import Circle, Rectangle, Square
from adapters.sinks import RecordingSink
from core.legacy.ocp import LegacyAreaCalculator, LegacyCircle, LegacyRectangle
from core.services.geometry import AreaCalculator
from core.services.insurance import InsurancePremiumDiscountCalculator

PROFILE_TYPES = (
    HealthInsuranceCustomerProfile,
    VehicleInsuranceCustomerProfile,
    LifeInsuranceCustomerProfile,
)


def test_rectangle_area() -> None:
    assert Rectangle(width=10, height=10).area() == 100


def test_circle_area() -> None:
    assert Circle(radius=10).area() == pytest.approx(314.159, abs=1e-3)


def test_area_calculator_delegates_to_any_shape(sink: RecordingSink) -> None:
    calculator = AreaCalculator(sink)

    assert calculator.area(Square(side=3)) == 9
    assert calculator.print_area(Rectangle(width=10.0, height=10.0)) == 100.0
    assert sink.lines == ["100.0"]


def test_legacy_calculator_agrees_on_known_shapes() -> None:
    calculator = LegacyAreaCalculator()

    assert calculator.area(LegacyRectangle(width=10.0, height=10.0)) == 100.0
    assert calculator.area(LegacyCircle(radius=10.0)) == pytest.approx(math.pi * 100)


def test_legacy_calculator_yields_zero_for_unknown_kind() -> None:
    assert LegacyAreaCalculator().area(LegacyRectangle(width=2, height=2, kind="triangle")) == 0.0


@pytest.mark.parametrize("profile_type", PROFILE_TYPES)
def test_loyal_customer_of_any_line_gets_discount(profile_type, fixed_random) -> None:
    calculator = InsurancePremiumDiscountCalculator()

    assert calculator.calculate_premium_discount_percent(profile_type(fixed_random(0.1))) == 20
    assert calculator.calculate_premium_discount_percent(profile_type(fixed_random(0.9))) == 0


def test_discount_percent_is_configurable(fixed_random) -> None:
    calculator = InsurancePremiumDiscountCalculator(loyalty_discount_percent=35)

    assert calculator.calculate_premium_discount_percent(
        LifeInsuranceCustomerProfile(fixed_random(0.0))
    ) == 35


def test_seeded_profiles_are_reproducible() -> None:
    first = [HealthInsuranceCustomerProfile(random.Random(7)).is_loyal_customer() for _ in range(5)]
    second = [HealthInsuranceCustomerProfile(random.Random(7)).is_loyal_customer() for _ in range(5)]

    assert first == second


def test_new_profile_needs_no_calculator_change() -> None:
    class PetInsuranceCustomerProfile:
        def is_loyal_customer(self) -> bool:
            return True

    calculator = InsurancePremiumDiscountCalculator()

    assert calculator.calculate_premium_discount_percent(PetInsuranceCustomerProfile()) == 20
