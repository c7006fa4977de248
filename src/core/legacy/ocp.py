"""Open-Closed violations.

Every new insurance line or shape forces an edit of the calculator.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass


class LegacyHealthInsuranceCustomerProfile:
    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    def is_loyal_customer(self) -> bool:
        return self._rng.random() < 0.5


class LegacyVehicleInsuranceCustomerProfile:
    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    def is_loyal_customer(self) -> bool:
        return self._rng.random() < 0.5


class LegacyInsurancePremiumDiscountCalculator:
    """One method per customer profile; a third line means a third method."""

    def calculate_premium_discount_percent(
        self, customer: LegacyHealthInsuranceCustomerProfile
    ) -> int:
        if customer.is_loyal_customer():
            return 20
        return 0

    def calculate_vehicle_premium_discount_percent(
        self, customer: LegacyVehicleInsuranceCustomerProfile
    ) -> int:
        if customer.is_loyal_customer():
            return 20
        return 0


@dataclass
class LegacyRectangle:
    width: float
    height: float
    kind: str = "rectangle"


@dataclass
class LegacyCircle:
    radius: float
    kind: str = "circle"


class LegacyAreaCalculator:
    """Switches on the shape kind; unknown kinds silently yield 0."""

    def area(self, shape: LegacyRectangle | LegacyCircle) -> float:
        area = 0.0
        if shape.kind == "rectangle":
            area = shape.width * shape.height
        elif shape.kind == "circle":
            area = math.pi * shape.radius * shape.radius
        return area
