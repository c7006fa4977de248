"""Insurance premium discount (Open-Closed example)."""

from __future__ import annotations

from core.interfaces.customers import CustomerProfile

DEFAULT_LOYALTY_DISCOUNT_PERCENT = 20


class InsurancePremiumDiscountCalculator:
    """Grants a flat discount to loyal customers of any insurance line."""

    def __init__(self, loyalty_discount_percent: int = DEFAULT_LOYALTY_DISCOUNT_PERCENT) -> None:
        self._loyalty_discount_percent = loyalty_discount_percent

    def calculate_premium_discount_percent(self, customer: CustomerProfile) -> int:
        if customer.is_loyal_customer():
            return self._loyalty_discount_percent
        return 0
