"""Perfiles de cliente de seguros (ejemplo Open-Closed).

Por qué una fuente aleatoria inyectada:
- La lealtad es una moneda al aire; con `SOLID_SEED` la corrida es reproducible.
- Los tests fijan el resultado pasando un `random.Random` controlado.
"""

from __future__ import annotations

import random

from core.interfaces.customers import CustomerProfile


class _CoinFlipCustomerProfile(CustomerProfile):
    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def is_loyal_customer(self) -> bool:
        return self._rng.random() < 0.5


class HealthInsuranceCustomerProfile(_CoinFlipCustomerProfile):
    pass


class VehicleInsuranceCustomerProfile(_CoinFlipCustomerProfile):
    pass


class LifeInsuranceCustomerProfile(_CoinFlipCustomerProfile):
    """Added after the calculator shipped; the calculator did not change."""
