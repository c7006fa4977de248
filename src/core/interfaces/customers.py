"""Contrato de perfil de cliente (ejemplo Open-Closed de seguros)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CustomerProfile(Protocol):
    """Minimal view of a customer the discount calculator needs.

    New insurance lines plug in by implementing this protocol; the
    calculator never changes.
    """

    def is_loyal_customer(self) -> bool:
        ...
