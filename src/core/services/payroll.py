"""Tax calculation (Single Responsibility example)."""

from __future__ import annotations

from core.domain.models import Employee
from core.interfaces.output import OutputSink


class TaxCalculator:
    """Computes and reports employee tax; changes only when tax rules change."""

    def __init__(self, sink: OutputSink) -> None:
        self._sink = sink

    def calculate_tax(self, employee: Employee) -> float:
        tax = employee.salary * employee.employee_type.tax_percentage
        self._sink.emit(f"The {employee.employee_type.label()} employee tax is {tax}")
        return tax
