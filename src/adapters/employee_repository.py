"""Persistencia de empleados (ejemplo Single Responsibility).

Guardar es un asunto de almacenamiento: no sabe nada de impuestos.
"""

from __future__ import annotations

from adapters.sinks import ConsoleSink
from core.domain.models import Employee
from core.interfaces.output import OutputSink


class EmployeeRepository:
    def __init__(self, sink: OutputSink | None = None) -> None:
        self._sink = sink or ConsoleSink()

    def save(self, employee: Employee) -> None:
        self._sink.emit(f"Employee {employee.name} is saved")
