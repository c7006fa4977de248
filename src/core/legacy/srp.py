"""Single Responsibility violations.

`LegacyEmployee` changes for attribute, persistence and tax reasons;
`LegacyHandler` owns transport, parsing and storage at once.
"""

from __future__ import annotations

from core.domain.models import EmployeeType
from core.interfaces.output import OutputSink


class LegacyEmployee:
    def __init__(
        self,
        id: int,
        name: str,
        salary: float,
        employee_type: EmployeeType,
        sink: OutputSink,
    ) -> None:
        self.id = id
        self.name = name
        self.salary = salary
        self.employee_type = employee_type
        self._sink = sink

    def save(self) -> None:
        self._sink.emit(f"Employee {self.name} is saved")

    def calculate_tax(self) -> float:
        tax = self.salary * self.employee_type.tax_percentage
        if self.employee_type is EmployeeType.FULL_TIME:
            self._sink.emit(f"The full time employee tax is {tax}")
        else:
            self._sink.emit(f"The contract employee tax is {tax}")
        return tax


class LegacyHandler:
    def __init__(self, sink: OutputSink) -> None:
        self._sink = sink

    def handle(self) -> None:
        data = self._request_data_to_api()
        values = self._parse(data)
        self._save_to_db(values)

    def _request_data_to_api(self) -> bytes:
        values = ["1", "2", "3"]
        return "-".join(values).encode("utf-8")

    def _parse(self, data: bytes) -> list[str]:
        return data.decode("utf-8").split("-")

    def _save_to_db(self, values: list[str]) -> None:
        self._sink.emit(f"saved {values}")
