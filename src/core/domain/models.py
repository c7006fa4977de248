"""Modelos del dominio (Pydantic v2).

Nota:
- Describen *qué* manejan los ejemplos (empleados, transcripciones), no
  *cómo* se imprimen o exportan.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.principles import Principle


class EmployeeType(str, Enum):
    """Kind of employment contract, which drives the tax rate."""

    FULL_TIME = "full_time"
    CONTRACT = "contract"

    @property
    def tax_percentage(self) -> float:
        return _TAX_PERCENTAGES[self]

    def label(self) -> str:
        """Human readable label used in tax messages ("full time", "contract")."""

        return self.value.replace("_", " ")


_TAX_PERCENTAGES: dict[EmployeeType, float] = {
    EmployeeType.FULL_TIME: 0.2,
    EmployeeType.CONTRACT: 0.3,
}


class ProductCategory(str, Enum):
    """Category tag carried by products in the Liskov examples."""

    STANDARD = "standard"
    IN_HOUSE = "in_house"


class Employee(BaseModel):
    """An employee record.

    Holds attributes only: tax calculation and persistence live in their own
    units (`TaxCalculator`, `EmployeeRepository`).
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=0, description="Employee identifier.")
    name: str = Field(..., min_length=1, max_length=128, description="Display name.")
    salary: float = Field(..., ge=0, description="Gross salary.")
    employee_type: EmployeeType = Field(
        ...,
        description="Contract kind; determines the tax percentage.",
    )


class ExampleTranscript(BaseModel):
    """Console lines produced by one example run."""

    principle: Principle = Field(..., description="Principle the example illustrates.")
    slug: str = Field(..., min_length=1, max_length=64, description="Catalog identifier.")
    title: str = Field(..., min_length=1, description="Example heading.")
    problem: list[str] = Field(
        default_factory=list,
        description="Lines printed by the violating implementation.",
    )
    solution: list[str] = Field(
        default_factory=list,
        description="Lines printed by the corrected implementation.",
    )


class PlaygroundReport(BaseModel):
    """Aggregate of one `run` invocation, used by the exporters."""

    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Moment the report was produced (UTC).",
    )
    seed: int | None = Field(
        default=None,
        description="Seed of the random source, when one was fixed.",
    )
    transcripts: list[ExampleTranscript] = Field(default_factory=list)

    def principles(self) -> list[Principle]:
        """Principles covered by the report, in S-O-L-I-D order."""

        present = {t.principle for t in self.transcripts}
        return [p for p in Principle.ordered() if p in present]
