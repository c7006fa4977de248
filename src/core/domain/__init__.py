"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2, enums).
- El dominio no conoce la consola, la CLI ni los exportadores.
"""

from core.domain.models import (
    Employee,
    EmployeeType,
    ExampleTranscript,
    PlaygroundReport,
    ProductCategory,
)
from core.domain.principles import Principle

__all__ = [
    "Employee",
    "EmployeeType",
    "ExampleTranscript",
    "PlaygroundReport",
    "Principle",
    "ProductCategory",
]
