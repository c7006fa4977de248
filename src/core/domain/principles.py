"""Los cinco principios SOLID.

Por qué en el dominio:
- CLI, catálogo de ejemplos y exportadores comparten una única fuente de
  verdad sin importarse entre sí.
"""

from __future__ import annotations

from enum import Enum


class Principle(str, Enum):
    """SOLID principles, keyed by their usual acronym."""

    SRP = "srp"
    OCP = "ocp"
    LSP = "lsp"
    ISP = "isp"
    DIP = "dip"

    @classmethod
    def ordered(cls) -> list["Principle"]:
        """Return the principles in S-O-L-I-D order."""

        return [cls.SRP, cls.OCP, cls.LSP, cls.ISP, cls.DIP]

    def label(self) -> str:
        return _LABELS[self]

    def statement(self) -> str:
        """The principle's canonical one-line statement."""

        return _STATEMENTS[self]


_LABELS: dict[Principle, str] = {
    Principle.SRP: "Single Responsibility Principle",
    Principle.OCP: "Open-Closed Principle",
    Principle.LSP: "Liskov Substitution Principle",
    Principle.ISP: "Interface Segregation Principle",
    Principle.DIP: "Dependency Inversion Principle",
}

_STATEMENTS: dict[Principle, str] = {
    Principle.SRP: "There should never be more than one reason for a class to change.",
    Principle.OCP: (
        "Software entities (classes, modules, functions, etc.) should be open "
        "for extension, but closed for modification."
    ),
    Principle.LSP: (
        "Functions that use pointers or references to base classes must be able "
        "to use objects of derived classes without knowing it."
    ),
    Principle.ISP: "Clients should not be forced to depend upon interfaces that they do not use.",
    Principle.DIP: (
        "High level modules should not depend upon low level modules. Both "
        "should depend upon abstractions. Abstractions should not depend upon "
        "details. Details should depend upon abstractions."
    ),
}
