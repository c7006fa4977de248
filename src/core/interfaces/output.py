"""Contrato de salida.

Por qué Protocol:
- Proveedores y coordinadores imprimen vía `OutputSink`, nunca con `print`.
- La consola se puede sustituir por un grabador en tests y exportaciones.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputSink(Protocol):
    """Destination for the human-readable lines an example produces."""

    def emit(self, message: str) -> None:
        ...
