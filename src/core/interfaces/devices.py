"""Contratos de dispositivos de oficina (ejemplo Interface Segregation).

Por qué tres Protocol:
- Imprimir, escanear y enviar fax son capacidades cohesivas por separado.
- Cada dispositivo declara solo las que cumple: no hay métodos vacíos.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PrintProtocol(Protocol):
    def print_something(self) -> None:
        ...

    def get_print_spool_details(self) -> None:
        ...


@runtime_checkable
class ScanProtocol(Protocol):
    def scan(self) -> None:
        ...

    def scan_photo(self) -> None:
        ...


@runtime_checkable
class FaxProtocol(Protocol):
    def fax(self) -> None:
        ...

    def internet_fax(self) -> None:
        ...
