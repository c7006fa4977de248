"""Dispositivos de oficina (ejemplo Interface Segregation).

Cada dispositivo implementa solo los protocolos que soporta: ningún
`fax()`/`scan()` vacío en máquinas que no envían fax ni escanean.
"""

from __future__ import annotations

from adapters.sinks import ConsoleSink
from core.interfaces.devices import FaxProtocol, PrintProtocol, ScanProtocol
from core.interfaces.output import OutputSink


class XeroxWorkCenter(PrintProtocol, ScanProtocol, FaxProtocol):
    """Full multi-function device."""

    def __init__(self, sink: OutputSink | None = None) -> None:
        self._sink = sink or ConsoleSink()

    def print_something(self) -> None:
        self._sink.emit("Print Something")

    def get_print_spool_details(self) -> None:
        self._sink.emit("Print Spool Details")

    def scan(self) -> None:
        self._sink.emit("Scan")

    def scan_photo(self) -> None:
        self._sink.emit("Scan Photo")

    def fax(self) -> None:
        self._sink.emit("Send Fax")

    def internet_fax(self) -> None:
        self._sink.emit("Send Internet Fax")


class HPPrinterNScanner(PrintProtocol, ScanProtocol):
    def __init__(self, sink: OutputSink | None = None) -> None:
        self._sink = sink or ConsoleSink()

    def print_something(self) -> None:
        self._sink.emit("Print Something")

    def get_print_spool_details(self) -> None:
        self._sink.emit("Print Spool Details")

    def scan(self) -> None:
        self._sink.emit("Scan")

    def scan_photo(self) -> None:
        self._sink.emit("Scan Photo")


class CanonPrinter(PrintProtocol):
    def __init__(self, sink: OutputSink | None = None) -> None:
        self._sink = sink or ConsoleSink()

    def print_something(self) -> None:
        self._sink.emit("Print Something")

    def get_print_spool_details(self) -> None:
        self._sink.emit("Print Spool Details")
