"""Interface Segregation violations.

Fat, low cohesion protocols force simple devices and buttons to carry empty
method implementations.
"""

from __future__ import annotations

from typing import Protocol

from core.interfaces.output import OutputSink


class MultiFunction(Protocol):
    def print_something(self) -> None: ...

    def get_print_spool_details(self) -> None: ...

    def scan(self) -> None: ...

    def scan_photo(self) -> None: ...

    def fax(self) -> None: ...

    def internet_fax(self) -> None: ...


class LegacyXeroxWorkCenter(MultiFunction):
    def __init__(self, sink: OutputSink) -> None:
        self._sink = sink

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


class LegacyHPPrinterNScanner(MultiFunction):
    def __init__(self, sink: OutputSink) -> None:
        self._sink = sink

    def print_something(self) -> None:
        self._sink.emit("Print Something")

    def get_print_spool_details(self) -> None:
        self._sink.emit("Print Spool Details")

    def scan(self) -> None:
        self._sink.emit("Scan")

    def scan_photo(self) -> None:
        self._sink.emit("Scan Photo")

    def fax(self) -> None:
        pass

    def internet_fax(self) -> None:
        pass


class LegacyCanonPrinter(MultiFunction):
    def __init__(self, sink: OutputSink) -> None:
        self._sink = sink

    def print_something(self) -> None:
        self._sink.emit("Print Something")

    def get_print_spool_details(self) -> None:
        self._sink.emit("Print Spool Details")

    def scan(self) -> None:
        pass

    def scan_photo(self) -> None:
        pass

    def fax(self) -> None:
        pass

    def internet_fax(self) -> None:
        pass


class GestureProtocol(Protocol):
    def did_tap(self) -> None: ...

    def did_double_tap(self) -> None: ...

    def did_long_press(self) -> None: ...


class LegacySuperButton(GestureProtocol):
    def __init__(self, sink: OutputSink) -> None:
        self._sink = sink

    def did_tap(self) -> None:
        self._sink.emit("Tap")

    def did_double_tap(self) -> None:
        self._sink.emit("Double Tap")

    def did_long_press(self) -> None:
        self._sink.emit("Long Press")


class LegacyPoorButton(GestureProtocol):
    def __init__(self, sink: OutputSink) -> None:
        self._sink = sink

    def did_tap(self) -> None:
        self._sink.emit("Tap")

    def did_double_tap(self) -> None:
        pass

    def did_long_press(self) -> None:
        pass
