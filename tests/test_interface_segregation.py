from __future__ import annotations

import pytest

from adapters.devices import CanonPrinter, HPPrinterNScanner, XeroxWorkCenter
from adapters.gestures import PoorButton, SuperButton
from adapters.sinks import RecordingSink
from core.interfaces.devices import FaxProtocol, PrintProtocol, ScanProtocol
from core.interfaces.gestures import DoubleTapProtocol, LongPressProtocol, TapProtocol
from core.legacy.isp import LegacyCanonPrinter, LegacyPoorButton


def _public_methods(cls: type) -> set[str]:
    return {
        name
        for name in dir(cls)
        if not name.startswith("_") and callable(getattr(cls, name))
    }


def _contract(*protocols: type) -> set[str]:
    names: set[str] = set()
    for protocol in protocols:
        names |= _public_methods(protocol)
    return names


@pytest.mark.parametrize(
    ("device_type", "protocols"),
    [
        (XeroxWorkCenter, (PrintProtocol, ScanProtocol, FaxProtocol)),
        (HPPrinterNScanner, (PrintProtocol, ScanProtocol)),
        (CanonPrinter, (PrintProtocol,)),
        (SuperButton, (TapProtocol, DoubleTapProtocol, LongPressProtocol)),
        (PoorButton, (TapProtocol,)),
    ],
)
def test_no_method_outside_declared_contracts(device_type, protocols) -> None:
    assert _public_methods(device_type) == _contract(*protocols)


def test_canon_printer_only_prints(sink: RecordingSink) -> None:
    canon = CanonPrinter(sink)

    assert isinstance(canon, PrintProtocol)
    assert not isinstance(canon, ScanProtocol)
    assert not isinstance(canon, FaxProtocol)

    canon.print_something()
    canon.get_print_spool_details()
    assert sink.lines == ["Print Something", "Print Spool Details"]


def test_hp_cannot_fax() -> None:
    hp = HPPrinterNScanner(RecordingSink())

    assert isinstance(hp, ScanProtocol)
    assert not isinstance(hp, FaxProtocol)


def test_xerox_supports_everything(sink: RecordingSink) -> None:
    xerox = XeroxWorkCenter(sink)
    xerox.scan_photo()
    xerox.fax()
    xerox.internet_fax()

    assert sink.lines == ["Scan Photo", "Send Fax", "Send Internet Fax"]


def test_poor_button_only_taps(sink: RecordingSink) -> None:
    button = PoorButton(sink)

    assert isinstance(button, TapProtocol)
    assert not isinstance(button, DoubleTapProtocol)
    assert not isinstance(button, LongPressProtocol)
    button.did_tap()
    assert sink.lines == ["Tap"]


def test_legacy_devices_carry_empty_methods(sink: RecordingSink) -> None:
    canon = LegacyCanonPrinter(sink)
    canon.scan()
    canon.fax()
    LegacyPoorButton(sink).did_long_press()

    assert sink.lines == []
    assert "fax" in _public_methods(LegacyCanonPrinter)
