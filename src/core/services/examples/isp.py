"""Interface Segregation examples: office devices and gestures.

The problem scripts call every method of the fat protocol, so the empty
implementations show up as missing lines in the output.
"""

from __future__ import annotations

from adapters.devices import CanonPrinter, HPPrinterNScanner, XeroxWorkCenter
from adapters.gestures import PoorButton, SuperButton
from core.domain.principles import Principle
from core.legacy.isp import (
    LegacyCanonPrinter,
    LegacyHPPrinterNScanner,
    LegacyPoorButton,
    LegacySuperButton,
    LegacyXeroxWorkCenter,
    MultiFunction,
)
from core.services.examples.base import Example, ExampleContext


def _use_multi_function(device: MultiFunction) -> None:
    device.print_something()
    device.get_print_spool_details()
    device.scan()
    device.scan_photo()
    device.fax()
    device.internet_fax()


def devices_problem(ctx: ExampleContext) -> None:
    for device in (
        LegacyXeroxWorkCenter(ctx.sink),
        LegacyHPPrinterNScanner(ctx.sink),
        LegacyCanonPrinter(ctx.sink),
    ):
        _use_multi_function(device)


def devices_solution(ctx: ExampleContext) -> None:
    xerox = XeroxWorkCenter(ctx.sink)
    hp = HPPrinterNScanner(ctx.sink)
    canon = CanonPrinter(ctx.sink)

    for printer in (xerox, hp, canon):
        printer.print_something()
        printer.get_print_spool_details()
    for scanner in (xerox, hp):
        scanner.scan()
        scanner.scan_photo()
    xerox.fax()
    xerox.internet_fax()


def gestures_problem(ctx: ExampleContext) -> None:
    for button in (LegacySuperButton(ctx.sink), LegacyPoorButton(ctx.sink)):
        button.did_tap()
        button.did_double_tap()
        button.did_long_press()


def gestures_solution(ctx: ExampleContext) -> None:
    super_button = SuperButton(ctx.sink)
    poor_button = PoorButton(ctx.sink)

    for tappable in (super_button, poor_button):
        tappable.did_tap()
    super_button.did_double_tap()
    super_button.did_long_press()


EXAMPLES = (
    Example(
        principle=Principle.ISP,
        slug="printer-scanner-fax",
        title="Printer Scanner Fax Machine Example",
        problem=devices_problem,
        solution=devices_solution,
    ),
    Example(
        principle=Principle.ISP,
        slug="gesture",
        title="Gesture Example",
        problem=gestures_problem,
        solution=gestures_solution,
    ),
)
