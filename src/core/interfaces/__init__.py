"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from core.interfaces.customers import CustomerProfile
from core.interfaces.devices import FaxProtocol, PrintProtocol, ScanProtocol
from core.interfaces.gestures import DoubleTapProtocol, LongPressProtocol, TapProtocol
from core.interfaces.output import OutputSink
from core.interfaces.shapes import Shape
from core.interfaces.storage import ProductRepository, Storage

__all__ = [
    "CustomerProfile",
    "DoubleTapProtocol",
    "FaxProtocol",
    "LongPressProtocol",
    "OutputSink",
    "PrintProtocol",
    "ProductRepository",
    "ScanProtocol",
    "Shape",
    "Storage",
    "TapProtocol",
]
