"""Pasos de pedir, parsear y guardar (ejemplo Single Responsibility).

Cada paso tiene una sola razón de cambio: el transporte (`APIHandler`), la
codificación (`ParseHandler`) o el almacén (`DBHandler`).

Conversiones sin excepciones:
- Si falla la codificación se usa `b""`; si falla la decodificación, `[]`.
- Ambos casos dejan un warning en el log.
"""

from __future__ import annotations

import logging
from typing import Sequence

from adapters.sinks import ConsoleSink
from core.interfaces.output import OutputSink

logger = logging.getLogger(__name__)

DEFAULT_VALUES: tuple[str, ...] = ("1", "2", "3")
DEFAULT_SEPARATOR = "-"


def encode_values(values: Sequence[str], separator: str = DEFAULT_SEPARATOR) -> bytes:
    """Join `values` with `separator` and encode as UTF-8 (`b""` on failure)."""

    text = separator.join(values)
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        logger.warning("Could not encode %r as UTF-8 (%s); using empty payload", text, exc)
        return b""


def decode_values(data: bytes, separator: str = DEFAULT_SEPARATOR) -> list[str]:
    """Decode UTF-8 `data` and split it on `separator` (`[]` on failure)."""

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        logger.warning("Payload is not valid UTF-8 (%s); using empty list", exc)
        return []
    return text.split(separator)


class APIHandler:
    """Stands in for a remote API returning a dash separated payload."""

    def __init__(
        self,
        values: Sequence[str] = DEFAULT_VALUES,
        separator: str = DEFAULT_SEPARATOR,
    ) -> None:
        self._values = tuple(values)
        self._separator = separator

    def request_data(self) -> bytes:
        return encode_values(self._values, self._separator)


class ParseHandler:
    def __init__(self, separator: str = DEFAULT_SEPARATOR) -> None:
        self._separator = separator

    def parse(self, data: bytes) -> list[str]:
        return decode_values(data, self._separator)


class DBHandler:
    def __init__(self, sink: OutputSink | None = None) -> None:
        self._sink = sink or ConsoleSink()

    def save(self, values: list[str]) -> None:
        self._sink.emit(f"saved {values}")
