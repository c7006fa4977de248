"""Request -> parse -> save orchestration (Single Responsibility example)."""

from __future__ import annotations

import logging

from adapters.data_pipeline import APIHandler, DBHandler, ParseHandler

logger = logging.getLogger(__name__)


class DataHandler:
    """Sequences the three injected steps and does nothing else."""

    def __init__(
        self,
        api_handler: APIHandler,
        parse_handler: ParseHandler,
        db_handler: DBHandler,
    ) -> None:
        self._api_handler = api_handler
        self._parse_handler = parse_handler
        self._db_handler = db_handler

    def handle(self) -> list[str]:
        data = self._api_handler.request_data()
        values = self._parse_handler.parse(data)
        logger.debug("Parsed %d value(s) from %d byte(s)", len(values), len(data))
        self._db_handler.save(values)
        return values
