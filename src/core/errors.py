"""Errors raised by the playground core."""

from __future__ import annotations


class PlaygroundError(Exception):
    """Base class for playground errors surfaced to the CLI."""


class UnknownExampleError(PlaygroundError):
    """Raised when an example slug is not registered in the catalog."""

    def __init__(self, slug: str, available: list[str]) -> None:
        self.slug = slug
        self.available = available
        super().__init__(
            f"Unknown example '{slug}'. Available: {', '.join(available) or 'none'}"
        )
