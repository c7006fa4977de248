from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

# Ensure the src/ directory is importable when tests run without an install.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from adapters.sinks import RecordingSink  # noqa: E402
from core.config import AppSettings  # noqa: E402
from core.services.examples import ExampleContext  # noqa: E402


class FixedRandom(random.Random):
    """Random source whose `random()` always returns the same value."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self._value = value

    def random(self) -> float:
        return self._value


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in (
        "SOLID_SEED",
        "SOLID_SHOW_PROBLEMS",
        "SOLID_LOYALTY_DISCOUNT_PERCENT",
        "SOLID_IN_HOUSE_DISCOUNT_MULTIPLIER",
        "SOLID_LOG_LEVEL",
        "SOLID_REPORTS_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def ctx(sink: RecordingSink) -> ExampleContext:
    return ExampleContext(sink=sink, settings=AppSettings(), rng=random.Random(1234))


@pytest.fixture
def fixed_random() -> type[FixedRandom]:
    return FixedRandom
