"""Building blocks of the example catalog."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable

from core.config import AppSettings
from core.domain.principles import Principle
from core.interfaces.output import OutputSink


@dataclass
class ExampleContext:
    """Everything an example script may use: where to print, settings, randomness."""

    sink: OutputSink
    settings: AppSettings
    rng: random.Random


ExampleScript = Callable[[ExampleContext], None]


@dataclass(frozen=True)
class Example:
    """A problem/solution pair illustrating one principle."""

    principle: Principle
    slug: str
    title: str
    problem: ExampleScript
    solution: ExampleScript
