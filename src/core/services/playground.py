"""Example selection and execution.

The CLI delegates all running and recording here, so the same flow serves
the `run` and `doctor` commands and the tests. Printing headings, panels and
other presentation concerns stay with the caller through `PlaygroundHooks`.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from adapters.sinks import RecordingSink
from core.config import AppSettings
from core.domain.models import ExampleTranscript, PlaygroundReport
from core.domain.principles import Principle
from core.errors import UnknownExampleError
from core.interfaces.output import OutputSink
from core.services.examples import ALL_EXAMPLES, Example, ExampleContext

logger = logging.getLogger(__name__)

PROBLEM = "problem"
SOLUTION = "solution"


@dataclass
class PlaygroundHooks:
    """Optional callbacks for UI layers (headings, section titles)."""

    principle_start: Callable[[Principle], None] | None = None
    example_start: Callable[[Example], None] | None = None
    section_start: Callable[[Example, str], None] | None = None


def list_examples(principles: Iterable[Principle] | None = None) -> list[Example]:
    """Registered examples, optionally restricted to `principles`."""

    wanted = set(principles) if principles else None
    return [e for e in ALL_EXAMPLES if wanted is None or e.principle in wanted]


def find_example(slug: str) -> Example:
    normalized = slug.strip().lower()
    for example in ALL_EXAMPLES:
        if example.slug == normalized:
            return example
    raise UnknownExampleError(slug, [e.slug for e in ALL_EXAMPLES])


def select_examples(
    principles: Sequence[Principle] | None = None,
    slug: str | None = None,
) -> list[Example]:
    """Resolve CLI style filters; a slug wins over principles."""

    if slug:
        return [find_example(slug)]
    return list_examples(principles)


def run_example(
    example: Example,
    *,
    sink: OutputSink,
    settings: AppSettings,
    rng: random.Random,
    include_problem: bool = True,
    hooks: PlaygroundHooks | None = None,
) -> ExampleTranscript:
    """Run one example, forwarding its lines to `sink` and recording them."""

    hooks = hooks or PlaygroundHooks()
    recorder = RecordingSink(forward_to=sink)
    ctx = ExampleContext(sink=recorder, settings=settings, rng=rng)
    transcript = ExampleTranscript(
        principle=example.principle,
        slug=example.slug,
        title=example.title,
    )

    if hooks.example_start:
        hooks.example_start(example)

    if include_problem:
        if hooks.section_start:
            hooks.section_start(example, PROBLEM)
        logger.debug("Running %s problem", example.slug)
        example.problem(ctx)
        transcript.problem = recorder.drain()

    if hooks.section_start:
        hooks.section_start(example, SOLUTION)
    logger.debug("Running %s solution", example.slug)
    example.solution(ctx)
    transcript.solution = recorder.drain()

    return transcript


def run_playground(
    examples: Sequence[Example],
    *,
    sink: OutputSink,
    settings: AppSettings | None = None,
    include_problem: bool | None = None,
    hooks: PlaygroundHooks | None = None,
) -> PlaygroundReport:
    """Run `examples` in order and aggregate their transcripts."""

    settings = settings or AppSettings()
    hooks = hooks or PlaygroundHooks()
    if include_problem is None:
        include_problem = settings.show_problems
    rng = settings.build_random()

    report = PlaygroundReport(seed=settings.seed)
    current: Principle | None = None
    for example in examples:
        if example.principle is not current:
            current = example.principle
            if hooks.principle_start:
                hooks.principle_start(current)
        report.transcripts.append(
            run_example(
                example,
                sink=sink,
                settings=settings,
                rng=rng,
                include_problem=include_problem,
                hooks=hooks,
            )
        )
    logger.info("Ran %d example(s)", len(report.transcripts))
    return report
