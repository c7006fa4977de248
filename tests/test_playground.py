from __future__ import annotations

import pytest

from adapters.sinks import RecordingSink
from core.config import AppSettings
from core.domain.principles import Principle
from core.errors import PlaygroundError, UnknownExampleError
from core.services.examples import ALL_EXAMPLES, ExampleContext
from core.services.playground import (
    PlaygroundHooks,
    find_example,
    list_examples,
    run_example,
    run_playground,
    select_examples,
)

EXPECTED_SOLUTIONS = {
    "employee-manager": [
        "The full time employee tax is 200.0",
        "Employee Robert is saved",
        "The contract employee tax is 150.0",
        "Employee Rob is saved",
    ],
    "handler": ["saved ['1', '2', '3']"],
    "area-calculator": ["100.0", "314.1592653589793"],
    "product-discount": ["20.0", "30.0"],
    "polygon": ["10.0", "4.0"],
    "printer-scanner-fax": [
        "Print Something",
        "Print Spool Details",
        "Print Something",
        "Print Spool Details",
        "Print Something",
        "Print Spool Details",
        "Scan",
        "Scan Photo",
        "Scan",
        "Scan Photo",
        "Send Fax",
        "Send Internet Fax",
    ],
    "gesture": ["Tap", "Tap", "Double Tap", "Long Press"],
    "ecommerce": ["['TV', 'Oven']"],
    "storage": ["Save something using File System", "Save something using database"],
}


def test_catalog_covers_every_principle_twice() -> None:
    for principle in Principle.ordered():
        assert len(list_examples([principle])) == 2
    assert len({e.slug for e in ALL_EXAMPLES}) == len(ALL_EXAMPLES)


def test_catalog_is_in_solid_order() -> None:
    order = [e.principle for e in ALL_EXAMPLES]

    assert order == sorted(order, key=Principle.ordered().index)


@pytest.mark.parametrize("slug", sorted(EXPECTED_SOLUTIONS))
def test_solution_output(slug: str, ctx: ExampleContext, sink: RecordingSink) -> None:
    find_example(slug).solution(ctx)

    assert sink.lines == EXPECTED_SOLUTIONS[slug]


def test_insurance_solution_reports_each_line(ctx: ExampleContext, sink: RecordingSink, fixed_random) -> None:
    ctx.rng = fixed_random(0.0)
    find_example("insurance-discount").solution(ctx)

    assert sink.lines == ["20", "20", "20"]


def test_insurance_problem_uses_one_method_per_profile(ctx: ExampleContext, sink: RecordingSink, fixed_random) -> None:
    ctx.rng = fixed_random(0.99)
    find_example("insurance-discount").problem(ctx)

    assert sink.lines == ["0", "0"]


def test_legacy_devices_print_less_than_they_claim(ctx: ExampleContext, sink: RecordingSink) -> None:
    find_example("printer-scanner-fax").problem(ctx)

    assert len(sink.lines) == 6 + 4 + 2


def test_find_example_is_case_insensitive() -> None:
    assert find_example("  Polygon ").slug == "polygon"


def test_unknown_example_lists_available_slugs() -> None:
    with pytest.raises(UnknownExampleError) as excinfo:
        find_example("nope")

    assert isinstance(excinfo.value, PlaygroundError)
    assert "storage" in str(excinfo.value)


def test_select_examples_prefers_slug() -> None:
    selected = select_examples([Principle.SRP], "gesture")

    assert [e.slug for e in selected] == ["gesture"]
    assert len(select_examples()) == len(ALL_EXAMPLES)


def test_run_example_records_both_sections() -> None:
    forwarded = RecordingSink()
    settings = AppSettings(seed=3)
    transcript = run_example(
        find_example("product-discount"),
        sink=forwarded,
        settings=settings,
        rng=settings.build_random(),
    )

    assert transcript.problem == ["20.0", "30.0"]
    assert transcript.solution == ["20.0", "30.0"]
    assert forwarded.lines == transcript.problem + transcript.solution


def test_run_playground_skips_problems_when_configured() -> None:
    report = run_playground(
        list_examples([Principle.DIP]),
        sink=RecordingSink(),
        settings=AppSettings(show_problems=False),
    )

    assert [t.slug for t in report.transcripts] == ["ecommerce", "storage"]
    assert all(t.problem == [] for t in report.transcripts)


def test_run_playground_calls_hooks_in_order() -> None:
    events: list[str] = []
    hooks = PlaygroundHooks(
        principle_start=lambda p: events.append(f"principle:{p.value}"),
        example_start=lambda e: events.append(f"example:{e.slug}"),
        section_start=lambda e, section: events.append(f"{section}:{e.slug}"),
    )

    run_playground(
        list_examples([Principle.LSP]),
        sink=RecordingSink(),
        settings=AppSettings(),
        include_problem=True,
        hooks=hooks,
    )

    assert events == [
        "principle:lsp",
        "example:product-discount",
        "problem:product-discount",
        "solution:product-discount",
        "example:polygon",
        "problem:polygon",
        "solution:polygon",
    ]


def test_seeded_runs_are_reproducible() -> None:
    examples = [find_example("insurance-discount")]
    first = run_playground(examples, sink=RecordingSink(), settings=AppSettings(seed=42))
    second = run_playground(examples, sink=RecordingSink(), settings=AppSettings(seed=42))

    assert first.seed == 42
    assert first.transcripts == second.transcripts
