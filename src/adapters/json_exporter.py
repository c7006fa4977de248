"""Exportación JSON de una corrida del playground.

Por qué JSON:
- Permite comparar dos corridas (p.ej. con y sin `--seed`) con un diff simple.
- El bloque `summary` cuenta líneas por principio sin recorrer las transcripciones.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.domain.models import PlaygroundReport


def build_report_payload(report: PlaygroundReport) -> dict[str, Any]:
    """`PlaygroundReport` serializado más un resumen por principio."""

    summary: dict[str, dict[str, int]] = {}
    for transcript in report.transcripts:
        counts = summary.setdefault(
            transcript.principle.value,
            {"examples": 0, "problem_lines": 0, "solution_lines": 0},
        )
        counts["examples"] += 1
        counts["problem_lines"] += len(transcript.problem)
        counts["solution_lines"] += len(transcript.solution)

    payload = report.model_dump(mode="json")
    payload["summary"] = summary
    return payload


def export_report_json(*, report: PlaygroundReport, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as fh:
        json.dump(build_report_payload(report), fh, ensure_ascii=False, indent=2, sort_keys=True)
        fh.write("\n")
    return output_path
