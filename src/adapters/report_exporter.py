"""Exportación HTML de una corrida.

Por qué está en adapters:
- El render HTML es un detalle de infraestructura (Jinja2).
- El Core solo conoce el agregado `PlaygroundReport`.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.domain.models import PlaygroundReport


_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render_report_html(*, report: PlaygroundReport) -> str:
    """Render a self-contained HTML page grouping transcripts by principle."""

    sections = [
        (principle, [t for t in report.transcripts if t.principle is principle])
        for principle in report.principles()
    ]
    template = _get_env().get_template("report.html")
    return template.render(
        report=report,
        generated_at=report.generated_at.isoformat(timespec="seconds"),
        sections=sections,
    )


def export_report_html(*, report: PlaygroundReport, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_report_html(report=report), encoding="utf-8")
    return output_path
