# File: link_scout/report/html_report.py
"""link_scout.report.html_report: Генерация HTML-отчёта с помощью Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from link_scout.errors import ReportError
from link_scout.models import CrawlReport

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


def render_html(
    report: CrawlReport,
    template_dir: Union[Path, str, None],
    output_path: Union[Path, str],
) -> Path:
    """Рендерит HTML-отчёт из шаблона и сохраняет его по указанному пути.

    Args:
        report: финальный CrawlReport.
        template_dir: директория с шаблоном ``report.html.j2``;
            None — встроенный шаблон пакета.
        output_path: путь к итоговому HTML-файлу.

    Returns:
        Path до сохранённого HTML-файла.
    """
    template_dir = Path(template_dir) if template_dir else DEFAULT_TEMPLATE_DIR
    output_path = Path(output_path)

    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )

    data = report.to_dict()
    context: dict[str, Any] = {
        **data,
        "links_total": sum(len(p["links"]) for p in data["pages"]),
    }

    try:
        html_content = env.get_template("report.html.j2").render(**context)
    except TemplateError as exc:
        raise ReportError(f"cannot render HTML report from {template_dir}: {exc}") from exc

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html_content, encoding="utf-8")
    except OSError as exc:
        raise ReportError(f"error saving HTML report to {output_path}: {exc}") from exc

    return output_path
