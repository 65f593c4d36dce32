# File: link_scout/report/__init__.py
"""link_scout.report: Сохранение финального отчёта обхода (JSON и HTML)."""

from __future__ import annotations

from .html_report import DEFAULT_TEMPLATE_DIR, render_html
from .json_report import render_json

__all__ = ["render_json", "render_html", "DEFAULT_TEMPLATE_DIR"]
