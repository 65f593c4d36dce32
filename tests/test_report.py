# File: tests/test_report.py
import json
from datetime import datetime, timedelta, timezone

import pytest

from link_scout.errors import ReportError
from link_scout.models import CrawlReport, PageRecord
from link_scout.report import render_html, render_json

START = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture()
def report() -> CrawlReport:
    page = PageRecord(
        url="http://example.com/",
        title="Home <&>",
        links=("http://example.com/a", "http://other.org/"),
        depth=0,
        crawled_at=START + timedelta(milliseconds=250),
        response_time_ms=120,
        status_code=200,
    )
    return CrawlReport(
        base_url="http://example.com/",
        max_depth=2,
        start_time=START,
        end_time=START + timedelta(seconds=3),
        total_pages=1,
        pages=(page,),
    )


def test_render_json_writes_indented_report(tmp_path, report):
    out = tmp_path / "nested" / "crawl_results.json"
    saved = render_json(report, out)

    assert saved == out
    text = out.read_text(encoding="utf-8")
    assert text.startswith('{\n  "base_url"')
    data = json.loads(text)
    assert data["total_pages"] == len(data["pages"]) == 1
    assert data["end_time"] == "2024-05-01T12:00:03+00:00"
    assert data["pages"][0]["links"] == ["http://example.com/a", "http://other.org/"]


def test_render_json_overwrites(tmp_path, report):
    out = tmp_path / "crawl_results.json"
    out.write_text("stale content that is longer than nothing" * 100, encoding="utf-8")
    render_json(report, out)
    assert json.loads(out.read_text(encoding="utf-8"))["base_url"] == "http://example.com/"


def test_render_json_output_error(tmp_path, report):
    with pytest.raises(ReportError):
        render_json(report, tmp_path)  # a directory cannot be opened for writing


def test_render_html_default_template(tmp_path, report):
    out = render_html(report, None, tmp_path / "report.html")
    html = out.read_text(encoding="utf-8")
    assert "http://other.org/" in html
    assert "Home &lt;&amp;&gt;" in html


def test_render_html_missing_template(tmp_path, report):
    with pytest.raises(ReportError):
        render_html(report, tmp_path, tmp_path / "report.html")
