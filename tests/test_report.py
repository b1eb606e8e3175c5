# File: tests/test_report.py
import json

from email_scout.crawler.models import CrawlResult
from email_scout.report import render_csv, render_html, render_json


def _result(emails):
    return CrawlResult(start_url="https://example.com", emails=emails, pages_visited=4)


def test_json_report(tmp_path):
    path = render_json(_result(["a@x.io"]), tmp_path / "nested" / "r.json")
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "start_url": "https://example.com",
        "emails": ["a@x.io"],
    }


def test_csv_report_empty(tmp_path):
    path = render_csv(_result([]), tmp_path / "r.csv")
    assert path.read_text(encoding="utf-8") == "Emails\n"


def test_html_report_escapes_and_lists(tmp_path):
    path = render_html(_result(["<b>@x.io", "c@x.io"]), None, tmp_path / "r.html")
    content = path.read_text(encoding="utf-8")
    assert "2 emails found" in content
    assert "&lt;b&gt;@x.io" in content
    assert "Pages visited: 4" in content


def test_html_report_no_emails(tmp_path):
    content = render_html(_result([]), None, tmp_path / "r.html").read_text(encoding="utf-8")
    assert "No emails found" in content


def test_html_report_custom_template(tmp_path):
    tpl = tmp_path / "tpl"
    tpl.mkdir()
    (tpl / "report.html.j2").write_text("{{ emails | join(',') }}", encoding="utf-8")
    path = render_html(_result(["a@x.io", "b@x.io"]), tpl, tmp_path / "r.html")
    assert path.read_text(encoding="utf-8") == "a@x.io,b@x.io"
