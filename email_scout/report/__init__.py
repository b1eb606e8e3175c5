"""email_scout.report: JSON, CSV and HTML reports of a crawl result."""

from email_scout.report.csv_report import render_csv
from email_scout.report.html_report import DEFAULT_TEMPLATE_DIR, render_html
from email_scout.report.json_report import render_json

__all__ = ["render_json", "render_csv", "render_html", "DEFAULT_TEMPLATE_DIR"]
