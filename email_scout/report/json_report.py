# email_scout/report/json_report.py

"""
JSON report for EmailScout.

Serializes a CrawlResult to a file.
"""
import json
from pathlib import Path

from email_scout.crawler.models import CrawlResult


def render_json(result: CrawlResult, output_path: Path | str) -> Path:
    """
    Save *result* as JSON at the given path.

    :param result: CrawlResult of a finished crawl
    :param output_path: path of the JSON file
    :return: Path of the saved file

    Example:
    ```python
    from email_scout.report.json_report import render_json
    report_path = render_json(result, 'reports/emails.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    data = {
        'start_url': result.start_url,
        'emails': result.emails,
    }

    with output.open('w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return output
