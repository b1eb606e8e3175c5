"""CSV export: an ``Emails`` header followed by one address per line."""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Union

from email_scout.crawler.models import CrawlResult


def render_csv(result: CrawlResult, output_path: Union[Path, str]) -> Path:
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(["Emails"])
        writer.writerows([email] for email in result.emails)
    return output
