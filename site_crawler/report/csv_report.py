# site_crawler/report/csv_report.py
"""Spreadsheet export: one row per crawl result, in crawl order."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Union

from site_crawler.aggregator import COLUMNS, CrawlReport


def render_csv(report: CrawlReport, output_path: Union[Path, str]) -> Path:
    """Write ``url, status, title, description`` rows with a header line.

    The file is UTF-8 with a BOM so spreadsheet applications pick up the
    encoding when it is opened directly.
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open("w", encoding="utf-8-sig", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(COLUMNS))
        writer.writeheader()
        writer.writerows(report.rows())

    return output
