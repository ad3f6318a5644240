# File: site_crawler/report/__init__.py
"""site_crawler.report: экспорт результатов обхода (CSV, JSON и HTML)."""

from site_crawler.report.csv_report import render_csv
from site_crawler.report.html_report import render_html
from site_crawler.report.json_report import render_json

__all__ = ["render_csv", "render_json", "render_html"]
