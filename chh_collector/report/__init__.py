"""chh_collector.report: output of scraped records, used by the CLI and tests."""

from chh_collector.report.json_report import records_to_list, render_json

__all__ = ["records_to_list", "render_json"]
