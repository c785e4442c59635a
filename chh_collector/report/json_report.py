# chh_collector/report/json_report.py

"""
JSON report of scraped music data.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List, Union

from chh_collector.scrapers.rapzilla import MusicData


def records_to_list(records: Iterable[MusicData]) -> List[dict]:
    return [record.to_dict() for record in records]


def render_json(records: Iterable[MusicData], output_path: Union[Path, str], *, pretty: bool = True) -> Path:
    """
    Save *records* as a JSON array at *output_path*, creating parent directories.

    :param records: scraped MusicData records
    :param output_path: path of the JSON file
    :return: Path of the written file

    Example:
    ```python
    from chh_collector.report.json_report import render_json
    path = render_json(visitor.records, 'reports/music.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(records_to_list(records), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
