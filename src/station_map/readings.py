"""Load VWSN station readings from the whitespace-separated plot input file."""
from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, Dict, List, Tuple, Union

import pandas as pd

from station_map.station_names import MAX_STATIONS

INT_PREFIX = re.compile(r'\s*([+-]?\d+)')
FLOAT_PREFIX = re.compile(r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')

# Field order of one input record. region_id is read but never used.
READING_FIELDS: List[Tuple[str, re.Pattern, Callable[[str], Union[int, float]]]] = [
    ('station_id', INT_PREFIX, int),
    ('temperature', FLOAT_PREFIX, float),
    ('year', INT_PREFIX, int),
    ('month', INT_PREFIX, int),
    ('day', INT_PREFIX, int),
    ('hour', INT_PREFIX, int),
    ('minute', INT_PREFIX, int),
    ('latitude', FLOAT_PREFIX, float),
    ('longitude', FLOAT_PREFIX, float),
    ('region_id', FLOAT_PREFIX, float),
]
READING_COLUMNS = [name for name, _, _ in READING_FIELDS]


def parse_reading_line(line: str) -> Dict[str, Union[int, float]]:
    """Scan one record loosely.

    Each field takes the longest numeric prefix at the current position, so
    ``15.5C`` reads as 15.5 and ``2013.0`` as 2013. The scan resumes right
    after the matched prefix; once a field fails to match, it and every
    later field stay at zero. Trailing text is ignored.
    """
    reading: Dict[str, Union[int, float]] = {name: cast(0) for name, _, cast in READING_FIELDS}
    pos = 0
    for name, pattern, cast in READING_FIELDS:
        match = pattern.match(line, pos)
        if match is None:
            break
        reading[name] = cast(match.group(1))
        pos = match.end()
    return reading


def load_readings(path: Path, max_records: int = MAX_STATIONS) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"File {path} cannot be opened")
    rows = []
    dropped = 0
    with path.open('r', encoding='utf-8', errors='replace') as handle:
        for line in handle:
            if len(rows) >= max_records:
                dropped += 1
                continue
            rows.append(parse_reading_line(line))
    if dropped:
        print(f"⚠️  Ignoring {dropped} record(s) beyond the first {max_records}")
    return pd.DataFrame(rows, columns=READING_COLUMNS)


def active_readings(df: pd.DataFrame) -> pd.DataFrame:
    # A zero temperature means the station reported nothing.
    return df[df['temperature'] != 0]
