"""
Tabular export of dashboard rows.

    df = to_frame(rows)
    write_rows(rows, 'balls.parquet')   # or .csv
"""

from pathlib import Path
from typing import Any, Dict, List, Union

import polars as pl

# List columns (drift waypoints) cannot go to CSV as-is
_LIST_COLUMNS = ('path_x', 'path_y')


def to_frame(rows: List[Dict[str, Any]]) -> pl.DataFrame:
    if not rows:
        return pl.DataFrame()
    return pl.DataFrame(rows)


def write_rows(rows: List[Dict[str, Any]], path: Union[str, Path]) -> Path:
    """Write rows as parquet or csv, chosen by the file suffix."""
    path = Path(path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    df = to_frame(rows)

    suffix = path.suffix.lower()
    if suffix == '.parquet':
        df.write_parquet(path)
    elif suffix == '.csv':
        flat = [c for c in _LIST_COLUMNS if c in df.columns]
        if flat:
            df = df.with_columns([
                pl.col(c).list.eval(pl.element().round(3).cast(pl.String)).list.join(' ')
                for c in flat
            ])
        df.write_csv(path)
    else:
        raise ValueError(f"Unsupported output format: {path.suffix} (use .parquet or .csv)")
    return path
