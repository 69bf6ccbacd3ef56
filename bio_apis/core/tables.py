from __future__ import annotations

from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Iterable

import pandas as pd


def records_to_frame(records: Iterable) -> pd.DataFrame:
    """One row per record. Dataclasses are flattened with asdict."""
    rows = [asdict(r) if is_dataclass(r) else dict(r) for r in records]
    return pd.DataFrame(rows)


def save_table(records: Iterable, path: Path) -> int:
    """Write records to .csv or .parquet, chosen by suffix. Returns the row count."""
    df = records_to_frame(records)
    path.parent.mkdir(parents=True, exist_ok=True)
    suffix = path.suffix.lower()
    if suffix == ".parquet":
        df.to_parquet(path, index=False)
    elif suffix == ".csv":
        df.to_csv(path, index=False)
    else:
        raise ValueError(f"Unsupported table format: {path.suffix!r} (use .csv or .parquet)")
    return int(len(df))
