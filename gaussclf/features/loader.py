# gaussclf/features/loader.py
from __future__ import annotations

from pathlib import Path

import pandas as pd

from gaussclf import logs
from gaussclf.utils.errors import UserInputError


def load_feature_frame(path: str | Path) -> pd.DataFrame:
    """
    Read a labeled feature table from .csv or .parquet.
    """
    path = Path(path)
    if not path.exists():
        raise UserInputError(f"dataset not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".csv":
        df = pd.read_csv(path)
    elif suffix in (".parquet", ".pq"):
        df = pd.read_parquet(path)
    else:
        raise UserInputError(f"unsupported dataset format: {path.name}")

    logs.info(f"[Loader] {path.name} rows={len(df)} cols={len(df.columns)}")
    return df
