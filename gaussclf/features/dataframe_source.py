# gaussclf/features/dataframe_source.py
from __future__ import annotations

from typing import Any, List, Sequence

import numpy as np
import pandas as pd

from gaussclf import logs
from gaussclf.features.array_source import ArrayFeatureSource
from gaussclf.utils.errors import UserInputError


class DataFrameFeatureSource(ArrayFeatureSource):
    """
    DataFrameFeatureSource（FINAL）

    Responsibility:
    - Select feature / label columns
    - Numeric sanitization (inf → NaN, optional drop_na)
    - Map distinct label values (sorted) onto dense indices 0..k-1

    label_names[i] is the original label value of dense label i.
    """

    def __init__(
        self,
        df: pd.DataFrame,
        *,
        feature_columns: Sequence[str],
        label_column: str,
        drop_na: bool = True,
        label_names: Sequence[Any] | None = None,
    ):
        missing = [c for c in [*feature_columns, label_column] if c not in df.columns]
        if missing:
            raise UserInputError(f"columns not found: {missing}")

        X = df[list(feature_columns)].apply(pd.to_numeric, errors="coerce")
        y = df[label_column]

        X = X.replace([np.inf, -np.inf], np.nan)

        # 无标签的行永远丢弃；drop_na 只控制特征缺失
        mask = y.notna()
        if drop_na:
            mask &= X.notna().all(axis=1)
        dropped = int((~mask).sum())
        if dropped:
            logs.warning(f"[DataFrameFeatureSource] dropped {dropped} rows with NaN/inf")
        X = X.loc[mask]
        y = y.loc[mask]

        if label_names is None:
            label_names = sorted(y.unique().tolist())
        else:
            unknown = set(y.unique().tolist()) - set(label_names)
            if unknown:
                raise UserInputError(f"labels not in label_names: {sorted(unknown, key=str)}")

        index = {name: i for i, name in enumerate(label_names)}
        codes = y.map(index).to_numpy(dtype=np.int64)
        values = X.to_numpy(dtype=np.float64)

        blocks = [values[codes == i] for i in range(len(label_names))]
        super().__init__(blocks, dim=len(feature_columns))

        self.feature_columns: List[str] = list(feature_columns)
        self.label_column = label_column
        self.label_names: List[Any] = list(label_names)

        logs.info(
            "[DataFrameFeatureSource] "
            f"rows={len(values)} dim={self.dimension()} "
            f"labels={self.label_names}"
        )
