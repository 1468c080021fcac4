import math

import numpy as np
import pandas as pd

from ..selection.row_sample import RowSample


def round_half_up(value: float) -> int:
    """Округление к ближайшему целому, половины округляются вверх (2.5 -> 3)"""
    return int(math.floor(value + 0.5))


def apply_row_sample(data, row_sample: RowSample):
    """
    Универсальное применение выборки строк для pandas и numpy.
    Строки, вытянутые несколько раз, повторяются.
    """
    if len(data) != row_sample.nr_rows:
        raise ValueError(f"Row sample covers {row_sample.nr_rows} rows, data has {len(data)}")
    idx = np.repeat(np.arange(row_sample.nr_rows), row_sample.counts)
    if isinstance(data, (pd.DataFrame, pd.Series)):
        return data.iloc[idx]
    elif isinstance(data, np.ndarray):
        return data[idx]
    else:
        raise TypeError(f"Unsupported data type: {type(data)}")


def get_sample_weights(row_sample: RowSample) -> np.ndarray:
    """Веса строк для ``sample_weight`` моделей sklearn: число включений каждой строки"""
    return row_sample.counts.astype(float)
