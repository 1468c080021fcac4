from typing import Dict

import numpy as np
import pandas as pd

from ..data.target_column_data import TargetColumnData
from ..selection.row_sample import RowSample


def class_included_counts(row_sample: RowSample, target: TargetColumnData) -> Dict:
    """Число включений (с повторами) по каждому классу, в порядке блоков"""
    if row_sample.nr_rows != target.nr_rows:
        raise ValueError(f"Row sample covers {row_sample.nr_rows} rows, target has {target.nr_rows}")
    counts = pd.Series(row_sample.counts).groupby(target.values, sort=False).sum()
    return {label: int(counts.get(label, 0)) for label in target.class_labels()}


def calculate_sample_statistics(row_sample: RowSample, target: TargetColumnData = None) -> Dict:
    """Вычисляет статистики выборки строк"""
    stats = {
        'nr_rows': row_sample.nr_rows,
        'fraction': row_sample.fraction,
        'total_draws': row_sample.included_count,
        'distinct_rows': int(len(row_sample.included_indices())),
        'out_of_bag_rows': int(len(row_sample.out_of_bag_indices())),
    }
    if target is not None and target.is_nominal:
        stats['class_counts'] = class_included_counts(row_sample, target)
    return stats


def class_balance_ratio(row_sample: RowSample, target: TargetColumnData) -> float:
    """Отношение минимального числа включений класса к максимальному (1.0 - идеальный баланс)"""
    counts = np.array(list(class_included_counts(row_sample, target).values()), dtype=float)
    if counts.max() == 0:
        return float('nan')
    return float(counts.min() / counts.max())
