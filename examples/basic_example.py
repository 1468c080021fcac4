import pandas as pd
import numpy as np
import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from rowsampling import RowSamplerFactory, TargetColumnData
from rowsampling.metrics.eval_metrics import calculate_sample_statistics

# Таблица уже сгруппирована по классам: 6 строк 'a', затем 4 строки 'b'
target = TargetColumnData(pd.Series(['a'] * 6 + ['b'] * 4, name='target'))

factory = RowSamplerFactory()
for mode in factory.get_available_modes():
    sampler = factory.create_row_sampler(target, mode=mode, fraction=0.5)
    sample = sampler.create_row_sample(np.random.default_rng(42))
    print(f"{mode}: rows={sample.included_indices().tolist()}")
    print(f"  {calculate_sample_statistics(sample, target)}")
