import numpy as np
import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from rowsampling import RowSamplingConfig, TargetColumnData
from rowsampling.metrics.eval_metrics import class_balance_ratio, class_included_counts
from rowsampling.utils.synt_data import create_sklearn_dataset

# Несбалансированный датасет 90/10, отсортированный по целевой колонке
data = create_sklearn_dataset('classification')
target = TargetColumnData(data['target'], is_nominal=True)
print("Class frequencies:", dict(target.class_frequencies()))

for mode in ['random', 'stratified', 'equal_size']:
    config = RowSamplingConfig(data_fraction=0.8, sampling_mode=mode, seed=42)
    sampler = config.create_row_sampler(target)
    sample = sampler.create_row_sample(config.create_random_generator())
    print(f"\n{mode} ({sample.included_count} rows, fraction={sample.fraction:.3f}):")
    print(f"  class counts: {class_included_counts(sample, target)}")
    print(f"  balance ratio: {class_balance_ratio(sample, target):.3f}")
