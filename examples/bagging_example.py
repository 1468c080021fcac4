import numpy as np
import sys
import os
from concurrent.futures import ThreadPoolExecutor

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from sklearn.metrics import accuracy_score, f1_score
from sklearn.model_selection import train_test_split
from sklearn.tree import DecisionTreeClassifier

from rowsampling import RowSamplingConfig, TargetColumnData
from rowsampling.utils.synt_data import create_sklearn_dataset
from rowsampling.utils.utils import get_sample_weights

N_TREES = 25

data = create_sklearn_dataset('classification')
train, test = train_test_split(data, test_size=0.3, random_state=42, stratify=data['target'])
# Семплеры ожидают строки, сгруппированные по классам
train = train.sort_values('target', kind='stable').reset_index(drop=True)
features = ['feature_1', 'feature_2']

target = TargetColumnData(train['target'], is_nominal=True)
config = RowSamplingConfig(data_fraction=0.7, sampling_mode='equal_size', with_replacement=True, seed=42)
sampler = config.create_row_sampler(target)


def fit_tree(tree_index, rng):
    # один генератор на дерево: семплер можно вызывать из разных потоков
    sample = sampler.create_row_sample(rng)
    tree = DecisionTreeClassifier(max_features=1, random_state=tree_index)
    tree.fit(train[features], train['target'], sample_weight=get_sample_weights(sample))
    return tree


with ThreadPoolExecutor(max_workers=4) as pool:
    trees = list(pool.map(fit_tree, range(N_TREES), config.spawn_tree_generators(N_TREES)))

votes = np.mean([tree.predict(test[features]) for tree in trees], axis=0)
y_pred = (votes >= 0.5).astype(int)
print(f"Sampling config: {config.to_dict()}")
print(f"Accuracy: {accuracy_score(test['target'], y_pred):.3f}")
print(f"F1 macro: {f1_score(test['target'], y_pred, average='macro'):.3f}")
