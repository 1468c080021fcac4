import numpy as np
import pandas as pd

from ..repository.constant_repo import SyntDataset


def create_sklearn_dataset(task_type: str, dataset_params: dict = None) -> pd.DataFrame:
    """
    Создает синтетический датасет sklearn, отсортированный по целевой колонке
    (строки одного класса идут подряд, как ожидают классификационные семплеры)
    """
    dataset_params = SyntDataset.DATASET_DEFAULT_PARAMS.value[task_type] if dataset_params is None else dataset_params
    X, y = SyntDataset.DATASET_GENERATORS.value[task_type](**dataset_params)
    data = pd.DataFrame(X, columns=[f'feature_{i + 1}' for i in range(X.shape[1])])
    data['target'] = y
    if task_type == 'classification':
        data = data.sort_values('target', kind='stable').reset_index(drop=True)
    return data


def create_grouped_target(class_frequencies: dict) -> pd.Series:
    """Целевая колонка из блоков: ``{'a': 6, 'b': 4}`` -> шесть 'a', затем четыре 'b'"""
    labels = np.concatenate([np.full(count, label, dtype=object) for label, count in class_frequencies.items()])
    return pd.Series(labels, name='target')
