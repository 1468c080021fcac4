"""Описание целевой колонки для семплеров строк.

Классификационные семплеры рассчитывают на то, что строки одного класса
идут подряд (таблица уже сгруппирована по целевой колонке). Частоты классов
выдаются только после проверки этого условия.
"""

from __future__ import annotations

from collections import OrderedDict
from typing import Dict, List, Optional, Sequence, Union

import numpy as np
import pandas as pd
from pandas.api.types import is_bool_dtype, is_object_dtype, is_string_dtype


class TargetColumnData:
    """
    Целевая колонка: метки строк, признак номинальности и частоты классов
    """

    def __init__(self, values: Union[pd.Series, np.ndarray, Sequence], is_nominal: Optional[bool] = None,
                 name: str = 'target'):
        series = values if isinstance(values, pd.Series) else pd.Series(np.asarray(values))
        if len(series) == 0:
            raise ValueError("Target column is empty")
        if series.isna().any():
            raise ValueError(f"Target column '{name}' contains missing values")
        self.name = series.name if series.name is not None else name
        self.values = series.reset_index(drop=True)
        self.is_nominal = self._infer_nominal(self.values) if is_nominal is None else bool(is_nominal)
        self._class_frequencies: Optional[Dict] = None

    @classmethod
    def from_class_frequencies(cls, frequencies: Union[Dict, Sequence[int]], name: str = 'target') -> 'TargetColumnData':
        """
        Строит номинальную колонку, сгруппированную по классам, из известных частот

        Args:
            frequencies: Частоты классов в порядке блоков (dict метка->частота или список)
            name: Имя колонки
        """
        if not isinstance(frequencies, dict):
            frequencies = OrderedDict((i, f) for i, f in enumerate(frequencies))
        for label, count in frequencies.items():
            if int(count) <= 0:
                raise ValueError(f"Class frequency must be positive, got {count} for class '{label}'")
        labels = np.concatenate([np.full(int(count), label, dtype=object) for label, count in frequencies.items()])
        return cls(pd.Series(labels, name=name), is_nominal=True)

    @staticmethod
    def _infer_nominal(series: pd.Series) -> bool:
        dtype = series.dtype
        return bool(isinstance(dtype, pd.CategoricalDtype) or is_bool_dtype(dtype)
                    or is_object_dtype(dtype) or is_string_dtype(dtype))

    @property
    def nr_rows(self) -> int:
        return len(self.values)

    def is_sorted(self) -> bool:
        """Проверяет, что строки каждого класса образуют один непрерывный блок"""
        codes, _ = pd.factorize(self.values, sort=False)
        # factorize нумерует классы по первому появлению: блоки идут подряд <=> коды не убывают
        return bool(np.all(np.diff(codes) >= 0))

    def class_frequencies(self) -> Dict:
        """
        Возвращает частоты классов в порядке блоков

        Returns:
            Упорядоченный dict метка -> число строк
        """
        if not self.is_nominal:
            raise ValueError(f"Target column '{self.name}' is not nominal, class frequencies are undefined")
        if self._class_frequencies is None:
            if not self.is_sorted():
                raise ValueError(f"Target column '{self.name}' is not sorted: rows of a class must be contiguous")
            counts = self.values.value_counts(sort=False).to_dict()
            order = pd.unique(self.values)
            self._class_frequencies = OrderedDict((label, int(counts[label])) for label in order)
        return OrderedDict(self._class_frequencies)

    def class_labels(self) -> List:
        return list(self.class_frequencies().keys())

    def __repr__(self) -> str:
        kind = 'nominal' if self.is_nominal else 'numeric'
        return f"TargetColumnData(name={self.name!r}, nr_rows={self.nr_rows}, {kind})"


def compute_offsets(frequencies: Sequence[int]) -> np.ndarray:
    """
    Смещения бакетов по частотам классов: ``offsets[0] = 0``, ``offsets[i]`` - число строк классов ``0..i-1``.
    Возвращает массив только для чтения.
    """
    frequencies = np.asarray(list(frequencies), dtype=np.int64)
    if frequencies.size == 0:
        raise ValueError("At least one class is required")
    if np.any(frequencies <= 0):
        raise ValueError(f"Class frequencies must be positive, got {frequencies.tolist()}")
    offsets = np.concatenate(([0], np.cumsum(frequencies)[:-1])).astype(np.int64)
    offsets.setflags(write=False)
    return offsets
