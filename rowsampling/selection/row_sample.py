"""Результат семплирования строк для одного дерева ансамбля.

Выборка хранит вектор включений по всем строкам таблицы и реализованную
долю строк. Без возвращения включение булево, с возвращением каждая строка
несёт число повторов (0, 1 или больше).
"""

from __future__ import annotations

import numpy as np


class RowSample:
    """
    Базовая выборка строк: отображение ``индекс строки -> число включений``
    """

    def __init__(self, counts: np.ndarray, fraction: float):
        counts = np.array(counts, dtype=np.int64)
        counts.setflags(write=False)
        self._counts = counts
        self._fraction = float(fraction)

    @property
    def nr_rows(self) -> int:
        return int(self._counts.shape[0])

    @property
    def fraction(self) -> float:
        """Реализованная доля строк (или доля вытягиваний для выборки с возвращением)"""
        return self._fraction

    @property
    def counts(self) -> np.ndarray:
        """Вектор числа включений по строкам (только для чтения)"""
        return self._counts

    @property
    def included_count(self) -> int:
        """Суммарное число включений с учетом повторов"""
        return int(self._counts.sum())

    def get_count_for(self, row_index: int) -> int:
        if row_index < 0 or row_index >= self.nr_rows:
            raise IndexError(f"Row index {row_index} out of range [0, {self.nr_rows})")
        return int(self._counts[row_index])

    def included_indices(self) -> np.ndarray:
        """Индексы строк, попавших в выборку хотя бы один раз"""
        return np.flatnonzero(self._counts)

    def out_of_bag_indices(self) -> np.ndarray:
        """Индексы строк, не попавших в выборку (out-of-bag)"""
        return np.flatnonzero(self._counts == 0)

    def __len__(self) -> int:
        return self.nr_rows

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(nr_rows={self.nr_rows}, "
                f"included={self.included_count}, fraction={self._fraction:.4f})")


class DefaultRowSample(RowSample):
    """
    Тривиальная выборка: каждая строка включена ровно один раз
    """

    def __init__(self, nr_rows: int):
        super().__init__(np.ones(nr_rows, dtype=np.int64), 1.0)


class SubsetNoReplacementRowSample(RowSample):
    """
    Выборка без возвращения: булев вектор включений
    """

    def __init__(self, included: np.ndarray, fraction: float):
        included = np.array(included, dtype=bool)
        super().__init__(included, fraction)
        included.setflags(write=False)
        self._included = included

    @property
    def included(self) -> np.ndarray:
        return self._included

    @classmethod
    def empty(cls, nr_rows: int) -> 'SubsetNoReplacementRowSample':
        return cls(np.zeros(nr_rows, dtype=bool), 0.0)


class SubsetWithReplacementRowSample(RowSample):
    """
    Выборка с возвращением: число вытягиваний для каждой строки
    """

    def __init__(self, counts: np.ndarray, fraction: float):
        counts = np.asarray(counts)
        if counts.size and counts.min() < 0:
            raise ValueError("Row counts must be non-negative")
        super().__init__(counts, fraction)

    @classmethod
    def empty(cls, nr_rows: int) -> 'SubsetWithReplacementRowSample':
        return cls(np.zeros(nr_rows, dtype=np.int64), 0.0)
