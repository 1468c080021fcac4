"""Стратегии выбора подмножества индексов из диапазона ``[0, n)``.

Селектор умеет две операции:

* ``select`` - вытянуть ``nr_select`` индексов из ``nr_total`` строк одного бакета;
* ``combine`` - собрать локальные выборки бакетов в одну глобальную выборку,
  сдвинув каждую на смещение своего бакета.

``combine`` не использует случайность, поэтому выборки по классам можно
строить независимо друг от друга. Селекторы не хранят состояния, общие
экземпляры ``NO_REPLACEMENT_SELECTOR`` и ``WITH_REPLACEMENT_SELECTOR``
безопасно разделять между потоками.
"""

from abc import ABC, abstractmethod
from typing import Sequence, Type

import numpy as np

from .row_sample import RowSample, SubsetNoReplacementRowSample, SubsetWithReplacementRowSample
from ..utils.random_utils import RandomStateLike, check_random_generator


class SubsetSelector(ABC):
    """
    Абстрактный селектор подмножества строк
    """

    sample_type: Type[RowSample] = RowSample

    def select(self, nr_total: int, nr_select: int, random_state: RandomStateLike = None) -> RowSample:
        """
        Вытягивает ``nr_select`` индексов из ``[0, nr_total)``

        Args:
            nr_total: Размер диапазона (бакета)
            nr_select: Число вытягиваемых строк
            random_state: Генератор случайных чисел для этого вызова

        Returns:
            Локальная выборка размера ``nr_total``
        """
        self._check_select_arguments(nr_total, nr_select)
        rng = check_random_generator(random_state)
        return self._select(nr_total, nr_select, rng)

    @abstractmethod
    def _select(self, nr_total: int, nr_select: int, rng: np.random.Generator) -> RowSample:
        pass

    def empty(self, nr_total: int) -> RowSample:
        """Локальная выборка без включенных строк (бакет, из которого ничего не тянем)"""
        if nr_total <= 0:
            raise ValueError(f"Number of rows must be positive, got {nr_total}")
        return self.sample_type.empty(nr_total)

    def combine(self, subsets: Sequence[RowSample], offsets: Sequence[int], total_rows: int) -> RowSample:
        """
        Объединяет локальные выборки бакетов в глобальную выборку по ``[0, total_rows)``

        Args:
            subsets: Локальные выборки в порядке бакетов
            offsets: Смещение начала каждого бакета
            total_rows: Общее число строк

        Returns:
            Глобальная выборка, доля = (сумма включений) / total_rows
        """
        if len(subsets) != len(offsets):
            raise ValueError(f"Number of subsets ({len(subsets)}) does not match "
                             f"number of offsets ({len(offsets)})")
        if total_rows < len(offsets):
            raise ValueError(f"Total rows ({total_rows}) less than number of buckets ({len(offsets)})")

        counts = np.zeros(total_rows, dtype=np.int64)
        for subset, offset in zip(subsets, offsets):
            if not isinstance(subset, self.sample_type):
                raise ValueError(f"{type(self).__name__} can not combine {type(subset).__name__}")
            offset = int(offset)
            end = offset + subset.nr_rows
            if offset < 0 or end > total_rows:
                raise ValueError(f"Bucket [{offset}, {end}) exceeds row range [0, {total_rows})")
            counts[offset:end] += subset.counts

        fraction = counts.sum() / total_rows
        return self._create_sample(counts, fraction)

    @abstractmethod
    def _create_sample(self, counts: np.ndarray, fraction: float) -> RowSample:
        pass

    def _check_select_arguments(self, nr_total: int, nr_select: int):
        if nr_total <= 0:
            raise ValueError(f"Number of rows must be positive, got {nr_total}")
        if nr_select <= 0:
            raise ValueError(f"Number of rows to select must be positive, got {nr_select}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class NoReplacementSelector(SubsetSelector):
    """
    Простая случайная выборка без возвращения: первые ``nr_select`` элементов случайной перестановки
    """

    sample_type = SubsetNoReplacementRowSample

    def _check_select_arguments(self, nr_total: int, nr_select: int):
        super()._check_select_arguments(nr_total, nr_select)
        if nr_select > nr_total:
            raise ValueError(f"Can not select {nr_select} rows out of {nr_total} without replacement")

    def _select(self, nr_total: int, nr_select: int, rng: np.random.Generator) -> SubsetNoReplacementRowSample:
        included = np.zeros(nr_total, dtype=bool)
        included[rng.permutation(nr_total)[:nr_select]] = True
        return SubsetNoReplacementRowSample(included, nr_select / nr_total)

    def _create_sample(self, counts: np.ndarray, fraction: float) -> SubsetNoReplacementRowSample:
        if counts.size and counts.max() > 1:
            raise ValueError("Overlapping buckets: row included more than once without replacement")
        return SubsetNoReplacementRowSample(counts > 0, fraction)


class WithReplacementSelector(SubsetSelector):
    """
    Бутстреп: ``nr_select`` независимых равновероятных вытягиваний из ``[0, nr_total)``
    """

    sample_type = SubsetWithReplacementRowSample

    def _select(self, nr_total: int, nr_select: int, rng: np.random.Generator) -> SubsetWithReplacementRowSample:
        draws = rng.integers(0, nr_total, size=nr_select)
        counts = np.bincount(draws, minlength=nr_total)
        return SubsetWithReplacementRowSample(counts, nr_select / nr_total)

    def _create_sample(self, counts: np.ndarray, fraction: float) -> SubsetWithReplacementRowSample:
        return SubsetWithReplacementRowSample(counts, fraction)


NO_REPLACEMENT_SELECTOR = NoReplacementSelector()
WITH_REPLACEMENT_SELECTOR = WithReplacementSelector()
