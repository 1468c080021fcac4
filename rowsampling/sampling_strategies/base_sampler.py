from abc import ABC, abstractmethod
import logging
from typing import List, Sequence

import numpy as np

from ..data.target_column_data import compute_offsets
from ..repository.constant_repo import SamplingDefaults
from ..selection.row_sample import RowSample
from ..selection.subset_selector import SubsetSelector
from ..utils.random_utils import RandomStateLike, check_random_generator


def _setup_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(SamplingDefaults.LOG_FORMAT.value)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


class RowSampler(ABC):
    """
    Абстрактный базовый класс для всех стратегий семплирования строк.

    Семплер создается один раз на ансамбль и не меняется после создания,
    поэтому ``create_row_sample`` можно вызывать параллельно из нескольких
    потоков, если каждый вызов получает собственный генератор.
    """

    def __init__(self, fraction: float, selector: SubsetSelector, nr_rows: int, logger_name: str = "RowSampler"):
        if not 0.0 < fraction <= 1.0:
            raise ValueError(f"Fraction must be in (0, 1], got {fraction}")
        if nr_rows <= 0:
            raise ValueError(f"Number of rows must be positive, got {nr_rows}")
        self.fraction = float(fraction)
        self.selector = selector
        self.nr_rows = int(nr_rows)
        self.logger = _setup_logger(logger_name)

    @abstractmethod
    def create_row_sample(self, random_state: RandomStateLike = None) -> RowSample:
        """
        Вытягивает новую выборку строк для одного дерева

        Args:
            random_state: Генератор (или seed) только для этого вызова

        Returns:
            Новая выборка по ``[0, nr_rows)``
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fraction={self.fraction}, selector={self.selector!r}, nr_rows={self.nr_rows})"


class AbstractClassificationRowSampler(RowSampler):
    """
    Общая схема для семплеров, учитывающих классы: каждый бакет (блок строк одного класса)
    семплируется отдельно, затем локальные выборки объединяются селектором.
    """

    def __init__(self, fraction: float, selector: SubsetSelector, class_frequencies: Sequence[int],
                 logger_name: str = "ClassificationRowSampler"):
        frequencies = [int(f) for f in class_frequencies]
        self.offsets = compute_offsets(frequencies)
        super().__init__(fraction, selector, sum(frequencies), logger_name=logger_name)
        bucket_sizes = np.diff(np.append(self.offsets, self.nr_rows))
        bucket_sizes.setflags(write=False)
        self.bucket_sizes = bucket_sizes

    @property
    def nr_classes(self) -> int:
        return len(self.offsets)

    @abstractmethod
    def _get_draw_count(self, bucket_index: int, bucket_size: int) -> int:
        """Число строк, вытягиваемых из бакета ``bucket_index``"""
        pass

    def get_draw_counts(self) -> List[int]:
        return [self._get_draw_count(i, int(size)) for i, size in enumerate(self.bucket_sizes)]

    def _check_draw_counts(self) -> List[int]:
        draw_counts = self.get_draw_counts()
        if sum(draw_counts) <= 0:
            raise ValueError(f"Fraction {self.fraction} selects no rows from classes of sizes "
                             f"{self.bucket_sizes.tolist()}")
        return draw_counts

    def create_row_sample(self, random_state: RandomStateLike = None) -> RowSample:
        rng = check_random_generator(random_state)
        draw_counts = self._check_draw_counts()
        subsets = []
        for bucket_size, draw_count in zip(self.bucket_sizes, draw_counts):
            bucket_size = int(bucket_size)
            # отдельный бакет может округлиться до нуля, вся выборка - нет
            if draw_count == 0:
                subsets.append(self.selector.empty(bucket_size))
            else:
                subsets.append(self.selector.select(bucket_size, draw_count, rng))
        sample = self.selector.combine(subsets, self.offsets, self.nr_rows)
        self.logger.debug(f"Выборка по {self.nr_classes} классам: {sample.included_count} строк, "
                          f"доля {sample.fraction:.4f}")
        return sample
