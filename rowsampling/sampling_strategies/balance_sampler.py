from typing import Sequence

from .base_sampler import AbstractClassificationRowSampler
from ..selection.subset_selector import SubsetSelector
from ..utils.utils import round_half_up


class EqualSizeRowSampler(AbstractClassificationRowSampler):
    """
    Семплер, который выравнивает классы: из каждого класса тянется одинаковое
    число строк, равное доле ``fraction`` от размера самого малого класса.

    Без возвращения вклад меньшинства не может превышать размер ни одного класса.
    Вклад не обрезается: слишком большая доля приводит к ошибке при семплировании,
    нулевой вклад - к ошибке при создании семплера.
    """

    def __init__(self, fraction: float, selector: SubsetSelector, class_frequencies: Sequence[int]):
        super().__init__(fraction, selector, class_frequencies, logger_name="EqualSizeRowSampler")
        self._min_class_size = int(self.bucket_sizes.min())
        self._minority_contribution = round_half_up(self.fraction * self._min_class_size)
        if self._minority_contribution <= 0:
            raise ValueError(f"Fraction {self.fraction} of the smallest class ({self._min_class_size} rows) "
                             f"selects no rows")
        self.logger.info(f"Балансирующий семплер: {self.nr_classes} классов, минимальный класс "
                         f"{self._min_class_size} строк, вклад каждого класса {self._minority_contribution}")

    @property
    def min_class_size(self) -> int:
        return self._min_class_size

    @property
    def minority_contribution(self) -> int:
        """Число строк, которое вносит каждый класс"""
        return self._minority_contribution

    def _get_draw_count(self, bucket_index: int, bucket_size: int) -> int:
        return self._minority_contribution
