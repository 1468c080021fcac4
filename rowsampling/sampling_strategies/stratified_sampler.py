from typing import Sequence

from .base_sampler import AbstractClassificationRowSampler
from ..selection.subset_selector import SubsetSelector
from ..utils.utils import round_half_up


class StratifiedRowSampler(AbstractClassificationRowSampler):
    """
    Семплирование с сохранением распределения классов: из каждого класса
    берется одна и та же доля ``fraction`` его строк (с точностью до округления)
    """

    def __init__(self, fraction: float, selector: SubsetSelector, class_frequencies: Sequence[int]):
        super().__init__(fraction, selector, class_frequencies, logger_name="StratifiedRowSampler")
        draw_counts = self._check_draw_counts()
        self.logger.info(f"Стратифицированный семплер: {self.nr_classes} классов, "
                         f"строк на дерево: {sum(draw_counts)}")

    def _get_draw_count(self, bucket_index: int, bucket_size: int) -> int:
        return round_half_up(self.fraction * bucket_size)
