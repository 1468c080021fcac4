from .base_sampler import RowSampler
from ..selection.row_sample import DefaultRowSample
from ..selection.subset_selector import NO_REPLACEMENT_SELECTOR
from ..utils.random_utils import RandomStateLike


class DefaultRowSampler(RowSampler):
    """
    Семплер без подвыборки: каждое дерево получает все строки ровно по одному разу
    """

    def __init__(self, nr_rows: int):
        super().__init__(1.0, NO_REPLACEMENT_SELECTOR, nr_rows, logger_name="DefaultRowSampler")

    def create_row_sample(self, random_state: RandomStateLike = None) -> DefaultRowSample:
        return DefaultRowSample(self.nr_rows)
