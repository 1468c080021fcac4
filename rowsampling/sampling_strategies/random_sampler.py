from .base_sampler import RowSampler
from ..selection.row_sample import RowSample
from ..selection.subset_selector import SubsetSelector
from ..utils.random_utils import RandomStateLike
from ..utils.utils import round_half_up


class RandomRowSampler(RowSampler):
    """
    Семплирование по всей таблице без учета классов, подходит и для регрессии
    """

    def __init__(self, fraction: float, selector: SubsetSelector, nr_rows: int):
        super().__init__(fraction, selector, nr_rows, logger_name="RandomRowSampler")
        self.nr_select = round_half_up(self.fraction * self.nr_rows)

    def create_row_sample(self, random_state: RandomStateLike = None) -> RowSample:
        sample = self.selector.select(self.nr_rows, self.nr_select, random_state)
        self.logger.debug(f"Случайная выборка: {self.nr_select} из {self.nr_rows} строк")
        return sample
