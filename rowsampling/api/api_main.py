from typing import List, Union

from ..data.target_column_data import TargetColumnData
from ..repository.constant_repo import SamplingDefaults, SamplingMode
from ..repository.model_repo import SamplingModels, SelectionModels
from ..sampling_strategies.base_sampler import RowSampler, _setup_logger
from ..sampling_strategies.default_sampler import DefaultRowSampler
from ..selection.subset_selector import SubsetSelector


class RowSamplerFactory:
    """
    Фабрика для создания семплеров строк
    """
    def __init__(self):
        self.strategy_map = SamplingModels.row_samplers.value
        self.selector_map = SelectionModels.subset_selectors.value
        self.logger = _setup_logger("RowSamplerFactory")

    def get_selector(self, with_replacement: bool) -> SubsetSelector:
        return self.selector_map['with_replacement' if with_replacement else 'no_replacement']

    def create_row_sampler(self, target: TargetColumnData,
                           mode: Union[SamplingMode, str] = SamplingDefaults.DEF_SAMPLING_MODE.value,
                           fraction: float = SamplingDefaults.DEF_DATA_FRACTION.value,
                           with_replacement: bool = SamplingDefaults.DEF_WITH_REPLACEMENT.value) -> RowSampler:
        """
        Создает семплер строк по режиму и описанию целевой колонки

        Args:
            target: Целевая колонка (номинальная или числовая)
            mode: Режим семплирования
            fraction: Доля строк на дерево, (0, 1]
            with_replacement: Вытягивать ли строки с возвращением

        Returns:
            Неизменяемый семплер, готовый к вызовам ``create_row_sample``
        """
        mode = SamplingMode.from_value(mode)
        if not 0.0 < fraction <= 1.0:
            raise ValueError(f"Fraction must be in (0, 1], got {fraction}")
        if mode.requires_nominal_target and not target.is_nominal:
            raise ValueError(f"Sampling mode '{mode.value}' requires a nominal target column, "
                             f"'{target.name}' is not nominal")

        # Вся таблица без возвращения с долей 1 - это отсутствие подвыборки
        if mode is not SamplingMode.EQUAL_SIZE and not with_replacement and fraction == 1.0:
            self.logger.info(f"Подвыборка не требуется, используются все {target.nr_rows} строк")
            return DefaultRowSampler(target.nr_rows)

        selector = self.get_selector(with_replacement)
        sampler_class = self.strategy_map[mode]
        if mode.requires_nominal_target:
            frequencies = list(target.class_frequencies().values())
            sampler = sampler_class(fraction, selector, frequencies)
        else:
            sampler = sampler_class(fraction, selector, target.nr_rows)

        self.logger.info(f"Создан семплер {sampler!r}")
        return sampler

    @staticmethod
    def get_available_modes() -> List[str]:
        """Возвращает список доступных режимов"""
        return sorted(mode.value for mode in SamplingMode)
