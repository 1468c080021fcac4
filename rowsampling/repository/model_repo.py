from enum import Enum

from .constant_repo import SamplingMode
from ..sampling_strategies.balance_sampler import EqualSizeRowSampler
from ..sampling_strategies.random_sampler import RandomRowSampler
from ..sampling_strategies.stratified_sampler import StratifiedRowSampler
from ..selection.subset_selector import NO_REPLACEMENT_SELECTOR, WITH_REPLACEMENT_SELECTOR


class SelectionModels(Enum):
    subset_selectors = {
        # Без возвращения: случайная перестановка
        'no_replacement': NO_REPLACEMENT_SELECTOR,
        # С возвращением: бутстреп
        'with_replacement': WITH_REPLACEMENT_SELECTOR,
    }


class SamplingModels(Enum):
    row_samplers = {
        SamplingMode.RANDOM: RandomRowSampler,
        SamplingMode.STRATIFIED: StratifiedRowSampler,
        SamplingMode.EQUAL_SIZE: EqualSizeRowSampler,
    }
