"""Конфигурация семплирования строк для обучения ансамбля."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

import numpy as np

from .random_utils import check_random_generator, spawn_tree_generators
from ..api.api_main import RowSamplerFactory
from ..data.target_column_data import TargetColumnData
from ..repository.constant_repo import SamplingDefaults, SamplingMode


@dataclass
class RowSamplingConfig:
    data_fraction: float = SamplingDefaults.DEF_DATA_FRACTION.value
    with_replacement: bool = SamplingDefaults.DEF_WITH_REPLACEMENT.value
    sampling_mode: Union[SamplingMode, str] = field(default=SamplingDefaults.DEF_SAMPLING_MODE.value)
    seed: Optional[int] = None

    def __post_init__(self):
        self.sampling_mode = SamplingMode.from_value(self.sampling_mode)
        self.set_data_fraction(self.data_fraction)

    def set_data_fraction(self, value: float):
        if not 0.0 < value <= 1.0:
            raise ValueError(f'Invalid value for "fraction of data per tree", must be in (0, 1]: {value}')
        self.data_fraction = float(value)

    def create_row_sampler(self, target: TargetColumnData):
        return RowSamplerFactory().create_row_sampler(target, mode=self.sampling_mode,
                                                      fraction=self.data_fraction,
                                                      with_replacement=self.with_replacement)

    def create_random_generator(self) -> np.random.Generator:
        return check_random_generator(self.seed)

    def spawn_tree_generators(self, n_trees: int) -> List[np.random.Generator]:
        return spawn_tree_generators(self.seed, n_trees)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data_fraction": self.data_fraction,
            "with_replacement": self.with_replacement,
            "sampling_mode": self.sampling_mode.value,
            "seed": self.seed,
        }
