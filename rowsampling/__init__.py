from rowsampling.api.api_main import RowSamplerFactory
from rowsampling.data.target_column_data import TargetColumnData, compute_offsets
from rowsampling.repository.constant_repo import SamplingMode
from rowsampling.sampling_strategies.balance_sampler import EqualSizeRowSampler
from rowsampling.sampling_strategies.base_sampler import AbstractClassificationRowSampler, RowSampler
from rowsampling.sampling_strategies.default_sampler import DefaultRowSampler
from rowsampling.sampling_strategies.random_sampler import RandomRowSampler
from rowsampling.sampling_strategies.stratified_sampler import StratifiedRowSampler
from rowsampling.selection.row_sample import (
    DefaultRowSample,
    RowSample,
    SubsetNoReplacementRowSample,
    SubsetWithReplacementRowSample,
)
from rowsampling.selection.subset_selector import (
    NO_REPLACEMENT_SELECTOR,
    WITH_REPLACEMENT_SELECTOR,
    NoReplacementSelector,
    SubsetSelector,
    WithReplacementSelector,
)
from rowsampling.utils.random_utils import spawn_tree_generators
from rowsampling.utils.sampling_config import RowSamplingConfig
