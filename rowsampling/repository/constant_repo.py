from enum import Enum
from sklearn.datasets import make_classification, make_regression


class SamplingMode(Enum):
    """
    Режимы семплирования строк для одного дерева ансамбля
    """
    RANDOM = 'random'
    EQUAL_SIZE = 'equal_size'
    STRATIFIED = 'stratified'

    @classmethod
    def from_value(cls, value) -> 'SamplingMode':
        if isinstance(value, cls):
            return value
        for mode in cls:
            if mode.value == str(value).lower() or mode.name == str(value).upper():
                return mode
        raise ValueError(f"Unknown sampling mode: {value}. "
                         f"Available: {[mode.value for mode in cls]}")

    @property
    def requires_nominal_target(self) -> bool:
        return self in (SamplingMode.EQUAL_SIZE, SamplingMode.STRATIFIED)


class SamplingDefaults(Enum):
    DEF_DATA_FRACTION = 1.0
    DEF_WITH_REPLACEMENT = False
    DEF_SAMPLING_MODE = SamplingMode.RANDOM
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class SyntDataset(Enum):
    DEFAULT_CLF_DATASET_PARAMS = dict(n_samples=1000, n_features=2, n_informative=2,
                                      n_redundant=0, n_classes=2, n_clusters_per_class=1,
                                      weights=[0.9, 0.1], flip_y=0, random_state=42)
    DEFAULT_REG_DATASET_PARAMS = dict(n_samples=1000, n_features=2, n_informative=2, random_state=42)
    DATASET_GENERATORS = dict(classification=make_classification,
                              regression=make_regression)
    DATASET_DEFAULT_PARAMS = dict(classification=DEFAULT_CLF_DATASET_PARAMS,
                                  regression=DEFAULT_REG_DATASET_PARAMS)
