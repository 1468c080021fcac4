from typing import List, Optional, Union

import numpy as np

RandomStateLike = Union[None, int, np.random.SeedSequence, np.random.Generator]


def check_random_generator(random_state: RandomStateLike) -> np.random.Generator:
    """
    Приводит seed / SeedSequence / Generator к ``numpy.random.Generator``.
    Переданный Generator возвращается как есть, без копирования.
    """
    if isinstance(random_state, np.random.RandomState):
        raise TypeError("Legacy RandomState is not supported, pass a numpy Generator or an integer seed")
    return np.random.default_rng(random_state)


def spawn_tree_generators(seed: Optional[int], n_trees: int) -> List[np.random.Generator]:
    """
    Создает независимые генераторы, по одному на дерево ансамбля.

    Args:
        seed: Базовый seed (None - энтропия ОС)
        n_trees: Число деревьев

    Returns:
        Список генераторов с независимыми потоками случайных чисел
    """
    if n_trees <= 0:
        raise ValueError(f"Number of trees must be positive, got {n_trees}")
    children = np.random.SeedSequence(seed).spawn(n_trees)
    return [np.random.default_rng(child) for child in children]
