import unittest
import numpy as np
import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from rowsampling import (
    NO_REPLACEMENT_SELECTOR,
    WITH_REPLACEMENT_SELECTOR,
    DefaultRowSampler,
    EqualSizeRowSampler,
    RandomRowSampler,
    StratifiedRowSampler,
    SubsetNoReplacementRowSample,
)


class TestDefaultRowSampler(unittest.TestCase):

    def test_all_rows_included_once(self):
        sampler = DefaultRowSampler(12)
        sample = sampler.create_row_sample(np.random.default_rng(1))
        self.assertEqual(sample.fraction, 1.0)
        np.testing.assert_array_equal(sample.counts, np.ones(12))
        self.assertEqual(len(sample.out_of_bag_indices()), 0)


class TestRandomRowSampler(unittest.TestCase):

    def test_random_sampler_draw_count(self):
        """Число строк = round(fraction * nr_rows), половины округляются вверх"""
        sampler = RandomRowSampler(0.25, NO_REPLACEMENT_SELECTOR, 10)
        self.assertEqual(sampler.nr_select, 3)
        sample = sampler.create_row_sample(np.random.default_rng(3))
        self.assertEqual(sample.included_count, 3)
        self.assertEqual(sample.fraction, 3 / 10)

    def test_random_sampler_with_replacement(self):
        sampler = RandomRowSampler(1.0, WITH_REPLACEMENT_SELECTOR, 100)
        sample = sampler.create_row_sample(np.random.default_rng(3))
        self.assertEqual(sample.included_count, 100)
        # бутстреп почти наверняка оставляет строки вне выборки
        self.assertGreater(len(sample.out_of_bag_indices()), 0)

    def test_invalid_fraction(self):
        for fraction in [0.0, -0.5, 1.5]:
            with self.assertRaises(ValueError):
                RandomRowSampler(fraction, NO_REPLACEMENT_SELECTOR, 10)

    def test_new_sample_per_call(self):
        sampler = RandomRowSampler(0.5, NO_REPLACEMENT_SELECTOR, 1000)
        rng = np.random.default_rng(5)
        first = sampler.create_row_sample(rng)
        second = sampler.create_row_sample(rng)
        self.assertIsNot(first, second)
        self.assertFalse(np.array_equal(first.counts, second.counts))


class TestStratifiedRowSampler(unittest.TestCase):

    def setUp(self):
        self.frequencies = [6, 4]

    def test_offsets_layout(self):
        sampler = StratifiedRowSampler(0.5, NO_REPLACEMENT_SELECTOR, [5, 1, 7, 3])
        np.testing.assert_array_equal(sampler.offsets, [0, 5, 6, 13])
        self.assertEqual(sampler.offsets[0], 0)
        self.assertTrue(np.all(np.diff(sampler.offsets) >= 0))
        self.assertEqual(sampler.offsets[-1] + sampler.bucket_sizes[-1], sampler.nr_rows)
        with self.assertRaises(ValueError):
            sampler.offsets[1] = 0

    def test_two_class_example(self):
        """10 строк, классы {6, 4}, доля 0.5: 3 строки из первого класса и 2 из второго"""
        sampler = StratifiedRowSampler(0.5, NO_REPLACEMENT_SELECTOR, self.frequencies)
        sample = sampler.create_row_sample(np.random.default_rng(11))

        self.assertIsInstance(sample, SubsetNoReplacementRowSample)
        self.assertEqual(sample.nr_rows, 10)
        self.assertEqual(sample.counts[:6].sum(), 3)
        self.assertEqual(sample.counts[6:].sum(), 2)
        self.assertEqual(sample.included_count, 5)
        self.assertEqual(sample.fraction, 0.5)

    def test_proportionality_within_rounding(self):
        frequencies = [37, 5, 120, 13]
        fraction = 0.3
        sampler = StratifiedRowSampler(fraction, NO_REPLACEMENT_SELECTOR, frequencies)
        sample = sampler.create_row_sample(np.random.default_rng(2))
        for offset, size in zip(sampler.offsets, sampler.bucket_sizes):
            included = sample.counts[offset:offset + size].sum()
            self.assertLessEqual(abs(included - fraction * size), 1)

    def test_bucket_rounded_to_zero_contributes_nothing(self):
        sampler = StratifiedRowSampler(0.1, NO_REPLACEMENT_SELECTOR, [50, 3])
        sample = sampler.create_row_sample(np.random.default_rng(2))
        self.assertEqual(sample.counts[:50].sum(), 5)
        self.assertEqual(sample.counts[50:].sum(), 0)

    def test_all_buckets_rounded_to_zero_rejected(self):
        with self.assertRaises(ValueError):
            StratifiedRowSampler(0.1, NO_REPLACEMENT_SELECTOR, [4, 3])
        with self.assertRaises(ValueError):
            StratifiedRowSampler(0.1, WITH_REPLACEMENT_SELECTOR, [4, 3])

    def test_rejects_non_positive_frequencies(self):
        with self.assertRaises(ValueError):
            StratifiedRowSampler(0.5, NO_REPLACEMENT_SELECTOR, [4, 0, 3])


class TestEqualSizeRowSampler(unittest.TestCase):

    def test_two_class_example(self):
        """Классы {6, 4}, доля 1.0: по 4 строки из каждого класса"""
        sampler = EqualSizeRowSampler(1.0, NO_REPLACEMENT_SELECTOR, [6, 4])
        self.assertEqual(sampler.minority_contribution, 4)
        sample = sampler.create_row_sample(np.random.default_rng(0))
        self.assertEqual(sample.counts[:6].sum(), 4)
        self.assertEqual(sample.counts[6:].sum(), 4)
        self.assertEqual(sample.included_count, 8)
        self.assertEqual(sample.fraction, 0.8)

    def test_balance_across_classes(self):
        frequencies = [90, 10, 35]
        sampler = EqualSizeRowSampler(0.7, NO_REPLACEMENT_SELECTOR, frequencies)
        sample = sampler.create_row_sample(np.random.default_rng(4))
        per_class = [sample.counts[o:o + s].sum() for o, s in zip(sampler.offsets, sampler.bucket_sizes)]
        self.assertEqual(per_class, [7, 7, 7])

    def test_with_replacement_balance(self):
        sampler = EqualSizeRowSampler(1.0, WITH_REPLACEMENT_SELECTOR, [90, 10])
        sample = sampler.create_row_sample(np.random.default_rng(4))
        self.assertEqual(sample.counts[:90].sum(), 10)
        self.assertEqual(sample.counts[90:].sum(), 10)

    def test_minority_class_first(self):
        sampler = EqualSizeRowSampler(1.0, NO_REPLACEMENT_SELECTOR, [4, 6])
        self.assertEqual(sampler.min_class_size, 4)
        sample = sampler.create_row_sample(np.random.default_rng(0))
        self.assertEqual(sample.counts[:4].sum(), 4)
        self.assertEqual(sample.counts[4:].sum(), 4)

    def test_select_failure_propagates(self):
        """Вклад больше размера класса без возвращения - ошибка, а не обрезка"""
        rng = np.random.default_rng(0)
        with self.assertRaises(ValueError):
            subsets = [NO_REPLACEMENT_SELECTOR.select(5, 6, rng), NO_REPLACEMENT_SELECTOR.select(8, 6, rng)]
            NO_REPLACEMENT_SELECTOR.combine(subsets, [0, 5], 13)

    def test_configuration_is_read_only(self):
        sampler = EqualSizeRowSampler(1.0, NO_REPLACEMENT_SELECTOR, [5, 8])
        with self.assertRaises(AttributeError):
            sampler.minority_contribution = 6
        with self.assertRaises(AttributeError):
            sampler.min_class_size = 8
        self.assertEqual(sampler.get_draw_counts(), [5, 5])

    def test_zero_contribution_rejected(self):
        """round(0.1 * 4) = 0: семплер без единой строки не создается"""
        with self.assertRaises(ValueError):
            EqualSizeRowSampler(0.1, NO_REPLACEMENT_SELECTOR, [1000, 4])
        with self.assertRaises(ValueError):
            EqualSizeRowSampler(0.1, WITH_REPLACEMENT_SELECTOR, [1000, 4])


if __name__ == '__main__':
    unittest.main()
