import unittest
import numpy as np
import pandas as pd
import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from rowsampling import TargetColumnData, compute_offsets


class TestTargetColumnData(unittest.TestCase):

    def test_nominal_inference(self):
        self.assertTrue(TargetColumnData(pd.Series(['x', 'y'])).is_nominal)
        self.assertTrue(TargetColumnData(pd.Series([True, False])).is_nominal)
        self.assertTrue(TargetColumnData(pd.Series(['x', 'y'], dtype='category')).is_nominal)
        self.assertFalse(TargetColumnData(np.array([0.5, 1.5])).is_nominal)
        self.assertTrue(TargetColumnData(np.array([0, 0, 1]), is_nominal=True).is_nominal)

    def test_class_frequencies_in_block_order(self):
        target = TargetColumnData(pd.Series(['b', 'b', 'b', 'a', 'c', 'c']))
        self.assertEqual(list(target.class_frequencies().items()), [('b', 3), ('a', 1), ('c', 2)])
        self.assertEqual(target.class_labels(), ['b', 'a', 'c'])

    def test_unsorted_target(self):
        target = TargetColumnData(pd.Series(['a', 'b', 'a']))
        self.assertFalse(target.is_sorted())
        with self.assertRaises(ValueError):
            target.class_frequencies()

    def test_numeric_target_has_no_frequencies(self):
        with self.assertRaises(ValueError):
            TargetColumnData(np.array([0.1, 0.2])).class_frequencies()

    def test_missing_values_rejected(self):
        with self.assertRaises(ValueError):
            TargetColumnData(pd.Series(['a', None, 'b']))
        with self.assertRaises(ValueError):
            TargetColumnData(pd.Series([], dtype=object))

    def test_from_class_frequencies(self):
        target = TargetColumnData.from_class_frequencies({'yes': 6, 'no': 4})
        self.assertEqual(target.nr_rows, 10)
        self.assertTrue(target.is_nominal)
        self.assertEqual(dict(target.class_frequencies()), {'yes': 6, 'no': 4})

        target = TargetColumnData.from_class_frequencies([2, 5])
        self.assertEqual(list(target.class_frequencies().values()), [2, 5])

        with self.assertRaises(ValueError):
            TargetColumnData.from_class_frequencies([3, 0])

    def test_compute_offsets(self):
        offsets = compute_offsets([6, 4])
        np.testing.assert_array_equal(offsets, [0, 6])
        np.testing.assert_array_equal(compute_offsets([3]), [0])
        np.testing.assert_array_equal(compute_offsets([1, 2, 3, 4]), [0, 1, 3, 6])
        with self.assertRaises(ValueError):
            compute_offsets([])


if __name__ == '__main__':
    unittest.main()
