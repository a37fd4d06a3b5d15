import math
import unittest

import numpy as np

from normalization.type_normalizer import TypeNormalizer


class TypeNormalizerTest(unittest.TestCase):
    def setUp(self):
        self.normalizer = TypeNormalizer()

    def test_missing_values(self):
        for value in (None, "", "   ", float("nan"), np.float64("nan")):
            self.assertTrue(self.normalizer.is_missing(value), value)
            self.assertIsNone(self.normalizer.to_number(value))
        self.assertFalse(self.normalizer.is_missing(0))
        self.assertEqual(self.normalizer.to_number("0"), 0.0)

    def test_numeric_values(self):
        self.assertEqual(self.normalizer.to_number(3), 3.0)
        self.assertEqual(self.normalizer.to_number(np.int64(7)), 7.0)
        self.assertEqual(self.normalizer.to_number(" 12.5 "), 12.5)
        self.assertEqual(self.normalizer.to_number("-1e3"), -1000.0)
        self.assertEqual(self.normalizer.to_number(".5"), 0.5)
        self.assertEqual(self.normalizer.to_number("Infinity"), math.inf)
        self.assertEqual(self.normalizer.to_number("-Infinity"), -math.inf)

    def test_non_numeric_values(self):
        for value in ("abc", "1,234", "1_000", "nan", True, np.bool_(False), [1], {"a": 1}):
            self.assertIsNone(self.normalizer.to_number(value), value)


if __name__ == "__main__":
    unittest.main()
