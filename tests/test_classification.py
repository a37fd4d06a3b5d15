import unittest

from metrics.classification import (
    RESTRICTION_GROUP,
    SHORTAGE_GROUP,
    ClassificationRange,
    ClassificationTable,
    get_restriction_group,
    get_shortage_group,
)


class RestrictionGroupTest(unittest.TestCase):
    def test_boundaries(self):
        expected = {1: 1, 15: 1, 16: 2, 33: 2, 34: 3, 50: 3, 51: 4, 55: 4, 56: 5, 88: 5}
        for rank, group in expected.items():
            self.assertEqual(get_restriction_group(rank), group, rank)

    def test_partitions_one_to_eighty_eight(self):
        groups = [get_restriction_group(rank) for rank in range(1, 89)]
        self.assertNotIn(None, groups)
        self.assertEqual(groups, sorted(groups))
        self.assertEqual(sorted(set(groups)), [1, 2, 3, 4, 5])

    def test_invalid_ranks(self):
        for rank in (0, -5, 89, None, 15.5, float("nan"), "10"):
            self.assertIsNone(get_restriction_group(rank), rank)


class ShortageGroupTest(unittest.TestCase):
    def test_boundaries(self):
        expected = {
            1: 1, 4: 1, 5: 2, 6: 2, 7: 3, 9: 3, 10: 4, 19: 4, 20: 5, 28: 5,
            29: 6, 32: 6, 33: 7, 38: 7, 39: 8, 45: 8, 46: 9, 59: 9, 60: 10, 76: 10,
        }
        for rank, group in expected.items():
            self.assertEqual(get_shortage_group(rank), group, rank)

    def test_partitions_one_to_seventy_six(self):
        groups = [get_shortage_group(rank) for rank in range(1, 77)]
        self.assertNotIn(None, groups)
        self.assertEqual(groups, sorted(groups))
        self.assertEqual(sorted(set(groups)), list(range(1, 11)))

    def test_invalid_ranks(self):
        for rank in (0, -1, 77, 100, None):
            self.assertIsNone(get_shortage_group(rank), rank)


class ClassificationTableTest(unittest.TestCase):
    def test_tables_are_contiguous(self):
        for table in (RESTRICTION_GROUP, SHORTAGE_GROUP):
            for previous, current in zip(table.ranges, table.ranges[1:]):
                self.assertEqual(current.low, previous.high + 1)
                self.assertEqual(current.bucket, previous.bucket + 1)

    def test_from_rows_sorts_ranges(self):
        table = ClassificationTable.from_rows("custom", [(11, 20, 2), (1, 10, 1)])
        self.assertEqual(table.buckets, (1, 2))
        self.assertEqual(table.classify(12), 2)

    def test_rejects_overlapping_ranges(self):
        with self.assertRaises(ValueError):
            ClassificationTable("bad", [ClassificationRange(1, 10, 1), ClassificationRange(10, 20, 2)])

    def test_rejects_inverted_range(self):
        with self.assertRaises(ValueError):
            ClassificationTable.from_rows("bad", [(5, 1, 1)])


if __name__ == "__main__":
    unittest.main()
