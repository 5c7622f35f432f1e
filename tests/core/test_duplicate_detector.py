# tests/core/test_duplicate_detector.py
import unittest
from dirdupes.core.models import DuplicateGroup
from dirdupes.core.duplicate_detector import find_duplicate_groups

class TestDuplicateDetector(unittest.TestCase):

    def test_find_duplicates_none(self):
        hashes = {"h1": ["f1"], "h2": ["f2"]}
        self.assertEqual(find_duplicate_groups(hashes), [])

    def test_find_duplicates_one_set(self):
        hashes = {"h1": ["f1", "f3"], "h2": ["f2"]}

        result = find_duplicate_groups(hashes)
        self.assertEqual(result, [DuplicateGroup(id="h1", files=("f1", "f3"))])

    def test_find_duplicates_multiple_sets(self):
        hashes = {"h1": ("f1", "f3"), "h2": ("f2", "f4", "f6"), "h3": ("f5",)}

        result = find_duplicate_groups(hashes)
        self.assertEqual(len(result), 2) # h1 and h2 are duplicates

        group_h2 = next((g for g in result if g.id == "h2"), None)
        self.assertIsNotNone(group_h2)
        self.assertEqual(group_h2.files, ("f2", "f4", "f6"))
        self.assertEqual(group_h2.total_files, 3)

    def test_groups_are_immutable(self):
        group = find_duplicate_groups({"h1": ["a", "b"]})[0]
        with self.assertRaises(AttributeError):
            group.files = ()

    def test_empty_mapping(self):
        self.assertEqual(find_duplicate_groups({}), [])

if __name__ == '__main__':
    unittest.main()
