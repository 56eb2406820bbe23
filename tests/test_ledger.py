import unittest

from cgpacalc.core.errors import SubjectIndexError
from cgpacalc.core.ledger import GradeLedger


class GradeLedgerTests(unittest.TestCase):
    def setUp(self):
        self.ledger = GradeLedger()

    def test_starts_with_every_bucket_empty(self):
        for weight in (2, 3, 4):
            self.assertEqual(self.ledger.count(weight), 0)
        self.assertEqual(len(self.ledger), 0)

    def test_buckets_are_independent(self):
        self.ledger.add_subject(4)
        self.ledger.add_subject(4)
        self.ledger.add_subject(3)
        self.ledger.delete_subject(4, 0)
        self.assertEqual(self.ledger.count(4), 1)
        self.assertEqual(self.ledger.count(3), 1)
        self.assertEqual(self.ledger.count(2), 0)

    def test_delete_shifts_indices(self):
        for _ in range(3):
            self.ledger.add_subject(2)
        self.ledger.set_grade(2, 0, "O")
        self.ledger.set_grade(2, 1, "A")
        self.ledger.set_grade(2, 2, "B")
        self.ledger.delete_subject(2, 1)
        self.assertEqual([s.grade for s in self.ledger.subjects(2)], ["O", "B"])

    def test_out_of_range_index(self):
        self.ledger.add_subject(3)
        with self.assertRaises(SubjectIndexError):
            self.ledger.set_grade(3, 1, "A")
        with self.assertRaises(SubjectIndexError):
            self.ledger.delete_subject(3, -1)
        with self.assertRaises(IndexError):
            self.ledger.delete_subject(4, 0)

    def test_graded_entries_skip_unset(self):
        self.ledger.add_subject(4)
        self.ledger.add_subject(4)
        self.ledger.set_grade(4, 1, "c")
        self.assertEqual(list(self.ledger.graded_entries()), [(4, 7)])
        self.assertTrue(self.ledger.has_missing_grades(4))
        self.assertFalse(self.ledger.has_missing_grades(2))

    def test_clearing_a_grade(self):
        self.ledger.add_subject(3)
        self.ledger.set_grade(3, 0, "A")
        self.ledger.set_grade(3, 0, "")
        self.assertIsNone(self.ledger.subjects(3)[0].grade)


if __name__ == "__main__":
    unittest.main()
