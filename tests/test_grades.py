import unittest

from cgpacalc.core.errors import InvalidCreditWeightError, InvalidGradeError
from cgpacalc.core.grades import normalize_credit_weight, normalize_grade, to_grade_point


class GradeTableTests(unittest.TestCase):
    def test_grade_points(self):
        expected = {"O": 10, "A": 9, "B": 8, "C": 7, "D": 6, "P": 5, "F": 0}
        for letter, points in expected.items():
            self.assertEqual(to_grade_point(letter), points)

    def test_unknown_grade_point(self):
        with self.assertRaises(InvalidGradeError):
            to_grade_point("E")

    def test_normalize_grade(self):
        self.assertEqual(normalize_grade(" b "), "B")
        self.assertIsNone(normalize_grade(""))
        self.assertIsNone(normalize_grade(None))
        with self.assertRaises(InvalidGradeError):
            normalize_grade("S")
        with self.assertRaises(InvalidGradeError):
            normalize_grade(9)

    def test_normalize_credit_weight(self):
        self.assertEqual(normalize_credit_weight(4), 4)
        self.assertEqual(normalize_credit_weight("3"), 3)
        self.assertIsNone(normalize_credit_weight(""))
        self.assertIsNone(normalize_credit_weight(None))
        for bad in (5, 0, "x", True):
            with self.assertRaises(InvalidCreditWeightError):
                normalize_credit_weight(bad)

    def test_invalid_credit_is_value_error(self):
        with self.assertRaises(ValueError):
            normalize_credit_weight(1)


if __name__ == "__main__":
    unittest.main()
