from unittest import TestCase

from registrar.core.enums import GradeKind, GradingScheme, LetterGrade, UngradedPolicy
from registrar.core.exceptions import ValidationError
from registrar.core.grades import Grade, UNGRADED, mean


class TestGrade(TestCase):
    def test_numeric_bounds(self) -> None:
        self.assertEqual(Grade.numeric(0).percentage, 0.0)
        self.assertEqual(Grade.numeric(100).percentage, 100.0)
        for bad in (-1, 101, float("nan"), float("inf")):
            with self.assertRaises(ValidationError):
                Grade.numeric(bad)

    def test_huge_int_is_out_of_range(self) -> None:
        with self.assertRaises(ValidationError):
            Grade.numeric(10 ** 400)

    def test_constructor_validates(self) -> None:
        for kwargs in (
            {"percentage": 150.0},
            {"percentage": None},
            {"percentage": 90.0, "letter": LetterGrade.A},
        ):
            with self.assertRaises(ValidationError):
                Grade(GradeKind.NUMERIC, **kwargs)
        with self.assertRaises(ValidationError):
            Grade(GradeKind.LETTER, letter="A")
        with self.assertRaises(ValidationError):
            Grade(GradeKind.UNGRADED, percentage=10.0)
        self.assertEqual(Grade(GradeKind.NUMERIC, percentage=90.0), Grade.numeric(90))

    def test_numeric_rejects_non_numbers(self) -> None:
        for bad in (True, None, "90"):
            with self.assertRaises(ValidationError):
                Grade.numeric(bad)

    def test_letter(self) -> None:
        grade = Grade.from_letter(" b ")
        self.assertEqual(grade.kind, GradeKind.LETTER)
        self.assertEqual(grade.letter, LetterGrade.B)
        self.assertEqual(grade.points, 3.0)
        self.assertEqual(str(grade), "B")
        with self.assertRaises(ValidationError):
            Grade.from_letter("E")

    def test_parse_respects_scheme(self) -> None:
        self.assertEqual(Grade.parse(85).kind, GradeKind.NUMERIC)
        self.assertEqual(Grade.parse("A", GradingScheme.LETTER).kind, GradeKind.LETTER)
        with self.assertRaises(ValidationError):
            Grade.parse("A", GradingScheme.PERCENTAGE)
        with self.assertRaises(ValidationError):
            Grade.parse(85, GradingScheme.LETTER)
        with self.assertRaises(ValidationError):
            Grade.parse(UNGRADED)

    def test_ungraded(self) -> None:
        self.assertIs(Grade.ungraded(), UNGRADED)
        self.assertFalse(UNGRADED.is_graded)
        self.assertIsNone(UNGRADED.points)
        self.assertEqual(str(UNGRADED), "Not graded")

    def test_counted_value(self) -> None:
        self.assertIsNone(UNGRADED.counted_value(UngradedPolicy.EXCLUDE))
        self.assertEqual(UNGRADED.counted_value(UngradedPolicy.ZERO), 0.0)
        self.assertEqual(Grade.numeric(42).counted_value(UngradedPolicy.EXCLUDE), 42.0)

    def test_display(self) -> None:
        self.assertEqual(str(Grade.numeric(90)), "90.00")

    def test_mean(self) -> None:
        self.assertEqual(mean([]), 0.0)
        self.assertEqual(mean([90.0, 70.0]), 80.0)
