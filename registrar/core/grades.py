"""
Grade value object: ungraded, a numeric percentage, or a letter symbol.
"""

from dataclasses import dataclass
from typing import Any, Optional

from .enums import (
    GradeKind, GradingScheme, LetterGrade, UngradedPolicy,
    MIN_PERCENTAGE, MAX_PERCENTAGE
)
from .exceptions import ValidationError


@dataclass(frozen=True)
class Grade:
    """Immutable tagged grade. Build with the class methods, not the constructor."""
    kind: GradeKind
    percentage: Optional[float] = None
    letter: Optional[LetterGrade] = None

    def __post_init__(self):
        if self.kind == GradeKind.NUMERIC:
            _check_percentage(self.percentage)
            valid = self.letter is None
        elif self.kind == GradeKind.LETTER:
            valid = isinstance(self.letter, LetterGrade) and self.percentage is None
        else:
            valid = self.kind == GradeKind.UNGRADED and self.percentage is None and self.letter is None
        if not valid:
            raise ValidationError(
                f"Inconsistent grade: {self.kind!r}",
                {"kind": self.kind, "percentage": self.percentage, "letter": self.letter},
            )

    @classmethod
    def ungraded(cls) -> "Grade":
        return UNGRADED

    @classmethod
    def numeric(cls, value: Any) -> "Grade":
        """Create a percentage grade, validating the [0, 100] range."""
        _check_percentage(value)
        return cls(GradeKind.NUMERIC, percentage=float(value))

    @classmethod
    def from_letter(cls, symbol: Any) -> "Grade":
        """Create a letter grade from 'A'..'F' (case-insensitive)."""
        if isinstance(symbol, LetterGrade):
            return cls(GradeKind.LETTER, letter=symbol)
        if not isinstance(symbol, str):
            raise ValidationError(f"Letter grade must be a string, got {symbol!r}", {"grade": symbol})
        try:
            return cls(GradeKind.LETTER, letter=LetterGrade(symbol.strip().upper()))
        except ValueError:
            allowed = ", ".join(letter.value for letter in LetterGrade)
            raise ValidationError(f"Letter grade must be one of {allowed}", {"grade": symbol})

    @classmethod
    def parse(cls, value: Any, scheme: GradingScheme = GradingScheme.PERCENTAGE) -> "Grade":
        """
        Normalise a raw grade for a registry using ``scheme``.

        Numbers become percentage grades and strings become letter grades.
        A grade of the wrong variant for the scheme is rejected.
        """
        if isinstance(value, Grade):
            grade = value
        elif isinstance(value, (str, LetterGrade)):
            grade = cls.from_letter(value)
        else:
            grade = cls.numeric(value)

        if grade.kind == GradeKind.UNGRADED:
            raise ValidationError("Cannot assign an empty grade")
        expected = GradeKind.NUMERIC if scheme == GradingScheme.PERCENTAGE else GradeKind.LETTER
        if grade.kind != expected:
            raise ValidationError(
                f"Registry uses {scheme.value} grades, got a {grade.kind.value} grade",
                {"grade": str(grade), "scheme": scheme.value},
            )
        return grade

    @property
    def is_graded(self) -> bool:
        return self.kind != GradeKind.UNGRADED

    @property
    def points(self) -> Optional[float]:
        """Numeric value used in averages: the percentage or the letter's grade points."""
        if self.kind == GradeKind.NUMERIC:
            return self.percentage
        if self.kind == GradeKind.LETTER:
            return self.letter.grade_points
        return None

    def counted_value(self, policy: UngradedPolicy) -> Optional[float]:
        """Value this grade contributes to an average, or None if it is left out."""
        if self.is_graded:
            return self.points
        if policy == UngradedPolicy.ZERO:
            return 0.0
        return None

    def __str__(self) -> str:
        if self.kind == GradeKind.NUMERIC:
            return f"{self.percentage:.2f}"
        if self.kind == GradeKind.LETTER:
            return self.letter.value
        return "Not graded"


def _check_percentage(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"Grade must be a number, got {value!r}", {"grade": value})
    # NaN fails the comparison too
    if not MIN_PERCENTAGE <= value <= MAX_PERCENTAGE:
        raise ValidationError("Grade must be between 0 and 100", {"grade": value})


UNGRADED = Grade(GradeKind.UNGRADED)


def mean(values) -> float:
    """Arithmetic mean that returns 0.0 for an empty input."""
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)
