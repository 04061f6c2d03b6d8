"""
Enumerations and constants for the registrar.
"""

from enum import Enum


class EntityKind(Enum):
    """Kinds of entity held by the registry."""
    STUDENT = "student"
    COURSE = "course"


class EnrollmentResult(Enum):
    """Outcome of an enrollment attempt."""
    SUCCESS = "success"
    COURSE_FULL = "course_full"
    ALREADY_ENROLLED = "already_enrolled"
    NOT_FOUND = "not_found"


class GradeKind(Enum):
    """Variants of a stored grade."""
    UNGRADED = "ungraded"
    NUMERIC = "numeric"
    LETTER = "letter"


class LetterGrade(Enum):
    """Letter grade symbols."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

    @property
    def grade_points(self) -> float:
        return _GRADE_POINTS[self]


_GRADE_POINTS = {
    LetterGrade.A: 4.0,
    LetterGrade.B: 3.0,
    LetterGrade.C: 2.0,
    LetterGrade.D: 1.0,
    LetterGrade.F: 0.0,
}


class GradingScheme(Enum):
    """Which grade variant a registry accepts."""
    PERCENTAGE = "percentage"  # 0-100
    LETTER = "letter"  # A-F


class UngradedPolicy(Enum):
    """How ungraded enrollments contribute to averages."""
    EXCLUDE = "exclude"  # left out of the denominator
    ZERO = "zero"  # counted as 0


MIN_PERCENTAGE = 0.0
MAX_PERCENTAGE = 100.0
