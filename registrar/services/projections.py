"""
Read models handed to callers. Frozen, so rendering code cannot mutate
registry state through them.
"""

from datetime import datetime
from typing import Callable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..core.entities import Course, Student


class GradeEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    course_id: int
    course_name: str
    grade: str
    graded: bool
    points: Optional[float] = None


class StudentRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    age: Optional[int] = None
    courses: Tuple[GradeEntry, ...] = ()
    average: float = 0.0
    created_at: datetime
    updated_at: datetime
    version: int

    @property
    def course_count(self) -> int:
        return len(self.courses)

    @classmethod
    def from_student(cls, student: Student, course_name: Callable[[int], str],
                     average: float) -> "StudentRecord":
        entries = tuple(
            GradeEntry(
                course_id=course_id,
                course_name=course_name(course_id),
                grade=str(grade),
                graded=grade.is_graded,
                points=grade.points,
            )
            for course_id, grade in sorted(student.grades.items())
        )
        return cls(
            id=student.id,
            name=student.name,
            age=student.age,
            courses=entries,
            average=average,
            created_at=student.created_at,
            updated_at=student.updated_at,
            version=student.version,
        )


class CourseSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    max_capacity: int = Field(..., ge=1)
    enrolled_count: int = Field(..., ge=0)
    is_full: bool
    student_ids: Tuple[int, ...] = ()
    average_grade: float = 0.0
    created_at: datetime
    updated_at: datetime
    version: int

    @property
    def occupancy(self) -> str:
        """Enrolled/max, e.g. '2/30'."""
        return f"{self.enrolled_count}/{self.max_capacity}"

    @classmethod
    def from_course(cls, course: Course, average_grade: float) -> "CourseSummary":
        return cls(
            id=course.id,
            name=course.name,
            max_capacity=course.max_capacity,
            enrolled_count=course.enrolled_count,
            is_full=course.is_full,
            student_ids=tuple(sorted(course.student_ids)),
            average_grade=average_grade,
            created_at=course.created_at,
            updated_at=course.updated_at,
            version=course.version,
        )


class RegistryStatistics(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_students: int
    total_courses: int
    total_enrollments: int
    full_courses: int
    overall_average: float
    grading_scheme: str
