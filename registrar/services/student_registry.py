"""
Student registry: owns Student entities and their course -> grade maps.
"""

import logging
from typing import Any, List, Optional

from ..core.entities import Course, Student
from ..core.enums import EntityKind, GradingScheme, UngradedPolicy
from ..core.exceptions import ValidationError
from ..core.grades import Grade, mean
from ..persistence.entity_store import EntityStore
from ..persistence.identifiers import IdentifierAllocator


logger = logging.getLogger(__name__)


class StudentRegistry:
    """Creates, stores, grades, and searches students."""

    def __init__(self, allocator: IdentifierAllocator,
                 store: Optional[EntityStore[int, Student]] = None,
                 grading_scheme: GradingScheme = GradingScheme.PERCENTAGE,
                 ungraded_policy: UngradedPolicy = UngradedPolicy.EXCLUDE):
        self._allocator = allocator
        self._store = store if store is not None else EntityStore("student")
        self._grading_scheme = grading_scheme
        self._ungraded_policy = ungraded_policy

    def create(self, name: str, age: Optional[int] = None) -> Student:
        """Create a student. Raises ValidationError for a blank name or a negative age."""
        student = Student(self._allocator.peek(EntityKind.STUDENT), name, age)
        self._allocator.next_id(EntityKind.STUDENT)
        self._store.insert(student.id, student)
        logger.info("Created student %s (%s)", student.id, student.name)
        return student

    def get(self, student_id: int) -> Optional[Student]:
        return self._store.get(student_id)

    def all(self) -> List[Student]:
        return sorted(self._store.all(), key=lambda student: student.id)

    def remove(self, student_id: int) -> bool:
        removed = self._store.remove(student_id)
        if removed:
            logger.info("Removed student %s", student_id)
        return removed

    def rename(self, student: Student, name: str) -> None:
        """Change a student's name, validating it like create does."""
        student.rename(name)
        self._store.update(student.id, student)

    def set_age(self, student: Student, age: Optional[int]) -> None:
        student.set_age(age)
        self._store.update(student.id, student)

    def enroll_in_course(self, student: Student, course: Course) -> None:
        """Insert an ungraded entry for the course. Idempotent."""
        student.add_course(course.id)

    def assign_grade(self, student: Student, course: Course, grade: Any) -> bool:
        """
        Store a grade for an enrolled course.

        The grade is validated first: an invalid grade raises ValidationError
        and leaves the stored grade unchanged. Returns False if the student is
        not enrolled in the course.
        """
        parsed = Grade.parse(grade, self._grading_scheme)
        if not student.is_enrolled(course.id):
            logger.info("Student %s is not enrolled in course %s; grade not stored", student.id, course.id)
            return False
        student.set_grade(course.id, parsed)
        logger.info("Graded student %s in course %s: %s", student.id, course.id, parsed)
        return True

    def drop_course(self, student: Student, course: Course) -> None:
        student.remove_course(course.id)

    def search_by_name(self, query: str) -> List[Student]:
        """Case-insensitive substring match on name. A blank query matches nothing."""
        if query is None:
            return []
        if not isinstance(query, str):
            raise ValidationError("Search query must be a string", {"query": query})
        if not query.strip():
            return []
        term = query.lower()
        return [student for student in self.all() if term in student.name.lower()]

    def average(self, student: Student) -> float:
        """Mean of the student's counted grades; 0.0 when none count."""
        values = [grade.counted_value(self._ungraded_policy) for grade in student.grades.values()]
        return mean(value for value in values if value is not None)

    def __len__(self) -> int:
        return len(self._store)
