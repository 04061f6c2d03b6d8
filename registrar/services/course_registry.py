"""
Course registry: owns Course entities and enforces capacity rules.
"""

import logging
from typing import Callable, List, Optional

from ..core.entities import Course, Student
from ..core.enums import EntityKind, UngradedPolicy
from ..core.grades import mean
from ..persistence.entity_store import EntityStore
from ..persistence.identifiers import IdentifierAllocator


logger = logging.getLogger(__name__)

StudentLookup = Callable[[int], Optional[Student]]


class CourseRegistry:
    """Creates, stores, and enrolls into courses."""

    def __init__(self, allocator: IdentifierAllocator,
                 store: Optional[EntityStore[int, Course]] = None,
                 ungraded_policy: UngradedPolicy = UngradedPolicy.EXCLUDE):
        self._allocator = allocator
        self._store = store if store is not None else EntityStore("course")
        self._ungraded_policy = ungraded_policy

    def create(self, name: str, max_capacity: int) -> Course:
        """Create a course. Raises ValidationError for a blank name or capacity < 1."""
        # Validate before allocating so a rejected course does not consume an ID.
        course = Course(self._allocator.peek(EntityKind.COURSE), name, max_capacity)
        self._allocator.next_id(EntityKind.COURSE)
        self._store.insert(course.id, course)
        logger.info("Created course %s (%s, capacity %d)", course.id, course.name, course.max_capacity)
        return course

    def get(self, course_id: int) -> Optional[Course]:
        return self._store.get(course_id)

    def all(self) -> List[Course]:
        return sorted(self._store.all(), key=lambda course: course.id)

    def remove(self, course_id: int) -> bool:
        removed = self._store.remove(course_id)
        if removed:
            logger.info("Removed course %s", course_id)
        return removed

    def enroll(self, course: Course, student: Student) -> bool:
        """
        Add the student to the course's enrolled set.

        Returns False, without raising, if the student is already enrolled or
        the course is at capacity. The student's own grade map is not touched.
        """
        if course.has_student(student.id):
            logger.debug("Student %s already in course %s", student.id, course.id)
            return False
        if course.is_full:
            logger.debug("Course %s is full (%d/%d)", course.id, course.enrolled_count, course.max_capacity)
            return False
        return course.add_student(student.id)

    def unenroll(self, course: Course, student: Student) -> None:
        course.remove_student(student.id)

    def average_grade(self, course: Course, student_lookup: StudentLookup) -> float:
        """Mean of counted grades among enrolled students; 0.0 when none count."""
        values = []
        for student_id in course.student_ids:
            student = student_lookup(student_id)
            if student is None:
                continue
            grade = student.grade_for(course.id)
            if grade is None:
                continue
            value = grade.counted_value(self._ungraded_policy)
            if value is not None:
                values.append(value)
        return mean(values)

    def __len__(self) -> int:
        return len(self._store)
