"""
Core entities of the registry: students and courses.
"""

from abc import ABC
from datetime import datetime, timezone
from typing import Any, Dict, FrozenSet, Optional, Set

from .enums import EntityKind
from .exceptions import ValidationError
from .grades import Grade, UNGRADED


def validate_name(name: Any, kind: EntityKind) -> str:
    """Return the stripped name, or raise ValidationError if it is blank."""
    if not isinstance(name, str) or not name.strip():
        raise ValidationError(f"{kind.value.capitalize()} name cannot be empty", {"name": name})
    return name.strip()


def validate_age(age: Any) -> Optional[int]:
    """Return the age, or raise ValidationError unless it is None or an int >= 0."""
    if age is None:
        return None
    if isinstance(age, bool) or not isinstance(age, int) or age < 0:
        raise ValidationError("Age must be a non-negative integer", {"age": age})
    return age


class AbstractEntity(ABC):
    """Base entity with an immutable integer ID, timestamps, and versioning."""

    def __init__(self, entity_id: int):
        self._id = entity_id
        self._created_at = datetime.now(timezone.utc)
        self._updated_at = self._created_at
        self._version = 1

    @property
    def id(self) -> int:
        """Get the entity ID."""
        return self._id

    @property
    def created_at(self) -> datetime:
        """Get creation timestamp."""
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        """Get last update timestamp."""
        return self._updated_at

    @property
    def version(self) -> int:
        """Get current version."""
        return self._version

    def touch(self) -> None:
        """Record a mutation."""
        self._updated_at = datetime.now(timezone.utc)
        self._version += 1

    def __str__(self) -> str:
        return f"{self._id} - {getattr(self, 'name', '')}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id}, version={self._version})"


class Student(AbstractEntity):
    """Student entity holding its course -> grade associations."""

    def __init__(self, student_id: int, name: str, age: Optional[int] = None):
        super().__init__(student_id)
        self._name = validate_name(name, EntityKind.STUDENT)
        self._age = validate_age(age)
        self._grades: Dict[int, Grade] = {}  # Course IDs

    @property
    def name(self) -> str:
        return self._name

    @property
    def age(self) -> Optional[int]:
        return self._age

    @property
    def grades(self) -> Dict[int, Grade]:
        """Copy of the course -> grade map."""
        return self._grades.copy()

    @property
    def course_ids(self) -> FrozenSet[int]:
        return frozenset(self._grades)

    def is_enrolled(self, course_id: int) -> bool:
        return course_id in self._grades

    def grade_for(self, course_id: int) -> Optional[Grade]:
        """Grade for a course, or None if not enrolled."""
        return self._grades.get(course_id)

    def rename(self, name: str) -> None:
        self._name = validate_name(name, EntityKind.STUDENT)
        self.touch()

    def set_age(self, age: Optional[int]) -> None:
        self._age = validate_age(age)
        self.touch()

    def add_course(self, course_id: int) -> None:
        """Add an ungraded entry. Existing entries are kept as they are."""
        if course_id in self._grades:
            return
        self._grades[course_id] = UNGRADED
        self.touch()

    def set_grade(self, course_id: int, grade: Grade) -> None:
        self._grades[course_id] = grade
        self.touch()

    def remove_course(self, course_id: int) -> None:
        if self._grades.pop(course_id, None) is not None:
            self.touch()


class Course(AbstractEntity):
    """Course entity with a fixed capacity and a set of enrolled students."""

    def __init__(self, course_id: int, name: str, max_capacity: int):
        super().__init__(course_id)
        self._name = validate_name(name, EntityKind.COURSE)
        if isinstance(max_capacity, bool) or not isinstance(max_capacity, int) or max_capacity < 1:
            raise ValidationError("Course capacity must be at least 1", {"max_capacity": max_capacity})
        self._max_capacity = max_capacity
        self._enrolled: Set[int] = set()  # Student IDs

    @property
    def name(self) -> str:
        return self._name

    @property
    def max_capacity(self) -> int:
        return self._max_capacity

    @property
    def student_ids(self) -> FrozenSet[int]:
        return frozenset(self._enrolled)

    @property
    def enrolled_count(self) -> int:
        return len(self._enrolled)

    @property
    def is_full(self) -> bool:
        return len(self._enrolled) >= self._max_capacity

    def has_student(self, student_id: int) -> bool:
        return student_id in self._enrolled

    def add_student(self, student_id: int) -> bool:
        """Add a student. Returns False if already present or the course is full."""
        if student_id in self._enrolled or self.is_full:
            return False
        self._enrolled.add(student_id)
        self.touch()
        return True

    def remove_student(self, student_id: int) -> None:
        if student_id in self._enrolled:
            self._enrolled.remove(student_id)
            self.touch()
