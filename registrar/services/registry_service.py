"""
Registry service: the entry point callers use to manage students, courses,
enrollments, and grades.
"""

import logging
import threading
from typing import Any, List, Optional, Tuple, Union

from ..config import RegistrarConfig
from ..core.entities import Course, Student
from ..core.enums import EnrollmentResult, EntityKind
from ..core.exceptions import NotFoundError, ValidationError
from ..core.grades import mean
from ..persistence.identifiers import IdentifierAllocator
from .course_registry import CourseRegistry
from .projections import CourseSummary, RegistryStatistics, StudentRecord
from .student_registry import StudentRegistry


logger = logging.getLogger(__name__)

# (name, capacity) of the courses loaded by seed_sample_courses
SAMPLE_COURSES: Tuple[Tuple[str, int], ...] = (
    ("CS1102 Programming I", 30),
    ("CS1103 Programming II", 25),
    ("CS1104 Database I", 20),
)


class RegistryService:
    """
    Orchestrates the student and course registries.

    An enrollment exists only when both sides agree: the course's enrolled set
    holds the student ID and the student's grade map holds the course ID.
    Every operation that touches both sides runs under one lock, so a caller
    never observes one side updated without the other.
    """

    def __init__(self, config: Optional[RegistrarConfig] = None):
        self._config = config if config is not None else RegistrarConfig()
        allocator = IdentifierAllocator(self._config.id_bases)
        self._students = StudentRegistry(
            allocator,
            grading_scheme=self._config.grading_scheme,
            ungraded_policy=self._config.ungraded_policy,
        )
        self._courses = CourseRegistry(
            allocator,
            ungraded_policy=self._config.ungraded_policy,
        )
        self._lock = threading.RLock()

        if self._config.seed_sample_data:
            self.seed_sample_courses()

    @property
    def config(self) -> RegistrarConfig:
        return self._config

    # Creation

    def add_student(self, name: str, age: Optional[int] = None) -> int:
        with self._lock:
            return self._students.create(name, age).id

    def add_course(self, name: str, capacity: int) -> int:
        with self._lock:
            return self._courses.create(name, capacity).id

    def rename_student(self, student_id: int, name: str) -> None:
        with self._lock:
            self._students.rename(self._require_student(student_id), name)

    def set_student_age(self, student_id: int, age: Optional[int]) -> None:
        with self._lock:
            self._students.set_age(self._require_student(student_id), age)

    def seed_sample_courses(self) -> List[int]:
        """Load the sample course catalogue. Returns the new course IDs."""
        course_ids = [self.add_course(name, capacity) for name, capacity in SAMPLE_COURSES]
        logger.info("Seeded %d sample courses", len(course_ids))
        return course_ids

    # Enrollment

    def enroll_student_in_course(self, student_id: int, course_id: int,
                                 raise_on_missing: bool = True) -> EnrollmentResult:
        """
        Enroll a student, updating both the course and the student.

        Raises NotFoundError if either entity is missing, unless
        ``raise_on_missing`` is False, in which case NOT_FOUND is returned.
        """
        with self._lock:
            student = self._students.get(student_id)
            course = self._courses.get(course_id)
            if student is None or course is None:
                if raise_on_missing:
                    if student is None:
                        raise NotFoundError(EntityKind.STUDENT.value, student_id)
                    raise NotFoundError(EntityKind.COURSE.value, course_id)
                return EnrollmentResult.NOT_FOUND

            if course.has_student(student.id):
                logger.info("Student %s already enrolled in course %s", student.id, course.id)
                return EnrollmentResult.ALREADY_ENROLLED

            if not self._courses.enroll(course, student):
                logger.warning("Course %s is full; student %s not enrolled", course.id, student.id)
                return EnrollmentResult.COURSE_FULL

            self._students.enroll_in_course(student, course)
            logger.info("Enrolled student %s in course %s", student.id, course.id)
            return EnrollmentResult.SUCCESS

    def drop_student_from_course(self, student_id: int, course_id: int) -> bool:
        """Remove an enrollment from both sides. Returns False if there was none."""
        with self._lock:
            student = self._require_student(student_id)
            course = self._require_course(course_id)
            if not course.has_student(student.id) and not student.is_enrolled(course.id):
                return False
            self._courses.unenroll(course, student)
            self._students.drop_course(student, course)
            logger.info("Dropped student %s from course %s", student.id, course.id)
            return True

    def update_grade(self, student_id: int, course_id: int, grade: Any) -> bool:
        """
        Grade an enrolled student.

        Raises NotFoundError for unknown IDs and ValidationError for a grade
        outside the registry's scheme. Returns False if not enrolled.
        """
        with self._lock:
            student = self._require_student(student_id)
            course = self._require_course(course_id)
            return self._students.assign_grade(student, course, grade)

    # Removal

    def remove_student(self, student_id: int) -> bool:
        """Delete a student and remove it from every course it was enrolled in."""
        with self._lock:
            student = self._students.get(student_id)
            if student is None:
                return False
            for course_id in student.course_ids:
                course = self._courses.get(course_id)
                if course is not None:
                    self._courses.unenroll(course, student)
            return self._students.remove(student_id)

    def remove_course(self, course_id: int) -> bool:
        """Delete a course and remove it from every enrolled student's grade map."""
        with self._lock:
            course = self._courses.get(course_id)
            if course is None:
                return False
            for student_id in course.student_ids:
                student = self._students.get(student_id)
                if student is not None:
                    self._students.drop_course(student, course)
            return self._courses.remove(course_id)

    # Aggregates

    def course_average_grade(self, course_id: int) -> float:
        with self._lock:
            course = self._require_course(course_id)
            return self._courses.average_grade(course, self._students.get)

    def student_average(self, student_id: int) -> float:
        with self._lock:
            return self._students.average(self._require_student(student_id))

    def overall_average_grade(self) -> float:
        """Mean over every counted grade of every enrollment; 0.0 when none count."""
        with self._lock:
            policy = self._config.ungraded_policy
            values = (
                grade.counted_value(policy)
                for student in self._students.all()
                for grade in student.grades.values()
            )
            return mean(value for value in values if value is not None)

    def get_statistics(self) -> RegistryStatistics:
        with self._lock:
            courses = self._courses.all()
            return RegistryStatistics(
                total_students=len(self._students),
                total_courses=len(courses),
                total_enrollments=sum(course.enrolled_count for course in courses),
                full_courses=sum(1 for course in courses if course.is_full),
                overall_average=self.overall_average_grade(),
                grading_scheme=self._config.grading_scheme.value,
            )

    # Projections

    def get_student(self, student_id: int) -> StudentRecord:
        with self._lock:
            return self._student_record(self._require_student(student_id))

    def get_course(self, course_id: int) -> CourseSummary:
        with self._lock:
            return self._course_summary(self._require_course(course_id))

    def list_all(self, kind: Union[EntityKind, str]) -> Union[List[StudentRecord], List[CourseSummary]]:
        """All students or all courses, ordered by ID."""
        kind = self._coerce_kind(kind)
        with self._lock:
            if kind == EntityKind.STUDENT:
                return [self._student_record(student) for student in self._students.all()]
            return [self._course_summary(course) for course in self._courses.all()]

    def search(self, name: str) -> List[StudentRecord]:
        with self._lock:
            return [self._student_record(student) for student in self._students.search_by_name(name)]

    # Helpers

    def _require_student(self, student_id: int) -> Student:
        student = self._students.get(student_id)
        if student is None:
            raise NotFoundError(EntityKind.STUDENT.value, student_id)
        return student

    def _require_course(self, course_id: int) -> Course:
        course = self._courses.get(course_id)
        if course is None:
            raise NotFoundError(EntityKind.COURSE.value, course_id)
        return course

    def _course_name(self, course_id: int) -> str:
        course = self._courses.get(course_id)
        return course.name if course is not None else f"<course {course_id}>"

    def _student_record(self, student: Student) -> StudentRecord:
        return StudentRecord.from_student(student, self._course_name, self._students.average(student))

    def _course_summary(self, course: Course) -> CourseSummary:
        return CourseSummary.from_course(course, self._courses.average_grade(course, self._students.get))

    @staticmethod
    def _coerce_kind(kind: Union[EntityKind, str]) -> EntityKind:
        if isinstance(kind, EntityKind):
            return kind
        try:
            return EntityKind(str(kind).lower())
        except ValueError:
            raise ValidationError(f"Unknown entity kind {kind!r}", {"kind": kind})
