"""
Services module containing the registries and the orchestrating service.
"""

from .course_registry import CourseRegistry
from .projections import CourseSummary, GradeEntry, RegistryStatistics, StudentRecord
from .registry_service import RegistryService, SAMPLE_COURSES
from .student_registry import StudentRegistry

__all__ = [
    "CourseRegistry",
    "StudentRegistry",
    "RegistryService",
    "SAMPLE_COURSES",
    "CourseSummary",
    "GradeEntry",
    "RegistryStatistics",
    "StudentRecord",
]
