"""
Command-line entry point for the registrar.
"""

import argparse
import sys
from typing import List, Optional

from .config import RegistrarConfig
from .core.enums import EntityKind, GradingScheme
from .core.exceptions import ConfigurationError
from .log import setup_logging
from .services import RegistryService


DEMO_STUDENTS = ("Alice", "Bob", "Carol")


def build_service(config: RegistrarConfig) -> RegistryService:
    """Construct a service for the given configuration."""
    return RegistryService(config)


def run_demo(service: RegistryService) -> None:
    """Enroll and grade a few students, then print the registry state."""
    print("Running registrar demonstration...")

    course_id = service.add_course("Math", 2)
    student_ids = [service.add_student(name) for name in DEMO_STUDENTS]

    print(f"\n=== Enrollment Demo (course {course_id}, capacity 2) ===")
    for student_id in student_ids:
        result = service.enroll_student_in_course(student_id, course_id)
        print(f"Enrolling student {student_id}: {result.value}")

    if service.config.grading_scheme == GradingScheme.PERCENTAGE:
        grades = (90, 70)
    else:
        grades = ("A", "C")
    for student_id, grade in zip(student_ids, grades):
        service.update_grade(student_id, course_id, grade)

    print("\n=== Courses ===")
    for course in service.list_all(EntityKind.COURSE):
        print(f"{course.id} - {course.name}: {course.occupancy} enrolled, average {course.average_grade:.2f}")

    print("\n=== Students ===")
    for student in service.list_all(EntityKind.STUDENT):
        grades_text = ", ".join(f"{entry.course_name}: {entry.grade}" for entry in student.courses) or "no courses"
        print(f"{student.id} - {student.name}: {grades_text}")

    print("\n=== Registry Statistics ===")
    print(service.get_statistics().model_dump())
    print("\n✓ Demo completed")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="In-memory student and course registry")
    parser.add_argument("--config", type=str, help="Configuration file path (JSON)")
    parser.add_argument("--log-level", type=str, help="Override the configured log level")
    parser.add_argument("--demo", action="store_true", help="Run demo mode")

    args = parser.parse_args(argv)

    try:
        config = RegistrarConfig.from_file(args.config) if args.config else RegistrarConfig()
        if args.log_level:
            config = RegistrarConfig.from_dict({**config.model_dump(), "log_level": args.log_level})
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}", file=sys.stderr)
        return 2

    setup_logging(config.log_level)
    service = build_service(config)

    if args.demo:
        run_demo(service)
    else:
        stats = service.get_statistics()
        print(f"✓ Registry ready: {stats.total_courses} courses, {stats.total_students} students")
    return 0


if __name__ == "__main__":
    sys.exit(main())
