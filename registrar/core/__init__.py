"""
Core module containing the entity model, grades, and exceptions.
"""

from .entities import *
from .enums import *
from .exceptions import *
from .grades import *
from .interfaces import *

__all__ = [
    # Entities
    "AbstractEntity",
    "Student",
    "Course",
    "validate_name",
    
    # Grades
    "Grade",
    "UNGRADED",
    "mean",
    
    # Interfaces
    "Repository",
    
    # Enums
    "EntityKind",
    "EnrollmentResult",
    "GradeKind",
    "LetterGrade",
    "GradingScheme",
    "UngradedPolicy",
    
    # Exceptions
    "RegistrarError",
    "ValidationError",
    "NotFoundError",
    "ConfigurationError",
]
