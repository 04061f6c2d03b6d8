"""
Registrar: an in-memory student and course registry.

Keeps students, courses and the enrollments between them consistent, with
capacity limits, auto-generated identifiers, grade validation and derived
aggregates such as course and student averages.
"""

__version__ = "1.0.0"
__author__ = "Registrar Development Team"
__description__ = "In-memory student and course registry"
