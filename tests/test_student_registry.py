from unittest import TestCase

from registrar.core.entities import Course
from registrar.core.enums import GradingScheme
from registrar.core.exceptions import ValidationError
from registrar.core.grades import Grade, UNGRADED
from registrar.persistence.identifiers import IdentifierAllocator
from registrar.services.student_registry import StudentRegistry


class TestStudentRegistry(TestCase):
    def setUp(self) -> None:
        self.registry = StudentRegistry(IdentifierAllocator())
        self.math = Course(100, "Math", 10)
        self.art = Course(101, "Art", 10)

    def test_create(self) -> None:
        alice = self.registry.create(" Alice ")
        self.assertEqual(alice.id, 1000)
        self.assertEqual(alice.name, "Alice")
        self.assertEqual(alice.grades, {})
        self.assertEqual(self.registry.create("Bob").id, 1001)

    def test_create_rejects_blank_name(self) -> None:
        for name in ("", "  ", None):
            with self.assertRaises(ValidationError):
                self.registry.create(name)
        self.assertEqual(len(self.registry), 0)

    def test_create_with_age(self) -> None:
        alice = self.registry.create("Alice", 21)
        self.assertEqual(alice.age, 21)
        with self.assertRaises(ValidationError):
            self.registry.create("Bob", -1)
        self.assertEqual(self.registry.create("Bob").id, alice.id + 1)

    def test_set_age(self) -> None:
        alice = self.registry.create("Alice", 21)
        version = alice.version
        self.registry.set_age(alice, 22)
        self.assertEqual(alice.age, 22)
        self.assertEqual(alice.version, version + 1)
        with self.assertRaises(ValidationError):
            self.registry.set_age(alice, -5)
        self.assertEqual(alice.age, 22)

    def test_enroll_in_course_is_idempotent(self) -> None:
        alice = self.registry.create("Alice")
        self.registry.enroll_in_course(alice, self.math)
        self.registry.assign_grade(alice, self.math, 80)
        self.registry.enroll_in_course(alice, self.math)
        self.assertEqual(alice.grade_for(self.math.id), Grade.numeric(80))

    def test_assign_grade(self) -> None:
        alice = self.registry.create("Alice")
        self.assertFalse(self.registry.assign_grade(alice, self.math, 90))
        self.registry.enroll_in_course(alice, self.math)
        self.assertEqual(alice.grade_for(self.math.id), UNGRADED)
        self.assertTrue(self.registry.assign_grade(alice, self.math, 90))
        self.assertEqual(alice.grade_for(self.math.id).percentage, 90.0)

    def test_assign_out_of_range_grade_keeps_previous(self) -> None:
        alice = self.registry.create("Alice")
        self.registry.enroll_in_course(alice, self.math)
        self.registry.assign_grade(alice, self.math, 75)
        for bad in (-1, 101):
            with self.assertRaises(ValidationError):
                self.registry.assign_grade(alice, self.math, bad)
        self.assertEqual(alice.grade_for(self.math.id).percentage, 75.0)

    def test_invalid_grade_raises_even_when_not_enrolled(self) -> None:
        alice = self.registry.create("Alice")
        with self.assertRaises(ValidationError):
            self.registry.assign_grade(alice, self.math, 150)

    def test_letter_scheme(self) -> None:
        registry = StudentRegistry(IdentifierAllocator(), grading_scheme=GradingScheme.LETTER)
        alice = registry.create("Alice")
        registry.enroll_in_course(alice, self.math)
        registry.enroll_in_course(alice, self.art)
        self.assertTrue(registry.assign_grade(alice, self.math, "a"))
        self.assertTrue(registry.assign_grade(alice, self.art, "C"))
        with self.assertRaises(ValidationError):
            registry.assign_grade(alice, self.math, 90)
        self.assertEqual(registry.average(alice), 3.0)

    def test_drop_course(self) -> None:
        alice = self.registry.create("Alice")
        self.registry.drop_course(alice, self.math)
        self.registry.enroll_in_course(alice, self.math)
        self.registry.drop_course(alice, self.math)
        self.assertFalse(alice.is_enrolled(self.math.id))

    def test_search_by_name(self) -> None:
        alice = self.registry.create("Alice Smith")
        bob = self.registry.create("Bob Smithers")
        self.registry.create("Carol")
        self.assertEqual(self.registry.search_by_name("smith"), [alice, bob])
        self.assertEqual(self.registry.search_by_name("CAROL")[0].name, "Carol")
        self.assertEqual(self.registry.search_by_name("zed"), [])
        self.assertEqual(self.registry.search_by_name(""), [])
        self.assertEqual(self.registry.search_by_name("   "), [])

    def test_rename(self) -> None:
        alice = self.registry.create("Alice")
        version = alice.version
        self.registry.rename(alice, "Alicia")
        self.assertEqual(self.registry.get(alice.id).name, "Alicia")
        self.assertGreater(alice.version, version)
        with self.assertRaises(ValidationError):
            self.registry.rename(alice, " ")
        self.assertEqual(alice.name, "Alicia")

    def test_average_excludes_ungraded(self) -> None:
        alice = self.registry.create("Alice")
        self.assertEqual(self.registry.average(alice), 0.0)
        self.registry.enroll_in_course(alice, self.math)
        self.registry.enroll_in_course(alice, self.art)
        self.registry.assign_grade(alice, self.math, 88)
        self.assertEqual(self.registry.average(alice), 88.0)

    def test_grades_accessor_is_a_copy(self) -> None:
        alice = self.registry.create("Alice")
        alice.grades[self.math.id] = Grade.numeric(50)
        self.assertFalse(alice.is_enrolled(self.math.id))
