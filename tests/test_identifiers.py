from unittest import TestCase

from registrar.core.enums import EntityKind
from registrar.persistence.identifiers import IdentifierAllocator


class TestIdentifierAllocator(TestCase):
    def test_default_bases(self) -> None:
        allocator = IdentifierAllocator()
        self.assertEqual(allocator.next_id(EntityKind.STUDENT), 1000)
        self.assertEqual(allocator.next_id(EntityKind.COURSE), 100)
        self.assertEqual(allocator.next_id(EntityKind.STUDENT), 1001)
        self.assertEqual(allocator.next_id(EntityKind.COURSE), 101)

    def test_custom_bases(self) -> None:
        allocator = IdentifierAllocator({EntityKind.STUDENT: 1, EntityKind.COURSE: 1})
        self.assertEqual(allocator.next_id(EntityKind.STUDENT), 1)
        self.assertEqual(allocator.next_id(EntityKind.COURSE), 1)
        self.assertEqual(allocator.base(EntityKind.STUDENT), 1)

    def test_peek_does_not_consume(self) -> None:
        allocator = IdentifierAllocator()
        self.assertEqual(allocator.peek(EntityKind.COURSE), 100)
        self.assertEqual(allocator.peek(EntityKind.COURSE), 100)
        self.assertEqual(allocator.next_id(EntityKind.COURSE), 100)
        self.assertEqual(allocator.peek(EntityKind.COURSE), 101)

    def test_identifiers_are_unique_and_increasing(self) -> None:
        allocator = IdentifierAllocator()
        issued = [allocator.next_id(EntityKind.STUDENT) for _ in range(50)]
        self.assertEqual(len(set(issued)), 50)
        self.assertEqual(issued, sorted(issued))
