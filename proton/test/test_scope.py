import unittest
from ..compile.scope import Scope
from ..compile.error import DuplicateBindingError


class ScopeTest(unittest.TestCase):

    def test_get(self):
        scope = Scope()
        self.assertIsNone(scope.get('a'))
        scope.set('a', 1)
        self.assertEqual(scope.get('a'), 1)
        self.assertIn('a', scope)
        self.assertNotIn('b', scope)

    def test_child(self):
        parent = Scope()
        parent.set('a', 1)
        child = parent.child()
        self.assertIs(child.parent, parent)
        self.assertEqual(child.get('a'), 1)
        self.assertTrue(parent.declares('a'))
        self.assertFalse(child.declares('a'))

    def test_shadowing(self):
        parent = Scope()
        parent.set('a', 1)
        child = parent.child()
        child.set('a', 2)
        self.assertEqual(child.get('a'), 2)
        self.assertEqual(parent.get('a'), 1)

    def test_duplicate(self):
        scope = Scope()
        scope.set('a', 1)
        with self.assertRaisesRegex(DuplicateBindingError, "'a' is already defined"):
            scope.set('a', 2)
