"""
Tests for the class tag registry.
"""

import unittest

from anglekit import CLASS_TAGS, Angle, AngleFormatter, class_tag, special_class
from anglekit.registry import tagged_classes


class TestClassTags(unittest.TestCase):
    """Test the static class tag table."""

    def test_core_tags(self):
        """Test the tags of the core types."""
        self.assertEqual(class_tag(AngleFormatter), 3)
        self.assertEqual(class_tag(Angle), 4)

    def test_instance_lookup(self):
        """Test that instances resolve through their type."""
        self.assertEqual(class_tag(Angle(30)), 4)
        self.assertEqual(class_tag(AngleFormatter()), 3)

    def test_untagged_type(self):
        """Test that unregistered types raise KeyError."""
        with self.assertRaises(KeyError):
            class_tag(int)

    def test_register_new_class(self):
        """Test tagging a new class with the decorator."""

        @special_class(9)
        class Widget:
            pass

        self.addCleanup(CLASS_TAGS.pop, Widget)
        self.assertEqual(class_tag(Widget), 9)
        self.assertIn((Widget, 9), tagged_classes())

    def test_conflicting_tag(self):
        """Test that a class cannot be registered twice with different tags."""
        with self.assertRaises(ValueError):
            special_class(1)(Angle)
        self.assertEqual(class_tag(Angle), 4)

    def test_tag_must_be_int(self):
        """Test that non-integer tags are rejected."""
        with self.assertRaises(TypeError):
            special_class("4")
        with self.assertRaises(TypeError):
            special_class(True)

    def test_tagged_classes_sorted(self):
        """Test that the listing is ordered by tag."""
        tags = [tag for _, tag in tagged_classes()]
        self.assertEqual(tags, sorted(tags))


if __name__ == "__main__":
    unittest.main()
