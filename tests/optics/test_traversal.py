"""
Tests for multi-focus optics.
"""

import pytest

from opticheck.core.maybe import ABSENT, Present
from opticheck.exceptions import StructuralError
from opticheck.optics import Lens, Prism, Traversal


class TestTraversalReads:
    """Tests for reading several foci."""

    def test_to_list_skips_absent_prisms(self):
        """Test to_list keeps lens values and matching prism values."""
        traversal = Traversal.combine([Lens.key("a"), Prism.key("b"), Prism.key("c")])
        assert traversal.to_list({"a": None, "c": 3}) == [None, 3]

    def test_to_list_maybe_is_all_or_nothing(self):
        """Test one absent focus makes the whole result absent."""
        traversal = Traversal.combine([Prism.key("a"), Prism.key("b")])
        assert traversal.to_list_maybe({"a": 1, "b": 2}) == Present([1, 2])
        assert traversal.to_list_maybe({"a": 1}) is ABSENT

    def test_empty_traversal_is_absent(self):
        """Test the empty traversal never produces values."""
        assert Traversal.empty().to_list_maybe({"a": 1}) is ABSENT
        assert Traversal.empty().to_list({"a": 1}) == []

    def test_defaulted_focus(self):
        """Test (Prism, default) foci fill in absent values."""
        traversal = Traversal.combine([(Prism.key("a"), 0), Prism.key("b")])
        assert traversal.to_list_maybe({"b": 2}) == Present([0, 2])

    def test_lens_focus_raises(self):
        """Test a missing lens field still raises inside a traversal."""
        traversal = Traversal.combine([Lens.key("a")])
        with pytest.raises(StructuralError):
            traversal.to_list({})

    def test_preview_returns_first_present(self):
        """Test preview picks the first present focus in order."""
        traversal = Traversal.combine([Prism.key("a"), Prism.key("b")])
        assert traversal.preview({"b": 2}) == Present(2)
        assert not traversal.has({})

    def test_invalid_focus(self):
        """Test non-optics are rejected when combining."""
        with pytest.raises(TypeError):
            Traversal.combine(["a"])


class TestTraversalBuilding:
    """Tests for combining and updating."""

    def test_combine_flattens_nested_traversals(self):
        """Test nested traversals contribute their foci."""
        inner = Traversal.combine([Prism.key("b"), Prism.key("c")])
        traversal = Traversal.combine([Prism.key("a"), inner])
        assert len(traversal) == 3

    def test_concat(self):
        """Test concat appends foci."""
        left = Traversal.combine([Prism.key("a")])
        right = Traversal.combine([Prism.key("b")])
        assert left.concat(right).to_list({"a": 1, "b": 2}) == [1, 2]

    def test_over_updates_present_foci(self):
        """Test over touches every present focus and skips absent ones."""
        traversal = Traversal.combine([Lens.key("a"), Prism.key("b"), Prism.key("c")])
        result = traversal.over({"a": 1, "b": 2}, lambda x: x * 10)
        assert result == {"a": 10, "b": 20}
