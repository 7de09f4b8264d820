"""
Tests for equality bundles.
"""

from opticheck.comparison import DEFAULT_EQ, Eq, eq_by
from opticheck.optics import Lens, Prism, Traversal

case_insensitive = Eq.make(lambda a, b: a.lower() == b.lower())


class TestEqBasics:
    """Tests for building and combining Eq bundles."""

    def test_default_eq(self):
        """Test the default bundle uses ==."""
        assert DEFAULT_EQ.eq(1, 1)
        assert DEFAULT_EQ.not_eq(1, 2)

    def test_make_derives_not_eq(self):
        """Test not_eq defaults to the negation of eq."""
        assert case_insensitive.eq("A", "a")
        assert not case_insensitive.not_eq("A", "a")

    def test_negate_and_predicate(self):
        """Test negate swaps the functions and to_predicate fixes one side."""
        assert DEFAULT_EQ.negate().eq(1, 2)
        is_three = DEFAULT_EQ.to_predicate(3)
        assert is_three(3)
        assert not is_three(4)

    def test_concat_all_and_any(self):
        """Test conjunction and disjunction, including their empty identities."""
        by_a = DEFAULT_EQ.contramap("a")
        by_b = DEFAULT_EQ.contramap("b")
        left, right = {"a": 1, "b": 2}, {"a": 1, "b": 3}
        assert not Eq.concat_all([by_a, by_b]).eq(left, right)
        assert Eq.concat_any([by_a, by_b]).eq(left, right)
        assert Eq.concat_all([]).eq(left, right)
        assert not Eq.concat_any([]).eq(left, right)


class TestContramap:
    """Tests for comparing through projections."""

    def test_field_name(self):
        """Test comparing by a field."""
        assert eq_by("id", {"id": 1, "x": 1}, {"id": 1, "x": 2})
        assert not eq_by("id", {"id": 1}, {"id": 2})

    def test_custom_base(self):
        """Test the base equality applies to the projected values."""
        assert eq_by("name", {"name": "ANN"}, {"name": "ann"}, case_insensitive)

    def test_prism_absence(self):
        """Test two absent values are equal and absent never equals present."""
        eq = DEFAULT_EQ.contramap(Prism.key("nickname"))
        assert eq.eq({}, {"nickname": None})
        assert not eq.eq({}, {"nickname": "bo"})
        assert eq.not_eq({"nickname": "bo"}, {})

    def test_defaulted_prism(self):
        """Test defaults take part in comparison."""
        eq = DEFAULT_EQ.contramap((Prism.key("score"), 0))
        assert eq.eq({}, {"score": 0})

    def test_lens_and_function(self):
        """Test total projections compare their values."""
        assert DEFAULT_EQ.contramap(Lens.key("a")).eq({"a": None}, {"a": None})
        assert DEFAULT_EQ.contramap(len).eq([1, 2], "ab")

    def test_eq_is_used_as_is(self):
        """Test passing an Eq returns it unchanged."""
        assert DEFAULT_EQ.contramap(case_insensitive) is case_insensitive


class TestTraversalEq:
    """Tests for comparing through a traversal."""

    traversal = Traversal.combine([Prism.key("a"), Prism.key("b")])

    def test_all_foci_equal(self):
        """Test equal when every focus is present and equal."""
        eq = DEFAULT_EQ.contramap(self.traversal)
        assert eq.eq({"a": 1, "b": 2, "c": 0}, {"a": 1, "b": 2, "c": 9})
        assert not eq.eq({"a": 1, "b": 2}, {"a": 1, "b": 3})

    def test_missing_focus_is_never_equal(self):
        """Test a missing focus makes the structures unequal, even on both sides."""
        eq = DEFAULT_EQ.contramap(self.traversal)
        assert not eq.eq({"a": 1}, {"a": 1, "b": 2})
        assert not eq.eq({"a": 1}, {"a": 1})
        assert eq.not_eq({"a": 1}, {"a": 1})
