"""
Tests for ordering bundles.
"""

import pytest

from opticheck.comparison import DEFAULT_ORD, Ord
from opticheck.exceptions import UnsupportedProjectionError
from opticheck.optics import Prism, Traversal


class TestDefaultOrd:
    """Tests for the default total order."""

    def test_natural_order(self):
        """Test values with < compare naturally."""
        assert DEFAULT_ORD.lt(1, 2)
        assert DEFAULT_ORD.ge("b", "a")
        assert DEFAULT_ORD.compare(3, 3) == 0

    def test_mixed_kinds_are_ranked(self):
        """Test incomparable values order by kind."""
        values = ["b", 2, None, b"x", 1.5]
        assert sorted(values, key=DEFAULT_ORD.sort_key()) == [None, 1.5, 2, "b", b"x"]

    def test_min_max_clamp_between(self):
        """Test the derived helpers."""
        assert DEFAULT_ORD.max(1, 3) == 3
        assert DEFAULT_ORD.min(1, 3) == 1
        assert DEFAULT_ORD.clamp(10, 0, 5) == 5
        assert DEFAULT_ORD.clamp(-1, 0, 5) == 0
        assert DEFAULT_ORD.between(3, 0, 5)
        assert not DEFAULT_ORD.between(6, 0, 5)

    def test_ties_keep_first_argument(self):
        """Test min and max return the first value on ties."""
        ord_ = DEFAULT_ORD.contramap("k")
        first, second = {"k": 1, "id": "first"}, {"k": 1, "id": "second"}
        assert ord_.max(first, second) is first
        assert ord_.min(first, second) is first

    def test_reverse(self):
        """Test reverse flips the order."""
        assert DEFAULT_ORD.reverse().lt(2, 1)

    def test_to_eq_and_comparator(self):
        """Test conversion to equality and a boolean comparator."""
        assert DEFAULT_ORD.to_eq().eq(2, 2)
        assert DEFAULT_ORD.comparator()(1, 1)


class TestContramap:
    """Tests for ordering through projections."""

    def test_absent_sorts_first(self):
        """Test structures missing the field order before present ones."""
        by_score = DEFAULT_ORD.contramap(Prism.key("score"))
        assert by_score.lt({}, {"score": -5})
        assert not by_score.lt({"score": -5}, {})
        assert by_score.compare({}, {"score": None}) == 0

    def test_sorting_records(self):
        """Test sort_key orders whole records."""
        rows = [{"score": 3}, {}, {"score": 1}]
        ordered = sorted(rows, key=DEFAULT_ORD.contramap("score").sort_key())
        assert ordered == [{}, {"score": 1}, {"score": 3}]

    def test_concat_is_lexicographic(self):
        """Test later orderings break ties."""
        ord_ = Ord.concat([DEFAULT_ORD.contramap("last"), DEFAULT_ORD.contramap("first")])
        assert ord_.lt({"last": "a", "first": "z"}, {"last": "b", "first": "a"})
        assert ord_.lt({"last": "a", "first": "a"}, {"last": "a", "first": "b"})

    def test_ord_is_used_as_is(self):
        """Test passing an Ord returns it unchanged."""
        reverse = DEFAULT_ORD.reverse()
        assert DEFAULT_ORD.contramap(reverse) is reverse

    def test_traversal_is_rejected(self):
        """Test ordering by a traversal fails with guidance."""
        with pytest.raises(UnsupportedProjectionError) as excinfo:
            DEFAULT_ORD.contramap(Traversal.combine([Prism.key("a")]))
        assert "Traversal" in str(excinfo.value)
