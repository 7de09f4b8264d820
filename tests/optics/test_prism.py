"""
Tests for partial optics.
"""

from hypothesis import given
from hypothesis import strategies as st
from pydantic import BaseModel

from opticheck.core.maybe import ABSENT, Present
from opticheck.optics import Prism


class Profile(BaseModel):
    nickname: str | None = None


class TestPrismKey:
    """Tests for Prism.key."""

    def test_preview_present_value(self):
        """Test a populated field is Present."""
        assert Prism.key("score").preview({"score": 7}) == Present(7)
        assert Prism.key("nickname").preview(Profile(nickname="bo")) == Present("bo")

    def test_preview_absent_cases(self):
        """Test missing, None and non-structure inputs are all ABSENT."""
        prism = Prism.key("score")
        assert prism.preview({}) is ABSENT
        assert prism.preview({"score": None}) is ABSENT
        assert prism.preview(42) is ABSENT
        assert prism.preview(None) is ABSENT
        assert Prism.key("nickname").preview(Profile()) is ABSENT

    def test_falsy_values_are_present(self):
        """Test zero and empty string are not absent."""
        assert Prism.key("score").preview({"score": 0}) == Present(0)
        assert Prism.key("score").preview({"score": ""}) == Present("")

    def test_review_and_has(self):
        """Test review builds a dict and has reports presence."""
        prism = Prism.key("score")
        assert prism.review(3) == {"score": 3}
        assert prism.has({"score": 3})
        assert not prism.has({"score": None})

    def test_set_and_over(self):
        """Test set creates the field and over skips absent foci."""
        prism = Prism.key("score")
        assert prism.set({}, 1) == {"score": 1}
        assert prism.set(5, 1) == 5
        assert prism.over({"score": 2}, lambda x: x + 1) == {"score": 3}
        assert prism.over({}, lambda x: x + 1) == {}

    def test_with_default(self):
        """Test a defaulted prism always matches."""
        prism = Prism.key("score").with_default(0)
        assert prism.preview({}) == Present(0)
        assert prism.preview({"score": 4}) == Present(4)
        assert prism.defaulted
        assert not Prism.key("score").defaulted


class TestPrismPath:
    """Tests for Prism.path."""

    def test_path_short_circuits(self):
        """Test any missing or None link makes the path absent."""
        prism = Prism.path(["user", "address", "city"])
        assert prism.preview({"user": {"address": {"city": "Paris"}}}) == Present("Paris")
        assert prism.preview({"user": None}) is ABSENT
        assert prism.preview({"user": {"address": {}}}) is ABSENT
        assert prism.preview({}) is ABSENT

    def test_path_review_builds_nested_dicts(self):
        """Test review creates every level."""
        assert Prism.path(["a", "b"]).review(1) == {"a": {"b": 1}}

    def test_path_set_creates_missing_levels(self):
        """Test set builds absent branches and keeps siblings."""
        prism = Prism.path(["a", "b"])
        assert prism.set({}, 1) == {"a": {"b": 1}}
        assert prism.set({"a": {"c": 2}}, 1) == {"a": {"c": 2, "b": 1}}

    def test_empty_path_never_matches(self):
        """Test an empty path is always absent."""
        assert Prism.path([]).preview({"a": 1}) is ABSENT


class TestPrismConstructors:
    """Tests for filter, some, none and instance_of."""

    def test_filter(self):
        """Test filter matches the whole value when the predicate holds."""
        positive = Prism.filter(lambda x: x > 0)
        assert positive.preview(3) == Present(3)
        assert positive.preview(-3) is ABSENT

    def test_some(self):
        """Test some focuses the first element of a non-empty list."""
        assert Prism.some().preview([1, 2]) == Present(1)
        assert Prism.some().preview([]) is ABSENT
        assert Prism.some().review(1) == [1]

    def test_none(self):
        """Test none never matches."""
        assert Prism.none().preview({"a": 1}) is ABSENT

    def test_instance_of(self):
        """Test instance_of matches by type."""
        assert Prism.instance_of(str).preview("x") == Present("x")
        assert Prism.instance_of(str).preview(1) is ABSENT


class TestPrismLaws:
    """Property tests for prism round-trips."""

    @given(st.one_of(st.integers(), st.text(), st.lists(st.integers())))
    def test_preview_review(self, value):
        """Test previewing a reviewed value gives it back."""
        prism = Prism.key("v")
        assert prism.preview(prism.review(value)) == Present(value)

    @given(st.integers())
    def test_path_preview_review(self, value):
        """Test the round-trip holds through a nested path."""
        prism = Prism.path(["a", "b", "c"])
        assert prism.preview(prism.review(value)) == Present(value)
