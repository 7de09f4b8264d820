"""
Tests for running compiled validations.
"""

import threading
import time

import pytest
from hypothesis import given
from hypothesis import strategies as st

from opticheck.core.either import Left, Right
from opticheck.core.maybe import ABSENT
from opticheck.exceptions import (
    StructuralError,
    ValidationError,
    ValidatorConfigurationError,
    ValidatorContractError,
)
from opticheck.optics import Lens, Prism, Traversal
from opticheck.validation import at, root, validate, validation
from opticheck.validators import Email, MinLength, Positive, Range, Required


def user_rules():
    return [at("name", Required), at("email", [Required, Email])]


class TestAccumulation:
    """Tests for collecting every failure."""

    def test_messages_in_declaration_order(self):
        """Test field-then-validator ordering of merged messages."""
        result = validation(user_rules())({"name": "", "email": ""})
        assert result == Left(ValidationError(["is required", "is required", "must be a valid email"]))

    def test_one_message_per_failing_validator(self):
        """Test a present but invalid email only fails Email."""
        result = validation(user_rules())({"name": "", "email": "bad"})
        assert result == Left(ValidationError(["is required", "must be a valid email"]))

    def test_absent_fields_are_optional_unless_required(self):
        """Test validators other than Required skip absent foci."""
        compiled = validation(at("email", Email), at("age", Positive))
        assert compiled({}) == Right({})

    def test_default_is_validated(self):
        """Test a default replaces an absent focus."""
        compiled = validation(at("age", (Range, {"min": 18}), default=10))
        assert compiled({}) == Left(ValidationError("must be at least 18"))

    def test_success_returns_original_structure(self):
        """Test transformed values never leak into the result."""

        def upper(value):
            return Right(value.upper())

        data = {"name": "ann"}
        result = validation(at("name", [upper, (MinLength, {"min": 2})]))(data)
        assert result == Right({"name": "ann"})
        assert result.value is data

    def test_root_rule(self):
        """Test root rules see the whole structure."""

        def passwords_match(value):
            if value["password"] == value["confirm"]:
                return "ok"
            return Left(ValidationError("passwords do not match"))

        compiled = validation(root(passwords_match))
        assert compiled({"password": "a", "confirm": "a"}) == Right({"password": "a", "confirm": "a"})
        assert compiled({"password": "a", "confirm": "b"}) == Left(ValidationError("passwords do not match"))

    def test_traversal_projection_is_all_or_nothing(self):
        """Test a traversal focus is absent when any focus is missing."""
        seen = []

        def record(value):
            seen.append(value)
            return "ok"

        compiled = validation(at(Traversal.combine([Prism.key("a"), Prism.key("b")]), [record]))
        compiled({"a": 1, "b": 2})
        compiled({"a": 1})
        assert seen == [[1, 2], ABSENT]


class TestIdentityLaws:
    """Property tests for successful runs."""

    @given(
        st.one_of(
            st.none(),
            st.integers(),
            st.text(),
            st.dictionaries(st.text(max_size=3), st.integers(), max_size=3),
            st.lists(st.integers(), max_size=3),
        )
    )
    def test_empty_validation_returns_input(self, value):
        """Test no rules accept any input unchanged."""
        assert validation()(value) == Right(value)
        assert validate(value) == Right(value)

    @given(st.builds("{}@{}".format, st.text(max_size=5), st.text(max_size=5)))
    def test_passing_input_is_returned_unchanged(self, email):
        """Test a passing structure is the success value."""
        data = {"name": "ann", "email": email}
        assert validation(user_rules())(data) == Right(data)


class TestModes:
    """Tests for sequential and parallel execution."""

    @pytest.mark.parametrize(
        "data",
        [
            {"name": "", "email": ""},
            {"name": "ann", "email": "bad"},
            {"name": "ann", "email": "ann@example.com"},
            {},
        ],
    )
    def test_parallel_matches_sequential(self, data):
        """Test both modes produce identical results."""
        sequential = validation(user_rules())
        parallel = validation(user_rules(), mode="parallel")
        assert parallel(data) == sequential(data)

    def test_parallel_merges_in_declaration_order(self):
        """Test slow early steps still report first."""

        def slow_fail(value):
            time.sleep(0.05)
            return Left(ValidationError("slow"))

        def fast_fail(value):
            return Left(ValidationError("fast"))

        compiled = validation(root(slow_fail), root(fast_fail), mode="parallel")
        assert compiled({}) == Left(ValidationError(["slow", "fast"]))

    def test_parallel_uses_worker_threads(self):
        """Test steps run off the calling thread in parallel mode."""
        names = []

        def record_thread(value):
            names.append(threading.current_thread().name)
            return "ok"

        validation(root(record_thread), root(record_thread), mode="parallel")({})
        assert all(name.startswith("opticheck") for name in names)


class TestResultShapes:
    """Tests for the configured result shape."""

    def test_tuple_shape(self):
        """Test ("ok", structure) and ("error", ValidationError)."""
        compiled = validation(at("name", Required), as_="tuple")
        assert compiled({"name": "ann"}) == ("ok", {"name": "ann"})
        assert compiled({}) == ("error", ValidationError("is required"))

    def test_raise_shape(self):
        """Test success returns the structure and failure raises."""
        compiled = validation(at("name", Required), as_="raise")
        assert compiled({"name": "ann"}) == {"name": "ann"}
        with pytest.raises(ValidationError) as excinfo:
            compiled({})
        assert excinfo.value.errors == ("is required",)

    def test_run_always_returns_either(self):
        """Test run ignores the result shape."""
        compiled = validation(at("name", Required), as_="raise")
        assert compiled.run({}) == Left(ValidationError("is required"))


class TestEnvironment:
    """Tests for the read-only environment."""

    def test_env_reaches_validators(self):
        """Test validators receive the environment."""

        def tenant_allowed(value, options, env):
            if value in env["allowed"]:
                return "ok"
            return Left(ValidationError("tenant not allowed"))

        compiled = validation(at("tenant", tenant_allowed))
        assert compiled({"tenant": "a"}, {"allowed": ["a"]}) == Right({"tenant": "a"})
        assert compiled({"tenant": "b"}, {"allowed": ["a"]}) == Left(ValidationError("tenant not allowed"))

    def test_env_is_read_only(self):
        """Test validators cannot mutate the environment."""

        def mutate(value, options, env):
            env["seen"] = True
            return "ok"

        with pytest.raises(TypeError):
            validation(root(mutate))({}, {})


class TestNesting:
    """Tests for validations used as validators."""

    address = validation(at("city", Required), at("zip", (MinLength, {"min": 5})))

    def test_nested_failures_are_merged(self):
        """Test errors from a nested validation join the outer ones."""
        compiled = validation(at("name", Required), at("address", self.address))
        result = compiled({"name": "", "address": {"city": "", "zip": "1"}})
        assert result == Left(
            ValidationError(["is required", "is required", "must be at least 5 characters"])
        )

    def test_absent_nested_structure_is_skipped(self):
        """Test a missing nested structure passes unless required."""
        compiled = validation(at("address", self.address))
        assert compiled({}) == Right({})
        required = validation(at("address", [Required, self.address]))
        assert required({}) == Left(ValidationError("is required"))


class TestRuntimeErrors:
    """Tests for errors that are raised instead of accumulated."""

    def test_lens_violation_raises(self):
        """Test a missing Lens field is a structural error."""
        compiled = validation(at(Lens.key("name"), Required))
        with pytest.raises(StructuralError):
            compiled({})

    def test_lens_violation_raises_in_parallel(self):
        """Test structural errors propagate from worker threads."""
        compiled = validation(at(Lens.key("name"), Required), at("age", Positive), mode="parallel")
        with pytest.raises(StructuralError):
            compiled({"age": -1})

    def test_missing_validator_option_raises(self):
        """Test a validator without required options fails loudly."""
        compiled = validation(at("age", Range))
        with pytest.raises(ValidatorConfigurationError) as excinfo:
            compiled({"age": 3})
        assert "Range" in str(excinfo.value)

    def test_unrecognized_result_raises(self):
        """Test a validator returning garbage is a contract violation."""
        compiled = validation(at("name", lambda value: 42))
        with pytest.raises(ValidatorContractError):
            compiled({"name": "ann"})


class TestStructureKinds:
    """Tests for validating the supported structure kinds."""

    def test_nested_dict(self, user_dict):
        """Test path projections and None fields on nested dicts."""
        compiled = validation(at(["address", "city"], Required), at("email", Email))
        assert compiled(user_dict) == Right(user_dict)

    def test_records(self, user_model, attrs_user, data_user):
        """Test pydantic, attrs and dataclass instances validate alike."""
        compiled = validation(at("name", (MinLength, {"min": 3})), at("age", (Range, {"min": 18})))
        for structure in (user_model, attrs_user, data_user):
            assert compiled(structure) == Right(structure)

    def test_nested_model_field(self, user_model):
        """Test a None field inside a nested model is absent."""
        compiled = validation(at(["address", "zip"], Required))
        assert compiled(user_model) == Left(ValidationError("is required"))
