"""
Exception classes for optics and validation processing.

This module defines specific exception types for the error conditions that
can occur while building optics, compiling validation rules, and running
validators. Data failures are represented by ValidationError and are
accumulated rather than raised; everything else signals a programming or
configuration mistake and is raised immediately.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Rule position and projection only
    DEVELOPER = "developer"  # Also the validator and raw projection repr


@dataclass
class RuleContext:
    """
    Context information for compile-time error messages.

    Captures which rule of a validation caused an error and what it was
    declared with, so configuration mistakes point back at the offending
    `at(...)` or `root(...)` call.

    Params:
        rule_index: Position of the rule in the validation (0-based)
        projection: Human readable description of the projection
        validator: Name of the validator involved, if any
        raw: repr of the raw projection or validator spec
    """

    rule_index: int | None = None
    projection: str | None = None
    validator: str | None = None
    raw: str | None = None

    def format_location(self, error_level: ErrorLevel) -> str:
        """
        Format location information based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Formatted location string with appropriate detail level
        """
        lines = []

        if self.rule_index is not None:
            lines.append(f"  at rule {self.rule_index}")

        if self.projection:
            lines.append(f"  projection: {self.projection}")

        if error_level == ErrorLevel.DEVELOPER:
            if self.validator:
                lines.append(f"  validator: {self.validator}")
            if self.raw:
                lines.append(f"  declared as: {self.raw}")

        return "\n".join(lines)


class OptiCheckError(Exception):
    """Base exception for all opticheck errors."""

    pass


class ConfigurationError(OptiCheckError):
    """Raised at compile time when rules, projections or settings are malformed."""

    def __init__(
        self,
        message: str,
        context: RuleContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            message: Description of the configuration problem
            context: RuleContext with the offending rule position
            error_level: Level of detail to show in error message
        """
        self.message = message
        self.context = context
        self.error_level = error_level

        if context:
            location_info = context.format_location(error_level)
            full_message = f"{message}\n{location_info}" if location_info else message
        else:
            full_message = message

        super().__init__(full_message)

    def with_context(self, context: RuleContext, error_level: ErrorLevel | None = None) -> "ConfigurationError":
        """Return a copy of this error carrying rule context."""
        return type(self)(self.message, context=context, error_level=error_level or self.error_level)


class InvalidProjectionError(ConfigurationError):
    """Raised when a projection is not one of the supported shapes."""

    pass


class RedundantDefaultError(ConfigurationError):
    """Raised when a default is given for a projection that already carries one."""

    pass


class UnsupportedDefaultError(ConfigurationError):
    """Raised when a default is given for a projection that cannot be absent."""

    pass


class UnsupportedProjectionError(ConfigurationError):
    """Raised when a valid projection is used where its kind is not supported."""

    pass


class InvalidValidatorError(ConfigurationError):
    """Raised when a validator spec cannot be called with the validator convention."""

    pass


class InvalidSettingsError(ConfigurationError):
    """Raised when validation settings (mode, result shape) are invalid."""

    pass


class StructuralError(OptiCheckError, KeyError):
    """Raised when a total accessor finds its field missing."""

    def __init__(self, key, structure_type: str, reason: str = "is missing"):
        """
        Initialize the exception.

        Params:
            key: The field or key that could not be read
            structure_type: Type name of the structure that was accessed
            reason: Why the access failed
        """
        self.key = key
        self.structure_type = structure_type
        self.reason = reason
        super().__init__(f"Field {key!r} {reason} in {structure_type}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class UnsupportedOperationError(OptiCheckError, TypeError):
    """Raised when an optic is asked for an operation its kind cannot perform."""

    def __init__(self, optic: str, operation: str):
        """
        Initialize the exception.

        Params:
            optic: Kind or description of the optic
            operation: The operation that is not available
        """
        self.optic = optic
        self.operation = operation
        super().__init__(f"{optic} does not support {operation}")


class ValidatorConfigurationError(OptiCheckError, ValueError):
    """Raised when a validator is called with missing or invalid options."""

    def __init__(self, validator: str, reason: str):
        """
        Initialize the exception.

        Params:
            validator: Name of the misconfigured validator
            reason: Which option is missing or invalid
        """
        self.validator = validator
        self.reason = reason
        super().__init__(f"{validator}: {reason}")


class ValidatorContractError(OptiCheckError, TypeError):
    """Raised when a validator returns a value outside the accepted result shapes."""

    def __init__(self, result, validator: str | None = None):
        """
        Initialize the exception.

        Params:
            result: The unrecognized value returned by the validator
            validator: Name of the validator that returned it
        """
        self.result = result
        self.validator = validator
        source = f" from {validator}" if validator else ""
        super().__init__(
            f"Unrecognized validator result{source}: {result!r}. "
            "Expected Right, Left(ValidationError), 'ok', ('ok', value) "
            "or ('error', ValidationError)"
        )


class ValidationError(OptiCheckError):
    """
    Accumulated data validation failures.

    Holds an ordered, flat tuple of messages. Errors combine with `merge`
    (left messages first) and `ValidationError.empty()` is the identity, so
    independent failures can be folded into one value. Returned inside
    `Left` by the executor and raised only when a validation is configured
    with the "raise" result shape.
    """

    def __init__(self, errors: str | Iterable[str] = ()):
        """
        Initialize the exception.

        Params:
            errors: A single message or an iterable of messages
        """
        if isinstance(errors, str):
            errors = (errors,)
        self.errors = tuple(errors)
        super().__init__(", ".join(self.errors))

    @classmethod
    def new(cls, errors: str | Iterable[str]) -> "ValidationError":
        return cls(errors)

    @classmethod
    def empty(cls) -> "ValidationError":
        return cls(())

    def merge(self, other: "ValidationError") -> "ValidationError":
        """Concatenate two errors, keeping this error's messages first."""
        return ValidationError(self.errors + other.errors)

    @classmethod
    def concat(cls, errors: Iterable["ValidationError"]) -> "ValidationError":
        result = cls.empty()
        for error in errors:
            result = result.merge(error)
        return result

    def is_empty(self) -> bool:
        return not self.errors

    def __eq__(self, other) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return self.errors == other.errors

    def __hash__(self) -> int:
        return hash(self.errors)

    def __iter__(self):
        return iter(self.errors)

    def __repr__(self) -> str:
        return f"ValidationError({list(self.errors)!r})"
