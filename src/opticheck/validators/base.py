"""
Base class for built-in validators.

Every built-in validator follows the same calling convention:

    Validator.validate(value)
    Validator.validate(value, options)
    Validator.validate(value, options, env)

and the same presence rule: an ABSENT focus passes through unchanged,
without reading options, except for `Required`. A `Present(x)` focus is
unwrapped to `x`. Options are parsed into a pydantic model per validator;
missing or invalid options raise ValidatorConfigurationError instead of
producing a validation failure.
"""

from collections.abc import Mapping
from typing import Any, Callable, ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from opticheck.core.callables import accepts
from opticheck.core.either import Either, Left, Right
from opticheck.core.maybe import ABSENT, Present
from opticheck.core.types import Environment
from opticheck.core.types import Options as RawOptions
from opticheck.exceptions.core import ValidationError, ValidatorConfigurationError
from opticheck.validation.step import EMPTY_ENV

Message = str | Callable[..., str]


class ValidatorOptions(BaseModel):
    """Options shared by every validator."""

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True, frozen=True)

    message: Message | None = None


class Validator:
    """
    A leaf validator.

    Subclasses set `Options` to their pydantic options model and implement
    `check`, which only ever sees present values.
    """

    Options: ClassVar[type[ValidatorOptions]] = ValidatorOptions
    handles_absent: ClassVar[bool] = False

    @classmethod
    def validate(cls, value: Any, options: RawOptions | None = None, env: Environment | None = None) -> Either:
        if value is ABSENT and not cls.handles_absent:
            return Right(ABSENT)
        if isinstance(value, Present):
            value = value.value
        return cls.check(value, cls.parse_options(options), EMPTY_ENV if env is None else env)

    @classmethod
    def check(cls, value: Any, options: ValidatorOptions, env: Environment) -> Either:
        raise NotImplementedError

    @classmethod
    def parse_options(cls, options: RawOptions | None) -> ValidatorOptions:
        """
        Parse raw options into the validator's options model.

        Raises:
            ValidatorConfigurationError: If a required option is missing or invalid
        """
        if options is not None and not isinstance(options, Mapping):
            raise ValidatorConfigurationError(cls.__name__, f"options must be a mapping, got {options!r}")
        try:
            return cls.Options.model_validate(dict(options or {}))
        except PydanticValidationError as e:
            reasons = []
            for error in e.errors():
                location = ".".join(str(loc) for loc in error["loc"])
                reasons.append(f"{location}: {error['msg']}" if location else error["msg"])
            raise ValidatorConfigurationError(cls.__name__, "; ".join(reasons)) from e

    @classmethod
    def fail(cls, value: Any, options: ValidatorOptions, default: str) -> Left:
        return Left(ValidationError(build_message(options.message, value, default)))

    @classmethod
    def ensure(cls, value: Any, ok: bool, options: ValidatorOptions, default: str) -> Either:
        return Right(value) if ok else cls.fail(value, options, default)


def build_message(message: Message | None, value: Any, default: str) -> str:
    """
    Resolve a `message` option.

    Strings are used as-is; callables receive the failing value when they
    accept one argument and are called without arguments otherwise.
    """
    if message is None:
        return default
    if callable(message):
        return message(value) if accepts(message, 1) else message()
    return message
