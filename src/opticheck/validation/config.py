"""
Validation settings.

Execution mode and result shape are chosen once, when rules are compiled,
and validated with pydantic so a typo fails at compile time.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, PositiveInt
from pydantic import ValidationError as PydanticValidationError

from opticheck.exceptions.core import InvalidSettingsError


class ExecutionMode(str, Enum):
    """How steps are scheduled; both modes produce identical results."""

    SEQUENTIAL = "sequential"  # Left to right on the calling thread
    PARALLEL = "parallel"  # One worker thread per step, merged in declaration order


class ResultShape(str, Enum):
    """How the final result is surfaced to the caller."""

    EITHER = "either"  # Right(structure) / Left(ValidationError)
    TUPLE = "tuple"  # ("ok", structure) / ("error", ValidationError)
    RAISE = "raise"  # structure, or raise ValidationError


class ValidationSettings(BaseModel):
    """
    Settings of a compiled validation.

    Params:
        mode: Sequential or parallel step execution
        as_: Result shape (alias "as")
        max_workers: Thread pool size for parallel mode; defaults to one
            worker per step, capped at 32
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    mode: ExecutionMode = ExecutionMode.SEQUENTIAL
    as_: ResultShape = Field(default=ResultShape.EITHER, alias="as")
    max_workers: PositiveInt | None = None

    @classmethod
    def build(cls, **values) -> "ValidationSettings":
        """
        Validate settings, converting pydantic errors to InvalidSettingsError.

        Raises:
            InvalidSettingsError: For unknown modes, shapes or worker counts
        """
        try:
            return cls.model_validate(values)
        except PydanticValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}" for error in e.errors()
            )
            raise InvalidSettingsError(f"Invalid validation settings: {problems}") from e

    def workers_for(self, step_count: int) -> int:
        if self.max_workers is not None:
            return self.max_workers
        return max(1, min(32, step_count))
