"""
Validation execution.

Runs every compiled step against a structure and merges the outcomes:

1. Resolve each step's focus: the whole structure for root steps, otherwise
   the projected value or ABSENT.
2. Run the step's validators left to right. All of them run; a validator
   sees the value returned by the last successful validator before it.
3. Merge failures within the step, then across steps in declaration order.
4. Return the original structure on success; transformed values never
   leave their step.

Sequential and parallel modes differ only in scheduling, never in results.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from types import MappingProxyType
from typing import Any

from attrs import frozen

from opticheck.core import either as E
from opticheck.core.either import Either, Left, Right
from opticheck.core.maybe import ABSENT, Present
from opticheck.core.types import Environment, Options
from opticheck.exceptions.core import ValidationError
from opticheck.validation.config import ExecutionMode, ResultShape, ValidationSettings
from opticheck.validation.step import EMPTY_ENV, Step

logger = logging.getLogger(__name__)


def _read_only(env: Environment | None) -> Environment:
    if env is None:
        return EMPTY_ENV
    if isinstance(env, MappingProxyType):
        return env
    return MappingProxyType(env)


def resolve_focus(step: Step, structure: Any) -> Any:
    """The value a step's validators receive: a plain value or ABSENT."""
    if step.projection is None:
        return structure
    focus = step.projection.project(structure)
    return focus.value if isinstance(focus, Present) else ABSENT


def run_step(step: Step, structure: Any, env: Environment = EMPTY_ENV) -> Either:
    """
    Run all validators of one step.

    Returns:
        Right(last transformed focus) or Left with every validator error in order
    """
    current = resolve_focus(step, structure)
    errors = []
    for ref in step.validators:
        result = ref.run(current, env)
        if isinstance(result, Left):
            errors.append(result.error)
        else:
            current = result.value
    if errors:
        return Left(ValidationError.concat(errors))
    return Right(current)


@frozen
class Validation:
    """
    A compiled, reusable validation.

    Calling the validation applies the configured result shape; `run` always
    returns the canonical Right/Left. A Validation is itself a validator, so
    it can be nested inside `at(...)` of another validation.

    Params:
        steps: Compiled steps in declaration order
        settings: Execution mode, result shape and worker count
    """

    steps: tuple[Step, ...]
    settings: ValidationSettings = ValidationSettings()

    def run(self, structure: Any, env: Environment | None = None) -> Either:
        """
        Validate a structure.

        Params:
            structure: Input to validate; returned unchanged on success
            env: Read-only mapping passed to every validator

        Returns:
            Right(structure) or Left(ValidationError) with every failure

        Raises:
            StructuralError: A Lens projection found its field missing
            ValidatorConfigurationError: A validator is missing a required option
            ValidatorContractError: A validator returned an unrecognized shape
        """
        env = _read_only(env)
        if not self.steps:
            return Right(structure)

        logger.debug("Running %d validation steps (%s)", len(self.steps), self.settings.mode.value)
        if self.settings.mode == ExecutionMode.PARALLEL:
            results = self._run_parallel(structure, env)
        else:
            results = [run_step(step, structure, env) for step in self.steps]

        errors = [result.error for result in results if isinstance(result, Left)]
        if errors:
            logger.debug("%d of %d validation steps failed", len(errors), len(self.steps))
            return Left(ValidationError.concat(errors))
        return Right(structure)

    def _run_parallel(self, structure: Any, env: Environment) -> list[Either]:
        workers = self.settings.workers_for(len(self.steps))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="opticheck") as pool:
            futures = [pool.submit(run_step, step, structure, env) for step in self.steps]
            # Futures are read in declaration order; the pool joins every step on exit
            return [future.result() for future in futures]

    def __call__(self, structure: Any, env: Environment | None = None) -> Any:
        """Validate and surface the result in the configured shape."""
        result = self.run(structure, env)
        shape = self.settings.as_
        if shape == ResultShape.TUPLE:
            return E.to_result(result)
        if shape == ResultShape.RAISE:
            return E.to_try(result)
        return result

    def validate(self, value: Any, options: Options | None = None, env: Environment | None = None) -> Either:
        """Validator entry point for nesting; ABSENT passes through."""
        if value is ABSENT:
            return Right(ABSENT)
        if isinstance(value, Present):
            value = value.value
        return self.run(value, env)
