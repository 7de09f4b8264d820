"""
Rule compilation.

Turns declared rules into an immutable `Validation`. Every configuration
problem is raised here, with the position of the offending rule, so a
validation that compiles can only fail at run time on bad data, a Lens
violation or a misbehaving validator.
"""

import logging
from typing import Any

from opticheck.exceptions.core import (
    ConfigurationError,
    ErrorLevel,
    InvalidValidatorError,
    RuleContext,
)
from opticheck.projection.resolver import resolve_projection
from opticheck.validation.config import ExecutionMode, ResultShape, ValidationSettings
from opticheck.validation.executor import Validation
from opticheck.validation.rules import Rule
from opticheck.validation.step import Step, ValidatorRef

logger = logging.getLogger(__name__)


def _context(rule: Any, index: int) -> RuleContext:
    if not isinstance(rule, Rule):
        return RuleContext(rule_index=index, raw=repr(rule))
    projection = "root" if rule.is_root else (rule.label or repr(rule.projection))
    return RuleContext(rule_index=index, projection=projection, raw=repr(rule.projection))


def compile_rule(rule: Rule, index: int) -> Step:
    """
    Compile one rule into a Step.

    Raises:
        ConfigurationError: For anything other than a Rule, an invalid
            projection or default, or an invalid validator spec
    """
    if not isinstance(rule, Rule):
        raise ConfigurationError(f"Expected a rule built with at(...) or root(...), got {rule!r}")

    if not rule.validators:
        raise InvalidValidatorError("A rule needs at least one validator")

    if rule.is_root:
        projection = None
    else:
        projection = resolve_projection(
            rule.projection,
            default=rule.default,
            options=rule.projection_options,
        )

    validators = tuple(ValidatorRef.from_spec(spec) for spec in rule.validators)
    return Step(index, projection, validators, label=rule.label)


def compile_rules(
    *rules: Rule,
    mode: ExecutionMode | str = ExecutionMode.SEQUENTIAL,
    as_: ResultShape | str = ResultShape.EITHER,
    max_workers: int | None = None,
    error_level: ErrorLevel = ErrorLevel.USER,
) -> Validation:
    """
    Compile rules into a reusable Validation.

    Params:
        rules: Rules built with `at` and `root`; a single list is also accepted
        mode: "sequential" or "parallel"
        as_: Result shape: "either", "tuple" or "raise"
        max_workers: Thread pool size for parallel mode
        error_level: Detail level of configuration error messages

    Returns:
        The compiled Validation

    Raises:
        ConfigurationError: For invalid settings, rules, projections, defaults
            or validators; errors carry the rule position
    """
    if len(rules) == 1 and isinstance(rules[0], list):
        rules = tuple(rules[0])

    settings = ValidationSettings.build(mode=mode, as_=as_, max_workers=max_workers)

    steps = []
    for index, rule in enumerate(rules):
        try:
            steps.append(compile_rule(rule, index))
        except ConfigurationError as e:
            if e.context is not None:
                raise
            raise e.with_context(_context(rule, index), error_level) from e

    logger.debug("Compiled %d validation steps (mode=%s, as=%s)", len(steps), settings.mode.value, settings.as_.value)
    return Validation(tuple(steps), settings)


validation = compile_rules


def validate(structure: Any, *rules: Rule, env=None, **settings) -> Any:
    """Compile `rules` and run them once against `structure`."""
    return compile_rules(*rules, **settings)(structure, env)

