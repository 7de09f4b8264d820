"""
Validation engine: declare rules, compile them once, run them many times.

Every rule runs, every failure is collected, and a successful run returns
the input structure unchanged.
"""

from opticheck.validation.compiler import compile_rules, validate, validation
from opticheck.validation.config import ExecutionMode, ResultShape, ValidationSettings
from opticheck.validation.executor import Validation, run_step
from opticheck.validation.normalizer import normalize_result
from opticheck.validation.rules import Rule, at, root
from opticheck.validation.step import Step, ValidatorRef

__all__ = [
    "at",
    "root",
    "validation",
    "compile_rules",
    "validate",
    "Validation",
    "ValidationSettings",
    "ExecutionMode",
    "ResultShape",
    "Rule",
    "Step",
    "ValidatorRef",
    "normalize_result",
    "run_step",
]
