from typing import Any

from opticheck.core.either import Either
from opticheck.core.maybe import ABSENT
from opticheck.core.types import Environment
from opticheck.validators.base import Validator, ValidatorOptions


class Required(Validator):
    """
    Fails on ABSENT, None and the empty string.

    The only validator that runs on ABSENT foci, which makes every other
    field optional unless it is explicitly required. Falsy but present
    values such as 0, False and [] pass.
    """

    handles_absent = True

    @classmethod
    def check(cls, value: Any, options: ValidatorOptions, env: Environment) -> Either:
        missing = value is ABSENT or value is None or value == ""
        return cls.ensure(value, not missing, options, "is required")
