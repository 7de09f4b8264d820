"""
Validator result normalization.

Validators may answer in several shapes. Everything is converted to the
canonical `Right(value)` / `Left(ValidationError)` before merging:

| Returned                          | Normalized                  |
| --------------------------------- | --------------------------- |
| `Right(v)`                        | `Right(v)`                  |
| `Left(ValidationError)`           | unchanged                   |
| `"ok"`                            | `Right(focus)`              |
| `("ok", v)`                       | `Right(v)`                  |
| `("error", ValidationError)`      | `Left(ValidationError)`     |

Any other value is a bug in the validator and raises ValidatorContractError.
"""

from typing import Any

from opticheck.core.either import Either, Left, Right
from opticheck.core.types import RawResult
from opticheck.exceptions.core import ValidationError, ValidatorContractError


def normalize_result(result: RawResult, focus: Any, validator: str | None = None) -> Either:
    """
    Convert a raw validator result to Right or Left(ValidationError).

    Params:
        result: The value the validator returned
        focus: The value the validator was called with
        validator: Validator name for error messages

    Raises:
        ValidatorContractError: If the result has an unrecognized shape
    """
    if isinstance(result, Right):
        return result
    if isinstance(result, Left):
        if isinstance(result.error, ValidationError):
            return result
        raise ValidatorContractError(result, validator)
    if isinstance(result, str):
        if result == "ok":
            return Right(focus)
        raise ValidatorContractError(result, validator)
    if isinstance(result, tuple) and len(result) == 2:
        tag, payload = result
        if tag == "ok":
            return Right(payload)
        if tag == "error" and isinstance(payload, ValidationError):
            return Left(payload)
    raise ValidatorContractError(result, validator)
