"""
Exception classes for opticheck.

This package provides all exception types used throughout the optics and
validation layers for consistent error handling and reporting.
"""

from opticheck.exceptions.core import (
    ConfigurationError,
    ErrorLevel,
    InvalidProjectionError,
    InvalidSettingsError,
    InvalidValidatorError,
    OptiCheckError,
    RedundantDefaultError,
    RuleContext,
    StructuralError,
    UnsupportedDefaultError,
    UnsupportedOperationError,
    UnsupportedProjectionError,
    ValidationError,
    ValidatorConfigurationError,
    ValidatorContractError,
)

__all__ = [
    "OptiCheckError",
    "ErrorLevel",
    "RuleContext",
    "ConfigurationError",
    "InvalidProjectionError",
    "RedundantDefaultError",
    "UnsupportedDefaultError",
    "UnsupportedProjectionError",
    "UnsupportedOperationError",
    "InvalidValidatorError",
    "InvalidSettingsError",
    "StructuralError",
    "ValidatorConfigurationError",
    "ValidatorContractError",
    "ValidationError",
]
