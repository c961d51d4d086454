"""
Error handling framework for FuzzyVis.

This module provides the exception hierarchy shared by the membership
function library, the configuration loader, the fuzzy engine and the CLI.
"""

from fuzzyvis.errors.error_codes import ErrorCodes
from fuzzyvis.errors.exceptions import (
    ConfigurationError,
    ConfigurationFileError,
    ConstraintViolationError,
    FuzzyVisError,
    InvalidConfigurationError,
    MembershipError,
    ParameterCountError,
    ParameterTypeError,
    ProcessingError,
    UnknownMembershipFunctionError,
    ValidationError,
)

__all__ = [
    # Base exception
    "FuzzyVisError",
    # Validation
    "ValidationError",
    "MembershipError",
    "ParameterTypeError",
    "ConstraintViolationError",
    "ParameterCountError",
    "UnknownMembershipFunctionError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationFileError",
    # Processing
    "ProcessingError",
    # Codes
    "ErrorCodes",
]
