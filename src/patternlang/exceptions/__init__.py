"""
Pattern language exception classes.

This package provides the validation error record and all exception types
used throughout the pattern language tooling for consistent error reporting.
"""

from patternlang.exceptions.core import (
    EnumConstantRedefinitionError,
    ErrorContext,
    ErrorKind,
    ErrorLevel,
    NestingDepthError,
    NullNodeError,
    PatternLanguageError,
    RedefinitionError,
    TemplateValidationError,
    ValidatorError,
)

__all__ = [
    "PatternLanguageError",
    "TemplateValidationError",
    "NullNodeError",
    "RedefinitionError",
    "EnumConstantRedefinitionError",
    "NestingDepthError",
    "ValidatorError",
    "ErrorContext",
    "ErrorKind",
    "ErrorLevel",
]
