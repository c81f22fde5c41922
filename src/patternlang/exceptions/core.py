"""
Exception classes for pattern language AST validation.

This module defines the error record kept by the validator and the exception
types raised for each failure condition that can occur while checking a
parsed template tree.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Line and identifier only
    DEVELOPER = "developer"  # Adds node variant and error kind


class ErrorKind(Enum):
    """Category of a validation failure."""

    STRUCTURAL = "structural"  # Bug in tree construction, not a user mistake
    REDEFINITION = "redefinition"
    ENUM_CONSTANT = "enum_constant"
    NESTING_DEPTH = "nesting_depth"


@dataclass(frozen=True)
class ValidatorError:
    """
    First failure found by a validation run.

    Params:
        message: Human readable diagnostic
        line: Source line of the offending entity, 1 when unknown
        kind: Category of the failure
        identifier: Offending name for redefinition errors
        node_type: Discriminator of the node being checked when the error was found
    """

    message: str
    line: int = 1
    kind: ErrorKind = ErrorKind.REDEFINITION
    identifier: str | None = None
    node_type: str | None = None

    @property
    def is_internal(self) -> bool:
        """Whether this error signals a malformed tree rather than a template mistake."""
        return self.kind in (ErrorKind.STRUCTURAL, ErrorKind.NESTING_DEPTH)

    def context(self) -> "ErrorContext":
        return ErrorContext(
            line=self.line,
            identifier=self.identifier,
            node_type=self.node_type,
            kind=self.kind,
        )

    def to_exception(self, error_level: ErrorLevel = ErrorLevel.USER) -> "TemplateValidationError":
        """
        Build the exception matching this error's kind.

        Params:
            error_level: Level of detail to show in the exception message

        Returns:
            Exception instance carrying this error, ready to be raised
        """
        exception_class = _EXCEPTIONS_BY_KIND[self.kind]
        return exception_class(self, error_level)

    def __str__(self) -> str:
        return f"line {self.line}: {self.message}"


@dataclass
class ErrorContext:
    """
    Location information for error messages.

    Captures where an error occurred in template terms (source line, offending
    identifier) and in tree terms (node variant, error kind). Supports formatting
    at different detail levels for user-facing vs developer debugging.

    Params:
        line: Source line number in the template
        identifier: Name that caused the error
        node_type: AST node variant being checked
        kind: Category of the failure
    """

    line: int | None = None
    identifier: str | None = None
    node_type: str | None = None
    kind: ErrorKind | None = None

    def format_location(self, error_level: ErrorLevel) -> str:
        """
        Format location information based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Formatted location string with appropriate detail level
        """
        lines = []

        if self.line is not None:
            lines.append(f"  at line {self.line}")

        if self.identifier:
            lines.append(f"  identifier: {self.identifier}")

        if error_level == ErrorLevel.DEVELOPER:
            if self.node_type:
                lines.append(f"  node: {self.node_type}")
            if self.kind:
                lines.append(f"  kind: {self.kind.value}")

        return "\n".join(lines)


class PatternLanguageError(Exception):
    """Base exception for all pattern language errors."""

    pass


class TemplateValidationError(PatternLanguageError):
    """Raised when a template AST fails semantic validation."""

    def __init__(self, error: ValidatorError, error_level: ErrorLevel = ErrorLevel.USER):
        """
        Initialize the exception.

        Params:
            error: The validation error record
            error_level: Level of detail to show in error message
        """
        self.error = error
        self.line = error.line
        self.error_level = error_level

        location_info = error.context().format_location(error_level)
        if location_info:
            super().__init__(f"{error.message}\n{location_info}")
        else:
            super().__init__(error.message)


class NullNodeError(TemplateValidationError):
    """Raised when the tree contains a null node. This is a bug upstream."""

    pass


class RedefinitionError(TemplateValidationError):
    """Raised when a variable or type name is declared twice in one scope."""

    def __init__(self, error: ValidatorError, error_level: ErrorLevel = ErrorLevel.USER):
        self.identifier = error.identifier
        super().__init__(error, error_level)


class EnumConstantRedefinitionError(RedefinitionError):
    """Raised when an enum declares the same constant twice."""

    pass


class NestingDepthError(TemplateValidationError):
    """Raised when the tree nests deeper than the configured limit."""

    pass


_EXCEPTIONS_BY_KIND: dict[ErrorKind, type[TemplateValidationError]] = {
    ErrorKind.STRUCTURAL: NullNodeError,
    ErrorKind.REDEFINITION: RedefinitionError,
    ErrorKind.ENUM_CONSTANT: EnumConstantRedefinitionError,
    ErrorKind.NESTING_DEPTH: NestingDepthError,
}
