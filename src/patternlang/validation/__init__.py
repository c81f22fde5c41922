"""
Pattern language AST validation.

This package provides the identifier-uniqueness validator that runs between
parsing and evaluation of a template.
"""

from patternlang.validation.scope import IdentifierScope
from patternlang.validation.validator import Validator, validate_ast

__all__ = [
    "IdentifierScope",
    "Validator",
    "validate_ast",
]
