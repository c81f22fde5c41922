"""
patternlang - Semantic validation for binary template ASTs

Checks parsed pattern language templates for identifier redefinitions before
they are evaluated against binary data.
"""

from importlib.metadata import version

from patternlang.config import ValidatorConfig
from patternlang.core.ast import load_ast
from patternlang.exceptions.core import TemplateValidationError, ValidatorError
from patternlang.validation.validator import Validator, validate_ast

__version__ = version("patternlang")

__all__ = [
    "__version__",
    "Validator",
    "ValidatorConfig",
    "ValidatorError",
    "TemplateValidationError",
    "load_ast",
    "validate_ast",
]
