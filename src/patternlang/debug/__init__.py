"""
Diagnostic helpers for pattern language ASTs.
"""

from patternlang.debug.printer import ASTPrinter, format_ast

__all__ = [
    "ASTPrinter",
    "format_ast",
]
