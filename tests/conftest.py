"""
Shared test fixtures for the patternlang test suite.
"""

import pytest

from patternlang.core.ast import BuiltinType
from patternlang.core.types import BuiltinTypeKind
from patternlang.validation import Validator


@pytest.fixture
def validator():
    """Fresh validator with default settings."""
    return Validator()


@pytest.fixture
def u8():
    """Builtin u8 type node factory.

    Usage:
        def test_something(u8):
            node = VariableDecl(name="a", type=u8(line=3))
    """

    def make(line: int = 1) -> BuiltinType:
        return BuiltinType(kind=BuiltinTypeKind.U8, line=line)

    return make
