"""
Core type definitions for the pattern language AST.

This module contains the token-level enumerations shared by AST nodes and
their consumers: builtin value types, numeric operators and byte order.
"""

from enum import Enum


class BuiltinTypeKind(Enum):
    """Language-provided primitive types. Values are the template spellings."""

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    S8 = "s8"
    S16 = "s16"
    S32 = "s32"
    S64 = "s64"
    S128 = "s128"
    FLOAT = "float"
    DOUBLE = "double"
    CHAR = "char"
    CHAR16 = "char16"
    BOOL = "bool"
    PADDING = "padding"

    @property
    def type_name(self) -> str:
        return self.value


class Operator(Enum):
    """Operators usable in numeric expressions."""

    PLUS = "plus"
    MINUS = "minus"
    STAR = "star"
    SLASH = "slash"
    PERCENT = "percent"
    SHIFT_LEFT = "shift_left"
    SHIFT_RIGHT = "shift_right"
    BIT_AND = "bit_and"
    BIT_OR = "bit_or"
    BIT_XOR = "bit_xor"
    BOOL_EQUALS = "bool_equals"
    BOOL_NOT_EQUALS = "bool_not_equals"


class Endian(Enum):
    """Byte order of a type declaration."""

    LITTLE = "little"
    BIG = "big"
