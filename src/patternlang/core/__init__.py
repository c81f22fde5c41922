"""
Core pattern language components.

This package provides the AST node model and the token-level type
definitions shared by the validator and the debug printer.
"""

from patternlang.core.ast import (
    ArrayVariableDecl,
    ASTNode,
    BitfieldEntry,
    BitfieldNode,
    BuiltinType,
    EnumEntry,
    EnumNode,
    IntegerLiteral,
    Node,
    NodeList,
    NodeRef,
    NumericExpression,
    PointerVariableDecl,
    RValue,
    StructNode,
    TypeDecl,
    UnionNode,
    VariableDecl,
    load_ast,
)
from patternlang.core.types import BuiltinTypeKind, Endian, Operator

__all__ = [
    "Node",
    "ASTNode",
    "NodeRef",
    "NodeList",
    "VariableDecl",
    "PointerVariableDecl",
    "ArrayVariableDecl",
    "TypeDecl",
    "BuiltinType",
    "StructNode",
    "UnionNode",
    "EnumEntry",
    "EnumNode",
    "BitfieldEntry",
    "BitfieldNode",
    "IntegerLiteral",
    "NumericExpression",
    "RValue",
    "BuiltinTypeKind",
    "Endian",
    "Operator",
    "load_ast",
]
