"""
AST node model for the pattern language.

Nodes are immutable pydantic models forming a closed variant set, discriminated
by their ``node_type`` field. Every node carries the source line it was parsed
from. Child references may be ``None``; a null child is a malformed tree and is
reported by the validator rather than rejected here.
"""

from typing import Annotated, Literal, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from patternlang.core.types import BuiltinTypeKind, Endian, Operator


class Node(BaseModel):
    """Base class for all AST nodes."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    line: int = Field(default=1, ge=1)


class VariableDecl(Node):
    node_type: Literal["variable_decl"] = "variable_decl"
    name: str
    type: "NodeRef"
    placement_offset: "NodeRef" = None


class PointerVariableDecl(Node):
    node_type: Literal["pointer_variable_decl"] = "pointer_variable_decl"
    name: str
    type: "NodeRef"
    size_type: "NodeRef"
    placement_offset: "NodeRef" = None


class ArrayVariableDecl(Node):
    node_type: Literal["array_variable_decl"] = "array_variable_decl"
    name: str
    type: "NodeRef"
    size: "NodeRef"
    placement_offset: "NodeRef" = None


class TypeDecl(Node):
    """Named (or unnamed, with an empty name) type declaration."""

    node_type: Literal["type_decl"] = "type_decl"
    name: str = ""
    type: "NodeRef"
    endian: Endian | None = None


class BuiltinType(Node):
    node_type: Literal["builtin_type"] = "builtin_type"
    kind: BuiltinTypeKind


class StructNode(Node):
    node_type: Literal["struct"] = "struct"
    members: list["NodeRef"] = Field(default_factory=list)


class UnionNode(Node):
    node_type: Literal["union"] = "union"
    members: list["NodeRef"] = Field(default_factory=list)


class EnumEntry(BaseModel):
    """Enum constant; ``value`` is the expression assigned to it."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    value: "NodeRef"


class EnumNode(Node):
    node_type: Literal["enum"] = "enum"
    underlying_type: "NodeRef" = None
    entries: list[EnumEntry] = Field(default_factory=list)


class BitfieldEntry(BaseModel):
    """Bitfield member; ``size`` is the expression giving its width in bits."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    size: "NodeRef"


class BitfieldNode(Node):
    node_type: Literal["bitfield"] = "bitfield"
    entries: list[BitfieldEntry] = Field(default_factory=list)


class IntegerLiteral(Node):
    node_type: Literal["integer_literal"] = "integer_literal"
    value: int


class NumericExpression(Node):
    node_type: Literal["numeric_expression"] = "numeric_expression"
    operator: Operator
    left: "NodeRef"
    right: "NodeRef"


class RValue(Node):
    """Reference to a previously declared value, e.g. ``header.size``."""

    node_type: Literal["rvalue"] = "rvalue"
    path: list[str] = Field(min_length=1)


ASTNode = Annotated[
    Union[
        VariableDecl,
        PointerVariableDecl,
        ArrayVariableDecl,
        TypeDecl,
        BuiltinType,
        StructNode,
        UnionNode,
        EnumNode,
        BitfieldNode,
        IntegerLiteral,
        NumericExpression,
        RValue,
    ],
    Field(discriminator="node_type"),
]

NodeRef = Optional[ASTNode]

NodeList = Sequence[NodeRef]

for _model in (
    VariableDecl,
    PointerVariableDecl,
    ArrayVariableDecl,
    TypeDecl,
    StructNode,
    UnionNode,
    EnumEntry,
    EnumNode,
    BitfieldEntry,
    BitfieldNode,
    NumericExpression,
):
    _model.model_rebuild()

_node_list_adapter = TypeAdapter(list[NodeRef])


def load_ast(data: list | str | bytes) -> list[NodeRef]:
    """
    Build a node list from plain data or a JSON document.

    Each node is a mapping with a ``node_type`` discriminator; JSON ``null``
    becomes a null node.

    Params:
        data: List of node mappings, or a JSON string/bytes holding one

    Returns:
        List of AST nodes

    Raises:
        pydantic.ValidationError: When the data does not describe valid nodes
    """
    if isinstance(data, (str, bytes)):
        return _node_list_adapter.validate_json(data)
    return _node_list_adapter.validate_python(data)
