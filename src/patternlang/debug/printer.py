"""
Human readable dump of pattern language ASTs.

A diagnostic aid only: the output format is not stable and nothing depends on
it. The printer never raises on malformed trees; null or unknown nodes and
unusable array sizes are printed as such.
"""

import logging
import sys
from typing import Any, Callable, Sequence

from patternlang.config import DEFAULT_MAX_DEPTH
from patternlang.core.ast import (
    ArrayVariableDecl,
    BitfieldNode,
    BuiltinType,
    EnumNode,
    IntegerLiteral,
    NumericExpression,
    PointerVariableDecl,
    RValue,
    StructNode,
    TypeDecl,
    UnionNode,
    VariableDecl,
)
from patternlang.core.types import Endian, Operator

logger = logging.getLogger(__name__)

OPERATOR_SYMBOLS = {
    Operator.PLUS: "+",
    Operator.MINUS: "-",
    Operator.STAR: "*",
    Operator.SLASH: "/",
    Operator.SHIFT_LEFT: "<<",
    Operator.SHIFT_RIGHT: ">>",
    Operator.BIT_AND: "&",
    Operator.BIT_OR: "|",
    Operator.BIT_XOR: "^",
}

NATIVE_ENDIAN = Endian.LITTLE if sys.byteorder == "little" else Endian.BIG


def _is_value_expression(node: Any) -> bool:
    return isinstance(node, (IntegerLiteral, NumericExpression))


class ASTPrinter:
    """Depth-first, indented dump of an AST to a line sink.

    Params:
        sink: Called once per output line. Defaults to this module's logger at DEBUG.
        indent_width: Spaces per nesting level
        max_depth: Nesting level at which the dump stops descending
    """

    def __init__(
        self,
        sink: Callable[[str], None] | None = None,
        indent_width: int = 2,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        self.sink = sink or logger.debug
        self.indent_width = indent_width
        self.max_depth = max_depth

    def dump(self, nodes: Sequence[Any], indent: int = 0) -> None:
        """
        Print a list of sibling nodes and their children.

        Params:
            nodes: Nodes to print; None and foreign objects are tolerated
            indent: Nesting level of these nodes
        """
        if indent > self.max_depth:
            self._emit(indent, "... (max depth reached)")
            return

        for node in nodes:
            self._dump_node(node, indent)

    def _emit(self, indent: int, text: str) -> None:
        self.sink(" " * (indent * self.indent_width) + text)

    def _dump_node(self, node: Any, indent: int) -> None:
        child = indent + 1
        match node:
            case VariableDecl():
                self._dump_declaration(f"VariableDecl ({node.name})", node.placement_offset, indent)
                self.dump([node.type], child)
            case PointerVariableDecl():
                self._dump_declaration(
                    f"PointerVariableDecl (*{node.name})", node.placement_offset, indent
                )
                self.dump([node.type], child)
                self.dump([node.size_type], child)
            case ArrayVariableDecl():
                if not _is_value_expression(node.size):
                    self._emit(indent, "Invalid size!")
                    return
                self._dump_declaration(f"ArrayVariableDecl ({node.name}[])", node.placement_offset, indent)
                self.dump([node.size], child)
                self.dump([node.type], child)
            case TypeDecl():
                endian = node.endian or NATIVE_ENDIAN
                order = "le" if endian == Endian.LITTLE else "be"
                self._emit(indent, f"TypeDecl ({order} {node.name or '<unnamed>'})")
                self.dump([node.type], child)
            case BuiltinType():
                self._emit(indent, f"BuiltinType ({node.kind.type_name})")
            case IntegerLiteral():
                self._emit(indent, f"IntegerLiteral {node.value}")
            case NumericExpression():
                self._emit(indent, f"NumericExpression {OPERATOR_SYMBOLS.get(node.operator, '???')}")
                self._emit(indent, "Left:")
                self.dump([node.left], child)
                self._emit(indent, "Right:")
                self.dump([node.right], child)
            case StructNode():
                self._emit(indent, "Struct")
                self.dump(node.members, child)
            case UnionNode():
                self._emit(indent, "Union")
                self.dump(node.members, child)
            case EnumNode():
                self._emit(indent, "Enum")
                for entry in node.entries:
                    self._emit(child, f"::{entry.name}")
                    self.dump([entry.value], child + 1)
            case BitfieldNode():
                self._emit(indent, "Bitfield")
                for entry in node.entries:
                    self._emit(child, f"{entry.name} :")
                    self.dump([entry.size], child + 1)
            case RValue():
                self._emit(indent, "RValue")
                self._emit(indent, ".".join(node.path))
            case _:
                self._emit(indent, "Invalid AST node!")

    def _dump_declaration(self, header: str, placement_offset: Any, indent: int) -> None:
        if _is_value_expression(placement_offset):
            self._emit(indent, f"{header} @")
            self.dump([placement_offset], indent + 1)
        else:
            self._emit(indent, header)


def format_ast(nodes: Sequence[Any], indent_width: int = 2, max_depth: int = DEFAULT_MAX_DEPTH) -> str:
    """
    Render nodes as an indented multi-line string.

    Params:
        nodes: Nodes to render
        indent_width: Spaces per nesting level
        max_depth: Nesting level at which rendering stops descending

    Returns:
        The dump, one line per printed entry
    """
    lines: list[str] = []
    ASTPrinter(lines.append, indent_width=indent_width, max_depth=max_depth).dump(nodes)
    return "\n".join(lines)
