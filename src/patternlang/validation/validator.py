"""
Semantic validation of pattern language ASTs.

The validator runs after parsing and before evaluation. It checks names only:
variable and type declarations listed together in one container must be
distinct, and constants within one enum must be distinct. Each container level
is its own scope; a declaration's type body never sees the names declared next
to that declaration.

Validation is fail-fast. Each recursive step returns the first error it finds
or None, and callers stop as soon as an error comes back.
"""

import logging

from patternlang.config import ValidatorConfig
from patternlang.core.ast import (
    EnumNode,
    Node,
    NodeList,
    StructNode,
    TypeDecl,
    UnionNode,
    VariableDecl,
)
from patternlang.exceptions.core import ErrorKind, ValidatorError
from patternlang.validation.scope import IdentifierScope

logger = logging.getLogger(__name__)

NULL_NODE_MESSAGE = "null node in AST"


class Validator:
    """Checks identifier uniqueness in a parsed template tree.

    The last failure is kept on the instance until the next failing run. A
    successful run does not clear it. Instances are not thread safe; use one
    validator per concurrent validation.
    """

    def __init__(self, config: ValidatorConfig | None = None):
        self.config = config or ValidatorConfig()
        self._last_error: ValidatorError | None = None

    @property
    def last_error(self) -> ValidatorError | None:
        return self._last_error

    def get_last_error(self) -> ValidatorError | None:
        """
        Get the error recorded by the most recent failing `validate` call.

        Returns:
            The stored error, or None if no run has failed yet
        """
        return self._last_error

    def validate(self, nodes: NodeList) -> bool:
        """
        Validate one list of sibling nodes and everything below them.

        Params:
            nodes: Top-level nodes forming one naming scope

        Returns:
            True if no violation was found, False otherwise. On False the
            first violation is available from `get_last_error`.
        """
        logger.debug("Validating %d top-level nodes", len(nodes))
        error = self._check_scope(nodes, IdentifierScope(), depth=0)
        if error is None:
            return True

        self._last_error = error
        if error.is_internal:
            logger.warning("Malformed AST at line %d: %s", error.line, error.message)
        else:
            logger.info("Validation failed at line %d: %s", error.line, error.message)
        return False

    def check(self, nodes: NodeList) -> None:
        """
        Validate nodes and raise on the first violation.

        Params:
            nodes: Top-level nodes forming one naming scope

        Raises:
            TemplateValidationError: Subclass matching the kind of the first violation
        """
        if not self.validate(nodes):
            raise self._last_error.to_exception(self.config.error_level)

    def _check_scope(
        self, nodes: NodeList, scope: IdentifierScope, depth: int
    ) -> ValidatorError | None:
        for node in nodes:
            match node:
                case None:
                    return ValidatorError(NULL_NODE_MESSAGE, 1, ErrorKind.STRUCTURAL)
                case VariableDecl(name=name, type=declared_type) | TypeDecl(
                    name=name, type=declared_type
                ):
                    if not scope.declare(name):
                        return ValidatorError(
                            f"redefinition of identifier '{name}'",
                            node.line,
                            ErrorKind.REDEFINITION,
                            identifier=name,
                            node_type=node.node_type,
                        )
                    error = self._check_nested(node, [declared_type], depth)
                case StructNode(members=members) | UnionNode(members=members):
                    error = self._check_nested(node, members, depth)
                case EnumNode():
                    error = self._check_enum(node)
                case _:
                    # Pointers, arrays, builtins, expressions and bitfields
                    # are not scope checked.
                    continue

            if error is not None:
                return error

        return None

    def _check_nested(self, parent: Node, nodes: NodeList, depth: int) -> ValidatorError | None:
        if depth >= self.config.max_depth:
            return ValidatorError(
                f"maximum nesting depth of {self.config.max_depth} exceeded",
                parent.line,
                ErrorKind.NESTING_DEPTH,
                node_type=parent.node_type,
            )
        return self._check_scope(nodes, IdentifierScope(), depth + 1)

    def _check_enum(self, enum: EnumNode) -> ValidatorError | None:
        constants = IdentifierScope()
        for entry in enum.entries:
            if constants.declare(entry.name):
                continue
            # Point at the duplicated entry rather than at the enum itself
            line = entry.value.line if entry.value is not None else enum.line
            return ValidatorError(
                f"redefinition of enum constant '{entry.name}'",
                line,
                ErrorKind.ENUM_CONSTANT,
                identifier=entry.name,
                node_type=enum.node_type,
            )
        return None


def validate_ast(nodes: NodeList, config: ValidatorConfig | None = None) -> ValidatorError | None:
    """
    Validate nodes with a throwaway validator.

    Params:
        nodes: Top-level nodes forming one naming scope
        config: Optional validator settings

    Returns:
        The first violation found, or None when the tree is valid
    """
    validator = Validator(config)
    if validator.validate(nodes):
        return None
    return validator.get_last_error()
