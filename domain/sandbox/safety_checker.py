# domain/sandbox/safety_checker.py
from __future__ import annotations

import ast
from typing import AbstractSet

from domain.exceptions import UnsafeExpressionError
from domain.sandbox.denylist import DISALLOWED_IDENTIFIERS, DISALLOWED_NODE_TYPES


class _IdentifierVisitor(ast.NodeVisitor):
    """
    Rejects denylisted names in reference, attribute-base and callee positions.
    Children are visited before the node itself.
    Only the immediate root of an attribute/call chain is inspected.
    """

    def __init__(self, disallowed: AbstractSet[str]) -> None:
        self._disallowed = disallowed

    def visit_Name(self, node: ast.Name) -> None:
        if node.id in self._disallowed:
            raise UnsafeExpressionError(
                f'Identifier "{node.id}" is not allowed inside template expressions.',
                offender=node.id,
            )

    def visit_Attribute(self, node: ast.Attribute) -> None:
        self.generic_visit(node)
        root = self._denylisted_name(node.value)
        if root is not None:
            raise UnsafeExpressionError(
                f'Accessing "{root}" is not permitted inside template expressions.',
                offender=root,
            )

    def visit_Call(self, node: ast.Call) -> None:
        self.generic_visit(node)
        callee = self._denylisted_name(node.func)
        if callee is not None:
            raise UnsafeExpressionError(f'Calling "{callee}" is not permitted.', offender=callee)
        if isinstance(node.func, ast.Attribute):
            owner = self._denylisted_name(node.func.value)
            if owner is not None:
                raise UnsafeExpressionError(
                    f'Calling methods on "{owner}" is not permitted.',
                    offender=owner,
                )

    def _denylisted_name(self, node: ast.AST) -> str | None:
        if isinstance(node, ast.Name) and node.id in self._disallowed:
            return node.id
        return None


class _SyntaxKindVisitor(ast.NodeVisitor):
    def __init__(self, disallowed: AbstractSet[str]) -> None:
        self._disallowed = disallowed

    def generic_visit(self, node: ast.AST) -> None:
        super().generic_visit(node)
        kind = type(node).__name__
        if kind in self._disallowed:
            raise UnsafeExpressionError(
                f'The syntax "{kind}" is not permitted in template expressions.',
                offender=kind,
            )


def ensure_safe_ast(
    tree: ast.AST,
    identifiers: AbstractSet[str] = DISALLOWED_IDENTIFIERS,
    node_types: AbstractSet[str] = DISALLOWED_NODE_TYPES,
) -> None:
    """
    Walk the whole tree twice and raise UnsafeExpressionError on the first
    denylisted identifier (first pass) or syntax kind (second pass).
    """
    _IdentifierVisitor(identifiers).visit(tree)
    _SyntaxKindVisitor(node_types).visit(tree)
