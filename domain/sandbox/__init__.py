from domain.sandbox.denylist import DISALLOWED_IDENTIFIERS, DISALLOWED_NODE_TYPES
from domain.sandbox.safety_checker import ensure_safe_ast
from domain.sandbox.scope import build_scoped_callable

__all__ = [
    "DISALLOWED_IDENTIFIERS",
    "DISALLOWED_NODE_TYPES",
    "ensure_safe_ast",
    "build_scoped_callable",
]
