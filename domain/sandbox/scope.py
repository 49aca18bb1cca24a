# domain/sandbox/scope.py
from __future__ import annotations

import ast
import keyword
from typing import Any, Callable, Sequence

_FILENAME = "<template-expression>"


def _validate_parameter_name(name: Any) -> None:
    if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
        raise ValueError(f"invalid context name: {name!r}")


def build_scoped_callable(names: Sequence[str], body: ast.expr) -> Callable[..., Any]:
    """
    Compile ``body`` into a callable whose only bindings are ``names``.

    The callable takes one positional argument per name, in order. It is
    compiled against globals holding an empty ``__builtins__``, so nothing
    outside the parameter list resolves.
    """
    for name in names:
        _validate_parameter_name(name)

    params = ast.arguments(
        posonlyargs=[],
        args=[ast.arg(arg=name) for name in names],
        vararg=None,
        kwonlyargs=[],
        kw_defaults=[],
        kwarg=None,
        defaults=[],
    )
    tree = ast.Expression(body=ast.Lambda(args=params, body=body))
    ast.fix_missing_locations(tree)
    code = compile(tree, _FILENAME, "eval")
    return eval(code, {"__builtins__": {}})
