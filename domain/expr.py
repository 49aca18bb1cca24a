# domain/expr.py
from __future__ import annotations

import ast
from typing import Any, Mapping, Optional

from domain.exceptions import (
    ExpressionParseError,
    ExpressionRuntimeError,
    UnsafeExpressionError,
)
from domain.sandbox.safety_checker import ensure_safe_ast
from domain.sandbox.scope import build_scoped_callable


class ExpressionEvaluator:
    """
    Evaluates a single Python expression against a context mapping.

    1. empty (after strip) -> ""
    2. ast.parse(mode="eval")        -> ExpressionParseError
    3. denylist check over the tree  -> UnsafeExpressionError
    4. run with only the context keys bound -> ExpressionRuntimeError
    """

    def evaluate(self, expression: str, context: Optional[Mapping[str, Any]] = None) -> Any:
        trimmed = expression.strip()
        if not trimmed:
            return ""

        tree = self._parse(trimmed)

        try:
            ensure_safe_ast(tree)
        except UnsafeExpressionError as exc:
            exc.expression = trimmed
            raise
        except RecursionError as exc:
            raise ExpressionParseError(
                "Unable to parse expression: expression is nested too deeply",
                expression=trimmed,
            ) from exc

        return self._run(tree, trimmed, context or {})

    def _parse(self, trimmed: str) -> ast.Expression:
        try:
            return ast.parse(trimmed, mode="eval")
        except (RecursionError, MemoryError) as exc:
            raise ExpressionParseError(
                "Unable to parse expression: expression is nested too deeply",
                expression=trimmed,
            ) from exc
        except (SyntaxError, ValueError) as exc:
            raise ExpressionParseError(
                f"Unable to parse expression: {self._describe(exc)}",
                expression=trimmed,
            ) from exc

    def _run(self, tree: ast.Expression, trimmed: str, context: Mapping[str, Any]) -> Any:
        names = list(context.keys())
        values = [context[name] for name in names]
        try:
            evaluator = build_scoped_callable(names, tree.body)
            return evaluator(*values)
        except Exception as exc:
            raise ExpressionRuntimeError(
                f"Error while evaluating expression: {self._describe(exc)}",
                expression=trimmed,
            ) from exc

    def _describe(self, exc: Exception) -> str:
        if isinstance(exc, SyntaxError) and exc.msg:
            return exc.msg
        return str(exc) or type(exc).__name__


_DEFAULT_EVALUATOR = ExpressionEvaluator()


def evaluate_expression(expression: str, context: Optional[Mapping[str, Any]] = None) -> Any:
    return _DEFAULT_EVALUATOR.evaluate(expression, context)
