# domain/exceptions.py
from __future__ import annotations


class ExpressionError(Exception):
    """Base class for failures while evaluating a template expression."""

    code = "expression_error"

    def __init__(self, message: str, expression: str = "") -> None:
        super().__init__(message)
        self.expression = expression


class ExpressionParseError(ExpressionError):
    code = "parse_error"


class UnsafeExpressionError(ExpressionError):
    code = "unsafe_expression"

    def __init__(self, message: str, offender: str, expression: str = "") -> None:
        super().__init__(message, expression)
        self.offender = offender


class ExpressionRuntimeError(ExpressionError):
    code = "runtime_error"


class TemplateMountError(Exception):
    pass


class TemplateNotFoundError(TemplateMountError):
    pass


class TargetNotFoundError(TemplateMountError):
    pass


class UnsupportedReferenceError(TemplateMountError):
    pass
