from __future__ import annotations

import re
from typing import Any, List, Mapping, Optional, Tuple

from application.ports.logger import LoggerPort
from domain.escaping import escape_html
from domain.exceptions import ExpressionError
from domain.expr import ExpressionEvaluator

RAW_MARKER = re.compile(r"\{\{\{([\s\S]+?)\}\}\}")
ESCAPED_MARKER = re.compile(r"\{\{([^{}]+)\}\}")


class TemplateRenderer:
    """
    {{{ expr }}} と {{ expr }} を展開する。
    - {{{ ... }}} を先にすべて評価し、結果はエスケープしない
    - {{ ... }} は {{{ ... }}} 以外のテキスト部分だけを置換し、HTML エスケープする
    - 評価結果は再展開しない（{{{ ... }}} の結果に含まれる {{ ... }} もそのまま）
    - None は空文字列
    評価エラーはそのまま呼び出し元に伝播する。
    """

    def __init__(
        self,
        evaluator: Optional[ExpressionEvaluator] = None,
        logger: Optional[LoggerPort] = None,
    ) -> None:
        self._evaluator = evaluator or ExpressionEvaluator()
        self._logger = logger

    def render(self, template: str, context: Optional[Mapping[str, Any]] = None) -> str:
        if not isinstance(template, str):
            raise TypeError("Template must be a string.")

        ctx = context or {}
        if self._logger:
            self._logger.debug("template.render.start", length=len(template), names=list(ctx))

        try:
            segments = self._substitute_raw(template, ctx)
            rendered = "".join(
                text if inert else ESCAPED_MARKER.sub(lambda m: self._render_escaped(m.group(1), ctx), text)
                for inert, text in segments
            )
        except ExpressionError as exc:
            if self._logger:
                self._logger.error(
                    "template.render.failed",
                    kind=exc.code,
                    expression=exc.expression,
                    error=str(exc),
                )
            raise

        if self._logger:
            self._logger.debug("template.render.done", length=len(rendered))
        return rendered

    def _substitute_raw(self, template: str, ctx: Mapping[str, Any]) -> List[Tuple[bool, str]]:
        """
        Split the template into (inert, text) segments: literal text between
        raw markers (inert=False) and evaluated raw marker values (inert=True).
        """
        segments: List[Tuple[bool, str]] = []
        last = 0
        for match in RAW_MARKER.finditer(template):
            segments.append((False, template[last:match.start()]))
            segments.append((True, self._render_raw(match.group(1), ctx)))
            last = match.end()
        segments.append((False, template[last:]))
        return segments

    def _render_raw(self, expression: str, ctx: Mapping[str, Any]) -> str:
        value = self._evaluator.evaluate(expression, ctx)
        return "" if value is None else str(value)

    def _render_escaped(self, expression: str, ctx: Mapping[str, Any]) -> str:
        value = self._evaluator.evaluate(expression, ctx)
        if value is None:
            return ""
        return escape_html(value)


_DEFAULT_RENDERER = TemplateRenderer()


def render(template: str, context: Optional[Mapping[str, Any]] = None) -> str:
    return _DEFAULT_RENDERER.render(template, context)
