from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from application.ports.logger import LoggerPort
from application.ports.render_target import RenderTargetPort, RenderTargetResolverPort
from application.ports.template_source import TemplateSourcePort
from application.services.template_renderer import TemplateRenderer
from domain.exceptions import UnsupportedReferenceError

# template_ref: template id (str) or any object with a ``content`` string
# target_ref:   target name (str) or any object with a ``write`` method
TemplateRef = Any
TargetRef = Any


class TemplateMounter:
    """
    Loads a template, renders it with a context and writes the HTML into a target.
    """

    def __init__(
        self,
        renderer: TemplateRenderer,
        templates: TemplateSourcePort,
        targets: RenderTargetResolverPort,
        logger: Optional[LoggerPort] = None,
    ) -> None:
        self._renderer = renderer
        self._templates = templates
        self._targets = targets
        self._logger = logger

    def mount(
        self,
        template_ref: TemplateRef,
        target_ref: TargetRef,
        context: Optional[Mapping[str, Any]] = None,
    ) -> RenderTargetPort:
        try:
            template = self._get_template_content(template_ref)
            target = self._resolve_target(target_ref)
            html = self._renderer.render(template, context or {})
            target.write(html)
        except Exception as exc:
            if self._logger:
                self._logger.error("template.mount.failed", template=self._describe(template_ref), error=str(exc))
            raise

        if self._logger:
            self._logger.info(
                "template.mount.done",
                template=self._describe(template_ref),
                target=self._describe(target_ref),
                length=len(html),
            )
        return target

    def create_renderer(
        self,
        template_ref: TemplateRef,
        target_ref: TargetRef,
    ) -> Callable[..., RenderTargetPort]:
        def _render(context: Optional[Mapping[str, Any]] = None) -> RenderTargetPort:
            return self.mount(template_ref, target_ref, context)

        return _render

    def _get_template_content(self, template_ref: TemplateRef) -> str:
        if isinstance(template_ref, str):
            return self._templates.get(template_ref).content

        content = getattr(template_ref, "content", None)
        if isinstance(content, str):
            return content

        raise UnsupportedReferenceError("Unsupported template reference: provide a template id or document.")

    def _resolve_target(self, target_ref: TargetRef) -> RenderTargetPort:
        if isinstance(target_ref, str):
            return self._targets.resolve(target_ref)

        if callable(getattr(target_ref, "write", None)):
            return target_ref

        raise UnsupportedReferenceError("Unsupported target reference: provide a target name or writable target.")

    def _describe(self, ref: Any) -> str:
        if isinstance(ref, str):
            return ref
        return str(getattr(ref, "id", None) or type(ref).__name__)
