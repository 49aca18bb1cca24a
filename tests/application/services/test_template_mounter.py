from __future__ import annotations

from typing import Any, Dict, List

import pytest

from application.services.template_mounter import TemplateMounter
from application.services.template_renderer import TemplateRenderer
from domain.exceptions import (
    TargetNotFoundError,
    TemplateNotFoundError,
    UnsafeExpressionError,
    UnsupportedReferenceError,
)
from domain.template import TemplateDocument
from infrastructure.output.in_memory_render_target import InMemoryRenderTarget


class FakeTemplateSource:
    def __init__(self, templates: Dict[str, str]) -> None:
        self.templates = templates

    def get(self, template_id: str) -> TemplateDocument:
        if template_id not in self.templates:
            raise TemplateNotFoundError(f'Template with id "{template_id}" was not found.')
        return TemplateDocument(id=template_id, content=self.templates[template_id])


class FakeTargetResolver:
    def __init__(self, names: List[str]) -> None:
        self.targets = {name: InMemoryRenderTarget() for name in names}

    def resolve(self, name: str) -> InMemoryRenderTarget:
        if name not in self.targets:
            raise TargetNotFoundError(f'Target "{name}" was not found.')
        return self.targets[name]


class FakeLogger:
    def __init__(self) -> None:
        self.events: List[Dict[str, Any]] = []

    def debug(self, event: str, **fields: Any) -> None:
        self.events.append({"event": event, **fields})

    def info(self, event: str, **fields: Any) -> None:
        self.events.append({"event": event, **fields})

    def error(self, event: str, **fields: Any) -> None:
        self.events.append({"event": event, **fields})

    def bind(self, **fields: Any) -> "FakeLogger":
        return self


def _mounter(templates=None, targets=None, logger=None) -> TemplateMounter:
    return TemplateMounter(
        renderer=TemplateRenderer(),
        templates=FakeTemplateSource(templates or {"card": "<p>{{ name }}</p>"}),
        targets=FakeTargetResolver(targets or ["main"]),
        logger=logger,
    )


def test_mount_by_id_into_named_target() -> None:
    mounter = _mounter()

    target = mounter.mount("card", "main", {"name": "<Ann>"})

    assert target.html == "<p>&lt;Ann&gt;</p>"


def test_mount_accepts_document_and_target_objects() -> None:
    mounter = _mounter()
    target = InMemoryRenderTarget()
    document = TemplateDocument(id="inline", content="{{{ body }}}")

    returned = mounter.mount(document, target, {"body": "<i>x</i>"})

    assert returned is target
    assert target.html == "<i>x</i>"


def test_mount_without_context_uses_empty_mapping() -> None:
    mounter = _mounter(templates={"static": "<p>{{ 'static' }}</p>"})

    target = mounter.mount("static", "main")

    assert target.html == "<p>static</p>"


def test_mount_unknown_template_raises() -> None:
    mounter = _mounter()

    with pytest.raises(TemplateNotFoundError, match="missing"):
        mounter.mount("missing", "main", {})


def test_mount_unknown_target_raises() -> None:
    mounter = _mounter()

    with pytest.raises(TargetNotFoundError):
        mounter.mount("card", "sidebar", {"name": "x"})


@pytest.mark.parametrize("template_ref", [42, None, object()])
def test_mount_rejects_unsupported_template_reference(template_ref) -> None:
    mounter = _mounter()

    with pytest.raises(UnsupportedReferenceError, match="template"):
        mounter.mount(template_ref, "main", {})


@pytest.mark.parametrize("target_ref", [42, None, object()])
def test_mount_rejects_unsupported_target_reference(target_ref) -> None:
    mounter = _mounter()

    with pytest.raises(UnsupportedReferenceError, match="target"):
        mounter.mount("card", target_ref, {"name": "x"})


def test_mount_does_not_write_when_evaluation_fails() -> None:
    logger = FakeLogger()
    mounter = _mounter(templates={"bad": "{{ exec('1') }}"}, logger=logger)
    target = InMemoryRenderTarget(html="previous")

    with pytest.raises(UnsafeExpressionError):
        mounter.mount("bad", target, {})

    assert target.html == "previous"
    assert target.writes == []
    assert logger.events[-1]["event"] == "template.mount.failed"
    assert logger.events[-1]["template"] == "bad"


def test_mount_logs_success() -> None:
    logger = FakeLogger()
    mounter = _mounter(logger=logger)

    mounter.mount("card", "main", {"name": "x"})

    assert logger.events == [
        {"event": "template.mount.done", "template": "card", "target": "main", "length": len("<p>x</p>")}
    ]


def test_create_renderer_rerenders_with_each_context() -> None:
    templates = {"card": "<p>{{ name }}</p>"}
    mounter = _mounter(templates=templates)
    render_card = mounter.create_renderer("card", "main")

    first = render_card({"name": "one"})
    templates["card"] = "<h1>{{ name }}</h1>"
    second = render_card({"name": "two"})

    assert first is second
    assert second.writes == ["<p>one</p>", "<h1>two</h1>"]


def test_create_renderer_without_context() -> None:
    mounter = _mounter(templates={"card": "<p>{{ 40 + 2 }}</p>"})

    target = mounter.create_renderer("card", "main")()

    assert target.html == "<p>42</p>"
