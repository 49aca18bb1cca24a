from __future__ import annotations

from pathlib import Path

import pytest

from domain.exceptions import TargetNotFoundError
from infrastructure.output.file_render_target import FileRenderTarget, FileTargetResolver
from infrastructure.output.in_memory_render_target import InMemoryRenderTarget


def test_file_render_target_replaces_content(tmp_path: Path) -> None:
    path = tmp_path / "out.html"
    path.write_text("old", encoding="utf-8")
    target = FileRenderTarget(path)

    target.write("<p>new</p>")

    assert path.read_text(encoding="utf-8") == "<p>new</p>"


def test_resolver_returns_target_under_base_dir(tmp_path: Path) -> None:
    (tmp_path / "pages").mkdir()
    resolver = FileTargetResolver(tmp_path)

    target = resolver.resolve("pages/index.html")

    assert target.path == (tmp_path / "pages" / "index.html").resolve()


def test_resolver_requires_existing_parent_directory(tmp_path: Path) -> None:
    resolver = FileTargetResolver(tmp_path)

    with pytest.raises(TargetNotFoundError, match="was not found"):
        resolver.resolve("missing/index.html")


@pytest.mark.parametrize("name", ["../escape.html", ".", "pages/../../escape.html"])
def test_resolver_rejects_names_outside_base_dir(tmp_path: Path, name: str) -> None:
    base_dir = tmp_path / "out"
    (base_dir / "pages").mkdir(parents=True)
    resolver = FileTargetResolver(base_dir)

    with pytest.raises(TargetNotFoundError, match="outside"):
        resolver.resolve(name)


def test_in_memory_target_keeps_every_write() -> None:
    target = InMemoryRenderTarget()

    target.write("a")
    target.write("b")

    assert target.html == "b"
    assert target.writes == ["a", "b"]
