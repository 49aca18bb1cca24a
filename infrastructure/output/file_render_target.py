# infrastructure/output/file_render_target.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from application.ports.render_target import RenderTargetPort, RenderTargetResolverPort
from domain.exceptions import TargetNotFoundError


@dataclass(frozen=True)
class FileRenderTarget(RenderTargetPort):
    path: Path

    def write(self, html: str) -> None:
        self.path.write_text(html, encoding="utf-8")


class FileTargetResolver(RenderTargetResolverPort):
    """
    Resolves a relative target name under base_dir.
    The name must stay inside base_dir and its parent directory must exist.
    """

    def __init__(self, base_dir: Path) -> None:
        self._base_dir = base_dir

    def resolve(self, name: str) -> FileRenderTarget:
        base = self._base_dir.resolve()
        path = (base / name).resolve()
        if path == base or not path.is_relative_to(base):
            raise TargetNotFoundError(f'Target "{name}" is outside of {base}.')
        if not path.parent.is_dir():
            raise TargetNotFoundError(f'Target "{name}" was not found in {base}.')
        return FileRenderTarget(path)
