# infrastructure/output/in_memory_render_target.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from application.ports.render_target import RenderTargetPort


@dataclass
class InMemoryRenderTarget(RenderTargetPort):
    html: str = ""
    writes: List[str] = field(default_factory=list)

    def write(self, html: str) -> None:
        self.html = html
        self.writes.append(html)
