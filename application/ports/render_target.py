# application/ports/render_target.py
from __future__ import annotations

from abc import ABC, abstractmethod


class RenderTargetPort(ABC):
    @abstractmethod
    def write(self, html: str) -> None:
        """Replace the target's content with the rendered HTML."""
        ...


class RenderTargetResolverPort(ABC):
    @abstractmethod
    def resolve(self, name: str) -> RenderTargetPort:
        """
        Raises TargetNotFoundError when the name does not designate a target.
        """
        ...
