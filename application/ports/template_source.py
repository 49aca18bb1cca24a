# application/ports/template_source.py
from __future__ import annotations

from abc import ABC, abstractmethod

from domain.template import TemplateDocument


class TemplateSourcePort(ABC):
    @abstractmethod
    def get(self, template_id: str) -> TemplateDocument:
        """
        Raises TemplateNotFoundError when no template has the given id.
        """
        ...
