# infrastructure/templates/file_template_source.py
from __future__ import annotations

from pathlib import Path

from application.ports.template_source import TemplateSourcePort
from domain.exceptions import TemplateNotFoundError
from domain.template import TemplateDocument
from infrastructure.templates.file_finder import TemplateFileFinder


class FileTemplateSource(TemplateSourcePort):
    def __init__(self, base_dir: Path) -> None:
        self._finder = TemplateFileFinder(base_dir)

    def get(self, template_id: str) -> TemplateDocument:
        path = self._finder.find_by_id(template_id)
        if path is None:
            raise TemplateNotFoundError(f'Template with id "{template_id}" was not found.')

        with path.open("r", encoding="utf-8") as f:
            content = f.read()

        return TemplateDocument(id=template_id, content=content)
