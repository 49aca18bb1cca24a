# infrastructure/templates/__init__.py
from infrastructure.templates.file_finder import TemplateFileFinder
from infrastructure.templates.file_template_source import FileTemplateSource

__all__ = [
    "TemplateFileFinder",
    "FileTemplateSource",
]
