# domain/template.py
from __future__ import annotations

from dataclasses import dataclass

VERSION = "1.0.0"


@dataclass(frozen=True)
class TemplateDocument:
    id: str
    content: str
