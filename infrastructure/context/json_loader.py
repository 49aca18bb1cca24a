# infrastructure/context/json_loader.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from infrastructure.context.base_loader import ContextLoadError, ContextLoaderBase


class JsonContextLoader(ContextLoaderBase):
    def _load_file(self, path: Path) -> Any:
        with path.open("r", encoding="utf-8") as handle:
            text = handle.read()
        if not text.strip():
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ContextLoadError(f"Context file is invalid JSON: {path} ({exc})") from exc
