# infrastructure/context/loader_registry.py
from __future__ import annotations

from pathlib import Path
from typing import Dict

from infrastructure.context.base_loader import ContextLoaderBase, ContextLoadError
from infrastructure.context.json_loader import JsonContextLoader
from infrastructure.context.yaml_loader import YamlContextLoader


class ContextLoaderRegistry:
    def __init__(self) -> None:
        self._loaders: Dict[str, ContextLoaderBase] = {
            ".yaml": YamlContextLoader(),
            ".yml": YamlContextLoader(),
            ".json": JsonContextLoader(),
        }

    def get_loader(self, path: Path) -> ContextLoaderBase:
        ext = path.suffix.lower()
        loader = self._loaders.get(ext)
        if loader is None:
            raise ContextLoadError(f"Unsupported context format: {ext}")
        return loader
