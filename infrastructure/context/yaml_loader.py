# infrastructure/context/yaml_loader.py
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from infrastructure.context.base_loader import ContextLoadError, ContextLoaderBase


class YamlContextLoader(ContextLoaderBase):
    """YAMLファイルからテンプレート変数をロード"""

    def _load_file(self, path: Path) -> Any:
        with path.open("r", encoding="utf-8") as f:
            try:
                return yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ContextLoadError(f"Context file is invalid YAML: {path} ({exc})") from exc
