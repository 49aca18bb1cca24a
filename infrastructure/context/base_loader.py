# infrastructure/context/base_loader.py
"""
コンテキストファイル（テンプレート変数）を dict として読み込む
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union


class ContextLoadError(Exception):
    pass


class ContextLoaderBase(ABC):
    def load_from_file(self, path: Union[str, Path]) -> Dict[str, Any]:
        p = Path(path)
        if not p.exists():
            raise ContextLoadError(f"Context file not found: {path}")

        data = self._load_file(p)

        if data is None:
            raise ContextLoadError(f"Context file is empty: {path}")

        if not isinstance(data, dict):
            raise ContextLoadError(f"Context file must contain a mapping: {path}")

        return data

    @abstractmethod
    def _load_file(self, path: Path) -> Any:
        ...
