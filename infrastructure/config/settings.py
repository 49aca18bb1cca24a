# infrastructure/config/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from dotenv import dotenv_values

PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_ENV_PATH = PROJECT_ROOT / ".env"


@dataclass(frozen=True)
class Settings:
    template_dir: Path
    output_dir: Path
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Settings":
        """
        .env（プロジェクトルート）と環境変数から設定を読み込む。
        .env の値が優先され、未定義のキーは環境変数で補う。
        """
        values = _read_env(env_path or DEFAULT_ENV_PATH)
        return cls(
            template_dir=Path(values.get("HTMLX_TEMPLATE_DIR") or PROJECT_ROOT / "templates"),
            output_dir=Path(values.get("HTMLX_OUTPUT_DIR") or PROJECT_ROOT / "out"),
            log_level=(values.get("HTMLX_LOG_LEVEL") or "INFO").upper(),
        )


def _read_env(env_path: Path) -> Dict[str, Optional[str]]:
    values: Dict[str, Optional[str]] = dict(dotenv_values(env_path)) if env_path.exists() else {}
    for key, value in os.environ.items():
        if key not in values:
            values[key] = value
    return values
