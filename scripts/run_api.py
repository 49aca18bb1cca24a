#!/usr/bin/env python3
"""
テンプレート描画 API サーバーを起動するエントリポイント
"""
import sys
from pathlib import Path

# プロジェクトルートをPYTHONPATHに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import uvicorn

from infrastructure.config.settings import Settings
from infrastructure.logging.log_setup import setup_console_logging

if __name__ == "__main__":
    settings = Settings.from_env()
    setup_console_logging(level=settings.log_level)
    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # 開発時の自動リロード
        log_level=settings.log_level.lower(),
    )
