# infrastructure/logging/log_setup.py
import sys

from loguru import logger

CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"


def setup_console_logging(level: str = "INFO", fmt: str = CONSOLE_FORMAT, stderr: bool = False) -> None:
    # stderr=True keeps stdout for rendered output (scripts)
    logger.remove()
    logger.add(
        lambda msg: print(msg, end="", file=sys.stderr if stderr else sys.stdout),
        level=level.upper(),
        format=fmt,
    )
