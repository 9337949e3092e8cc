"""Loguru setup for applications embedding vaultrpc.

The library logs under the `vaultrpc` name and stays silent until an
application calls `configure_logging`.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from vaultrpc.config.schema import LoggingConfig

_SINK_IDS: dict[str, int] = {}

LOG_FORMAT = "<dim>{time:HH:mm:ss.SSS}</dim> | <level>{level: <8}</level> | <level>{message}</level>"


def configure_logging(config: LoggingConfig) -> None:
    """Enable vaultrpc logs on stderr and, if configured, a rotating file."""
    if not config.enabled:
        logger.disable("vaultrpc")
        return
    # Wire text is only emitted at TRACE.
    level = "TRACE" if config.log_payloads else config.level
    if "stderr" not in _SINK_IDS:
        _SINK_IDS["stderr"] = logger.add(sys.stderr, level=level, format=LOG_FORMAT, filter="vaultrpc")
    if config.file and "file" not in _SINK_IDS:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _SINK_IDS["file"] = logger.add(
            str(log_path),
            level=level,
            filter="vaultrpc",
            rotation="10 MB",
            retention="14 days",
            enqueue=True,
            encoding="utf-8",
            backtrace=False,
            diagnose=False,
        )
    logger.enable("vaultrpc")


def reset_logging() -> None:
    """Remove the sinks added by configure_logging and silence the library again."""
    for sink_id in _SINK_IDS.values():
        logger.remove(sink_id)
    _SINK_IDS.clear()
    logger.disable("vaultrpc")
