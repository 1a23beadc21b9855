"""Loguru sinks for facadetrace: a readable console format or one JSON object per line."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, List

from loguru import logger

if TYPE_CHECKING:
    from facadetrace.settings import LoggingSettings, Settings


CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


class JSONFormatter:
    """Render a loguru record as a single JSON line.

    Values bound with ``logger.bind`` (zone ids, facade numbers) become top
    level keys. Loguru treats the returned string as a format template, so
    braces are escaped and the line terminator is appended here.
    """

    def __call__(self, record: dict[str, Any]) -> str:
        entry: dict[str, Any] = {
            "timestamp": record["time"].isoformat(),
            "level": record["level"].name,
            "message": record["message"],
            "source": f"{record['name']}:{record['function']}:{record['line']}",
        }
        entry.update(record["extra"])

        exception = record["exception"]
        if exception is not None:
            entry["error"] = {
                "type": exception.type.__name__ if exception.type else None,
                "value": str(exception.value) if exception.value else None,
            }

        payload = json.dumps(entry, ensure_ascii=False, default=str)
        return payload.replace("{", "{{").replace("}", "}}") + "\n"


def setup_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    log_file: Path | None = None,
) -> List[int]:
    """Replace every loguru sink with a stderr sink and, optionally, a rotating file.

    Args:
        level: Minimum level for both sinks.
        json_format: Emit JSON lines instead of the colored console format.
        log_file: Extra sink; parent directories are created.

    Returns:
        Ids of the added sinks, usable with ``logger.remove``.
    """
    logger.remove()
    fmt: Any = JSONFormatter() if json_format else CONSOLE_FORMAT

    sink_ids = [logger.add(sys.stderr, format=fmt, level=level, colorize=not json_format)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sink_ids.append(
            logger.add(
                log_file,
                format=fmt,
                level=level,
                rotation="10 MB",
                retention="7 days",
                compression="zip",
            )
        )
    return sink_ids


def setup_logging_from_settings(settings: "Settings | LoggingSettings") -> List[int]:
    """Apply a loaded ``Settings`` (or just its ``logging`` section)."""
    cfg = getattr(settings, "logging", settings)
    return setup_logging(level=cfg.level, json_format=cfg.json_format, log_file=cfg.log_file)
