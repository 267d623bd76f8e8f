"""
Logging for the vecmat package.

The algebra modules log through ``get_context_logger``, which attaches a
structured ``extra_data`` mapping to every record. Nothing is configured on
import; applications call ``setup_logging`` when they want vecmat's debug
output, and only the ``vecmat`` logger is touched.
"""

import sys
import logging
from typing import Any, Dict, List, Optional
from datetime import datetime, timezone
import json
from pathlib import Path

from .config import Settings, get_settings

PACKAGE_LOGGER = "vecmat"


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, with ``extra_data`` merged in"""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        payload.update(getattr(record, "extra_data", {}))
        return json.dumps(payload, default=str)


class TextFormatter(logging.Formatter):
    """Plain single-line layout"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )


def _handlers_for(config: Settings, level: int) -> List[logging.Handler]:
    formatter = StructuredFormatter() if config.LOG_FORMAT == "json" else TextFormatter()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if config.LOG_FILE:
        log_path = Path(config.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
    return handlers


def setup_logging(config: Optional[Settings] = None) -> None:
    """
    Configure the ``vecmat`` logger from settings.

    Calling it again replaces the handlers installed by the previous call.
    Records stop propagating to the root logger, which belongs to the host
    application.
    """
    config = config or get_settings()
    level = getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    for handler in _handlers_for(config, level):
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


class ContextLogger(logging.LoggerAdapter):
    """Adapter accepting ``extra_data=`` and merging it over a fixed context"""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        extra_data = kwargs.pop("extra_data", {})
        kwargs.setdefault("extra", {})["extra_data"] = {**self.extra, **extra_data}
        return msg, kwargs


def get_context_logger(name: str, **context) -> ContextLogger:
    """Get a logger whose records always carry ``context``"""
    return ContextLogger(logging.getLogger(name), context)
