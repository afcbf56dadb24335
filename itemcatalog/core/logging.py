import logging
import sys
from pathlib import Path
from typing import Any

import structlog

from itemcatalog.config import AppConfig


def configure_logging(config: AppConfig) -> None:
    """Configure structlog and the stdlib root logger from ``config``.

    ``config.json_logs`` selects the JSON renderer; otherwise logs go through
    the console renderer. ``config.log_level`` sets the root logger level.
    """

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: Any
    if config.json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=shared_processors + [renderer],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level = config.log_level.upper()
    root = logging.getLogger()
    if not root.handlers:
        handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
        log_file = Path("logs/itemcatalog.log")
        if log_file.parent.exists():
            handlers.append(logging.FileHandler(log_file))
        logging.basicConfig(format="%(message)s", handlers=handlers)
    # basicConfig leaves the level alone once handlers exist
    root.setLevel(level)
