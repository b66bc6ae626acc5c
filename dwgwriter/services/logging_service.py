"""
Structured logging setup for dwgwriter.
"""

import logging
import sys
from typing import Optional

import structlog


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structlog to emit JSON lines through the stdlib logger."""
    if level is None:
        from ..config import settings
        level = settings.log_level

    logging.basicConfig(
        level=getattr(logging, (level or "INFO").upper(), logging.INFO),
        format="%(message)s",
        stream=sys.stderr,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(ensure_ascii=False)
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(**context) -> structlog.BoundLogger:
    """Get a logger bound with specific context."""
    return structlog.get_logger().bind(**context)
