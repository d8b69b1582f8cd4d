from datetime import datetime
from typing import Callable
import argparse
import logging

from sqlalchemy.orm import Session

from ..core.config import settings
from ..core.database import session_scope

logger = logging.getLogger(__name__)

def parse_datetime(value: str) -> datetime:
    """argparse type for ISO-8601 timestamps, accepting a trailing Z."""
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid ISO-8601 timestamp: {value}")

def run(operation: Callable[[Session], None]) -> int:
    """
    Run one script operation against a fresh database session.

    The session is released on every path. Any failure is logged and turned
    into exit status 1.
    """
    logging.basicConfig(level=settings.LOG_LEVEL)

    try:
        with session_scope() as db:
            operation(db)
    except Exception as exc:
        logger.error(f"{type(exc).__name__}: {exc}", exc_info=settings.DEBUG)
        return 1

    return 0
