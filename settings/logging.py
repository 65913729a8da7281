"""Logging configuration."""

import sys
from pathlib import Path

from loguru import logger

from congress_client.paths import redact_uri
from settings import LOG_DIR


def _redact(record):
    # Messages may carry full request URIs
    record["message"] = redact_uri(record["message"])


def setup_logging(level: str = "INFO", to_file: bool = True, log_dir: Path | None = None):
    """Configure console and optional file output; api keys never reach a sink."""
    logger.remove()
    logger.configure(patcher=_redact)

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if to_file:
        log_dir = log_dir or LOG_DIR
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "congress_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
        )
        logger.info("Logging to {}", log_dir)

    return logger
