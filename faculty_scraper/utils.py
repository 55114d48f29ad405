"""
Utility functions for Faculty Directory Scraper.

Provides logging setup, URL helpers and text normalization.
"""

import sys
from datetime import datetime
from typing import Optional
from urllib.parse import urlparse

from loguru import logger

from config.settings import (
    LOGS_DIR,
    LOG_LEVEL,
    LOG_MAX_SIZE,
    LOG_BACKUP_COUNT,
)


# =============================================================================
# Logging Setup
# =============================================================================

def setup_logger(name: str = "scraper", log_file: Optional[str] = None) -> logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name
        log_file: Optional custom log file name (default: scraper_YYYYMMDD.log)

    Returns:
        Configured logger instance
    """
    # Remove default logger
    logger.remove()

    # Only colorize for interactive terminals
    is_tty = sys.stdout.isatty()

    logger.add(
        sink=lambda msg: print(msg, end=''),
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=LOG_LEVEL,
        colorize=is_tty,
    )

    # File handler with rotation
    if log_file is None:
        log_file = f"scraper_{datetime.now().strftime('%Y%m%d')}.log"

    log_path = LOGS_DIR / log_file

    logger.add(
        sink=log_path,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
        level=LOG_LEVEL,
        rotation=LOG_MAX_SIZE,
        retention=LOG_BACKUP_COUNT,
        compression="zip",
    )

    logger.info(f"Logger initialized: {name}")
    logger.info(f"Log file: {log_path}")
    logger.info(f"Log level: {LOG_LEVEL}")

    return logger


# =============================================================================
# URL Utilities
# =============================================================================

def validate_url(url: str) -> bool:
    """
    Validate that a URL is well-formed.

    Args:
        url: URL to validate

    Returns:
        True if valid, False otherwise
    """
    try:
        result = urlparse(url)
        return all([result.scheme, result.netloc])
    except Exception:
        return False


def normalize_url(url: str) -> str:
    """
    Normalize URL by ensuring scheme and removing trailing slashes.

    Args:
        url: URL to normalize

    Returns:
        Normalized URL
    """
    url = url.strip()

    if not url.startswith(('http://', 'https://')):
        url = 'https://' + url

    return url.rstrip('/')


def extract_hostname(url: str) -> str:
    """
    Extract the lower-cased hostname from a URL.

    Args:
        url: URL to extract hostname from

    Returns:
        Hostname (e.g., 'music.ku.edu'), '' if the URL has none
    """
    if not url:
        return ''
    parsed = urlparse(url if '://' in url else normalize_url(url))
    return (parsed.hostname or '').lower()


# =============================================================================
# Text Processing
# =============================================================================

def clean_text(text: str) -> str:
    """
    Clean and normalize text.

    Args:
        text: Text to clean

    Returns:
        Cleaned text
    """
    if not text:
        return ''

    text = text.replace('\xa0', ' ')
    text = text.replace('\u200b', '')  # Zero-width space

    return ' '.join(text.split())


__all__ = [
    'setup_logger',
    'validate_url',
    'normalize_url',
    'extract_hostname',
    'clean_text',
]
