"""
Configuration settings for Faculty Directory Scraper.

Loads environment variables and provides configuration constants
with sensible defaults and validation, plus the fixed lookup tables
used by the extraction engine.
"""

import os
from pathlib import Path
from types import MappingProxyType
from dotenv import load_dotenv
from loguru import logger

# Load environment variables from .env file
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_FILE = BASE_DIR / '.env'

if ENV_FILE.exists():
    load_dotenv(ENV_FILE)
    logger.info(f"Loaded configuration from {ENV_FILE}")
else:
    logger.warning(f".env file not found at {ENV_FILE}. Using defaults.")

# =============================================================================
# Directory Paths
# =============================================================================

OUTPUT_DIR = Path(os.getenv('OUTPUT_DIR', BASE_DIR / 'output'))
LOGS_DIR = Path(os.getenv('LOGS_DIR', BASE_DIR / 'logs'))

# Create directories if they don't exist
for directory in [OUTPUT_DIR, LOGS_DIR]:
    directory.mkdir(parents=True, exist_ok=True)

# =============================================================================
# Environment helpers
# =============================================================================

def _get_int(key: str, default: int) -> int:
    """Get integer value from environment variable."""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        logger.warning(f"Invalid value for {key}, using default: {default}")
        return default

def _get_bool(key: str, default: bool) -> bool:
    """Get boolean value from environment variable."""
    value = os.getenv(key, str(default)).lower()
    return value in ('true', '1', 'yes', 'on')

def _get_list(key: str, default: str = '') -> list:
    """Get comma-separated list from environment variable."""
    value = os.getenv(key, default)
    return [item.strip() for item in value.split(',') if item.strip()]

# =============================================================================
# Browser / Fetch Configuration
# =============================================================================

HEADLESS_BROWSER = _get_bool('HEADLESS_BROWSER', True)
ENABLE_PLAYWRIGHT = _get_bool('ENABLE_PLAYWRIGHT', True)
PLAYWRIGHT_TIMEOUT = _get_int('PLAYWRIGHT_TIMEOUT', 30000)  # milliseconds
SELECTOR_TIMEOUT = _get_int('SELECTOR_TIMEOUT', 5000)  # milliseconds
REQUEST_TIMEOUT = _get_int('REQUEST_TIMEOUT', 30)  # seconds
USE_RANDOM_USER_AGENT = _get_bool('USE_RANDOM_USER_AGENT', True)

# =============================================================================
# Crawl Configuration
# =============================================================================

MAX_REQUESTS_PER_CRAWL = _get_int('MAX_REQUESTS_PER_CRAWL', 100)
EXTRACTION_METHOD = os.getenv('EXTRACTION_METHOD', 'auto').strip().lower()
START_URLS = _get_list('START_URLS')

# Login form automation (enabled only when both are set)
AUTH_USERNAME = os.getenv('AUTH_USERNAME', '').strip() or None
AUTH_PASSWORD = os.getenv('AUTH_PASSWORD', '').strip() or None
ENABLE_AUTH = AUTH_USERNAME is not None and AUTH_PASSWORD is not None

# =============================================================================
# Logging Configuration
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
LOG_MAX_SIZE = _get_int('LOG_MAX_SIZE', 10) * 1024 * 1024  # Convert MB to bytes
LOG_BACKUP_COUNT = _get_int('LOG_BACKUP_COUNT', 5)

# =============================================================================
# Extraction Lookup Tables
# =============================================================================

# Hostname fragment -> canonical institution name, checked in order
UNIVERSITY_DOMAINS = MappingProxyType({
    'kansas': 'University of Kansas',
    'illinois': 'University of Illinois',
    'utah': 'University of Utah',
    'unf': 'University of North Florida',
})

# First phrase found in the page heading wins
DEPARTMENT_PHRASES = (
    'School of Music',
    'College of Music',
    'Department of Music',
    'Music Department',
    'School of Fine Arts',
    'College of Fine Arts',
)

DEFAULT_DEPARTMENT = 'Music Department'

# Words that mark a heading as a department heading
DEPARTMENT_HINT_WORDS = ('Music', 'Arts', 'Fine Arts')

# Role keywords that identify a title line inside a person card
ROLE_KEYWORDS = ('Professor', 'Instructor', 'Director', 'Lecturer')

# A "name" containing one of these is really a title
NAME_REJECT_PHRASES = ('Professor of', 'Director of')

# =============================================================================
# Validation & Reporting
# =============================================================================

def validate_config():
    """Validate configuration and log status."""
    logger.info("=" * 70)
    logger.info("Faculty Directory Scraper - Configuration Status")
    logger.info("=" * 70)

    logger.info("Browser Settings:")
    logger.info(f"  Playwright:        {'enabled' if ENABLE_PLAYWRIGHT else 'disabled'}")
    logger.info(f"  Headless Browser:  {HEADLESS_BROWSER}")
    logger.info(f"  Page Timeout:      {PLAYWRIGHT_TIMEOUT}ms")
    logger.info(f"  Request Timeout:   {REQUEST_TIMEOUT}s")

    logger.info(f"\nCrawl Settings:")
    logger.info(f"  Max Requests:      {MAX_REQUESTS_PER_CRAWL}")
    logger.info(f"  Extraction Method: {EXTRACTION_METHOD}")
    logger.info(f"  Authentication:    {'enabled' if ENABLE_AUTH else 'disabled'}")

    logger.info(f"\nDirectories:")
    logger.info(f"  Output: {OUTPUT_DIR}")
    logger.info(f"  Logs:   {LOGS_DIR}")

    logger.info("=" * 70)

    if MAX_REQUESTS_PER_CRAWL <= 0:
        logger.warning("MAX_REQUESTS_PER_CRAWL is not positive. No pages will be crawled.")

    return True

# =============================================================================
# Export configuration
# =============================================================================

__all__ = [
    'BASE_DIR',
    'OUTPUT_DIR',
    'LOGS_DIR',
    'HEADLESS_BROWSER',
    'ENABLE_PLAYWRIGHT',
    'PLAYWRIGHT_TIMEOUT',
    'SELECTOR_TIMEOUT',
    'REQUEST_TIMEOUT',
    'USE_RANDOM_USER_AGENT',
    'MAX_REQUESTS_PER_CRAWL',
    'EXTRACTION_METHOD',
    'START_URLS',
    'AUTH_USERNAME',
    'AUTH_PASSWORD',
    'ENABLE_AUTH',
    'LOG_LEVEL',
    'LOG_MAX_SIZE',
    'LOG_BACKUP_COUNT',
    'UNIVERSITY_DOMAINS',
    'DEPARTMENT_PHRASES',
    'DEFAULT_DEPARTMENT',
    'DEPARTMENT_HINT_WORDS',
    'ROLE_KEYWORDS',
    'NAME_REJECT_PHRASES',
    'validate_config',
]
