"""
Dialect Detection

Picks the layout dialect for a page from structural fingerprints. Checks run
in a fixed priority order and the first hit wins; tabular is the fallback
and always applies.
"""

from typing import Optional, Tuple

from loguru import logger

from faculty_scraper.dialects import Dialect
from faculty_scraper.page import PageHandle

# (dialect, fingerprint selector) in priority order
DIALECT_FINGERPRINTS: Tuple[Tuple[Dialect, str], ...] = (
    (Dialect.KANSAS, '.views-row'),
    (Dialect.ILLINOIS, 'div[class*="person"], .person-card, .faculty-card'),
    (Dialect.UTAH, 'a[href*=".php"], table tr'),
)


def detect_dialect(page: PageHandle) -> Dialect:
    """
    Detect which directory layout a page uses.

    Args:
        page: Loaded page

    Returns:
        The first dialect whose fingerprint is present, else TABULAR
    """
    logger.info("Auto-detecting extraction method...")

    for dialect, selector in DIALECT_FINGERPRINTS:
        if page.query(selector) is not None:
            logger.info(f"Detected {dialect.value.capitalize()}-style structure")
            return dialect

    logger.info("Using tabular extraction as fallback")
    return Dialect.TABULAR


def resolve_dialect(page: PageHandle, method: Optional[str] = 'auto') -> Dialect:
    """
    Honour an explicit dialect override, detecting when there is none.

    Args:
        page: Loaded page
        method: 'auto' or a dialect name; unknown names fall back to detection

    Returns:
        Dialect to extract with
    """
    dialect = Dialect.parse(method)
    if dialect is not None:
        logger.info(f"Using requested {dialect.value} extraction")
        return dialect

    if method and str(method).strip().lower() != 'auto':
        logger.warning(f"Unknown extraction method '{method}', falling back to auto-detection")

    return detect_dialect(page)
