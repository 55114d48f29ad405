"""
Faculty Directory Extraction

Single entry point for turning a loaded directory page into faculty records.

Usage:
    from faculty_scraper.extractor import extract
    from faculty_scraper.page import SoupPage

    records = extract(SoupPage(html, url=url), method='auto')
"""

from typing import List, Optional

from loguru import logger

from faculty_scraper.context import PageContext, build_page_context
from faculty_scraper.detector import resolve_dialect
from faculty_scraper.dialects import get_extractor
from faculty_scraper.page import PageHandle
from faculty_scraper.record_processor import FacultyRecord, process_candidates

EXTRACTION_METHODS = ('auto', 'kansas', 'illinois', 'utah', 'tabular')


def extract(
    page: PageHandle,
    method: str = 'auto',
    context: Optional[PageContext] = None
) -> List[FacultyRecord]:
    """
    Extract faculty records from a loaded page.

    Args:
        page: Loaded page
        method: 'auto' to detect the layout, or a dialect name to force it
        context: Precomputed page context (built from the page when omitted)

    Returns:
        Faculty records in page order; empty when the layout did not match
    """
    if context is None:
        context = build_page_context(page)

    dialect = resolve_dialect(page, method)
    candidates = get_extractor(dialect).extract(page)
    records = process_candidates(candidates, dialect, context, page.url)

    if not records:
        logger.warning(f"No faculty data extracted from {page.url} ({dialect.value})")

    return records
