"""
Page Context Extraction

Identifies the institution and department a directory page belongs to and
bundles them with the page's profile link inventory into a PageContext that
lives exactly as long as one page's extraction.
"""

import re
from dataclasses import dataclass
from typing import Mapping, Sequence, Tuple

from loguru import logger

from config.settings import (
    UNIVERSITY_DOMAINS,
    DEPARTMENT_PHRASES,
    DEFAULT_DEPARTMENT,
    DEPARTMENT_HINT_WORDS,
)
from faculty_scraper.page import PageHandle
from faculty_scraper.profile_links import ProfileLinkEntry, collect_profile_links
from faculty_scraper.utils import extract_hostname

# Where an institution name is usually printed, most reliable first
UNIVERSITY_SELECTORS = (
    'title',
    '.university-name, .institution-name',
    'h1',
    '.site-title, .site-name',
)

# Where a department heading is usually printed
DEPARTMENT_SELECTORS = (
    '.department-name, .school-name',
    'h1, h2',
    '.page-title, .section-title',
)

UNIVERSITY_TEXT_PATTERN = re.compile(r'(.*?University[^|]*)')


@dataclass(frozen=True)
class PageContext:
    """Per-page facts shared by every record extracted from that page."""
    university_name: str
    department_name: str
    profile_links: Tuple[ProfileLinkEntry, ...] = ()


def derive_university_name(
    url: str,
    candidate_text: str = '',
    domains: Mapping[str, str] = UNIVERSITY_DOMAINS
) -> str:
    """
    Work out the institution name for a page.

    Args:
        url: Page URL
        candidate_text: Page text likely to contain the name (title, heading)
        domains: Hostname fragment -> canonical name lookup

    Returns:
        Canonical name, a name cut from the text, or the bare hostname
    """
    hostname = extract_hostname(url)

    for fragment, canonical in domains.items():
        if fragment in hostname:
            return canonical

    if candidate_text and 'University' in candidate_text:
        match = UNIVERSITY_TEXT_PATTERN.search(candidate_text)
        if match:
            return match.group(1).strip()

    return re.sub(r'\.edu$', '', re.sub(r'^www\.', '', hostname))


def derive_department_name(
    candidate_text: str = '',
    phrases: Sequence[str] = DEPARTMENT_PHRASES,
    default: str = DEFAULT_DEPARTMENT
) -> str:
    """Return the first known department phrase found in the text."""
    for phrase in phrases:
        if phrase in (candidate_text or ''):
            return phrase

    return default


def find_university_text(page: PageHandle) -> str:
    """First heading-like text mentioning 'University', else the document title."""
    for selector in UNIVERSITY_SELECTORS:
        element = page.query(selector)
        if element is not None and 'University' in element.text:
            return element.text

    return page.title


def find_department_text(page: PageHandle, hint_words: Sequence[str] = DEPARTMENT_HINT_WORDS) -> str:
    """First heading-like text mentioning one of the department hint words."""
    for selector in DEPARTMENT_SELECTORS:
        element = page.query(selector)
        if element is not None and any(word in element.text for word in hint_words):
            return element.text

    return ''


def build_page_context(page: PageHandle) -> PageContext:
    """
    Gather everything record reconciliation needs to know about a page.

    Args:
        page: Loaded page

    Returns:
        Immutable PageContext for this page
    """
    context = PageContext(
        university_name=derive_university_name(page.url, find_university_text(page)),
        department_name=derive_department_name(find_department_text(page)),
        profile_links=tuple(collect_profile_links(page)),
    )

    logger.info(f"Initialized for {context.university_name} - {context.department_name}")
    logger.info(f"Found {len(context.profile_links)} profile links")

    return context
