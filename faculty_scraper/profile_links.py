"""
Profile Link Resolution

Collects every profile/bio-looking hyperlink on a directory page and matches
people to them when their listing row carries no link of its own.
"""

from dataclasses import dataclass
from typing import List, Sequence

from loguru import logger

from faculty_scraper.page import PageHandle

# Hyperlinks that look like an individual's profile or bio page
PROFILE_LINK_SELECTOR = (
    'a[href*="/people/"], a[href*="/faculty/"], a[href*="/staff/"], '
    'a[href*="profile"], a[href*="bio"]'
)

# Link text this short is navigation ("Bio", "More"), not a name
MIN_LINK_TEXT_LENGTH = 3


@dataclass(frozen=True)
class ProfileLinkEntry:
    """
    One profile-like hyperlink on a page.

    Attributes:
        href: Absolute link target
        text: Trimmed visible text
        title: Title attribute ('' when absent)
    """
    href: str
    text: str
    title: str = ''


def collect_profile_links(page: PageHandle) -> List[ProfileLinkEntry]:
    """
    Build the page's profile link inventory, in document order.

    Args:
        page: Loaded page

    Returns:
        Entries whose visible text is longer than 3 characters
    """
    entries = []
    for element in page.query_all(PROFILE_LINK_SELECTOR):
        text = element.text
        if len(text) > MIN_LINK_TEXT_LENGTH:
            entries.append(ProfileLinkEntry(href=element.href, text=text, title=element.title))

    return entries


def find_profile_link(name: str, profile_links: Sequence[ProfileLinkEntry]) -> str:
    """
    Find the profile link that belongs to a person.

    Strategy (first match in page order wins at each step):
    1. Link text contained in the name, or the name contained in the link text
    2. First and last name both in the URL, or "first-last" / "last-first" slugs
    3. Nothing: return '' rather than guess

    Args:
        name: Cleaned person name
        profile_links: Page profile link inventory

    Returns:
        Matching href or ''
    """
    if not name or not profile_links:
        return ''

    name_lower = name.lower()

    for link in profile_links:
        text_lower = link.text.lower()
        if text_lower and (text_lower in name_lower or name_lower in text_lower):
            logger.debug(f"Profile link for {name} matched on text: {link.href}")
            return link.href

    name_parts = name_lower.split()
    if not name_parts:
        return ''

    first_name, last_name = name_parts[0], name_parts[-1]

    for link in profile_links:
        url = link.href.lower()
        if ((first_name in url and last_name in url)
                or f"{first_name}-{last_name}" in url
                or f"{last_name}-{first_name}" in url):
            logger.debug(f"Profile link for {name} matched on URL: {link.href}")
            return link.href

    return ''
