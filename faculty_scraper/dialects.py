"""
Directory Layout Dialects

University department sites publish faculty listings in a handful of
recurring HTML conventions. Each convention ("dialect") gets its own
extractor that knows where that layout keeps names, titles, emails and
phones, and turns the page into raw, uncleaned candidates.

Dialects:
- kansas: Drupal Views rows (.views-row) with per-field wrappers
- illinois: person/faculty cards located by class name
- utah: generic rows whose name links to a profile page
- tabular: plain tables, one person per row (fallback)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence

from loguru import logger

from config.settings import ROLE_KEYWORDS, NAME_REJECT_PHRASES, SELECTOR_TIMEOUT
from faculty_scraper.page import Element, PageHandle

MAILTO_SELECTOR = 'a[href^="mailto:"]'


class Dialect(str, Enum):
    """Known directory layout conventions."""
    KANSAS = 'kansas'
    ILLINOIS = 'illinois'
    UTAH = 'utah'
    TABULAR = 'tabular'

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional['Dialect']:
        """Map a method name to a Dialect; None for 'auto' or anything unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls((value or '').strip().lower())
        except ValueError:
            return None


@dataclass
class RawCandidate:
    """One listed person exactly as found in the DOM. Any field may be ''."""
    name: str = ''
    title: str = ''
    email: str = ''
    phone: str = ''
    profile_link: str = ''


def _text(element: Optional[Element]) -> str:
    return element.text if element is not None else ''


def _href(element: Optional[Element]) -> str:
    return element.href if element is not None else ''


def _mailto(container: Element) -> str:
    """Address of the first mailto: link inside a container."""
    return _href(container.query(MAILTO_SELECTOR)).replace('mailto:', '', 1)


class DialectExtractor:
    """
    Base class for layout-specific extractors.

    Subclasses set `dialect` and implement `extract_row`; `extract` runs it
    over every container matched by `ROW_SELECTOR` and keeps named rows.
    """

    dialect: Dialect
    ROW_SELECTOR: str = ''

    def extract(self, page: PageHandle) -> List[RawCandidate]:
        """
        Pull raw candidates from a page.

        Args:
            page: Loaded page

        Returns:
            Candidates with a non-empty name, in document order
        """
        logger.info(f"Attempting {self.dialect.value.capitalize()}-style extraction...")

        candidates = []
        for row in page.query_all(self.ROW_SELECTOR):
            candidate = self.extract_row(row)
            if candidate is not None and self.accept(candidate):
                candidates.append(candidate)

        logger.debug(f"{self.dialect.value}: {len(candidates)} raw candidates")
        return candidates

    def extract_row(self, row: Element) -> Optional[RawCandidate]:
        raise NotImplementedError

    def accept(self, candidate: RawCandidate) -> bool:
        return bool(candidate.name)


class KansasExtractor(DialectExtractor):
    """Drupal Views listing: one .views-row per person."""

    dialect = Dialect.KANSAS
    ROW_SELECTOR = '.views-row'
    NAME_SELECTOR = '.views-field-title a, .views-field-field-person-name a, h3 a, h2 a'
    TITLE_SELECTOR = '.views-field-field-person-title, .field-person-title, .person-title'
    PHONE_SELECTOR = '.views-field-field-person-phone, .field-person-phone'

    def extract_row(self, row: Element) -> RawCandidate:
        name_element = row.query(self.NAME_SELECTOR)

        return RawCandidate(
            name=_text(name_element),
            title=_text(row.query(self.TITLE_SELECTOR)),
            email=_mailto(row),
            phone=_text(row.query(self.PHONE_SELECTOR)),
            profile_link=_href(name_element),
        )


class IllinoisExtractor(DialectExtractor):
    """Card grid: each person in a div whose class mentions person/faculty/staff."""

    dialect = Dialect.ILLINOIS
    ROW_SELECTOR = 'div[class*="person"], .person-card, .faculty-card, .staff-card'

    NAME_SELECTORS = (
        'h1, h2, h3, h4',
        '.name, .person-name, .faculty-name',
        'a[href*="/people/"], a[href*="/faculty/"]',
        '.title-link, .person-link',
    )
    TITLE_SELECTORS = (
        '.person-title, .faculty-title, .job-title',
        '.position, .role',
        'p, div, span',
    )
    PHONE_SELECTOR = '.phone, .tel, a[href^="tel:"]'
    PROFILE_SELECTOR = 'a[href*="/people/"], a[href*="/faculty/"]'

    def __init__(
        self,
        role_keywords: Sequence[str] = ROLE_KEYWORDS,
        reject_phrases: Sequence[str] = NAME_REJECT_PHRASES,
        wait_timeout: int = SELECTOR_TIMEOUT
    ):
        self.role_keywords = tuple(role_keywords)
        self.reject_phrases = tuple(reject_phrases)
        self.wait_timeout = wait_timeout

    def extract(self, page: PageHandle) -> List[RawCandidate]:
        # Cards are often rendered client-side
        page.wait_for(self.ROW_SELECTOR, self.wait_timeout)
        return super().extract(page)

    def extract_row(self, card: Element) -> RawCandidate:
        name_element = self._find_name_element(card)
        title_element = self._find_title_element(card)

        phone_element = card.query(self.PHONE_SELECTOR)
        phone = _text(phone_element) or _href(phone_element).replace('tel:', '', 1)

        profile_link = _href(name_element) or _href(card.query(self.PROFILE_SELECTOR))

        return RawCandidate(
            name=_text(name_element),
            title=_text(title_element),
            email=_mailto(card),
            phone=phone,
            profile_link=profile_link,
        )

    def accept(self, candidate: RawCandidate) -> bool:
        # Overlapping selectors can grab a title line as the name
        return bool(candidate.name) and not any(
            phrase in candidate.name for phrase in self.reject_phrases
        )

    def _find_name_element(self, card: Element) -> Optional[Element]:
        for selector in self.NAME_SELECTORS:
            element = card.query(selector)
            if element is not None and element.text:
                return element
        return None

    def _find_title_element(self, card: Element) -> Optional[Element]:
        for selector in self.TITLE_SELECTORS:
            for element in card.query_all(selector):
                text = element.text
                if text and any(keyword in text for keyword in self.role_keywords):
                    return element
        return None


class UtahExtractor(DialectExtractor):
    """Rows whose name is a link to a profile page; cells hold title and phone."""

    dialect = Dialect.UTAH
    ROW_SELECTOR = 'tr, .faculty-row, .person-row'
    NAME_SELECTOR = (
        'a[href*=".php"], a[href*="/people/"], a[href*="/faculty/"], '
        'td:first-child a, .name a'
    )
    CELL_SELECTOR = 'td, .cell, .field'

    def extract_row(self, row: Element) -> RawCandidate:
        name_element = row.query(self.NAME_SELECTOR)
        cells = row.query_all(self.CELL_SELECTOR)

        candidate = RawCandidate(name=_text(name_element), profile_link=_href(name_element))

        if len(cells) > 1:
            candidate.title = cells[1].text
            candidate.email = _mailto(row)
            candidate.phone = cells[2].text if len(cells) > 2 else ''

        return candidate


class TabularExtractor(DialectExtractor):
    """Plain table: name | title | phone, email anywhere in the row."""

    dialect = Dialect.TABULAR
    ROW_SELECTOR = 'table tr, .table-row'
    CELL_SELECTOR = 'td, .cell'

    def extract_row(self, row: Element) -> Optional[RawCandidate]:
        cells = row.query_all(self.CELL_SELECTOR)
        if len(cells) < 2:
            return None

        name_cell = cells[0]
        name_element = name_cell.query('a') or name_cell

        return RawCandidate(
            name=name_element.text,
            title=cells[1].text,
            email=_mailto(row),
            phone=cells[2].text if len(cells) > 2 else '',
            profile_link=name_element.href,
        )


EXTRACTORS: Dict[Dialect, DialectExtractor] = {
    Dialect.KANSAS: KansasExtractor(),
    Dialect.ILLINOIS: IllinoisExtractor(),
    Dialect.UTAH: UtahExtractor(),
    Dialect.TABULAR: TabularExtractor(),
}


def get_extractor(dialect: Dialect) -> DialectExtractor:
    """Return the extractor registered for a dialect."""
    return EXTRACTORS[dialect]


__all__ = [
    'Dialect',
    'RawCandidate',
    'DialectExtractor',
    'KansasExtractor',
    'IllinoisExtractor',
    'UtahExtractor',
    'TabularExtractor',
    'EXTRACTORS',
    'get_extractor',
]
