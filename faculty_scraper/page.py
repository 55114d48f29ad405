"""
Page Query Interface

The extraction engine only ever talks to a loaded page through the small
surface defined here: CSS queries, element text/href/title accessors, the
page URL and the document title. Two implementations are provided:

- SoupPage: BeautifulSoup (soupsieve) over a static HTML document
- PlaywrightPage: a live Playwright sync Page after navigation
"""

from typing import List, Optional, Protocol, Union
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag
from loguru import logger
from playwright.sync_api import ElementHandle, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError


class Element(Protocol):
    """A DOM element as seen by the extractors."""

    @property
    def text(self) -> str: ...

    @property
    def href(self) -> str: ...

    @property
    def title(self) -> str: ...

    def query(self, selector: str) -> Optional['Element']: ...

    def query_all(self, selector: str) -> List['Element']: ...


class PageHandle(Protocol):
    """A loaded page: metadata plus CSS queries over its document."""

    @property
    def url(self) -> str: ...

    @property
    def title(self) -> str: ...

    def query(self, selector: str) -> Optional[Element]: ...

    def query_all(self, selector: str) -> List[Element]: ...

    def wait_for(self, selector: str, timeout_ms: int) -> None: ...


# =============================================================================
# BeautifulSoup implementation
# =============================================================================

class SoupElement:
    """Element backed by a BeautifulSoup Tag."""

    def __init__(self, tag: Tag, base_url: str = ''):
        self._tag = tag
        self._base_url = base_url

    @property
    def text(self) -> str:
        return self._tag.get_text().strip()

    @property
    def href(self) -> str:
        """Absolute href, mirroring the DOM `.href` property."""
        href = self._tag.get('href')
        if not href:
            return ''
        href = href.strip()
        return urljoin(self._base_url, href) if self._base_url else href

    @property
    def title(self) -> str:
        return self._tag.get('title') or ''

    def query(self, selector: str) -> Optional['SoupElement']:
        tag = self._tag.select_one(selector)
        return SoupElement(tag, self._base_url) if tag is not None else None

    def query_all(self, selector: str) -> List['SoupElement']:
        return [SoupElement(tag, self._base_url) for tag in self._tag.select(selector)]

    def __repr__(self):
        return f"SoupElement(<{self._tag.name}>, text={self.text[:30]!r})"


class SoupPage:
    """
    Page backed by a parsed HTML document.

    Usage:
        page = SoupPage(html, url='https://music.ku.edu/people')
        rows = page.query_all('.views-row')
    """

    def __init__(self, html: Union[str, BeautifulSoup], url: str = '', parser: str = 'html.parser'):
        self._soup = html if isinstance(html, BeautifulSoup) else BeautifulSoup(html, parser)
        self._url = url

    @property
    def url(self) -> str:
        return self._url

    @property
    def title(self) -> str:
        if self._soup.title is None:
            return ''
        return self._soup.title.get_text().strip()

    def query(self, selector: str) -> Optional[SoupElement]:
        tag = self._soup.select_one(selector)
        return SoupElement(tag, self._url) if tag is not None else None

    def query_all(self, selector: str) -> List[SoupElement]:
        return [SoupElement(tag, self._url) for tag in self._soup.select(selector)]

    def wait_for(self, selector: str, timeout_ms: int) -> None:
        """Static documents are already complete."""


# =============================================================================
# Playwright implementation
# =============================================================================

class PlaywrightElement:
    """Element backed by a Playwright ElementHandle."""

    def __init__(self, handle: ElementHandle):
        self._handle = handle

    @property
    def text(self) -> str:
        return (self._handle.text_content() or '').strip()

    @property
    def href(self) -> str:
        return self._handle.evaluate("el => typeof el.href === 'string' ? el.href : ''")

    @property
    def title(self) -> str:
        return self._handle.get_attribute('title') or ''

    def query(self, selector: str) -> Optional['PlaywrightElement']:
        handle = self._handle.query_selector(selector)
        return PlaywrightElement(handle) if handle is not None else None

    def query_all(self, selector: str) -> List['PlaywrightElement']:
        return [PlaywrightElement(handle) for handle in self._handle.query_selector_all(selector)]


class PlaywrightPage:
    """Page backed by a live Playwright sync Page."""

    def __init__(self, page: Page):
        self._page = page

    @property
    def url(self) -> str:
        return self._page.url

    @property
    def title(self) -> str:
        return self._page.title() or ''

    def query(self, selector: str) -> Optional[PlaywrightElement]:
        handle = self._page.query_selector(selector)
        return PlaywrightElement(handle) if handle is not None else None

    def query_all(self, selector: str) -> List[PlaywrightElement]:
        return [PlaywrightElement(handle) for handle in self._page.query_selector_all(selector)]

    def wait_for(self, selector: str, timeout_ms: int) -> None:
        """Wait for dynamic content; a timeout just means it never showed up."""
        try:
            self._page.wait_for_selector(selector, timeout=timeout_ms)
        except PlaywrightTimeoutError:
            logger.debug(f"Selector not found within {timeout_ms}ms: {selector}")


__all__ = [
    'Element',
    'PageHandle',
    'SoupElement',
    'SoupPage',
    'PlaywrightElement',
    'PlaywrightPage',
]
