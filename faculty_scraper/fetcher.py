"""
Page Loading

Boundary layer that gets a directory page into a queryable state, either
through a headless Playwright browser (JavaScript-rendered listings) or a
plain requests fetch parsed with BeautifulSoup. Also carries the login-form
helper for directories behind a sign-in page.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

import requests
from bs4 import BeautifulSoup
from fake_useragent import UserAgent
from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, sync_playwright
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from config.settings import (
    HEADLESS_BROWSER,
    PLAYWRIGHT_TIMEOUT,
    REQUEST_TIMEOUT,
    USE_RANDOM_USER_AGENT,
)
from faculty_scraper.page import PlaywrightPage, SoupPage

DEFAULT_USER_AGENT = 'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36'

LOGIN_USERNAME_SELECTOR = (
    'input[type="text"][name*="user"], input[type="email"][name*="user"], '
    'input[name="username"], input[name="email"]'
)
LOGIN_PASSWORD_SELECTOR = 'input[type="password"]'
LOGIN_SUBMIT_SELECTOR = 'button[type="submit"], input[type="submit"], .login-button'

_user_agent = None


class ScraperError(Exception):
    """Base class for scraper errors."""


class PageLoadError(ScraperError):
    """A page could not be fetched or did not settle in time."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed to load {url}: {reason}")
        self.url = url
        self.reason = reason


def get_user_agent() -> str:
    """Get user agent string."""
    global _user_agent

    if not USE_RANDOM_USER_AGENT:
        return DEFAULT_USER_AGENT

    if _user_agent is None:
        _user_agent = UserAgent()
    return _user_agent.random


# =============================================================================
# Static fetch
# =============================================================================

def fetch_page_static(url: str, raise_on_error: bool = False) -> Optional[SoupPage]:
    """
    Fetch a web page using requests (static HTML only).

    Args:
        url: URL to fetch
        raise_on_error: Raise PageLoadError instead of returning None

    Returns:
        SoupPage or None if failed
    """
    headers = {
        'User-Agent': get_user_agent(),
        'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
        'Accept-Language': 'en-US,en;q=0.5',
    }

    try:
        logger.info(f"Fetching (static): {url}")
        response = requests.get(url, headers=headers, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Failed to fetch {url}: {e}")
        if raise_on_error:
            raise PageLoadError(url, str(e)) from e
        return None

    soup = BeautifulSoup(response.content, 'html.parser')
    logger.success(f"Successfully fetched (static): {url}")
    return SoupPage(soup, url=response.url)


# =============================================================================
# Playwright fetch
# =============================================================================

@contextmanager
def open_browser(headless: bool = HEADLESS_BROWSER) -> Iterator[Page]:
    """
    Launch Chromium and yield a fresh page; everything is closed on exit.

    Usage:
        with open_browser() as page:
            loaded = load_page(page, url)
    """
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=headless)
        try:
            context = browser.new_context(
                user_agent=get_user_agent(),
                viewport={'width': 1920, 'height': 1080}
            )
            yield context.new_page()
        finally:
            browser.close()


def load_page(
    page: Page,
    url: str,
    timeout: int = PLAYWRIGHT_TIMEOUT,
    raise_on_error: bool = False
) -> Optional[PlaywrightPage]:
    """
    Navigate to a URL and wait for the network to go idle.

    Args:
        page: Playwright page to navigate
        url: URL to load
        timeout: Navigation timeout in milliseconds
        raise_on_error: Raise PageLoadError instead of returning None

    Returns:
        PlaywrightPage ready for querying, or None if loading failed
    """
    try:
        logger.info(f"Fetching with Playwright: {url} (timeout: {timeout}ms)")
        page.goto(url, wait_until='domcontentloaded', timeout=timeout)
        page.wait_for_load_state('networkidle', timeout=timeout)
    except PlaywrightTimeoutError as e:
        logger.error(f"Playwright timeout for {url}: {e}")
        if raise_on_error:
            raise PageLoadError(url, 'timeout') from e
        return None
    except PlaywrightError as e:
        logger.error(f"Playwright error for {url}: {e}")
        if raise_on_error:
            raise PageLoadError(url, str(e)) from e
        return None

    logger.success(f"Successfully fetched with Playwright: {url}")
    return PlaywrightPage(page)


def handle_authentication(page: Page, username: str, password: str, timeout: int = PLAYWRIGHT_TIMEOUT) -> bool:
    """
    Fill and submit a login form if the page has one.

    Args:
        page: Playwright page showing the login form
        username: Account name
        password: Account password
        timeout: Wait for the post-login page, in milliseconds

    Returns:
        True if a form was submitted, False if none was found
    """
    logger.info("Handling authentication...")

    username_field = page.query_selector(LOGIN_USERNAME_SELECTOR)
    password_field = page.query_selector(LOGIN_PASSWORD_SELECTOR)
    submit_button = page.query_selector(LOGIN_SUBMIT_SELECTOR)

    if not (username_field and password_field and submit_button):
        logger.warning("Login form not found")
        return False

    username_field.fill(username)
    password_field.fill(password)
    submit_button.click()

    page.wait_for_load_state('networkidle', timeout=timeout)
    logger.info("Authentication completed")
    return True
