"""
Tests for the page loading boundary, using mocks instead of a browser or network.
"""

from unittest.mock import MagicMock

import pytest
import requests
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from faculty_scraper import fetcher
from faculty_scraper.fetcher import (
    PageLoadError,
    fetch_page_static,
    handle_authentication,
    load_page,
)
from faculty_scraper.page import PlaywrightPage, SoupPage


@pytest.fixture(autouse=True)
def fixed_user_agent(monkeypatch):
    monkeypatch.setattr(fetcher, 'get_user_agent', lambda: 'test-agent')


class TestFetchPageStatic:
    """Tests for requests-based fetching."""

    def test_success(self, monkeypatch):
        response = MagicMock()
        response.content = b"<html><head><title>Faculty</title></head><body></body></html>"
        response.url = "https://music.ku.edu/people"
        monkeypatch.setattr(fetcher.requests, 'get', lambda *args, **kwargs: response)

        page = fetch_page_static("https://music.ku.edu/people")

        assert isinstance(page, SoupPage)
        assert page.url == "https://music.ku.edu/people"
        assert page.title == "Faculty"

    def test_failure_returns_none(self, monkeypatch):
        def boom(*args, **kwargs):
            raise requests.ConnectionError("refused")
        monkeypatch.setattr(fetcher.requests, 'get', boom)

        assert fetch_page_static("https://music.ku.edu/people") is None

    def test_failure_raises_when_asked(self, monkeypatch):
        def boom(*args, **kwargs):
            raise requests.Timeout("slow")
        monkeypatch.setattr(fetcher.requests, 'get', boom)

        with pytest.raises(PageLoadError) as excinfo:
            fetch_page_static("https://music.ku.edu/people", raise_on_error=True)
        assert excinfo.value.url == "https://music.ku.edu/people"


class TestLoadPage:
    """Tests for Playwright navigation."""

    def test_success(self):
        page = MagicMock()
        loaded = load_page(page, "https://music.ku.edu/people", timeout=1000)

        assert isinstance(loaded, PlaywrightPage)
        page.goto.assert_called_once_with(
            "https://music.ku.edu/people", wait_until='domcontentloaded', timeout=1000
        )
        page.wait_for_load_state.assert_called_once_with('networkidle', timeout=1000)

    def test_timeout_returns_none(self):
        page = MagicMock()
        page.goto.side_effect = PlaywrightTimeoutError("Timeout 1000ms exceeded")

        assert load_page(page, "https://music.ku.edu/people", timeout=1000) is None

    def test_timeout_raises_when_asked(self):
        page = MagicMock()
        page.goto.side_effect = PlaywrightTimeoutError("Timeout 1000ms exceeded")

        with pytest.raises(PageLoadError):
            load_page(page, "https://music.ku.edu/people", timeout=1000, raise_on_error=True)


class TestHandleAuthentication:
    """Tests for the login form helper."""

    def test_form_filled_and_submitted(self):
        page = MagicMock()
        username_field, password_field, submit_button = MagicMock(), MagicMock(), MagicMock()
        page.query_selector.side_effect = [username_field, password_field, submit_button]

        assert handle_authentication(page, "jdoe", "secret", timeout=1000) is True
        username_field.fill.assert_called_once_with("jdoe")
        password_field.fill.assert_called_once_with("secret")
        submit_button.click.assert_called_once()

    def test_missing_form(self):
        page = MagicMock()
        page.query_selector.side_effect = [None, MagicMock(), MagicMock()]

        assert handle_authentication(page, "jdoe", "secret") is False
        page.wait_for_load_state.assert_not_called()
