"""
Tests for the command-line runner helpers.
"""

import json

import pytest

import main
from faculty_scraper.page import SoupPage
from main import collect_start_urls, parse_args


class TestCollectStartUrls:
    """Tests for start URL handling."""

    def test_normalized_and_deduplicated(self):
        urls = collect_start_urls(
            ['music.ku.edu/people/', 'https://music.ku.edu/people', 'https://music.utah.edu/faculty'],
            None,
            10,
        )
        assert urls == ['https://music.ku.edu/people', 'https://music.utah.edu/faculty']

    def test_limit(self):
        urls = collect_start_urls(['a.edu', 'b.edu', 'c.edu'], None, 2)
        assert urls == ['https://a.edu', 'https://b.edu']

    def test_urls_file(self, tmp_path):
        urls_file = tmp_path / 'urls.txt'
        urls_file.write_text("# music schools\nhttps://music.ku.edu/people\n\nmusic.illinois.edu/faculty\n")

        urls = collect_start_urls([], urls_file, 10)

        assert urls == ['https://music.ku.edu/people', 'https://music.illinois.edu/faculty']


def test_parse_args():
    """Test argument parsing."""
    args = parse_args(['https://music.ku.edu/people', '--method', 'kansas', '--static', '--max-requests', '5'])

    assert args.urls == ['https://music.ku.edu/people']
    assert args.method == 'kansas'
    assert args.static is True
    assert args.max_requests == 5


class TestResumeBookkeeping:
    """A run only finalizes when every one of its own pages completed."""

    @pytest.fixture
    def quiet_main(self, monkeypatch):
        monkeypatch.setattr(main, 'setup_logger', lambda name: None)
        monkeypatch.setattr(main, 'validate_config', lambda: True)

    @staticmethod
    def fake_fetch(failing):
        def fetch(url):
            if url in failing:
                return None
            return SoupPage('<html><body><p>No listing</p></body></html>', url=url)
        return fetch

    def test_failed_page_keeps_resume_state_despite_stale_entries(self, tmp_path, monkeypatch, quiet_main):
        output = tmp_path / 'records.csv'
        resume_file = tmp_path / 'resume_state.json'
        resume_file.write_text(json.dumps({'pages_completed': ['https://old.edu'], 'records_written': 0}))
        monkeypatch.setattr(main, 'fetch_page_static', self.fake_fetch({'https://d.edu'}))

        main.main(['https://c.edu', 'https://d.edu', '--static', '-o', str(output)])

        assert resume_file.exists()
        state = json.loads(resume_file.read_text())
        assert 'https://c.edu' in state['pages_completed']
        assert 'https://d.edu' not in state['pages_completed']

    def test_all_pages_completed_removes_resume_state(self, tmp_path, monkeypatch, quiet_main):
        output = tmp_path / 'records.csv'
        resume_file = tmp_path / 'resume_state.json'
        monkeypatch.setattr(main, 'fetch_page_static', self.fake_fetch(set()))

        main.main(['https://c.edu', 'https://d.edu', '--static', '-o', str(output)])

        assert not resume_file.exists()
