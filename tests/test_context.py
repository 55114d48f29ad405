"""
Unit tests for university/department identification and page context.
"""

import pytest

from faculty_scraper.context import (
    PageContext,
    build_page_context,
    derive_department_name,
    derive_university_name,
    find_department_text,
    find_university_text,
)
from faculty_scraper.page import SoupPage


class TestDeriveUniversityName:
    """Tests for institution naming."""

    @pytest.mark.parametrize("url,expected", [
        ("https://music.illinois.edu/faculty", "University of Illinois"),
        ("https://www.kansas.edu/music", "University of Kansas"),
        ("https://music.utah.edu/people/index.php", "University of Utah"),
        ("https://www.unf.edu/coas/music/", "University of North Florida"),
    ])
    def test_known_domains(self, url, expected):
        assert derive_university_name(url, "Some Other University") == expected

    def test_name_from_text_stops_at_pipe(self):
        text = "Boston University School of Music | Faculty"
        assert derive_university_name("https://www.bu.edu/cfa/music", text) == "Boston University School of Music"

    def test_hostname_fallback(self):
        assert derive_university_name("https://www.music.example.edu/people", "Faculty Directory") == "music.example"

    def test_custom_lookup(self):
        domains = {'ku.edu': 'University of Kansas'}
        assert derive_university_name("https://music.ku.edu/", "", domains=domains) == "University of Kansas"


class TestDeriveDepartmentName:
    """Tests for department naming."""

    def test_first_phrase_found(self):
        assert derive_department_name("Welcome to the School of Music") == "School of Music"

    def test_phrase_order(self):
        assert derive_department_name("Department of Music, College of Fine Arts") == "Department of Music"

    def test_fine_arts(self):
        assert derive_department_name("College of Fine Arts faculty") == "College of Fine Arts"

    @pytest.mark.parametrize("text", ["", "Department of History", None])
    def test_default(self, text):
        assert derive_department_name(text) == "Music Department"


PAGE_HTML = """
<html>
<head><title>Example University | School of Music | Faculty</title></head>
<body>
  <h1>School of Music Faculty</h1>
  <h2>Strings</h2>
  <a href="/people/jane-smith">Jane Smith</a>
</body>
</html>
"""


class TestPageContext:
    """Tests for building the per-page context."""

    def test_candidate_text(self):
        page = SoupPage(PAGE_HTML, url="https://music.example.edu/people")
        assert find_university_text(page) == "Example University | School of Music | Faculty"
        assert find_department_text(page) == "School of Music Faculty"

    def test_university_text_falls_back_to_title(self):
        page = SoupPage("<html><head><title>Faculty</title></head><body><h1>Staff</h1></body></html>")
        assert find_university_text(page) == "Faculty"
        assert find_department_text(page) == ""

    def test_build_page_context(self):
        page = SoupPage(PAGE_HTML, url="https://music.example.edu/people")
        context = build_page_context(page)

        assert isinstance(context, PageContext)
        assert context.university_name == "Example University"
        assert context.department_name == "School of Music"
        assert len(context.profile_links) == 1
        assert context.profile_links[0].href == "https://music.example.edu/people/jane-smith"

    def test_context_is_immutable(self):
        context = PageContext("Example University", "School of Music")
        with pytest.raises(AttributeError):
            context.university_name = "Other"
