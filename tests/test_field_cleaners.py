"""
Unit tests for field cleaning functions.
"""

import pytest

from faculty_scraper.field_cleaners import clean_name, clean_title, clean_email, clean_phone


class TestCleanName:
    """Tests for name cleaning."""

    def test_honorific_and_suffix_removed(self):
        assert clean_name("Dr. Jane A. Smith, Jr.") == "Jane A. Smith"

    @pytest.mark.parametrize("raw,expected", [
        ("Professor John Doe", "John Doe"),
        ("prof. Alan Turing", "Alan Turing"),
        ("Mrs. Ann Lee", "Ann Lee"),
        ("Mr. Tom Hardy", "Tom Hardy"),
        ("MS. Eve Stone", "Eve Stone"),
    ])
    def test_honorifics_case_insensitive(self, raw, expected):
        assert clean_name(raw) == expected

    @pytest.mark.parametrize("raw", ["Robert Brown, III", "Robert Brown, II.", "Robert Brown, Sr"])
    def test_generational_suffixes(self, raw):
        assert clean_name(raw) == "Robert Brown"

    def test_whitespace_collapsed(self):
        assert clean_name("  Mary \n  Ellen\t Jones ") == "Mary Ellen Jones"

    def test_empty(self):
        assert clean_name("") == ""
        assert clean_name(None) == ""


class TestCleanTitle:
    """Tests for title cleaning."""

    def test_leading_dash_removed(self):
        assert clean_title("- Associate Professor") == "Associate Professor"

    def test_leading_bullet_removed(self):
        assert clean_title("  •  Lecturer   in\n Voice ") == "Lecturer in Voice"

    def test_inner_dash_kept(self):
        assert clean_title("Artist-in-Residence") == "Artist-in-Residence"

    def test_empty(self):
        assert clean_title("") == ""


class TestCleanEmail:
    """Tests for email cleaning."""

    def test_lowercased_and_trimmed(self):
        assert clean_email("  JSmith@EXAMPLE.EDU ") == "jsmith@example.edu"

    def test_without_at_sign(self):
        assert clean_email("not-an-email") == ""

    def test_empty(self):
        assert clean_email("") == ""
        assert clean_email(None) == ""


class TestCleanPhone:
    """Tests for phone cleaning."""

    @pytest.mark.parametrize("raw,expected", [
        ("Phone: (785) 864-3436", "(785) 864-3436"),
        ("tel: +1 785.864.3436", "+1 785.864.3436"),
        ("Office:785-864-1234", "785-864-1234"),
    ])
    def test_label_and_junk_removed(self, raw, expected):
        assert clean_phone(raw) == expected

    def test_empty(self):
        assert clean_phone("") == ""
