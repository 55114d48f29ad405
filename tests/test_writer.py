"""
Unit tests for progressive record writing.
"""

from datetime import datetime, timezone

import pandas as pd

from faculty_scraper.dialects import Dialect
from faculty_scraper.record_processor import FacultyRecord
from faculty_scraper.writer import COLUMNS, RecordWriter, records_to_dataframe


def make_record(name, titles=None, url="https://music.ku.edu/people"):
    return FacultyRecord(
        name=name,
        titles=titles or [],
        email=f"{name.split()[0].lower()}@ku.edu",
        extraction_method=Dialect.KANSAS,
        source_url=url,
        scraped_at=datetime(2024, 9, 1, tzinfo=timezone.utc),
    )


class TestRecordsToDataframe:
    """Tests for flattening records."""

    def test_columns_and_titles(self):
        df = records_to_dataframe([
            make_record("Jane Smith", ["Professor", "Chair"]),
            make_record("Bob Jones"),
        ])

        assert list(df.columns) == COLUMNS
        assert df.loc[0, 'titles'] == "Professor | Chair"
        assert df.loc[1, 'titles'] == ""
        assert df.loc[0, 'extractionMethod'] == "kansas"

    def test_accepts_dicts(self):
        df = records_to_dataframe([make_record("Jane Smith", ["Professor"]).to_dict()])
        assert df.loc[0, 'name'] == "Jane Smith"


class TestRecordWriter:
    """Tests for the CSV sink and resume state."""

    def test_append_across_pages(self, tmp_path):
        output = tmp_path / "faculty.csv"
        writer = RecordWriter(output)

        writer.write_records([make_record("Jane Smith"), make_record("Bob Jones")], "page-1")
        writer.write_records([make_record("Ann Lee")], "page-2")

        df = pd.read_csv(output)
        assert list(df['name']) == ["Jane Smith", "Bob Jones", "Ann Lee"]
        assert writer.get_stats()['records_written'] == 3

    def test_empty_page_writes_nothing(self, tmp_path):
        output = tmp_path / "faculty.csv"
        writer = RecordWriter(output)

        writer.write_records([], "page-1")

        assert not output.exists()
        assert writer.records_written == 0

    def test_resume_state(self, tmp_path):
        output = tmp_path / "faculty.csv"
        writer = RecordWriter(output)
        writer.write_records([make_record("Jane Smith")], "https://a.edu/people")
        writer.mark_page_completed("https://a.edu/people")

        resumed = RecordWriter(output)

        assert resumed.is_page_completed("https://a.edu/people")
        assert not resumed.is_page_completed("https://b.edu/people")
        assert resumed.records_written == 1

    def test_corrupt_resume_state_ignored(self, tmp_path):
        resume = tmp_path / "resume.json"
        resume.write_text("{not json")

        writer = RecordWriter(tmp_path / "faculty.csv", resume_file=resume)

        assert writer.pages_completed == []

    def test_finalize_removes_resume_state(self, tmp_path):
        writer = RecordWriter(tmp_path / "faculty.csv")
        writer.mark_page_completed("https://a.edu/people")
        assert writer.resume_file.exists()

        writer.finalize()

        assert not writer.resume_file.exists()
