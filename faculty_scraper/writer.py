"""
Progressive Result Writing

Appends faculty records to a CSV file as each page finishes instead of
holding a whole crawl in memory, and remembers which pages are done so an
interrupted crawl can be resumed.
"""

import json
from pathlib import Path
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Union

import pandas as pd
from loguru import logger

from faculty_scraper.record_processor import FacultyRecord

# Output column order
COLUMNS = [
    'name', 'titles', 'profileLink', 'email', 'emailConfidence', 'emailSource',
    'phone', 'university', 'department', 'extractionMethod', 'sourceUrl', 'scrapedAt',
]


def records_to_dataframe(records: Iterable[Union[FacultyRecord, Dict]]) -> pd.DataFrame:
    """
    Flatten records into a DataFrame; multiple titles are joined with ' | '.

    Args:
        records: FacultyRecord objects or their dict form

    Returns:
        DataFrame with the output columns
    """
    rows = []
    for record in records:
        row = record.to_dict() if isinstance(record, FacultyRecord) else dict(record)
        row['titles'] = ' | '.join(row.get('titles') or [])
        rows.append(row)

    return pd.DataFrame(rows, columns=COLUMNS)


class RecordWriter:
    """
    Writes records to disk incrementally as pages are extracted.

    Usage:
        writer = RecordWriter(OUTPUT_DIR / 'faculty.csv')
        if not writer.is_page_completed(url):
            writer.write_records(records, url)
            writer.mark_page_completed(url)
        writer.finalize()
    """

    def __init__(self, output_file: Union[str, Path], resume_file: Optional[Union[str, Path]] = None):
        """
        Initialize record writer.

        Args:
            output_file: Path to CSV file for records
            resume_file: Path to JSON file tracking completed pages
        """
        self.output_file = Path(output_file)
        self.resume_file = Path(resume_file) if resume_file else self.output_file.parent / "resume_state.json"

        self.records_written = 0
        self.pages_completed: List[str] = []

        self.load_resume_state()

    def load_resume_state(self):
        """Load resume state from disk."""
        if not self.resume_file.exists():
            return

        try:
            with open(self.resume_file, 'r') as f:
                state = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load resume state: {e}")
            return

        self.pages_completed = state.get('pages_completed', [])
        self.records_written = state.get('records_written', 0)
        logger.info(f"Loaded resume state: {len(self.pages_completed)} pages completed, "
                    f"{self.records_written} records written")

    def save_resume_state(self):
        """Save resume state to disk."""
        state = {
            'pages_completed': self.pages_completed,
            'records_written': self.records_written,
            'last_updated': datetime.now().isoformat(),
        }
        try:
            with open(self.resume_file, 'w') as f:
                json.dump(state, f, indent=2)
        except OSError as e:
            logger.error(f"Failed to save resume state: {e}")

    def is_page_completed(self, url: str) -> bool:
        """Check if a page was already extracted in an earlier run."""
        return url in self.pages_completed

    def write_records(self, records: List[FacultyRecord], url: str):
        """
        Append a page's records to the CSV file.

        Args:
            records: Records extracted from the page
            url: Page URL (for logging)
        """
        if not records:
            logger.debug(f"No records to write for {url}")
            return

        df = records_to_dataframe(records)
        write_header = not self.output_file.exists()

        self.output_file.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(self.output_file, mode='a', header=write_header, index=False)

        self.records_written += len(records)
        logger.info(f"Wrote {len(records)} records for {url} (total: {self.records_written})")

    def mark_page_completed(self, url: str):
        """Mark a page as completed and persist the resume state."""
        if url not in self.pages_completed:
            self.pages_completed.append(url)
            self.save_resume_state()

    def get_stats(self) -> dict:
        """
        Get writer statistics.

        Returns:
            Dictionary with stats
        """
        return {
            'records_written': self.records_written,
            'pages_completed': len(self.pages_completed),
            'output_file': str(self.output_file),
        }

    def finalize(self):
        """Finish the crawl and remove the resume state."""
        logger.info(f"Finalizing: {self.records_written} records written, "
                    f"{len(self.pages_completed)} pages completed")

        if self.resume_file.exists():
            self.resume_file.unlink()
            logger.debug("Removed resume state file")
