"""
Record Reconciliation

Turns raw dialect candidates into finished faculty records: cleans every
field, fills missing profile links from the page's link inventory, scores
how well the email matches the name and stamps provenance.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from loguru import logger

from faculty_scraper.confidence import calculate_email_confidence, email_source
from faculty_scraper.context import PageContext
from faculty_scraper.dialects import Dialect, RawCandidate
from faculty_scraper.field_cleaners import clean_name, clean_title, clean_email, clean_phone
from faculty_scraper.profile_links import find_profile_link

# Cleaned names this short are initials or debris
MIN_NAME_LENGTH = 2


@dataclass
class FacultyRecord:
    """A finished directory entry, ready for the output sink."""
    name: str
    titles: List[str] = field(default_factory=list)
    profile_link: str = ''
    email: str = ''
    email_confidence: float = 0.1
    email_source: str = 'generic'
    phone: str = ''
    university: str = ''
    department: str = ''
    extraction_method: Dialect = Dialect.TABULAR
    source_url: str = ''
    scraped_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict:
        """Output representation with camelCase keys and an ISO timestamp."""
        return {
            'name': self.name,
            'titles': list(self.titles),
            'profileLink': self.profile_link,
            'email': self.email,
            'emailConfidence': self.email_confidence,
            'emailSource': self.email_source,
            'phone': self.phone,
            'university': self.university,
            'department': self.department,
            'extractionMethod': self.extraction_method.value,
            'sourceUrl': self.source_url,
            'scrapedAt': self.scraped_at.isoformat(),
        }


def build_record(
    candidate: RawCandidate,
    dialect: Dialect,
    context: PageContext,
    source_url: str,
    scraped_at: Optional[datetime] = None
) -> Optional[FacultyRecord]:
    """
    Reconcile one raw candidate.

    Args:
        candidate: Raw candidate from a dialect extractor
        dialect: Dialect that produced it
        context: Page context (institution, department, profile links)
        source_url: Page URL
        scraped_at: Timestamp to stamp (default: now, UTC)

    Returns:
        FacultyRecord, or None when the cleaned name is too short to keep
    """
    name = clean_name(candidate.name)
    email = clean_email(candidate.email)

    if len(name) <= MIN_NAME_LENGTH:
        logger.debug(f"Dropping candidate with unusable name: {candidate.name!r}")
        return None

    profile_link = candidate.profile_link
    if not profile_link:
        profile_link = find_profile_link(name, context.profile_links)

    confidence = calculate_email_confidence(name, email)

    return FacultyRecord(
        name=name,
        titles=[clean_title(candidate.title)] if candidate.title else [],
        profile_link=profile_link,
        email=email,
        email_confidence=confidence,
        email_source=email_source(confidence),
        phone=clean_phone(candidate.phone),
        university=context.university_name,
        department=context.department_name,
        extraction_method=dialect,
        source_url=source_url,
        scraped_at=scraped_at or datetime.now(timezone.utc),
    )


def process_candidates(
    candidates: Iterable[RawCandidate],
    dialect: Dialect,
    context: PageContext,
    source_url: str
) -> List[FacultyRecord]:
    """
    Reconcile every candidate from one page, preserving order.

    No deduplication and no cross-record checks are done here.

    Args:
        candidates: Raw candidates in document order
        dialect: Dialect that produced them
        context: Page context
        source_url: Page URL

    Returns:
        Finished records
    """
    candidates = list(candidates)
    logger.info(f"Processing {len(candidates)} faculty records with {dialect.value} method")

    records = []
    for candidate in candidates:
        record = build_record(candidate, dialect, context, source_url)
        if record is not None:
            records.append(record)

    logger.info(f"Successfully processed {len(records)} faculty records")
    return records
