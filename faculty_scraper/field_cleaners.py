"""
Field Cleaning Module

Normalizes the raw text pulled out of directory listings: names, titles,
emails and phone numbers. Every function is total: empty or junk input
gives an empty string, never an exception.
"""

import re

from faculty_scraper.utils import clean_text

# Honorifics dropped wherever they appear in a name
HONORIFIC_PATTERN = re.compile(r'\b(?:Dr\.|Prof\.|Professor|Mr\.|Ms\.|Mrs\.)', re.IGNORECASE)

# Generational suffixes: ", Jr." / ", Sr" / ", II" / ", III"
SUFFIX_PATTERN = re.compile(r',\s*(?:Jr|Sr|III|II)\.?', re.IGNORECASE)

TITLE_BULLET_PATTERN = re.compile(r'^\s*[-•–—]\s*')

PHONE_LABEL_PATTERN = re.compile(r'^(?:Phone|Tel|Office):\s*', re.IGNORECASE)
PHONE_JUNK_PATTERN = re.compile(r'[^\d\-().\s+]')


def clean_name(name: str) -> str:
    """
    Strip honorifics and suffixes from a person's name.

    >>> clean_name("Dr. Jane A. Smith, Jr.")
    'Jane A. Smith'
    """
    if not name:
        return ''

    name = HONORIFIC_PATTERN.sub('', name)
    name = SUFFIX_PATTERN.sub('', name)
    return clean_text(name)


def clean_title(title: str) -> str:
    """Drop a leading bullet or dash and collapse whitespace."""
    if not title:
        return ''

    title = TITLE_BULLET_PATTERN.sub('', title, count=1)
    return clean_text(title)


def clean_email(email: str) -> str:
    """Lower-case and trim an email; anything without an '@' is discarded."""
    if not email or '@' not in email:
        return ''

    return email.lower().strip()


def clean_phone(phone: str) -> str:
    """
    Remove a leading label (Phone:, Tel:, Office:) and every character
    that cannot appear in a formatted phone number.
    """
    if not phone:
        return ''

    phone = PHONE_LABEL_PATTERN.sub('', phone.strip())
    return PHONE_JUNK_PATTERN.sub('', phone).strip()


__all__ = [
    'clean_name',
    'clean_title',
    'clean_email',
    'clean_phone',
]
