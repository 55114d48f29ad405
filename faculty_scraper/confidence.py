"""
Email Confidence Scoring

Estimates how likely it is that an email address belongs to the person
listed next to it, by comparing the local part against first/last name.
"""

# Graded scores, most specific pattern first
SCORE_FIRST_DOT_LAST = 0.95
SCORE_FIRST_DOT_INITIAL = 0.85
SCORE_INITIAL_DOT_LAST = 0.85
SCORE_CONTAINS_BOTH = 0.75
SCORE_CONTAINS_FIRST = 0.6
SCORE_CONTAINS_LAST = 0.5
SCORE_GENERIC = 0.1
SCORE_AMBIGUOUS_NAME = 0.3

# Above this an email is considered the person's own address
NAME_MATCH_THRESHOLD = 0.5

MIN_EMAIL_LENGTH = 5


def calculate_email_confidence(name: str, email: str) -> float:
    """
    Score the association between a cleaned name and a cleaned email.

    Checks are ordered from the most specific (first.last) to the loosest
    (last name substring) and the first hit wins.

    Args:
        name: Cleaned person name
        email: Cleaned email address

    Returns:
        Confidence between 0.0 and 1.0
    """
    if not name or not email or len(email) < MIN_EMAIL_LENGTH:
        return SCORE_GENERIC

    name_parts = [part for part in name.lower().split() if len(part) > 1]
    if len(name_parts) < 2:
        return SCORE_AMBIGUOUS_NAME

    first_name, last_name = name_parts[0], name_parts[-1]
    email_local = email.split('@')[0].lower()

    if email_local == f"{first_name}.{last_name}":
        return SCORE_FIRST_DOT_LAST

    if email_local == f"{first_name}.{last_name[0]}":
        return SCORE_FIRST_DOT_INITIAL

    if email_local == f"{first_name[0]}.{last_name}":
        return SCORE_INITIAL_DOT_LAST

    # Undotted initial + surname (jdoe)
    if email_local == f"{first_name[0]}{last_name}":
        return SCORE_INITIAL_DOT_LAST

    if first_name in email_local and last_name in email_local:
        return SCORE_CONTAINS_BOTH

    if first_name in email_local:
        return SCORE_CONTAINS_FIRST

    if last_name in email_local:
        return SCORE_CONTAINS_LAST

    # Departmental or otherwise unrelated address
    return SCORE_GENERIC


def email_source(confidence: float) -> str:
    """Label an email 'name-matched' or 'generic' from its confidence."""
    return 'name-matched' if confidence > NAME_MATCH_THRESHOLD else 'generic'
