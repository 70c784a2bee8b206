"""
Domain Entities

Core entities of the evidence search domain.
"""

from .evidence import (
    NO_ABSTRACT,
    NOT_SPECIFIED,
    UNKNOWN_AUTHOR,
    UNKNOWN_AUTHORS,
    UNKNOWN_JOURNAL,
    EvidenceCandidate,
    EvidenceGrade,
    format_authors,
    normalize_title,
)

__all__ = [
    "EvidenceCandidate",
    "EvidenceGrade",
    "format_authors",
    "normalize_title",
    "NOT_SPECIFIED",
    "UNKNOWN_AUTHOR",
    "UNKNOWN_AUTHORS",
    "UNKNOWN_JOURNAL",
    "NO_ABSTRACT",
]
