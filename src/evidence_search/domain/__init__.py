"""
Domain Layer - Core Business Logic

Contains:
- entities: EvidenceCandidate and its grade enum
"""

from .entities import (
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
]
