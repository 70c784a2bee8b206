"""
Domain Entity: EvidenceCandidate

One bibliographic record relevant to a product claim, either surfaced by a
provider or filled in by enrichment. Pure domain entity: provider mapping
lives in the infrastructure layer.

The ``url`` field is only ever set by provider adapters. Its presence is what
lets the UI label a record as coming from an academic database rather than
being AI-generated, so nothing outside ``infrastructure.sources`` sets it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

NOT_SPECIFIED = "Not specified"
UNKNOWN_AUTHORS = "Unknown authors"
UNKNOWN_AUTHOR = "Unknown"
UNKNOWN_JOURNAL = "Unknown journal"
NO_ABSTRACT = "No abstract available"


class EvidenceGrade(str, Enum):
    """Strength of evidence a study provides."""

    HIGH = "High"
    MODERATE = "Moderate"
    LOW = "Low"

    @classmethod
    def normalize(cls, grade: str | EvidenceGrade | None) -> EvidenceGrade:
        """
        Map free-text grades onto the three allowed values.

        Substring match, "high" checked before "low":
            "moderately high" -> HIGH, "Low-quality" -> LOW,
            anything else (including None) -> MODERATE
        """
        if isinstance(grade, EvidenceGrade):
            return grade
        if not grade:
            return cls.MODERATE

        normalized = grade.lower()
        if "high" in normalized:
            return cls.HIGH
        if "low" in normalized:
            return cls.LOW
        return cls.MODERATE


def format_authors(names: list[str | None], first_surname: str | None = None) -> str:
    """
    Format an author list for display.

    Every entry counts towards "several", even an unnamed one; an unnamed
    first author shows as "Unknown".

    Args:
        names: Full author names in publication order
        first_surname: Surname of the first author, used instead of the full
            name when there are several authors (PubMed style)

    Returns:
        "Unknown authors", the single full name, or "{first author} et al."
    """
    if not names:
        return UNKNOWN_AUTHORS
    first = (names[0] or "").strip() or UNKNOWN_AUTHOR
    if len(names) == 1:
        return first
    return f"{first_surname or first} et al."


def normalize_title(title: str) -> str:
    """Dedupe identity for a title: lowercased, whitespace collapsed."""
    return " ".join(title.lower().split())


@dataclass(frozen=True)
class EvidenceCandidate:
    """
    Normalized evidence record.

    Quantitative fields stay at their "unknown" defaults until enrichment
    fills them in.
    """

    title: str
    authors: str = UNKNOWN_AUTHORS
    journal: str = UNKNOWN_JOURNAL
    year: int = 0
    sample_size: int = 0
    effect_size: str = NOT_SPECIFIED
    dosage: str = NOT_SPECIFIED
    duration: str = NOT_SPECIFIED
    evidence_grade: EvidenceGrade = EvidenceGrade.MODERATE
    summary: str = NO_ABSTRACT
    details: str | None = None
    url: str | None = None

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError("EvidenceCandidate.title must not be empty")
        if not isinstance(self.evidence_grade, EvidenceGrade):
            object.__setattr__(self, "evidence_grade", EvidenceGrade.normalize(self.evidence_grade))

    @property
    def dedupe_key(self) -> str:
        return normalize_title(self.title)

    @property
    def from_academic_database(self) -> bool:
        """Whether this record came from a real provider call."""
        return self.url is not None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase wire format; optional fields only when set."""
        data: dict[str, Any] = {
            "title": self.title,
            "authors": self.authors,
            "journal": self.journal,
            "year": self.year,
            "sampleSize": self.sample_size,
            "effectSize": self.effect_size,
            "dosage": self.dosage,
            "duration": self.duration,
            "evidenceGrade": self.evidence_grade.value,
            "summary": self.summary,
        }
        if self.details is not None:
            data["details"] = self.details
        if self.url is not None:
            data["url"] = self.url
        return data
