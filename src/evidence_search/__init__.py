"""
Evidence Search - Claim-driven literature evidence aggregation

Turns a free-text health or product claim into a short list of supporting
studies pulled from Semantic Scholar and PubMed, optionally enriched with
study characteristics estimated by a language model.

Usage:
    from evidence_search import ApplicationContainer, Settings

    container = ApplicationContainer()
    container.config.from_dict(Settings.from_env().to_dict())
    service = container.literature_service()

    evidence = await service.search_literature("Magnesium improves sleep quality")
    for item in evidence:
        print(f"{item.year} {item.title} [{item.evidence_grade.value}]")
"""

from .application import (
    EvidenceEnricher,
    LiteratureSearchService,
    build_query,
    calculate_recruitment_difficulty,
    get_fallback_evidence,
)
from .config import Settings
from .container import ApplicationContainer
from .domain import EvidenceCandidate, EvidenceGrade

__version__ = "1.0.0"

__all__ = [
    "Settings",
    "ApplicationContainer",
    "LiteratureSearchService",
    "EvidenceEnricher",
    "EvidenceCandidate",
    "EvidenceGrade",
    "build_query",
    "get_fallback_evidence",
    "calculate_recruitment_difficulty",
]
