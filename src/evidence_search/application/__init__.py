"""
Application Layer - Use Cases

Contains:
- search: literature search across providers
- enrichment: language-model backfill of study characteristics
- study_design: recruitment difficulty heuristic
"""

from .enrichment import EvidenceEnricher
from .search import LiteratureSearchService, build_query, get_fallback_evidence
from .study_design import calculate_recruitment_difficulty

__all__ = [
    "LiteratureSearchService",
    "build_query",
    "get_fallback_evidence",
    "EvidenceEnricher",
    "calculate_recruitment_difficulty",
]
