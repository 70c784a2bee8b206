"""
Search Application Services

Claim-driven literature search:
- query_builder: claim text to boolean query
- result_merger: flatten, dedupe by title, truncate
- literature_service: provider fan-out and enrichment orchestration
- fallback: static evidence for test mode
"""

from .fallback import FALLBACK_EVIDENCE, get_fallback_evidence
from .literature_service import (
    DEFAULT_ENRICHMENT_TIMEOUT,
    DEFAULT_LIMIT,
    DEFAULT_PROVIDER_TIMEOUT,
    EvidenceProvider,
    LiteratureSearchService,
)
from .query_builder import (
    DEFAULT_QUERY_CONFIG,
    DEFAULT_STOP_WORDS,
    QueryBuilderConfig,
    build_query,
    extract_terms,
)
from .result_merger import (
    MergeStats,
    deduplicate_by_title,
    flatten_results,
    merge_results,
)

__all__ = [
    # Query building
    "build_query",
    "extract_terms",
    "QueryBuilderConfig",
    "DEFAULT_QUERY_CONFIG",
    "DEFAULT_STOP_WORDS",
    # Merging
    "flatten_results",
    "deduplicate_by_title",
    "merge_results",
    "MergeStats",
    # Service
    "LiteratureSearchService",
    "EvidenceProvider",
    "DEFAULT_LIMIT",
    "DEFAULT_PROVIDER_TIMEOUT",
    "DEFAULT_ENRICHMENT_TIMEOUT",
    # Fallback
    "FALLBACK_EVIDENCE",
    "get_fallback_evidence",
]
