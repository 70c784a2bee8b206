"""
Enrichment - Language-model backfill of quantitative study fields.
"""

from .enricher import (
    SYSTEM_PROMPT,
    CompletionClient,
    EvidenceEnricher,
    apply_estimate,
    apply_estimates,
    title_join_key,
    build_user_prompt,
)
from .schema import EnrichmentResponse, PaperEstimate, parse_enrichment_response

__all__ = [
    "EvidenceEnricher",
    "CompletionClient",
    "SYSTEM_PROMPT",
    "build_user_prompt",
    "apply_estimate",
    "apply_estimates",
    "title_join_key",
    "EnrichmentResponse",
    "PaperEstimate",
    "parse_enrichment_response",
]
