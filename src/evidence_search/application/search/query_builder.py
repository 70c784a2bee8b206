"""
Query Builder - Claim text to boolean search query.

Reduces a free-text product claim to a short AND-query that both providers
accept, e.g.

    >>> build_query("Our magnesium supplement helps improve sleep quality")
    'magnesium AND supplement AND helps AND improve AND sleep'

The stop-word table and the length/term limits are tuning constants kept
identical across releases so the same claim always yields the same query.
Pass a different QueryBuilderConfig to experiment with them.
"""

from __future__ import annotations

from dataclasses import dataclass

# fmt: off
DEFAULT_STOP_WORDS: frozenset[str] = frozenset({
    "a", "an", "the", "and", "or", "but", "if", "then", "else", "when",
    "at", "from", "by", "for", "with", "about", "against", "between",
    "into", "through", "during", "before", "after", "above", "below",
    "to", "of", "in", "on", "than", "over", "under", "again", "further",
    "once", "here", "there", "where", "why", "how",
    "all", "any", "both", "each", "few", "more", "most", "other",
    "some", "such", "no", "nor", "not", "only", "own", "same", "so",
    "too", "very", "s", "t", "can", "will", "just", "don",
    "should", "now", "effects", "effect", "affects", "affect", "impact",
})
# fmt: on


@dataclass(frozen=True)
class QueryBuilderConfig:
    """Tuning table for query reduction."""

    stop_words: frozenset[str] = DEFAULT_STOP_WORDS
    min_token_length: int = 4  # tokens must be longer than 3 characters
    max_terms: int = 5
    operator: str = "AND"


DEFAULT_QUERY_CONFIG = QueryBuilderConfig()


def extract_terms(claim_text: str, config: QueryBuilderConfig = DEFAULT_QUERY_CONFIG) -> list[str]:
    """Meaningful search terms of a claim, in claim order, capped at max_terms."""
    terms = [
        token
        for token in claim_text.lower().split()
        if len(token) >= config.min_token_length and token not in config.stop_words
    ]
    return terms[: config.max_terms]


def build_query(claim_text: str, config: QueryBuilderConfig = DEFAULT_QUERY_CONFIG) -> str:
    """
    Build a boolean query from a claim.

    Returns:
        Terms joined by " AND ", or "" when nothing survives filtering
    """
    return f" {config.operator} ".join(extract_terms(claim_text, config))
