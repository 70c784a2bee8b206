"""
Result Merger - Multi-provider flattening, deduplication and truncation.

Operates on EvidenceCandidate lists only; it makes no API calls.

Deduplication is keyed on the normalized title (case-insensitive,
whitespace-collapsed) and is order-stable: the first occurrence wins, so the
provider configured first wins ties.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from evidence_search.domain.entities import EvidenceCandidate


@dataclass
class MergeStats:
    """Counts collected while merging, for logging."""

    total_input: int = 0
    duplicates_removed: int = 0
    truncated: int = 0
    returned: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "total_input": self.total_input,
            "duplicates_removed": self.duplicates_removed,
            "truncated": self.truncated,
            "returned": self.returned,
        }


def flatten_results(provider_results: Iterable[Sequence[EvidenceCandidate]]) -> list[EvidenceCandidate]:
    """Concatenate in provider order, keeping each provider's own ranking."""
    merged: list[EvidenceCandidate] = []
    for results in provider_results:
        merged.extend(results)
    return merged


def deduplicate_by_title(candidates: Iterable[EvidenceCandidate]) -> list[EvidenceCandidate]:
    """Keep the first candidate for each normalized title."""
    seen: set[str] = set()
    unique: list[EvidenceCandidate] = []
    for candidate in candidates:
        key = candidate.dedupe_key
        if key in seen:
            continue
        seen.add(key)
        unique.append(candidate)
    return unique


def merge_results(
    provider_results: Iterable[Sequence[EvidenceCandidate]],
    limit: int,
) -> tuple[list[EvidenceCandidate], MergeStats]:
    """
    Flatten, deduplicate and truncate provider results.

    Args:
        provider_results: One list per provider, in provider order
        limit: Maximum number of candidates to keep

    Returns:
        (merged candidates, stats)
    """
    flat = flatten_results(provider_results)
    unique = deduplicate_by_title(flat)
    limited = unique[:limit]

    stats = MergeStats(
        total_input=len(flat),
        duplicates_removed=len(flat) - len(unique),
        truncated=len(unique) - len(limited),
        returned=len(limited),
    )
    return limited, stats
