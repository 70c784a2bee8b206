"""
Semantic Scholar Integration

General scholarly graph search via the Semantic Scholar API.

API Documentation: https://api.semanticscholar.org/api-docs/

Without an API key requests go through the shared unauthenticated pool,
which is heavily rate limited but still usable.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from evidence_search.domain.entities import (
    NO_ABSTRACT,
    UNKNOWN_JOURNAL,
    EvidenceCandidate,
    format_authors,
)
from evidence_search.infrastructure.sources.base_client import BaseAPIClient

logger = logging.getLogger(__name__)

# Semantic Scholar API endpoints
S2_API_BASE = "https://api.semanticscholar.org/graph/v1"
S2_SEARCH_URL = f"{S2_API_BASE}/paper/search"

DEFAULT_FIELDS = [
    "title",
    "authors",
    "venue",
    "year",
    "url",
    "abstract",
    "citationCount",
]

# Hard cap of the search endpoint
MAX_LIMIT = 100


class SemanticScholarClient(BaseAPIClient):
    """
    Semantic Scholar API client.

    Usage:
        async with SemanticScholarClient(api_key=key) as client:
            results = await client.search("magnesium AND sleep", limit=5)
    """

    _service_name = "Semantic Scholar"

    def __init__(self, api_key: str | None = None, timeout: float = 10.0):
        """
        Initialize client.

        Args:
            api_key: Optional S2 API key (sent as x-api-key)
            timeout: Request timeout in seconds
        """
        self._api_key = api_key
        headers = {"Accept": "application/json"}
        if api_key:
            headers["x-api-key"] = api_key
        super().__init__(timeout=timeout, min_interval=0.5, headers=headers)

    async def search(self, query: str, limit: int = 5) -> list[EvidenceCandidate]:
        """
        Search Semantic Scholar.

        Args:
            query: Search query
            limit: Maximum results (max 100 per request)

        Returns:
            Evidence candidates in relevance order, [] on any failure
        """
        try:
            params = {
                "query": query,
                "limit": str(min(limit, MAX_LIMIT)),
                "fields": ",".join(DEFAULT_FIELDS),
            }
            data = await self._make_request(S2_SEARCH_URL, params=params)

            if not isinstance(data, dict):
                return []

            papers = data.get("data") or []
            if not isinstance(papers, list):
                logger.warning(f"Semantic Scholar returned unexpected 'data' payload: {type(papers).__name__}")
                return []

            results = []
            for paper in papers:
                candidate = self._normalize_paper(paper)
                if candidate is not None:
                    results.append(candidate)

            logger.info(f"Semantic Scholar returned {len(results)} papers")
            return results

        except Exception as e:
            logger.exception(f"Semantic Scholar search failed: {e}")
            return []

    def _normalize_paper(self, paper: dict[str, Any]) -> EvidenceCandidate | None:
        """Map an S2 paper onto an EvidenceCandidate; None when untitled."""
        if not isinstance(paper, dict):
            return None

        title = (paper.get("title") or "").strip()
        if not title:
            logger.debug("Skipping Semantic Scholar paper without a title")
            return None

        authors = paper.get("authors") or []
        author_names = [a.get("name") if isinstance(a, dict) else None for a in authors]

        year = paper.get("year")
        if not isinstance(year, int):
            year = date.today().year

        return EvidenceCandidate(
            title=title,
            authors=format_authors(author_names),
            journal=paper.get("venue") or UNKNOWN_JOURNAL,
            year=year,
            summary=paper.get("abstract") or NO_ABSTRACT,
            url=paper.get("url") or None,
        )
