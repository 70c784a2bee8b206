"""
LiteratureSearchService - Claim to enriched evidence list.

Pipeline:
    claim -> build_query -> providers (concurrent, each time-boxed)
          -> flatten -> dedupe by title -> truncate -> enrich (time-boxed)

Architecture Decision:
    Providers and the enricher are injected explicitly (see
    ``evidence_search.container``); nothing here reads the environment.
    Every call re-queries providers and re-runs the model, no caching.

Failure semantics:
    Only an empty claim, a non-positive limit or a service built without
    providers raise. Provider errors and timeouts contribute empty lists;
    enrichment errors and timeouts return the un-enriched list.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from evidence_search.shared.async_utils import gather_with_errors, timeout_with_fallback
from evidence_search.shared.exceptions import (
    ConfigurationError,
    InvalidParameterError,
    InvalidQueryError,
)

from .query_builder import DEFAULT_QUERY_CONFIG, QueryBuilderConfig, build_query
from .result_merger import merge_results

if TYPE_CHECKING:
    from collections.abc import Sequence

    from evidence_search.application.enrichment import EvidenceEnricher
    from evidence_search.domain.entities import EvidenceCandidate

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5
DEFAULT_PROVIDER_TIMEOUT = 10.0
DEFAULT_ENRICHMENT_TIMEOUT = 30.0


class EvidenceProvider(Protocol):
    """A bibliographic search backend."""

    @property
    def name(self) -> str: ...

    async def search(self, query: str, limit: int = DEFAULT_LIMIT) -> list[EvidenceCandidate]: ...


class LiteratureSearchService:
    """
    Aggregates evidence for a claim across providers.

    Example:
        service = LiteratureSearchService(
            providers=[SemanticScholarClient(), PubMedClient()],
            enricher=EvidenceEnricher(OpenAICompletionClient(api_key=key)),
        )
        evidence = await service.search_literature("Magnesium improves sleep quality")
    """

    def __init__(
        self,
        providers: Sequence[EvidenceProvider],
        enricher: EvidenceEnricher | None = None,
        *,
        provider_timeout: float = DEFAULT_PROVIDER_TIMEOUT,
        enrichment_timeout: float = DEFAULT_ENRICHMENT_TIMEOUT,
        default_limit: int = DEFAULT_LIMIT,
        query_config: QueryBuilderConfig = DEFAULT_QUERY_CONFIG,
    ) -> None:
        if not providers:
            raise ConfigurationError("At least one literature provider must be configured")
        self._providers = list(providers)
        self._enricher = enricher
        self._provider_timeout = provider_timeout
        self._enrichment_timeout = enrichment_timeout
        self._default_limit = default_limit
        self._query_config = query_config

    @property
    def provider_names(self) -> list[str]:
        return [p.name for p in self._providers]

    @property
    def enrichment_enabled(self) -> bool:
        return self._enricher is not None

    async def search_literature(self, claim: str, limit: int | None = None) -> list[EvidenceCandidate]:
        """
        Search all providers for evidence about a claim.

        Args:
            claim: Free-text product claim
            limit: Maximum candidates to return (default from construction, 5)

        Returns:
            Deduplicated, truncated and (when configured) enriched candidates

        Raises:
            InvalidQueryError: claim is missing or blank
            InvalidParameterError: limit is less than 1
        """
        if not claim or not claim.strip():
            raise InvalidQueryError(claim)

        limit = self._default_limit if limit is None else limit
        if limit < 1:
            raise InvalidParameterError("limit", limit, "a positive integer")

        query = build_query(claim, self._query_config)
        logger.info(f'Generated search query: "{query}" from claim: "{claim[:50]}..."')
        if not query:
            logger.warning("Claim has no searchable terms, returning no evidence")
            return []

        provider_results = await gather_with_errors(
            *(self._search_provider(provider, query, limit) for provider in self._providers),
        )
        candidates, stats = merge_results(
            (r if isinstance(r, list) else [] for r in provider_results),
            limit,
        )
        logger.info(f"Merged provider results: {stats.to_dict()}")

        if self._enricher is None or not candidates:
            return candidates

        return await timeout_with_fallback(
            self._enricher.enrich(candidates),
            timeout=self._enrichment_timeout,
            fallback=candidates,
        )

    async def _search_provider(
        self,
        provider: EvidenceProvider,
        query: str,
        limit: int,
    ) -> list[EvidenceCandidate]:
        """One provider call, isolated: errors and timeouts become []."""
        try:
            results = await timeout_with_fallback(
                provider.search(query, limit),
                timeout=self._provider_timeout,
                fallback=list,
            )
        except Exception as e:
            logger.exception(f"{provider.name} search failed: {e}")
            return []

        logger.info(f"{provider.name}: {len(results)} results")
        return results

    async def aclose(self) -> None:
        """Release provider and model clients."""
        for provider in self._providers:
            close = getattr(provider, "close", None)
            if close is not None:
                await close()
        if self._enricher is not None:
            await self._enricher.close()
