"""
Application DI Container (dependency-injector).

Centralizes service creation and lifecycle management. The provider list and
the optional enricher are built here from Settings and handed to
LiteratureSearchService explicitly.

Usage::

    from evidence_search.config import Settings
    from evidence_search.container import ApplicationContainer

    container = ApplicationContainer()
    container.config.from_dict(Settings.from_env().to_dict())

    service = container.literature_service()

    # In tests, override any provider:
    container.enricher.override(providers.Object(None))
"""

from __future__ import annotations

import logging

from dependency_injector import containers, providers

logger = logging.getLogger(__name__)


def _create_semantic_scholar(api_key: str | None, timeout: float) -> object:
    """Lazy factory for SemanticScholarClient."""
    from evidence_search.infrastructure.sources import SemanticScholarClient

    if not api_key:
        logger.info("SEMANTIC_SCHOLAR_API_KEY not set, using unauthenticated access")
    return SemanticScholarClient(api_key=api_key or None, timeout=timeout)


def _create_pubmed(api_key: str | None, email: str | None, timeout: float) -> object:
    """Lazy factory for PubMedClient."""
    from evidence_search.infrastructure.sources import PubMedClient

    if not api_key:
        logger.info("PUBMED_API_KEY not set, using unauthenticated access")
    return PubMedClient(api_key=api_key or None, email=email or None, timeout=timeout)


def _create_enricher(api_key: str | None, model: str, timeout: float) -> object | None:
    """Lazy factory for EvidenceEnricher; None disables enrichment."""
    if not api_key:
        logger.warning("OPENAI_API_KEY not set, literature results will not be enriched")
        return None

    from evidence_search.application.enrichment import EvidenceEnricher
    from evidence_search.infrastructure.llm import OpenAICompletionClient

    return EvidenceEnricher(OpenAICompletionClient(api_key=api_key, model=model, timeout=timeout))


def _create_literature_service(
    search_providers: list[object],
    enricher: object | None,
    provider_timeout: float,
    enrichment_timeout: float,
    default_limit: int,
) -> object:
    """Lazy factory for LiteratureSearchService."""
    from evidence_search.application.search import LiteratureSearchService

    return LiteratureSearchService(
        providers=search_providers,  # type: ignore[arg-type]
        enricher=enricher,  # type: ignore[arg-type]
        provider_timeout=provider_timeout,
        enrichment_timeout=enrichment_timeout,
        default_limit=default_limit,
    )


class ApplicationContainer(containers.DeclarativeContainer):
    """Central DI container for the evidence search application.

    Manages creation and lifecycle of all core services:
    - ``semantic_scholar`` / ``pubmed``: bibliographic providers
    - ``search_providers``: provider list in fan-out (and dedupe priority) order
    - ``enricher``: optional language-model enrichment
    - ``literature_service``: the aggregation pipeline
    """

    config = providers.Configuration()

    semantic_scholar = providers.Singleton(
        _create_semantic_scholar,
        api_key=config.semantic_scholar_api_key,
        timeout=config.provider_timeout,
    )

    pubmed = providers.Singleton(
        _create_pubmed,
        api_key=config.pubmed_api_key,
        email=config.ncbi_email,
        timeout=config.provider_timeout,
    )

    search_providers = providers.List(semantic_scholar, pubmed)

    enricher = providers.Singleton(
        _create_enricher,
        api_key=config.openai_api_key,
        model=config.openai_model,
        timeout=config.enrichment_timeout,
    )

    literature_service = providers.Singleton(
        _create_literature_service,
        search_providers=search_providers,
        enricher=enricher,
        provider_timeout=config.provider_timeout,
        enrichment_timeout=config.enrichment_timeout,
        default_limit=config.result_limit,
    )


__all__ = ["ApplicationContainer"]
