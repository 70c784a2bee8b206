"""Tests for LiteratureSearchService orchestration."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from evidence_search.application.search import LiteratureSearchService
from evidence_search.shared.exceptions import (
    ConfigurationError,
    InvalidParameterError,
    InvalidQueryError,
)

CLAIM = "Our magnesium supplement helps improve sleep quality"
QUERY = "magnesium AND supplement AND helps AND improve AND sleep"


def _enricher(result=None, *, side_effect=None):
    enricher = MagicMock()
    enricher.enrich = AsyncMock(return_value=result, side_effect=side_effect)
    enricher.close = AsyncMock()
    return enricher


# ============================================================
# Construction
# ============================================================


class TestInit:
    def test_no_providers(self):
        with pytest.raises(ConfigurationError):
            LiteratureSearchService(providers=[])

    def test_provider_names(self, fake_provider_factory):
        service = LiteratureSearchService([fake_provider_factory("Semantic Scholar"), fake_provider_factory("PubMed")])
        assert service.provider_names == ["Semantic Scholar", "PubMed"]
        assert service.enrichment_enabled is False

    def test_enrichment_enabled(self, fake_provider_factory):
        service = LiteratureSearchService([fake_provider_factory("A")], enricher=_enricher())
        assert service.enrichment_enabled is True


# ============================================================
# Validation
# ============================================================


class TestValidation:
    @pytest.mark.parametrize("claim", ["", "   ", None])
    async def test_blank_claim(self, fake_provider_factory, claim):
        provider = fake_provider_factory("A")
        with pytest.raises(InvalidQueryError):
            await LiteratureSearchService([provider]).search_literature(claim)
        assert provider.calls == []

    async def test_bad_limit(self, fake_provider_factory):
        with pytest.raises(InvalidParameterError):
            await LiteratureSearchService([fake_provider_factory("A")]).search_literature(CLAIM, limit=0)

    async def test_no_terms_skips_providers(self, fake_provider_factory):
        provider = fake_provider_factory("A")
        assert await LiteratureSearchService([provider]).search_literature("it is so") == []
        assert provider.calls == []


# ============================================================
# Fan-out and merge
# ============================================================


class TestSearchLiterature:
    async def test_query_and_limit_passed_to_every_provider(self, fake_provider_factory):
        s2, pubmed = fake_provider_factory("S2"), fake_provider_factory("PubMed")
        await LiteratureSearchService([s2, pubmed]).search_literature(CLAIM)
        assert s2.calls == [(QUERY, 5)]
        assert pubmed.calls == [(QUERY, 5)]

    async def test_custom_limit(self, fake_provider_factory, candidate_factory):
        results = [candidate_factory(f"Paper {i}") for i in range(4)]
        provider = fake_provider_factory("S2", results)
        found = await LiteratureSearchService([provider]).search_literature(CLAIM, limit=2)
        assert [c.title for c in found] == ["Paper 0", "Paper 1"]
        assert provider.calls == [(QUERY, 2)]

    async def test_default_limit_from_construction(self, fake_provider_factory, candidate_factory):
        provider = fake_provider_factory("S2", [candidate_factory(f"Paper {i}") for i in range(4)])
        found = await LiteratureSearchService([provider], default_limit=3).search_literature(CLAIM)
        assert len(found) == 3

    async def test_merge_order_and_dedupe(self, fake_provider_factory, candidate_factory):
        s2 = fake_provider_factory(
            "S2",
            [candidate_factory("Shared title", url="https://s2.example/1"), candidate_factory("S2 only")],
        )
        pubmed = fake_provider_factory(
            "PubMed",
            [candidate_factory("SHARED  title", url="https://pubmed.ncbi.nlm.nih.gov/1/"), candidate_factory("PubMed only")],
        )
        found = await LiteratureSearchService([s2, pubmed]).search_literature(CLAIM)
        assert [c.title for c in found] == ["Shared title", "S2 only", "PubMed only"]
        assert found[0].url == "https://s2.example/1"

    async def test_truncates_to_limit(self, fake_provider_factory, candidate_factory):
        s2 = fake_provider_factory("S2", [candidate_factory(f"S2 {i}") for i in range(5)])
        pubmed = fake_provider_factory("PubMed", [candidate_factory(f"PubMed {i}") for i in range(5)])
        found = await LiteratureSearchService([s2, pubmed]).search_literature(CLAIM)
        assert [c.title for c in found] == [f"S2 {i}" for i in range(5)]


# ============================================================
# Failure isolation
# ============================================================


class TestProviderIsolation:
    async def test_failing_provider_contributes_nothing(self, fake_provider_factory, candidate_factory):
        broken = fake_provider_factory("S2", error=RuntimeError("boom"))
        pubmed = fake_provider_factory("PubMed", [candidate_factory("From PubMed")])
        found = await LiteratureSearchService([broken, pubmed]).search_literature(CLAIM)
        assert [c.title for c in found] == ["From PubMed"]

    async def test_slow_provider_times_out(self, fake_provider_factory, candidate_factory):
        slow = fake_provider_factory("S2", [candidate_factory("Too late")], delay=1.0)
        pubmed = fake_provider_factory("PubMed", [candidate_factory("On time")])
        service = LiteratureSearchService([slow, pubmed], provider_timeout=0.05)
        found = await service.search_literature(CLAIM)
        assert [c.title for c in found] == ["On time"]

    async def test_all_providers_fail(self, fake_provider_factory):
        service = LiteratureSearchService(
            [fake_provider_factory("S2", error=RuntimeError("a")), fake_provider_factory("PubMed", error=OSError("b"))]
        )
        assert await service.search_literature(CLAIM) == []


# ============================================================
# Enrichment
# ============================================================


class TestEnrichment:
    async def test_enricher_result_returned(self, fake_provider_factory, candidate_factory):
        provider = fake_provider_factory("S2", [candidate_factory("A")])
        enriched = [candidate_factory("A", sample_size=50)]
        enricher = _enricher(enriched)
        found = await LiteratureSearchService([provider], enricher=enricher).search_literature(CLAIM)
        assert found is enriched
        (passed,) = enricher.enrich.await_args.args
        assert [c.title for c in passed] == ["A"]

    async def test_enricher_timeout_returns_candidates(self, fake_provider_factory, candidate_factory):
        async def slow_enrich(candidates):
            await asyncio.sleep(1.0)
            return []

        provider = fake_provider_factory("S2", [candidate_factory("A")])
        enricher = _enricher(side_effect=slow_enrich)
        service = LiteratureSearchService([provider], enricher=enricher, enrichment_timeout=0.05)
        found = await service.search_literature(CLAIM)
        assert [c.title for c in found] == ["A"]

    async def test_enricher_skipped_without_candidates(self, fake_provider_factory):
        enricher = _enricher([])
        found = await LiteratureSearchService([fake_provider_factory("S2")], enricher=enricher).search_literature(CLAIM)
        assert found == []
        enricher.enrich.assert_not_awaited()


# ============================================================
# Lifecycle
# ============================================================


class TestClose:
    async def test_aclose(self, fake_provider_factory):
        s2, pubmed = fake_provider_factory("S2"), fake_provider_factory("PubMed")
        enricher = _enricher()
        await LiteratureSearchService([s2, pubmed], enricher=enricher).aclose()
        assert s2.closed and pubmed.closed
        enricher.close.assert_awaited_once()
