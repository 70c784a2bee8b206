"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from evidence_search.domain.entities import EvidenceCandidate

# ============================================================
# Domain Fixtures
# ============================================================


def make_candidate(title: str = "Magnesium and sleep", **kwargs) -> EvidenceCandidate:
    """Build an EvidenceCandidate with provider-like defaults."""
    kwargs.setdefault("authors", "Jane Doe")
    kwargs.setdefault("journal", "Sleep Medicine")
    kwargs.setdefault("year", 2021)
    return EvidenceCandidate(title=title, **kwargs)


@pytest.fixture
def sample_candidates():
    """Three provider results with distinct titles."""
    return [
        make_candidate("Magnesium supplementation and sleep quality", url="https://s2.example/1"),
        make_candidate("Sleep architecture in older adults", url="https://s2.example/2"),
        make_candidate("Dietary minerals and insomnia", url="https://pubmed.ncbi.nlm.nih.gov/3/"),
    ]


# ============================================================
# Provider Fakes
# ============================================================


class FakeProvider:
    """Provider double recording its calls."""

    def __init__(self, name, results=None, *, error=None, delay=0.0):
        self._name = name
        self._results = results or []
        self._error = error
        self._delay = delay
        self.calls = []
        self.closed = False

    @property
    def name(self):
        return self._name

    async def search(self, query, limit=5):
        self.calls.append((query, limit))
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._error is not None:
            raise self._error
        return list(self._results)

    async def close(self):
        self.closed = True


@pytest.fixture
def fake_provider_factory():
    return FakeProvider


# ============================================================
# Mock API Responses
# ============================================================


@pytest.fixture
def mock_s2_response():
    """Mock response from Semantic Scholar paper search."""
    return {
        "total": 2,
        "offset": 0,
        "data": [
            {
                "paperId": "abc123",
                "title": "Magnesium supplementation improves sleep",
                "authors": [{"authorId": "1", "name": "Alice Smith"}, {"authorId": "2", "name": "Bob Jones"}],
                "venue": "Nutrients",
                "year": 2020,
                "url": "https://www.semanticscholar.org/paper/abc123",
                "abstract": "A randomized trial of magnesium.",
                "citationCount": 42,
            },
            {
                "paperId": "def456",
                "title": "Sleep and minerals",
                "authors": [],
                "venue": "",
                "year": None,
                "url": None,
                "abstract": None,
            },
        ],
    }


@pytest.fixture
def mock_esearch_response():
    """Mock JSON response from NCBI ESearch."""
    return {
        "header": {"type": "esearch", "version": "0.3"},
        "esearchresult": {"count": "2", "retmax": "2", "idlist": ["11111111", "22222222"]},
    }


@pytest.fixture
def mock_efetch_xml():
    """Mock XML response from NCBI EFetch with two articles."""
    return """<?xml version="1.0" ?>
<PubmedArticleSet>
  <PubmedArticle>
    <MedlineCitation Status="MEDLINE" Owner="NLM">
      <PMID Version="1">11111111</PMID>
      <Article PubModel="Print">
        <Journal>
          <JournalIssue CitedMedium="Internet">
            <PubDate><Year>2019</Year><Month>Mar</Month></PubDate>
          </JournalIssue>
          <Title>Journal of Sleep Research</Title>
        </Journal>
        <ArticleTitle>Oral <i>magnesium</i> and sleep onset latency</ArticleTitle>
        <Abstract>
          <AbstractText Label="BACKGROUND">Background text.</AbstractText>
          <AbstractText Label="RESULTS">Results text.</AbstractText>
        </Abstract>
        <AuthorList CompleteYN="Y">
          <Author ValidYN="Y"><LastName>Nielsen</LastName><ForeName>Forrest H</ForeName></Author>
          <Author ValidYN="Y"><LastName>Lukaski</LastName><ForeName>Henry C</ForeName></Author>
        </AuthorList>
      </Article>
    </MedlineCitation>
  </PubmedArticle>
  <PubmedArticle>
    <MedlineCitation Status="MEDLINE" Owner="NLM">
      <PMID Version="1">22222222</PMID>
      <Article PubModel="Print">
        <Journal>
          <JournalIssue CitedMedium="Print">
            <PubDate><MedlineDate>2017 Nov-Dec</MedlineDate></PubDate>
          </JournalIssue>
          <Title>Sleep Medicine</Title>
        </Journal>
        <ArticleTitle>Mineral intake in shift workers</ArticleTitle>
        <AuthorList CompleteYN="Y">
          <Author ValidYN="Y"><LastName>Tanaka</LastName><ForeName>Hiro</ForeName></Author>
        </AuthorList>
      </Article>
    </MedlineCitation>
  </PubmedArticle>
</PubmedArticleSet>
"""


def make_http_response(status_code=200, json_data=None, text="", headers=None):
    """MagicMock shaped like an httpx.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.headers = headers or {}
    response.json.return_value = json_data
    response.text = text
    response.raise_for_status = MagicMock()
    return response


@pytest.fixture
def mock_completion_client():
    """CompletionClient double; set .complete_json.return_value per test."""
    client = MagicMock()
    client.complete_json = AsyncMock()
    client.close = AsyncMock()
    return client


@pytest.fixture
def candidate_factory():
    return make_candidate


@pytest.fixture
def http_response_factory():
    return make_http_response
