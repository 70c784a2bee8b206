"""
PubMed Integration

Biomedical citation search through NCBI E-utilities:
    1. ESearch (JSON) for PMIDs ranked by relevance
    2. EFetch (XML) for article details

API Documentation: https://www.ncbi.nlm.nih.gov/books/NBK25500/

An API key raises the NCBI limit from 3 to 10 requests per second.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import TYPE_CHECKING

import defusedxml.ElementTree as ET  # Security: prevent XML attacks

from evidence_search.domain.entities import (
    NO_ABSTRACT,
    UNKNOWN_JOURNAL,
    EvidenceCandidate,
    format_authors,
)
from evidence_search.infrastructure.sources.base_client import BaseAPIClient
from evidence_search.shared.exceptions import ParseError

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element

logger = logging.getLogger(__name__)

EUTILS_BASE = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils"
ESEARCH_URL = f"{EUTILS_BASE}/esearch.fcgi"
EFETCH_URL = f"{EUTILS_BASE}/efetch.fcgi"
PUBMED_ARTICLE_URL = "https://pubmed.ncbi.nlm.nih.gov/{pmid}/"

_YEAR_RE = re.compile(r"\b(\d{4})\b")


def _clean(text: str | None) -> str:
    return " ".join((text or "").split())


def _element_text(element: Element | None) -> str:
    """All text under an element, including nested markup like <i>."""
    if element is None:
        return ""
    return _clean("".join(element.itertext()))


class PubMedClient(BaseAPIClient):
    """
    PubMed E-utilities client.

    Usage:
        async with PubMedClient(api_key=key) as client:
            results = await client.search("magnesium AND sleep", limit=5)
    """

    _service_name = "PubMed"

    def __init__(
        self,
        api_key: str | None = None,
        email: str | None = None,
        timeout: float = 10.0,
    ):
        """
        Initialize client.

        Args:
            api_key: Optional NCBI API key
            email: Optional contact email NCBI asks tools to send
            timeout: Request timeout in seconds
        """
        self._api_key = api_key
        self._email = email
        # 3 req/s without a key, 10 req/s with one
        super().__init__(timeout=timeout, min_interval=0.1 if api_key else 0.34)

    def _params(self, **params: str) -> dict[str, str]:
        """Common E-utilities parameters plus authentication."""
        params = {k: v for k, v in params.items() if v}
        params["tool"] = "evidence-search"
        if self._email:
            params["email"] = self._email
        if self._api_key:
            params["api_key"] = self._api_key
        return params

    async def search(self, query: str, limit: int = 5) -> list[EvidenceCandidate]:
        """
        Search PubMed.

        Args:
            query: Search query (E-utilities term syntax)
            limit: Maximum results

        Returns:
            Evidence candidates in relevance order, [] on any failure
        """
        try:
            pmids = await self._search_ids(query, limit)
            if not pmids:
                return []

            results = await self._fetch_articles(pmids)
            logger.info(f"PubMed returned {len(results)} articles")
            return results

        except Exception as e:
            logger.exception(f"PubMed search failed: {e}")
            return []

    async def _search_ids(self, query: str, limit: int) -> list[str]:
        data = await self._make_request(
            ESEARCH_URL,
            params=self._params(
                db="pubmed",
                term=query,
                retmode="json",
                retmax=str(limit),
                sort="relevance",
            ),
        )
        if not isinstance(data, dict):
            return []

        idlist = (data.get("esearchresult") or {}).get("idlist") or []
        if not isinstance(idlist, list):
            raise ParseError("esearchresult.idlist is not a list", source=self._service_name)
        return [str(pmid) for pmid in idlist]

    async def _fetch_articles(self, pmids: list[str]) -> list[EvidenceCandidate]:
        xml_text = await self._make_request(
            EFETCH_URL,
            params=self._params(db="pubmed", id=",".join(pmids), retmode="xml"),
            expect_json=False,
        )
        if not isinstance(xml_text, str) or not xml_text.strip():
            return []

        root = ET.fromstring(xml_text)
        results = []
        for article in root.iter("PubmedArticle"):
            candidate = self._parse_article(article)
            if candidate is not None:
                results.append(candidate)
        return results

    def _parse_article(self, article: Element) -> EvidenceCandidate | None:
        """Map one <PubmedArticle> onto an EvidenceCandidate; None when untitled."""
        title = _element_text(article.find(".//ArticleTitle"))
        if not title:
            logger.debug("Skipping PubMed article without a title")
            return None

        pmid = _clean(article.findtext(".//MedlineCitation/PMID"))
        journal = _clean(article.findtext(".//Journal/Title")) or UNKNOWN_JOURNAL

        names: list[str] = []
        first_surname: str | None = None
        for author in article.iter("Author"):
            last_name = _clean(author.findtext("LastName"))
            fore_name = _clean(author.findtext("ForeName"))
            collective = _clean(author.findtext("CollectiveName"))
            if last_name:
                names.append(f"{fore_name} {last_name}".strip())
                if first_surname is None:
                    first_surname = last_name
            elif collective:
                names.append(collective)
                if first_surname is None:
                    first_surname = collective

        abstract_parts = [_element_text(p) for p in article.iter("AbstractText")]
        abstract = " ".join(p for p in abstract_parts if p) or NO_ABSTRACT

        return EvidenceCandidate(
            title=title,
            authors=format_authors(names, first_surname=first_surname),
            journal=journal,
            year=self._parse_year(article),
            summary=abstract,
            url=PUBMED_ARTICLE_URL.format(pmid=pmid) if pmid else None,
        )

    @staticmethod
    def _parse_year(article: Element) -> int:
        """Publication year; falls back to MedlineDate, then the current year."""
        for path in (".//PubDate/Year", ".//PubDate/MedlineDate", ".//ArticleDate/Year"):
            match = _YEAR_RE.search(article.findtext(path) or "")
            if match:
                return int(match.group(1))
        return date.today().year
