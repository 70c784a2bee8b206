"""
Bibliographic source clients.

Each client exposes ``name`` and ``async search(query, limit)`` returning
EvidenceCandidate lists, and never raises from ``search``.
"""

from .base_client import BaseAPIClient
from .pubmed import PubMedClient
from .semantic_scholar import SemanticScholarClient

__all__ = [
    "BaseAPIClient",
    "PubMedClient",
    "SemanticScholarClient",
]
