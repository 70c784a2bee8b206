"""
Infrastructure Layer - External Services

Contains:
- sources: Semantic Scholar and PubMed clients
- llm: OpenAI completion client
"""

from .llm import OpenAICompletionClient
from .sources import BaseAPIClient, PubMedClient, SemanticScholarClient

__all__ = [
    "BaseAPIClient",
    "SemanticScholarClient",
    "PubMedClient",
    "OpenAICompletionClient",
]
