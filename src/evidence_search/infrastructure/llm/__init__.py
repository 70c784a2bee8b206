"""Language-model clients."""

from .openai_client import DEFAULT_MODEL, OpenAICompletionClient

__all__ = ["DEFAULT_MODEL", "OpenAICompletionClient"]
