"""
Runtime settings.

Read once from the environment at startup and passed explicitly to the
container; nothing else in the package reads os.environ. Blank values count
as unset.

Environment Variables:
    SEMANTIC_SCHOLAR_API_KEY: Optional Semantic Scholar API key
    PUBMED_API_KEY: Optional NCBI API key
    NCBI_EMAIL: Optional contact email for E-utilities
    OPENAI_API_KEY: Optional; enrichment is disabled without it
    OPENAI_MODEL: Model used for enrichment (default: gpt-4o)
    EVIDENCE_PROVIDER_TIMEOUT: Seconds per provider call (default: 10)
    EVIDENCE_ENRICHMENT_TIMEOUT: Seconds for the enrichment call (default: 30)
    EVIDENCE_RESULT_LIMIT: Default number of results (default: 5)
    EVIDENCE_API_HOST: Server host (default: 127.0.0.1)
    EVIDENCE_API_PORT: Server port (default: 8765)
    LOG_LEVEL: Root log level (default: INFO)
"""

from __future__ import annotations

import dataclasses
import math
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from evidence_search.shared.exceptions import ConfigurationError


def _get_str(env: Mapping[str, str], name: str) -> str | None:
    return (env.get(name) or "").strip() or None


N = TypeVar("N", int, float)


def _get_number(env: Mapping[str, str], name: str, default: N, kind: type[N]) -> N:
    raw = _get_str(env, name)
    if raw is None:
        return default
    try:
        value = kind(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{name} must be a {kind.__name__}, got {raw!r}",
            operation="load_settings",
            input_value=raw,
        ) from e
    if not math.isfinite(value) or value <= 0:
        raise ConfigurationError(
            f"{name} must be a finite positive number, got {raw!r}",
            operation="load_settings",
            input_value=raw,
        )
    return value


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, immutable after startup."""

    semantic_scholar_api_key: str | None = None
    pubmed_api_key: str | None = None
    ncbi_email: str | None = None
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o"
    provider_timeout: float = 10.0
    enrichment_timeout: float = 30.0
    result_limit: int = 5
    api_host: str = "127.0.0.1"
    api_port: int = 8765
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        """
        Build settings from environment variables.

        Raises:
            ConfigurationError: A numeric variable is malformed or not positive
        """
        env = os.environ if env is None else env
        return cls(
            semantic_scholar_api_key=_get_str(env, "SEMANTIC_SCHOLAR_API_KEY"),
            pubmed_api_key=_get_str(env, "PUBMED_API_KEY"),
            ncbi_email=_get_str(env, "NCBI_EMAIL"),
            openai_api_key=_get_str(env, "OPENAI_API_KEY"),
            openai_model=_get_str(env, "OPENAI_MODEL") or cls.openai_model,
            provider_timeout=_get_number(env, "EVIDENCE_PROVIDER_TIMEOUT", cls.provider_timeout, float),
            enrichment_timeout=_get_number(env, "EVIDENCE_ENRICHMENT_TIMEOUT", cls.enrichment_timeout, float),
            result_limit=_get_number(env, "EVIDENCE_RESULT_LIMIT", cls.result_limit, int),
            api_host=_get_str(env, "EVIDENCE_API_HOST") or cls.api_host,
            api_port=_get_number(env, "EVIDENCE_API_PORT", cls.api_port, int),
            log_level=(_get_str(env, "LOG_LEVEL") or cls.log_level).upper(),
        )

    @property
    def enrichment_enabled(self) -> bool:
        return self.openai_api_key is not None

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)
