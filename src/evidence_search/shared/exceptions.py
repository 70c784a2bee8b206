"""
Exceptions raised by the evidence search pipeline.

    EvidenceSearchError
    ├── APIError                 provider / model call failed
    │   ├── RateLimitError       429 or open circuit; carries retry_after
    │   ├── NetworkError
    │   └── ServiceUnavailableError
    ├── ValidationError          bad caller input, HTTP 400
    │   ├── InvalidQueryError
    │   └── InvalidParameterError
    ├── DataError
    │   └── ParseError           provider or model payload unreadable
    └── ConfigurationError       bad settings or wiring

Only ValidationError and ConfigurationError reach callers of the literature
pipeline. API and data errors are absorbed where they occur and logged via
``to_dict()``.
"""

from __future__ import annotations

from typing import Any


class EvidenceSearchError(Exception):
    """Base class; ``operation`` and ``input_value`` describe what failed."""

    category = "api"

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        input_value: Any = None,
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.input_value = input_value

    def to_dict(self) -> dict[str, Any]:
        """Structured form for log lines."""
        result: dict[str, Any] = {"error": str(self), "category": self.category}
        if self.operation:
            result["operation"] = self.operation
        if self.input_value is not None:
            result["input"] = self.input_value
        return result


# =============================================================================
# API Errors
# =============================================================================


class APIError(EvidenceSearchError):
    """A provider or language-model call failed."""


class RateLimitError(APIError):
    """Rate limit hit, or the circuit breaker is refusing calls."""

    def __init__(
        self,
        message: str = "API rate limit exceeded",
        *,
        retry_after: float = 1.0,
        operation: str | None = None,
    ) -> None:
        super().__init__(message, operation=operation)
        self.retry_after = retry_after

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "retry_after_seconds": self.retry_after}


class NetworkError(APIError):
    def __init__(self, message: str = "Network connection failed", *, operation: str | None = None) -> None:
        super().__init__(message, operation=operation)


class ServiceUnavailableError(APIError):
    """The remote service answered with an error status."""

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        *,
        service: str = "provider",
        operation: str | None = None,
    ) -> None:
        super().__init__(f"{service}: {message}", operation=operation)
        self.service = service


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(EvidenceSearchError):
    category = "validation"


class InvalidQueryError(ValidationError):
    """The claim to search for is missing or blank."""

    def __init__(self, query: str | None, reason: str = "Claim is required for literature review") -> None:
        super().__init__(reason, operation="search_literature", input_value=query)


class InvalidParameterError(ValidationError):
    def __init__(self, param_name: str, value: Any, expected: str) -> None:
        super().__init__(
            f"Invalid parameter '{param_name}': {value!r} (expected {expected})",
            operation="search_literature",
            input_value=value,
        )
        self.param_name = param_name


# =============================================================================
# Data Errors
# =============================================================================


class DataError(EvidenceSearchError):
    category = "data"


class ParseError(DataError):
    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(f"Parse error ({source}): {message}" if source else f"Parse error: {message}")
        self.source = source


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(EvidenceSearchError):
    category = "config"
