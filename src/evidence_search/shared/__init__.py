"""
Shared Kernel - Cross-cutting concerns.

Provides:
- Unified exception hierarchy
- Async utilities for concurrent provider calls
"""

from .async_utils import (
    CircuitBreaker,
    gather_with_errors,
    timeout_with_fallback,
)
from .exceptions import (
    APIError,
    ConfigurationError,
    DataError,
    EvidenceSearchError,
    InvalidParameterError,
    InvalidQueryError,
    NetworkError,
    ParseError,
    RateLimitError,
    ServiceUnavailableError,
    ValidationError,
)

__all__ = [
    # Exceptions
    "EvidenceSearchError",
    "APIError",
    "RateLimitError",
    "NetworkError",
    "ServiceUnavailableError",
    "ValidationError",
    "InvalidQueryError",
    "InvalidParameterError",
    "DataError",
    "ParseError",
    "ConfigurationError",
    # Async utilities
    "gather_with_errors",
    "CircuitBreaker",
    "timeout_with_fallback",
]
