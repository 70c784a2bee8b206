"""
HTTP API for the study-design wizard.

Exposes literature review generation, recruitment difficulty scoring and a
health check over FastAPI.
"""

from .server import create_api_server, run_api_server

__all__ = ["create_api_server", "run_api_server"]
