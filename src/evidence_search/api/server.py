"""
HTTP API Server for the study-design wizard.

Endpoints:
    POST /api/literature-review/generate          claim -> evidence list
    POST /api/study-design/recruitment-difficulty criteria -> 1-10 score
    GET  /health                                  provider/enrichment status

Error bodies follow the wizard client's contract: ``{"message": ...}`` for
400s and ``{"message": ..., "error": ...}`` for 500s.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from evidence_search.application.search import get_fallback_evidence
from evidence_search.application.study_design import calculate_recruitment_difficulty
from evidence_search.config import Settings
from evidence_search.container import ApplicationContainer
from evidence_search.shared.exceptions import ConfigurationError, ValidationError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from evidence_search.application.search import LiteratureSearchService

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Pydantic models for API requests/responses
class LiteratureReviewRequest(BaseModel):
    """Request body for literature review generation."""

    model_config = ConfigDict(populate_by_name=True)

    claim: str | None = None
    test_mode: bool = Field(default=False, alias="testMode")


class RecruitmentDifficultyRequest(BaseModel):
    """Request body for recruitment difficulty scoring."""

    model_config = ConfigDict(populate_by_name=True)

    inclusion_criteria: list[str] = Field(default_factory=list, alias="inclusionCriteria")
    exclusion_criteria: list[str] = Field(default_factory=list, alias="exclusionCriteria")


class RecruitmentDifficultyResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    recruitment_difficulty: int = Field(alias="recruitmentDifficulty")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    providers: list[str]
    enrichment: bool


def _message(status_code: int, message: str, error: str | None = None) -> JSONResponse:
    body: dict[str, Any] = {"message": message}
    if error is not None:
        body["error"] = error
    return JSONResponse(status_code=status_code, content=body)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the search service on startup unless one was injected."""
    owned = False
    if app.state.search_service is None:
        settings: Settings = app.state.settings or Settings.from_env()
        container = ApplicationContainer()
        container.config.from_dict(settings.to_dict())
        app.state.search_service = container.literature_service()
        owned = True
        logger.info(
            f"Literature search ready: providers={app.state.search_service.provider_names}, "
            f"enrichment={'on' if settings.enrichment_enabled else 'off'}"
        )

    yield

    if owned:
        logger.info("HTTP API server shutting down")
        await app.state.search_service.aclose()


def create_api_server(
    settings: Settings | None = None,
    search_service: LiteratureSearchService | None = None,
) -> FastAPI:
    """
    Create the FastAPI server.

    Args:
        settings: Settings used to build the service on startup (default: from env)
        search_service: Pre-built service; skips container wiring (tests)

    Returns:
        Configured FastAPI instance.
    """
    app = FastAPI(
        title="Evidence Search API",
        description="Literature evidence and study-design helpers for the protocol wizard.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.search_service = search_service

    # Add CORS middleware for local development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
        return _message(400, "Invalid request body")

    @app.get("/health", response_model=HealthResponse)
    async def health_check(request: Request) -> HealthResponse:
        """Health check endpoint."""
        service = request.app.state.search_service
        if service is None:
            return HealthResponse(status="initializing", providers=[], enrichment=False)
        return HealthResponse(
            status="healthy",
            providers=service.provider_names,
            enrichment=service.enrichment_enabled,
        )

    @app.post("/api/literature-review/generate")
    async def generate_literature_review(body: LiteratureReviewRequest, request: Request) -> JSONResponse:
        """
        Search the literature for evidence about a claim.

        In test mode the static fallback evidence is returned without any
        network calls.
        """
        if not body.claim or not body.claim.strip():
            return _message(400, "Claim is required for literature review")

        if body.test_mode:
            logger.info("Test mode enabled, returning fallback literature review data")
            return JSONResponse(content=[c.to_dict() for c in get_fallback_evidence()])

        service = request.app.state.search_service
        if service is None:
            return _message(503, "Literature search is not initialized")

        try:
            evidence = await service.search_literature(body.claim)
        except ValidationError as e:
            logger.warning(f"Rejected literature review request: {e.to_dict()}")
            return _message(400, str(e))
        except Exception as e:
            logger.exception(f"Error generating literature review: {e}")
            return _message(500, "Failed to generate literature review", error=str(e))

        return JSONResponse(content=[c.to_dict() for c in evidence])

    @app.post(
        "/api/study-design/recruitment-difficulty",
        response_model=RecruitmentDifficultyResponse,
        response_model_by_alias=True,
    )
    async def recruitment_difficulty(body: RecruitmentDifficultyRequest) -> RecruitmentDifficultyResponse:
        """Score recruitment difficulty (1-10) from inclusion/exclusion criteria."""
        score = calculate_recruitment_difficulty(body.inclusion_criteria, body.exclusion_criteria)
        return RecruitmentDifficultyResponse(recruitment_difficulty=score)

    return app


# Create the app instance (settings are read from the environment on startup)
app = create_api_server()


def run_api_server(settings: Settings) -> None:
    """
    Run the HTTP API server.

    Args:
        settings: Bind address, API keys and timeouts
    """
    import uvicorn

    logger.info(f"Starting HTTP API server on {settings.api_host}:{settings.api_port}")
    uvicorn.run(
        create_api_server(settings=settings),
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Evidence Search HTTP API Server")
    parser.add_argument("--host", help="Host to bind to (default: EVIDENCE_API_HOST or 127.0.0.1)")
    parser.add_argument("--port", type=int, help="Port to bind to (default: EVIDENCE_API_PORT or 8765)")
    parser.add_argument("--log-level", help="Log level, e.g. DEBUG or INFO (default: LOG_LEVEL or INFO)")
    args = parser.parse_args()

    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        logging.basicConfig(level=logging.ERROR, format=LOG_FORMAT)
        logger.error(f"Invalid configuration: {e.to_dict()}")
        raise SystemExit(2) from e

    overrides = {
        "api_host": args.host,
        "api_port": args.port,
        "log_level": args.log_level.upper() if args.log_level else None,
    }
    settings = dataclasses.replace(settings, **{k: v for k, v in overrides.items() if v is not None})

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    run_api_server(settings)


if __name__ == "__main__":
    main()
