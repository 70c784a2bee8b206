"""
Enrichment response schema.

The model must answer with exactly one shape:

    {"papers": [{"title": ..., "sampleSize": ..., "effectSize": ...,
                 "dosage": ..., "duration": ..., "evidenceGrade": ...,
                 "summary": ..., "details": ...}, ...]}

Unknown keys anywhere (including "url") make the whole response invalid.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PaperEstimate(BaseModel):
    """Model estimates for one paper, joined back on its echoed title."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title: str = Field(min_length=1)
    sample_size: int | None = Field(default=None, alias="sampleSize", ge=0)
    effect_size: str | None = Field(default=None, alias="effectSize")
    dosage: str | None = None
    duration: str | None = None
    evidence_grade: str | None = Field(default=None, alias="evidenceGrade")
    summary: str | None = None
    details: str | None = None


class EnrichmentResponse(BaseModel):
    """Top-level envelope of an enrichment completion."""

    model_config = ConfigDict(extra="forbid")

    papers: list[PaperEstimate]


def parse_enrichment_response(content: str) -> EnrichmentResponse:
    """
    Validate a completion against the schema.

    Raises:
        pydantic.ValidationError: Invalid JSON or any deviation from the shape
    """
    return EnrichmentResponse.model_validate_json(content)
