"""
Evidence Enricher - Language-model backfill of study characteristics.

Sends all candidates to the model in one batched call and merges the
returned estimates (sample size, effect size, dosage, duration, grade,
summary, details) back onto the candidates whose title the model echoed.

Enrichment is best effort. Any failure (model error, invalid JSON, a reply
that deviates from the schema) returns the input list unchanged.
"""

from __future__ import annotations

import dataclasses
import logging
import string
from typing import TYPE_CHECKING, Protocol

import pydantic

from evidence_search.domain.entities import EvidenceGrade, normalize_title
from evidence_search.shared.exceptions import EvidenceSearchError

from .schema import PaperEstimate, parse_enrichment_response

if TYPE_CHECKING:
    from collections.abc import Sequence

    from evidence_search.domain.entities import EvidenceCandidate

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = """You are a research analyst specializing in health studies. Extract key study characteristics from these papers.

For each paper:
1. Estimate the sample size based on typical studies of this type
2. Identify any reported effect sizes or main findings
3. Note any dosage information if applicable
4. Estimate study duration
5. Assign an evidence grade (High, Moderate, or Low) based on journal quality, sample size, and study design
6. Write a concise 1-2 sentence summary focusing on methodology
7. Write 2-3 sentences of additional details about methods and findings

Return a JSON object with a single key "papers" holding one element per paper:
{
  "papers": [
    {
      "title": string (copy the paper's title exactly as given),
      "sampleSize": integer (estimate if not provided),
      "effectSize": string,
      "dosage": string,
      "duration": string,
      "evidenceGrade": "High" | "Moderate" | "Low",
      "summary": string,
      "details": string
    }
  ]
}
Do not add any other keys."""


class CompletionClient(Protocol):
    """Anything that can run one JSON-mode chat completion."""

    async def complete_json(self, system_prompt: str, user_prompt: str) -> str: ...


def build_user_prompt(candidates: Sequence[EvidenceCandidate]) -> str:
    """One block per paper with the bibliographic fields the model needs."""
    blocks = [
        f"Paper {i}:\n"
        f"Title: {c.title}\n"
        f"Authors: {c.authors}\n"
        f"Journal: {c.journal}\n"
        f"Year: {c.year}\n"
        f"Abstract: {c.summary}"
        for i, c in enumerate(candidates, start=1)
    ]
    return "\n\n".join(blocks)


def apply_estimate(candidate: EvidenceCandidate, estimate: PaperEstimate) -> EvidenceCandidate:
    """
    Merge one estimate onto a candidate.

    Fields the model left empty keep the candidate's value; the grade is
    always normalized. Title and url are never touched.
    """
    return dataclasses.replace(
        candidate,
        sample_size=estimate.sample_size if estimate.sample_size is not None else candidate.sample_size,
        effect_size=estimate.effect_size or candidate.effect_size,
        dosage=estimate.dosage or candidate.dosage,
        duration=estimate.duration or candidate.duration,
        evidence_grade=EvidenceGrade.normalize(estimate.evidence_grade),
        summary=estimate.summary or candidate.summary,
        details=estimate.details or candidate.details,
    )


_TITLE_EDGE_CHARS = string.punctuation + string.whitespace


def title_join_key(title: str) -> str:
    """
    Looser title identity for matching model echoes to candidates.

    Like the dedupe key, but edge punctuation and brackets are also dropped:
    "[Magnesium and sleep]." and "magnesium and sleep" join.
    """
    return normalize_title(title).strip(_TITLE_EDGE_CHARS)


def apply_estimates(
    candidates: Sequence[EvidenceCandidate],
    estimates: Sequence[PaperEstimate],
) -> list[EvidenceCandidate]:
    """Join estimates to candidates by title_join_key; unmatched candidates pass through."""
    by_title: dict[str, PaperEstimate] = {}
    for estimate in estimates:
        by_title.setdefault(title_join_key(estimate.title), estimate)

    enriched = []
    for candidate in candidates:
        estimate = by_title.get(title_join_key(candidate.title))
        enriched.append(apply_estimate(candidate, estimate) if estimate else candidate)

    unmatched = len(by_title.keys() - {title_join_key(c.title) for c in candidates})
    if unmatched:
        logger.warning(f"Enrichment returned {unmatched} estimate(s) matching no candidate title")
    return enriched


class EvidenceEnricher:
    """
    Batched language-model enrichment.

    Usage:
        enricher = EvidenceEnricher(OpenAICompletionClient(api_key=key))
        enriched = await enricher.enrich(candidates)
    """

    def __init__(self, client: CompletionClient) -> None:
        self._client = client

    async def enrich(self, candidates: list[EvidenceCandidate]) -> list[EvidenceCandidate]:
        """
        Enrich candidates in one model call.

        Returns:
            Enriched copies, or the very same list when enrichment fails
        """
        if not candidates:
            return candidates

        try:
            content = await self._client.complete_json(SYSTEM_PROMPT, build_user_prompt(candidates))
            response = parse_enrichment_response(content)
        except pydantic.ValidationError as e:
            logger.warning(f"Enrichment response rejected ({e.error_count()} schema errors), using provider data")
            return candidates
        except EvidenceSearchError as e:
            logger.warning(f"Enrichment failed, using provider data: {e.to_dict()}")
            return candidates
        except Exception as e:
            logger.exception(f"Unexpected enrichment failure, using provider data: {e}")
            return candidates

        enriched = apply_estimates(candidates, response.papers)
        matched = sum(1 for before, after in zip(candidates, enriched, strict=True) if before is not after)
        logger.info(f"Enriched {matched}/{len(candidates)} candidates")
        return enriched

    async def close(self) -> None:
        close = getattr(self._client, "close", None)
        if close is not None:
            await close()
