"""
Recruitment difficulty heuristic for the study-design step.

Scores how hard enrollment is likely to be on a 1-10 scale from the
inclusion and exclusion criteria alone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

BASE_DIFFICULTY = 3
MAX_DIFFICULTY = 10

HARD_CRITERIA_KEYWORDS: tuple[str, ...] = (
    "rare",
    "specific",
    "severe",
    "unusual",
    "uncommon",
    "specialized",
    "narrow",
    "restricted",
    "limited",
    "unique",
    "exclusive",
)


def calculate_recruitment_difficulty(
    inclusion_criteria: Sequence[str],
    exclusion_criteria: Sequence[str],
) -> int:
    """
    Estimate recruitment difficulty.

    Starts at 3; more than 8 criteria adds 2, more than 5 adds 1; any
    criterion mentioning a hard-to-recruit keyword adds 1 (once). Capped at 10.
    """
    difficulty = BASE_DIFFICULTY

    total_criteria = len(inclusion_criteria) + len(exclusion_criteria)
    if total_criteria > 8:
        difficulty += 2
    elif total_criteria > 5:
        difficulty += 1

    all_criteria = [c.lower() for c in (*inclusion_criteria, *exclusion_criteria)]
    if any(keyword in criterion for keyword in HARD_CRITERIA_KEYWORDS for criterion in all_criteria):
        difficulty += 1

    return min(MAX_DIFFICULTY, difficulty)
