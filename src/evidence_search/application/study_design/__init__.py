"""Study design helpers."""

from .recruitment import HARD_CRITERIA_KEYWORDS, calculate_recruitment_difficulty

__all__ = ["calculate_recruitment_difficulty", "HARD_CRITERIA_KEYWORDS"]
