"""
Static fallback evidence.

Returned by the HTTP handler in test mode so the wizard can be exercised
without any network calls. These records carry no ``url`` and are therefore
never presented as coming from an academic database.
"""

from __future__ import annotations

from evidence_search.domain.entities import EvidenceCandidate, EvidenceGrade

FALLBACK_EVIDENCE: tuple[EvidenceCandidate, ...] = (
    EvidenceCandidate(
        title="Effects of magnesium supplementation on sleep quality",
        authors="Nielsen, FH. et al.",
        journal="Journal of Sleep Research",
        year=2018,
        sample_size=126,
        effect_size="18.7% increase in REM",
        dosage="320mg daily",
        duration="8 weeks",
        evidence_grade=EvidenceGrade.HIGH,
        summary=(
            "Double-blind, placebo-controlled trial examining the effects of magnesium "
            "supplementation on sleep architecture in adults with mild insomnia."
        ),
        details=(
            "Significant improvements were observed in REM sleep duration, sleep efficiency, "
            "and subjective sleep quality."
        ),
    ),
    EvidenceCandidate(
        title="Magnesium glycinate and sleep architecture: A wearable study",
        authors="Johnson, KL. et al.",
        journal="Sleep Medicine",
        year=2020,
        sample_size=48,
        effect_size="14.2% increase in REM",
        dosage="300mg daily",
        duration="4 weeks",
        evidence_grade=EvidenceGrade.MODERATE,
        summary="Study using consumer wearable devices to track sleep changes with magnesium supplementation.",
        details=(
            "Participants wore Oura rings to monitor sleep stages. Results showed moderate "
            "improvements in REM sleep duration and efficiency."
        ),
    ),
    EvidenceCandidate(
        title="Effects of mineral supplementation on sleep parameters",
        authors="Tanaka, H. et al.",
        journal="Sleep Science",
        year=2019,
        sample_size=22,
        effect_size="9.8% increase in REM",
        dosage="250mg daily",
        duration="3 weeks",
        evidence_grade=EvidenceGrade.LOW,
        summary="Small pilot study on the effects of various minerals on sleep.",
        details="Limited sample size but showed trends toward improved REM sleep with magnesium supplementation.",
    ),
)


def get_fallback_evidence() -> list[EvidenceCandidate]:
    return list(FALLBACK_EVIDENCE)
