"""Relationship scoring engine - ratings and risk flags to a 0-100 score"""

from typing import List, Tuple

from life_mapper.domain.models import (
    Addictions,
    ControllingBehaviour,
    FinancialAbuse,
    RelationshipAssessment,
    RelationshipData,
    RiskBand,
)
from life_mapper.utils.numbers import clamp, round_half_up, to_number

RATING_FIELDS = (
    "values_alignment",
    "financial_habits",
    "communication",
    "conflict_resolution",
    "supportiveness",
    "trust_safety",
    "work_reliability",
    "growth_mindset",
    "kids_alignment",
    "lifestyle_alignment",
)

# Rating below 4 -> suggestion, in this order
IMPROVEMENT_SUGGESTIONS = (
    ("communication", "Weekly check-ins: wins, worries, plans."),
    ("financial_habits", "Create a shared budget & emergency fund."),
    ("values_alignment", "Write individual 3-year vision and merge."),
    ("kids_alignment", "Clarify timing and parenting approach."),
    ("work_reliability", "Stabilize income before big commitments."),
    ("growth_mindset", "Adopt continuous learning together."),
)

BAND_HEADLINES = {
    RiskBand.HEALTHY: "Overall healthy patterns. Keep nurturing habits.",
    RiskBand.NEEDS_WORK: "Promising core; address amber areas together.",
    RiskBand.HIGH_RISK: "High risk signals. Seek guidance before major commitments.",
}


def clamp_rating(value: object) -> int:
    """Round a rating and clamp it into 1..5; missing or zero reads as 1"""
    number = to_number(value) or 1
    return int(clamp(round_half_up(number), 1, 5))


def calculate_base_score(data: RelationshipData) -> float:
    """
    Rescale the average rating (1..5) onto 0..100.

    average 1 -> 0, average 3 -> 50, average 5 -> 100
    """
    ratings = [clamp_rating(getattr(data, name)) for name in RATING_FIELDS]
    average = sum(ratings) / len(ratings)
    return (average - 1) / 4 * 100


def evaluate_penalties(data: RelationshipData) -> List[Tuple[int, str]]:
    """
    Collect triggered penalties as (points, red flag) in fixed order.

    Penalties are independent and cumulative:
    - active addiction: -25
    - controlling behaviour: -30
    - financial abuse indicators: -35
    - trust/safety rating <= 2: -15
    - conflict resolution rating <= 2: -10
    """
    penalties: List[Tuple[int, str]] = []

    if data.addictions == Addictions.ACTIVE:
        penalties.append((25, "Active addiction present"))
    if data.controlling_behaviour == ControllingBehaviour.YES:
        penalties.append((30, "Controlling/abusive behaviour"))
    if data.financial_abuse == FinancialAbuse.YES:
        penalties.append((35, "Financial abuse indicators"))
    if clamp_rating(data.trust_safety) <= 2:
        penalties.append((15, "Low trust / emotional safety"))
    if clamp_rating(data.conflict_resolution) <= 2:
        penalties.append((10, "Poor conflict resolution"))

    return penalties


def determine_band(score: int) -> RiskBand:
    """
    Map score to risk band.

    - < 60:  high-risk
    - 60-79: needs-work
    - 80+:   healthy
    """
    if score < 60:
        return RiskBand.HIGH_RISK
    elif score < 80:
        return RiskBand.NEEDS_WORK
    else:
        return RiskBand.HEALTHY


def build_suggestions(data: RelationshipData, band: RiskBand) -> List[str]:
    suggestions = [BAND_HEADLINES[band]]
    for name, text in IMPROVEMENT_SUGGESTIONS:
        if clamp_rating(getattr(data, name)) < 4:
            suggestions.append(text)
    return suggestions


def score_relationship(data: RelationshipData) -> RelationshipAssessment:
    """
    Main entry point: score a relationship check-in.

    Always produces a result; there are no error conditions once ratings are
    clamped.
    """
    penalties = evaluate_penalties(data)
    raw_score = calculate_base_score(data) - sum(points for points, _ in penalties)
    score = int(clamp(round_half_up(raw_score), 0, 100))
    band = determine_band(score)

    return RelationshipAssessment(
        score=score,
        band=band,
        red_flags=[flag for _, flag in penalties],
        suggestions=build_suggestions(data, band),
    )
