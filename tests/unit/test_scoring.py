"""Unit tests for relationship scoring logic"""

import pytest
from dataclasses import replace
from life_mapper.domain.models import (
    Addictions,
    ControllingBehaviour,
    FinancialAbuse,
    RelationshipData,
    RiskBand,
)
from life_mapper.domain.scoring import (
    RATING_FIELDS,
    calculate_base_score,
    clamp_rating,
    determine_band,
    evaluate_penalties,
    score_relationship,
)


def with_ratings(value, **overrides) -> RelationshipData:
    ratings = {name: value for name in RATING_FIELDS}
    ratings.update(overrides)
    return RelationshipData(**ratings)


def test_all_fives_is_healthy():
    """Test perfect ratings with no risk factors score 100"""
    assessment = score_relationship(with_ratings(5))

    assert assessment.score == 100
    assert assessment.band == RiskBand.HEALTHY
    assert assessment.red_flags == []
    assert assessment.suggestions == ["Overall healthy patterns. Keep nurturing habits."]


def test_all_ones_with_every_risk_factor():
    """Test worst case clamps the score to 0 with flags in fixed order"""
    data = replace(
        with_ratings(1),
        addictions=Addictions.ACTIVE,
        controlling_behaviour=ControllingBehaviour.YES,
        financial_abuse=FinancialAbuse.YES,
    )

    assessment = score_relationship(data)

    assert assessment.score == 0
    assert assessment.band == RiskBand.HIGH_RISK
    # Low trust and conflict ratings also trigger, after the categorical flags
    assert assessment.red_flags == [
        "Active addiction present",
        "Controlling/abusive behaviour",
        "Financial abuse indicators",
        "Low trust / emotional safety",
        "Poor conflict resolution",
    ]


def test_defaults_score_fifty_and_need_work_suggestions():
    """Test all-3 defaults give base 50, high-risk band, every improvement suggestion"""
    assessment = score_relationship(RelationshipData())

    assert assessment.score == 50
    assert assessment.band == RiskBand.HIGH_RISK
    assert assessment.suggestions == [
        "High risk signals. Seek guidance before major commitments.",
        "Weekly check-ins: wins, worries, plans.",
        "Create a shared budget & emergency fund.",
        "Write individual 3-year vision and merge.",
        "Clarify timing and parenting approach.",
        "Stabilize income before big commitments.",
        "Adopt continuous learning together.",
    ]


def test_base_score_scale():
    assert calculate_base_score(with_ratings(1)) == 0
    assert calculate_base_score(with_ratings(3)) == 50
    assert calculate_base_score(with_ratings(5)) == 100


def test_low_trust_penalty():
    """Test trust_safety <= 2 costs 15 points"""
    data = with_ratings(5, trust_safety=2)

    assessment = score_relationship(data)

    # average 4.7 -> 92.5, minus 15 -> 77.5 -> 78
    assert assessment.score == 78
    assert assessment.band == RiskBand.NEEDS_WORK
    assert assessment.red_flags == ["Low trust / emotional safety"]


def test_half_points_round_up():
    """Test x.5 scores round up, not to even"""
    # average 4.9 -> 97.5
    assert score_relationship(with_ratings(5, growth_mindset=4)).score == 98


def test_suggestions_only_for_ratings_below_four():
    data = with_ratings(5, communication=3, kids_alignment=1)

    suggestions = score_relationship(data).suggestions

    assert suggestions[1:] == [
        "Weekly check-ins: wins, worries, plans.",
        "Clarify timing and parenting approach.",
    ]


@pytest.mark.parametrize(
    "raw,expected",
    [(0, 1), (None, 1), ("abc", 1), (7, 5), (-2, 1), (2.5, 3), ("4", 4)],
)
def test_clamp_rating(raw, expected):
    """Test out-of-range and non-numeric ratings land in 1..5"""
    assert clamp_rating(raw) == expected


def test_penalties_are_cumulative():
    data = replace(with_ratings(5), addictions=Addictions.ACTIVE, financial_abuse=FinancialAbuse.YES)

    penalties = evaluate_penalties(data)

    assert [points for points, _ in penalties] == [25, 35]
    assert score_relationship(data).score == 40


def test_non_active_categoricals_do_not_penalize():
    data = replace(
        with_ratings(5),
        addictions=Addictions.RECOVERING,
        controlling_behaviour=ControllingBehaviour.SOMETIMES,
        financial_abuse=FinancialAbuse.MAYBE,
    )

    assert evaluate_penalties(data) == []


@pytest.mark.parametrize(
    "score,band",
    [(0, RiskBand.HIGH_RISK), (59, RiskBand.HIGH_RISK), (60, RiskBand.NEEDS_WORK), (79, RiskBand.NEEDS_WORK), (80, RiskBand.HEALTHY), (100, RiskBand.HEALTHY)],
)
def test_determine_band_boundaries(score, band):
    assert determine_band(score) == band
