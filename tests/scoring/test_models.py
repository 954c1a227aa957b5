# ABOUTME: Tests for scoring data models
# ABOUTME: Validates OverallQuality bounds and PredictionStatus helpers

import pytest

from app.scoring.models import OverallQuality, PredictionState, PredictionStatus


def test_overall_quality_rejects_unknown_tier():
    """Tier must be one of the six overall tiers"""
    with pytest.raises(ValueError):
        OverallQuality(quality="meh", emoji="🤷", confidence=3, combined_score=2.8)


def test_overall_quality_rejects_confidence_out_of_range():
    """Confidence is 0-5"""
    with pytest.raises(ValueError):
        OverallQuality(quality="good", emoji="👌", confidence=6, combined_score=3.8)


class TestPredictionStatus:
    """Tests for ML prediction status"""

    def test_absent_by_default(self):
        status = PredictionStatus()
        assert status.state is PredictionState.ABSENT
        assert status.external_score is None

    def test_pending_has_no_score(self):
        """Pending predictions aren't blended"""
        assert PredictionStatus.pending().external_score is None

    def test_resolved_exposes_score(self):
        assert PredictionStatus.resolved(7.5).external_score == 7.5

    @pytest.mark.parametrize("score", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_score_is_absent(self, score):
        """Garbage scores are treated as no prediction"""
        status = PredictionStatus.resolved(score)

        assert status.state is PredictionState.ABSENT
        assert status.external_score is None
