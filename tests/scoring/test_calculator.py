# ABOUTME: Tests for overall quality calculation
# ABOUTME: Validates wind overrides, weighted blending, ML blending and the firing override

import pytest

from app.scoring.calculator import QualityCalculator
from app.scoring.models import SwellResult, TideDirection, TideResult, WindResult
from app.scoring.swell import analyze_swell
from app.scoring.wind import analyze_wind


def make_wind(score: float, is_offshore: bool = False) -> WindResult:
    return WindResult(
        quality="fair",
        description="test",
        text=f"wind score {score}",
        score=score,
        is_offshore=is_offshore,
        octant="W",
    )


def make_swell(score: float, height: float = 3.0, period: float = 10.0) -> SwellResult:
    return SwellResult(
        quality="fair",
        description="test",
        text=f"swell score {score}",
        score=score,
        swell_type="test",
        height_ft=height,
        period_s=period,
    )


def make_tide(score: float = 2.5, dropping: bool = False) -> TideResult:
    return TideResult(
        quality="excellent" if dropping else "unknown",
        description="test",
        text="tide test",
        score=score,
        direction=TideDirection.DROPPING if dropping else TideDirection.UNKNOWN,
        is_dropping=dropping,
    )


calculator = QualityCalculator()


class TestHardWindOverride:
    """Strong onshore wind makes everything terrible"""

    @pytest.mark.parametrize("wind_score", [0, 1])
    def test_terrible_regardless_of_swell_and_tide(self, wind_score):
        """wind.score <= 1 onshore: terrible, 0.5, confidence 5"""
        result = calculator.calculate(make_wind(wind_score), make_swell(5, 12, 20), make_tide(4.5, True))

        assert result.quality == "terrible"
        assert result.emoji == "💨"
        assert result.confidence == 5
        assert result.combined_score == 0.5
        assert result.wind_override_applied is True
        assert result.is_firing is False

    def test_25kt_onshore_is_terrible(self):
        """Real classifier output: 25kts from the west"""
        result = calculator.calculate(analyze_wind(270, 25), analyze_swell(6, 16), make_tide(4.5, True))

        assert result.quality == "terrible"
        assert result.wind_override_applied is True

    def test_ml_score_does_not_rescue_it(self):
        """Even a perfect ML score doesn't lift a blown-out day"""
        result = calculator.calculate(make_wind(0), make_swell(5), make_tide(), external_score=10)

        assert result.quality == "terrible"
        assert result.has_external_prediction is True


class TestModerateWindOverride:
    """Moderate onshore wind caps the score at 2.5"""

    def test_poor_when_swell_is_good(self):
        """2*0.6 + 5*0.3 + 4.5*0.1 = 3.15, capped to 2.5 -> poor"""
        result = calculator.calculate(make_wind(2), make_swell(5), make_tide(4.5))

        assert result.combined_score == pytest.approx(2.5)
        assert result.quality == "poor"
        assert result.emoji == "😬"
        assert result.confidence == 4
        assert result.wind_override_applied is True

    def test_terrible_when_swell_is_bad(self):
        """2*0.6 + 1*0.3 + 2*0.1 = 1.7 -> terrible"""
        result = calculator.calculate(make_wind(2), make_swell(1), make_tide(2.0))

        assert result.combined_score == pytest.approx(1.7)
        assert result.quality == "terrible"
        assert result.emoji == "💨"

    def test_ml_blend_uses_quarter_scale(self):
        """1.7*0.8 + clamp(8/4)*0.2 = 1.76"""
        result = calculator.calculate(make_wind(2), make_swell(1), make_tide(2.0), external_score=8)

        assert result.combined_score == pytest.approx(1.76)
        assert result.has_external_prediction is True

    def test_ml_blend_still_capped(self):
        """Capped at 2.5 even with a huge ML score"""
        result = calculator.calculate(make_wind(2), make_swell(5), make_tide(4.5), external_score=100)

        assert result.combined_score <= 2.5

    def test_offshore_skips_override(self):
        """Low score but offshore goes down the normal path"""
        result = calculator.calculate(make_wind(2, is_offshore=True), make_swell(5), make_tide(4.5))

        assert result.wind_override_applied is False


class TestNormalPath:
    """Weighted 40/40/20 blend"""

    def test_epic(self):
        """5*0.4 + 5*0.4 + 4.5*0.2 = 4.9 -> epic"""
        result = calculator.calculate(make_wind(5, True), make_swell(5, 6, 16), make_tide(4.5, True))

        assert result.combined_score == pytest.approx(4.9)
        assert result.quality == "epic"
        assert result.emoji == "⚡"
        assert result.confidence == 5

    @pytest.mark.parametrize("wind,swell,tide,quality,confidence", [
        (4, 4, 2.5, "good", 4),       # 3.7
        (4, 2, 2.5, "fair", 3),       # 2.9
        (2.5, 1, 2.0, "poor", 2),     # 1.8
    ])
    def test_tiers(self, wind, swell, tide, quality, confidence):
        """Thresholds 4.2 / 3.5 / 2.5 / 1.5"""
        result = calculator.calculate(make_wind(wind), make_swell(swell), make_tide(tide))

        assert result.quality == quality
        assert result.confidence == confidence
        assert result.wind_override_applied is False

    def test_terrible_below_1_5(self):
        """2.5*0.4 + 0 + 0 = 1.0 -> terrible"""
        result = calculator.calculate(make_wind(2.5), make_swell(0), make_tide(0))

        assert result.combined_score == pytest.approx(1.0)
        assert result.quality == "terrible"
        assert result.emoji == "💀"
        assert result.confidence == 1

    def test_ml_blend(self):
        """3.7*0.7 + (6/2)*0.3 = 3.49 -> fair, confidence 4 with ML"""
        result = calculator.calculate(make_wind(4), make_swell(4), make_tide(2.5), external_score=6)

        assert result.combined_score == pytest.approx(3.49)
        assert result.quality == "fair"
        assert result.confidence == 4
        assert result.has_external_prediction is True

    def test_ml_score_is_clamped(self):
        """Out of range ML scores are clamped to 0-10"""
        high = calculator.calculate(make_wind(4), make_swell(4), make_tide(2.5), external_score=50)
        low = calculator.calculate(make_wind(4), make_swell(4), make_tide(2.5), external_score=-5)

        assert high.combined_score == pytest.approx(3.7 * 0.7 + 5 * 0.3)
        assert low.combined_score == pytest.approx(3.7 * 0.7)

    def test_nan_ml_score_is_ignored(self):
        """NaN would otherwise clamp to a perfect score"""
        result = calculator.calculate(make_wind(4), make_swell(4), make_tide(2.5), external_score=float("nan"))

        assert result.combined_score == pytest.approx(3.7)
        assert result.has_external_prediction is False

    @pytest.mark.parametrize("wind,swell,tide,external,confidence", [
        (4, 4, 2.5, 7, 4),     # good with ML
        (2.5, 1, 2.0, 4, 3),   # poor with ML
        (2.5, 0, 0, 0, 2),     # terrible with ML
    ])
    def test_confidence_with_ml(self, wind, swell, tide, external, confidence):
        """ML presence raises confidence for the lower tiers"""
        result = calculator.calculate(make_wind(wind), make_swell(swell), make_tide(tide), external_score=external)
        assert result.confidence == confidence


class TestFiring:
    """Big, long period swell on a dropping tide"""

    def test_firing_overrides_tier(self):
        """12ft @ 20s with dropping tide is firing whatever the blend says"""
        result = calculator.calculate(make_wind(2.5), make_swell(1, 12, 20), make_tide(4.5, True))

        assert result.is_firing is True
        assert result.quality == "firing"
        assert result.emoji == "🔥"
        assert result.confidence == 5

    def test_not_firing_without_dropping_tide(self):
        """Rising tide isn't firing"""
        result = calculator.calculate(make_wind(5, True), make_swell(5, 12, 20), make_tide(2.0, False))

        assert result.is_firing is False

    def test_not_firing_when_period_short(self):
        """17.9s doesn't count"""
        result = calculator.calculate(make_wind(5, True), make_swell(5, 12, 17.9), make_tide(4.5, True))

        assert result.is_firing is False
        assert result.quality == "epic"
