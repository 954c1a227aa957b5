# ABOUTME: Core scoring logic combining wind, swell and tide into an overall quality tier
# ABOUTME: Applies wind override rules, optional ML score blending and the firing override

import logging
import math
from typing import Optional

from app.scoring.models import OverallQuality, SwellResult, TideResult, WindResult

log = logging.getLogger(__name__)

# Firing conditions thresholds (drop everything day)
FIRING_WAVE_HEIGHT_MIN = 10.0
FIRING_WAVE_PERIOD_MIN = 18.0

# Onshore wind at or below these scores ruins everything
WIND_KILLS_IT_SCORE = 1
WIND_HURTS_IT_SCORE = 2

# (min combined score, tier, emoji, confidence without ML, confidence with ML), best first
TIER_THRESHOLDS = [
    (4.2, "epic", "⚡", 5, 5),
    (3.5, "good", "👌", 4, 4),
    (2.5, "fair", "🤷", 3, 4),
    (1.5, "poor", "😬", 2, 3),
]
TERRIBLE = ("terrible", "💀", 1, 2)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class QualityCalculator:
    """Calculates the overall surf quality tier"""

    def _is_firing_conditions(self, swell: SwellResult, tide: TideResult) -> bool:
        """
        Check for firing conditions.

        Firing requires:
        - Wave height: 10ft+
        - Period: 18s+
        - Dropping tide
        """
        return (
            swell.height_ft >= FIRING_WAVE_HEIGHT_MIN
            and swell.period_s >= FIRING_WAVE_PERIOD_MIN
            and tide.is_dropping
        )

    def calculate(
        self,
        wind: WindResult,
        swell: SwellResult,
        tide: TideResult,
        external_score: Optional[float] = None,
    ) -> OverallQuality:
        """
        Calculate overall quality.

        Scoring philosophy: onshore wind is a deal breaker. Strong onshore
        wind short-circuits everything; moderate onshore wind caps the score.
        Otherwise wind and swell carry 40% each and tide 20%, with the ML
        score (0-10) blended in at 30% when available.

        Args:
            wind: Wind classification
            swell: Swell classification
            tide: Tide classification
            external_score: Optional ML predicted score, 0-10

        Returns:
            OverallQuality
        """
        has_external = external_score is not None and math.isfinite(external_score)

        if not wind.is_offshore and wind.score <= WIND_KILLS_IT_SCORE:
            return OverallQuality(
                quality="terrible",
                emoji="💨",
                confidence=5,
                combined_score=0.5,
                wind_override_applied=True,
                has_external_prediction=has_external,
            )

        if not wind.is_offshore and wind.score <= WIND_HURTS_IT_SCORE:
            combined = min(2.5, wind.score * 0.6 + swell.score * 0.3 + tide.score * 0.1)
            if has_external:
                normalized = _clamp(external_score / 4, 0, 2.5)
                combined = min(2.5, combined * 0.8 + normalized * 0.2)
            if combined >= 2.0:
                quality, emoji = "poor", "😬"
            else:
                quality, emoji = "terrible", "💨"
            return OverallQuality(
                quality=quality,
                emoji=emoji,
                confidence=4,
                combined_score=combined,
                wind_override_applied=True,
                has_external_prediction=has_external,
            )

        combined = wind.score * 0.4 + swell.score * 0.4 + tide.score * 0.2
        if has_external:
            normalized = _clamp(external_score / 2, 0, 5)
            combined = combined * 0.7 + normalized * 0.3

        if self._is_firing_conditions(swell, tide):
            log.info(f"Firing conditions detected! Combined score: {combined:.2f}, elevated to firing")
            return OverallQuality(
                quality="firing",
                emoji="🔥",
                confidence=5,
                combined_score=combined,
                is_firing=True,
                has_external_prediction=has_external,
            )

        quality, emoji, confidence, confidence_with_ml = TERRIBLE
        for min_score, tier, tier_emoji, tier_confidence, tier_confidence_with_ml in TIER_THRESHOLDS:
            if combined >= min_score:
                quality, emoji = tier, tier_emoji
                confidence, confidence_with_ml = tier_confidence, tier_confidence_with_ml
                break

        return OverallQuality(
            quality=quality,
            emoji=emoji,
            confidence=confidence_with_ml if has_external else confidence,
            combined_score=combined,
            has_external_prediction=has_external,
        )
