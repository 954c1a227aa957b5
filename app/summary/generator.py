# ABOUTME: Summary generator turning classifications into a one-line surf report
# ABOUTME: Picks templates by tier, adds tide timing advice and the ML status suffix

import random
from typing import Optional

from app.scoring.models import (
    OverallQuality,
    PredictionState,
    PredictionStatus,
    SwellResult,
    TideDirection,
    TideResult,
    WindResult,
)
from app.summary import phrases

GOOD_ENOUGH_TO_WAIT = 3.5


def tide_recommendation(
    tide: TideResult,
    wind: WindResult,
    swell: SwellResult,
    rng: Optional[random.Random] = None,
) -> str:
    """Short actionable advice based on where the tide is heading."""
    rng = rng or random.Random()

    if tide.direction is TideDirection.UNKNOWN:
        return phrases.MONITOR_TIDE

    if tide.is_dropping:
        return rng.choice(phrases.PERFECT_TIMING_PHRASES)

    if tide.direction is TideDirection.RISING and tide.next_high_tide and tide.time_to_next_high:
        turn_time = tide.next_high_tide.timestamp.strftime("%H:%M")
        if wind.score >= GOOD_ENOUGH_TO_WAIT and swell.score >= GOOD_ENOUGH_TO_WAIT:
            return phrases.CONSIDER_WAITING.format(time=turn_time, duration=tide.time_to_next_high)
        return phrases.TIDE_RISING.format(time=turn_time)

    return phrases.CHECK_TIDE


def prediction_suffix(prediction: Optional[PredictionStatus]) -> str:
    """Text appended to the summary describing the ML prediction."""
    if prediction is None or prediction.state is PredictionState.ABSENT:
        return ""
    if prediction.state is PredictionState.PENDING:
        return phrases.PREDICTION_PENDING_SUFFIX
    if prediction.score is None:
        return ""

    commentary = phrases.PREDICTION_COMMENTARY[-1][1]
    for min_score, text in phrases.PREDICTION_COMMENTARY:
        if prediction.score >= min_score:
            commentary = text
            break
    return phrases.PREDICTION_RESOLVED_SUFFIX.format(score=prediction.score, commentary=commentary)


class SummaryGenerator:
    """Generates the surf report text"""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def generate(
        self,
        wind: WindResult,
        swell: SwellResult,
        tide: TideResult,
        overall: OverallQuality,
        prediction: Optional[PredictionStatus] = None,
    ) -> str:
        """
        Generate summary text.

        Args:
            wind: Wind classification
            swell: Swell classification
            tide: Tide classification
            overall: Combined rating
            prediction: ML prediction status (absent / pending / resolved)

        Returns:
            Summary string
        """
        slots = {
            "wind_text": wind.text,
            "wind_description": wind.description,
            "swell_text": swell.text,
            "swell_description": swell.description,
            "tide_text": tide.text,
        }

        if overall.wind_override_applied:
            pool = phrases.WIND_OVERRIDE_TEMPLATES.get(
                overall.quality, phrases.WIND_OVERRIDE_TEMPLATES["terrible"]
            )
        else:
            slots["recommendation"] = tide_recommendation(tide, wind, swell, self.rng)
            pool = phrases.SUMMARY_TEMPLATES.get(overall.quality, phrases.SUMMARY_TEMPLATES["fair"])

        text = self.rng.choice(pool).format(**slots)
        return text + prediction_suffix(prediction)
