# ABOUTME: Surf forecast pipeline: classify wind, swell and tide, rate overall, write the summary
# ABOUTME: Pure function of its inputs plus an injectable random source

import random
from datetime import datetime
from typing import Optional

from app.scoring.calculator import QualityCalculator
from app.scoring.models import PredictionStatus, SummaryResult
from app.scoring.swell import analyze_swell
from app.scoring.tide import analyze_tide
from app.scoring.wind import WindClassifier
from app.summary.generator import SummaryGenerator
from app.weather.models import RawReading, TidePrediction


def build_forecast(
    reading: RawReading,
    tides: Optional[list[TidePrediction]] = None,
    prediction: Optional[PredictionStatus] = None,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
    wind_thresholds: Optional[list] = None,
) -> SummaryResult:
    """
    Run the full pipeline for one reading.

    Args:
        reading: Buoy + wind reading
        tides: Hilo tide predictions, any order
        prediction: ML prediction status; a resolved score is blended into the rating
        rng: Random source for phrase selection (seed it for repeatable text)
        now: Evaluation instant for the tide classifier
        wind_thresholds: Onshore wind bucket table, defaults to the configured preset

    Returns:
        SummaryResult
    """
    rng = rng or random.Random()
    prediction = prediction or PredictionStatus.absent()

    wind = WindClassifier(wind_thresholds).classify(reading.wind_direction_deg, reading.wind_speed_kts)
    swell = analyze_swell(reading.wave_height_ft, reading.wave_period_s)
    tide = analyze_tide(tides, now=now, rng=rng)

    overall = QualityCalculator().calculate(wind, swell, tide, prediction.external_score)
    text = SummaryGenerator(rng).generate(wind, swell, tide, overall, prediction)

    return SummaryResult(
        text=text,
        quality=overall.quality,
        emoji=overall.emoji,
        confidence=overall.confidence,
        wind=wind,
        swell=swell,
        tide=tide,
        overall=overall,
    )
