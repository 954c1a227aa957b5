# ABOUTME: Tide classifier deriving rising/dropping state and next high tide from hilo predictions
# ABOUTME: Ocean Beach works best on a dropping tide, so dropping scores high

import random
from datetime import datetime
from typing import Optional

from app.scoring.models import TideDirection, TideResult
from app.weather.models import TidePrediction, TideType

DROPPING_PHRASES = [
    "dropping (dialed!)",
    "dropping (money time!)",
    "dropping (green light!)",
    "dropping (go time!)",
    "dropping (optimal!)",
]

RISING_PHRASES = [
    "rising (patience pays)",
    "rising (almost there)",
    "rising (hold tight)",
    "rising (wait for it)",
    "rising (building up)",
]

NEUTRAL_SCORE = 2.5


def format_duration(delta_seconds: float) -> str:
    """Format seconds as "{h}h {m}m", flooring both parts."""
    total_minutes = int(delta_seconds // 60)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}m"


def analyze_tide(
    predictions: Optional[list[TidePrediction]],
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None,
) -> TideResult:
    """
    Work out where we are in the tide cycle.

    Args:
        predictions: High/low tide predictions, any order
        now: Evaluation instant (defaults to local now, NOAA times are local)
        rng: Picks the flavour text; never affects the score

    Returns:
        TideResult
    """
    if not predictions or len(predictions) < 2:
        return TideResult(
            quality="unknown",
            description="data unavailable",
            text="tide data unavailable",
            score=NEUTRAL_SCORE,
            direction=TideDirection.UNKNOWN,
            is_dropping=False,
        )

    now = now or datetime.now()
    rng = rng or random.Random()
    ordered = sorted(predictions, key=lambda p: p.timestamp)

    current_index = next((i for i, p in enumerate(ordered) if p.timestamp > now), -1)

    direction = TideDirection.UNKNOWN
    next_high: Optional[TidePrediction] = None

    if current_index > 0:
        last_tide = ordered[current_index - 1]
        next_tide = ordered[current_index]
        if last_tide.type is TideType.HIGH and next_tide.type is TideType.LOW:
            direction = TideDirection.DROPPING
        elif last_tide.type is TideType.LOW and next_tide.type is TideType.HIGH:
            direction = TideDirection.RISING
            next_high = next_tide

    if next_high is None and current_index >= 0:
        next_high = next((p for p in ordered[current_index:] if p.is_high), None)

    time_to_next_high = None
    if next_high is not None:
        time_to_next_high = format_duration((next_high.timestamp - now).total_seconds())

    if direction is TideDirection.DROPPING:
        quality, score = "excellent", 4.5
        description = rng.choice(DROPPING_PHRASES)
    elif direction is TideDirection.RISING:
        quality, score = "fair", 2.0
        description = rng.choice(RISING_PHRASES)
    else:
        quality, score = "unknown", NEUTRAL_SCORE
        description = "direction unclear"

    return TideResult(
        quality=quality,
        description=description,
        text=f"tide {description}",
        score=score,
        direction=direction,
        is_dropping=direction is TideDirection.DROPPING,
        next_high_tide=next_high,
        time_to_next_high=time_to_next_high,
    )
