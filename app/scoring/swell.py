# ABOUTME: Swell classifier mapping wave height and period to a quality tier and 0-5 score
# ABOUTME: Rules overlap on purpose, so they are evaluated in a fixed order

from app.scoring.models import SwellResult
from app.scoring.wind import format_number

LONG_PERIOD_S = 15
MID_PERIOD_S = 12
BIG_SWELL_FT = 5


def analyze_swell(height: float, period: float) -> SwellResult:
    """
    Classify swell, first matching rule wins:

    1. >= 5ft and >= 15s: long period swell (excellent)
    2. < 5ft and >= 15s: small but good quality (good)
    3. >= 5ft and < 12s: windswell (fair)
    4. 12-15s: mid-period (fair)
    5. everything else: small & choppy (poor)
    """
    if height >= BIG_SWELL_FT and period >= LONG_PERIOD_S:
        quality, description, score, swell_type = "excellent", "long period swell", 5.0, "long-period"
    elif height < BIG_SWELL_FT and period >= LONG_PERIOD_S:
        quality, description, score, swell_type = "good", "small but good quality", 4.0, "small-good"
    elif height >= BIG_SWELL_FT and period < MID_PERIOD_S:
        quality, description, score, swell_type = "fair", "windswell", 2.0, "windswell"
    elif MID_PERIOD_S <= period < LONG_PERIOD_S:
        quality, description, score, swell_type = "fair", "mid-period", 3.0, "mid-period"
    else:
        quality, description, score, swell_type = "poor", "small & choppy", 1.0, "poor"

    return SwellResult(
        quality=quality,
        description=description,
        text=f"{format_number(height)}ft @ {format_number(period)}s ({description})",
        score=score,
        swell_type=swell_type,
        height_ft=height,
        period_s=period,
    )
