# ABOUTME: Wind classifier mapping direction and speed to a quality tier and 0-5 score
# ABOUTME: East quadrant is offshore at Ocean Beach; onshore speed buckets come from Config presets

from typing import Optional

from app.config import Config
from app.scoring.models import WindResult

# (lower bound inclusive, octant), anything >= 337.5 wraps back to N
OCTANTS = [
    (337.5, "N"),
    (292.5, "NW"),
    (247.5, "W"),
    (202.5, "SW"),
    (157.5, "S"),
    (112.5, "SE"),
    (67.5, "E"),
    (22.5, "NE"),
]


def format_number(value: float) -> str:
    """Render 2.0 as "2" and 2.5 as "2.5"."""
    return f"{value:g}"


def direction_to_octant(degrees: float) -> str:
    """Convert degrees (any value, wraps at 360) to an 8-point compass label."""
    degrees = degrees % 360
    for lower_bound, label in OCTANTS:
        if degrees >= lower_bound:
            return label
    return "N"


def is_offshore(degrees: float) -> bool:
    return Config.OFFSHORE_DIRECTION_MIN <= degrees % 360 <= Config.OFFSHORE_DIRECTION_MAX


class WindClassifier:
    """Classifies wind for surf quality"""

    def __init__(self, thresholds: Optional[list] = None):
        self.thresholds = thresholds or Config.wind_thresholds()

    def classify(self, direction: float, speed: float) -> WindResult:
        """
        Classify wind by direction and speed.

        Offshore wins regardless of speed; strong offshore only costs score.
        Onshore wind is bucketed by speed, first bucket whose max is >= speed.

        Args:
            direction: Degrees the wind is coming from
            speed: Knots

        Returns:
            WindResult
        """
        octant = direction_to_octant(direction)

        if is_offshore(direction):
            quality, description = "excellent", "offshore"
            score = 5.0 if speed < Config.STRONG_OFFSHORE_KTS else 3.0
            offshore = True
        else:
            quality, score, description = "dangerous", 0.0, "victory at sea"
            for max_speed, bucket_quality, bucket_score, bucket_description in self.thresholds:
                if speed <= max_speed:
                    quality, score, description = bucket_quality, bucket_score, bucket_description
                    break
            offshore = False

        return WindResult(
            quality=quality,
            description=description,
            text=f"{format_number(speed)}kts {octant} ({description})",
            score=score,
            is_offshore=offshore,
            octant=octant,
        )


def analyze_wind(direction: float, speed: float) -> WindResult:
    return WindClassifier().classify(direction, speed)
