# ABOUTME: Data models for wind, swell and tide classifications and the overall rating
# ABOUTME: Provides structured representation of scores, tiers and generated summaries

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from app.weather.models import TidePrediction


class TideDirection(str, Enum):
    RISING = "rising"
    DROPPING = "dropping"
    UNKNOWN = "unknown"


# Overall tiers, best first
OVERALL_TIERS = ("firing", "epic", "good", "fair", "poor", "terrible")


@dataclass(frozen=True)
class WindResult:
    """Wind classification"""
    quality: str  # excellent, good, fair, poor, dangerous
    description: str
    text: str  # e.g. "2kts E (offshore)"
    score: float  # 0-5
    is_offshore: bool
    octant: str


@dataclass(frozen=True)
class SwellResult:
    """Swell classification"""
    quality: str
    description: str
    text: str  # e.g. "6ft @ 16s (long period swell)"
    score: float
    swell_type: str
    height_ft: float
    period_s: float


@dataclass(frozen=True)
class TideResult:
    """Tide classification"""
    quality: str  # excellent, fair, unknown
    description: str
    text: str  # e.g. "tide dropping (dialed!)"
    score: float
    direction: TideDirection
    is_dropping: bool
    next_high_tide: Optional[TidePrediction] = None
    time_to_next_high: Optional[str] = None  # "{h}h {m}m"


@dataclass(frozen=True)
class OverallQuality:
    """Combined rating for current conditions"""
    quality: str  # one of OVERALL_TIERS
    emoji: str
    confidence: int  # 0-5
    combined_score: float
    is_firing: bool = False
    wind_override_applied: bool = False
    has_external_prediction: bool = False

    def __post_init__(self):
        if self.quality not in OVERALL_TIERS:
            raise ValueError(f"Quality must be one of {OVERALL_TIERS}, got {self.quality}")
        if not 0 <= self.confidence <= 5:
            raise ValueError(f"Confidence must be 0-5, got {self.confidence}")


class PredictionState(str, Enum):
    ABSENT = "absent"
    PENDING = "pending"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class PredictionStatus:
    """Where the external ML prediction stands for this evaluation"""
    state: PredictionState = PredictionState.ABSENT
    score: Optional[float] = None  # 0-10, only when resolved

    @classmethod
    def absent(cls) -> "PredictionStatus":
        return cls()

    @classmethod
    def pending(cls) -> "PredictionStatus":
        return cls(state=PredictionState.PENDING)

    @classmethod
    def resolved(cls, score: float) -> "PredictionStatus":
        """Resolved status, or absent when the score isn't a finite number."""
        if score is None or not math.isfinite(score):
            return cls.absent()
        return cls(state=PredictionState.RESOLVED, score=score)

    @property
    def external_score(self) -> Optional[float]:
        """Score to blend into the aggregate, None unless resolved."""
        if self.state is PredictionState.RESOLVED:
            return self.score
        return None


@dataclass(frozen=True)
class SummaryResult:
    """Narrative forecast plus everything that went into it"""
    text: str
    quality: str
    emoji: str
    confidence: int
    wind: WindResult
    swell: SwellResult
    tide: TideResult
    overall: OverallQuality

    @property
    def details(self) -> dict:
        return {"wind": self.wind, "swell": self.swell, "tide": self.tide}
