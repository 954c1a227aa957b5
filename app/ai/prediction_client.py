# ABOUTME: Client for the external ML surf prediction service
# ABOUTME: Returns a 0-10 predicted score or None; failures never reach the user

import logging
import math
from dataclasses import asdict, dataclass
from typing import Optional

import requests

from app.config import Config
from app.debug import debug_log
from app.scoring.models import TideDirection

log = logging.getLogger(__name__)

TIDE_PHASES = {
    TideDirection.RISING: "RISING",
    TideDirection.DROPPING: "FALLING",
    TideDirection.UNKNOWN: "UNKNOWN",
}


def wind_quadrant(degrees: float) -> str:
    """Collapse degrees to N/E/S/W, each quadrant centred on its cardinal point."""
    degrees = degrees % 360
    if degrees >= 315 or degrees < 45:
        return "N"
    if degrees < 135:
        return "E"
    if degrees < 225:
        return "S"
    return "W"


def buoy_reading_string(buoy_data: Optional[dict]) -> str:
    """Format a buoy feed dict as "{height_ft} {period_s} {direction_deg}"."""
    buoy_data = buoy_data or {}
    values = [buoy_data.get(key) for key in ("Hs", "Tp", "Dp")]
    return " ".join("0" if value is None else str(value) for value in values)


@dataclass(frozen=True)
class PredictionRequest:
    tidePhase: str
    windDirection: str
    proxyBuoyReading1: str
    proxyBuoyReading2: str

    @classmethod
    def build(
        cls,
        tide_direction: TideDirection,
        wind_direction_deg: float,
        primary_buoy: Optional[dict],
        proxy_buoy: Optional[dict],
    ) -> "PredictionRequest":
        return cls(
            tidePhase=TIDE_PHASES.get(tide_direction, "UNKNOWN"),
            windDirection=wind_quadrant(wind_direction_deg),
            proxyBuoyReading1=buoy_reading_string(primary_buoy),
            proxyBuoyReading2=buoy_reading_string(proxy_buoy or primary_buoy),
        )


class PredictionClient:
    """Posts conditions to the ML service and reads back predictedScore"""

    def __init__(self, url: str = None, timeout: int = None):
        self.url = url if url is not None else Config.ML_PREDICTION_URL
        self.timeout = timeout or Config.HTTP_TIMEOUT_SECONDS

    @property
    def is_configured(self) -> bool:
        return bool(self.url)

    def predict(self, request: PredictionRequest) -> Optional[float]:
        """
        Fetch a predicted score.

        Returns:
            Score (0-10) on success, None on any error or when no URL is configured.
        """
        if not self.is_configured:
            return None

        debug_log(f"Requesting prediction: {request}", "ML")

        try:
            response = requests.post(self.url, json=asdict(request), timeout=self.timeout)
            if response.status_code != 200:
                log.error(f"ML prediction HTTP error: {response.status_code} - {response.text}")
                return None
            score = float(response.json()["predictedScore"])
        except requests.RequestException as e:
            log.error(f"ML prediction request failed: {e}")
            return None
        except (KeyError, TypeError, ValueError) as e:
            log.error(f"ML prediction response parsing failed: {e}")
            return None

        if not math.isfinite(score):
            log.error(f"ML prediction returned a non-finite score: {score}")
            return None

        debug_log(f"Predicted score: {score}", "ML")
        return score
