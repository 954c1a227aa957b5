# ABOUTME: Data models for buoy, wind and tide feed readings
# ABOUTME: Provides structured representation of the raw inputs to the surf scoring pipeline

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional

log = logging.getLogger(__name__)

NOAA_TIME_FORMAT = "%Y-%m-%d %H:%M"


def parse_number(value: Any) -> float:
    """Parse a feed value as float, treating anything unparseable as 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


@dataclass(frozen=True)
class RawReading:
    """Buoy + wind reading for a single evaluation"""
    wave_height_ft: float
    wave_period_s: float
    wave_direction_deg: int
    wind_speed_kts: float
    wind_direction_deg: float

    def __str__(self) -> str:
        return (
            f"Waves: {self.wave_height_ft}ft @ {self.wave_period_s}s from {self.wave_direction_deg}°, "
            f"Wind: {self.wind_speed_kts}kts from {self.wind_direction_deg}°"
        )

    @classmethod
    def from_feeds(cls, buoy_data: Optional[dict], wind_data: Optional[dict]) -> "RawReading":
        """
        Build a reading from loosely typed feed payloads.

        Args:
            buoy_data: {"Hs": ft, "Tp": s, "Dp": deg} (values may be strings or missing)
            wind_data: {"speed": kts, "direction": deg}

        Returns:
            RawReading with malformed or missing values defaulted to 0
        """
        buoy_data = buoy_data or {}
        wind_data = wind_data or {}
        return cls(
            wave_height_ft=parse_number(buoy_data.get("Hs")),
            wave_period_s=parse_number(buoy_data.get("Tp")),
            wave_direction_deg=int(parse_number(buoy_data.get("Dp"))),
            wind_speed_kts=parse_number(wind_data.get("speed")),
            wind_direction_deg=parse_number(wind_data.get("direction")),
        )


class TideType(str, Enum):
    HIGH = "H"
    LOW = "L"


@dataclass(frozen=True)
class TidePrediction:
    """A single high or low tide extremum"""
    timestamp: datetime
    type: TideType

    def __str__(self) -> str:
        label = "High" if self.type is TideType.HIGH else "Low"
        return f"{label} tide @ {self.timestamp.strftime(NOAA_TIME_FORMAT)}"

    @property
    def is_high(self) -> bool:
        return self.type is TideType.HIGH


def parse_tide_predictions(records: Optional[list]) -> list[TidePrediction]:
    """
    Parse NOAA CO-OPS hilo records into TidePredictions.

    Records look like {"t": "2025-06-01 04:12", "v": "5.1", "type": "H"}.
    Malformed records are skipped, order is preserved (callers sort).
    """
    predictions = []
    for record in records or []:
        try:
            timestamp = datetime.strptime(str(record["t"]).strip(), NOAA_TIME_FORMAT)
            tide_type = TideType(str(record["type"]).strip().upper())
        except (KeyError, TypeError, ValueError) as e:
            log.warning(f"Skipping malformed tide record {record!r}: {e}")
            continue
        predictions.append(TidePrediction(timestamp=timestamp, type=tide_type))
    return predictions
