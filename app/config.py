# ABOUTME: Application configuration including beach location, feed stations and API settings
# ABOUTME: Centralized config so thresholds and endpoints live in one place

import os
from dotenv import load_dotenv

load_dotenv()


# Onshore wind speed buckets: (max_kts, tier, score, description), first match wins.
# Anything above the last bucket is "victory at sea".
WIND_THRESHOLD_PRESETS = {
    "graduated": [
        (3, "excellent", 5.0, "glassy"),
        (5, "good", 4.0, "light wind"),
        (8, "fair", 2.5, "windy"),
        (12, "poor", 2.0, "very windy"),
        (18, "poor", 1.0, "too windy"),
    ],
    "classic": [
        (3, "excellent", 5.0, "glassy"),
        (5, "good", 4.0, "light wind"),
        (10, "fair", 2.0, "windy"),
        (20, "poor", 1.0, "too windy"),
    ],
}


class Config:
    """Application configuration"""

    # Location: Ocean Beach, San Francisco
    LOCATION_NAME = "Ocean Beach, SF"
    LOCATION_LAT = 37.76
    LOCATION_LON = -122.51

    # Beach faces west, so wind out of the east quadrant is offshore
    OFFSHORE_DIRECTION_MIN = 45
    OFFSHORE_DIRECTION_MAX = 135

    # Even strong offshore beats onshore, but above this it gets hard to paddle in
    STRONG_OFFSHORE_KTS = 25

    WIND_THRESHOLD_PRESET = os.getenv("WIND_THRESHOLD_PRESET", "graduated")

    # NDBC stations
    BUOY_STATION_ID = os.getenv("BUOY_STATION_ID", "46237")  # San Francisco Bar
    PROXY_BUOY_STATION_ID = os.getenv("PROXY_BUOY_STATION_ID", "46026")  # San Francisco offshore
    WIND_STATION_ID = os.getenv("WIND_STATION_ID", "FTPC1")  # Fort Point

    # NOAA CO-OPS tide station
    TIDE_STATION_ID = os.getenv("TIDE_STATION_ID", "9414290")  # San Francisco
    TIDE_PREDICTION_DAYS = int(os.getenv("TIDE_PREDICTION_DAYS", "2"))

    # API keys / endpoints
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
    ML_PREDICTION_URL = os.getenv("ML_PREDICTION_URL", "")

    HTTP_TIMEOUT_SECONDS = int(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

    # Feed cache TTL: how often to re-fetch buoy, wind and tide data
    FEED_CACHE_TTL_SECONDS = int(os.getenv("FEED_CACHE_TTL_SECONDS", "600"))

    # How often the page re-evaluates conditions
    UI_REFRESH_SECONDS = int(os.getenv("UI_REFRESH_SECONDS", "300"))

    # Debug mode
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"

    @classmethod
    def wind_thresholds(cls, preset: str = None) -> list:
        """Return the onshore wind bucket table for a preset (default: configured one)."""
        name = preset or cls.WIND_THRESHOLD_PRESET
        if name not in WIND_THRESHOLD_PRESETS:
            raise ValueError(
                f"Unknown wind threshold preset '{name}', "
                f"expected one of {sorted(WIND_THRESHOLD_PRESETS)}"
            )
        return WIND_THRESHOLD_PRESETS[name]
