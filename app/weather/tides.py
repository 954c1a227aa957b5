# ABOUTME: NOAA CO-OPS client for high/low tide predictions
# ABOUTME: Returns raw hilo records; parsing into TidePredictions happens in the models

import logging
from datetime import datetime, timedelta
from typing import Optional

import requests

from app.config import Config

log = logging.getLogger(__name__)


class TideClient:
    """Client for fetching tide predictions from NOAA CO-OPS"""

    BASE_URL = "https://api.tidesandcurrents.noaa.gov/api/prod/datagetter"

    def __init__(self, station_id: str = None, timeout: int = None):
        self.station_id = station_id or Config.TIDE_STATION_ID
        self.timeout = timeout or Config.HTTP_TIMEOUT_SECONDS

    def fetch_predictions(self, start: Optional[datetime] = None, days: int = None) -> list[dict]:
        """
        Fetch hilo predictions starting the day before `start`.

        Starting a day early means the tide before "now" is included, which
        is what tells us whether we're rising or dropping.

        Returns:
            [{"t": "YYYY-MM-DD HH:MM", "v": "5.1", "type": "H"}, ...] or [] on error
        """
        start = (start or datetime.now()) - timedelta(days=1)
        end = start + timedelta(days=(days or Config.TIDE_PREDICTION_DAYS) + 1)

        params = {
            "station": self.station_id,
            "begin_date": start.strftime("%Y%m%d"),
            "end_date": end.strftime("%Y%m%d"),
            "product": "predictions",
            "datum": "MLLW",
            "units": "english",
            "time_zone": "lst_ldt",
            "interval": "hilo",
            "format": "json",
            "application": "ocean_beach_surf_ai",
        }

        try:
            response = requests.get(self.BASE_URL, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            log.error(f"Tide request failed: {e}")
            return []

        if response.status_code != 200:
            log.error(f"Tide API HTTP error: {response.status_code} - {response.text}")
            return []

        try:
            data = response.json()
        except ValueError as e:
            log.error(f"Tide API returned invalid JSON: {e}")
            return []

        if "error" in data:
            log.error(f"Tide API error: {data['error'].get('message', 'Unknown error')}")
            return []

        return data.get("predictions", [])
