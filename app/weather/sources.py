# ABOUTME: NDBC realtime client for buoy wave and station wind observations
# ABOUTME: Parses the realtime2 standard meteorological text format into feed dicts

import logging
from typing import Optional

import requests

from app.config import Config

log = logging.getLogger(__name__)

METERS_TO_FEET = 3.28084
MPS_TO_KNOTS = 1.943844
MISSING = "MM"


class NDBCClient:
    """
    Client for NDBC realtime2 observations.

    Data files list the newest observation first, columns:
    #YY MM DD hh mm WDIR WSPD GST WVHT DPD APD MWD PRES ...
    Missing values are "MM".
    """

    BASE_URL = "https://www.ndbc.noaa.gov/data/realtime2/{station}.txt"

    def __init__(self, timeout: int = None):
        self.timeout = timeout or Config.HTTP_TIMEOUT_SECONDS

    def fetch_observations(self, station_id: str) -> list[dict]:
        """
        Fetch and parse the realtime observation table for a station.

        Returns:
            List of {column: raw string} dicts, newest first. Empty on any error.
        """
        url = self.BASE_URL.format(station=station_id)
        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            log.error(f"NDBC request failed for {station_id}: {e}")
            return []

        if response.status_code != 200:
            log.error(f"NDBC HTTP error for {station_id}: {response.status_code}")
            return []

        return self._parse_table(response.text)

    def _parse_table(self, text: str) -> list[dict]:
        """Parse NDBC standard meteorological text into row dicts."""
        lines = [line for line in text.strip().split("\n") if line.strip()]
        if len(lines) < 3 or not lines[0].startswith("#"):
            log.error("NDBC response missing header lines")
            return []

        columns = lines[0].lstrip("#").split()
        rows = []
        for line in lines[1:]:
            if line.startswith("#"):
                continue  # units line
            parts = line.split()
            if len(parts) < len(columns):
                continue
            rows.append(dict(zip(columns, parts)))
        return rows

    def fetch_buoy(self, station_id: str = None) -> Optional[dict]:
        """
        Latest wave observation.

        Returns:
            {"Hs": feet, "Tp": seconds, "Dp": degrees, "station": id} or None
        """
        station_id = station_id or Config.BUOY_STATION_ID
        for row in self.fetch_observations(station_id):
            if row.get("WVHT", MISSING) == MISSING:
                continue
            try:
                height_m = float(row["WVHT"])
            except (KeyError, ValueError):
                continue
            return {
                "Hs": round(height_m * METERS_TO_FEET, 1),
                "Tp": self._value(row, "DPD"),
                "Dp": self._value(row, "MWD"),
                "station": station_id,
            }
        log.error(f"No wave observation available from buoy {station_id}")
        return None

    def fetch_wind(self, station_id: str = None) -> Optional[dict]:
        """
        Latest wind observation.

        Returns:
            {"speed": knots, "direction": degrees, "station": id} or None
        """
        station_id = station_id or Config.WIND_STATION_ID
        for row in self.fetch_observations(station_id):
            if row.get("WSPD", MISSING) == MISSING:
                continue
            try:
                speed_mps = float(row["WSPD"])
            except (KeyError, ValueError):
                continue
            return {
                "speed": round(speed_mps * MPS_TO_KNOTS, 1),
                "direction": self._value(row, "WDIR"),
                "station": station_id,
            }
        log.error(f"No wind observation available from station {station_id}")
        return None

    def _value(self, row: dict, column: str) -> Optional[str]:
        """Raw column value, None when missing. Downstream parsing treats None as 0."""
        value = row.get(column, MISSING)
        return None if value == MISSING else value
