# ABOUTME: Main application orchestrator coordinating feeds, scoring and enrichment
# ABOUTME: Handles feed fetch, forecast generation, ML prediction and summary validation merges

import logging
import random
import uuid
from datetime import datetime
from typing import Optional

from app.ai.llm_client import LLMClient, ValidationResult
from app.ai.prediction_client import PredictionClient, PredictionRequest
from app.cache.manager import CacheManager
from app.config import Config
from app.debug import debug_log
from app.forecast import build_forecast
from app.scoring.models import PredictionStatus, SummaryResult
from app.weather.models import RawReading, parse_tide_predictions
from app.weather.sources import NDBCClient
from app.weather.tides import TideClient

log = logging.getLogger(__name__)


class AppOrchestrator:
    """Orchestrates all app components to generate forecasts"""

    def __init__(self, api_key: str):
        self.ndbc_client = NDBCClient()
        self.tide_client = TideClient()
        self.prediction_client = PredictionClient()
        self.llm_client = LLMClient(api_key=api_key)
        self.cache = CacheManager(feed_ttl_seconds=Config.FEED_CACHE_TTL_SECONDS)

    def get_forecast(self, now: Optional[datetime] = None) -> dict:
        """
        Start a new forecast from (cached) feed data.

        Issues a new request id; any enrichment still in flight for an older
        request is dropped when it lands.

        Returns:
            {
                "is_offline": bool,
                "request_id": str or None,
                "timestamp": datetime or None,
                "forecast": SummaryResult or None,
                "surf_data": {...} or None
            }
        """
        if self.cache.is_feed_stale():
            self._refresh_feeds()

        feeds = self.cache.get_feeds()
        if not feeds or not feeds.get("buoy") or not feeds.get("wind"):
            return self._build_offline_response(self.cache.get_last_known_feeds())

        request_id = uuid.uuid4().hex
        seed = random.randrange(2 ** 32)
        prediction = (
            PredictionStatus.pending() if self.prediction_client.is_configured
            else PredictionStatus.absent()
        )
        self.cache.start_snapshot(
            request_id,
            seed=seed,
            feeds=feeds,
            evaluated_at=now or datetime.now(),
            prediction=prediction,
        )

        forecast = self._evaluate(request_id)
        return {
            "is_offline": False,
            "request_id": request_id,
            "timestamp": feeds.get("fetched_at"),
            "forecast": forecast,
            "surf_data": self._surf_data(feeds),
        }

    def fetch_prediction(self, request_id: str) -> Optional[SummaryResult]:
        """
        Ask the ML service about a forecast and fold the score in.

        Returns:
            Updated SummaryResult, or None if the request went stale (or
            there was nothing to ask about).
        """
        snapshot = self.cache.get_snapshot(request_id)
        if snapshot is None:
            return None

        feeds = snapshot["feeds"]
        forecast = self._evaluate(request_id)
        if forecast is None:
            return None

        request = PredictionRequest.build(
            tide_direction=forecast.tide.direction,
            wind_direction_deg=RawReading.from_feeds(feeds["buoy"], feeds["wind"]).wind_direction_deg,
            primary_buoy=feeds["buoy"],
            proxy_buoy=feeds.get("proxy_buoy"),
        )
        score = self.prediction_client.predict(request)
        status = PredictionStatus.resolved(score) if score is not None else PredictionStatus.absent()

        if not self.cache.set_prediction(request_id, status):
            return None
        debug_log(f"Prediction for {request_id}: {status}", "ORCHESTRATOR")
        return self._evaluate(request_id)

    def validate_summary(self, request_id: str) -> Optional[ValidationResult]:
        """
        Polish the current summary text for a forecast.

        Returns:
            ValidationResult if it still applies to the current text, else None
        """
        snapshot = self.cache.get_snapshot(request_id)
        if snapshot is None or not snapshot.get("summary_text"):
            return None

        text = snapshot["summary_text"]
        result = self.llm_client.validate_summary(text, self._surf_data(snapshot["feeds"]))

        if not self.cache.set_validation(request_id, text, result):
            return None
        return result

    def get_display_text(self, request_id: str) -> Optional[str]:
        """Validated text when we have it, otherwise the generated summary."""
        validation = self.cache.get_validation(request_id)
        if validation is not None and validation.was_validated:
            return validation.validated_summary
        return self.cache.get_summary_text(request_id)

    def _evaluate(self, request_id: str) -> Optional[SummaryResult]:
        """Run the pipeline for a snapshot. Same seed, same wording."""
        snapshot = self.cache.get_snapshot(request_id)
        if snapshot is None:
            return None

        feeds = snapshot["feeds"]
        forecast = build_forecast(
            RawReading.from_feeds(feeds["buoy"], feeds["wind"]),
            parse_tide_predictions(feeds.get("tides")),
            prediction=snapshot["prediction"],
            rng=random.Random(snapshot["seed"]),
            now=snapshot["evaluated_at"],
        )
        self.cache.set_summary_text(request_id, forecast.text)
        return forecast

    def _refresh_feeds(self) -> None:
        """Fetch fresh buoy, wind and tide data."""
        log.info("Fetching feed data...")

        buoy = self.ndbc_client.fetch_buoy(Config.BUOY_STATION_ID)
        proxy_buoy = self.ndbc_client.fetch_buoy(Config.PROXY_BUOY_STATION_ID)
        wind = self.ndbc_client.fetch_wind(Config.WIND_STATION_ID)
        tides = self.tide_client.fetch_predictions()

        if buoy is None or wind is None:
            # Leave the cache stale so the next forecast retries
            log.warning(f"Feed fetch incomplete, keeping last known feeds: buoy={buoy}, wind={wind}")
            return

        self.cache.set_feeds(buoy, proxy_buoy, wind, tides)
        debug_log(f"Feeds cached: buoy={buoy}, wind={wind}, {len(tides)} tides", "ORCHESTRATOR")

    def _build_offline_response(self, feeds: Optional[dict]) -> dict:
        """Build response dict when buoy or wind data is missing."""
        return {
            "is_offline": True,
            "request_id": None,
            "timestamp": feeds.get("fetched_at") if feeds else None,
            "forecast": None,
            "surf_data": None,
        }

    def _surf_data(self, feeds: dict) -> dict:
        """Feed values in the shape the validation prompt expects."""
        buoy = feeds.get("buoy") or {}
        wind = feeds.get("wind") or {}
        return {
            "waveHeight": buoy.get("Hs"),
            "wavePeriod": buoy.get("Tp"),
            "windSpeed": wind.get("speed"),
            "windDirection": wind.get("direction"),
        }
