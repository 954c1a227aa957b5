# ABOUTME: Split cache manager for feed data and per-forecast enrichment results
# ABOUTME: Feeds have a TTL; ML and validation results are kept only for the request they were issued for

import threading
from datetime import datetime, timezone
from typing import Any, Optional

from app.ai.llm_client import ValidationResult
from app.debug import debug_log
from app.scoring.models import PredictionStatus


class CacheManager:
    """
    Split cache for feed data and forecast enrichments.

    Feeds: buoy, proxy buoy, wind and tide payloads with a TTL (default 10 minutes)
    Snapshot: the current forecast request id, the inputs it was evaluated
    with, and whatever enrichment has arrived for it. Results tagged with an
    older request id are dropped, so a slow response can never overwrite a
    newer forecast.
    """

    def __init__(self, feed_ttl_seconds: int = 600):
        self.feed_ttl_seconds = feed_ttl_seconds

        # Feed cache: stores payloads and fetch timestamp
        self._feed_cache: Optional[dict] = None

        # Snapshot: written from background executors, guard with a lock
        self._snapshot: Optional[dict] = None
        self._lock = threading.Lock()

    # ==================== Feed Cache ====================

    def set_feeds(
        self,
        buoy: Optional[dict],
        proxy_buoy: Optional[dict],
        wind: Optional[dict],
        tides: list[dict],
    ) -> None:
        """Store raw feed payloads."""
        self._feed_cache = {
            "buoy": buoy,
            "proxy_buoy": proxy_buoy,
            "wind": wind,
            "tides": tides,
            "fetched_at": datetime.now(timezone.utc),
        }

    def get_feeds(self) -> Optional[dict]:
        """
        Get feed cache if fresh.

        Returns:
            {"buoy", "proxy_buoy", "wind", "tides", "fetched_at"} or None if stale/empty
        """
        if self.is_feed_stale():
            return None
        return self._feed_cache

    def get_last_known_feeds(self) -> Optional[dict]:
        """Last successfully fetched feeds, stale or not."""
        return self._feed_cache

    def is_feed_stale(self) -> bool:
        """Check if feed cache needs refresh."""
        if self._feed_cache is None:
            return True

        fetched_at = self._feed_cache.get("fetched_at")
        if fetched_at is None:
            return True

        age = datetime.now(timezone.utc) - fetched_at
        return age.total_seconds() > self.feed_ttl_seconds

    # ==================== Forecast Snapshot ====================

    def start_snapshot(
        self,
        request_id: str,
        seed: int,
        feeds: dict,
        evaluated_at: datetime,
        prediction: PredictionStatus,
    ) -> None:
        """Make request_id the current forecast; anything older becomes stale."""
        with self._lock:
            self._snapshot = {
                "request_id": request_id,
                "seed": seed,
                "feeds": feeds,
                "evaluated_at": evaluated_at,
                "prediction": prediction,
                "summary_text": None,
                "validation": None,
            }
        debug_log(f"New forecast snapshot {request_id}", "CACHE")

    def get_snapshot(self, request_id: str) -> Optional[dict]:
        """Copy of the snapshot if request_id is still current, else None."""
        with self._lock:
            if not self._is_current(request_id):
                return None
            return dict(self._snapshot)

    def current_request_id(self) -> Optional[str]:
        with self._lock:
            return self._snapshot["request_id"] if self._snapshot else None

    def is_current(self, request_id: str) -> bool:
        with self._lock:
            return self._is_current(request_id)

    def _is_current(self, request_id: str) -> bool:
        return self._snapshot is not None and self._snapshot["request_id"] == request_id

    def _get(self, request_id: str, key: str) -> Any:
        with self._lock:
            if not self._is_current(request_id):
                return None
            return self._snapshot[key]

    def set_prediction(self, request_id: str, prediction: PredictionStatus) -> bool:
        """
        Record the ML prediction for a request.

        Returns:
            False (and drops the result) when request_id is no longer current
        """
        with self._lock:
            if not self._is_current(request_id):
                debug_log(f"Dropping stale prediction for {request_id}", "CACHE")
                return False
            self._snapshot["prediction"] = prediction
            return True

    def get_prediction(self, request_id: str) -> Optional[PredictionStatus]:
        return self._get(request_id, "prediction")

    def set_summary_text(self, request_id: str, text: str) -> bool:
        """Record the latest summary text generated for a request."""
        with self._lock:
            if not self._is_current(request_id):
                return False
            if self._snapshot["summary_text"] != text:
                # Any validation was for the old wording
                self._snapshot["validation"] = None
            self._snapshot["summary_text"] = text
            return True

    def get_summary_text(self, request_id: str) -> Optional[str]:
        return self._get(request_id, "summary_text")

    def set_validation(self, request_id: str, source_text: str, result: ValidationResult) -> bool:
        """
        Record a validation result.

        Kept only if the request is current AND the text that was validated is
        still the latest summary text.
        """
        with self._lock:
            if not self._is_current(request_id) or self._snapshot["summary_text"] != source_text:
                debug_log(f"Dropping stale validation for {request_id}", "CACHE")
                return False
            self._snapshot["validation"] = result
            return True

    def get_validation(self, request_id: str) -> Optional[ValidationResult]:
        return self._get(request_id, "validation")
