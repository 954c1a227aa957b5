# ABOUTME: Tests for the tide classifier
# ABOUTME: Validates direction inference, next high tide lookup and the neutral fallback

import random
from datetime import datetime

import pytest

from app.scoring.models import TideDirection
from app.scoring.tide import DROPPING_PHRASES, RISING_PHRASES, analyze_tide, format_duration
from app.weather.models import TidePrediction, TideType

NOW = datetime(2025, 6, 1, 12, 0)


def tide(timestamp: str, tide_type: TideType) -> TidePrediction:
    return TidePrediction(timestamp=datetime.strptime(timestamp, "%Y-%m-%d %H:%M"), type=tide_type)


H, L = TideType.HIGH, TideType.LOW


class TestInsufficientData:
    """Fewer than two predictions means we can't tell"""

    @pytest.mark.parametrize("predictions", [None, [], [tide("2025-06-01 14:00", H)]])
    def test_neutral_unknown(self, predictions):
        """Score 2.5, direction unknown, no next high"""
        result = analyze_tide(predictions, now=NOW)

        assert result.score == 2.5
        assert result.direction is TideDirection.UNKNOWN
        assert result.next_high_tide is None
        assert result.time_to_next_high is None
        assert result.text == "tide data unavailable"


class TestDropping:
    """High then low means the tide is going out"""

    def test_high_to_low_is_dropping(self):
        """prev=HIGH, next=LOW scores 4.5"""
        predictions = [tide("2025-06-01 09:00", H), tide("2025-06-01 15:30", L)]

        result = analyze_tide(predictions, now=NOW)

        assert result.direction is TideDirection.DROPPING
        assert result.is_dropping is True
        assert result.score == 4.5
        assert result.quality == "excellent"
        assert result.description in DROPPING_PHRASES
        assert result.text == f"tide {result.description}"

    def test_unsorted_input_is_sorted_first(self):
        """Order of the input list doesn't matter"""
        predictions = [
            tide("2025-06-01 21:40", H),
            tide("2025-06-01 15:30", L),
            tide("2025-06-01 09:00", H),
            tide("2025-06-01 03:00", L),
        ]

        result = analyze_tide(predictions, now=NOW)

        assert result.direction is TideDirection.DROPPING
        assert result.next_high_tide == tide("2025-06-01 21:40", H)
        assert result.time_to_next_high == "9h 40m"

    def test_phrase_choice_follows_rng(self):
        """Seeded rng picks the same phrase every time, score unaffected"""
        predictions = [tide("2025-06-01 09:00", H), tide("2025-06-01 15:30", L)]

        first = analyze_tide(predictions, now=NOW, rng=random.Random(7))
        second = analyze_tide(predictions, now=NOW, rng=random.Random(7))

        assert first == second


class TestRising:
    """Low then high means the tide is coming in"""

    def test_low_to_high_is_rising(self):
        """prev=LOW, next=HIGH scores 2.0 and next high is the upcoming tide"""
        predictions = [tide("2025-06-01 08:00", L), tide("2025-06-01 14:15", H)]

        result = analyze_tide(predictions, now=NOW)

        assert result.direction is TideDirection.RISING
        assert result.is_dropping is False
        assert result.score == 2.0
        assert result.quality == "fair"
        assert result.description in RISING_PHRASES
        assert result.next_high_tide == predictions[1]
        assert result.time_to_next_high == "2h 15m"


class TestUnclear:
    """Anything else leaves direction unknown"""

    def test_now_before_all_predictions(self):
        """No previous tide, so no direction, but the next high is still found"""
        predictions = [tide("2025-06-01 13:00", L), tide("2025-06-01 19:30", H)]

        result = analyze_tide(predictions, now=NOW)

        assert result.direction is TideDirection.UNKNOWN
        assert result.score == 2.5
        assert result.description == "direction unclear"
        assert result.next_high_tide == predictions[1]
        assert result.time_to_next_high == "7h 30m"

    def test_now_after_all_predictions(self):
        """Everything in the past: unknown and no next high"""
        predictions = [tide("2025-06-01 03:00", L), tide("2025-06-01 09:00", H)]

        result = analyze_tide(predictions, now=NOW)

        assert result.direction is TideDirection.UNKNOWN
        assert result.next_high_tide is None
        assert result.time_to_next_high is None

    def test_two_highs_in_a_row(self):
        """HIGH then HIGH isn't a direction we trust"""
        predictions = [tide("2025-06-01 09:00", H), tide("2025-06-01 15:00", H)]

        result = analyze_tide(predictions, now=NOW)

        assert result.direction is TideDirection.UNKNOWN
        assert result.next_high_tide == predictions[1]

    def test_prediction_exactly_now_counts_as_past(self):
        """Next tide must be strictly after now"""
        predictions = [tide("2025-06-01 12:00", H), tide("2025-06-01 18:00", L)]

        result = analyze_tide(predictions, now=NOW)

        assert result.direction is TideDirection.DROPPING


class TestFormatDuration:
    """Durations are floored to whole minutes"""

    def test_floors_seconds(self):
        assert format_duration(2 * 3600 + 15 * 60 + 59) == "2h 15m"

    def test_under_an_hour(self):
        assert format_duration(59 * 60) == "0h 59m"
