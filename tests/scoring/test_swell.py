# ABOUTME: Tests for the swell classifier
# ABOUTME: Validates rule ordering where height and period conditions overlap

import pytest

from app.scoring.swell import analyze_swell


@pytest.mark.parametrize("height,period,quality,score,description", [
    (6, 16, "excellent", 5, "long period swell"),
    (5, 15, "excellent", 5, "long period swell"),
    (4.9, 15, "good", 4, "small but good quality"),
    (2, 20, "good", 4, "small but good quality"),
    (5, 11.9, "fair", 2, "windswell"),
    (8, 8, "fair", 2, "windswell"),
    (5, 12, "fair", 3, "mid-period"),
    (3, 14.9, "fair", 3, "mid-period"),
    (3, 10, "poor", 1, "small & choppy"),
    (0, 0, "poor", 1, "small & choppy"),
])
def test_swell_rules(height, period, quality, score, description):
    """First matching rule wins"""
    result = analyze_swell(height, period)

    assert result.quality == quality
    assert result.score == score
    assert result.description == description


def test_big_long_period_beats_every_other_rule():
    """5ft @ 15s matches rule 1 even though rules 2 and 4 are adjacent"""
    assert analyze_swell(5, 15).quality == "excellent"


def test_display_text():
    """Text reads "{height}ft @ {period}s ({description})" """
    assert analyze_swell(6, 16).text == "6ft @ 16s (long period swell)"
    assert analyze_swell(1.8, 9.5).text == "1.8ft @ 9.5s (small & choppy)"


def test_keeps_numeric_height_and_period():
    """Numbers are carried through for the firing check"""
    result = analyze_swell(12.5, 20)

    assert result.height_ft == 12.5
    assert result.period_s == 20
