# tests/test_sky.py

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from solpath.sky import SkyCondition, classify_sky, compass_heading, golden_hours

LA = ZoneInfo("America/Los_Angeles")
TZ = "America/Los_Angeles"
SUNRISE = datetime(2024, 6, 21, 5, 48, tzinfo=LA)
SUNSET = datetime(2024, 6, 21, 20, 35, tzinfo=LA)

@pytest.mark.parametrize(
    "now, expected",
    [
        (datetime(2024, 6, 21, 3, 0, tzinfo=LA), SkyCondition.NIGHT),
        (SUNRISE - timedelta(minutes=30), SkyCondition.SUNRISE),
        (SUNRISE, SkyCondition.SUNRISE),
        (SUNRISE + timedelta(minutes=29), SkyCondition.SUNRISE),
        (SUNRISE + timedelta(minutes=30), SkyCondition.DAYLIGHT),
        (datetime(2024, 6, 21, 13, 0, tzinfo=LA), SkyCondition.DAYLIGHT),
        (SUNSET - timedelta(minutes=30), SkyCondition.SUNSET),
        (SUNSET + timedelta(minutes=30), SkyCondition.SUNSET),
        (SUNSET + timedelta(minutes=31), SkyCondition.NIGHT),
    ],
)
def test_classify_sky(now, expected):
    assert classify_sky(now, SUNRISE, SUNSET, TZ) is expected

def test_classify_invalid_window_uses_local_noon():
    bad_sunrise, bad_sunset = SUNSET, SUNRISE
    assert classify_sky(datetime(2024, 6, 21, 10, 0, tzinfo=LA), bad_sunrise, bad_sunset, TZ) is SkyCondition.DAYLIGHT
    assert classify_sky(datetime(2024, 6, 21, 19, 0, tzinfo=LA), bad_sunrise, bad_sunset, TZ) is SkyCondition.NIGHT
    assert classify_sky(datetime(2024, 6, 21, 5, 0, tzinfo=LA), bad_sunrise, bad_sunset, TZ) is SkyCondition.NIGHT

def test_golden_hours():
    gh = golden_hours(SUNRISE, SUNSET)
    assert gh.morning == (SUNRISE, SUNRISE + timedelta(hours=1))
    assert gh.evening == (SUNSET - timedelta(hours=1), SUNSET)

@pytest.mark.parametrize(
    "azimuth, label",
    [(0.0, "N"), (11.24, "N"), (11.25, "NNE"), (90.0, "E"), (180.0, "S"), (247.5, "WSW"), (348.75, "N"), (359.9, "N")],
)
def test_compass_heading(azimuth, label):
    assert compass_heading(azimuth) == label

@pytest.mark.parametrize("which", ["sunrise", "sunset"])
def test_naive_event_times_rejected(which):
    events = {"sunrise": SUNRISE, "sunset": SUNSET}
    events[which] = events[which].replace(tzinfo=None)
    with pytest.raises(ValueError, match="timezone-aware"):
        classify_sky(SUNRISE + timedelta(hours=3), events["sunrise"], events["sunset"], TZ)
