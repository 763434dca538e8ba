import datetime as dt

import pandas as pd
import pytest
from pydantic import ValidationError
from transreduce.core.config import Settings
from transreduce.core.timings import (
    PERIOD,
    TOTAL_DURATION,
    PollingSchedule,
    polling_ticks,
)


def test_constants():
    assert PERIOD == pd.Timedelta(milliseconds=500)
    assert TOTAL_DURATION == pd.Timedelta(hours=1)
    assert PERIOD < TOTAL_DURATION


def test_total_divides_evenly_by_period():
    assert TOTAL_DURATION // PERIOD == 7200
    assert TOTAL_DURATION % PERIOD == pd.Timedelta(0)
    assert polling_ticks() == 7200
    assert polling_ticks(TOTAL_DURATION, PERIOD) == 7200


def test_polling_ticks_accepts_datetime_timedelta():
    assert polling_ticks(dt.timedelta(seconds=3), dt.timedelta(seconds=1)) == 3


def test_polling_ticks_zero_total():
    assert polling_ticks(pd.Timedelta(0), PERIOD) == 0


@pytest.mark.parametrize(
    "total,period",
    [
        (pd.Timedelta(seconds=1), pd.Timedelta(0)),
        (pd.Timedelta(seconds=1), pd.Timedelta(seconds=-1)),
        (pd.Timedelta(seconds=-1), pd.Timedelta(seconds=1)),
        (pd.Timedelta(seconds=1), pd.Timedelta(milliseconds=300)),
    ],
)
def test_polling_ticks_invalid(total, period):
    with pytest.raises(ValueError):
        polling_ticks(total, period)


def test_schedule_defaults():
    schedule = PollingSchedule()
    assert schedule.period == PERIOD
    assert schedule.total_duration == TOTAL_DURATION
    assert schedule.ticks == 7200


def test_schedule_coerces_strings():
    schedule = PollingSchedule(period="250ms", total_duration="1s")
    assert isinstance(schedule.period, pd.Timedelta)
    assert schedule.ticks == 4


def test_schedule_rejects_inconsistent_pair():
    with pytest.raises(ValidationError):
        PollingSchedule(period="300ms", total_duration="1s")


def test_schedule_from_settings():
    settings = Settings(PERIOD_MS=100, TOTAL_DURATION_S=2)
    assert PollingSchedule.from_settings(settings).ticks == 20
    assert PollingSchedule.from_settings(Settings()).ticks == 7200
