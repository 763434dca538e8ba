"""Polling interval and run budget.

Durations are :class:`pandas.Timedelta` values, which share a single int64
nanosecond representation so they compare and divide exactly.

Attributes:
    PERIOD: Polling interval (500 ms).
    TOTAL_DURATION: Polling/run budget (1 hour).

Example:
    >>> from transreduce.core.timings import PERIOD, TOTAL_DURATION, polling_ticks
    >>> polling_ticks(TOTAL_DURATION, PERIOD)
    7200
"""

import typing as tp

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

if tp.TYPE_CHECKING:
    from transreduce.core.config import Settings

__all__ = ["PERIOD", "TOTAL_DURATION", "polling_ticks", "PollingSchedule"]

PERIOD = pd.Timedelta(milliseconds=500)
TOTAL_DURATION = pd.Timedelta(hours=1)


def polling_ticks(
    total: pd.Timedelta = TOTAL_DURATION, period: pd.Timedelta = PERIOD
) -> int:
    """Number of whole polling ticks that fit in ``total``.

    Args:
        total: Run budget. Must not be negative.
        period: Polling interval. Must be positive.

    Returns:
        ``total // period``.

    Raises:
        ValueError: If ``period`` is not positive, ``total`` is negative, or
            ``total`` is not an exact multiple of ``period``.
    """
    total = pd.Timedelta(total)
    period = pd.Timedelta(period)

    if period <= pd.Timedelta(0):
        raise ValueError(f"Polling period must be positive, got {period}.")
    if total < pd.Timedelta(0):
        raise ValueError(f"Total duration must not be negative, got {total}.")

    remainder = total % period
    if remainder != pd.Timedelta(0):
        raise ValueError(
            f"Total duration {total} is not a whole number of {period} periods "
            f"(remainder {remainder})."
        )
    return int(total // period)


class PollingSchedule(BaseModel):
    """A polling interval paired with a run budget it divides evenly.

    Any value accepted by :class:`pandas.Timedelta` can be passed for either
    field (``"500ms"``, ``datetime.timedelta``, ...).

    >>> PollingSchedule(period="500ms", total_duration="1h").ticks
    7200
    """

    period: pd.Timedelta = Field(default=PERIOD, description="Polling interval.")
    total_duration: pd.Timedelta = Field(
        default=TOTAL_DURATION, description="Polling/run budget."
    )

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @field_validator("period", "total_duration", mode="before")
    @classmethod
    def _to_timedelta(cls, value: tp.Any) -> pd.Timedelta:
        return pd.Timedelta(value)

    @model_validator(mode="after")
    def _check_consistent(self) -> "PollingSchedule":
        polling_ticks(self.total_duration, self.period)
        return self

    @property
    def ticks(self) -> int:
        """Number of polling ticks in the run budget."""
        return polling_ticks(self.total_duration, self.period)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "PollingSchedule":
        """Build a schedule from a :class:`~transreduce.core.config.Settings`."""
        return cls(
            period=pd.Timedelta(milliseconds=settings.PERIOD_MS),
            total_duration=pd.Timedelta(seconds=settings.TOTAL_DURATION_S),
        )
