from __future__ import annotations
import logging
from typing import Any, Iterable
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from .. import canon, exceptions
from ..types import TariffPeriod, TimeWindow

logger = logging.getLogger(__name__)

HHMM_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$|^24:00$"


class TimeWindowModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    days: list[str]
    start_time: str = Field(alias="startTime", pattern=HHMM_PATTERN)
    end_time: str = Field(alias="endTime", pattern=HHMM_PATTERN)

    @field_validator("days")
    @classmethod
    def _known_days(cls, v: list[str]) -> list[str]:
        days = [d.upper() for d in v]
        unknown = [d for d in days if d not in canon.DAY_INDEX]
        if unknown:
            raise ValueError(f"Unknown day codes: {', '.join(unknown)}")
        return days

    def to_window(self) -> TimeWindow:
        return TimeWindow(days=list(self.days), start=self.start_time, end=self.end_time)


class TariffPeriodRecord(BaseModel):
    """One persisted tariff-period row (e.g. PEAK / SHOULDER / OFF_PEAK)."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    type: str | None = None
    rate: float = Field(validation_alias=AliasChoices("rate", "price"))
    time_windows: list[TimeWindowModel] = Field(default_factory=list, alias="timeWindows")
    sequence_order: int = Field(default=0, alias="sequenceOrder")

    @field_validator("time_windows", mode="before")
    @classmethod
    def _windows_list(cls, v: Any) -> Any:
        # persisted JSON may be null or a non-list blob
        return v if isinstance(v, list) else []

    def to_period(self) -> TariffPeriod:
        return TariffPeriod(
            rate=self.rate,
            time_windows=[w.to_window() for w in self.time_windows],
            name=self.name,
            period_type=self.type,
        )


def parse_time_windows(raw: Any) -> list[TimeWindow]:
    """Windows from a persisted JSON value; anything but a list gives []."""
    if not isinstance(raw, list):
        return []
    try:
        return [TimeWindowModel.model_validate(w).to_window() for w in raw]
    except ValidationError as e:
        raise exceptions.TariffError(f"Invalid time window: {e}") from e


def periods_from_records(records: Iterable[dict | TariffPeriodRecord]) -> list[TariffPeriod]:
    """
    Validate tariff-period rows and convert them to domain periods.

    Rows are ordered by sequenceOrder; ties keep their input order.
    """
    parsed: list[TariffPeriodRecord] = []
    for i, rec in enumerate(records):
        if isinstance(rec, TariffPeriodRecord):
            parsed.append(rec)
            continue
        try:
            parsed.append(TariffPeriodRecord.model_validate(rec))
        except ValidationError as e:
            raise exceptions.TariffError(f"Invalid tariff period #{i}: {e}") from e

    parsed.sort(key=lambda r: r.sequence_order)
    logger.debug("Parsed %d tariff periods", len(parsed))
    return [r.to_period() for r in parsed]
