from __future__ import annotations
from typing import TypedDict, List, Literal, Optional
from dataclasses import dataclass, field


## Tariff Models
@dataclass
class TimeWindow:
    days: list[str]  # weekday codes, e.g. ["MON", "TUE"]
    start: str  # "HH:MM"
    end: str  # "HH:MM"; "00:00" means end of day


@dataclass
class TariffPeriod:
    rate: float  # $/kWh
    time_windows: list[TimeWindow] = field(default_factory=list)
    name: str = ""
    period_type: Optional[str] = None  # e.g. "PEAK", "SHOULDER", "OFF_PEAK"


## Coverage Report
class GapPayload(TypedDict):
    day: str
    startTime: str
    endTime: str


class OverlapPayload(TypedDict):
    day: str
    startTime: str
    endTime: str
    rates: List[float]


class CoveragePayload(TypedDict):
    has24HourCoverage: bool
    gaps: List[GapPayload]
    overlaps: List[OverlapPayload]


@dataclass(frozen=True)
class CoverageGap:
    day: str
    start_time: str  # "HH:MM"
    end_time: str  # "HH:MM", "24:00" for end of day


@dataclass(frozen=True)
class CoverageOverlap:
    day: str
    start_time: str
    end_time: str
    rates: tuple[float, ...]  # distinct rates, order not guaranteed


@dataclass
class CoverageResult:
    fully_covered: bool
    gaps: list[CoverageGap] = field(default_factory=list)
    overlaps: list[CoverageOverlap] = field(default_factory=list)

    def to_payload(self) -> CoveragePayload:
        """JSON-ready dict for API responses (camelCase keys)."""
        return {
            "has24HourCoverage": self.fully_covered,
            "gaps": [
                {"day": g.day, "startTime": g.start_time, "endTime": g.end_time}
                for g in self.gaps
            ],
            "overlaps": [
                {
                    "day": o.day,
                    "startTime": o.start_time,
                    "endTime": o.end_time,
                    "rates": list(o.rates),
                }
                for o in self.overlaps
            ],
        }


## Retail Tariff Models
TariffType = Literal["FLAT", "TIME_OF_USE"]
UsagePattern = Literal["flat", "peak_heavy", "off_peak_heavy"]


@dataclass
class RetailTariff:
    """Reference retail offer (e.g. DMO/VDO). Rates in c/kWh, supply in c/day."""

    id: str
    plan_name: str
    state: str
    tariff_type: TariffType
    daily_supply_charge: float  # c/day
    distributor: str = ""
    plan_type: str = "DMO"  # "DMO" | "VDO"
    flat_rate: Optional[float] = None
    peak_rate: Optional[float] = None
    off_peak_rate: Optional[float] = None
    shoulder_rate: Optional[float] = None
    super_off_peak_rate: Optional[float] = None
    feed_in_tariff: float = 0.0
    is_ev_friendly: bool = False
