"""Display formatting for plan prices and tariff schedules.

All stored values are in dollars (e.g. 0.86 == $0.86).
"""

from __future__ import annotations

from typing import Iterable, Optional

from .types import CoverageResult, TariffPeriod, TimeWindow

NOT_AVAILABLE = "N/A"
GST_RATE = 0.10


def format_dollars(dollars: Optional[float], decimals: int = 2) -> str:
    """0.86 → '$0.86'"""
    if dollars is None:
        return NOT_AVAILABLE
    return f"${dollars:.{decimals}f}"


def format_cents(dollars: Optional[float], decimals: int = 2) -> str:
    """0.86 → '86.00c'"""
    if dollars is None:
        return NOT_AVAILABLE
    return f"{dollars * 100:.{decimals}f}c"


def format_rate(dollars_per_kwh: Optional[float], decimals: int = 2) -> str:
    """0.32 → '$0.32/kWh'"""
    if dollars_per_kwh is None:
        return NOT_AVAILABLE
    return f"{format_dollars(dollars_per_kwh, decimals)}/kWh"


def format_rate_cents(dollars_per_kwh: Optional[float], decimals: int = 2) -> str:
    """0.32 → '32.00c/kWh'"""
    if dollars_per_kwh is None:
        return NOT_AVAILABLE
    return f"{format_cents(dollars_per_kwh, decimals)}/kWh"


def format_daily_charge(dollars_per_day: Optional[float], decimals: int = 2) -> str:
    """0.86 → '$0.86/day'"""
    if dollars_per_day is None:
        return NOT_AVAILABLE
    return f"{format_dollars(dollars_per_day, decimals)}/day"


def format_daily_charge_cents(dollars_per_day: Optional[float], decimals: int = 2) -> str:
    """0.86 → '86.00c/day'"""
    if dollars_per_day is None:
        return NOT_AVAILABLE
    return f"{format_cents(dollars_per_day, decimals)}/day"


def add_gst(dollars: float) -> float:
    return dollars * (1 + GST_RATE)


def remove_gst(dollars_inc_gst: float) -> float:
    return dollars_inc_gst / (1 + GST_RATE)


def format_time_windows(windows: Iterable[TimeWindow]) -> str:
    return ", ".join(f"{w.start}-{w.end}" for w in windows)


def format_period(period: TariffPeriod) -> str:
    """
    'Peak (PEAK): $0.45/kWh 16:00-21:00'; the type label is omitted when unknown.
    """
    label = period.name or "Unnamed"
    if period.period_type:
        label = f"{label} ({period.period_type})"
    windows = format_time_windows(period.time_windows)
    out = f"{label}: {format_rate(period.rate)}"
    return f"{out} {windows}" if windows else out


def format_coverage(result: CoverageResult) -> list[str]:
    """
    One line per gap/overlap, e.g.:

        'Gap: WED 06:00-08:00'
        'Overlap: TUE 06:00-09:00 ($0.30/kWh, $0.45/kWh)'
    """
    lines = [f"Gap: {g.day} {g.start_time}-{g.end_time}" for g in result.gaps]
    for o in result.overlaps:
        rates = ", ".join(format_rate(r) for r in o.rates)
        lines.append(f"Overlap: {o.day} {o.start_time}-{o.end_time} ({rates})")
    if not lines:
        return ["Full 24/7 coverage"]
    return lines
