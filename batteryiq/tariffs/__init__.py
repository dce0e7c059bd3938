"""Tariff plan parsing and validation."""

from .schema import (
    TimeWindowModel,
    TariffPeriodRecord,
    parse_time_windows,
    periods_from_records,
)
from .validators import validate_plan

__all__ = [
    "TimeWindowModel",
    "TariffPeriodRecord",
    "parse_time_windows",
    "periods_from_records",
    "validate_plan",
]
