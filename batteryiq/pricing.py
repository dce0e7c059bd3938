from __future__ import annotations
import logging
import pandas as pd
from typing import Iterable, Optional

from . import canon
from .types import RetailTariff, UsagePattern

logger = logging.getLogger(__name__)


def tariffs_for_state(tariffs: Iterable[RetailTariff], state: str) -> list[RetailTariff]:
    return [t for t in tariffs if t.state.upper() == state.upper()]


def calculate_annual_cost(
    tariff: RetailTariff,
    annual_usage: float,
    usage_pattern: UsagePattern = "flat",
) -> float:
    """
    Annual bill in dollars: supply (c/day × 365) plus usage.

    TOU usage is split peak/shoulder/off-peak by the pattern's shares;
    unknown patterns are treated as 'flat'. Missing rates count as 0.
    """
    annual_supply = (tariff.daily_supply_charge / 100.0) * canon.DAYS_PER_YEAR

    if tariff.tariff_type == "FLAT":
        usage_cost = annual_usage * (tariff.flat_rate or 0.0) / 100.0
    else:
        peak, shoulder, off_peak = canon.USAGE_SPLITS.get(
            usage_pattern, canon.USAGE_SPLITS["flat"]
        )
        usage_cost = (
            annual_usage * peak * (tariff.peak_rate or 0.0)
            + annual_usage * off_peak * (tariff.off_peak_rate or 0.0)
            + annual_usage * shoulder * (tariff.shoulder_rate or 0.0)
        ) / 100.0

    return annual_supply + usage_cost


def compare_tariffs(
    tariffs: Iterable[RetailTariff],
    annual_usage: float,
    usage_pattern: UsagePattern = "flat",
) -> pd.DataFrame:
    """
    One row per tariff, cheapest first (ties keep input order):
      ['id', 'plan_name', 'state', 'tariff_type', 'annual_cost']
    """
    cols = ["id", "plan_name", "state", "tariff_type", "annual_cost"]
    rows = [
        {
            "id": t.id,
            "plan_name": t.plan_name,
            "state": t.state,
            "tariff_type": t.tariff_type,
            "annual_cost": calculate_annual_cost(t, annual_usage, usage_pattern),
        }
        for t in tariffs
    ]
    if not rows:
        return pd.DataFrame(columns=cols)
    out = pd.DataFrame(rows)[cols]
    return out.sort_values("annual_cost", kind="stable").reset_index(drop=True)


def get_cheapest_tariff(
    tariffs: Iterable[RetailTariff],
    state: str,
    annual_usage: float,
    usage_pattern: UsagePattern = "flat",
) -> Optional[RetailTariff]:
    candidates = tariffs_for_state(tariffs, state)
    if not candidates:
        logger.debug("No tariffs available for state %s", state)
        return None

    # min keeps the first of equally cheap tariffs
    return min(
        candidates,
        key=lambda t: calculate_annual_cost(t, annual_usage, usage_pattern),
    )


def calculate_arbitrage_value(
    tariff: RetailTariff,
    battery_capacity: float,
    daily_cycles: float = 1,
) -> float:
    """
    Annual dollars from charging off-peak and discharging at peak.

    Zero for non-TOU tariffs or when peak/off-peak rates are missing.
    """
    if (
        tariff.tariff_type != "TIME_OF_USE"
        or not tariff.peak_rate
        or not tariff.off_peak_rate
    ):
        return 0.0

    spread = (tariff.peak_rate - tariff.off_peak_rate) / 100.0  # $/kWh
    daily = battery_capacity * daily_cycles * spread * canon.ARBITRAGE_EFFICIENCY
    return daily * canon.DAYS_PER_YEAR


def is_ev_friendly(tariff: RetailTariff) -> bool:
    return tariff.is_ev_friendly and tariff.tariff_type == "TIME_OF_USE"
