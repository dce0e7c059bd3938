from __future__ import annotations
from typing import Final, Dict

DAYS: Final[tuple[str, ...]] = ("MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN")
MINUTES_IN_DAY: Final[int] = 24 * 60
END_OF_DAY_LABEL: Final[str] = "24:00"

# Weekday code → row in a (7, MINUTES_IN_DAY) coverage track
DAY_INDEX: Dict[str, int] = {day: i for i, day in enumerate(DAYS)}

DAYS_PER_YEAR: Final[int] = 365
ARBITRAGE_EFFICIENCY: Final[float] = 0.9  # battery round trip

# Usage pattern → (peak, shoulder, off-peak) share of annual kWh
USAGE_SPLITS: Dict[str, tuple[float, float, float]] = {
    "flat": (0.3, 0.3, 0.4),
    "peak_heavy": (0.4, 0.3, 0.3),
    "off_peak_heavy": (0.2, 0.2, 0.6),
}
