from __future__ import annotations
import logging
import numpy as np
import pandas as pd
from typing import Iterable, Optional

from . import canon, exceptions, utils
from .config import CoverageConfig, default_config
from .types import CoverageGap, CoverageOverlap, CoverageResult, TariffPeriod

logger = logging.getLogger(__name__)


def _build_tracks(
    periods: list[TariffPeriod], rates: list[float]
) -> tuple[np.ndarray, np.ndarray]:
    """
    Fill the per-minute coverage tracks for the week.

    Returns:
        counts: (7, 1440) int array, how many rate entries apply at each minute
        active: (n_rates, 7, 1440) bool array, which distinct rates apply
    """
    rate_pos = {rate: i for i, rate in enumerate(rates)}
    counts = np.zeros((len(canon.DAYS), canon.MINUTES_IN_DAY), dtype=np.int32)
    active = np.zeros(
        (len(rates), len(canon.DAYS), canon.MINUTES_IN_DAY), dtype=bool
    )

    for period in periods:
        r = rate_pos[period.rate]
        for window in period.time_windows:
            start = utils.time_to_minutes(window.start)
            end = utils.time_to_minutes(window.end, is_end=True)
            if start >= end:
                # windows never wrap past midnight; nothing to mark
                logger.debug(
                    "Window %s-%s on %s covers no minutes",
                    window.start,
                    window.end,
                    window.days,
                )
                continue
            for day in window.days:
                d = canon.DAY_INDEX.get(day)
                if d is None:
                    logger.debug("Ignoring unknown day code %r", day)
                    continue
                counts[d, start:end] += 1
                active[r, d, start:end] = True

    return counts, active


def validate_coverage(periods: Iterable[TariffPeriod]) -> CoverageResult:
    """Check that every minute of every weekday is priced by exactly one rate.

    Gaps are maximal runs of minutes with no rate; overlaps are maximal runs
    with more than one rate entry, reported with the distinct rates active at
    the start of the run. Only gaps clear ``fully_covered``.

    Precondition: times are well-formed 'HH:MM'. An end of '00:00' runs to the
    end of the day and a window with start >= end covers nothing.
    """
    periods = list(periods)
    rates = list(dict.fromkeys(p.rate for p in periods))
    counts, active = _build_tracks(periods, rates)

    gaps: list[CoverageGap] = []
    overlaps: list[CoverageOverlap] = []
    for d, day in enumerate(canon.DAYS):
        for start, end in utils.runs(counts[d] == 0):
            gaps.append(
                CoverageGap(
                    day=day,
                    start_time=utils.minutes_to_time(start),
                    end_time=utils.minutes_to_time(end),
                )
            )
        for start, end in utils.runs(counts[d] > 1):
            present = np.flatnonzero(active[:, d, start])
            overlaps.append(
                CoverageOverlap(
                    day=day,
                    start_time=utils.minutes_to_time(start),
                    end_time=utils.minutes_to_time(end),
                    rates=tuple(rates[i] for i in present),
                )
            )

    return CoverageResult(fully_covered=not gaps, gaps=gaps, overlaps=overlaps)


def coverage_frame(result: CoverageResult) -> pd.DataFrame:
    """
    Tabulate a coverage result for reporting.

    Returns:
        DataFrame with columns:
          - 'day', 'kind' ('gap' | 'overlap')
          - 'start_time', 'end_time' (HH:MM)
          - 'minutes' (run length)
          - 'rates' (tuple of rates, empty for gaps)
    """
    cols = ["day", "kind", "start_time", "end_time", "minutes", "rates"]
    rows = [
        {
            "day": g.day,
            "kind": "gap",
            "start_time": g.start_time,
            "end_time": g.end_time,
            "rates": (),
        }
        for g in result.gaps
    ] + [
        {
            "day": o.day,
            "kind": "overlap",
            "start_time": o.start_time,
            "end_time": o.end_time,
            "rates": o.rates,
        }
        for o in result.overlaps
    ]
    if not rows:
        return pd.DataFrame(columns=cols)

    out = pd.DataFrame(rows)
    out["minutes"] = out["end_time"].map(
        lambda t: utils.time_to_minutes(t, is_end=True)
    ) - out["start_time"].map(utils.time_to_minutes)

    # order by weekday then time
    out["_day"] = out["day"].map(canon.DAY_INDEX)
    out = out.sort_values(["_day", "start_time", "kind"], kind="stable")
    return out.drop(columns="_day").reset_index(drop=True)[cols]


def assert_full_coverage(
    result: CoverageResult, config: Optional[CoverageConfig] = None
) -> None:
    cfg = config or default_config()
    if cfg.require_full_coverage:
        spans = ", ".join(f"{g.day} {g.start_time}-{g.end_time}" for g in result.gaps)
        exceptions.require(
            not result.gaps,
            f"Tariff schedule has uncovered time: {spans}",
            exceptions.CoverageError,
        )
    if not cfg.allow_overlaps:
        spans = ", ".join(
            f"{o.day} {o.start_time}-{o.end_time}" for o in result.overlaps
        )
        exceptions.require(
            not result.overlaps,
            f"Tariff schedule has overlapping rates: {spans}",
            exceptions.CoverageError,
        )
