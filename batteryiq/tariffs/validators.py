from __future__ import annotations
import logging
from typing import Iterable, Optional

from .. import coverage
from ..config import CoverageConfig
from ..types import CoverageResult
from .schema import TariffPeriodRecord, periods_from_records

logger = logging.getLogger(__name__)


def validate_plan(
    records: Iterable[dict | TariffPeriodRecord],
    *,
    config: Optional[CoverageConfig] = None,
    strict: bool = False,
) -> CoverageResult:
    """Validate 24/7 coverage of a plan's persisted tariff periods.

    With strict=True a CoverageError is raised according to the config;
    otherwise problems are only logged and returned.
    """
    periods = periods_from_records(records)
    result = coverage.validate_coverage(periods)

    if result.gaps:
        logger.warning(
            "Tariff coverage incomplete: %d gap(s), %d overlap(s) across %d period(s)",
            len(result.gaps),
            len(result.overlaps),
            len(periods),
        )
    elif result.overlaps:
        logger.warning(
            "Tariff coverage has overlapping rates: %d overlap(s) across %d period(s)",
            len(result.overlaps),
            len(periods),
        )
    if strict:
        coverage.assert_full_coverage(result, config)
    return result
