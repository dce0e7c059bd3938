from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CoverageConfig:
    # Strict validation fails when any minute of the week has no rate
    require_full_coverage: bool = True
    # Overlapping rates are reported but tolerated unless this is False
    allow_overlaps: bool = True


def default_config() -> CoverageConfig:
    return CoverageConfig()
