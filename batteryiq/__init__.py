from . import (
    canon,
    types,
    utils,
    config,
    exceptions,
    coverage,
    formats,
    pricing,
    tariffs,
)
from .coverage import validate_coverage

__all__ = [
    "canon",
    "types",
    "utils",
    "config",
    "exceptions",
    "coverage",
    "formats",
    "pricing",
    "tariffs",
    "validate_coverage",
]
