# batteryiq/utils.py
from __future__ import annotations
import numpy as np

from . import canon


def time_to_minutes(tstr: str, is_end: bool = False) -> int:
    """
    'HH:MM' → minutes since midnight.

    As an end time, '00:00' means end of day (1440). '24:00' maps to 1440
    either way. Input is assumed well-formed.
    """
    hours, minutes = (int(part) for part in tstr.strip().split(":"))
    total = hours * 60 + minutes
    if is_end and total == 0:
        return canon.MINUTES_IN_DAY
    return total


def minutes_to_time(minutes: int) -> str:
    """Minutes since midnight → 'HH:MM'; 1440 renders as '24:00'."""
    if minutes == canon.MINUTES_IN_DAY:
        return canon.END_OF_DAY_LABEL
    hours, mins = divmod(int(minutes), 60)
    return f"{hours:02d}:{mins:02d}"


def runs(mask: np.ndarray) -> list[tuple[int, int]]:
    """
    Return the maximal runs of True in a 1-D boolean mask as [start, end) pairs.
    """
    padded = np.concatenate(([False], np.asarray(mask, dtype=bool), [False]))
    edges = np.flatnonzero(np.diff(padded.astype(np.int8)))
    return [(int(s), int(e)) for s, e in zip(edges[::2], edges[1::2])]
