from __future__ import annotations

from collections import Counter
from typing import Iterable


def residue_classes(data: bytes, period: int) -> list[bytes]:
    """
    Split data into `period` columns by position modulo `period`.

    Column c holds data[c], data[c + period], data[c + 2*period], ...
    Together the columns cover every position exactly once.
    """
    return [data[c::period] for c in range(period)]


def frequency_table(column: Iterable[int]) -> Counter:
    return Counter(column)


def coincidences(counts: Counter) -> int:
    """Number of ordered pairs of equal values: sum of n*(n-1)."""
    return sum(c * (c - 1) for c in counts.values())


def index_of_coincidence(column: bytes) -> float | None:
    """IoC of one column; None when there are fewer than 2 samples to pair."""
    n = len(column)
    if n < 2:
        return None
    return coincidences(frequency_table(column)) / (n * (n - 1))
