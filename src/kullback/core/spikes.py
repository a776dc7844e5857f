from __future__ import annotations

from statistics import mean, pstdev
from typing import Sequence

from .results import PeriodScore


def _runs(periods: list[int]) -> list[list[int]]:
    """Group sorted periods into runs of consecutive integers."""
    groups: list[list[int]] = []
    for p in periods:
        if groups and p - groups[-1][-1] <= 1:
            groups[-1].append(p)
        else:
            groups.append([p])
    return groups


def find_spikes(series: Sequence[PeriodScore], threshold: float = 1.5) -> list[int]:
    """
    Periods whose score stands out from the rest of the series.

    A point counts when it sits more than `threshold` standard deviations
    above the mean. Neighbouring spikes (e.g. 17, 18, 19) are collapsed to
    the highest one so each peak is reported once.
    """
    if len(series) < 2:
        return []

    scores = [p.score for p in series]
    mu = mean(scores)
    sd = pstdev(scores, mu)
    if sd == 0:
        return []

    by_period = {p.period: p.score for p in series}
    hits = sorted(p.period for p in series if (p.score - mu) / sd > threshold)

    # max() keeps the first (smallest) period on ties
    return [max(run, key=lambda k: by_period[k]) for run in _runs(hits)]


def top_candidates(series: Sequence[PeriodScore], n: int = 10) -> list[PeriodScore]:
    ranked = sorted(series, key=lambda p: (-p.score, p.period))
    return ranked[: max(0, n)]
