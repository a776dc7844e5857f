from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterable, Iterator, Mapping

from loguru import logger

from .results import PeriodScore
from .statistic import period_score, validate_period

Scorer = Callable[[bytes, int], PeriodScore]


@dataclass(frozen=True)
class ScoreCache:
    """
    Period -> PeriodScore for a single byte sequence.

    Immutable: adding entries hands back a new cache, so whoever holds the
    old one never sees a half-filled state. The cache can't tell which data
    it belongs to; callers must start from an empty one whenever the data
    or its encoding changes.
    """

    _entries: Mapping[int, PeriodScore] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        if not isinstance(self._entries, MappingProxyType):
            object.__setattr__(self, "_entries", MappingProxyType(dict(self._entries)))

    @classmethod
    def empty(cls) -> "ScoreCache":
        return cls()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, period: object) -> bool:
        return period in self._entries

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._entries))

    def get(self, period: int) -> PeriodScore | None:
        return self._entries.get(period)

    def covers(self, max_period: int) -> bool:
        return all(p in self._entries for p in range(2, max_period + 1))

    def with_scores(self, scores: Iterable[PeriodScore]) -> "ScoreCache":
        merged = dict(self._entries)
        for s in scores:
            # Entries are write-once; a recomputed score for the same data is identical anyway
            merged.setdefault(s.period, s)
        return ScoreCache(MappingProxyType(merged))

    def series(self, max_period: int) -> list[PeriodScore]:
        return [self._entries[p] for p in range(2, max_period + 1)]

    def to_dict(self) -> dict[int, float]:
        return {p: self._entries[p].score for p in self}


def ensure_computed(
    cache: ScoreCache,
    data: bytes,
    max_period: int,
    *,
    scorer: Scorer = period_score,
) -> tuple[list[PeriodScore], ScoreCache]:
    """
    Make sure every period in [2, max_period] has a score, computing only the missing ones.

    Returns the ordered series for the range plus the (possibly grown) cache.
    `max_period` is checked before any work so a bad request leaves nothing half done.
    """
    validate_period(data, max_period)

    if cache.covers(max_period):
        logger.debug("All {} periods served from cache", max_period - 1)
        return cache.series(max_period), cache

    missing = [p for p in range(2, max_period + 1) if p not in cache]
    fresh = [scorer(data, p) for p in missing]
    logger.debug(
        "Computed {} new period(s), reused {} from cache (max_period={})",
        len(fresh),
        max_period - 1 - len(fresh),
        max_period,
    )

    grown = cache.with_scores(fresh)
    return grown.series(max_period), grown
