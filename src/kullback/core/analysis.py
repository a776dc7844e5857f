from __future__ import annotations

from typing import Optional

from .cache import ScoreCache, Scorer, ensure_computed
from .errors import InputTooShort, InvalidPeriod
from .results import AnalysisResult, PeriodScore
from .spikes import find_spikes
from .statistic import period_score
from .transcribe import Encoding, transcribe


def suggested_max_period(length: int) -> int:
    """
    Largest period worth testing for `length` bytes.

    Past length // 2 there are fewer than two full blocks, so most columns
    hold a single byte and the IoC says nothing.
    """
    return length // 2


def analyze(
    data: bytes,
    selected_period: int,
    cache: ScoreCache,
    *,
    scorer: Scorer = period_score,
) -> tuple[list[PeriodScore], ScoreCache]:
    """Score every period in [2, selected_period], reusing whatever `cache` already holds."""
    return ensure_computed(cache, data, selected_period, scorer=scorer)


def check_range(data: bytes, max_period: int) -> None:
    cap = suggested_max_period(len(data))
    if max_period > cap:
        raise InvalidPeriod(
            max_period,
            len(data),
            f"Range is too large ({max_period}); for {len(data)} bytes the maximum is {cap}. Please decrease.",
        )


def analyze_bytes(
    data: bytes,
    max_period: Optional[int] = None,
    cache: Optional[ScoreCache] = None,
    *,
    min_length: int = 4,
    spike_threshold: float = 1.5,
    scorer: Scorer = period_score,
) -> AnalysisResult:
    if len(data) < min_length:
        raise InputTooShort(len(data), min_length)

    if max_period is None:
        max_period = suggested_max_period(len(data))
    check_range(data, max_period)

    series, grown = analyze(data, max_period, cache if cache is not None else ScoreCache.empty(), scorer=scorer)
    return AnalysisResult(
        series=series,
        cache=grown,
        spikes=find_spikes(series, threshold=spike_threshold),
        length=len(data),
    )


def analyze_text(
    text: str,
    encoding: Encoding | str = Encoding.UTF8,
    max_period: Optional[int] = None,
    cache: Optional[ScoreCache] = None,
    *,
    min_length: int = 4,
    spike_threshold: float = 1.5,
) -> AnalysisResult:
    """
    Decode `text`, then run the Kullback test up to `max_period`.

    max_period defaults to half the decoded length. Passing a cache only
    makes sense when it was built from the same text and encoding.
    """
    data = transcribe(text, encoding)
    return analyze_bytes(
        data,
        max_period,
        cache,
        min_length=min_length,
        spike_threshold=spike_threshold,
    )
