from __future__ import annotations

from typing import Optional

from loguru import logger

from .analysis import analyze_bytes
from .cache import ScoreCache, Scorer
from .errors import KullbackError
from .results import AnalysisResult
from .statistic import period_score
from .transcribe import Encoding, transcribe


class AnalysisSession:
    """
    Holds the decoded input and its score cache between interactive calls.

    Every text or encoding change that alters the decoded bytes throws the
    cache away; widening or narrowing the range only fills in what's missing.
    A failed update or analysis leaves the previous state as it was.
    """

    def __init__(
        self,
        *,
        min_length: int = 4,
        spike_threshold: float = 1.5,
        scorer: Scorer = period_score,
    ) -> None:
        self.min_length = min_length
        self.spike_threshold = spike_threshold
        self._scorer = scorer
        self.reset()

    def reset(self) -> None:
        self.text: Optional[str] = None
        self.encoding: Optional[Encoding] = None
        self.data: Optional[bytes] = None
        self.cache = ScoreCache.empty()
        self.last_result: Optional[AnalysisResult] = None

    def update(self, text: str, encoding: Encoding | str = Encoding.UTF8) -> bool:
        """Load new input. Returns True when the decoded data changed and the cache was reset."""
        enc = Encoding.parse(encoding)
        data = transcribe(text, enc)  # DecodeError propagates before any state changes

        self.text = text
        if data == self.data and enc == self.encoding:
            return False

        logger.debug("Input changed ({} -> {} bytes, {}); resetting cache", len(self.data or b""), len(data), enc.value)
        self.encoding = enc
        self.data = data
        self.cache = ScoreCache.empty()
        self.last_result = None
        return True

    def analyze(self, max_period: Optional[int] = None) -> AnalysisResult:
        if self.data is None:
            raise KullbackError("No input loaded; call update() first.")

        result = analyze_bytes(
            self.data,
            max_period,
            self.cache,
            min_length=self.min_length,
            spike_threshold=self.spike_threshold,
            scorer=self._scorer,
        )
        self.cache = result.cache
        self.last_result = result
        return result
