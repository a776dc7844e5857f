from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .cache import ScoreCache


@dataclass(frozen=True, order=True)
class PeriodScore:
    period: int
    score: float

    # How many residue classes had >= 2 members and went into the mean
    classes: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "period": self.period,
            "score": self.score,
            "classes": self.classes,
        }


@dataclass(frozen=True)
class AnalysisResult:
    series: list[PeriodScore]
    cache: ScoreCache
    spikes: list[int] = field(default_factory=list)
    length: int = 0

    @property
    def max_period(self) -> int:
        return self.series[-1].period if self.series else 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "length": self.length,
            "max_period": self.max_period,
            "series": [p.to_dict() for p in self.series],
            "spikes": list(self.spikes),
        }
