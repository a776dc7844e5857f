from loguru import logger

from .errors import DecodeError, InputTooShort, InvalidPeriod, KullbackError
from .results import AnalysisResult, PeriodScore
from .transcribe import Encoding, transcribe
from .statistic import period_score, score
from .cache import ScoreCache, ensure_computed
from .analysis import analyze, analyze_bytes, analyze_text, suggested_max_period
from .spikes import find_spikes, top_candidates
from .session import AnalysisSession

# Library stays silent unless a host (e.g. the CLI) opts in
logger.disable("kullback")

__all__ = [
    "AnalysisResult",
    "AnalysisSession",
    "DecodeError",
    "Encoding",
    "InputTooShort",
    "InvalidPeriod",
    "KullbackError",
    "PeriodScore",
    "ScoreCache",
    "analyze",
    "analyze_bytes",
    "analyze_text",
    "ensure_computed",
    "find_spikes",
    "period_score",
    "score",
    "suggested_max_period",
    "top_candidates",
    "transcribe",
]
