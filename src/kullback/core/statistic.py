from __future__ import annotations

from .errors import InvalidPeriod
from .results import PeriodScore
from .utils import index_of_coincidence, residue_classes


def validate_period(data: bytes, period: int) -> None:
    """A period must leave at least one column with two samples, so 2 <= period < len(data)."""
    if period < 2 or period >= len(data):
        raise InvalidPeriod(period, len(data))


def period_score(data: bytes, period: int) -> PeriodScore:
    """
    Kullback statistic for one candidate period.

    Transpose the data into `period` columns and average the index of
    coincidence of each column. Columns with fewer than 2 bytes can't form a
    pair and are left out of the mean. When `period` is a multiple of the key
    length every column went through the same single-byte substitution, so
    the plaintext's skew survives and the average jumps up.
    """
    validate_period(data, period)

    iocs = []
    for column in residue_classes(data, period):
        ioc = index_of_coincidence(column)
        if ioc is not None:
            iocs.append(ioc)

    # period < len(data) guarantees column 0 has >= 2 members
    return PeriodScore(period=period, score=sum(iocs) / len(iocs), classes=len(iocs))


def score(data: bytes, period: int) -> float:
    return period_score(data, period).score
