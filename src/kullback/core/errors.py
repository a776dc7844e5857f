from __future__ import annotations

from typing import Optional


class KullbackError(ValueError):
    """Base class for every error the analysis engine raises on bad input."""


class DecodeError(KullbackError):
    def __init__(self, encoding: str, message: str) -> None:
        self.encoding = encoding
        super().__init__(f"{encoding}: {message}")


class InvalidPeriod(KullbackError):
    def __init__(self, period: int, length: int, message: Optional[str] = None) -> None:
        self.period = period
        self.length = length
        if message is None:
            if length < 3:
                message = f"Period {period} is invalid: {length} bytes of data leave no testable period."
            else:
                message = f"Period {period} is invalid: must be between 2 and {length - 1} for {length} bytes of data."
        super().__init__(message)


class InputTooShort(KullbackError):
    def __init__(self, length: int, minimum: int) -> None:
        self.length = length
        self.minimum = minimum
        super().__init__(f"Length of input is too short ({minimum} bytes minimum, got {length}).")
