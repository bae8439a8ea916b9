"""fnvfold error types."""

from __future__ import annotations


class FnvError(Exception):
    """Base error for all fnvfold failures."""


class UnsupportedLengthError(FnvError, ValueError):
    """Requested digest length is outside [16, 1024] bits."""

    def __init__(self, length: int) -> None:
        super().__init__(
            f"length must be between 16 and 1024, inclusive; received {length}"
        )
        self.length = length
