"""Error correction levels and encoding modes."""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class ECL(IntEnum):
    """Error correction level: share of the code that can be recovered."""

    L = 0  # Low, 7%
    M = 1  # Medium, 15%
    Q = 2  # Quartile, 25%
    H = 3  # High, 30%

    def __str__(self) -> str:
        return self.name

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


class Mode(Enum):
    """Data encoding mode."""

    NUMERIC = auto()
    ALPHANUMERIC = auto()
    BYTE = auto()