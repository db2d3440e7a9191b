"""The eight data mask patterns of a QR code."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable

from qrforge.matrix import QRCode
from qrforge.module import ModuleType


class Mask(IntEnum):
    """Mask patterns; they only alter the data and error correction modules."""

    CHECKERBOARD = 0  # (x + y) % 2 == 0
    HORIZONTAL_LINES = 1  # y % 2 == 0
    VERTICAL_LINES = 2  # x % 3 == 0
    DIAGONAL_LINES = 3  # (x + y) % 3 == 0
    LARGE_CHECKERBOARD = 4  # ((x / 3) + (y / 2)) % 2 == 0
    FIELDS = 5  # (x * y) % 2 + (x * y) % 3 == 0
    DIAMONDS = 6  # ((x * y) % 2 + (x * y) % 3) % 2 == 0
    MEADOW = 7  # ((x + y) % 2 + (x * y) % 3) % 2 == 0


_Predicate = Callable[[int, int], bool]

_PATTERNS: dict[Mask, _Predicate] = {
    Mask.CHECKERBOARD: lambda row, col: (row + col) % 2 == 0,
    Mask.HORIZONTAL_LINES: lambda row, col: row % 2 == 0,
    Mask.VERTICAL_LINES: lambda row, col: col % 3 == 0,
    Mask.DIAGONAL_LINES: lambda row, col: (row + col) % 3 == 0,
    Mask.LARGE_CHECKERBOARD: lambda row, col: (row // 2 + col // 3) % 2 == 0,
    Mask.FIELDS: lambda row, col: (row * col) % 2 + (row * col) % 3 == 0,
    Mask.DIAMONDS: lambda row, col: ((row * col) % 2 + (row * col) % 3) % 2 == 0,
    Mask.MEADOW: lambda row, col: ((row + col) % 2 + (row * col) % 3) % 2 == 0,
}


def mask(qr: QRCode, pattern: Mask) -> None:
    """Toggle, in place, every data module of ``qr`` selected by ``pattern``."""
    selects = _PATTERNS[Mask(pattern)]
    for row, modules in enumerate(qr.rows):
        for col, module in enumerate(modules):
            if selects(row, col) and module.module_type() is ModuleType.DATA:
                module.toggle()