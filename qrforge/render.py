"""Text rendering of a QR code with half-block characters."""

from __future__ import annotations

from typing import Sequence

from qrforge.matrix import QRCode
from qrforge.module import Module

EMPTY = " "
BLOCK = "█"
TOP = "▀"
BOTTOM = "▄"

# Keyed by (upper module dark, lower module dark); dark modules print as blank.
_CELLS = {
    (True, True): EMPTY,
    (True, False): BOTTOM,
    (False, True): TOP,
    (False, False): BLOCK,
}


def _line(upper: Sequence[Module], lower: Sequence[Module], size: int) -> str:
    return "".join(
        _CELLS[top.value(), bottom.value()] for top, bottom in zip(upper[:size], lower[:size])
    )


def print_matrix_with_margin(qr: QRCode) -> str:
    """Render ``qr`` two rows per text line, framed by a one-module margin."""
    size = qr.size
    if size < 1:
        raise ValueError("cannot render an empty matrix")

    light = [Module.empty(False)] * size
    dark = [Module.empty(True)] * size

    lines = [BOTTOM + _line(dark, light, size) + BOTTOM]
    lines.extend(
        BLOCK + _line(qr[i], qr[i + 1], size) + BLOCK for i in range(0, size - 1, 2)
    )
    lines.append(BLOCK + _line(qr[size - 1], light, size) + BLOCK)
    return "\n".join(lines)