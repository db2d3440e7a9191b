"""Function patterns of a QR code matrix and placement of the codeword bits."""

from __future__ import annotations

from typing import Iterable, Iterator, Union

from qrforge import hardcode
from qrforge.compact import CompactQR
from qrforge.datamasking import Mask
from qrforge.ecl import ECL
from qrforge.matrix import QRCode
from qrforge.module import Module, ModuleType

# Width of a finder pattern.
POSITION_SIZE = 7

Bits = Union[CompactQR, bytes, bytearray, memoryview, Iterable[int]]


def transpose(qr: QRCode) -> QRCode:
    """Return a copy of ``qr`` with rows and columns swapped."""
    result = qr.copy()
    result.rows = [
        [Module(qr[row][col].bits) for row in range(qr.size)] for col in range(qr.size)
    ]
    return result


def create_matrix_pattern(qr: QRCode) -> None:
    """Draw the three finder patterns in the top left, top right and bottom left corners."""
    far = qr.size - POSITION_SIZE
    centre = POSITION_SIZE // 2
    for top, left in ((0, 0), (far, 0), (0, far)):
        for dy in range(POSITION_SIZE):
            for dx in range(POSITION_SIZE):
                ring = max(abs(dy - centre), abs(dx - centre))
                qr[top + dy][left + dx] = Module.finder_pattern(ring != 2)


def create_matrix_timing(qr: QRCode) -> None:
    """Draw the two timing lines running between the finder patterns."""
    line = POSITION_SIZE - 1
    for i in range(POSITION_SIZE + 1, qr.size - POSITION_SIZE):
        value = i % 2 == (POSITION_SIZE + 1) % 2
        qr[line][i] = Module.timing(value)
        qr[i][line] = Module.timing(value)


def create_matrix_dark_module(qr: QRCode) -> None:
    """Set the module that is always dark, next to the bottom left finder pattern."""
    qr[qr.size - 8][8] = Module.dark(Module.DARK)


def create_matrix_format_info(qr: QRCode, quality: ECL, mask: Mask) -> None:
    """Write both copies of the format information for ``quality`` and ``mask``."""
    info = hardcode.ecm_to_format_information(quality, mask)
    n = qr.size

    def bit(index: int) -> Module:
        return Module.format(bool(info >> index & 1))

    for i in range(5, -1, -1):
        qr[8][5 - i] = bit(i + 9)
        qr[n - 6 + i][8] = bit(i + 9)

    for i in range(6):
        qr[i][8] = bit(i)
        qr[8][n - i - 1] = bit(i)

    qr[8][7] = bit(8)
    qr[n - 7][8] = bit(8)

    qr[8][8] = bit(7)
    qr[8][n - 8] = bit(7)

    qr[7][8] = bit(6)
    qr[8][n - 7] = bit(6)


def create_matrix_empty(qr: QRCode) -> None:
    """Mark the light separators between the finder patterns and the data."""
    n = qr.size
    for i in range(8):
        qr[i][7] = Module.empty(Module.LIGHT)
        qr[7][i] = Module.empty(Module.LIGHT)

        qr[n - 8 + i][7] = Module.empty(Module.LIGHT)
        qr[n - 8][i] = Module.empty(Module.LIGHT)

        qr[i][n - 8] = Module.empty(Module.LIGHT)
        qr[7][n - 8 + i] = Module.empty(Module.LIGHT)


def _bit_stream(data: bytes) -> Iterator[bool]:
    for byte in data:
        for shift in range(7, -1, -1):
            yield bool(byte >> shift & 1)


def place_on_matrix_data(qr: QRCode, bits: Bits) -> None:
    """Fill the data modules of ``qr`` with ``bits``, most significant bit first.

    Bits run in two-module wide columns from the right edge, alternately
    upwards and downwards, skipping the vertical timing column.
    """
    data = bytes(bits.data) if isinstance(bits, CompactQR) else bytes(bits)
    stream = _bit_stream(data)

    columns = [*range(6), *range(7, qr.size)][::-1][::2]
    upward = True
    for x in columns:
        rows = range(qr.size - 1, -1, -1) if upward else range(qr.size)
        for y in rows:
            for col in (x, x - 1):
                module = qr[y][col]
                if module.module_type() is not ModuleType.DATA:
                    continue
                try:
                    module.set(next(stream))
                except StopIteration:
                    raise ValueError("not enough bits to fill the data modules") from None
        upward = not upward