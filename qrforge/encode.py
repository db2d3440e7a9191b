"""Encoding of input data into the data codewords of a QR code."""

from __future__ import annotations

from typing import Callable, Union

from qrforge import hardcode
from qrforge.compact import CompactQR
from qrforge.ecl import ECL, Mode

_ALPHANUMERIC = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"
_ALPHANUMERIC_VALUES = {ord(char): value for value, char in enumerate(_ALPHANUMERIC)}

# Bits used for a group of one, two or three digits in numeric mode.
_NUMERIC_WIDTHS = {1: 4, 2: 7, 3: 10}

Data = Union[bytes, bytearray, memoryview, str]
Char = Union[int, str]


def _as_bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _total_codewords(version: int, ecl: ECL) -> int:
    (g1_count, _), (g2_count, _) = hardcode.ecc_to_groups(ecl, version)
    ec_per_block = len(hardcode.get_polynomial(version, ecl)) - 1
    return hardcode.data_codewords(version, ecl) + (g1_count + g2_count) * ec_per_block


def best_encoding(data: Data) -> Mode:
    """Return the most compact mode able to hold ``data``: numeric, alphanumeric or byte."""
    payload = _as_bytes(data)
    if all(0x30 <= byte <= 0x39 for byte in payload):
        return Mode.NUMERIC
    if all(is_qr_alphanumeric(byte) for byte in payload):
        return Mode.ALPHANUMERIC
    return Mode.BYTE


def encode_numeric(compact: CompactQR, data: Data, cci_bits: int) -> None:
    """Append ``data`` in numeric mode: groups of three digits in ten bits."""
    payload = _as_bytes(data)
    for byte in payload:
        if not 0x30 <= byte <= 0x39:
            raise ValueError(f"unexpected character {chr(byte)!r} in numeric mode")

    compact.push_bits(0b0001, 4)
    compact.push_bits(len(payload), cci_bits)
    for start in range(0, len(payload), 3):
        group = payload[start:start + 3]
        compact.push_bits(int(group.decode("ascii")), _NUMERIC_WIDTHS[len(group)])


def encode_alphanumeric(compact: CompactQR, data: Data, cci_bits: int) -> None:
    """Append ``data`` in alphanumeric mode: pairs of characters in eleven bits."""
    payload = _as_bytes(data)
    values = [ascii_to_alphanumeric(byte) for byte in payload]

    compact.push_bits(0b0010, 4)
    compact.push_bits(len(payload), cci_bits)
    for first, second in zip(values[0::2], values[1::2]):
        compact.push_bits(first * 45 + second, 11)
    if len(values) % 2:
        compact.push_bits(values[-1], 6)


def encode_byte(compact: CompactQR, data: Data, cci_bits: int) -> None:
    """Append ``data`` in byte mode, eight bits per byte."""
    payload = _as_bytes(data)
    compact.push_bits(0b0100, 4)
    compact.push_bits(len(payload), cci_bits)
    compact.push_u8_slice(payload)


_ENCODERS: dict[Mode, Callable[[CompactQR, Data, int], None]] = {
    Mode.NUMERIC: encode_numeric,
    Mode.ALPHANUMERIC: encode_alphanumeric,
    Mode.BYTE: encode_byte,
}


def encode_data(
    data: Data,
    ecl: ECL,
    mode: Mode,
    version: int,
    capacity: int | None = None,
) -> CompactQR:
    """Encode ``data`` and pad it into the codewords of a QR code.

    ``capacity`` is the total number of codewords of the symbol; by default it
    is taken from the tables for ``version`` and ``ecl``.  The result is
    terminated, aligned to a byte and padded with the bytes 236 and 17.
    """
    payload = _as_bytes(data)
    if capacity is None:
        capacity = _total_codewords(version, ecl)

    compact = CompactQR(bytearray(capacity * 8), 0)
    _ENCODERS[Mode(mode)](compact, payload, hardcode.cci_bits(version, mode))

    available = hardcode.data_bits(version, ecl) - len(compact)
    if available < 0:
        raise ValueError(
            f"data too big to be encoded in version {version} with level {ecl}"
        )
    compact.push_bits(0, min(available, 4))
    compact.push_bits(0, (8 - len(compact) % 8) % 8)
    compact.fill()
    return compact


def ascii_to_alphanumeric(c: Char) -> int:
    """Return the alphanumeric-mode value (0-44) of a character."""
    code = _code(c)
    try:
        return _ALPHANUMERIC_VALUES[code]
    except KeyError:
        raise ValueError(
            f"unexpected character {chr(code)!r} in alphanumeric mode"
        ) from None


def is_qr_alphanumeric(c: Char) -> bool:
    """Tell whether a character belongs to the alphanumeric set: 0-9, A-Z, space, $%*+-./:"""
    return _code(c) in _ALPHANUMERIC_VALUES