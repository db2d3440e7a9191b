"""Reed-Solomon error correction over GF(256) and codeword interleaving."""

from __future__ import annotations

from typing import Sequence

from qrforge import hardcode
from qrforge.ecl import ECL

# Size of the interleaved structure: data codewords plus error correction of up to 81 blocks.
STRUCTURE_SIZE = 3000 + 30 * 81

# Primitive polynomial x^8 + x^4 + x^3 + x^2 + 1 used by QR codes.
_PRIMITIVE = 0x11D


def _build_tables() -> tuple[tuple[int, ...], tuple[int, ...]]:
    powers = []
    value = 1
    for _ in range(255):
        powers.append(value)
        value <<= 1
        if value & 0x100:
            value ^= _PRIMITIVE
    # alpha**255 wraps around to 1.
    log = tuple(powers + [1])

    antilog = [0] * 256
    for exponent, field_value in enumerate(powers):
        antilog[field_value] = exponent
    return log, tuple(antilog)


# LOG[x] is the field value of alpha**x; ANTILOG[v] is the exponent x with alpha**x == v.
LOG, ANTILOG = _build_tables()


def generated_to_string(poly: Sequence[int]) -> str:
    """Render a polynomial of alpha exponents, e.g. ``α0x4 + α75x3 + ... + α6``."""
    degree = len(poly) - 1
    terms = []
    for offset, item in enumerate(poly):
        power = degree - offset
        suffix = "" if power == 0 else "x + " if power == 1 else f"x{power} + "
        terms.append(f"α{item}{suffix}")
    return "".join(terms)


def division(source: Sequence[int], generator: Sequence[int]) -> list[int]:
    """Divide ``source`` (field values) by ``generator`` (alpha exponents) in GF(256).

    Returns a 255-entry working area; the remainder occupies its last
    ``len(generator) - 1`` entries.
    """
    start = 256 - len(source) - len(generator)
    if start < 0:
        raise ValueError("message and generator together exceed 256 codewords")

    work = [0] * 255
    work[start:start + len(source)] = source

    for i in range(start, start + len(source)):
        if work[i] == 0:
            continue
        alpha = ANTILOG[work[i]]
        for j, exponent in enumerate(generator):
            work[i + j] ^= LOG[(exponent + alpha) % 255]

    return work


def structure(data: Sequence[int], quality: ECL, version: int) -> bytearray:
    """Split data codewords into blocks, add their error correction and interleave.

    The result is zero-padded to ``STRUCTURE_SIZE`` bytes.
    """
    generator = hardcode.get_polynomial(version, quality)
    (g1_count, g1_size), (g2_count, g2_size) = hardcode.ecc_to_groups(quality, version)
    data_length = hardcode.data_codewords(version, quality)
    if len(data) < data_length:
        raise ValueError(f"expected at least {data_length} data codewords, got {len(data)}")

    g2_start = g1_count * g1_size
    blocks = [data[k * g1_size:(k + 1) * g1_size] for k in range(g1_count)]
    blocks += [
        data[g2_start + k * g2_size:g2_start + (k + 1) * g2_size] for k in range(g2_count)
    ]

    out = bytearray(STRUCTURE_SIZE)
    block_count = len(blocks)

    for number, block in enumerate(blocks):
        remainder = division(block, generator)[256 - len(generator):]
        for j, value in enumerate(remainder):
            out[data_length + j * block_count + number] = value

    position = 0
    for i in range(max(g1_size, g2_size)):
        for block in blocks:
            if i < len(block):
                out[position] = block[i]
                position += 1

    return out