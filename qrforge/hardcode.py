"""Tables of the QR code standard indexed by version and error correction level.

Versions are given as their number, 1 to 40.
"""

from __future__ import annotations

from qrforge.datamasking import Mask
from qrforge.ecl import ECL, Mode

# (group 1 block count, group 1 block size, group 2 block count, group 2 block size)
_GROUPS: dict[ECL, tuple[tuple[int, int, int, int], ...]] = {
    ECL.L: (
        (1, 19, 0, 0), (1, 34, 0, 0), (1, 55, 0, 0), (1, 80, 0, 0), (1, 108, 0, 0),
        (2, 68, 0, 0), (2, 78, 0, 0), (2, 97, 0, 0), (2, 116, 0, 0), (2, 68, 2, 69),
        (4, 81, 0, 0), (2, 92, 2, 93), (4, 107, 0, 0), (3, 115, 1, 116), (5, 87, 1, 88),
        (5, 98, 1, 99), (1, 107, 5, 108), (5, 120, 1, 121), (3, 113, 4, 114), (3, 107, 5, 108),
        (4, 116, 4, 117), (2, 111, 7, 112), (4, 121, 5, 122), (6, 117, 4, 118), (8, 106, 4, 107),
        (10, 114, 2, 115), (8, 122, 4, 123), (3, 117, 10, 118), (7, 116, 7, 117), (5, 115, 10, 116),
        (13, 115, 3, 116), (17, 115, 0, 0), (17, 115, 1, 116), (13, 115, 6, 116), (12, 121, 7, 122),
        (6, 121, 14, 122), (17, 122, 4, 123), (4, 122, 18, 123), (20, 117, 4, 118), (19, 118, 6, 119),
    ),
    ECL.M: (
        (1, 16, 0, 0), (1, 28, 0, 0), (1, 44, 0, 0), (2, 32, 0, 0), (2, 43, 0, 0),
        (4, 27, 0, 0), (4, 31, 0, 0), (2, 38, 2, 39), (3, 36, 2, 37), (4, 43, 1, 44),
        (1, 50, 4, 51), (6, 36, 2, 37), (8, 37, 1, 38), (4, 40, 5, 41), (5, 41, 5, 42),
        (7, 45, 3, 46), (10, 46, 1, 47), (9, 43, 4, 44), (3, 44, 11, 45), (3, 41, 13, 42),
        (17, 42, 0, 0), (17, 46, 0, 0), (4, 47, 14, 48), (6, 45, 14, 46), (8, 47, 13, 48),
        (19, 46, 4, 47), (22, 45, 3, 46), (3, 45, 23, 46), (21, 45, 7, 46), (19, 47, 10, 48),
        (2, 46, 29, 47), (10, 46, 23, 47), (14, 46, 21, 47), (14, 46, 23, 47), (12, 47, 26, 48),
        (6, 47, 34, 48), (29, 46, 14, 47), (13, 46, 32, 47), (40, 47, 7, 48), (18, 47, 31, 48),
    ),
    ECL.Q: (
        (1, 13, 0, 0), (1, 22, 0, 0), (2, 17, 0, 0), (2, 24, 0, 0), (2, 15, 2, 16),
        (4, 19, 0, 0), (2, 14, 4, 15), (4, 18, 2, 19), (4, 16, 4, 17), (6, 19, 2, 20),
        (4, 22, 4, 23), (4, 20, 6, 21), (8, 20, 4, 21), (11, 16, 5, 17), (5, 24, 7, 25),
        (15, 19, 2, 20), (1, 22, 15, 23), (17, 22, 1, 23), (17, 21, 4, 22), (15, 24, 5, 25),
        (17, 22, 6, 23), (7, 24, 16, 25), (11, 24, 14, 25), (11, 24, 16, 25), (7, 24, 22, 25),
        (28, 22, 6, 23), (8, 23, 26, 24), (4, 24, 31, 25), (1, 23, 37, 24), (15, 24, 25, 25),
        (42, 24, 1, 25), (10, 24, 35, 25), (29, 24, 19, 25), (44, 24, 7, 25), (39, 24, 14, 25),
        (46, 24, 10, 25), (49, 24, 10, 25), (48, 24, 14, 25), (43, 24, 22, 25), (34, 24, 34, 25),
    ),
    ECL.H: (
        (1, 9, 0, 0), (1, 16, 0, 0), (2, 13, 0, 0), (4, 9, 0, 0), (2, 11, 2, 12),
        (4, 15, 0, 0), (4, 13, 1, 14), (4, 14, 2, 15), (4, 12, 4, 13), (6, 15, 2, 16),
        (3, 12, 8, 13), (7, 14, 4, 15), (12, 11, 4, 12), (11, 12, 5, 13), (11, 12, 7, 13),
        (3, 15, 13, 16), (2, 14, 17, 15), (2, 14, 19, 15), (9, 13, 16, 14), (15, 15, 10, 16),
        (19, 16, 6, 17), (34, 13, 0, 0), (16, 15, 14, 16), (30, 16, 2, 17), (22, 15, 13, 16),
        (33, 16, 4, 17), (12, 15, 28, 16), (11, 15, 31, 16), (19, 15, 26, 16), (23, 15, 25, 16),
        (23, 15, 28, 16), (19, 15, 35, 16), (11, 15, 46, 16), (59, 16, 1, 17), (22, 15, 41, 16),
        (2, 15, 64, 16), (24, 15, 46, 16), (42, 15, 32, 16), (10, 15, 67, 16), (20, 15, 61, 16),
    ),
}

_FORMAT_INFORMATION: dict[ECL, tuple[int, ...]] = {
    ECL.L: (
        0b111_0111_1100_0100, 0b111_0010_1111_0011, 0b111_1101_1010_1010, 0b111_1000_1001_1101,
        0b110_0110_0010_1111, 0b110_0011_0001_1000, 0b110_1100_0100_0001, 0b110_1001_0111_0110,
    ),
    ECL.M: (
        0b101_0100_0001_0010, 0b101_0001_0010_0101, 0b101_1110_0111_1100, 0b101_1011_0100_1011,
        0b100_0101_1111_1001, 0b100_0000_1100_1110, 0b100_1111_1001_0111, 0b100_1010_1010_0000,
    ),
    ECL.Q: (
        0b011_0101_0101_1111, 0b011_0000_0110_1000, 0b011_1111_0011_0001, 0b011_1010_0000_0110,
        0b010_0100_1011_0100, 0b010_0001_1000_0011, 0b010_1110_1101_1010, 0b010_1011_1110_1101,
    ),
    ECL.H: (
        0b001_0110_1000_1001, 0b001_0011_1011_1110, 0b001_1100_1110_0111, 0b001_1001_1101_0000,
        0b000_0111_0110_0010, 0b000_0010_0101_0101, 0b000_1101_0000_1100, 0b000_1000_0011_1011,
    ),
}

_DATA_CODEWORDS: dict[ECL, tuple[int, ...]] = {
    ECL.L: (
        19, 34, 55, 80, 108, 136, 156, 194, 232, 274, 324, 370, 428, 461, 523, 589, 647, 721,
        795, 861, 932, 1006, 1094, 1174, 1276, 1370, 1468, 1531, 1631, 1735, 1843, 1955, 2071,
        2191, 2306, 2434, 2566, 2702, 2812, 2956,
    ),
    ECL.M: (
        16, 28, 44, 64, 86, 108, 124, 154, 182, 216, 254, 290, 334, 365, 415, 453, 507, 563,
        627, 669, 714, 782, 860, 914, 1000, 1062, 1128, 1193, 1267, 1373, 1455, 1541, 1631,
        1725, 1812, 1914, 1992, 2102, 2216, 2334,
    ),
    ECL.Q: (
        13, 22, 34, 48, 62, 76, 88, 110, 132, 154, 180, 206, 244, 261, 295, 325, 367, 397,
        445, 485, 512, 568, 614, 664, 718, 754, 808, 871, 911, 985, 1033, 1115, 1171, 1231,
        1286, 1354, 1426, 1502, 1582, 1666,
    ),
    ECL.H: (
        9, 16, 26, 36, 46, 60, 66, 86, 100, 122, 140, 158, 180, 197, 223, 253, 283, 313, 341,
        385, 406, 442, 464, 514, 538, 596, 628, 661, 701, 745, 793, 845, 901, 961, 986, 1054,
        1096, 1142, 1222, 1276,
    ),
}

# Generator polynomials (alpha exponents), keyed by their degree.
_GENERATORS: dict[int, tuple[int, ...]] = {
    7: (0, 87, 229, 146, 149, 238, 102, 21),
    10: (0, 251, 67, 46, 61, 118, 70, 64, 94, 32, 45),
    13: (0, 74, 152, 176, 100, 86, 100, 106, 104, 130, 218, 206, 140, 78),
    15: (0, 8, 183, 61, 91, 202, 37, 51, 58, 58, 237, 140, 124, 5, 99, 105),
    16: (0, 120, 104, 107, 109, 102, 161, 76, 3, 91, 191, 147, 169, 182, 194, 225, 120),
    17: (0, 43, 139, 206, 78, 43, 239, 123, 206, 214, 147, 24, 99, 150, 39, 243, 163, 136),
    18: (0, 215, 234, 158, 94, 184, 97, 118, 170, 79, 187, 152, 148, 252, 179, 5, 98, 96, 153),
    20: (
        0, 17, 60, 79, 50, 61, 163, 26, 187, 202, 180, 221, 225, 83, 239, 156, 164, 212, 212,
        188, 190,
    ),
    22: (
        0, 210, 171, 247, 242, 93, 230, 14, 109, 221, 53, 200, 74, 8, 172, 98, 80, 219, 134,
        160, 105, 165, 231,
    ),
    24: (
        0, 229, 121, 135, 48, 211, 117, 251, 126, 159, 180, 169, 152, 192, 226, 228, 218, 111,
        0, 117, 232, 87, 96, 227, 21,
    ),
    26: (
        0, 173, 125, 158, 2, 103, 182, 118, 17, 145, 201, 111, 28, 165, 53, 161, 21, 245, 142,
        13, 102, 48, 227, 153, 145, 218, 70,
    ),
    28: (
        0, 168, 223, 200, 104, 224, 234, 108, 180, 110, 190, 195, 147, 205, 27, 232, 201, 21,
        43, 245, 87, 42, 195, 212, 119, 242, 37, 9, 123,
    ),
    30: (
        0, 41, 173, 145, 152, 216, 31, 179, 182, 50, 48, 110, 86, 239, 96, 222, 125, 42, 173,
        226, 193, 224, 130, 156, 37, 251, 216, 238, 40, 192, 180,
    ),
}

# Error correction codewords per block, which selects the generator polynomial.
_EC_PER_BLOCK: dict[ECL, tuple[int, ...]] = {
    ECL.L: (
        7, 10, 15, 20, 26, 18, 20, 24, 30, 18, 20, 24, 26, 30, 22, 24, 28, 30, 28, 28,
        28, 28, 30, 30, 26, 28, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30,
    ),
    ECL.M: (
        10, 16, 26, 18, 24, 16, 18, 22, 22, 26, 30, 22, 22, 24, 24, 28, 28, 26, 26, 26,
        26, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28, 28,
    ),
    ECL.Q: (
        13, 22, 18, 26, 18, 24, 18, 22, 20, 24, 28, 26, 24, 20, 30, 24, 28, 28, 26, 30,
        28, 30, 30, 30, 30, 28, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30,
    ),
    ECL.H: (
        17, 28, 22, 16, 22, 28, 26, 26, 24, 28, 24, 28, 22, 24, 24, 30, 28, 28, 26, 28,
        30, 24, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30, 30,
    ),
}

# Penalty for the share of dark modules, by percentage (0-99).
PERCENT_SCORE: tuple[int, ...] = (
    90, 90, 90, 90, 90, 80, 80, 80, 80, 80, 70, 70, 70, 70, 70, 60, 60, 60, 60, 60,
    50, 50, 50, 50, 50, 40, 40, 40, 40, 40, 30, 30, 30, 30, 30, 20, 20, 20, 20, 20,
    10, 10, 10, 10, 10, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 10, 10, 10, 10, 10,
    20, 20, 20, 20, 20, 30, 30, 30, 30, 30, 40, 40, 40, 40, 40, 50, 50, 50, 50, 50,
    60, 60, 60, 60, 60, 70, 70, 70, 70, 70, 80, 80, 80, 80, 80, 90, 90, 90, 90, 90,
)


def _index(version: int) -> int:
    number = int(version)
    if not 1 <= number <= 40:
        raise ValueError(f"version must be between 1 and 40, got {number}")
    return number - 1


def ecc_to_groups(quality: ECL, version: int) -> tuple[tuple[int, int], tuple[int, int]]:
    """Return ``((count, size), (count, size))`` of the two block groups."""
    g1_count, g1_size, g2_count, g2_size = _GROUPS[ECL(quality)][_index(version)]
    return (g1_count, g1_size), (g2_count, g2_size)


def ecm_to_format_information(quality: ECL, mask: Mask) -> int:
    """Return the 15-bit format information for a level and mask pattern."""
    return _FORMAT_INFORMATION[ECL(quality)][Mask(mask)]


def data_codewords(version: int, ecl: ECL) -> int:
    """Return the number of data codewords for a version and level."""
    return _DATA_CODEWORDS[ECL(ecl)][_index(version)]


def data_bits(version: int, ecl: ECL) -> int:
    """Return the number of data bits for a version and level."""
    return data_codewords(version, ecl) * 8


def cci_bits(version: int, mode: Mode) -> int:
    """Return the width of the character count indicator."""
    number = _index(version) + 1
    if mode is Mode.NUMERIC:
        return 14 if number >= 27 else 12 if number >= 10 else 10
    if mode is Mode.ALPHANUMERIC:
        return 13 if number >= 27 else 11 if number >= 10 else 9
    if mode is Mode.BYTE:
        return 16 if number >= 10 else 8
    raise ValueError(f"unknown mode: {mode!r}")


def get_polynomial(version: int, ecl: ECL) -> tuple[int, ...]:
    """Return the generator polynomial, as alpha exponents, for a version and level."""
    return _GENERATORS[_EC_PER_BLOCK[ECL(ecl)][_index(version)]]