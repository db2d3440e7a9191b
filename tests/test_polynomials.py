import pytest

from qrforge.ecl import ECL
from qrforge.hardcode import get_polynomial
from qrforge.polynomials import (
    STRUCTURE_SIZE,
    division,
    generated_to_string,
    structure,
)

HELLO_WORLD_1M = [32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236, 17, 236, 17]
HELLO_WORLD_1M_ECC = [196, 35, 39, 119, 235, 215, 231, 226, 93, 23]


def test_generated_to_string_doc_example():
    assert generated_to_string([0, 75, 249, 78, 6]) == "α0x4 + α75x3 + α249x2 + α78x + α6"


def test_division_hello_world():
    generator = get_polynomial(1, ECL.M)
    result = division(HELLO_WORLD_1M, generator)
    assert len(result) == 255
    assert result[256 - len(generator):] == HELLO_WORLD_1M_ECC


def test_full_codeword_has_zero_remainder():
    generator = get_polynomial(1, ECL.M)
    result = division(HELLO_WORLD_1M + HELLO_WORLD_1M_ECC, generator)
    assert result[256 - len(generator):] == [0] * (len(generator) - 1)


def test_division_of_zeros_is_zero():
    generator = get_polynomial(1, ECL.L)
    assert division([0] * 19, generator) == [0] * 255


def test_division_too_long():
    with pytest.raises(ValueError):
        division([1] * 250, get_polynomial(1, ECL.H))


def test_structure_single_block():
    out = structure(bytes(HELLO_WORLD_1M), ECL.M, 1)
    assert len(out) == STRUCTURE_SIZE
    assert list(out[:16]) == HELLO_WORLD_1M
    assert list(out[16:26]) == HELLO_WORLD_1M_ECC
    assert not any(out[26:])


def test_structure_interleaves_blocks():
    data = bytes(range(62))
    out = structure(data, ECL.Q, 5)
    assert sorted(out[:62]) == list(range(62))
    assert list(out[:4]) == [0, 15, 30, 46]
    assert out[61] == 61

    generator = get_polynomial(5, ECL.Q)
    first_block_ecc = division(data[:15], generator)[256 - len(generator):]
    assert [out[62 + j * 4] for j in range(len(first_block_ecc))] == first_block_ecc


def test_structure_rejects_short_data():
    with pytest.raises(ValueError):
        structure(bytes(5), ECL.M, 1)