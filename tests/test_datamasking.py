import pytest

from qrforge.datamasking import Mask, mask
from qrforge.matrix import QRCode
from qrforge.module import Module


def _grid(*rows):
    return [[c == "T" for c in row] for row in rows]


EXPECTED = {
    Mask.CHECKERBOARD: _grid(
        "TFTFTFTFTF",
        "FTFTFTFTFT",
        "TFTFTFTFTF",
        "FTFTFTFTFT",
        "TFTFTFTFTF",
        "FTFTFTFTFT",
        "TFTFTFTFTF",
        "FTFTFTFTFT",
        "TFTFTFTFTF",
        "FTFTFTFTFT",
    ),
    Mask.HORIZONTAL_LINES: _grid(
        "TTTTTTTTTT",
        "FFFFFFFFFF",
        "TTTTTTTTTT",
        "FFFFFFFFFF",
        "TTTTTTTTTT",
        "FFFFFFFFFF",
        "TTTTTTTTTT",
        "FFFFFFFFFF",
        "TTTTTTTTTT",
        "FFFFFFFFFF",
    ),
    Mask.VERTICAL_LINES: _grid(*["TFFTFFTFFT"] * 10),
    Mask.DIAGONAL_LINES: _grid(
        "TFFTFFTFFT",
        "FFTFFTFFTF",
        "FTFFTFFTFF",
        "TFFTFFTFFT",
        "FFTFFTFFTF",
        "FTFFTFFTFF",
        "TFFTFFTFFT",
        "FFTFFTFFTF",
        "FTFFTFFTFF",
        "TFFTFFTFFT",
    ),
    Mask.LARGE_CHECKERBOARD: _grid(
        "TTTFFFTTTF",
        "TTTFFFTTTF",
        "FFFTTTFFFT",
        "FFFTTTFFFT",
        "TTTFFFTTTF",
        "TTTFFFTTTF",
        "FFFTTTFFFT",
        "FFFTTTFFFT",
        "TTTFFFTTTF",
        "TTTFFFTTTF",
    ),
    Mask.FIELDS: _grid(
        "TTTTTTTTTT",
        "TFFFFFTFFF",
        "TFFTFFTFFT",
        "TFTFTFTFTF",
        "TFFTFFTFFT",
        "TFFFFFTFFF",
        "TTTTTTTTTT",
        "TFFFFFTFFF",
        "TFFTFFTFFT",
        "TFTFTFTFTF",
    ),
    Mask.DIAMONDS: _grid(
        "TTTTTTTTTT",
        "TTTFFFTTTF",
        "TTFTTFTTFT",
        "TFTFTFTFTF",
        "TFTTFTTFTT",
        "TFFFTTTFFF",
        "TTTTTTTTTT",
        "TTTFFFTTTF",
        "TTFTTFTTFT",
        "TFTFTFTFTF",
    ),
    Mask.MEADOW: _grid(
        "TFTFTFTFTF",
        "FFFTTTFFFT",
        "TFFFTTTFFF",
        "FTFTFTFTFT",
        "TTTFFFTTTF",
        "FTTTFFFTTT",
        "TFTFTFTFTF",
        "FFFTTTFFFT",
        "TFFFTTTFFF",
        "FTFTFTFTFT",
    ),
}


@pytest.mark.parametrize("pattern", list(Mask))
def test_mask_on_empty_matrix(pattern):
    qr = QRCode.default(10)
    mask(qr, pattern)
    assert qr.values() == EXPECTED[pattern]


@pytest.mark.parametrize("pattern", list(Mask))
def test_mask_twice_restores_matrix(pattern):
    qr = QRCode.default(13)
    qr[3][4].set(True)
    qr[7][1].set(True)
    before = qr.values()
    mask(qr, pattern)
    mask(qr, pattern)
    assert qr.values() == before


@pytest.mark.parametrize("pattern", list(Mask))
def test_mask_leaves_function_modules_alone(pattern):
    qr = QRCode.default(10)
    for row in qr.rows:
        for col in range(10):
            row[col] = Module.finder_pattern(Module.LIGHT)
    mask(qr, pattern)
    assert all(not value for row in qr.values() for value in row)


def test_mask_accepts_integer_pattern():
    qr = QRCode.default(10)
    mask(qr, 0)
    assert qr.values() == EXPECTED[Mask.CHECKERBOARD]


def test_mask_rejects_unknown_pattern():
    qr = QRCode.default(10)
    with pytest.raises(ValueError):
        mask(qr, 8)