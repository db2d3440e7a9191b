import pytest

from qrforge.compact import CompactQR
from qrforge.ecl import ECL, Mode
from qrforge.encode import (
    ascii_to_alphanumeric,
    best_encoding,
    encode_alphanumeric,
    encode_byte,
    encode_data,
    encode_numeric,
    is_qr_alphanumeric,
)


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"123456", Mode.NUMERIC),
        (b"", Mode.NUMERIC),
        (b"HELLO WORLD", Mode.ALPHANUMERIC),
        (b"FAST-QR123", Mode.ALPHANUMERIC),
        (b"hello", Mode.BYTE),
        ("https://example.com/", Mode.BYTE),
    ],
)
def test_best_encoding(data, expected):
    assert best_encoding(data) is expected


@pytest.mark.parametrize(
    "char, value",
    [("0", 0), ("9", 9), ("A", 10), ("Z", 35), (" ", 36), ("$", 37), (":", 44)],
)
def test_ascii_to_alphanumeric(char, value):
    assert ascii_to_alphanumeric(char) == value
    assert ascii_to_alphanumeric(ord(char)) == value


def test_ascii_to_alphanumeric_rejects_lowercase():
    with pytest.raises(ValueError):
        ascii_to_alphanumeric("a")


def test_is_qr_alphanumeric():
    assert is_qr_alphanumeric("A")
    assert is_qr_alphanumeric(ord("/"))
    assert not is_qr_alphanumeric("a")
    assert not is_qr_alphanumeric("?")


def test_encode_numeric_worked_example():
    compact = CompactQR.with_len(64)
    encode_numeric(compact, b"01234567", 10)
    assert str(compact) == "0001" + "0000001000" + "0000001100" + "0101011001" + "1000011"


def test_encode_numeric_rejects_letters():
    with pytest.raises(ValueError):
        encode_numeric(CompactQR.with_len(64), b"12a", 10)


def test_encode_alphanumeric_worked_example():
    compact = CompactQR.with_len(64)
    encode_alphanumeric(compact, b"AC-42", 9)
    assert str(compact) == "0010" + "000000101" + "00111001110" + "11100111001" + "000010"


def test_encode_byte_carries_input_bytes():
    compact = CompactQR.with_len(64)
    encode_byte(compact, b"Hi", 8)
    bits = str(compact)
    assert bits[:4] == "0100"
    assert int(bits[4:12], 2) == 2
    assert bytes([int(bits[12:20], 2), int(bits[20:28], 2)]) == b"Hi"
    assert len(compact) == 28


def test_encode_data_pads_with_alternating_bytes():
    compact = encode_data(b"hello", ECL.M, Mode.BYTE, 1, capacity=26)
    assert len(compact) == 26 * 8
    data = compact.data
    assert data[0] >> 4 == 0b0100
    pad = list(data[7:26])
    assert pad[0::2] == [236] * len(pad[0::2])
    assert pad[1::2] == [17] * len(pad[1::2])


def test_encode_data_default_capacity_is_byte_aligned():
    compact = encode_data("HELLO WORLD", ECL.Q, Mode.ALPHANUMERIC, 1)
    assert len(compact) % 8 == 0
    assert str(compact).startswith("0010")


def test_encode_data_too_large():
    with pytest.raises(ValueError):
        encode_data(b"x" * 40, ECL.H, Mode.BYTE, 1)