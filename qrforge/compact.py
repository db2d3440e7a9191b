"""Bit string packed into bytes, most significant bit first."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

_PAD_BYTES = (0b1110_1100, 0b0001_0001)


def _low_mask(count: int) -> int:
    return (1 << count) - 1


@dataclass
class CompactQR:
    """Growable bit buffer; ``length`` counts the bits stored in ``data``."""

    data: bytearray = field(default_factory=bytearray)
    length: int = 0

    @classmethod
    def with_len(cls, data_length: int) -> CompactQR:
        """Create an empty buffer with room for ``data_length`` bits."""
        return cls(bytearray(-(-data_length // 8)), 0)

    @classmethod
    def from_array(cls, data: Iterable[int], length: int) -> CompactQR:
        """Create a buffer holding a copy of ``data`` with ``length`` bits in use."""
        return cls(bytearray(data), length)

    def increase_len(self, data_length: int) -> None:
        """Grow the storage so that ``data_length`` bits fit."""
        needed = data_length // 8 + 1
        if data_length // 8 >= len(self.data):
            self.data.extend(bytes(needed - len(self.data)))

    def push_u8(self, bits: int) -> None:
        """Append eight bits."""
        if not 0 <= bits <= 0xFF:
            raise ValueError(f"byte out of range: {bits}")
        self.increase_len(self.length + 8)
        right = self.length % 8
        first = self.length // 8
        if right == 0:
            self.data[first] = bits
        else:
            left = 8 - right
            self.data[first] |= (bits >> right) & _low_mask(left)
            self.data[first + 1] |= (bits & _low_mask(right)) << left
        self.length += 8

    def push_u8_slice(self, data: Iterable[int]) -> None:
        """Append every byte of ``data``."""
        chunk = bytes(data)
        self.increase_len(self.length + 8 * len(chunk))
        for byte in chunk:
            self.push_u8(byte)

    def push_bits(self, bits: int, length: int) -> None:
        """Append the lowest ``length`` bits of ``bits``."""
        if length < 0:
            raise ValueError("bit count must not be negative")
        self.increase_len(self.length + length)
        bits &= _low_mask(length)

        free = (8 - self.length % 8) % 8
        index = self.length // 8

        if free > length:
            self.data[index] |= bits << (free - length)
            self.length += length
            return

        if free:
            self.data[index] |= (bits >> (length - free)) & _low_mask(free)
            self.length += free

        rest = length - free
        for shift in range(rest - 8, -1, -8):
            self.push_u8((bits >> shift) & 0xFF)

        remaining = rest % 8
        if remaining:
            self.data[self.length // 8] |= (bits & _low_mask(remaining)) << (8 - remaining)
            self.length += remaining

    def fill(self) -> None:
        """Pad the remaining space with the alternating bytes 236 and 17."""
        if self.length % 8:
            raise ValueError("bit length must be a multiple of 8 before padding")
        for i, _ in enumerate(range(self.length, len(self.data), 8)):
            self.push_u8(_PAD_BYTES[i % 2])

    def __len__(self) -> int:
        return self.length

    def __str__(self) -> str:
        return "".join(
            "1" if self.data[i // 8] & (1 << (7 - i % 8)) else "0"
            for i in range(min(self.length, len(self.data) * 8))
        )