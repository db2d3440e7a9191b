"""Single modules (pixels) of a QR code matrix and their roles."""

from __future__ import annotations

from enum import IntEnum


class ModuleType(IntEnum):
    """Role of a module in the matrix, stored in bits 1..3 of a module."""

    DATA = 0 << 1
    FINDER_PATTERN = 1 << 1
    ALIGNMENT = 2 << 1
    TIMING = 3 << 1
    FORMAT = 4 << 1
    VERSION = 5 << 1
    DARK_MODULE = 6 << 1
    EMPTY = 7 << 1


class Module:
    """One pixel of a QR code: bit 0 holds the colour, the upper bits its type."""

    __slots__ = ("bits",)

    DARK = True
    LIGHT = False

    def __init__(self, bits: int = 0) -> None:
        self.bits = bits

    @classmethod
    def _of(cls, value: bool, module_type: ModuleType) -> Module:
        return cls(int(bool(value)) | int(module_type))

    @classmethod
    def data(cls, value: bool) -> Module:
        """Create a data module."""
        return cls._of(value, ModuleType.DATA)

    @classmethod
    def finder_pattern(cls, value: bool) -> Module:
        """Create a finder pattern module."""
        return cls._of(value, ModuleType.FINDER_PATTERN)

    @classmethod
    def alignment(cls, value: bool) -> Module:
        """Create an alignment pattern module."""
        return cls._of(value, ModuleType.ALIGNMENT)

    @classmethod
    def timing(cls, value: bool) -> Module:
        """Create a timing pattern module."""
        return cls._of(value, ModuleType.TIMING)

    @classmethod
    def format(cls, value: bool) -> Module:
        """Create a format information module."""
        return cls._of(value, ModuleType.FORMAT)

    @classmethod
    def version(cls, value: bool) -> Module:
        """Create a version information module."""
        return cls._of(value, ModuleType.VERSION)

    @classmethod
    def dark(cls, value: bool) -> Module:
        """Create the dark module."""
        return cls._of(value, ModuleType.DARK_MODULE)

    @classmethod
    def empty(cls, value: bool) -> Module:
        """Create a separator module between finder patterns and data."""
        return cls._of(value, ModuleType.EMPTY)

    def value(self) -> bool:
        """Return True for a dark module, False for a light one."""
        return self.bits & 1 == 1

    def module_type(self) -> ModuleType:
        """Return the role of this module."""
        try:
            return ModuleType((self.bits >> 1) << 1)
        except ValueError:
            raise ValueError(f"invalid module bits: {self.bits}") from None

    def set(self, value: bool) -> None:
        """Set the colour of the module."""
        self.bits = self.bits | 1 if value else self.bits & ~1

    def toggle(self) -> None:
        """Invert the colour of the module."""
        self.bits ^= 1

    def __eq__(self, other: object) -> bool:
        if isinstance(other, bool):
            return self.value() == other
        if isinstance(other, Module):
            return self.bits == other.bits
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Module({self.bits})"