"""Square matrix of modules that makes up a QR code."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from qrforge.module import Module


@dataclass
class QRCode:
    """A QR code matrix of ``size`` x ``size`` modules plus its parameters."""

    size: int
    rows: list[list[Module]] = field(default_factory=list, repr=False)
    version: Any = None
    ecl: Any = None
    mask: Any = None
    mode: Any = None

    @classmethod
    def default(cls, size: int) -> QRCode:
        """Create a matrix of light data modules with no parameters set."""
        if size < 0:
            raise ValueError("size must not be negative")
        rows = [[Module.data(Module.LIGHT) for _ in range(size)] for _ in range(size)]
        return cls(size=size, rows=rows)

    def __getitem__(self, index: int) -> list[Module]:
        return self.rows[index]

    def copy(self) -> QRCode:
        """Return an independent copy of the matrix and its parameters."""
        rows = [[Module(module.bits) for module in row] for row in self.rows]
        return QRCode(
            size=self.size,
            rows=rows,
            version=self.version,
            ecl=self.ecl,
            mask=self.mask,
            mode=self.mode,
        )

    def values(self) -> list[list[bool]]:
        """Return the colours of the modules, True for dark, row by row."""
        return [[module.value() for module in row] for row in self.rows]