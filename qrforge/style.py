"""Module shapes and colours used when drawing a QR code as vector paths."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, Optional, Union

from qrforge.module import Module, ModuleType

ColorLike = Union[str, bytes, bytearray, Iterable[int]]


class Shape(Enum):
    """Shape used to draw a dark module."""

    SQUARE = "square"
    CIRCLE = "circle"
    ROUNDED_SQUARE = "rounded_square"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    DIAMOND = "diamond"
    CONNECTED = "connected"

    @classmethod
    def from_name(cls, name: str) -> Shape:
        """Return the shape named ``name``, case-insensitively; unknown names give a square."""
        try:
            return cls(name.lower())
        except ValueError:
            return cls.SQUARE

    def __str__(self) -> str:
        return self.value


class ImageBackgroundShape(Enum):
    """Shape of the background behind an embedded image."""

    SQUARE = "square"
    CIRCLE = "circle"
    ROUNDED_SQUARE = "rounded_square"


class Position(IntEnum):
    """Bit index of each neighbour in a ``Neighborhood``."""

    TOP_LEFT = 0
    TOP = 1
    TOP_RIGHT = 2
    RIGHT = 3
    BOTTOM_RIGHT = 4
    BOTTOM = 5
    BOTTOM_LEFT = 6
    LEFT = 7


@dataclass(frozen=True)
class Neighborhood:
    """Dark neighbours of a module, one bit per ``Position``."""

    bits: int = 0

    def get(self, position: Position) -> bool:
        """Tell whether the neighbour at ``position`` is dark."""
        return bool(self.bits & (1 << int(position)))

    def mask(self, bits: int) -> int:
        """Return the neighbour bits selected by ``bits``."""
        return self.bits & bits


def rgba2hex(color: Iterable[int]) -> str:
    """Return ``#rrggbb``, or ``#rrggbbaa`` when the alpha is not 255."""
    components = tuple(color)
    if len(components) != 4:
        raise ValueError(f"expected 4 colour components, got {len(components)}")
    if any(not 0 <= c <= 255 for c in components):
        raise ValueError(f"colour components must be between 0 and 255: {components}")
    red, green, blue, alpha = components
    text = f"#{red:02x}{green:02x}{blue:02x}"
    return text if alpha == 255 else text + f"{alpha:02x}"


def to_color(value: ColorLike) -> str:
    """Turn a colour string or 3 or 4 RGB(A) components into an SVG colour string."""
    if isinstance(value, str):
        return value
    components = list(value)
    if len(components) == 3:
        return rgba2hex([*components, 255])
    if len(components) == 4:
        return rgba2hex(components)
    raise ValueError("invalid color length")


_SQUARE_PATH = "M{x},{y}h1v1h-1z"

# Paths for the connected shape, keyed by the dark direct neighbours
# (left, bottom, right, top).
_CONNECTED_PATHS = {
    0b0000_0000: "M{x},{y}.5 a0.5 0.5,0,0,0,1,0a0.5 0.5,0,0,0,-1,0z",
    0b1010_0000: "M{x} {y1}h1a1 1,0,0,0,-1 -1z",
    0b0010_1000: "M{x1} {y1}v-1a1 1,0,0,0,-1 1z",
    0b0000_1010: "M{x1} {y}h-1a1 1,0,0,0,1 1z",
    0b1000_0010: "M{x} {y}v1a1 1,0,0,0,1 -1z",
    0b1000_0000: "M{x} {y}v1h0.5a0.5 0.5,0,0,0,0 -1z",
    0b0010_0000: "M{x} {y1}h1v-0.5a0.5 -0.5,0,0,0,-1 0z",
    0b0000_1000: "M{x1} {y1}v-1h-0.5a0.5 0.5,0,0,0,0 1z",
    0b0000_0010: "M{x1} {y}h-1v0.5a0.5 0.5,0,0,0,1 0z",
}

_DIRECT_NEIGHBOURS = 0b1010_1010


@dataclass
class ModuleStyle:
    """How dark modules are drawn: shape, scale and an optional colour of their own."""

    shape: Shape = Shape.SQUARE
    scale: float = 1.0
    color: Optional[str] = None

    def __post_init__(self) -> None:
        if self.color is not None:
            self.color = to_color(self.color)

    def module_fn(self, y: int, x: int, module: Module, neighborhood: Neighborhood) -> str:
        """Return the SVG path of the module at row ``y``, column ``x``."""
        if module.module_type() in (ModuleType.FINDER_PATTERN, ModuleType.ALIGNMENT):
            return _SQUARE_PATH.format(x=x, y=y)

        scale = self.scale
        shape = self.shape
        if shape is Shape.SQUARE:
            offset = (1.0 - scale) / 2.0
            return (
                f"M{x + offset:.2f},{y + offset:.2f}"
                f"h{scale:.2f}v{scale:.2f}h-{scale:.2f}z"
            )
        if shape is Shape.CIRCLE:
            half = scale / 2.0
            return f"M{x + 1},{y}.5a{half:.2f},{half:.2f} 0 1,1 0,-.1"
        if shape is Shape.ROUNDED_SQUARE:
            s = scale / 2.0
            return (
                f"M{x + s:.2f},{y + s:.2f}h{s:.2f}v{s:.2f}h-{s:.2f}"
                f"v-{s:.2f}h-{s:.2f}v-{s:.2f}h{s:.2f}"
            )
        if shape is Shape.VERTICAL:
            return f"M{x}.1,{y}h.8v1h-.8"
        if shape is Shape.HORIZONTAL:
            return f"M{x},{y}.1h1v.8h-1"
        if shape is Shape.DIAMOND:
            s = scale / 2.0
            return (
                f"M{x + 0.5:.2f},{y + 0.5 - s:.2f}l{s:.2f},{s:.2f}l-{s:.2f},{s:.2f}"
                f"l-{s:.2f},-{s:.2f}l{s:.2f},-{s:.2f}l{s:.2f},{s:.2f}z"
            )

        template = _CONNECTED_PATHS.get(neighborhood.mask(_DIRECT_NEIGHBOURS), _SQUARE_PATH)
        return template.format(x=x, y=y, x1=x + 1, y1=y + 1)