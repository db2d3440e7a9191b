"""Rendering of a QR code matrix as an SVG document."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from typing import Optional, Union

from qrforge.ecl import ECL
from qrforge.matrix import QRCode
from qrforge.style import (
    ColorLike,
    ImageBackgroundShape,
    ModuleStyle,
    Neighborhood,
    Position,
    Shape,
    to_color,
)

# Side of the background square behind an embedded image, by version.
_BORDER_SIZES: tuple[float, ...] = (
    5.0, 9.0, 9.0, 11.0, 13.0,
    13.0, 15.0, 17.0, 17.0, 19.0,
    21.0, 21.0, 23.0, 25.0, 25.0,
    27.0, 29.0, 29.0, 31.0, 33.0,
    33.0, 35.0, 37.0, 37.0, 39.0,
    41.0, 41.0, 43.0, 45.0, 45.0,
    47.0, 49.0, 49.0, 51.0, 53.0,
    53.0, 55.0, 57.0, 57.0, 59.0,
)

_IMAGE_RECTS = {
    ImageBackgroundShape.SQUARE: '<rect x="{0}" y="{1}" width="{2}" height="{2}" fill="{3}"/>',
    ImageBackgroundShape.CIRCLE: (
        '<rect x="{0}" y="{1}" width="{2}" height="{2}" fill="{3}" rx="1000px"/>'
    ),
    ImageBackgroundShape.ROUNDED_SQUARE: (
        '<rect x="{0}" y="{1}" width="{2}" height="{2}" fill="{3}" rx="1px"/>'
    ),
}

_NEIGHBOUR_OFFSETS = (
    (Position.TOP_LEFT, -1, -1),
    (Position.TOP, 0, -1),
    (Position.TOP_RIGHT, 1, -1),
    (Position.RIGHT, 1, 0),
    (Position.BOTTOM_RIGHT, 1, 1),
    (Position.BOTTOM, 0, 1),
    (Position.BOTTOM_LEFT, -1, 1),
    (Position.LEFT, -1, 0),
)


def _number(value: float) -> str:
    """Shortest plain text of a number, without a trailing ``.0``."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _round_half_away(value: float) -> float:
    return float(math.floor(value + 0.5)) if value >= 0 else float(math.ceil(value - 0.5))


def _version_index(size: int) -> int:
    if size < 21 or (size - 17) % 4:
        raise ValueError(f"matrix size {size} does not match any QR code version")
    index = (size - 17) // 4 - 1
    if index >= len(_BORDER_SIZES):
        raise ValueError(f"matrix size {size} does not match any QR code version")
    return index


@dataclass
class _Placement:
    hidden: list[list[bool]]
    x: float
    y: float
    border_size: float
    image_size: float


class SvgBuilder:
    """Builds an SVG document for a QR code; setters return the builder."""

    def __init__(self) -> None:
        self._styles: list[ModuleStyle] = []
        self._margin = 4
        self._background_color = to_color([255, 255, 255, 255])
        self._dot_color = to_color([0, 0, 0, 255])
        self._image: Optional[str] = None
        self._image_background_color = to_color([255, 255, 255, 255])
        self._image_background_shape = ImageBackgroundShape.SQUARE
        self._image_size: Optional[float] = None
        self._image_gap: Optional[float] = None
        self._image_position: Optional[tuple[float, float]] = None

    def margin(self, margin: int) -> SvgBuilder:
        """Set the quiet zone around the code, in modules (default 4)."""
        if margin < 0:
            raise ValueError("margin must not be negative")
        self._margin = int(margin)
        return self

    def module_color(self, color: ColorLike) -> SvgBuilder:
        """Set the colour of dark modules (default black)."""
        self._dot_color = to_color(color)
        return self

    def background_color(self, color: ColorLike) -> SvgBuilder:
        """Set the background colour (default white)."""
        self._background_color = to_color(color)
        return self

    def style(self, style: ModuleStyle) -> SvgBuilder:
        """Add a module style; each style draws its own path."""
        self._styles.append(style)
        return self

    def image(self, image: str) -> SvgBuilder:
        """Embed an image, given as a path or a data URI, over the code."""
        self._image = image
        return self

    def image_background_color(self, color: ColorLike) -> SvgBuilder:
        """Set the colour behind the embedded image (default white)."""
        self._image_background_color = to_color(color)
        return self

    def image_background_shape(self, shape: ImageBackgroundShape) -> SvgBuilder:
        """Set the shape behind the embedded image (default square)."""
        self._image_background_shape = ImageBackgroundShape(shape)
        return self

    def image_size(self, size: float) -> SvgBuilder:
        """Set the image size in modules."""
        self._image_size = float(size)
        return self

    def image_gap(self, gap: float) -> SvgBuilder:
        """Set the gap between the image and its background border, in modules."""
        self._image_gap = float(gap)
        return self

    def image_position(self, x: float, y: float) -> SvgBuilder:
        """Set the centre of the image, in modules of the whole document."""
        self._image_position = (float(x), float(y))
        return self

    def _default_placement(self, n: int) -> tuple[float, float]:
        index = _version_index(n)
        border_size = _BORDER_SIZES[index]
        gap = 3.0 if self._image_background_shape is ImageBackgroundShape.CIRCLE else 2.0
        gap = gap * (index + 10) / 10.0
        return border_size, _round_half_away(border_size - gap)

    def _placement(self, n: int) -> Optional[_Placement]:
        if self._image is None:
            return None

        border_size, image_size = self._default_placement(n)

        if self._image_size is not None:
            gap = border_size - image_size
            border_size = self._image_size + gap
            image_size = self._image_size

        if self._image_gap is not None:
            border_size = image_size + self._image_gap * 2.0

        placed = (self._margin * 2 + n) - border_size
        # Keep an integral position so that no module is partly covered.
        if math.fmod(placed, 2.0) != 0.0:
            placed += 1.0
            border_size -= 1.0
        placed /= 2.0

        x, y = placed, placed
        if self._image_position is not None:
            px, py = self._image_position
            x, y = px - border_size / 2.0, py - border_size / 2.0

        low = max(0, int((n - border_size) / 2.0))
        high = max(0, int((n + border_size) / 2.0))
        hidden = [
            [low <= col < high and low <= row < high for col in range(n)] for row in range(n)
        ]
        return _Placement(hidden, x, y, border_size, image_size)

    def _image_markup(self, placement: _Placement) -> str:
        if self._image is None:
            return ""
        rect = (
            _IMAGE_RECTS[self._image_background_shape]
            .replace("{0}", _number(placement.x))
            .replace("{1}", _number(placement.y))
            .replace("{2}", _number(placement.border_size))
            .replace("{3}", self._image_background_color)
        )
        inset = (placement.border_size - placement.image_size) / 2.0
        size = placement.image_size
        return rect + (
            f'<image x="{placement.x + inset:.2f}" y="{placement.y + inset:.2f}" '
            f'width="{size:.2f}" height="{size:.2f}" href="{self._image}" />'
        )

    @staticmethod
    def _neighborhood(qr: QRCode, hidden: list[list[bool]], x: int, y: int) -> Neighborhood:
        n = qr.size
        bits = 0
        for position, dx, dy in _NEIGHBOUR_OFFSETS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < n and 0 <= ny < n and qr[ny][nx].value() and not hidden[ny][nx]:
                bits |= 1 << int(position)
        return Neighborhood(bits)

    def _paths(self, qr: QRCode, hidden: list[list[bool]]) -> str:
        styles = self._styles or [ModuleStyle()]
        paths = [['<path d="'] for _ in styles]

        for y in range(qr.size):
            for x, cell in enumerate(qr[y][: qr.size]):
                if not cell.value() or hidden[y][x]:
                    continue
                neighbours = self._neighborhood(qr, hidden, x, y)
                for parts, style in zip(paths, styles):
                    parts.append(
                        style.module_fn(y + self._margin, x + self._margin, cell, neighbours)
                    )

        for parts, style in zip(paths, styles):
            color = style.color if style.color is not None else self._dot_color
            if style.shape is Shape.ROUNDED_SQUARE:
                parts.append(f'" stroke-width=".3" stroke-linejoin="round" stroke="{color}')
            parts.append(f'" fill="{color}"/>')

        return "".join("".join(parts) for parts in paths)

    def to_str(self, qr: QRCode) -> str:
        """Return the SVG document for ``qr``."""
        n = qr.size
        placement = self._placement(n)
        total = self._margin * 2 + n

        out = [
            f'<svg viewBox="0 0 {total} {total}" xmlns="http://www.w3.org/2000/svg">',
            f'<rect width="{total}px" height="{total}px" fill="{self._background_color}"/>',
        ]
        if placement is not None:
            out.append(self._paths(qr, placement.hidden))
            out.append(self._image_markup(placement))
        else:
            out.append(self._paths(qr, [[False] * n for _ in range(n)]))
        out.append("</svg>")
        return "".join(out)

    def as_bytes(self, qr: QRCode) -> bytes:
        """Return the SVG document for ``qr`` encoded as UTF-8."""
        return self.to_str(qr).encode("utf-8")

    def to_file(self, qr: QRCode, path: Union[str, os.PathLike]) -> None:
        """Write the SVG document for ``qr`` to ``path``."""
        with open(path, "wb") as handle:
            handle.write(self.as_bytes(qr))


def parse_color(text: str) -> list[int]:
    """Parse ``#RRGGBB[AA]`` into colour components; alpha defaults to 255."""
    digits = text[1:] if text.startswith("#") else text
    components = []
    for start in range(0, len(digits) - len(digits) % 2, 2):
        pair = digits[start:start + 2]
        if any(c not in "0123456789abcdefABCDEF" for c in pair):
            raise ValueError(f"invalid hexadecimal colour component: {pair!r}")
        components.append(int(pair, 16))
    if len(components) == 3:
        components.append(255)
    return components


def _components(value: Union[str, list[int]]) -> list[int]:
    return parse_color(value) if isinstance(value, str) else list(value)


@dataclass
class SvgOptions:
    """Rendering options, with colours as ``#RRGGBB[AA]`` text or components."""

    style: ModuleStyle = field(default_factory=ModuleStyle)
    module_color: Union[str, list[int]] = field(default_factory=lambda: [0, 0, 0, 255])
    margin: int = 4
    ecl: Optional[ECL] = None
    version: Optional[int] = None
    background_color: Union[str, list[int]] = field(
        default_factory=lambda: [255, 255, 255, 255]
    )
    image: str = ""
    image_background_color: Union[str, list[int]] = field(
        default_factory=lambda: [255, 255, 255, 255]
    )
    image_background_shape: ImageBackgroundShape = ImageBackgroundShape.SQUARE
    image_size: list[float] = field(default_factory=list)
    image_position: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.module_color = _components(self.module_color)
        self.background_color = _components(self.background_color)
        self.image_background_color = _components(self.image_background_color)

    def configure(self, builder: SvgBuilder) -> SvgBuilder:
        """Apply these options to ``builder`` and return it."""
        builder.style(self.style)
        builder.margin(self.margin)
        builder.background_color(self.background_color)
        builder.module_color(self.module_color)
        if self.image:
            builder.image(self.image)
        builder.image_background_color(self.image_background_color)
        builder.image_background_shape(self.image_background_shape)
        if len(self.image_size) == 2:
            size, gap = self.image_size
            builder.image_size(size)
            builder.image_gap(gap)
        if len(self.image_position) == 2:
            x, y = self.image_position
            builder.image_position(x, y)
        return builder