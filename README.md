# qrforge

Pure-Python building blocks for QR codes: encoding data into codewords,
Reed–Solomon error correction and interleaving, the function patterns of
the matrix, placement of the data bits, the eight mask patterns, and
rendering as Unicode text or SVG. There are no runtime dependencies.

## Installation

```
pip install qrforge
```

## Modules

| Module                | Contents                                                              |
|-----------------------|-----------------------------------------------------------------------|
| `qrforge.module`      | `Module` (one cell: colour and role) and `ModuleType`                 |
| `qrforge.ecl`         | `ECL` (`L`, `M`, `Q`, `H`) and `Mode` (`NUMERIC`, `ALPHANUMERIC`, `BYTE`) |
| `qrforge.compact`     | `CompactQR`, a growable bit string, most significant bit first        |
| `qrforge.matrix`      | `QRCode`, the square matrix of modules                                |
| `qrforge.datamasking` | `Mask` and `mask()`, which toggles data modules only                  |
| `qrforge.hardcode`    | Block groups, format information, capacities, count widths, generators |
| `qrforge.encode`      | `encode_data()`, `best_encoding()` and the per-mode encoders          |
| `qrforge.polynomials` | GF(256) `division()`, `structure()` and `generated_to_string()`       |
| `qrforge.layout`      | Finder, timing, separator, dark-module and format patterns; `place_on_matrix_data()` |
| `qrforge.render`      | `print_matrix_with_margin()`, half-block text output                  |
| `qrforge.style`       | `Shape`, `ModuleStyle`, `Neighborhood`, `rgba2hex()`, `to_color()`    |
| `qrforge.svg`         | `SvgBuilder`, `SvgOptions` and `parse_color()`                        |

Versions are passed as plain integers from 1 to 40.

## Choosing an encoding mode

```python
from qrforge.ecl import Mode
from qrforge.encode import best_encoding

assert best_encoding(b"0123456789") is Mode.NUMERIC
assert best_encoding(b"HELLO WORLD") is Mode.ALPHANUMERIC
assert best_encoding(b"hello, world") is Mode.BYTE
```

Strings are accepted too and are encoded as UTF-8.

## Bit strings

```python
from qrforge.compact import CompactQR

bits = CompactQR.with_len(16)
bits.push_bits(0b0100, 4)
bits.push_u8(0xFF)
print(len(bits))   # 12
print(bits)        # 010011111111
```

## Assembling a version 1 code

```python
from qrforge.datamasking import Mask, mask
from qrforge.ecl import ECL, Mode
from qrforge.encode import encode_data
from qrforge.layout import (
    create_matrix_dark_module,
    create_matrix_empty,
    create_matrix_format_info,
    create_matrix_pattern,
    create_matrix_timing,
    place_on_matrix_data,
)
from qrforge.matrix import QRCode
from qrforge.polynomials import structure
from qrforge.render import print_matrix_with_margin

qr = QRCode.default(21)
create_matrix_pattern(qr)
create_matrix_timing(qr)
create_matrix_dark_module(qr)
create_matrix_empty(qr)
create_matrix_format_info(qr, ECL.M, Mask.CHECKERBOARD)

codewords = encode_data(b"HELLO", ECL.M, Mode.ALPHANUMERIC, 1)
place_on_matrix_data(qr, structure(codewords.data, ECL.M, 1))
mask(qr, Mask.CHECKERBOARD)

print(print_matrix_with_margin(qr))
```

`encode_data()` raises `ValueError` when the data does not fit the
version and level. `print_matrix_with_margin()` draws two rows per text
line and prints dark modules as blanks, for a dark terminal background.

## SVG output

`SvgBuilder` setters return the builder, so they can be chained:

```python
from qrforge.style import ModuleStyle, Shape
from qrforge.svg import SvgBuilder

builder = (
    SvgBuilder()
    .margin(4)
    .module_color("#1d3557")
    .background_color([255, 255, 255])
    .style(ModuleStyle(shape=Shape.ROUNDED_SQUARE, scale=0.9))
)
svg_text = builder.to_str(qr)
builder.to_file(qr, "code.svg")
```

Shapes are `SQUARE`, `CIRCLE`, `ROUNDED_SQUARE`, `VERTICAL`, `HORIZONTAL`,
`DIAMOND` and `CONNECTED`; `Shape.from_name("Circle")` looks one up
case-insensitively and gives `SQUARE` for unknown names. Finder and
alignment modules are always drawn as squares. Each added style draws
its own path; without any, a plain square style is used.

An image (a path or a data URI) can be laid over the centre with
`image()`; `image_size()`, `image_gap()`, `image_position()`,
`image_background_color()` and `image_background_shape()` adjust it, and
the modules under its background are left out.

`SvgOptions` holds the same settings, with colours as `#RRGGBB[AA]` text
or component lists, and applies them to a builder with `configure()`.

Colours given as components become hex strings:

```python
from qrforge.style import rgba2hex, to_color

rgba2hex((0, 0, 0, 255))      # '#000000'
rgba2hex((255, 0, 0, 128))    # '#ff000080'
to_color([18, 52, 86])        # '#123456'
```

## What the package does not do

- It does not pick a version for the data or a mask by penalty score;
  both are chosen by the caller.
- It does not draw alignment patterns or version information, so only
  version 1 matrices can be assembled completely from its parts.
- It does not produce raster images such as PNG; output is text or SVG.
- It has no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```