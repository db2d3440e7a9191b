"""QR code building blocks: encoding, error correction, layout, masking, text and SVG output."""

__version__ = "0.1.0"

__all__ = [
    "compact",
    "datamasking",
    "ecl",
    "encode",
    "hardcode",
    "layout",
    "matrix",
    "module",
    "polynomials",
    "render",
    "style",
    "svg",
]