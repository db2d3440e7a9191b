[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qrforge"
version = "0.1.0"
description = "Building blocks for QR codes: data encoding, Reed-Solomon error correction, masking, text and SVG rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["qr", "qrcode", "svg", "reed-solomon", "galois-field"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qrforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
