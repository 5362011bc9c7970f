# packages/pcgwf/src/pcgwf/__init__.py
from __future__ import annotations

from .api import atomic_write, encode_png, png_bytes

__all__ = [
    "atomic_write",
    "encode_png",
    "png_bytes",
    # the cli subpackage is not imported here
]

__version__ = "0.1.0"
