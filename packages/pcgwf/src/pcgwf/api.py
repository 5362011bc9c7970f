from __future__ import annotations
import io
import logging
import os
from pathlib import Path

from pcgproc.api import PixelBuffer

log = logging.getLogger("pcg.wf")

def atomic_write(path: Path | str, data: bytes) -> None:
    path = Path(path)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.parent.mkdir(parents=True, exist_ok=True)
    try:
        with open(tmp, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise

def png_bytes(buffer: PixelBuffer) -> bytes:
    bio = io.BytesIO()
    buffer.to_image().save(bio, format="PNG")
    return bio.getvalue()

def encode_png(buffer: PixelBuffer, path: Path | str) -> Path:
    """Write `buffer` as an RGBA PNG at `path`. OSError from the filesystem propagates unchanged."""
    path = Path(path)
    atomic_write(path, png_bytes(buffer))
    log.info("PNG %dx%d -> %s", buffer.width, buffer.height, path)
    return path
