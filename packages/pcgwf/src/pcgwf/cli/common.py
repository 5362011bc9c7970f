from __future__ import annotations
import logging, sys
from pathlib import Path
from typing import Any, Optional

from pcgcore.errors import InvalidParamsError

def setup_logging(log_file: Optional[Path], verbose: bool = True) -> None:
    log_fmt = "[%(asctime)s] %(levelname)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    level = logging.DEBUG if verbose else logging.INFO
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(level=level, format=log_fmt, datefmt=datefmt, handlers=handlers)

def parse_assignments(items: list[str]) -> dict[str, Any]:
    """["red_a=0.3", "dim2=false"] -> {"red_a": 0.3, "dim2": False}."""
    out: dict[str, Any] = {}
    for item in items:
        key, sep, raw = item.partition("=")
        if not sep or not key:
            raise InvalidParamsError(f"Expected name=value, got {item!r}")
        low = raw.strip().lower()
        if low in ("true", "false"):
            out[key.strip()] = low == "true"
            continue
        try:
            out[key.strip()] = float(raw)
        except ValueError as exc:
            raise InvalidParamsError(f"{key}: {raw!r} is not a number") from exc
    return out
