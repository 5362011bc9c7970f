from __future__ import annotations

from .config import RenderConfig, DEFAULT_CONFIG
from .errors import PCGError, InvalidParamsError, UnknownGeneratorError, MissingCudaError

__all__ = [
    "RenderConfig", "DEFAULT_CONFIG",
    "PCGError", "InvalidParamsError", "UnknownGeneratorError", "MissingCudaError",
]
