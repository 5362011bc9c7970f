# packages/pcgproc/src/pcgproc/__init__.py
"""pcgproc - parametric color field generators (public surface).

Pure functions from a parameter object to a fresh RGBA8 `PixelBuffer`:
cosine palettes (1D stripes, 2D field) and a noise-driven XYZ color field,
plus the parameter sampler (defaults, reset, seeded randomization).
"""
from __future__ import annotations

__version__ = "0.1.0"

from .api import GeneratorInfo, ParamSpec, PixelBuffer
from .params import (
    Channel, ChannelWave, ChannelWave2D,
    CosineWaveParams, CosineWave2DParams, NoiseFieldParams, ParamCodec,
)
from .sampler import RANDOM_RANGES, default_params, randomize, reset
from .cosine_1d import evaluate, render_cosine_1d
from .cosine_2d import evaluate_xy, render_cosine_2d
from .noise import NoiseField
from .noise_field import render_noise_field, render_noise_preview, render_noise_export
from .registry import get, list_generators, register
from .register_all import register_all

register_all()

__all__ = [
    "__version__",
    "GeneratorInfo", "ParamSpec", "PixelBuffer",
    "Channel", "ChannelWave", "ChannelWave2D",
    "CosineWaveParams", "CosineWave2DParams", "NoiseFieldParams", "ParamCodec",
    "RANDOM_RANGES", "default_params", "randomize", "reset",
    "evaluate", "render_cosine_1d",
    "evaluate_xy", "render_cosine_2d",
    "NoiseField", "render_noise_field", "render_noise_preview", "render_noise_export",
    "get", "list_generators", "register", "register_all",
]
