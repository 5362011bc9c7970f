"""pcg - procedural color generator, unified namespace.

    import pcg
    params = pcg.default_params("noise_field")
    pcg.randomize(params, 42)
    buf = pcg.render_noise_field(params, 360, 360)
    pcg.encode_png(buf, "out.png")

Or the detailed packages:

    from pcg import core, proc, wf
"""

__version__ = "0.1.0"

import pcgcore as core
import pcgproc as proc
import pcgwf as wf

from pcgproc import (
    PixelBuffer,
    CosineWaveParams, CosineWave2DParams, NoiseFieldParams,
    default_params, reset, randomize,
    render_cosine_1d, render_cosine_2d, render_noise_field,
    list_generators,
)
from pcgwf import encode_png

__all__ = [
    "core", "proc", "wf",
    "PixelBuffer",
    "CosineWaveParams", "CosineWave2DParams", "NoiseFieldParams",
    "default_params", "reset", "randomize",
    "render_cosine_1d", "render_cosine_2d", "render_noise_field",
    "list_generators", "encode_png",
    "__version__",
]
