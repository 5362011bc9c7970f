from __future__ import annotations
import logging
import math
import torch
from pcgcore.config import DEFAULT_CONFIG
from .api import Generator, GeneratorInfo, PixelBuffer, check_size
from .color import to_rgba8
from .params import COSINE_2D_SPECS, Channel, ChannelWave2D, CosineWave2DParams
from .utils import TAU, cos, pixel_grid

log = logging.getLogger("pcg.proc.cosine_2d")


def evaluate_xy(channel: ChannelWave2D, u, v):
    """Product of an x and a y cosine term, offset by ``b``. Not clamped."""
    return (channel.a
            * cos(channel.freq_x * u + channel.phase_x * TAU)
            * cos(channel.freq_y * v + channel.phase_y * TAU)
            + channel.b)


def axis_coords(ii, jj):
    """Pixel indices -> (u, v). u is scaled by π and v is not."""
    return ii / 360.0 * math.pi, jj / 360.0


class Cosine2D(Generator):
    @property
    def info(self) -> GeneratorInfo:
        return GeneratorInfo(
            name="COSINE_2D",
            kind=CosineWave2DParams.kind,
            param_specs=COSINE_2D_SPECS,
            default_size=DEFAULT_CONFIG.cosine_2d_size,
        )

    def default_params(self) -> CosineWave2DParams:
        return CosineWave2DParams()

    @torch.no_grad()
    def render(self, params, width=None, height=None, *, device=None, dtype=torch.float32):
        dw, dh = self.info.default_size
        w = dw if width is None else int(width)
        h = dh if height is None else int(height)
        check_size(w, h)
        ii, jj = pixel_grid(w, h, device=device, dtype=dtype)
        u, v = axis_coords(ii, jj)
        rgb = torch.stack([evaluate_xy(params[ch], u, v) for ch in Channel], dim=-1)  # (h, w, 3)
        log.debug("COSINE_2D %dx%d", w, h)
        return PixelBuffer(w, h, to_rgba8(rgb))

GEN = Cosine2D()


def render_cosine_2d(params: CosineWave2DParams, width: int = 720, height: int = 720, **kw) -> PixelBuffer:
    return GEN.render(params, width, height, **kw)
