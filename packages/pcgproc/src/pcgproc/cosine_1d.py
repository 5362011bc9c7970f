from __future__ import annotations
import logging
import math
import torch
from pcgcore.config import DEFAULT_CONFIG
from .api import Generator, GeneratorInfo, PixelBuffer, check_size
from .color import to_rgba8
from .params import COSINE_1D_SPECS, Channel, ChannelWave, CosineWaveParams
from .utils import TAU, cos
from pcgcore.device import get_device

log = logging.getLogger("pcg.proc.cosine_1d")

# 360 steps of t over [0, 2π), each drawn as a 2-pixel-wide column
BANDS = 360


def evaluate(channel: ChannelWave, t):
    """``a * cos(freq * t + 2π * phase) + b``; ``t`` in radians, float or tensor. Not clamped."""
    return channel.a * cos(channel.freq * t + channel.phase * TAU) + channel.b


def cos_color(params: CosineWaveParams, t) -> tuple:
    return tuple(evaluate(params[ch], t) for ch in Channel)


class Cosine1D(Generator):
    @property
    def info(self) -> GeneratorInfo:
        return GeneratorInfo(
            name="COSINE_1D",
            kind=CosineWaveParams.kind,
            param_specs=COSINE_1D_SPECS,
            default_size=DEFAULT_CONFIG.cosine_1d_size,
        )

    def default_params(self) -> CosineWaveParams:
        return CosineWaveParams()

    @torch.no_grad()
    def render(self, params, width=None, height=None, *, device=None, dtype=torch.float32):
        dw, dh = self.info.default_size
        w = dw if width is None else int(width)
        h = dh if height is None else int(height)
        check_size(w, h)
        if device is None:
            device = get_device()
        if w != 2 * BANDS:
            log.debug("COSINE_1D width=%d != %d: columns past the bands stay transparent", w, 2 * BANDS)

        data = torch.zeros((h, w, 4), dtype=torch.uint8, device=device)
        ncols = min(w, 2 * BANDS)
        band = torch.arange(ncols, device=device, dtype=torch.int64) // 2
        t = band.to(dtype) / 180.0 * math.pi
        rgb = torch.stack(cos_color(params, t), dim=-1)     # (ncols, 3)
        data[:, :ncols] = to_rgba8(rgb).unsqueeze(0).expand(h, -1, -1)
        return PixelBuffer(w, h, data)

GEN = Cosine1D()


def render_cosine_1d(params: CosineWaveParams, width: int = 720, height: int = 300, **kw) -> PixelBuffer:
    return GEN.render(params, width, height, **kw)
