from __future__ import annotations
import logging
import time
import torch
from pcgcore.config import DEFAULT_CONFIG, RenderConfig
from .api import Generator, GeneratorInfo, PixelBuffer, check_size
from .color import rotate_hue, srgb_encode, to_rgba8, xyz_to_linear_srgb
from .noise import NoiseField
from .params import NOISE_FIELD_SPECS, NoiseFieldParams
from .utils import pixel_grid

log = logging.getLogger("pcg.proc.noise_field")

# pixel span y_value is measured against in 1D mode (the preview side)
Y_VALUE_SPAN = 360


def noise_fields(params: NoiseFieldParams, config: RenderConfig = DEFAULT_CONFIG) -> tuple[NoiseField, ...]:
    """The X, Y and Z fields, each with its own fixed seed."""
    sx, sy, sz = config.channel_seeds
    eps = config.scale_eps
    return (
        NoiseField(sx, params.x_scale, params.x_factor, eps),
        NoiseField(sy, params.y_scale, params.y_factor, eps),
        NoiseField(sz, params.z_scale, params.z_factor, eps),
    )


@torch.no_grad()
def noise_xyz(params: NoiseFieldParams, width: int, height: int, *,
              device=None, dtype=torch.float32, config: RenderConfig = DEFAULT_CONFIG) -> torch.Tensor:
    """(height, width, 3) tristimulus values in [0, 1].

    With ``dim2`` off every row samples ``y_value`` on a fixed ``Y_VALUE_SPAN``
    pixel span, so the row does not move with the render height.
    """
    ii, jj = pixel_grid(width, height, device=device, dtype=dtype)
    if params.dim2:
        k, span = jj, height
    else:
        k, span = torch.full_like(jj, float(params.y_value)), Y_VALUE_SPAN
    return torch.stack([f(ii, k, width, span) for f in noise_fields(params, config)], dim=-1)


class NoiseFieldGenerator(Generator):
    @property
    def info(self) -> GeneratorInfo:
        return GeneratorInfo(
            name="NOISE_FIELD",
            kind=NoiseFieldParams.kind,
            param_specs=NOISE_FIELD_SPECS,
        )

    def default_params(self) -> NoiseFieldParams:
        return NoiseFieldParams()

    @torch.no_grad()
    def render(self, params, width=None, height=None, *, device=None, dtype=torch.float32,
               config: RenderConfig | None = None):
        config = config or DEFAULT_CONFIG
        w = config.preview_size if width is None else int(width)
        h = config.preview_size if height is None else int(height)
        check_size(w, h)

        t0 = time.perf_counter()
        xyz = noise_xyz(params, w, h, device=device, dtype=dtype, config=config)
        # color math in float64: keeps the OkLCh round trip below u8 rounding
        rgb = xyz_to_linear_srgb(xyz.to(torch.float64))
        rgb = rotate_hue(rgb, params.hue_angle)
        data = to_rgba8(srgb_encode(rgb))
        log.debug("NOISE_FIELD %dx%d dim2=%s hue=%.1f in %.1f ms",
                  w, h, params.dim2, params.hue_angle, (time.perf_counter() - t0) * 1000.0)
        return PixelBuffer(w, h, data)

GEN = NoiseFieldGenerator()


def render_noise_field(params: NoiseFieldParams, width: int, height: int, **kw) -> PixelBuffer:
    return GEN.render(params, width, height, **kw)


def render_noise_preview(params: NoiseFieldParams, config: RenderConfig = DEFAULT_CONFIG, **kw) -> PixelBuffer:
    return GEN.render(params, config.preview_size, config.preview_size, config=config, **kw)


def render_noise_export(params: NoiseFieldParams, config: RenderConfig = DEFAULT_CONFIG, **kw) -> PixelBuffer:
    return GEN.render(params, config.export_size, config.export_size, config=config, **kw)
