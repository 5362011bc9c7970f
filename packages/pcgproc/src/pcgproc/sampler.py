from __future__ import annotations

from dataclasses import fields
from types import MappingProxyType

import torch

from pcgcore.errors import InvalidParamsError
from pcgcore.rng import make_generator, uniform
from .params import (
    PARAM_TYPES, Channel, ChannelWave, ChannelWave2D,
    CosineWaveParams, CosineWave2DParams, NoiseFieldParams, Params,
)

# (kind, field) -> (lo, hi), drawn uniformly. Half-open where the value wraps.
RANDOM_RANGES = MappingProxyType({
    ("cosine", "a"): (0.25, 0.75),
    ("cosine", "freq"): (0.5, 2.0),
    ("cosine", "phase"): (0.0, 0.5),
    ("noise_field", "scale"): (0.5, 10.0),
    ("noise_field", "factor"): (0.1, 5.0),
    ("noise_field", "hue_angle"): (0.0, 360.0),
    ("noise_field", "y_value"): (0.0, 360.0),
})


def default_params(kind: str) -> Params:
    try:
        return PARAM_TYPES[kind]()
    except KeyError as exc:
        raise InvalidParamsError(f"Unknown params kind: {kind!r}") from exc


def reset(params: Params) -> Params:
    """Overwrite every field of ``params`` with its default, in place."""
    fresh = type(params)()
    for f in fields(params):
        setattr(params, f.name, getattr(fresh, f.name))
    return params


def _draw(g: torch.Generator, key: tuple[str, str]) -> float:
    lo, hi = RANDOM_RANGES[key]
    return uniform(g, lo, hi)


def _random_wave(g: torch.Generator) -> ChannelWave:
    a = _draw(g, ("cosine", "a"))
    return ChannelWave(
        a=a,
        b=1.0 - a,
        freq=_draw(g, ("cosine", "freq")),
        phase=_draw(g, ("cosine", "phase")),
    )


def _random_wave_2d(g: torch.Generator) -> ChannelWave2D:
    a = _draw(g, ("cosine", "a"))
    # offset drawn in [(1 - a) / 2, 1 - a], unlike the 1D b = 1 - a
    b = uniform(g, (1.0 - a) / 2.0, 1.0 - a)
    return ChannelWave2D(
        a=a,
        b=b,
        freq_x=_draw(g, ("cosine", "freq")),
        phase_x=_draw(g, ("cosine", "phase")),
        freq_y=_draw(g, ("cosine", "freq")),
        phase_y=_draw(g, ("cosine", "phase")),
    )


def _random_noise(g: torch.Generator) -> NoiseFieldParams:
    out = NoiseFieldParams()
    for axis in ("x", "y", "z"):
        setattr(out, f"{axis}_scale", _draw(g, ("noise_field", "scale")))
        setattr(out, f"{axis}_factor", _draw(g, ("noise_field", "factor")))
    out.hue_angle = _draw(g, ("noise_field", "hue_angle"))
    out.dim2 = uniform(g, 0.0, 1.0) < 0.5
    out.y_value = _draw(g, ("noise_field", "y_value"))
    return out


def randomize(params: Params, rng: torch.Generator | int | None = None) -> Params:
    """Redraw every field of ``params`` in place from `RANDOM_RANGES`.

    ``rng`` is the explicit random source: a ``torch.Generator`` (advanced by
    the draws), an ``int`` seed, or ``None`` for fresh OS entropy.
    """
    g = make_generator(rng)
    if isinstance(params, CosineWaveParams):
        drawn = CosineWaveParams([_random_wave(g) for _ in Channel])
    elif isinstance(params, CosineWave2DParams):
        drawn = CosineWave2DParams([_random_wave_2d(g) for _ in Channel])
    elif isinstance(params, NoiseFieldParams):
        drawn = _random_noise(g)
    else:
        raise InvalidParamsError(f"Cannot randomize {type(params).__name__}")
    for f in fields(params):
        setattr(params, f.name, getattr(drawn, f.name))
    return params
