from __future__ import annotations

import copy
from dataclasses import dataclass, field, fields
from enum import IntEnum
from typing import Any, ClassVar

from .api import GeneratorInfo, ParamDict, ParamSpec
from pcgcore.errors import InvalidParamsError


class Channel(IntEnum):
    RED = 0
    GREEN = 1
    BLUE = 2


# Baseline phases (in turns) staggered across red/green/blue.
DEFAULT_PHASES = (0.0, 0.1, 0.2)


@dataclass
class ChannelWave:
    """One channel of the 1D palette: ``a * cos(freq * t + 2π * phase) + b``.

    ``phase`` is in turns (fraction of a full turn), as shown on the sliders.
    """
    a: float = 0.5
    b: float = 0.5
    freq: float = 1.0
    phase: float = 0.0


@dataclass
class ChannelWave2D:
    """One channel of the 2D field: a product of an x and a y cosine term."""
    a: float = 0.5
    b: float = 0.5
    freq_x: float = 1.0
    phase_x: float = 0.0
    freq_y: float = 1.0
    phase_y: float = 0.0


class _ChannelParams:
    kind: ClassVar[str]
    channels: list

    def __post_init__(self) -> None:
        if len(self.channels) != len(Channel):
            raise InvalidParamsError(f"{type(self).__name__} needs exactly 3 channels, "
                                     f"got {len(self.channels)}")

    def __getitem__(self, ch: Channel | int):
        return self.channels[Channel(ch)]

    @property
    def red(self):
        return self.channels[Channel.RED]

    @property
    def green(self):
        return self.channels[Channel.GREEN]

    @property
    def blue(self):
        return self.channels[Channel.BLUE]

    @classmethod
    def default(cls):
        return cls()

    def copy(self):
        return copy.deepcopy(self)


@dataclass
class CosineWaveParams(_ChannelParams):
    kind: ClassVar[str] = "cosine_1d"
    channels: list[ChannelWave] = field(
        default_factory=lambda: [ChannelWave(phase=p) for p in DEFAULT_PHASES])


@dataclass
class CosineWave2DParams(_ChannelParams):
    kind: ClassVar[str] = "cosine_2d"
    channels: list[ChannelWave2D] = field(
        default_factory=lambda: [ChannelWave2D(phase_x=p, phase_y=p) for p in DEFAULT_PHASES])


@dataclass
class NoiseFieldParams:
    """Parameters of the noise-driven XYZ color field.

    ``dim2`` samples the fields on (column, row); otherwise on
    (column, ``y_value``) so every row is the same.
    """
    kind: ClassVar[str] = "noise_field"
    hue_angle: float = 0.0
    x_scale: float = 4.0
    x_factor: float = 1.0
    y_scale: float = 4.0
    y_factor: float = 1.0
    z_scale: float = 4.0
    z_factor: float = 1.0
    dim2: bool = True
    y_value: float = 0.0

    @classmethod
    def default(cls) -> "NoiseFieldParams":
        return cls()

    def copy(self) -> "NoiseFieldParams":
        return copy.copy(self)


Params = CosineWaveParams | CosineWave2DParams | NoiseFieldParams

PARAM_TYPES: dict[str, type] = {
    CosineWaveParams.kind: CosineWaveParams,
    CosineWave2DParams.kind: CosineWave2DParams,
    NoiseFieldParams.kind: NoiseFieldParams,
}


# -------------------------
# Flat parameter descriptors (editable ranges of the interactive panel)
# -------------------------
_WAVE_RANGES = {
    "a": ((0.0, 1.0), None),
    "b": ((0.0, 1.0), None),
    "freq": ((0.0, 2.0), "rad/rad"),
    "phase": ((0.0, 1.0), "turn"),
}

def _channel_specs(attrs: tuple[str, ...]) -> tuple[ParamSpec, ...]:
    out = []
    for ch in Channel:
        for attr in attrs:
            rng, units = _WAVE_RANGES[attr.split("_")[0]]
            out.append(ParamSpec(f"{ch.name.lower()}_{attr}", "float", rng, units))
    return tuple(out)

COSINE_1D_SPECS = _channel_specs(tuple(f.name for f in fields(ChannelWave)))
COSINE_2D_SPECS = _channel_specs(tuple(f.name for f in fields(ChannelWave2D)))

_SCALE = ((0.0, 10.0), "cells/img")
_FACTOR = ((0.0, 5.0), None)
NOISE_FIELD_SPECS = (
    ParamSpec("hue_angle", "float", (0.0, 360.0), "deg"),
    ParamSpec("x_scale", "float", *_SCALE),
    ParamSpec("x_factor", "float", *_FACTOR),
    ParamSpec("y_scale", "float", *_SCALE),
    ParamSpec("y_factor", "float", *_FACTOR),
    ParamSpec("z_scale", "float", *_SCALE),
    ParamSpec("z_factor", "float", *_FACTOR),
    ParamSpec("dim2", "bool"),
    ParamSpec("y_value", "float", (0.0, 360.0), "deg"),
)


@dataclass
class ParamCodec:
    """Flat ``{name: value}`` view of a params object, e.g. ``red_freq`` or ``x_scale``.

    Lets a host panel bind one slider per entry without aliasing the fields.
    """
    info: GeneratorInfo

    def _specs(self) -> dict[str, ParamSpec]:
        return {p.name: p for p in self.info.param_specs}

    def _target(self, params: Any, name: str) -> tuple[Any, str]:
        if isinstance(params, _ChannelParams):
            prefix, attr = name.split("_", 1)
            return params[Channel[prefix.upper()]], attr
        return params, name

    def validate(self, params: ParamDict) -> None:
        specs = self._specs()
        for k, v in params.items():
            if k not in specs:
                raise InvalidParamsError(f"Unknown param '{k}' for {self.info.name}")
            p = specs[k]
            if p.type == "float":
                try:
                    x = float(v)
                except (TypeError, ValueError) as exc:
                    raise InvalidParamsError(f"{k}={v!r} is not a number") from exc
                if p.range is not None:
                    lo, hi = p.range
                    if not (float(lo) <= x <= float(hi)):
                        raise InvalidParamsError(f"{k}={x} ∉ [{lo}, {hi}]")
            elif p.type == "bool":
                if not isinstance(v, (bool, int)):
                    raise InvalidParamsError(f"{k}={v!r} is not a bool")
            else:
                raise InvalidParamsError(f"Unsupported param type '{p.type}' for {k}")

        # strict: every key must be present
        for p in self.info.param_specs:
            if p.name not in params:
                raise InvalidParamsError(f"Missing required param '{p.name}'")

    def to_dict(self, params: Any) -> ParamDict:
        out: ParamDict = {}
        for p in self.info.param_specs:
            obj, attr = self._target(params, p.name)
            out[p.name] = getattr(obj, attr)
        return out

    def from_dict(self, values: ParamDict) -> Any:
        self.validate(values)
        params = PARAM_TYPES[self.info.kind]()
        for p in self.info.param_specs:
            obj, attr = self._target(params, p.name)
            v = values[p.name]
            setattr(obj, attr, bool(v) if p.type == "bool" else float(v))
        return params
