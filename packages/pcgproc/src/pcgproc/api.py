from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Protocol
import numpy as np
import torch
from PIL import Image

ParamDict = dict[str, Any]

@dataclass(frozen=True)
class ParamSpec:
    name: str
    type: str
    range: tuple[float, float] | None = None
    units: str | None = None

@dataclass(frozen=True)
class GeneratorInfo:
    name: str
    kind: str
    param_specs: tuple[ParamSpec, ...]
    default_size: tuple[int, int] | None = None  # (width, height); None = caller picks


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """Row-major RGBA8 pixels, ``data`` has shape (height, width, 4) and dtype uint8.

    Pixel ``(i, j)`` is column ``i``, row ``j``. A buffer is produced fresh by
    every render call and carries no identity beyond its content.
    """
    width: int
    height: int
    data: torch.Tensor

    def __post_init__(self) -> None:
        if tuple(self.data.shape) != (self.height, self.width, 4):
            raise ValueError(f"PixelBuffer data shape {tuple(self.data.shape)} != "
                             f"{(self.height, self.width, 4)}")
        if self.data.dtype != torch.uint8:
            raise ValueError(f"PixelBuffer data must be uint8, got {self.data.dtype}")

    def __len__(self) -> int:
        return self.width * self.height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and \
            torch.equal(self.data.cpu(), other.data.cpu())

    def pixel(self, i: int, j: int) -> tuple[int, int, int, int]:
        r, g, b, a = (int(v) for v in self.data[j, i].tolist())
        return r, g, b, a

    def to_numpy(self) -> np.ndarray:
        return np.ascontiguousarray(self.data.detach().cpu().numpy())

    def tobytes(self) -> bytes:
        return self.to_numpy().tobytes()

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.to_numpy())  # (H, W, 4) uint8 -> RGBA


class Generator(Protocol):
    @property
    def info(self) -> GeneratorInfo: ...
    def default_params(self) -> Any: ...
    def render(
        self,
        params: Any,
        width: int | None = None,
        height: int | None = None,
        *,
        device: torch.device | None = None,
        dtype: torch.dtype = torch.float32,
    ) -> PixelBuffer: ...


def check_size(width: int, height: int) -> None:
    if int(width) < 1 or int(height) < 1:
        raise ValueError(f"Render size must be >= 1x1, got {width}x{height}")
