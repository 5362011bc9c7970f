from __future__ import annotations
import math
import torch
from pcgcore.device import get_device

TAU = 2.0 * math.pi

def cos(x):
    """cos of a float or of a tensor."""
    return torch.cos(x) if isinstance(x, torch.Tensor) else math.cos(x)

def pixel_grid(width: int, height: int, *, device=None, dtype=None):
    """Integer pixel coordinates as (ii, jj), both (height, width): ii = column, jj = row."""
    if device is None:
        device = get_device()
    if dtype is None:
        dtype = torch.float32
    jj, ii = torch.meshgrid(
        torch.arange(height, device=device, dtype=dtype),
        torch.arange(width, device=device, dtype=dtype),
        indexing="ij",
    )
    return ii, jj
