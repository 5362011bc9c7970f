from __future__ import annotations

import math
from dataclasses import dataclass

import torch
from pcgcore.rng import derive_seed64, to_int64_signed

# ---------------------------------------------------------------------
# Constants & bitwise helpers (all signed int64 so products wrap instead of overflowing)
# ---------------------------------------------------------------------

# splitmix64 mix constants, same bits as signed int64
_C1 = to_int64_signed(0xBF58476D1CE4E5B9)
_C2 = to_int64_signed(0x94D049BB133111EB)
# 64-bit golden ratio, decorrelates the x and y lattice streams
_GOLDEN64_I = to_int64_signed(0x9E3779B97F4A7C15)
_BASE_SEED_I = to_int64_signed(0x1234ABCD9876EF01)
# 53-bit mask for a double mantissa
_M53 = (1 << 53) - 1


def _mix64(x: torch.Tensor) -> torch.Tensor:
    """SplitMix64-like mix on an int64 tensor (vectorised)."""
    x = x ^ (x >> 30)
    x = x * _C1
    x = x ^ (x >> 27)
    x = x * _C2
    x = x ^ (x >> 31)
    return x


@torch.no_grad()
def _hash2(ix: torch.Tensor, iy: torch.Tensor, seed64: torch.Tensor) -> torch.Tensor:
    """Stable 2D hash (ix, iy) + seed -> pseudo-random int64."""
    ix = ix.to(torch.int64)
    iy = iy.to(torch.int64)
    s = seed64.to(torch.int64)
    h = _mix64(ix ^ _GOLDEN64_I)
    h = _mix64(h ^ (iy + (s ^ _BASE_SEED_I)))
    return h


@torch.no_grad()
def rand01(h: torch.Tensor, *, dtype: torch.dtype | None = None) -> torch.Tensor:
    """Map an int64 hash to a uniform float in [0,1) (float32 unless `dtype` is given)."""
    if dtype is None:
        dtype = torch.float32
    mant = (h.to(torch.int64) >> 11) & _M53
    out = mant.to(torch.float64) / float(1 << 53)
    return out.to(dtype=dtype)


def _fade(t: torch.Tensor) -> torch.Tensor:
    # 6t^5 - 15t^4 + 10t^3
    return t * t * t * (t * (t * 6 - 15) + 10)


@torch.no_grad()
def perlin2d(fx: torch.Tensor, fy: torch.Tensor, seed64: torch.Tensor) -> torch.Tensor:
    """2D gradient (Perlin) noise at lattice coordinates ``(fx, fy)``.

    One lattice cell per unit. ``fx`` and ``fy`` must broadcast to the same
    shape; the result has that shape and lies in [-1, 1] (about ±0.71 in
    practice). Zero on every lattice point.
    """
    fx, fy = torch.broadcast_tensors(fx, fy)
    dtype = fx.dtype
    xi = torch.floor(fx).to(torch.int64)
    yi = torch.floor(fy).to(torch.int64)
    xf = fx - xi.to(dtype)
    yf = fy - yi.to(dtype)

    # corner gradients: angle ~ U[0, 2π)
    def grad(ix, iy):
        h = _hash2(ix, iy, seed64)
        ang = rand01(h, dtype=torch.float32) * (2.0 * math.pi)
        return torch.cos(ang).to(dtype=dtype), torch.sin(ang).to(dtype=dtype)

    g00x, g00y = grad(xi, yi)
    g10x, g10y = grad(xi + 1, yi)
    g01x, g01y = grad(xi, yi + 1)
    g11x, g11y = grad(xi + 1, yi + 1)

    n00 = g00x * xf + g00y * yf
    n10 = g10x * (xf - 1.0) + g10y * yf
    n01 = g01x * xf + g01y * (yf - 1.0)
    n11 = g11x * (xf - 1.0) + g11y * (yf - 1.0)

    u = _fade(xf.clamp(0, 1))
    v = _fade(yf.clamp(0, 1))

    a = n00 + u * (n10 - n00)
    b = n01 + u * (n11 - n01)
    return (a + v * (b - a)).clamp(-1, 1)


@dataclass(frozen=True)
class NoiseField:
    """Seeded coherent-noise field mapped to [0, 1].

    Pixel ``(x, y)`` of a ``width × height`` image is sampled at
    ``(scale * x / width, scale * y / height)``, so ``scale`` is the number of
    noise cells across the image. The noise is multiplied by ``factor``,
    remapped with ``(v + 1) / 2`` and clamped to [0, 1].

    A ``scale`` at or below ``eps`` (zero or negative included) collapses
    every sample onto the lattice origin, where the noise is 0: the field is
    the constant 0.5 whatever ``factor`` is.
    """
    seed: int
    scale: float
    factor: float
    eps: float = 1e-6

    @property
    def seed64(self) -> int:
        return to_int64_signed(derive_seed64(self.seed))

    @torch.no_grad()
    def __call__(self, x: torch.Tensor, y: torch.Tensor, width: int, height: int) -> torch.Tensor:
        scale = float(self.scale) if float(self.scale) > self.eps else 0.0
        seed64 = torch.tensor(self.seed64, dtype=torch.int64, device=x.device)
        v = perlin2d(x * (scale / width), y * (scale / height), seed64)
        v = v * float(self.factor)
        return ((v + 1.0) * 0.5).clamp(0.0, 1.0)
