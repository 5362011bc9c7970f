from __future__ import annotations
import math
import torch

_MASK64 = 0xFFFFFFFFFFFFFFFF
_SIGNBIT = 1 << 63
_MOD64 = 1 << 64

def splitmix64(x: int) -> int:
    x &= _MASK64
    x = (x + 0x9E3779B97F4A7C15) & _MASK64
    z = x
    z = (z ^ (z >> 30)) * 0xBF58476D1CE4E5B9 & _MASK64
    z = (z ^ (z >> 27)) * 0x94D049BB133111EB & _MASK64
    z ^= z >> 31
    return z & _MASK64

def derive_seed64(*keys: int) -> int:
    s = 0x1234ABCD9876EF01
    for k in keys:
        s = splitmix64(s ^ (k & _MASK64))
    return s  # unsigned 64-bit range

def to_int64_signed(u: int) -> int:
    """Unsigned 64-bit -> signed int64 (two's complement)."""
    return u - _MOD64 if (u & _SIGNBIT) else u

def make_generator(seed: int | torch.Generator | None = None) -> torch.Generator:
    """Explicit random source for the parameter sampler.

    - ``torch.Generator``: returned as is (the caller keeps ownership of its state)
    - ``int``: expanded with SplitMix64 so that nearby seeds give unrelated streams
    - ``None``: fresh generator seeded from OS entropy
    """
    if isinstance(seed, torch.Generator):
        return seed
    g = torch.Generator(device="cpu")
    if seed is None:
        g.seed()
    else:
        g.manual_seed(derive_seed64(int(seed)) & 0x7FFFFFFFFFFFFFFF)
    return g

def uniform(g: torch.Generator, lo: float, hi: float) -> float:
    """One draw from U[lo, hi) using float64 so the bounds hold exactly."""
    u = float(torch.rand((), generator=g, dtype=torch.float64).item())
    x = lo + (hi - lo) * u
    if x >= hi and lo < hi:
        # (hi - lo) * u may round up to hi
        x = math.nextafter(hi, lo)
    return x
