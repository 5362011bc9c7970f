from __future__ import annotations

import torch

# CIE XYZ (D65) -> linear sRGB
_XYZ_TO_RGB = (
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
)

# Oklab (B. Ottosson): linear sRGB -> LMS -> Lab and the inverses
_RGB_TO_LMS = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)
_LMS_TO_LAB = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)
_LAB_TO_LMS = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)
_LMS_TO_RGB = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)


def _apply(m, x: torch.Tensor) -> torch.Tensor:
    """3x3 transform of the last axis, element-wise so every pixel takes the same path."""
    x0, x1, x2 = x.unbind(-1)
    return torch.stack([r[0] * x0 + r[1] * x1 + r[2] * x2 for r in m], dim=-1)


def srgb_encode(lin: torch.Tensor) -> torch.Tensor:
    lin = lin.clamp(0.0, 1.0)
    return torch.where(lin <= 0.0031308, lin * 12.92, 1.055 * lin.pow(1.0 / 2.4) - 0.055)


def xyz_to_linear_srgb(xyz: torch.Tensor) -> torch.Tensor:
    """[..., 3] XYZ -> [..., 3] linear sRGB clamped to the display gamut [0, 1]."""
    return _apply(_XYZ_TO_RGB, xyz).clamp(0.0, 1.0)


def linear_srgb_to_oklch(rgb: torch.Tensor) -> tuple[torch.Tensor, torch.Tensor, torch.Tensor]:
    """Returns (L, C, h) with h in degrees, [0, 360)."""
    lms = _apply(_RGB_TO_LMS, rgb.clamp(min=0.0))
    lab = _apply(_LMS_TO_LAB, lms.pow(1.0 / 3.0))
    L, a, b = lab.unbind(-1)
    C = torch.sqrt(a * a + b * b)
    h = torch.remainder(torch.rad2deg(torch.atan2(b, a)), 360.0)
    return L, C, h


def oklch_to_linear_srgb(L: torch.Tensor, C: torch.Tensor, h: torch.Tensor) -> torch.Tensor:
    hr = torch.deg2rad(h)
    lab = torch.stack((L, C * torch.cos(hr), C * torch.sin(hr)), dim=-1)
    lms = _apply(_LAB_TO_LMS, lab)
    return _apply(_LMS_TO_RGB, lms * lms * lms)


def rotate_hue(rgb: torch.Tensor, angle_deg: float) -> torch.Tensor:
    """Rotate the hue of linear sRGB colors by `angle_deg` in OkLCh.

    The angle is reduced mod 360 first, so 360 and 0 take the same path.
    The result is clamped back to [0, 1].
    """
    angle = float(angle_deg) % 360.0
    L, C, h = linear_srgb_to_oklch(rgb)
    h = torch.remainder(h + angle, 360.0)
    return oklch_to_linear_srgb(L, C, h).clamp(0.0, 1.0)


def to_rgba8(rgb: torch.Tensor) -> torch.Tensor:
    """[..., 3] floats -> [..., 4] uint8: clamp to [0, 1], scale to 0..255, opaque alpha."""
    c = torch.round(rgb.clamp(0.0, 1.0) * 255.0).to(torch.uint8)
    alpha = torch.full_like(c[..., :1], 255)
    return torch.cat((c, alpha), dim=-1)
