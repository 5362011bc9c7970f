import torch

from pcgproc.color import (
    xyz_to_linear_srgb, srgb_encode, rotate_hue, linear_srgb_to_oklch, oklch_to_linear_srgb, to_rgba8,
)


def test_d65_white_maps_to_white():
    white = torch.tensor([0.95047, 1.0, 1.08883], dtype=torch.float64)
    rgb = srgb_encode(xyz_to_linear_srgb(white))
    assert torch.allclose(rgb, torch.ones(3, dtype=torch.float64), atol=1e-3)


def test_out_of_gamut_is_clamped():
    rgb = xyz_to_linear_srgb(torch.tensor([[0.0, 1.0, 0.0], [1.0, 0.0, 1.0]], dtype=torch.float64))
    assert (rgb >= 0).all() and (rgb <= 1).all()


def test_oklch_roundtrip():
    g = torch.Generator().manual_seed(0)
    rgb = torch.rand((256, 3), generator=g, dtype=torch.float64)
    L, C, h = linear_srgb_to_oklch(rgb)
    assert (h >= 0).all() and (h < 360).all()
    assert torch.allclose(oklch_to_linear_srgb(L, C, h), rgb, atol=1e-6)


def test_rotation_composes_and_wraps():
    g = torch.Generator().manual_seed(1)
    rgb = torch.rand((64, 3), generator=g, dtype=torch.float64) * 0.1 + 0.45  # low chroma, stays in gamut
    once = rotate_hue(rotate_hue(rgb, 200.0), 200.0)
    direct = rotate_hue(rgb, 400.0)
    assert torch.allclose(once, direct, atol=1e-6)
    assert torch.equal(rotate_hue(rgb, 720.0), rotate_hue(rgb, 0.0))


def test_gray_has_no_hue_to_rotate():
    gray = torch.full((1, 3), 0.5, dtype=torch.float64)
    assert torch.allclose(rotate_hue(gray, 123.0), gray, atol=1e-6)


def test_to_rgba8():
    out = to_rgba8(torch.tensor([[-0.5, 0.5, 2.0]]))
    assert out.dtype == torch.uint8
    assert out.tolist() == [[0, 128, 255, 255]]
