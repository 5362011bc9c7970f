import math
import torch

from pcgproc import CosineWave2DParams, ChannelWave2D, Channel, evaluate_xy, render_cosine_2d, randomize

CPU = torch.device("cpu")


def _expected(params, i, j):
    u = i / 360 * math.pi
    v = j / 360
    out = []
    for ch in Channel:
        c = params[ch]
        raw = (c.a * math.cos(c.freq_x * u + c.phase_x * 2 * math.pi)
               * math.cos(c.freq_y * v + c.phase_y * 2 * math.pi) + c.b)
        out.append(round(min(max(raw, 0.0), 1.0) * 255))
    return out


def test_pixels_follow_product_of_cosines():
    params = randomize(CosineWave2DParams(), 7)
    buf = render_cosine_2d(params, device=CPU)
    assert (buf.width, buf.height) == (720, 720)
    for i, j in [(0, 0), (1, 0), (0, 1), (359, 123), (719, 719), (400, 17), (88, 600)]:
        got = buf.pixel(i, j)[:3]
        exp = _expected(params, i, j)
        assert all(abs(g - e) <= 1 for g, e in zip(got, exp)), (i, j, got, exp)


def test_out_of_range_channels_are_clamped():
    params = CosineWave2DParams([ChannelWave2D(a=1.0, b=0.8) for _ in Channel])
    buf = render_cosine_2d(params, width=64, height=64, device=CPU)
    d = buf.data
    assert d.dtype == torch.uint8
    # a + b = 1.8 saturates at the origin
    assert buf.pixel(0, 0)[:3] == (255, 255, 255)
    assert (d[..., 3] == 255).all()


def test_axes_are_scaled_differently():
    ch = ChannelWave2D(a=0.5, b=0.5, freq_x=1.0, phase_x=0.0, freq_y=1.0, phase_y=0.0)
    # u reaches π at column 360, v only reaches 1 radian at row 360
    assert math.isclose(evaluate_xy(ch, 360 / 360 * math.pi, 0.0), 0.0, abs_tol=1e-12)
    assert math.isclose(evaluate_xy(ch, 0.0, 360 / 360), 0.5 * math.cos(1.0) + 0.5)
    params = CosineWave2DParams([ChannelWave2D(0.5, 0.5, 1.0, 0.0, 1.0, 0.0) for _ in Channel])
    buf = render_cosine_2d(params, device=CPU)
    assert buf.pixel(360, 0)[0] == 0
    assert buf.pixel(0, 360)[0] == round((0.5 * math.cos(1.0) + 0.5) * 255)


def test_default_phases_are_staggered():
    params = CosineWave2DParams()
    assert [params[ch].phase_x for ch in Channel] == [0.0, 0.1, 0.2]
    assert [params[ch].phase_y for ch in Channel] == [0.0, 0.1, 0.2]


def test_zero_frequency_is_constant():
    params = CosineWave2DParams([ChannelWave2D(0.5, 0.25, 0.0, 0.0, 0.0, 0.0) for _ in Channel])
    buf = render_cosine_2d(params, width=64, height=64, device=CPU)
    # a * cos(0) * cos(0) + b everywhere
    assert (buf.data[..., :3] == round(0.75 * 255)).all()
    assert (buf.data[..., 3] == 255).all()
