import json
from PIL import Image

from pcgwf.cli.render import main as render_main


def test_cli_noise_preview(tmp_path, monkeypatch):
    monkeypatch.setenv("PCG_PREVIEW_SIZE", "16")
    out = tmp_path / "noise.png"
    dump = tmp_path / "params.json"
    rc = render_main(["--model", "noise_field", "--size", "preview", "--random", "--seed", "3",
                      "--out", str(out), "--dump-params", str(dump)])
    assert rc == 0
    assert Image.open(out).size == (16, 16)
    flat = json.loads(dump.read_text(encoding="utf-8"))
    assert set(flat) >= {"hue_angle", "dim2", "x_scale"}


def test_cli_cosine_with_overrides(tmp_path):
    out = tmp_path / "wave.png"
    rc = render_main(["--model", "cosine_1d", "--set", "red_a=0.25", "--set", "red_b=0.75",
                      "--out", str(out)])
    assert rc == 0
    assert Image.open(out).size == (720, 300)


def test_cli_rejects_bad_parameter(tmp_path):
    rc = render_main(["--model", "cosine_2d", "--set", "red_freq_x=9", "--out", str(tmp_path / "x.png")])
    assert rc == 2
    assert not (tmp_path / "x.png").exists()


def test_cli_list():
    assert render_main(["--list"]) == 0


def test_cli_requires_out():
    assert render_main(["--model", "cosine_1d"]) == 2
