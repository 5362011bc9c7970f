import pytest
import torch
from pcgcore.config import RenderConfig, DEFAULT_CONFIG
from pcgcore.device import get_device
from pcgcore.errors import MissingCudaError

def test_defaults():
    assert DEFAULT_CONFIG.preview_size == 360
    assert DEFAULT_CONFIG.export_size == 1080
    assert DEFAULT_CONFIG.cosine_1d_size == (720, 300)
    assert DEFAULT_CONFIG.cosine_2d_size == (720, 720)
    assert DEFAULT_CONFIG.channel_seeds == (0, 1, 2)

@pytest.mark.parametrize("kw", [
    {"preview_size": 0},
    {"export_size": -1},
    {"cosine_1d_size": (0, 300)},
    {"channel_seeds": (0, 0, 1)},
    {"scale_eps": 0.0},
    {"device": "tpu"},
])
def test_validation(kw):
    with pytest.raises(ValueError):
        RenderConfig(**kw)

def test_from_env(monkeypatch):
    monkeypatch.setenv("PCG_PREVIEW_SIZE", "64")
    monkeypatch.setenv("PCG_EXPORT_SIZE", "128")
    cfg = RenderConfig.from_env()
    assert (cfg.preview_size, cfg.export_size) == (64, 128)

def test_get_device():
    assert get_device("cpu") == torch.device("cpu")
    assert get_device("auto").type in ("cpu", "cuda")
    with pytest.raises(ValueError):
        get_device("quantum")
    if not torch.cuda.is_available():
        with pytest.raises(MissingCudaError):
            get_device("cuda")
