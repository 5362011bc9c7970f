import dataclasses
import pytest
from pcgcore.errors import UnknownGeneratorError
from pcgproc.register_all import register_all
from pcgproc.registry import list_generators, get, get_by_kind

def test_registry_roundtrip():
    names = register_all()
    assert names == ["COSINE_1D", "COSINE_2D", "NOISE_FIELD"]
    infos = list_generators()
    all_names = [i.name for i in infos]
    assert len(set(all_names)) == len(all_names)
    assert set(names) <= set(all_names)
    g = get("NOISE_FIELD")
    assert g.info.name == "NOISE_FIELD"
    assert get_by_kind("cosine_2d").info.name == "COSINE_2D"

def test_default_sizes():
    assert {f.name for f in dataclasses.fields(get("COSINE_1D").info)} == {"name", "kind", "param_specs", "default_size"}
    assert get("COSINE_1D").info.default_size == (720, 300)
    assert get("COSINE_2D").info.default_size == (720, 720)
    assert get("NOISE_FIELD").info.default_size is None

def test_unknown_generator():
    with pytest.raises(UnknownGeneratorError):
        get("PLASMA")
    with pytest.raises(KeyError):
        get_by_kind("plasma")

def test_render_via_registry_checks_size():
    g = get("COSINE_2D")
    with pytest.raises(ValueError):
        g.render(g.default_params(), 0, 10)
