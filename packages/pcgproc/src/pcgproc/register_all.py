from .registry import register
from .cosine_1d import GEN as COSINE_1D
from .cosine_2d import GEN as COSINE_2D
from .noise_field import GEN as NOISE_FIELD

def register_all() -> list[str]:
    gens = (COSINE_1D, COSINE_2D, NOISE_FIELD)
    for g in gens:
        register(g)
    return [g.info.name for g in gens]
