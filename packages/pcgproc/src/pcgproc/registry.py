from __future__ import annotations
from .api import Generator, GeneratorInfo
from pcgcore.errors import UnknownGeneratorError

_REG: dict[str, Generator] = {}

def register(gen: Generator) -> None:
    _REG[gen.info.name] = gen

def get(name: str) -> Generator:
    try:
        return _REG[name]
    except KeyError as exc:
        raise UnknownGeneratorError(f"Unknown generator: {name}") from exc

def get_by_kind(kind: str) -> Generator:
    for g in _REG.values():
        if g.info.kind == kind:
            return g
    raise UnknownGeneratorError(f"No generator registered for kind: {kind}")

def list_generators() -> list[GeneratorInfo]:
    return [g.info for g in _REG.values()]
