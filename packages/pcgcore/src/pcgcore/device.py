from __future__ import annotations
import os
import torch

from .errors import MissingCudaError

def get_device(name: str | None = None) -> torch.device:
    """Resolve ``"cpu"``, ``"cuda"`` or ``"auto"`` to a torch device.

    ``None`` falls back to ``$PCG_DEVICE`` and then to ``"cpu"``.
    """
    if name is None:
        name = os.getenv("PCG_DEVICE", "cpu")
    name = name.lower()
    if name == "cpu":
        return torch.device("cpu")
    if name == "auto":
        return torch.device("cuda" if torch.cuda.is_available() else "cpu")
    if name == "cuda":
        if not torch.cuda.is_available():
            raise MissingCudaError("Missing: CUDA GPU")
        return torch.device("cuda")
    raise ValueError(f"Unknown device {name!r} (expected cpu, cuda or auto)")
