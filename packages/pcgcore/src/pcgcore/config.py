from __future__ import annotations
import os
from dataclasses import dataclass

__all__ = ["RenderConfig", "DEFAULT_CONFIG"]


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """
    Render configuration shared by the generators and the workflow CLI.

    Fields
    ------
    preview_size : int, default=360
        Side (square) of the interactive noise-field preview.
    export_size : int, default=1080
        Side (square) of the noise-field image written to disk.
    cosine_1d_size : tuple[int, int], default=(720, 300)
        (width, height) canvas of the 1D cosine palette.
    cosine_2d_size : tuple[int, int], default=(720, 720)
        (width, height) canvas of the 2D cosine field.
    channel_seeds : tuple[int, int, int], default=(0, 1, 2)
        Fixed seeds of the X, Y and Z noise fields. Must be pairwise distinct
        so the three fields are decorrelated.
    scale_eps : float, default=1e-6
        Noise scales below this value are replaced by it (a constant field).
    device : str, default="cpu"
        "cpu", "cuda" or "auto", resolved by `pcgcore.device.get_device`.

    Notes
    -----
    The dataclass is frozen; validation raises `ValueError`.
    """

    preview_size: int = 360
    export_size: int = 1080
    cosine_1d_size: tuple[int, int] = (720, 300)
    cosine_2d_size: tuple[int, int] = (720, 720)
    channel_seeds: tuple[int, int, int] = (0, 1, 2)
    scale_eps: float = 1e-6
    device: str = "cpu"

    def __post_init__(self) -> None:
        if self.preview_size <= 0 or self.export_size <= 0:
            raise ValueError("RenderConfig preview_size/export_size must be > 0")
        for name in ("cosine_1d_size", "cosine_2d_size"):
            w, h = getattr(self, name)
            if w <= 0 or h <= 0:
                raise ValueError(f"RenderConfig.{name} must be positive, got {(w, h)}")
        if len(self.channel_seeds) != 3 or len(set(self.channel_seeds)) != 3:
            raise ValueError("RenderConfig.channel_seeds must hold 3 distinct seeds")
        if not self.scale_eps > 0.0:
            raise ValueError("RenderConfig.scale_eps must be > 0")
        if self.device not in ("cpu", "cuda", "auto"):
            raise ValueError(f"RenderConfig.device must be cpu, cuda or auto, got {self.device!r}")

    @classmethod
    def from_env(cls) -> "RenderConfig":
        """Defaults overridden by PCG_PREVIEW_SIZE, PCG_EXPORT_SIZE and PCG_DEVICE."""
        return cls(
            preview_size=int(os.getenv("PCG_PREVIEW_SIZE", "360")),
            export_size=int(os.getenv("PCG_EXPORT_SIZE", "1080")),
            device=os.getenv("PCG_DEVICE", "cpu"),
        )


DEFAULT_CONFIG = RenderConfig()
