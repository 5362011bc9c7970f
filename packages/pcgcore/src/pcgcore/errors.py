from __future__ import annotations


class PCGError(Exception):
    """Base class of every error raised by the pcg packages."""


class InvalidParamsError(PCGError, ValueError):
    pass


class UnknownGeneratorError(PCGError, KeyError):
    pass


class MissingCudaError(PCGError, RuntimeError):
    pass
