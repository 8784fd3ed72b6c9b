"""Container assembly steps for lxc-local."""

from lxclocal.assembly.base import BaseStep
from lxclocal.assembly.pipeline import ImageAssembler, AssemblyResult

__all__ = [
    "BaseStep",
    "ImageAssembler",
    "AssemblyResult",
]
