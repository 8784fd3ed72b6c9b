"""
lxc-local - Build LXC containers from local image tarballs.

Assembles a container configuration and root filesystem from a metadata
tarball and an fstree tarball, on the host or inside a user namespace.
"""

__version__ = "1.0.0"

# Re-export key components for easier access
from lxclocal.models.config import LxcLocalConfig
from lxclocal.models.request import CreateRequest
from lxclocal.assembly.pipeline import ImageAssembler, AssemblyResult

__all__ = [
    "LxcLocalConfig",
    "CreateRequest",
    "ImageAssembler",
    "AssemblyResult",
]
