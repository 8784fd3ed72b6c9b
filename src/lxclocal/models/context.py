"""Execution context and per-run pipeline state."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from lxclocal.models.config import LxcLocalConfig
from lxclocal.models.request import CreateRequest

if TYPE_CHECKING:
    from lxclocal.assembly.excludes import ExcludeListBuilder
    from lxclocal.assembly.resolver import FileResolver
    from lxclocal.utils.templates import TemplateFileRegistry


class NamespaceContext(Enum):
    """Where the process runs relative to user namespaces."""
    HOST = "host"
    USERNS_ROOT = "userns-root"
    USERNS_USER = "userns-user"


class ExecutionMode(Enum):
    """Selects file variants shipped in the metadata tarball."""
    SYSTEM = "system"
    USER = "user"

    @classmethod
    def for_context(cls, context: NamespaceContext) -> "ExecutionMode":
        if context == NamespaceContext.HOST:
            return cls.SYSTEM
        return cls.USER


@dataclass
class PipelineContext:
    """State threaded through every assembly step of one run."""
    request: CreateRequest
    config: LxcLocalConfig
    mode: ExecutionMode
    workdir: Path
    excludes: "ExcludeListBuilder"
    templates: "TemplateFileRegistry"
    template_list: Optional[Path] = None

    @property
    def compat_level(self) -> int:
        return self.config.compat_level

    @property
    def resolver(self) -> "FileResolver":
        """Resolver over the extracted metadata for the current mode."""
        from lxclocal.assembly.resolver import FileResolver
        return FileResolver(self.workdir, self.mode, self.compat_level)
