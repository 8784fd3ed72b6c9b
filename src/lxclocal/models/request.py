"""Container creation request model."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


# Value LXC passes when no id mapping applies
NO_MAPPING = -1


class CreateRequest(BaseModel):
    """Parsed template invocation."""
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Container name")
    path: Path = Field(..., description="Container directory")
    rootfs: Optional[Path] = Field(None, description="Container root filesystem")
    metadata: Optional[Path] = Field(None, description="Metadata tarball")
    fstree: Optional[Path] = Field(None, description="Root filesystem tarball")
    no_dev: bool = Field(default=False, description="Skip device nodes")
    mapped_uid: Optional[int] = None
    mapped_gid: Optional[int] = None

    @model_validator(mode="after")
    def default_rootfs(self):
        """Default the rootfs to <path>/rootfs."""
        if self.rootfs is None:
            self.rootfs = self.path / "rootfs"
        return self

    @property
    def config_path(self) -> Path:
        return self.path / "config"

    @property
    def fstab_path(self) -> Path:
        return self.path / "fstab"

    @property
    def has_uid_map(self) -> bool:
        return self.mapped_uid is not None and self.mapped_uid != NO_MAPPING

    @property
    def has_gid_map(self) -> bool:
        return self.mapped_gid is not None and self.mapped_gid != NO_MAPPING
