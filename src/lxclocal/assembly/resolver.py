"""Metadata file variant resolution."""

from pathlib import Path
from typing import List, Union

from lxclocal.models.context import ExecutionMode


class FileResolver:
    """Find the most specific variant of a file shipped in the metadata.

    A metadata tarball may carry ``config``, ``config-user``,
    ``config.5`` and ``config-user.5`` side by side; the first one that
    exists in this order wins::

        {name}-{mode}.{compat}
        {name}.{compat}
        {name}-{mode}
        {name}
    """

    def __init__(self, base: Union[str, Path], mode: ExecutionMode, compat_level: int):
        self.base = Path(base)
        self.mode = mode
        self.compat_level = compat_level

    def candidates(self, name: str) -> List[Path]:
        mode = self.mode.value
        compat = self.compat_level
        return [
            self.base / f"{name}-{mode}.{compat}",
            self.base / f"{name}.{compat}",
            self.base / f"{name}-{mode}",
            self.base / name,
        ]

    def resolve(self, name: str) -> Path:
        """Return the best existing candidate, or the plain path if none exists."""
        for candidate in self.candidates(name):
            if candidate.exists():
                return candidate
        return self.base / name
