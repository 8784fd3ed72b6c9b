"""Archive exclusion patterns."""

import logging
from pathlib import Path
from typing import List, Tuple, Union

from lxclocal.utils.templates import TEXT_ENCODING, TEXT_ERRORS


logger = logging.getLogger(__name__)

DEVICE_PATTERN = "./dev/*"


class ExcludeListBuilder:
    """Accumulate glob patterns handed to tar as ``--exclude`` options."""

    def __init__(self):
        self._patterns: List[str] = []

    def add(self, pattern: str) -> None:
        self._patterns.append(pattern)
        logger.debug(f"Excluding {pattern}")

    def exclude_devices(self) -> None:
        """Skip everything under the archive's top-level dev directory."""
        self.add(DEVICE_PATTERN)

    def add_from_file(self, path: Union[str, Path]) -> int:
        """Append each non-blank line verbatim. Returns the number added."""
        added = 0
        content = Path(path).read_text(encoding=TEXT_ENCODING, errors=TEXT_ERRORS)
        for line in content.splitlines():
            if not line.strip():
                continue
            self.add(line)
            added += 1
        return added

    @property
    def patterns(self) -> Tuple[str, ...]:
        return tuple(self._patterns)

    def as_tar_args(self) -> List[str]:
        return [f"--exclude={pattern}" for pattern in self._patterns]

    def __len__(self) -> int:
        return len(self._patterns)
