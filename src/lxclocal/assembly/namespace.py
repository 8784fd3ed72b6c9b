"""User namespace detection."""

import logging
from pathlib import Path
from typing import List, NamedTuple, Optional, Union

from lxclocal.errors import FatalInputError
from lxclocal.models.context import ExecutionMode, NamespaceContext
from lxclocal.models.request import CreateRequest


logger = logging.getLogger(__name__)

# Length of the identity mapping the initial namespace carries
FULL_RANGE = 4294967295


class IdMapRecord(NamedTuple):
    """One line of a uid_map table."""
    inner: int
    outer: int
    length: int


def parse_id_map(text: str) -> List[IdMapRecord]:
    """Parse a uid_map table, skipping lines that are not three integers."""
    records = []
    for line in text.splitlines():
        fields = line.split()
        if len(fields) != 3:
            continue
        try:
            records.append(IdMapRecord(*(int(field) for field in fields)))
        except ValueError:
            logger.debug(f"Ignoring malformed id map line: {line!r}")
    return records


class NamespaceContextDetector:
    """Classify the process as host, namespace root or namespace user."""

    def __init__(self, proc_dir: Union[str, Path] = "/proc"):
        self.proc_dir = Path(proc_dir)

    @property
    def self_map(self) -> Path:
        return self.proc_dir / "self" / "uid_map"

    @property
    def init_map(self) -> Path:
        return self.proc_dir / "1" / "uid_map"

    def _read(self, path: Path) -> Optional[bytes]:
        try:
            return path.read_bytes()
        except OSError as e:
            logger.debug(f"Cannot read {path}: {e}")
            return None

    def detect(self) -> NamespaceContext:
        """Inspect our own uid_map and classify the execution context."""
        if not self.self_map.exists():
            logger.debug("No uid_map facility, assuming host")
            return NamespaceContext.HOST

        own = self._read(self.self_map)
        if own is None:
            logger.warning(f"Unable to read {self.self_map}, assuming host")
            return NamespaceContext.HOST

        records = parse_id_map(own.decode(errors="replace"))
        if any(r == (0, 0, FULL_RANGE) for r in records):
            return NamespaceContext.HOST

        if any(r.inner == 0 and r.length == 1 for r in records):
            return NamespaceContext.USERNS_ROOT

        # Same table as init means we share its namespace
        init = self._read(self.init_map)
        if init is not None and init == own:
            return NamespaceContext.USERNS_ROOT

        return NamespaceContext.USERNS_USER


def resolve_mode(context: NamespaceContext, request: CreateRequest) -> ExecutionMode:
    """Pick the execution mode, enforcing the id map requirement."""
    if context == NamespaceContext.USERNS_USER:
        if not request.has_uid_map or not request.has_gid_map:
            raise FatalInputError("In a user namespace without a map")

    mode = ExecutionMode.for_context(context)
    logger.debug(f"Namespace context {context.value}, mode {mode.value}")
    return mode
