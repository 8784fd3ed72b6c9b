"""Hand container files over to the mapped ids."""

import logging
import os
from pathlib import Path

from lxclocal.assembly.base import BaseStep
from lxclocal.models.context import PipelineContext


logger = logging.getLogger(__name__)


class OwnershipStep(BaseStep):
    """Chown config and fstab to the mapped uid/gid, when given."""

    name = "ownership"

    def run(self, context: PipelineContext) -> None:
        request = context.request
        uid = request.mapped_uid if request.has_uid_map else -1
        gid = request.mapped_gid if request.has_gid_map else -1
        if uid == -1 and gid == -1:
            return

        for path in (request.config_path, request.fstab_path):
            if path.exists():
                self._chown(path, uid, gid)

    def _chown(self, path: Path, uid: int, gid: int) -> None:
        try:
            os.chown(path, uid, gid)
            logger.debug(f"Changed ownership of {path} to {uid}:{gid}")
        except OSError as e:
            logger.warning(f"Could not change ownership of {path}: {e}")
