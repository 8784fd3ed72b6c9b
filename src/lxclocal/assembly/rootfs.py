"""Root filesystem extraction."""

import logging
from pathlib import Path

from lxclocal.assembly.archive import check_archive, extract_archive
from lxclocal.assembly.base import BaseStep
from lxclocal.models.context import PipelineContext
from lxclocal.utils.templates import TEXT_ENCODING, TEXT_ERRORS


logger = logging.getLogger(__name__)

PTS_DIR = Path("dev/pts")
TTY_CONF = Path("etc/init/tty.conf")


class RootfsUnpacker(BaseStep):
    """Unpack the fstree tarball into the container rootfs."""

    name = "rootfs"

    def run(self, context: PipelineContext) -> None:
        """Extract with anchored excludes and numeric ownership, then fix up."""
        fstree = check_archive(context.request.fstree, "fstree")
        rootfs = context.request.rootfs

        rootfs.mkdir(parents=True, exist_ok=True)

        options = [
            "--anchored",
            *context.excludes.as_tar_args(),
            "--numeric-owner",
            "-p",
        ]
        logger.info(f"Unpacking rootfs {fstree} into {rootfs}")
        extract_archive(fstree, rootfs, options)

        self.fixup(rootfs)

    def fixup(self, rootfs: Path) -> None:
        """Post-extraction adjustments every rootfs gets."""
        # Mount target for devpts, even when /dev was excluded
        (rootfs / PTS_DIR).mkdir(parents=True, exist_ok=True)

        # vhangup(2) fails inside user namespaces
        tty_conf = rootfs / TTY_CONF
        if tty_conf.is_file():
            lines = tty_conf.read_text(encoding=TEXT_ENCODING, errors=TEXT_ERRORS).splitlines(keepends=True)
            patched = [
                line if "--nohangup" in line
                else line.replace("mingetty", "mingetty --nohangup", 1)
                for line in lines
            ]
            if patched != lines:
                tty_conf.write_text("".join(patched), encoding=TEXT_ENCODING, errors=TEXT_ERRORS)
                logger.debug(f"Patched mingetty in {tty_conf}")
