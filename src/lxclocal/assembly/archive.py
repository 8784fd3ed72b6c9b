"""tar invocation for image archives."""

import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence

from lxclocal.errors import ExtractionError, FatalInputError
from lxclocal.utils.commands import run_command


logger = logging.getLogger(__name__)

# Both tarballs are xz compressed
COMPRESSION_FLAG = "--xz"


def check_archive(archive: Optional[Path], label: str) -> Path:
    """Make sure an archive path was given and can be read."""
    if archive is None:
        raise FatalInputError(f"No {label} tarball given")

    archive = Path(archive)
    if not archive.is_file() or not os.access(archive, os.R_OK):
        raise FatalInputError(f"Invalid {label} tarball: {archive}")
    return archive


def build_tar_command(
    archive: Path,
    destination: Path,
    options: Sequence[str] = (),
) -> List[str]:
    # Option order matters: --anchored must come before the --exclude it governs
    return [
        "tar",
        *options,
        COMPRESSION_FLAG,
        "-xf", str(archive),
        "-C", str(destination),
    ]


def extract_archive(
    archive: Path,
    destination: Path,
    options: Sequence[str] = (),
) -> None:
    """Unpack an archive into destination, raising ExtractionError on failure."""
    cmd = build_tar_command(archive, destination, options)
    logger.debug(f"Extracting {archive} into {destination}")

    result = run_command(cmd, check=False)
    if result.returncode != 0:
        logger.error(f"tar failed on {archive}: {result.stderr.strip()}")
        raise ExtractionError(archive, result.returncode, result.stderr)
