"""Creation message shipped in the metadata tarball."""

import logging
from typing import Optional

from lxclocal.assembly.resolver import FileResolver


logger = logging.getLogger(__name__)


def read_create_message(resolver: FileResolver) -> Optional[str]:
    """Return the create-message text for the current mode, if any."""
    message_file = resolver.resolve("create-message")
    if not message_file.is_file():
        logger.debug("No creation message")
        return None
    return message_file.read_text(encoding="utf-8", errors="replace")
