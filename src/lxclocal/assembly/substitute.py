"""Placeholder substitution over registered template files."""

import logging
from typing import Dict

from lxclocal.assembly.base import BaseStep
from lxclocal.models.context import PipelineContext
from lxclocal.utils.templates import substitute_file


logger = logging.getLogger(__name__)


def token_values(context: PipelineContext) -> Dict[str, str]:
    """Runtime values for every placeholder token."""
    request = context.request
    paths = context.config.paths
    return {
        "LXC_NAME": request.name,
        "LXC_PATH": str(request.path),
        "LXC_ROOTFS": str(request.rootfs),
        "LXC_TEMPLATE_CONFIG": paths.template_config,
        "LXC_HOOK_DIR": paths.hook_dir,
    }


class TemplateSubstitutor(BaseStep):
    """Replace placeholder tokens in every registered template file."""

    name = "substitute"

    def run(self, context: PipelineContext) -> None:
        values = token_values(context)

        for path in context.templates:
            if not path.is_file():
                logger.debug(f"Template file {path} is gone, skipping")
                continue

            if substitute_file(path, values):
                logger.debug(f"Substituted placeholders in {path}")
