"""Metadata tarball handling."""

import logging
import shutil
from pathlib import Path
from typing import Optional

from lxclocal.assembly.archive import check_archive, extract_archive
from lxclocal.assembly.base import BaseStep
from lxclocal.assembly.config_merger import ConfigMerger, append_config_line
from lxclocal.assembly.resolver import FileResolver
from lxclocal.models.context import PipelineContext
from lxclocal.utils.templates import TEXT_ENCODING, TEXT_ERRORS


logger = logging.getLogger(__name__)


class MetadataUnpacker(BaseStep):
    """Unpack the metadata tarball and apply what it ships."""

    name = "metadata"

    def run(self, context: PipelineContext) -> None:
        """Extract metadata, then handle excludes, config, fstab and templates."""
        metadata = context.request.metadata
        if metadata is None:
            logger.warning("No metadata tarball given, container config left as is")
            return

        metadata = check_archive(metadata, "metadata")
        logger.info(f"Unpacking metadata {metadata}")
        extract_archive(metadata, context.workdir)

        resolver = context.resolver
        self._load_excludes(context, resolver)
        self._merge_config(context, resolver)
        self._install_fstab(context, resolver)
        self._find_template_list(context, resolver)

    def _load_excludes(self, context: PipelineContext, resolver: FileResolver) -> None:
        excludes_file = resolver.resolve("excludes")
        if not excludes_file.is_file():
            logger.debug("Metadata ships no exclude list")
            return

        added = context.excludes.add_from_file(excludes_file)
        logger.debug(f"Loaded {added} exclude patterns from {excludes_file.name}")

    def _merge_config(self, context: PipelineContext, resolver: FileResolver) -> None:
        request = context.request
        merger = ConfigMerger(request.config_path, context.workdir)
        merger.run(resolver.resolve("config"))

        append_config_line(request.config_path, f"lxc.uts.name = {request.name}")

    def _install_fstab(self, context: PipelineContext, resolver: FileResolver) -> None:
        fstab = resolver.resolve("fstab")
        if not fstab.is_file():
            logger.debug("Metadata ships no fstab")
            return

        request = context.request
        shutil.copyfile(fstab, request.fstab_path)
        context.templates.add(request.fstab_path)
        append_config_line(request.config_path, f"lxc.mount.fstab = {request.fstab_path}")
        logger.debug(f"Installed fstab at {request.fstab_path}")

    def _find_template_list(self, context: PipelineContext, resolver: FileResolver) -> None:
        template_list = resolver.resolve("template")
        if template_list.is_file():
            context.template_list = template_list


class TemplateDiscovery(BaseStep):
    """Register rootfs files named in the metadata template list.

    Runs after the rootfs is unpacked; listed paths missing from it are
    ignored.
    """

    name = "templates"

    def run(self, context: PipelineContext) -> None:
        """Add each listed file that exists in the rootfs to the registry."""
        if context.template_list is None:
            logger.debug("No extra template files listed")
            return

        rootfs = context.request.rootfs
        content = context.template_list.read_text(encoding=TEXT_ENCODING, errors=TEXT_ERRORS)
        for line in content.splitlines():
            relative = line.strip()
            if not relative:
                continue

            candidate = self._inside_rootfs(rootfs, relative)
            if candidate is None:
                continue
            context.templates.add(candidate)

    def _inside_rootfs(self, rootfs: Path, relative: str) -> Optional[Path]:
        """Return the listed file if it is a regular file within the rootfs."""
        candidate = rootfs / relative.lstrip("/")
        if candidate.is_symlink():
            logger.warning(f"Listed template {relative} is a symlink, skipping")
            return None
        if not candidate.exists():
            logger.debug(f"Listed template {relative} not in rootfs, skipping")
            return None

        try:
            candidate.resolve().relative_to(rootfs.resolve())
        except ValueError:
            logger.warning(f"Listed template {relative} escapes the rootfs, skipping")
            return None
        return candidate
