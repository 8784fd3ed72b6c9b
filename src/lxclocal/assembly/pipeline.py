"""Assembly pipeline orchestration."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from lxclocal.assembly.archive import check_archive
from lxclocal.assembly.base import BaseStep
from lxclocal.assembly.excludes import ExcludeListBuilder
from lxclocal.assembly.message import read_create_message
from lxclocal.assembly.metadata import MetadataUnpacker, TemplateDiscovery
from lxclocal.assembly.namespace import NamespaceContextDetector, resolve_mode
from lxclocal.assembly.ownership import OwnershipStep
from lxclocal.assembly.rootfs import RootfsUnpacker
from lxclocal.assembly.substitute import TemplateSubstitutor
from lxclocal.assembly.workdir import working_directory
from lxclocal.models.config import LxcLocalConfig
from lxclocal.models.context import ExecutionMode, PipelineContext
from lxclocal.models.request import CreateRequest
from lxclocal.utils.templates import TemplateFileRegistry


logger = logging.getLogger(__name__)


@dataclass
class AssemblyResult:
    """Outcome of a successful run."""
    mode: ExecutionMode
    excludes: Tuple[str, ...] = ()
    template_files: List[Path] = field(default_factory=list)
    create_message: Optional[str] = None


class ImageAssembler:
    """Build one container from its metadata and fstree tarballs."""

    def __init__(
        self,
        request: CreateRequest,
        config: Optional[LxcLocalConfig] = None,
        detector: Optional[NamespaceContextDetector] = None,
    ):
        """Initialize the assembler for a single run."""
        self.request = request
        self.config = config or LxcLocalConfig()
        self.detector = detector or NamespaceContextDetector(self.config.paths.proc_dir)
        self.steps: List[BaseStep] = [
            MetadataUnpacker(),
            RootfsUnpacker(),
            TemplateDiscovery(),
            TemplateSubstitutor(),
            OwnershipStep(),
        ]

    def run(self) -> AssemblyResult:
        """Run every step in order. Any LxcLocalError aborts the run."""
        namespace = self.detector.detect()
        mode = resolve_mode(namespace, self.request)
        logger.info(f"Assembling container {self.request.name} in {mode.value} mode")

        # Fail before touching the container directory
        check_archive(self.request.fstree, "fstree")

        with working_directory(self.request.path) as workdir:
            context = self._create_context(mode, workdir)

            for step in self.steps:
                logger.debug(f"Running step: {step.name}")
                step.run(context)

            message = read_create_message(context.resolver)

        logger.info(f"Container {self.request.name} assembled")
        return AssemblyResult(
            mode=mode,
            excludes=context.excludes.patterns,
            template_files=context.templates.paths,
            create_message=message,
        )

    def _create_context(self, mode: ExecutionMode, workdir: Path) -> PipelineContext:
        excludes = ExcludeListBuilder()
        if self.request.no_dev:
            excludes.exclude_devices()

        return PipelineContext(
            request=self.request,
            config=self.config,
            mode=mode,
            workdir=workdir,
            excludes=excludes,
            templates=TemplateFileRegistry(self.request.config_path),
        )
