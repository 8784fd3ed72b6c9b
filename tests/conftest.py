"""Shared fixtures."""

import tarfile
from pathlib import Path

import pytest

from lxclocal.assembly.excludes import ExcludeListBuilder
from lxclocal.models.config import LxcLocalConfig
from lxclocal.models.context import ExecutionMode, PipelineContext
from lxclocal.models.request import CreateRequest
from lxclocal.utils.templates import TemplateFileRegistry


def populate_tree(root: Path, files: dict) -> None:
    """Create files (str content) and directories (None) under root."""
    root.mkdir(parents=True, exist_ok=True)
    for relative, content in files.items():
        target = root / relative
        if content is None:
            target.mkdir(parents=True, exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)


@pytest.fixture
def make_tarball(tmp_path):
    """Build an xz-compressed tarball whose members start with ./"""
    def _make(name: str, files: dict) -> Path:
        source = tmp_path / f"{name}-src"
        populate_tree(source, files)

        archive = tmp_path / f"{name}.tar.xz"
        with tarfile.open(archive, "w:xz") as tar:
            tar.add(source, arcname=".")
        return archive

    return _make


@pytest.fixture
def container_dir(tmp_path):
    """Container path as lxc-create would hand it over."""
    path = tmp_path / "containers" / "c1"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def workdir(tmp_path):
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def make_context(container_dir, workdir):
    """Build a PipelineContext around a request."""
    def _make(mode: ExecutionMode = ExecutionMode.SYSTEM, **request_fields) -> PipelineContext:
        fields = {"name": "c1", "path": container_dir}
        fields.update(request_fields)
        request = CreateRequest(**fields)
        return PipelineContext(
            request=request,
            config=LxcLocalConfig(),
            mode=mode,
            workdir=workdir,
            excludes=ExcludeListBuilder(),
            templates=TemplateFileRegistry(request.config_path),
        )

    return _make
