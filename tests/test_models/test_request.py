"""Tests for the creation request model."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from lxclocal.models.context import ExecutionMode, NamespaceContext
from lxclocal.models.request import CreateRequest


class TestCreateRequest:
    """Test CreateRequest model."""

    def test_minimal_request(self):
        """Test defaults derived from the container path."""
        request = CreateRequest(name="web", path="/var/lib/lxc/web")

        assert request.rootfs == Path("/var/lib/lxc/web/rootfs")
        assert request.config_path == Path("/var/lib/lxc/web/config")
        assert request.fstab_path == Path("/var/lib/lxc/web/fstab")
        assert request.metadata is None
        assert request.fstree is None
        assert request.no_dev is False

    def test_explicit_rootfs(self):
        request = CreateRequest(name="web", path="/var/lib/lxc/web", rootfs="/srv/web")
        assert request.rootfs == Path("/srv/web")

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            CreateRequest(name="", path="/var/lib/lxc/x")

        assert "name" in str(exc_info.value)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            CreateRequest(name="web", path="/x", flavour="large")

    @pytest.mark.parametrize("uid,expected", [(None, False), (-1, False), (0, True), (100000, True)])
    def test_uid_map_sentinel(self, uid, expected):
        """Test that -1 means no mapping."""
        request = CreateRequest(name="web", path="/x", mapped_uid=uid, mapped_gid=uid)

        assert request.has_uid_map is expected
        assert request.has_gid_map is expected


class TestExecutionMode:
    def test_for_context(self):
        assert ExecutionMode.for_context(NamespaceContext.HOST) == ExecutionMode.SYSTEM
        assert ExecutionMode.for_context(NamespaceContext.USERNS_ROOT) == ExecutionMode.USER
        assert ExecutionMode.for_context(NamespaceContext.USERNS_USER) == ExecutionMode.USER
